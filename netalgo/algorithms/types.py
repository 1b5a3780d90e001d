"""Types and data structures for algorithm results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Set

from netalgo.types import Edge, VertexID, Weight


@dataclass(frozen=True)
class FlowSummary:
    """Summary of a max-flow computation.

    Attributes:
        total_flow: The maximum flow value achieved.
        edge_flow: Flow on each edge carrying positive flow, indexed by
            (source, destination).
        residual_cap: Residual capacity on each edge of the final residual
            network.
        reachable: Vertices reachable from the source in the residual network.
        min_cut: Edges of the flow network leaving ``reachable``, sorted.
    """

    total_flow: float
    edge_flow: Dict[Edge, Weight]
    residual_cap: Dict[Edge, Weight]
    reachable: Set[VertexID]
    min_cut: List[Edge]


@dataclass(frozen=True)
class DfsResult:
    """Bookkeeping produced by an undirected depth-first search.

    Attributes:
        pre: Discovery time of each visited vertex.
        post: Finish time of each visited vertex.
        low: Smallest discovery time reachable through the subtree and one
            back edge.
        tree: Tree edges as child -> parent.
        back: Back edges as descendant -> ancestor (last one seen per vertex).
    """

    pre: Dict[VertexID, int]
    post: Dict[VertexID, int]
    low: Dict[VertexID, int]
    tree: Dict[VertexID, VertexID]
    back: Dict[VertexID, VertexID]
