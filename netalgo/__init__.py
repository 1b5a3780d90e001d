"""netalgo: graph and network algorithms.

netalgo provides directed and undirected graph types built on NetworkX,
strongly connected components (Kosaraju, Tarjan), decrease-key priority
queues, Dijkstra and Bellman-Ford shortest paths with negative-cycle
extraction, Edmonds-Karp maximum flow over residual networks, and a
union-find structure.

Primary API:
    DiGraph, Network, FlowNetwork, Flow, Graph - graph types
    DaryHeap, PairingHeap - priority queues with decrease-key
    DisjointSet - union-find
    dijkstra(), bellman_ford(), negative_cycle_from() - shortest paths
    calc_max_flow() - maximum flow with optional min-cut summary

Example:
    from netalgo import FlowNetwork

    net = FlowNetwork("s", "t")
    net.add_vertex("a")
    net.add_edge("s", "a", 10)
    net.add_edge("a", "t", 5)
    net.add_edge("s", "t", 3)
    assert net.max_flow().value() == 8
"""

from __future__ import annotations

from netalgo import logging
from netalgo._version import __version__
from netalgo.algorithms.max_flow import augmenting_path, calc_max_flow
from netalgo.algorithms.scc import components_from_labels, scc_kosaraju, scc_tarjan
from netalgo.algorithms.shortest_paths import (
    bellman_ford,
    dijkstra,
    negative_cycle_from,
    path_to,
    predecessor_network,
)
from netalgo.algorithms.types import DfsResult, FlowSummary
from netalgo.config import ALGORITHM_CONFIG, AlgorithmConfig
from netalgo.disjoint_set import DisjointSet
from netalgo.graph import DiGraph, Flow, FlowNetwork, Graph, Network
from netalgo.heap import DaryHeap, PairingHeap, make_heap
from netalgo.types import HeapKind, WeightedEdge

__all__ = [
    # Version
    "__version__",
    # Graph types
    "DiGraph",
    "Network",
    "FlowNetwork",
    "Flow",
    "Graph",
    "WeightedEdge",
    # Data structures
    "DaryHeap",
    "PairingHeap",
    "make_heap",
    "HeapKind",
    "DisjointSet",
    # Algorithms
    "scc_kosaraju",
    "scc_tarjan",
    "components_from_labels",
    "dijkstra",
    "bellman_ford",
    "negative_cycle_from",
    "predecessor_network",
    "path_to",
    "augmenting_path",
    "calc_max_flow",
    # Results
    "FlowSummary",
    "DfsResult",
    # Configuration
    "AlgorithmConfig",
    "ALGORITHM_CONFIG",
    # Utilities
    "logging",
]
