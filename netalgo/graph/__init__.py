"""Graph primitives.

This package provides the strict directed graph `DiGraph`, the weighted
`Network`, the capacitated `FlowNetwork` with its `Flow` results, and the
undirected `Graph`.
"""

from netalgo.graph.digraph import DiGraph
from netalgo.graph.flow_network import Flow, FlowNetwork
from netalgo.graph.network import Network
from netalgo.graph.undirected import Graph

__all__ = ["DiGraph", "Network", "FlowNetwork", "Flow", "Graph"]
