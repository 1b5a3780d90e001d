"""Strict undirected simple graph.

`Graph` extends `networkx.Graph` with the same explicit vertex management as
`DiGraph` and exposes the traversal-based structural queries implemented in
`netalgo.algorithms.traversal`.
"""

from __future__ import annotations

from pickle import dumps, loads
from typing import Any, Dict, Iterable, KeysView, List

import networkx as nx

from netalgo.exceptions import DuplicateVertexError, UnknownVertexError
from netalgo.graph.digraph import _edge_items, _vertex_items
from netalgo.types import VertexID


class Graph(nx.Graph):
    """
    An undirected graph without self-loops or parallel edges.

    Adding an edge requires two distinct existing vertices and is idempotent;
    removing an absent edge is a no-op. The networkx bulk methods go through
    ``add_node`` and ``add_edge``.
    """

    def copy(self, as_view: bool = False, pickle: bool = True) -> Graph:
        if not pickle:
            return super().copy(as_view=as_view)
        return loads(dumps(self))

    def add_node(self, node_for_adding: VertexID, **attr: Any) -> None:
        if node_for_adding in self._node:
            raise DuplicateVertexError(
                f"Vertex '{node_for_adding}' already exists in this graph."
            )
        super().add_node(node_for_adding, **attr)

    def add_nodes_from(self, nodes_for_adding: Iterable[Any], **attr: Any) -> None:
        for v, data in _vertex_items(nodes_for_adding, attr):
            self.add_node(v, **data)

    def add_vertex(self, v: VertexID) -> None:
        self.add_node(v)

    def is_vertex(self, v: VertexID) -> bool:
        return v in self._node

    def _check_vertex(self, v: VertexID) -> None:
        if v not in self._node:
            raise UnknownVertexError(f"Vertex '{v}' does not exist.")

    def add_edge(self, u_of_edge: VertexID, v_of_edge: VertexID, **attr: Any) -> None:
        """
        Add the edge {u_of_edge, v_of_edge}.

        Raises:
            UnknownVertexError: If either endpoint is missing.
            ValueError: If both endpoints are the same vertex.
        """
        self._check_vertex(u_of_edge)
        self._check_vertex(v_of_edge)
        if u_of_edge == v_of_edge:
            raise ValueError(f"Self-loop on '{u_of_edge}' is not allowed.")
        super().add_edge(u_of_edge, v_of_edge, **attr)

    def add_edges_from(self, ebunch_to_add: Iterable[Any], **attr: Any) -> None:
        for u, v, data in _edge_items(ebunch_to_add, attr):
            self.add_edge(u, v, **data)

    def remove_edge(self, u: VertexID, v: VertexID) -> None:
        self._check_vertex(u)
        self._check_vertex(v)
        if v in self._adj[u]:
            super().remove_edge(u, v)

    def n(self) -> int:
        return len(self._node)

    def m(self) -> int:
        return sum(len(nbrs) for nbrs in self._adj.values()) // 2

    def vertices(self) -> List[VertexID]:
        return list(self._node)

    def neighbors(self, n: VertexID) -> KeysView:
        self._check_vertex(n)
        return self._adj[n].keys()

    def deg(self, v: VertexID) -> int:
        self._check_vertex(v)
        return len(self._adj[v])

    def is_edge(self, u: VertexID, v: VertexID) -> bool:
        self._check_vertex(u)
        self._check_vertex(v)
        return v in self._adj[u]

    #
    # Structural queries
    #
    def bfs(self, source: VertexID) -> Dict[VertexID, VertexID]:
        """Breadth-first parent map from ``source`` (source maps to itself)."""
        from netalgo.algorithms.traversal import bfs

        return bfs(self, source)

    def dfs(self, source: VertexID, time: int = 1):
        """Depth-first search from ``source``; see ``traversal.dfs``."""
        from netalgo.algorithms.traversal import dfs

        return dfs(self, source, time=time)

    def num_components(self) -> int:
        from netalgo.algorithms.traversal import count_components

        return count_components(self)

    def is_connected(self) -> bool:
        return self.num_components() == 1

    def is_acyclic(self) -> bool:
        return self.n() == self.m() + self.num_components()

    def is_tree(self) -> bool:
        return self.is_connected() and self.is_acyclic()

    def is_bipartite(self) -> bool:
        from netalgo.algorithms.traversal import is_bipartite

        return is_bipartite(self)

    def is_complete(self) -> bool:
        nv = self.n()
        return 2 * self.m() == nv * (nv - 1)

    def is_eulerian(self) -> bool:
        if any(len(nbrs) % 2 for nbrs in self._adj.values()):
            return False
        return self.is_connected()

    def eulerian_cycle(self) -> List[VertexID]:
        """Closed walk using every edge once; the start vertex is repeated at the end."""
        from netalgo.algorithms.traversal import eulerian_cycle

        return eulerian_cycle(self)
