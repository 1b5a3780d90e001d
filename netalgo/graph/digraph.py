"""Strict directed graph with strongly connected component analysis.

`DiGraph` extends `networkx.DiGraph` to enforce explicit vertex management:
edges never create vertices implicitly, duplicate vertices are rejected, and
queries that name a missing vertex raise `UnknownVertexError`.
"""

from __future__ import annotations

from pickle import dumps, loads
from typing import Any, Dict, Iterable, Iterator, KeysView, List, Optional, Tuple, Union

import networkx as nx
from networkx.classes.reportviews import InDegreeView, OutDegreeView

from netalgo.exceptions import (
    DuplicateEdgeError,
    DuplicateVertexError,
    UnknownVertexError,
)
from netalgo.types import VertexID

AttrDict = Dict[str, Any]


def _vertex_items(
    nodes_for_adding: Iterable[Any], attr: AttrDict
) -> Iterator[Tuple[VertexID, AttrDict]]:
    """Yield ``(vertex, attributes)`` from bare vertices or ``(vertex, dict)`` pairs."""
    for n in nodes_for_adding:
        try:
            hash(n)
        except TypeError:
            n, ndict = n
            yield n, {**attr, **ndict}
        else:
            yield n, attr


def _edge_items(
    ebunch_to_add: Iterable[Any], attr: AttrDict
) -> Iterator[Tuple[VertexID, VertexID, AttrDict]]:
    """Yield ``(u, v, attributes)`` from ``(u, v)`` or ``(u, v, dict)`` tuples."""
    for e in ebunch_to_add:
        if len(e) == 3:
            u, v, dd = e
            yield u, v, {**attr, **dd}
        elif len(e) == 2:
            u, v = e
            yield u, v, attr
        else:
            raise ValueError(f"Edge tuple {e} must be a 2-tuple or 3-tuple.")


class DiGraph(nx.DiGraph):
    """
    A directed graph without parallel edges and with strict rules.

    This class enforces:
      - No automatic creation of missing vertices when adding an edge.
      - No duplicate vertices (raises DuplicateVertexError).
      - ``add_edge`` is idempotent unless ``strict=True`` is requested.
      - ``remove_edge`` of an absent edge is a no-op.
      - ``copy()`` performs a pickle-based deep copy that preserves the
        subclass and its extra state.

    Self-loops are permitted. The networkx bulk methods (``add_nodes_from``,
    ``add_edges_from``, ``add_weighted_edges_from``, ``update``) go through
    ``add_node`` and ``add_edge`` and obey the same rules.
    """

    def copy(self, as_view: bool = False, pickle: bool = True) -> DiGraph:
        """
        Create a copy of this graph.

        Args:
            as_view: If True, return a view instead of a full copy; only used
                if pickle=False.
            pickle: If True (default), perform a pickle-based deep copy.

        Returns:
            A new instance (or view) of the graph.
        """
        if not pickle:
            return super().copy(as_view=as_view)
        return loads(dumps(self))

    #
    # Vertex management
    #
    def add_node(self, node_for_adding: VertexID, **attr: Any) -> None:
        """
        Add a single vertex, disallowing duplicates.

        Raises:
            DuplicateVertexError: If the vertex already exists.
        """
        if node_for_adding in self._node:
            raise DuplicateVertexError(
                f"Vertex '{node_for_adding}' already exists in this graph."
            )
        super().add_node(node_for_adding, **attr)

    def add_nodes_from(self, nodes_for_adding: Iterable[Any], **attr: Any) -> None:
        """
        Add vertices one by one; accepts bare vertices or ``(vertex, dict)``.

        Raises:
            DuplicateVertexError: On the first vertex that already exists.
        """
        for v, data in _vertex_items(nodes_for_adding, attr):
            self.add_node(v, **data)

    def add_vertex(self, v: VertexID) -> None:
        self.add_node(v)

    def is_vertex(self, v: VertexID) -> bool:
        return v in self._node

    def _check_vertex(self, v: VertexID) -> None:
        if v not in self._node:
            raise UnknownVertexError(f"Vertex '{v}' does not exist.")

    #
    # Edge management
    #
    def add_edge(
        self, u_of_edge: VertexID, v_of_edge: VertexID, strict: bool = False, **attr: Any
    ) -> None:
        """
        Add the directed edge (u_of_edge, v_of_edge).

        Both endpoints must already exist. Adding an edge that is already
        present only updates its attributes.

        Args:
            u_of_edge: Source vertex.
            v_of_edge: Destination vertex.
            strict: If True, an already present edge is an error.
            **attr: Edge attributes.

        Raises:
            UnknownVertexError: If either endpoint is missing.
            DuplicateEdgeError: If ``strict`` and the edge already exists.
        """
        if u_of_edge not in self._node:
            raise UnknownVertexError(f"Source vertex '{u_of_edge}' does not exist.")
        if v_of_edge not in self._node:
            raise UnknownVertexError(
                f"Destination vertex '{v_of_edge}' does not exist."
            )
        if strict and v_of_edge in self._succ[u_of_edge]:
            raise DuplicateEdgeError(
                f"Edge ('{u_of_edge}', '{v_of_edge}') already exists."
            )
        super().add_edge(u_of_edge, v_of_edge, **attr)

    def add_edges_from(self, ebunch_to_add: Iterable[Any], **attr: Any) -> None:
        """
        Add ``(u, v)`` or ``(u, v, dict)`` edges one by one through ``add_edge``.

        Raises:
            UnknownVertexError: On the first edge with a missing endpoint.
        """
        for u, v, data in _edge_items(ebunch_to_add, attr):
            self.add_edge(u, v, **data)

    def remove_edge(self, u: VertexID, v: VertexID) -> None:
        """
        Remove the edge (u, v) if present.

        Raises:
            UnknownVertexError: If either endpoint is missing.
        """
        self._check_vertex(u)
        self._check_vertex(v)
        if v in self._succ[u]:
            super().remove_edge(u, v)

    #
    # Queries
    #
    def n(self) -> int:
        """Number of vertices."""
        return len(self._node)

    def m(self) -> int:
        """Number of edges."""
        return sum(len(nbrs) for nbrs in self._succ.values())

    def vertices(self) -> List[VertexID]:
        """All vertices in insertion order."""
        return list(self._node)

    def neighbors(self, n: VertexID) -> KeysView:
        """
        Out-neighbors of ``n`` as a set-like view.

        Raises:
            UnknownVertexError: If ``n`` is missing.
        """
        self._check_vertex(n)
        return self._succ[n].keys()

    def in_degree(
        self, v: Optional[VertexID] = None, weight: Optional[str] = None
    ) -> Union[int, InDegreeView]:
        """
        Number of edges entering ``v``.

        Without ``v`` the networkx in-degree view over all vertices is
        returned, optionally weighted by the ``weight`` attribute.

        Raises:
            UnknownVertexError: If ``v`` is given and missing.
        """
        if v is None:
            return InDegreeView(self)(weight=weight)
        self._check_vertex(v)
        return len(self._pred[v])

    def out_degree(
        self, v: Optional[VertexID] = None, weight: Optional[str] = None
    ) -> Union[int, OutDegreeView]:
        """
        Number of edges leaving ``v``; see ``in_degree``.

        Raises:
            UnknownVertexError: If ``v`` is given and missing.
        """
        if v is None:
            return OutDegreeView(self)(weight=weight)
        self._check_vertex(v)
        return len(self._succ[v])

    def is_edge(self, s: VertexID, d: VertexID) -> bool:
        """
        Check whether the edge (s, d) exists.

        Raises:
            UnknownVertexError: If either endpoint is missing.
        """
        self._check_vertex(s)
        self._check_vertex(d)
        return d in self._succ[s]

    def reverse(self, copy: bool = True) -> DiGraph:
        """
        Return a new DiGraph with every edge flipped.

        A new graph is always built; ``copy`` is accepted for networkx
        callers that pass ``copy=False`` and has no effect.
        """
        rev = DiGraph()
        for v in self._node:
            rev.add_vertex(v)
        for v, nbrs in self._succ.items():
            for w in nbrs:
                rev.add_edge(w, v)
        return rev

    #
    # Strongly connected components
    #
    def scc_kosaraju(self) -> Dict[VertexID, int]:
        """Map each vertex to a 1-based component id using Kosaraju's algorithm."""
        from netalgo.algorithms.scc import scc_kosaraju

        return scc_kosaraju(self)

    def scc_tarjan(self) -> Dict[VertexID, int]:
        """Map each vertex to a 1-based component id using Tarjan's algorithm."""
        from netalgo.algorithms.scc import scc_tarjan

        return scc_tarjan(self)
