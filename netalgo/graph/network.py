"""Weighted directed network.

`Network` stores the weight of each edge in the networkx edge-data dict under
the ``weight`` attribute, so a weight exists exactly when the adjacency entry
does. Shortest-path entry points delegate to `netalgo.algorithms.shortest_paths`.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

from netalgo.exceptions import UnknownEdgeError
from netalgo.graph.digraph import DiGraph, _edge_items
from netalgo.types import HeapKind, VertexID, Weight, WeightedEdge

#: Edge attribute holding the weight.
WEIGHT_ATTR = "weight"


class Network(DiGraph):
    """A directed graph whose every edge carries a real-valued weight."""

    def add_edge(
        self,
        u_of_edge: VertexID,
        v_of_edge: VertexID,
        weight: Weight = 0.0,
        strict: bool = False,
    ) -> None:
        """
        Add the edge (u_of_edge, v_of_edge) with the given weight.

        Re-adding an existing edge replaces its weight unless ``strict``.

        Raises:
            UnknownVertexError: If either endpoint is missing.
            DuplicateEdgeError: If ``strict`` and the edge already exists.
        """
        super().add_edge(u_of_edge, v_of_edge, strict=strict, **{WEIGHT_ATTR: weight})

    def add_edges_from(self, ebunch_to_add: Iterable[Any], **attr: Any) -> None:
        """
        Add ``(u, v)`` or ``(u, v, dict)`` edges through ``add_edge``.

        The ``weight`` attribute defaults to 0.0; no other attribute is
        accepted.

        Raises:
            UnknownVertexError: On the first edge with a missing endpoint.
            ValueError: If an edge carries an attribute other than ``weight``.
        """
        for u, v, data in _edge_items(ebunch_to_add, attr):
            extra = set(data) - {WEIGHT_ATTR}
            if extra:
                raise ValueError(
                    f"Network edges carry only '{WEIGHT_ATTR}', got {sorted(extra)}."
                )
            self.add_edge(u, v, data.get(WEIGHT_ATTR, 0.0))

    def add_weighted_edges_from(
        self, ebunch_to_add: Iterable[Tuple[VertexID, VertexID, Weight]], **attr: Any
    ) -> None:
        """Add ``(u, v, weight)`` triples through ``add_edge``."""
        for u, v, w in ebunch_to_add:
            self.add_edge(u, v, w)

    def add_weighted_edge(self, edge: WeightedEdge) -> None:
        self.add_edge(edge.source, edge.destination, edge.weight)

    def cost(self, s: VertexID, d: VertexID) -> Weight:
        """
        Weight of the edge (s, d).

        Raises:
            UnknownVertexError: If either endpoint is missing.
            UnknownEdgeError: If there is no such edge.
        """
        if not self.is_edge(s, d):
            raise UnknownEdgeError(f"No edge from '{s}' to '{d}'.")
        return self._succ[s][d][WEIGHT_ATTR]

    def increase_cost(self, s: VertexID, d: VertexID, delta: Weight) -> None:
        """Add ``delta`` (possibly negative) to the weight of edge (s, d)."""
        if not self.is_edge(s, d):
            raise UnknownEdgeError(f"No edge from '{s}' to '{d}'.")
        self._succ[s][d][WEIGHT_ATTR] += delta

    def weighted_edges(self) -> List[WeightedEdge]:
        """All edges ordered by weight, then source, then destination."""
        edges = [
            WeightedEdge(s, d, data[WEIGHT_ATTR])
            for s, nbrs in self._succ.items()
            for d, data in nbrs.items()
        ]
        edges.sort(key=WeightedEdge.sort_key)
        return edges

    def reverse(self, copy: bool = True) -> Network:
        """
        Return a new Network with every edge flipped, keeping weights.

        A new network is always built; ``copy`` has no effect.
        """
        rev = Network()
        for v in self._node:
            rev.add_vertex(v)
        for v, nbrs in self._succ.items():
            for w, data in nbrs.items():
                rev.add_edge(w, v, data[WEIGHT_ATTR])
        return rev

    #
    # Shortest paths
    #
    def dijkstra(
        self,
        source: VertexID,
        heap: HeapKind = HeapKind.DARY,
        d: Optional[int] = None,
    ) -> Network:
        """
        Shortest-path tree from ``source``; every edge weight reachable from
        ``source`` must be non-negative.

        Args:
            source: Start vertex.
            heap: Priority queue used for the fringe.
            d: Fan-out of the d-ary heap.

        Returns:
            A new Network holding every vertex and the tree edges.
        """
        from netalgo.algorithms.shortest_paths import dijkstra

        _, tree = dijkstra(self, source, heap=heap, d=d)
        return tree

    def bellman_ford(
        self, source: VertexID
    ) -> Tuple[Dict[VertexID, float], Dict[VertexID, VertexID]]:
        """Return ``(distances, predecessors)`` from ``source``."""
        from netalgo.algorithms.shortest_paths import bellman_ford

        return bellman_ford(self, source)

    def negative_cycle_from(self, source: VertexID) -> List[VertexID]:
        """Vertices of a negative cycle reachable from ``source``, or []."""
        from netalgo.algorithms.shortest_paths import negative_cycle_from

        return negative_cycle_from(self, source)
