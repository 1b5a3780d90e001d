"""Flow networks and flows.

A `FlowNetwork` is a `Network` whose weights are capacities (or residual
capacities once augmented) between a fixed source and sink. A `Flow` uses the
same shape to carry an amount of flow per edge.
"""

from __future__ import annotations

from typing import Literal, Optional, Tuple, Union, overload

from netalgo.algorithms.types import FlowSummary
from netalgo.config import ALGORITHM_CONFIG
from netalgo.exceptions import NegativeCapacityError
from netalgo.graph.network import WEIGHT_ATTR, Network
from netalgo.types import VertexID, Weight


class _TerminalNetwork(Network):
    """
    A network with a source and a sink created at construction.

    Both terminals may be omitted together, which is how networkx builds the
    empty instance behind ``copy(pickle=False)`` and subgraph views; such an
    instance has no terminals and creates no vertices.
    """

    def __init__(
        self,
        source: Optional[VertexID] = None,
        sink: Optional[VertexID] = None,
        **attr,
    ) -> None:
        if (source is None) != (sink is None):
            raise ValueError("Source and sink must be given together.")
        if source is not None and source == sink:
            raise ValueError(f"Source and sink must differ, both are '{source}'.")
        super().__init__(**attr)
        self._source = source
        self._sink = sink
        if source is not None:
            super().add_vertex(source)
            super().add_vertex(sink)

    def copy(self, as_view: bool = False, pickle: bool = True) -> _TerminalNetwork:
        duplicate = super().copy(as_view=as_view, pickle=pickle)
        if not pickle:
            duplicate._source = self._source
            duplicate._sink = self._sink
        return duplicate

    @property
    def source(self) -> VertexID:
        return self._source

    @property
    def sink(self) -> VertexID:
        return self._sink

    def add_vertex(self, v: VertexID) -> None:
        """Add a vertex; re-adding the source or the sink is a no-op."""
        if v == self._source or v == self._sink:
            return
        super().add_vertex(v)


class Flow(_TerminalNetwork):
    """An assignment of flow to edges between ``source`` and ``sink``."""

    def empty(self) -> bool:
        return self.m() == 0

    def value(self) -> float:
        """Total flow leaving the source."""
        return sum(data[WEIGHT_ATTR] for data in self._succ[self._source].values())

    def __iadd__(self, other: Flow) -> Flow:
        """
        Merge another flow into this one.

        Flow on an edge first cancels flow on the anti-parallel edge; only the
        remainder is added in the edge's own direction.
        """
        tol = ALGORITHM_CONFIG.min_residual_capacity
        for s, d, amount in other.weighted_edges():
            for v in (s, d):
                if not self.is_vertex(v):
                    self.add_vertex(v)
            if self.is_edge(d, s):
                back = self.cost(d, s)
                if back - amount > tol:
                    self.increase_cost(d, s, -amount)
                    continue
                self.remove_edge(d, s)
                amount -= back
                if amount <= tol:
                    continue
            if self.is_edge(s, d):
                self.increase_cost(s, d, amount)
            else:
                self.add_edge(s, d, amount)
        return self


class FlowNetwork(_TerminalNetwork):
    """
    A capacitated network between a fixed source and sink.

    Edge weights are capacities. ``augmenting_path`` turns this instance into
    its own residual network; ``max_flow`` leaves it untouched and works on a
    private copy.
    """

    def add_edge(
        self,
        u_of_edge: VertexID,
        v_of_edge: VertexID,
        weight: Weight = 0.0,
        strict: bool = False,
    ) -> None:
        """
        Add an edge with capacity ``weight``.

        Raises:
            NegativeCapacityError: If the capacity is negative.
        """
        if weight < 0:
            raise NegativeCapacityError(
                f"Edge ('{u_of_edge}', '{v_of_edge}') has negative capacity {weight}."
            )
        super().add_edge(u_of_edge, v_of_edge, weight, strict=strict)

    def capacity(self, s: VertexID, d: VertexID) -> Weight:
        return self.cost(s, d)

    def augmenting_path(self) -> Flow:
        """
        Push flow along one fewest-edges path and update this residual network.

        Returns:
            The flow increment; empty when the sink is unreachable.
        """
        from netalgo.algorithms.max_flow import augmenting_path

        return augmenting_path(self)

    @overload
    def max_flow(self, *, return_summary: Literal[False] = False) -> Flow: ...

    @overload
    def max_flow(self, *, return_summary: Literal[True]) -> Tuple[Flow, FlowSummary]: ...

    def max_flow(self, *, return_summary: bool = False) -> Union[Flow, tuple]:
        """
        Maximum flow from source to sink (Edmonds-Karp).

        Args:
            return_summary: If True, also return a FlowSummary with the residual
                capacities and the minimum cut.
        """
        from netalgo.algorithms.max_flow import calc_max_flow

        return calc_max_flow(self, return_summary=return_summary)
