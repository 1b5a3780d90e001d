"""Shared type aliases, records and enums."""

from __future__ import annotations

from enum import IntEnum
from typing import Hashable, NamedTuple, Tuple, Union

#: Opaque, hashable and totally ordered vertex identifier.
VertexID = Hashable

#: Represents a numeric edge weight (distance, log-rate, capacity, flow).
Weight = Union[int, float]

#: Ordered (source, destination) pair.
Edge = Tuple[VertexID, VertexID]


class WeightedEdge(NamedTuple):
    """A directed edge together with its weight."""

    source: VertexID
    destination: VertexID
    weight: Weight

    def sort_key(self) -> Tuple[Weight, VertexID, VertexID]:
        """Order by weight, then source, then destination."""
        return (self.weight, self.source, self.destination)


class HeapKind(IntEnum):
    """Priority queue implementations available to Dijkstra."""

    #: Array-backed d-ary heap with an index map.
    DARY = 1
    #: Arena-backed pairing heap.
    PAIRING = 2
