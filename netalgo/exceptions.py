"""Exceptions raised on precondition violations.

Every error here is local to a single call: the operation refuses to run
instead of leaving a graph, heap or disjoint set in an inconsistent state.
Lookup failures also derive from ``KeyError`` so that mapping-style callers
can keep catching the built-in type.
"""


class DuplicateVertexError(ValueError):
    """A vertex with this identifier already exists."""


class UnknownVertexError(ValueError, KeyError):
    """An edge or query references a vertex that is not in the graph."""


class DuplicateEdgeError(ValueError):
    """A strict insertion found the edge already present."""


class UnknownEdgeError(ValueError, KeyError):
    """An edge lookup found no such edge."""


class DuplicateKeyError(ValueError):
    """A priority queue push of a key that is already live."""


class UnknownKeyError(ValueError, KeyError):
    """A priority queue operation on a key that is not live."""


class InvalidDecreaseKeyError(ValueError):
    """The replacement key is not strictly smaller or is already live."""


class NegativeWeightError(ValueError):
    """Dijkstra was asked to relax a negative-weight edge."""


class NegativeCapacityError(ValueError):
    """A flow network edge was given a negative capacity."""


class DuplicateSetMemberError(ValueError):
    """``make_set`` of a value already in the disjoint set."""


class UnknownSetMemberError(ValueError, KeyError):
    """A disjoint-set operation on a value that was never added."""


class NotEulerianError(ValueError):
    """An Eulerian cycle was requested from a graph that has none."""
