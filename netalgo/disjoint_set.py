"""Disjoint-set forest (union-find) with union by rank and path compression.

Nodes live in parallel lists addressed by integer slots; parent links are
slot numbers, so re-pointing a chain never creates ownership cycles.
"""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterator, List, TypeVar

from netalgo.exceptions import DuplicateSetMemberError, UnknownSetMemberError

T = TypeVar("T", bound=Hashable)


class DisjointSet(Generic[T]):
    """
    A collection of disjoint sets over hashable values.

    Attributes:
        _slot (Dict[T, int]): Maps each value to its node slot.
        _value (List[T]): Value owned by each slot.
        _parent (List[int]): Parent slot; a slot that is its own parent is
            a representative.
        _rank (List[int]): Upper bound on the height of the tree rooted at a
            representative.
    """

    def __init__(self) -> None:
        self._slot: Dict[T, int] = {}
        self._value: List[T] = []
        self._parent: List[int] = []
        self._rank: List[int] = []
        self._num_sets = 0

    def __len__(self) -> int:
        return len(self._value)

    def __contains__(self, x: object) -> bool:
        return x in self._slot

    def __iter__(self) -> Iterator[T]:
        return iter(self._value)

    @property
    def num_sets(self) -> int:
        """Number of disjoint sets currently in the collection."""
        return self._num_sets

    def make_set(self, x: T) -> None:
        """
        Add ``x`` as a new singleton set.

        Raises:
            DuplicateSetMemberError: If ``x`` is already present.
        """
        if x in self._slot:
            raise DuplicateSetMemberError(f"Value {x!r} is already in the set.")
        slot = len(self._value)
        self._slot[x] = slot
        self._value.append(x)
        self._parent.append(slot)
        self._rank.append(0)
        self._num_sets += 1

    def find(self, x: T) -> T:
        """
        Return the representative of the set containing ``x``.

        Every node on the path from ``x`` is re-pointed at the representative.

        Raises:
            UnknownSetMemberError: If ``x`` was never added.
        """
        return self._value[self._find_slot(self._lookup(x))]

    def join(self, x: T, y: T) -> bool:
        """
        Merge the sets containing ``x`` and ``y``.

        The root of lower rank is linked under the other; on equal ranks the
        root of ``y`` goes under the root of ``x`` and ``x``'s rank grows.

        Returns:
            True if two sets were merged, False if they were already one.

        Raises:
            UnknownSetMemberError: If either value was never added.
        """
        rx = self._find_slot(self._lookup(x))
        ry = self._find_slot(self._lookup(y))
        if rx == ry:
            return False

        rank = self._rank
        if rank[rx] > rank[ry]:
            self._parent[ry] = rx
        elif rank[rx] < rank[ry]:
            self._parent[rx] = ry
        else:
            self._parent[ry] = rx
            rank[rx] += 1
        self._num_sets -= 1
        return True

    def same_set(self, x: T, y: T) -> bool:
        return self._find_slot(self._lookup(x)) == self._find_slot(self._lookup(y))

    def rank(self, x: T) -> int:
        """Rank stored on the node of ``x`` (meaningful for representatives)."""
        return self._rank[self._lookup(x)]

    def sets(self) -> List[List[T]]:
        """Group members by set, in order of first appearance."""
        groups: Dict[int, List[T]] = {}
        for slot, value in enumerate(self._value):
            groups.setdefault(self._find_slot(slot), []).append(value)
        return list(groups.values())

    def _lookup(self, x: T) -> int:
        try:
            return self._slot[x]
        except KeyError:
            raise UnknownSetMemberError(f"Value {x!r} is not in the set.") from None

    def _find_slot(self, slot: int) -> int:
        parent = self._parent
        root = slot
        while parent[root] != root:
            root = parent[root]
        # Path compression
        while parent[slot] != root:
            parent[slot], slot = root, parent[slot]
        return root
