"""Array-backed d-ary min-heap with decrease-key.

Keys are unique. An index map tracks the array slot of every live key, which
makes membership tests O(1) and lets ``decrease_key`` start sifting from the
right slot without a search.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, TypeVar

from netalgo.config import ALGORITHM_CONFIG
from netalgo.exceptions import (
    DuplicateKeyError,
    InvalidDecreaseKeyError,
    UnknownKeyError,
)

K = TypeVar("K")


class DaryHeap(Generic[K]):
    """
    A min-heap where every node has up to ``d`` children.

    Larger ``d`` makes the tree shallower (cheaper ``push`` and ``decrease_key``)
    at the price of more comparisons per level when sifting down in
    ``pop_min``.

    Attributes:
        _data (List[K]): Heap-ordered keys; ``_data[0]`` is the minimum.
        _index (Dict[K, int]): Maps each live key to its slot in ``_data``.
    """

    def __init__(self, d: Optional[int] = None) -> None:
        """
        Initialize an empty heap.

        Args:
            d: Fan-out. Defaults to ``ALGORITHM_CONFIG.heap_arity``.

        Raises:
            ValueError: If d is smaller than 2.
        """
        if d is None:
            d = ALGORITHM_CONFIG.heap_arity
        if d < 2:
            raise ValueError(f"Heap arity must be at least 2, got {d}.")
        self._d = d
        self._data: List[K] = []
        self._index: Dict[K, int] = {}

    @property
    def d(self) -> int:
        return self._d

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: Any) -> bool:
        return key in self._index

    def __repr__(self) -> str:
        return f"{type(self).__name__}(d={self._d}, size={len(self._data)})"

    def empty(self) -> bool:
        return not self._data

    def index_of(self, key: K) -> int:
        """
        Return the array slot currently holding ``key``.

        Raises:
            UnknownKeyError: If the key is not live.
        """
        try:
            return self._index[key]
        except KeyError:
            raise UnknownKeyError(f"Key {key!r} is not in the heap.") from None

    def min(self) -> K:
        """
        Return the smallest key without removing it.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self._data:
            raise IndexError("min() on an empty heap.")
        return self._data[0]

    def push(self, key: K) -> None:
        """
        Insert a key that is not already live.

        Raises:
            DuplicateKeyError: If the key is already in the heap.
        """
        if key in self._index:
            raise DuplicateKeyError(f"Key {key!r} is already in the heap.")
        self._data.append(key)
        slot = len(self._data) - 1
        self._index[key] = slot
        self._sift_up(slot)

    def pop_min(self) -> K:
        """
        Remove and return the smallest key.

        The last element is moved to the root and sifted down against the
        smallest of its children; ties between children go to the lower slot.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self._data:
            raise IndexError("pop_min() on an empty heap.")
        top = self._data[0]
        del self._index[top]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._index[last] = 0
            self._sift_down(0)
        return top

    def decrease_key(self, old: K, new: K) -> None:
        """
        Replace a live key with a strictly smaller key that is not live.

        The new key can only move towards the root, so only sift-up runs.

        Raises:
            UnknownKeyError: If ``old`` is not in the heap.
            InvalidDecreaseKeyError: If ``new`` is not smaller than ``old`` or
                is already in the heap.
        """
        if old not in self._index:
            raise UnknownKeyError(f"Key {old!r} is not in the heap.")
        if not new < old:
            raise InvalidDecreaseKeyError(
                f"New key {new!r} is not strictly smaller than {old!r}."
            )
        if new in self._index:
            raise InvalidDecreaseKeyError(f"Key {new!r} is already in the heap.")

        slot = self._index.pop(old)
        self._data[slot] = new
        self._index[new] = slot
        self._sift_up(slot)

    #
    # Internal helpers
    #
    def _swap(self, i: int, j: int) -> None:
        data = self._data
        data[i], data[j] = data[j], data[i]
        self._index[data[i]] = i
        self._index[data[j]] = j

    def _sift_up(self, i: int) -> None:
        data = self._data
        d = self._d
        while i > 0:
            parent = (i - 1) // d
            if data[i] < data[parent]:
                self._swap(i, parent)
                i = parent
            else:
                break

    def _sift_down(self, i: int) -> None:
        data = self._data
        d = self._d
        n = len(data)
        while i * d + 1 < n:
            first = i * d + 1
            smallest = first
            for c in range(first + 1, min(first + d, n)):
                if data[c] < data[smallest]:
                    smallest = c
            if not data[smallest] < data[i]:
                break
            self._swap(i, smallest)
            i = smallest
