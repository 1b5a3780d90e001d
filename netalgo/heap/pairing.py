"""Pairing heap stored in an arena of integer-addressed slots.

Each node lives in a slot of parallel lists (key, first child, next sibling,
previous link). The previous link of a first child points at its parent,
otherwise at its left sibling. Freed slots are recycled through a free list.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, TypeVar

from netalgo.exceptions import (
    DuplicateKeyError,
    InvalidDecreaseKeyError,
    UnknownKeyError,
)

K = TypeVar("K")

#: Null slot reference.
NIL = -1


class PairingHeap(Generic[K]):
    """
    A min-ordered pairing heap with decrease-key.

    Same contract as ``DaryHeap``: keys are unique, ``decrease_key`` accepts
    only strictly smaller, non-live replacement keys.
    """

    def __init__(self) -> None:
        self._key: List[Any] = []
        self._child: List[int] = []
        self._next: List[int] = []
        self._prev: List[int] = []
        self._free: List[int] = []
        self._slot: Dict[K, int] = {}
        self._root = NIL

    def __len__(self) -> int:
        return len(self._slot)

    def __contains__(self, key: Any) -> bool:
        return key in self._slot

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._slot)})"

    def empty(self) -> bool:
        return self._root == NIL

    def min(self) -> K:
        if self._root == NIL:
            raise IndexError("min() on an empty heap.")
        return self._key[self._root]

    def push(self, key: K) -> None:
        if key in self._slot:
            raise DuplicateKeyError(f"Key {key!r} is already in the heap.")
        node = self._allocate(key)
        self._slot[key] = node
        self._root = self._meld(self._root, node)

    def pop_min(self) -> K:
        """Remove and return the smallest key using the two-pass pairing merge."""
        root = self._root
        if root == NIL:
            raise IndexError("pop_min() on an empty heap.")
        key = self._key[root]
        del self._slot[key]

        children: List[int] = []
        c = self._child[root]
        while c != NIL:
            nxt = self._next[c]
            self._next[c] = NIL
            self._prev[c] = NIL
            children.append(c)
            c = nxt
        self._release(root)

        # First pass: meld adjacent pairs left to right
        paired: List[int] = []
        for i in range(0, len(children) - 1, 2):
            paired.append(self._meld(children[i], children[i + 1]))
        if len(children) % 2:
            paired.append(children[-1])

        # Second pass: fold right to left
        new_root = NIL
        for node in reversed(paired):
            new_root = self._meld(node, new_root)
        self._root = new_root
        return key

    def decrease_key(self, old: K, new: K) -> None:
        if old not in self._slot:
            raise UnknownKeyError(f"Key {old!r} is not in the heap.")
        if not new < old:
            raise InvalidDecreaseKeyError(
                f"New key {new!r} is not strictly smaller than {old!r}."
            )
        if new in self._slot:
            raise InvalidDecreaseKeyError(f"Key {new!r} is already in the heap.")

        node = self._slot.pop(old)
        self._key[node] = new
        self._slot[new] = node
        if node == self._root:
            return
        self._cut(node)
        self._root = self._meld(self._root, node)

    #
    # Arena management
    #
    def _allocate(self, key: K) -> int:
        if self._free:
            node = self._free.pop()
            self._key[node] = key
            self._child[node] = NIL
            self._next[node] = NIL
            self._prev[node] = NIL
            return node
        self._key.append(key)
        self._child.append(NIL)
        self._next.append(NIL)
        self._prev.append(NIL)
        return len(self._key) - 1

    def _release(self, node: int) -> None:
        self._key[node] = None
        self._child[node] = NIL
        self._free.append(node)

    def _cut(self, node: int) -> None:
        """Detach the subtree rooted at ``node`` from its parent."""
        prev = self._prev[node]
        nxt = self._next[node]
        if self._child[prev] == node:
            self._child[prev] = nxt
        else:
            self._next[prev] = nxt
        if nxt != NIL:
            self._prev[nxt] = prev
        self._next[node] = NIL
        self._prev[node] = NIL

    def _meld(self, a: int, b: int) -> int:
        """Link two roots; the larger becomes the first child of the smaller."""
        if a == NIL:
            return b
        if b == NIL:
            return a
        if self._key[b] < self._key[a]:
            a, b = b, a
        first = self._child[a]
        self._next[b] = first
        self._prev[b] = a
        if first != NIL:
            self._prev[first] = b
        self._child[a] = b
        return a
