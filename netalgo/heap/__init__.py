"""Priority queues with decrease-key.

This package provides the array-backed `DaryHeap` and the arena-backed
`PairingHeap`, plus `make_heap` to build either from a `HeapKind`.
"""

from __future__ import annotations

from typing import Optional, Union

from netalgo.heap.dary import DaryHeap
from netalgo.heap.pairing import PairingHeap
from netalgo.types import HeapKind


def make_heap(
    kind: HeapKind = HeapKind.DARY, d: Optional[int] = None
) -> Union[DaryHeap, PairingHeap]:
    """Create an empty heap of the requested kind.

    Args:
        kind: Heap implementation.
        d: Fan-out for ``HeapKind.DARY``; ignored for pairing heaps.

    Returns:
        An empty heap.
    """
    if kind == HeapKind.DARY:
        return DaryHeap(d)
    if kind == HeapKind.PAIRING:
        return PairingHeap()
    raise ValueError(f"Unsupported heap kind: {kind!r}")


__all__ = ["DaryHeap", "PairingHeap", "make_heap"]
