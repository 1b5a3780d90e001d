import random

import pytest

from netalgo.exceptions import (
    DuplicateKeyError,
    InvalidDecreaseKeyError,
    UnknownKeyError,
)
from netalgo.heap import DaryHeap, PairingHeap, make_heap
from netalgo.types import HeapKind


def _assert_heap_order(heap: DaryHeap) -> None:
    data = heap._data
    for i in range(1, len(data)):
        assert not data[i] < data[(i - 1) // heap.d]
    for key, slot in heap._index.items():
        assert data[slot] == key
    assert len(heap._index) == len(data)


def test_empty_heap():
    h = DaryHeap()
    assert h.empty()
    assert len(h) == 0
    with pytest.raises(IndexError):
        h.min()
    with pytest.raises(IndexError):
        h.pop_min()


def test_invalid_arity():
    with pytest.raises(ValueError, match="at least 2"):
        DaryHeap(1)


def test_push_and_pop_in_order():
    h = DaryHeap()
    for k in [5, 3, 8, 1, 9, 2]:
        h.push(k)
    assert h.min() == 1
    assert [h.pop_min() for _ in range(6)] == [1, 2, 3, 5, 8, 9]
    assert h.empty()


def test_push_duplicate_rejected():
    h = DaryHeap()
    h.push(4)
    with pytest.raises(DuplicateKeyError, match="already in the heap"):
        h.push(4)
    assert len(h) == 1


def test_membership_and_index():
    h = DaryHeap(3)
    for k in [7, 4, 6]:
        h.push(k)
    assert 4 in h
    assert 5 not in h
    assert h._data[h.index_of(6)] == 6
    with pytest.raises(UnknownKeyError):
        h.index_of(5)
    with pytest.raises(KeyError):
        h.index_of(5)


def test_decrease_key_moves_to_root():
    h = DaryHeap()
    for k in [10, 20, 30, 40]:
        h.push(k)
    h.decrease_key(40, 5)
    assert h.min() == 5
    assert 40 not in h
    assert 5 in h
    _assert_heap_order(h)


class TestDecreaseKeyPreconditions:
    def test_unknown_old_key(self):
        h = DaryHeap()
        h.push(3)
        with pytest.raises(UnknownKeyError):
            h.decrease_key(4, 1)

    def test_not_strictly_smaller(self):
        h = DaryHeap()
        h.push(3)
        with pytest.raises(InvalidDecreaseKeyError, match="not strictly smaller"):
            h.decrease_key(3, 3)
        with pytest.raises(InvalidDecreaseKeyError):
            h.decrease_key(3, 7)

    def test_collision_with_live_key(self):
        h = DaryHeap()
        h.push(1)
        h.push(3)
        with pytest.raises(InvalidDecreaseKeyError, match="already in the heap"):
            h.decrease_key(3, 1)
        assert h.min() == 1
        assert 3 in h


def test_tuple_keys_break_ties_by_position():
    h = DaryHeap()
    h.push((2.0, "b", "x"))
    h.push((2.0, "a", "y"))
    h.push((1.0, "z", "z"))
    assert h.pop_min() == (1.0, "z", "z")
    assert h.pop_min() == (2.0, "a", "y")


@pytest.mark.parametrize("kind", [HeapKind.DARY, HeapKind.PAIRING])
@pytest.mark.parametrize("d", [2, 3, 5])
@pytest.mark.parametrize("seed", range(5))
def test_random_operations_keep_min(kind, d, seed):
    """After any mix of push/decrease_key/pop_min, min() is the smallest live key."""
    rng = random.Random(seed)
    h = make_heap(kind, d)
    live = set()
    for _ in range(400):
        op = rng.random()
        if op < 0.45 or not live:
            k = rng.randint(0, 10_000)
            if k not in live:
                h.push(k)
                live.add(k)
        elif op < 0.75:
            old = rng.choice(sorted(live))
            new = old - rng.randint(1, 50)
            if new not in live:
                h.decrease_key(old, new)
                live.remove(old)
                live.add(new)
        else:
            assert h.pop_min() == min(live)
            live.remove(min(live))
        assert len(h) == len(live)
        if live:
            assert h.min() == min(live)
        if isinstance(h, DaryHeap):
            _assert_heap_order(h)

    drained = []
    while not h.empty():
        drained.append(h.pop_min())
    assert drained == sorted(live)


def test_make_heap_kinds():
    assert isinstance(make_heap(HeapKind.DARY, 4), DaryHeap)
    assert make_heap(HeapKind.DARY, 4).d == 4
    assert isinstance(make_heap(HeapKind.PAIRING), PairingHeap)
