import random

import pytest

from netalgo.disjoint_set import DisjointSet
from netalgo.exceptions import DuplicateSetMemberError, UnknownSetMemberError


@pytest.fixture
def four_singletons() -> DisjointSet:
    ds = DisjointSet()
    for x in (1, 2, 3, 4):
        ds.make_set(x)
    return ds


def test_make_set_is_own_representative(four_singletons):
    reps = {four_singletons.find(x) for x in (1, 2, 3, 4)}
    assert reps == {1, 2, 3, 4}
    assert four_singletons.num_sets == 4
    assert len(four_singletons) == 4


def test_make_set_duplicate(four_singletons):
    with pytest.raises(DuplicateSetMemberError, match="already in the set"):
        four_singletons.make_set(3)


def test_unknown_member():
    ds = DisjointSet()
    ds.make_set("a")
    with pytest.raises(UnknownSetMemberError):
        ds.find("b")
    with pytest.raises(KeyError):
        ds.join("a", "b")


def test_join_chain(four_singletons):
    ds = four_singletons
    assert ds.join(1, 2) is True
    assert ds.join(3, 4) is True
    assert ds.join(2, 3) is True
    assert ds.find(1) == ds.find(4)
    assert ds.num_sets == 1


def test_join_same_set_returns_false(four_singletons):
    ds = four_singletons
    ds.join(1, 2)
    assert ds.join(2, 1) is False
    assert ds.num_sets == 3


def test_union_by_rank_tie_attaches_y_under_x(four_singletons):
    ds = four_singletons
    ds.join(1, 2)
    assert ds.find(2) == 1
    assert ds.rank(1) == 1
    # Lower-rank root goes under the higher-rank root whatever the argument order
    ds.join(3, 1)
    assert ds.find(3) == 1
    assert ds.rank(1) == 1


def test_path_compression_repoints_chain():
    ds = DisjointSet()
    for x in range(4):
        ds.make_set(x)
    ds.join(0, 1)  # 1 -> 0, rank(0) = 1
    ds.join(2, 3)  # 3 -> 2, rank(2) = 1
    ds.join(2, 0)  # 0 -> 2, rank(2) = 2
    assert ds._parent[ds._slot[1]] == ds._slot[0]
    assert ds.find(1) == 2
    assert ds._parent[ds._slot[1]] == ds._slot[2]


def test_sets_grouping():
    ds = DisjointSet()
    for x in "abcde":
        ds.make_set(x)
    ds.join("a", "c")
    ds.join("d", "e")
    assert sorted(sorted(s) for s in ds.sets()) == [["a", "c"], ["b"], ["d", "e"]]
    assert ds.same_set("c", "a")
    assert not ds.same_set("a", "b")


@pytest.mark.parametrize("seed", range(5))
def test_random_joins_match_naive_partition(seed):
    rng = random.Random(seed)
    ds = DisjointSet()
    label = {}
    for x in range(50):
        ds.make_set(x)
        label[x] = x
    for _ in range(60):
        x, y = rng.randrange(50), rng.randrange(50)
        merged = ds.join(x, y)
        assert merged == (label[x] != label[y])
        if merged:
            old, new = label[y], label[x]
            for k, v in label.items():
                if v == old:
                    label[k] = new
        assert ds.find(x) == ds.find(y)
    for x in range(50):
        for y in range(x + 1, 50):
            assert ds.same_set(x, y) == (label[x] == label[y])
    assert ds.num_sets == len(set(label.values()))
