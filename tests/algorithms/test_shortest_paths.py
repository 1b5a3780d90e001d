import math

import networkx as nx
import pytest

from netalgo.algorithms.shortest_paths import (
    bellman_ford,
    dijkstra,
    negative_cycle_from,
    path_to,
    predecessor_network,
)
from netalgo.exceptions import NegativeWeightError, UnknownVertexError
from netalgo.graph.network import Network
from netalgo.types import HeapKind


def _assert_negative_cycle(network, cycle):
    assert len(cycle) == len(set(cycle))
    total = 0
    for s, d in zip(cycle, cycle[1:] + cycle[:1]):
        assert network.is_edge(s, d)
        total += network.cost(s, d)
    assert total < 0


def _reachable(network, source):
    return nx.descendants(network, source) | {source}


#
# Bellman-Ford
#
def test_bellman_ford_triangle(triangle_network):
    dist, pred = bellman_ford(triangle_network, 1)
    assert dist == {1: 0, 2: 2, 3: 5}
    assert pred == {2: 1, 3: 2}
    assert negative_cycle_from(triangle_network, 1) == []


def test_bellman_ford_unreachable_is_infinite(triangle_network):
    triangle_network.add_vertex(4)
    dist, pred = bellman_ford(triangle_network, 1)
    assert dist[4] == math.inf
    assert 4 not in pred


def test_bellman_ford_handles_negative_edges():
    g = Network()
    for v in "abcd":
        g.add_vertex(v)
    g.add_edge("a", "b", 4)
    g.add_edge("a", "c", 5)
    g.add_edge("c", "b", -3)
    g.add_edge("b", "d", 1)
    dist, pred = bellman_ford(g, "a")
    assert dist == {"a": 0, "b": 2, "c": 5, "d": 3}
    assert path_to(pred, "a", "d") == ["a", "c", "b", "d"]


def test_two_vertex_negative_cycle(two_cycle_negative):
    cycle = negative_cycle_from(two_cycle_negative, 1)
    assert set(cycle) == {1, 2}
    _assert_negative_cycle(two_cycle_negative, cycle)


def test_negative_cycle_not_reachable_is_ignored():
    g = Network()
    for v in range(4):
        g.add_vertex(v)
    g.add_edge(0, 1, 1)
    g.add_edge(2, 3, -2)
    g.add_edge(3, 2, 1)
    assert negative_cycle_from(g, 0) == []
    cycle = negative_cycle_from(g, 2)
    assert set(cycle) == {2, 3}


def test_negative_cycle_behind_a_path():
    # 0 -> 1 -> 2 -> 3 -> 1 with the loop summing to -1
    g = Network()
    for v in range(4):
        g.add_vertex(v)
    g.add_edge(0, 1, 5)
    g.add_edge(1, 2, 2)
    g.add_edge(2, 3, -4)
    g.add_edge(3, 1, 1)
    cycle = negative_cycle_from(g, 0)
    assert set(cycle) == {1, 2, 3}
    _assert_negative_cycle(g, cycle)


def test_negative_self_loop():
    g = Network()
    g.add_vertex("x")
    g.add_vertex("y")
    g.add_edge("x", "y", 1)
    g.add_edge("y", "y", -1)
    assert negative_cycle_from(g, "x") == ["y"]


@pytest.mark.parametrize("seed", range(12))
def test_negative_cycle_detection_agrees_with_networkx(seed, random_network):
    g = random_network(seed, n=9, p=0.3, low=-4, high=12)
    cycle = negative_cycle_from(g, 0)
    reach = nx.DiGraph(g).subgraph(_reachable(g, 0)).copy()
    assert bool(cycle) == nx.negative_edge_cycle(reach, weight="weight")
    if cycle:
        _assert_negative_cycle(g, cycle)


@pytest.mark.parametrize("seed", range(8))
def test_bellman_ford_matches_networkx(seed, random_network):
    g = random_network(seed, p=0.3)
    dist, _ = bellman_ford(g, 0)
    expected = nx.single_source_bellman_ford_path_length(g, 0, weight="weight")
    assert {v: d for v, d in dist.items() if d < math.inf} == expected


def test_bellman_ford_unknown_source(triangle_network):
    with pytest.raises(UnknownVertexError):
        bellman_ford(triangle_network, 99)
    with pytest.raises(UnknownVertexError):
        negative_cycle_from(triangle_network, 99)


def test_network_methods_delegate(triangle_network, two_cycle_negative):
    assert triangle_network.bellman_ford(1) == bellman_ford(triangle_network, 1)
    assert two_cycle_negative.negative_cycle_from(1) == negative_cycle_from(
        two_cycle_negative, 1
    )


#
# Dijkstra
#
def test_dijkstra_triangle(triangle_network):
    costs, tree = dijkstra(triangle_network, 1)
    assert costs == {1: 0, 2: 2, 3: 5}
    assert sorted(tree.vertices()) == [1, 2, 3]
    assert sorted(tree.edges()) == [(1, 2), (2, 3)]
    assert tree.cost(2, 3) == 3


def test_dijkstra_does_not_modify_input(triangle_network):
    before = sorted(triangle_network.weighted_edges())
    dijkstra(triangle_network, 2)
    assert sorted(triangle_network.weighted_edges()) == before


def test_dijkstra_tree_keeps_unreachable_vertices(triangle_network):
    triangle_network.add_vertex(4)
    costs, tree = dijkstra(triangle_network, 1)
    assert 4 not in costs
    assert tree.is_vertex(4)
    assert tree.m() == 2


def test_dijkstra_ties_prefer_smaller_source():
    #   ┌─1─► 1 ─1─┐
    # 0 ┤          ├─► 3
    #   └─1─► 2 ─1─┘
    g = Network()
    for v in range(4):
        g.add_vertex(v)
    g.add_edge(0, 1, 1)
    g.add_edge(0, 2, 1)
    g.add_edge(1, 3, 1)
    g.add_edge(2, 3, 1)
    _, tree = dijkstra(g, 0)
    assert tree.is_edge(1, 3)
    assert not tree.is_edge(2, 3)


def test_dijkstra_decrease_key_replaces_fringe_entry():
    g = Network()
    for v in "sabt":
        g.add_vertex(v)
    g.add_edge("s", "t", 10)
    g.add_edge("s", "a", 1)
    g.add_edge("a", "b", 1)
    g.add_edge("b", "t", 1)
    costs, tree = dijkstra(g, "s", heap=HeapKind.PAIRING)
    assert costs["t"] == 3
    assert tree.is_edge("b", "t")
    assert not tree.is_edge("s", "t")


def test_dijkstra_rejects_reachable_negative_edge(triangle_network):
    triangle_network.increase_cost(2, 3, -10)
    with pytest.raises(NegativeWeightError):
        dijkstra(triangle_network, 1)


def test_dijkstra_ignores_unreachable_negative_edge():
    g = Network()
    for v in range(4):
        g.add_vertex(v)
    g.add_edge(0, 1, 3)
    g.add_edge(2, 3, -1)
    costs, _ = dijkstra(g, 0)
    assert costs == {0: 0, 1: 3}


def test_dijkstra_unknown_source(triangle_network):
    with pytest.raises(UnknownVertexError):
        dijkstra(triangle_network, "missing")


def test_dijkstra_zero_weight_edges():
    g = Network()
    for v in range(3):
        g.add_vertex(v)
    g.add_edge(0, 1, 0)
    g.add_edge(1, 2, 0)
    costs, tree = dijkstra(g, 0)
    assert costs == {0: 0, 1: 0, 2: 0}
    assert tree.m() == 2


@pytest.mark.parametrize("seed", range(8))
@pytest.mark.parametrize(
    "heap,d",
    [
        (HeapKind.DARY, 2),
        (HeapKind.DARY, 3),
        (HeapKind.DARY, 7),
        (HeapKind.PAIRING, None),
    ],
)
def test_dijkstra_matches_bellman_ford(seed, heap, d, random_network):
    g = random_network(seed, n=15, p=0.2)
    costs, tree = dijkstra(g, 0, heap=heap, d=d)
    dist, _ = bellman_ford(g, 0)
    assert costs == {v: x for v, x in dist.items() if x < math.inf}
    assert costs == nx.single_source_dijkstra_path_length(g, 0, weight="weight")

    assert tree.n() == g.n()
    assert tree.m() == len(costs) - 1
    for s, t in tree.edges():
        assert tree.cost(s, t) == g.cost(s, t)
        assert costs[s] + g.cost(s, t) == costs[t]


def test_network_dijkstra_returns_tree(triangle_network):
    tree = triangle_network.dijkstra(1, heap=HeapKind.PAIRING)
    assert sorted(tree.edges()) == [(1, 2), (2, 3)]


#
# Helpers
#
def test_predecessor_network(triangle_network):
    _, pred = bellman_ford(triangle_network, 1)
    tree = predecessor_network(triangle_network, pred)
    assert tree.vertices() == triangle_network.vertices()
    assert sorted(tree.weighted_edges()) == [(1, 2, 2), (2, 3, 3)]


def test_path_to():
    pred = {"b": "a", "c": "b", "x": "y", "y": "x"}
    assert path_to(pred, "a", "c") == ["a", "b", "c"]
    assert path_to(pred, "a", "a") == ["a"]
    assert path_to(pred, "a", "z") == []
    assert path_to(pred, "a", "x") == []
