"""Global pytest configuration and shared graph fixtures."""

from __future__ import annotations

import random
from typing import Callable

import pytest

from netalgo.graph.digraph import DiGraph
from netalgo.graph.flow_network import FlowNetwork
from netalgo.graph.network import Network


@pytest.fixture
def triangle_network() -> Network:
    # 1 ──2──► 2 ──3──► 3
    # ▲                 │
    # └────────5────────┘
    g = Network()
    for v in (1, 2, 3):
        g.add_vertex(v)
    g.add_edge(1, 2, 2)
    g.add_edge(2, 3, 3)
    g.add_edge(3, 1, 5)
    return g


@pytest.fixture
def two_cycle_negative() -> Network:
    # 1 ◄──-1──► 2
    g = Network()
    g.add_vertex(1)
    g.add_vertex(2)
    g.add_edge(1, 2, -1)
    g.add_edge(2, 1, -1)
    return g


@pytest.fixture
def scc_digraph() -> DiGraph:
    # Components: {A, B, C}, {D, E}, {F}, {G}
    #
    #   A ──► B ──► C ──► A
    #   │           │
    #   ▼           ▼
    #   D ◄───────► E ──► F ──► G
    g = DiGraph()
    for v in "ABCDEFG":
        g.add_vertex(v)
    for s, d in [
        ("A", "B"),
        ("B", "C"),
        ("C", "A"),
        ("A", "D"),
        ("C", "E"),
        ("D", "E"),
        ("E", "D"),
        ("E", "F"),
        ("F", "G"),
    ]:
        g.add_edge(s, d)
    return g


@pytest.fixture
def simple_flow_network() -> FlowNetwork:
    # s ──10──► a ──5──► t
    # └─────────3────────┘
    net = FlowNetwork("s", "t")
    net.add_vertex("a")
    net.add_edge("s", "a", 10)
    net.add_edge("a", "t", 5)
    net.add_edge("s", "t", 3)
    return net


@pytest.fixture
def clrs_flow_network() -> FlowNetwork:
    # Classic six-vertex example with maximum flow 23.
    net = FlowNetwork("s", "t")
    for v in ("v1", "v2", "v3", "v4"):
        net.add_vertex(v)
    for s, d, c in [
        ("s", "v1", 16),
        ("s", "v2", 13),
        ("v2", "v1", 4),
        ("v1", "v3", 12),
        ("v3", "v2", 9),
        ("v2", "v4", 14),
        ("v4", "v3", 7),
        ("v3", "t", 20),
        ("v4", "t", 4),
    ]:
        net.add_edge(s, d, c)
    return net


@pytest.fixture
def random_network() -> Callable[..., Network]:
    """Factory for seeded random networks over integer vertices."""

    def _make(
        seed: int,
        n: int = 12,
        p: float = 0.25,
        low: int = 0,
        high: int = 20,
    ) -> Network:
        rng = random.Random(seed)
        g = Network()
        for v in range(n):
            g.add_vertex(v)
        for s in range(n):
            for d in range(n):
                if s != d and rng.random() < p:
                    g.add_edge(s, d, rng.randint(low, high))
        return g

    return _make


@pytest.fixture
def random_flow_network() -> Callable[..., FlowNetwork]:
    """Factory for seeded random flow networks with source 0 and sink n-1."""

    def _make(seed: int, n: int = 10, p: float = 0.3, high: int = 15) -> FlowNetwork:
        rng = random.Random(seed)
        net = FlowNetwork(0, n - 1)
        for v in range(1, n - 1):
            net.add_vertex(v)
        for s in range(n):
            for d in range(n):
                if s != d and rng.random() < p:
                    net.add_edge(s, d, rng.randint(1, high))
        return net

    return _make
