"""Single-source shortest paths: Dijkstra and Bellman-Ford.

Results are fresh structures; the input network is never modified.
"""

from __future__ import annotations

import math
from collections import deque
from typing import TYPE_CHECKING, Dict, List, Optional, Set, Tuple

from netalgo.exceptions import NegativeWeightError, UnknownVertexError
from netalgo.graph.network import WEIGHT_ATTR, Network
from netalgo.heap import make_heap
from netalgo.logging import get_logger, log_elapsed
from netalgo.types import HeapKind, VertexID

if TYPE_CHECKING:
    from netalgo.graph.digraph import DiGraph

logger = get_logger(__name__)

#: Fringe entry: (distance through source, source, destination).
FringeKey = Tuple[float, VertexID, VertexID]


def _check_source(graph: DiGraph, source: VertexID) -> None:
    if source not in graph._node:
        raise UnknownVertexError(f"Source vertex '{source}' is not in the graph.")


def _check_non_negative(network: Network, source: VertexID) -> None:
    """Reject any negative edge weight reachable from ``source``."""
    adj = network._adj
    seen = {source}
    queue = deque([source])
    while queue:
        v = queue.popleft()
        for w, data in adj[v].items():
            if data[WEIGHT_ATTR] < 0:
                raise NegativeWeightError(
                    f"Edge ('{v}', '{w}') has negative weight {data[WEIGHT_ATTR]}; "
                    "Dijkstra requires non-negative weights."
                )
            if w not in seen:
                seen.add(w)
                queue.append(w)


def _empty_copy(network: Network) -> Network:
    tree = Network()
    for v in network:
        tree.add_vertex(v)
    return tree


def dijkstra(
    network: Network,
    source: VertexID,
    heap: HeapKind = HeapKind.DARY,
    d: Optional[int] = None,
) -> Tuple[Dict[VertexID, float], Network]:
    """
    Dijkstra's algorithm over a network with non-negative weights.

    The fringe holds at most one entry per unsettled vertex, keyed by
    ``(distance, source, destination)`` so ties fall back to the source and
    then the destination vertex. A strictly shorter route to a fringe vertex
    replaces its entry through ``decrease_key``. Each extracted entry settles
    its destination and contributes one edge to the shortest-path tree.

    Args:
        network: The weighted network.
        source: Start vertex.
        heap: Priority queue implementation for the fringe.
        d: Fan-out of the d-ary heap (default from ``ALGORITHM_CONFIG``).

    Returns:
        A tuple of (costs, tree):
          - costs: Distance from ``source`` to every reachable vertex.
          - tree: A new Network with all vertices and the shortest-path
            tree edges, in settled order.

    Raises:
        UnknownVertexError: If ``source`` is not in the network.
        NegativeWeightError: If a negative edge is reachable from ``source``.
    """
    _check_source(network, source)
    _check_non_negative(network, source)

    adj = network._adj
    tree = _empty_copy(network)
    fringe = make_heap(heap, d)
    best: Dict[VertexID, FringeKey] = {}
    costs: Dict[VertexID, float] = {source: 0.0}
    settled: Set[VertexID] = {source}

    v = source
    while True:
        for w, data in adj[v].items():
            if w in settled:
                continue
            candidate = (costs[v] + data[WEIGHT_ATTR], v, w)
            if w not in best:
                fringe.push(candidate)
                best[w] = candidate
            elif candidate[0] < best[w][0]:
                fringe.decrease_key(best[w], candidate)
                best[w] = candidate

        if fringe.empty():
            break
        dist, parent, v = fringe.pop_min()
        del best[v]
        tree.add_edge(parent, v, adj[parent][v][WEIGHT_ATTR])
        costs[v] = dist
        settled.add(v)

    logger.debug(
        "Dijkstra from %r settled %d of %d vertices", source, len(settled), len(network)
    )
    return costs, tree


def _relax_all(
    network: Network,
    dist: Dict[VertexID, float],
    pred: Dict[VertexID, VertexID],
) -> Optional[VertexID]:
    """One relaxation pass over every edge; returns the last relaxed vertex."""
    relaxed = None
    for v, nbrs in network._adj.items():
        dv = dist[v]
        if dv == math.inf:
            continue
        for w, data in nbrs.items():
            candidate = dv + data[WEIGHT_ATTR]
            if candidate < dist[w]:
                dist[w] = candidate
                pred[w] = v
                relaxed = w
    return relaxed


def _bellman_ford(
    network: Network, source: VertexID
) -> Tuple[Dict[VertexID, float], Dict[VertexID, VertexID], Optional[VertexID]]:
    _check_source(network, source)

    dist: Dict[VertexID, float] = {v: math.inf for v in network}
    pred: Dict[VertexID, VertexID] = {}
    dist[source] = 0.0

    rounds = 0
    with log_elapsed(logger, "Bellman-Ford"):
        for _ in range(len(network) - 1):
            rounds += 1
            if _relax_all(network, dist, pred) is None:
                break

    # One extra pass: any improvement now means a reachable negative cycle
    witness = _relax_all(network, dist, pred)
    logger.debug(
        "Bellman-Ford from %r converged after %d rounds; negative cycle: %s",
        source,
        rounds,
        witness is not None,
    )
    return dist, pred, witness


def bellman_ford(
    network: Network, source: VertexID
) -> Tuple[Dict[VertexID, float], Dict[VertexID, VertexID]]:
    """
    Bellman-Ford shortest paths; negative weights are allowed.

    Runs at most ``|V| - 1`` relaxation rounds over all edges and stops early
    once a round changes nothing.

    Args:
        network: The weighted network.
        source: Start vertex.

    Returns:
        A tuple of (distances, predecessors):
          - distances: Every vertex mapped to its best known distance
            (``math.inf`` when unreachable).
          - predecessors: Every reached vertex other than the source mapped to
            the tail of the last edge on its best path.

        Distances are not meaningful when ``negative_cycle_from`` reports a
        cycle.

    Raises:
        UnknownVertexError: If ``source`` is not in the network.
    """
    dist, pred, _ = _bellman_ford(network, source)
    return dist, pred


def negative_cycle_from(network: Network, source: VertexID) -> List[VertexID]:
    """
    Find a negative cycle reachable from ``source``.

    After Bellman-Ford converges, one more pass that still relaxes an edge
    ``(u, v)`` proves a negative cycle. Walking ``|V|`` predecessor links back
    from ``v`` is guaranteed to land on that cycle; the cycle is then
    collected by walking predecessors until the start repeats, and reversed
    into traversal order.

    Args:
        network: The weighted network.
        source: Start vertex.

    Returns:
        Cycle vertices in traversal order (each has an edge to the next, the
        last to the first), or an empty list when no negative cycle is
        reachable from ``source``.
    """
    _, pred, witness = _bellman_ford(network, source)
    if witness is None:
        return []

    v = witness
    for _ in range(len(network)):
        v = pred[v]

    cycle = [v]
    u = pred[v]
    while u != v:
        cycle.append(u)
        u = pred[u]
    cycle.reverse()
    logger.debug("Negative cycle reachable from %r: %r", source, cycle)
    return cycle


def predecessor_network(
    network: Network, predecessors: Dict[VertexID, VertexID]
) -> Network:
    """
    Build the predecessor network: every vertex, plus one edge
    ``predecessors[v] -> v`` carrying its weight in ``network``.
    """
    tree = _empty_copy(network)
    for v, parent in predecessors.items():
        tree.add_edge(parent, v, network.cost(parent, v))
    return tree


def path_to(
    predecessors: Dict[VertexID, VertexID], source: VertexID, target: VertexID
) -> List[VertexID]:
    """
    Reconstruct the vertex path from ``source`` to ``target``.

    Returns:
        ``[source, ..., target]``, or an empty list if ``target`` was not
        reached. A predecessor chain that loops without reaching ``source``
        also yields an empty list.
    """
    if target == source:
        return [source]
    path = [target]
    seen = {target}
    v = target
    while v != source:
        if v not in predecessors:
            return []
        v = predecessors[v]
        if v in seen:
            return []
        seen.add(v)
        path.append(v)
    path.reverse()
    return path
