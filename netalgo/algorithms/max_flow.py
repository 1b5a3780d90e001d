"""Maximum flow by shortest augmenting paths (Edmonds-Karp)."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Dict, Literal, Set, Tuple, Union, overload

from netalgo.algorithms.types import FlowSummary
from netalgo.config import ALGORITHM_CONFIG
from netalgo.graph.flow_network import Flow
from netalgo.graph.network import WEIGHT_ATTR
from netalgo.logging import get_logger, log_elapsed
from netalgo.types import Edge, VertexID, Weight

if TYPE_CHECKING:
    from netalgo.graph.flow_network import FlowNetwork

logger = get_logger(__name__)


def _residual_bfs(
    network: FlowNetwork, stop_at_sink: bool = True
) -> Dict[VertexID, VertexID]:
    """
    Breadth-first search from the source over edges with residual capacity.

    Returns:
        Discovering predecessor of every reached vertex; the source maps to
        itself.
    """
    tol = ALGORITHM_CONFIG.min_residual_capacity
    adj = network._adj
    source, sink = network.source, network.sink
    parent: Dict[VertexID, VertexID] = {source: source}
    queue = deque([source])
    while queue:
        v = queue.popleft()
        for w, data in adj[v].items():
            if w in parent or data[WEIGHT_ATTR] <= tol:
                continue
            parent[w] = v
            if stop_at_sink and w == sink:
                return parent
            queue.append(w)
    return parent


def _new_flow(network: FlowNetwork) -> Flow:
    flow = Flow(network.source, network.sink)
    for v in network:
        flow.add_vertex(v)
    return flow


def augmenting_path(network: FlowNetwork) -> Flow:
    """
    Find one fewest-edges augmenting path and push its bottleneck along it.

    ``network`` is treated as a residual network and updated in place: each
    path edge loses the bottleneck (and disappears when exhausted), and the
    reverse edge gains it (and is created when missing).

    Args:
        network: Residual network to augment.

    Returns:
        The flow increment along the path, or an empty Flow if the sink is
        unreachable.
    """
    tol = ALGORITHM_CONFIG.min_residual_capacity
    source, sink = network.source, network.sink
    parent = _residual_bfs(network)
    flow = _new_flow(network)
    if sink not in parent:
        return flow

    adj = network._adj
    bottleneck = float("inf")
    v = sink
    while v != source:
        bottleneck = min(bottleneck, adj[parent[v]][v][WEIGHT_ATTR])
        v = parent[v]

    v = sink
    while v != source:
        u = parent[v]
        flow.add_edge(u, v, bottleneck)

        network.increase_cost(u, v, -bottleneck)
        if adj[u][v][WEIGHT_ATTR] <= tol:
            network.remove_edge(u, v)
        if v in adj and u in adj[v]:
            network.increase_cost(v, u, bottleneck)
        else:
            network.add_edge(v, u, bottleneck)
        v = u

    return flow


def _build_summary(
    network: FlowNetwork, residual: FlowNetwork, total: Flow
) -> FlowSummary:
    reachable: Set[VertexID] = set(_residual_bfs(residual, stop_at_sink=False))
    edge_flow: Dict[Edge, Weight] = {
        (s, d): w for s, d, w in total.weighted_edges()
    }
    residual_cap: Dict[Edge, Weight] = {
        (s, d): w for s, d, w in residual.weighted_edges()
    }
    min_cut = sorted(
        (s, d)
        for s, nbrs in network._adj.items()
        if s in reachable
        for d in nbrs
        if d not in reachable
    )
    return FlowSummary(
        total_flow=total.value(),
        edge_flow=edge_flow,
        residual_cap=residual_cap,
        reachable=reachable,
        min_cut=min_cut,
    )


@overload
def calc_max_flow(
    network: FlowNetwork, *, return_summary: Literal[False] = False
) -> Flow: ...


@overload
def calc_max_flow(
    network: FlowNetwork, *, return_summary: Literal[True]
) -> Tuple[Flow, FlowSummary]: ...


def calc_max_flow(
    network: FlowNetwork, *, return_summary: bool = False
) -> Union[Flow, Tuple[Flow, FlowSummary]]:
    """Compute the maximum flow from ``network.source`` to ``network.sink``.

    Augments along fewest-edges paths on a private residual copy until the
    sink becomes unreachable, accumulating the increments into one Flow.
    Breadth-first path selection bounds the number of augmentations by
    O(V * E) whatever the capacities.

    Args:
        network: The capacitated network; it is not modified.
        return_summary: If True, also return a FlowSummary with residual
            capacities and the minimum cut.

    Returns:
        Union[Flow, tuple]:
            - If not return_summary: the Flow (``flow.value()`` is the max-flow value)
            - Otherwise: tuple[Flow, FlowSummary]

    Examples:
        >>> from netalgo.graph.flow_network import FlowNetwork
        >>> net = FlowNetwork("s", "t")
        >>> net.add_vertex("a")
        >>> net.add_edge("s", "a", 10)
        >>> net.add_edge("a", "t", 5)
        >>> net.add_edge("s", "t", 3)
        >>> calc_max_flow(net).value()
        8
    """
    residual = network.copy()
    total = _new_flow(network)
    augmentations = 0
    with log_elapsed(logger, "Edmonds-Karp"):
        while True:
            increment = augmenting_path(residual)
            if increment.empty():
                break
            total += increment
            augmentations += 1

    logger.debug(
        "Max flow %r -> %r: value %s after %d augmentations",
        network.source,
        network.sink,
        total.value(),
        augmentations,
    )
    if return_summary:
        return total, _build_summary(network, residual, total)
    return total
