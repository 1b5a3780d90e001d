"""Currency arbitrage detection on exchange-rate matrices.

Converting rates with ``-log(rate)`` turns a cycle whose rate product exceeds
one into a negative-weight cycle, which Bellman-Ford can report.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from netalgo.graph.network import Network
from netalgo.logging import get_logger

logger = get_logger(__name__)


def _as_rate_matrix(rates: Sequence[Sequence[float]]) -> np.ndarray:
    matrix = np.asarray(rates, dtype=float)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError(f"Rate matrix must be square, got shape {matrix.shape}.")
    off_diagonal = ~np.eye(matrix.shape[0], dtype=bool)
    if np.any(matrix[off_diagonal] <= 0):
        raise ValueError("Exchange rates must be positive.")
    return matrix


def rates_to_network(rates: Sequence[Sequence[float]]) -> Network:
    """
    Build a complete network over currency indices ``0..n-1`` where edge
    ``(i, j)`` weighs ``-log(rates[i][j])``. The diagonal is ignored.
    """
    matrix = _as_rate_matrix(rates)
    weights = -np.log(np.where(np.eye(len(matrix), dtype=bool), 1.0, matrix))
    network = Network()
    for i in range(len(matrix)):
        network.add_vertex(i)
    for i in range(len(matrix)):
        for j in range(len(matrix)):
            if i != j:
                network.add_edge(i, j, float(weights[i, j]))
    return network


def find_arbitrage(rates: Sequence[Sequence[float]], start: int = 0) -> List[int]:
    """
    Find a sequence of exchanges that ends with more of a currency than it
    started with.

    Args:
        rates: Square matrix; ``rates[i][j]`` units of currency ``j`` are
            obtained for one unit of currency ``i``.
        start: Currency index the search starts from.

    Returns:
        Currency indices of a profitable cycle in exchange order, or an empty
        list if there is none.
    """
    network = rates_to_network(rates)
    if not network.is_vertex(start):
        raise ValueError(f"Start currency {start} is out of range.")
    cycle = network.negative_cycle_from(start)
    if cycle:
        logger.debug(
            "Arbitrage cycle %r with gain %.6f", cycle, cycle_rate_product(rates, cycle)
        )
    return cycle


def cycle_rate_product(rates: Sequence[Sequence[float]], cycle: Sequence[int]) -> float:
    """Product of the rates along ``cycle`` including the closing exchange."""
    matrix = np.asarray(rates, dtype=float)
    if not cycle:
        return 1.0
    src = np.asarray(cycle)
    dst = np.roll(src, -1)
    return float(np.prod(matrix[src, dst]))
