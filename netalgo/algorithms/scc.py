"""Strongly connected components.

Both algorithms run depth-first search with an explicit stack of
``(vertex, neighbor iterator)`` frames, so a partially explored vertex resumes
exactly where it left off and recursion depth never grows with the graph.
Component ids are 1-based and dense; the two algorithms induce the same
partition but may number it differently.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Deque, Dict, Iterator, List, Set, Tuple

from netalgo.logging import get_logger
from netalgo.types import VertexID

if TYPE_CHECKING:
    from netalgo.graph.digraph import DiGraph

logger = get_logger(__name__)


def _finish_order(
    graph: DiGraph,
    root: VertexID,
    visited: Set[VertexID],
    out: Deque[VertexID],
) -> None:
    """
    Depth-first search from ``root`` prepending each vertex to ``out`` when it
    finishes, which leaves ``out`` in reverse postorder.
    """
    adj = graph._adj
    visited.add(root)
    stack: List[Tuple[VertexID, Iterator[VertexID]]] = [(root, iter(adj[root]))]
    while stack:
        v, nbrs = stack[-1]
        for w in nbrs:
            if w not in visited:
                visited.add(w)
                stack.append((w, iter(adj[w])))
                break
        else:
            stack.pop()
            out.appendleft(v)


def scc_kosaraju(graph: DiGraph) -> Dict[VertexID, int]:
    """
    Kosaraju's algorithm.

    A first search over the reversed graph yields the vertices in decreasing
    finish time. A second search over the original graph, started from each
    unvisited vertex in that order, discovers exactly one component per start.

    Args:
        graph: The directed graph.

    Returns:
        Mapping of every vertex to its component id.
    """
    rev = graph.reverse()
    visited: Set[VertexID] = set()
    order: Deque[VertexID] = deque()
    for v in rev:
        if v not in visited:
            _finish_order(rev, v, visited, order)

    visited.clear()
    labels: Dict[VertexID, int] = {}
    name = 1
    for v in order:
        if v in visited:
            continue
        component: Deque[VertexID] = deque()
        _finish_order(graph, v, visited, component)
        for w in component:
            labels[w] = name
        name += 1

    logger.debug("Kosaraju found %d components over %d vertices", name - 1, len(labels))
    return labels


def scc_tarjan(graph: DiGraph) -> Dict[VertexID, int]:
    """
    Tarjan's algorithm.

    Each vertex gets a discovery time and a low-link value. When a vertex
    finishes with ``low == pre`` it is the root of a component, which is then
    popped off the stack of open vertices. Closed vertices have their low-link
    set above every discovery time so that cross edges into finished
    components leave open low-links untouched.

    Args:
        graph: The directed graph.

    Returns:
        Mapping of every vertex to its component id.
    """
    adj = graph._adj
    closed = len(graph) + 1
    pre: Dict[VertexID, int] = {}
    low: Dict[VertexID, int] = {}
    labels: Dict[VertexID, int] = {}
    open_vertices: List[VertexID] = []
    time = 1
    name = 1

    for root in graph:
        if root in pre:
            continue
        pre[root] = low[root] = time
        time += 1
        open_vertices.append(root)
        stack: List[Tuple[VertexID, Iterator[VertexID]]] = [(root, iter(adj[root]))]

        while stack:
            v, nbrs = stack[-1]
            descended = False
            for w in nbrs:
                if w not in pre:
                    pre[w] = low[w] = time
                    time += 1
                    open_vertices.append(w)
                    stack.append((w, iter(adj[w])))
                    descended = True
                    break
                low[v] = min(low[v], low[w])
            if descended:
                continue

            stack.pop()
            if low[v] == pre[v]:
                while True:
                    top = open_vertices.pop()
                    labels[top] = name
                    low[top] = closed
                    if top == v:
                        break
                name += 1
            if stack:
                parent = stack[-1][0]
                low[parent] = min(low[parent], low[v])

    logger.debug("Tarjan found %d components over %d vertices", name - 1, len(labels))
    return labels


def components_from_labels(labels: Dict[VertexID, int]) -> List[Set[VertexID]]:
    """Group vertices by component id, ordered by id."""
    groups: Dict[int, Set[VertexID]] = {}
    for v, name in labels.items():
        groups.setdefault(name, set()).add(v)
    return [groups[name] for name in sorted(groups)]
