"""Traversals and structural queries on undirected graphs.

``bfs`` follows out-edges and therefore also works on directed graphs.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Dict, Iterator, List, Set, Tuple, Union

from netalgo.algorithms.types import DfsResult
from netalgo.exceptions import NotEulerianError, UnknownVertexError
from netalgo.types import VertexID

if TYPE_CHECKING:
    from netalgo.graph.digraph import DiGraph
    from netalgo.graph.undirected import Graph


def bfs(graph: Union[Graph, DiGraph], source: VertexID) -> Dict[VertexID, VertexID]:
    """
    Breadth-first search.

    Returns:
        Parent of every vertex reachable from ``source``; the source is its
        own parent.
    """
    if source not in graph._node:
        raise UnknownVertexError(f"Source vertex '{source}' is not in the graph.")
    adj = graph._adj
    parent = {source: source}
    queue = deque([source])
    while queue:
        front = queue.popleft()
        for w in adj[front]:
            if w not in parent:
                parent[w] = front
                queue.append(w)
    return parent


def dfs(graph: Graph, source: VertexID, time: int = 1) -> DfsResult:
    """
    Depth-first search over an undirected graph from ``source``.

    Discovery and finish times share one clock starting at ``time``. An
    edge to an already discovered ancestor other than the tree parent is a
    back edge and lowers the low-link of the vertex.
    """
    if source not in graph._node:
        raise UnknownVertexError(f"Source vertex '{source}' is not in the graph.")
    adj = graph._adj
    pre: Dict[VertexID, int] = {source: time}
    low: Dict[VertexID, int] = {source: time}
    post: Dict[VertexID, int] = {}
    tree: Dict[VertexID, VertexID] = {}
    back: Dict[VertexID, VertexID] = {}
    time += 1

    stack: List[Tuple[VertexID, Iterator[VertexID]]] = [(source, iter(adj[source]))]
    while stack:
        v, nbrs = stack[-1]
        for w in nbrs:
            if w not in pre:
                tree[w] = v
                pre[w] = low[w] = time
                time += 1
                stack.append((w, iter(adj[w])))
                break
            if tree.get(v) != w and pre[w] < pre[v]:
                back[v] = w
                low[v] = min(low[v], pre[w])
        else:
            stack.pop()
            post[v] = time
            time += 1
            if stack:
                parent = stack[-1][0]
                low[parent] = min(low[parent], low[v])

    return DfsResult(pre=pre, post=post, low=low, tree=tree, back=back)


def count_components(graph: Graph) -> int:
    """Number of connected components."""
    visited: Set[VertexID] = set()
    count = 0
    for v in graph:
        if v not in visited:
            count += 1
            visited.update(bfs(graph, v))
    return count


def is_bipartite(graph: Graph) -> bool:
    """Two-color every component by breadth-first search."""
    adj = graph._adj
    color: Dict[VertexID, int] = {}
    for v in graph:
        if v in color:
            continue
        color[v] = 0
        queue = deque([v])
        while queue:
            front = queue.popleft()
            for w in adj[front]:
                if w not in color:
                    color[w] = 1 - color[front]
                    queue.append(w)
                elif color[w] == color[front]:
                    return False
    return True


def eulerian_cycle(graph: Graph) -> List[VertexID]:
    """
    Hierholzer's algorithm on a private copy of the graph.

    Returns:
        Vertices of a closed walk that uses every edge exactly once, starting
        and ending at the first vertex of the graph.

    Raises:
        NotEulerianError: If the graph is not connected or has a vertex of
            odd degree.
    """
    if not graph.is_eulerian():
        raise NotEulerianError("Graph is not Eulerian.")

    work = graph.copy()
    adj = work._adj
    start = next(iter(work))
    stack = [start]
    cycle: List[VertexID] = []
    while stack:
        top = stack[-1]
        if adj[top]:
            w = next(iter(adj[top]))
            work.remove_edge(top, w)
            stack.append(w)
        else:
            cycle.append(stack.pop())
    return cycle
