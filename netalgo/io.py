"""Plain-text graph serialization.

Format (whitespace separated, line breaks are not significant to readers)::

    <vertex count> <edge count>
    <vertex> <vertex> ...
    <source> <destination> [<weight>]
    ...

Weights appear for networks only. Undirected graphs list each edge once.
Flow networks list their source and sink as the first two vertices.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Tuple, Union

from netalgo.graph.digraph import DiGraph
from netalgo.graph.flow_network import FlowNetwork
from netalgo.graph.network import WEIGHT_ATTR, Network
from netalgo.graph.undirected import Graph
from netalgo.types import VertexID

TextInput = Union[str, Iterable[str]]


def graph_to_text(graph: Union[DiGraph, Graph]) -> str:
    """
    Serialize a graph, network, flow network or undirected graph.

    Args:
        graph: The graph to write.

    Returns:
        The text form, newline terminated.
    """
    order: List[VertexID] = list(graph)
    if isinstance(graph, FlowNetwork):
        terminals = [graph.source, graph.sink]
        order = terminals + [v for v in order if v not in terminals]

    weighted = isinstance(graph, Network)
    undirected = isinstance(graph, Graph)
    edge_lines: List[str] = []
    seen = set()
    for v in order:
        for w, data in graph._adj[v].items():
            if undirected and w in seen:
                continue
            if weighted:
                edge_lines.append(f"{v} {w} {data[WEIGHT_ATTR]}")
            else:
                edge_lines.append(f"{v} {w}")
        seen.add(v)

    lines = [f"{graph.n()} {len(edge_lines)}", " ".join(str(v) for v in order)]
    lines.extend(edge_lines)
    return "\n".join(lines) + "\n"


def _tokens(data: TextInput) -> Iterator[str]:
    if isinstance(data, str):
        data = data.splitlines()
    for line in data:
        yield from line.split()


def _take(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"Unexpected end of input while reading {what}.") from None


def _read_header(tokens: Iterator[str]) -> Tuple[int, int]:
    counts = []
    for what in ("vertex count", "edge count"):
        token = _take(tokens, what)
        try:
            value = int(token)
        except ValueError:
            raise ValueError(f"Invalid {what} '{token}'.") from None
        if value < 0:
            raise ValueError(f"Invalid {what} '{token}'.")
        counts.append(value)
    return counts[0], counts[1]


def _read_weight(tokens: Iterator[str], index: int) -> float:
    token = _take(tokens, f"weight of edge {index}")
    try:
        return float(token)
    except ValueError:
        raise ValueError(f"Invalid weight '{token}' on edge {index}.") from None


def _check_exhausted(tokens: Iterator[str]) -> None:
    extra = next(tokens, None)
    if extra is not None:
        raise ValueError(f"Unexpected trailing token '{extra}'.")


def text_to_digraph(
    data: TextInput, vertex_type: Callable[[str], VertexID] = str
) -> DiGraph:
    """Read an unweighted directed graph."""
    tokens = _tokens(data)
    n, m = _read_header(tokens)
    graph = DiGraph()
    for i in range(n):
        graph.add_vertex(vertex_type(_take(tokens, f"vertex {i}")))
    for i in range(m):
        s = vertex_type(_take(tokens, f"source of edge {i}"))
        d = vertex_type(_take(tokens, f"destination of edge {i}"))
        graph.add_edge(s, d)
    _check_exhausted(tokens)
    return graph


def text_to_network(
    data: TextInput, vertex_type: Callable[[str], VertexID] = str
) -> Network:
    """Read a weighted directed network."""
    tokens = _tokens(data)
    n, m = _read_header(tokens)
    network = Network()
    for i in range(n):
        network.add_vertex(vertex_type(_take(tokens, f"vertex {i}")))
    for i in range(m):
        s = vertex_type(_take(tokens, f"source of edge {i}"))
        d = vertex_type(_take(tokens, f"destination of edge {i}"))
        network.add_edge(s, d, _read_weight(tokens, i))
    _check_exhausted(tokens)
    return network


def text_to_flow_network(
    data: TextInput, vertex_type: Callable[[str], VertexID] = str
) -> FlowNetwork:
    """Read a flow network; the first two vertices are the source and the sink."""
    tokens = _tokens(data)
    n, m = _read_header(tokens)
    if n < 2:
        raise ValueError(f"A flow network needs at least 2 vertices, got {n}.")
    source = vertex_type(_take(tokens, "source vertex"))
    sink = vertex_type(_take(tokens, "sink vertex"))
    network = FlowNetwork(source, sink)
    for i in range(2, n):
        network.add_vertex(vertex_type(_take(tokens, f"vertex {i}")))
    for i in range(m):
        s = vertex_type(_take(tokens, f"source of edge {i}"))
        d = vertex_type(_take(tokens, f"destination of edge {i}"))
        network.add_edge(s, d, _read_weight(tokens, i))
    _check_exhausted(tokens)
    return network


def text_to_graph(
    data: TextInput, vertex_type: Callable[[str], VertexID] = str
) -> Graph:
    """Read an undirected graph."""
    tokens = _tokens(data)
    n, m = _read_header(tokens)
    graph = Graph()
    for i in range(n):
        graph.add_vertex(vertex_type(_take(tokens, f"vertex {i}")))
    for i in range(m):
        v = vertex_type(_take(tokens, f"first endpoint of edge {i}"))
        w = vertex_type(_take(tokens, f"second endpoint of edge {i}"))
        graph.add_edge(v, w)
    _check_exhausted(tokens)
    return graph
