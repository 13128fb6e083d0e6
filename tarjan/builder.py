"""Graph construction from user-entered text

The text format is one edge per line, "<u> <v>", with the node count given
separately. Parsing is lenient about individual lines (bad lines are
skipped and reported back) and strict about the graph as a whole (a bad
node count or an empty edge list is an error).
"""

import re
from collections.abc import Iterable

from .errors import EmptyGraphError, InvalidNodeCountError
from .types import Graph, GraphEdge

EDGE_LINE = re.compile(r"^([0-9]+)\s+([0-9]+)$", re.ASCII)
LINE_SPLIT = re.compile(r"\r?\n")

NODE_COUNT_MESSAGE = "Node count must be a positive integer"
EMPTY_GRAPH_MESSAGE = "Edge list is empty or invalid; at least one valid edge is required"


def parse_node_count(node_count: int | str, max_nodes: int | None = None) -> int:
    """Validate a node count given as an int or as form text."""
    if isinstance(node_count, bool):
        raise InvalidNodeCountError(NODE_COUNT_MESSAGE)
    if isinstance(node_count, str):
        text = node_count.strip()
        if not (text.isascii() and text.isdecimal()):
            raise InvalidNodeCountError(NODE_COUNT_MESSAGE)
        node_count = int(text)
    if node_count <= 0:
        raise InvalidNodeCountError(NODE_COUNT_MESSAGE)
    if max_nodes is not None and node_count > max_nodes:
        raise InvalidNodeCountError(f"Node count must not exceed {max_nodes}")
    return node_count


def parse_edge_lines(
    edge_text: str,
    node_count: int,
    directed: bool = True,
) -> tuple[list[GraphEdge], list[str]]:
    """Parse "u v" lines into unique edges.

    Undirected edges are deduplicated on (min, max) so "1 0" after "0 1" is
    a duplicate; the first occurrence is kept as written.

    Returns:
        (edges, skipped_lines) where skipped_lines holds every non-blank line
        that was malformed, out of range, or a duplicate
    """
    edges: list[GraphEdge] = []
    skipped: list[str] = []
    seen: set[tuple[int, int]] = set()

    for raw in LINE_SPLIT.split(edge_text):
        line = raw.strip()
        if not line:
            continue
        match = EDGE_LINE.match(line)
        if match is None:
            skipped.append(line)
            continue
        u, v = int(match.group(1)), int(match.group(2))
        if u >= node_count or v >= node_count:
            skipped.append(line)
            continue
        key = (u, v) if directed else (min(u, v), max(u, v))
        if key in seen:
            skipped.append(line)
            continue
        seen.add(key)
        edges.append(GraphEdge(source=u, target=v))

    return edges, skipped


def dedupe_edges(edges: Iterable[GraphEdge], directed: bool = True) -> list[GraphEdge]:
    """Drop repeated edges, keeping the first occurrence.

    Undirected edges compare on (min, max), as in parse_edge_lines().
    """
    unique: list[GraphEdge] = []
    seen: set[tuple[int, int]] = set()
    for edge in edges:
        u, v = edge.as_pair()
        key = (u, v) if directed else (min(u, v), max(u, v))
        if key not in seen:
            seen.add(key)
            unique.append(edge)
    return unique


def build_graph_with_report(
    node_count: int | str,
    edge_text: str,
    directed: bool = True,
    max_nodes: int | None = None,
) -> tuple[Graph, list[str]]:
    """Build a graph and also return the lines that were skipped.

    Raises:
        InvalidNodeCountError: node count is not a positive integer or too large
        EmptyGraphError: no valid edge remains
    """
    n = parse_node_count(node_count, max_nodes)
    edges, skipped = parse_edge_lines(edge_text, n, directed)
    if not edges:
        raise EmptyGraphError(EMPTY_GRAPH_MESSAGE)
    graph = Graph(nodes=list(range(n)), edges=edges, directed=directed)
    return graph, skipped


def build_graph(
    node_count: int | str,
    edge_text: str,
    directed: bool = True,
    max_nodes: int | None = None,
) -> Graph:
    """Build a graph with nodes 0..node_count-1 from edge text."""
    graph, _ = build_graph_with_report(node_count, edge_text, directed, max_nodes)
    return graph


def format_edge_lines(edges: Iterable[GraphEdge | tuple[int, int]]) -> str:
    """Render edges back into the "u v" per-line text format."""
    lines = []
    for edge in edges:
        u, v = edge.as_pair() if isinstance(edge, GraphEdge) else edge
        lines.append(f"{u} {v}")
    return "\n".join(lines)
