"""Sample graph shown before the user enters their own

Eight nodes with two back edges (3 -> 1 and 6 -> 4), a cross edge (4 -> 2)
and a forward edge (0 -> 7) when traversed as a directed graph.
"""

from .types import Graph, GraphEdge

SAMPLE_NODES = [0, 1, 2, 3, 4, 5, 6, 7]

SAMPLE_EDGES = [
    (0, 1),
    (1, 2),
    (2, 3),
    (3, 1),  # back
    (0, 4),
    (4, 2),  # cross
    (4, 5),
    (5, 6),
    (6, 4),  # back
    (5, 7),
    (0, 7),  # forward
]


def sample_graph(directed: bool = True) -> Graph:
    """Return a fresh copy of the sample graph."""
    return Graph(
        nodes=list(SAMPLE_NODES),
        edges=[GraphEdge(source=u, target=v) for u, v in SAMPLE_EDGES],
        directed=directed,
    )
