"""Traversal session: graph, event log, and playback kept in sync

A session backs one visualization. Whenever the graph or its direction
changes the traversal is recorded again and playback starts over.
"""

from tarjan import (
    Graph,
    TraversalEvent,
    TraversalStats,
    build_graph,
    classify_graph,
    dedupe_edges,
    node_element_id,
    sample_graph,
    summarize,
)

from .driver import PlaybackDriver
from .surface import InMemorySurface, RenderSurface


def element_ids(graph: Graph) -> list[str]:
    """Surface element ids for every node and edge of a graph."""
    return [node_element_id(n) for n in graph.nodes] + [e.id for e in graph.edges]


class TraversalSession:
    """Owns a graph, its recorded events, and a driver replaying them."""

    def __init__(
        self,
        graph: Graph,
        surface: RenderSurface | None = None,
        max_nodes: int | None = None,
    ):
        self._owns_surface = surface is None
        self._surface = surface
        self._max_nodes = max_nodes
        self._load(graph)

    @classmethod
    def default(cls, surface: RenderSurface | None = None) -> "TraversalSession":
        return cls(sample_graph(), surface)

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def directed(self) -> bool:
        return self._graph.directed

    @property
    def events(self) -> list[TraversalEvent]:
        return list(self._events)

    @property
    def surface(self) -> RenderSurface:
        return self._surface

    @property
    def driver(self) -> PlaybackDriver:
        return self._driver

    def stats(self) -> TraversalStats:
        return summarize(self._events, len(self._graph.nodes), len(self._graph.edges))

    def apply_config(self, node_count: int | str, edge_text: str) -> Graph:
        """Replace the graph with one built from user input.

        Raises GraphValidationError and leaves the current graph untouched
        if the input is invalid.
        """
        graph = build_graph(node_count, edge_text, self.directed, self._max_nodes)
        self._load(graph)
        return graph

    def toggle_direction(self) -> bool:
        """Switch between directed and undirected traversal.

        Going undirected drops reversed duplicates ("1 0" after "0 1").
        """
        directed = not self.directed
        edges = dedupe_edges(self._graph.edges, directed)
        self._load(self._graph.model_copy(update={"directed": directed, "edges": edges}))
        return self.directed

    def _load(self, graph: Graph) -> None:
        events = classify_graph(graph)
        if self._owns_surface:
            self._surface = InMemorySurface(element_ids(graph))
        self._graph = graph
        self._events = events
        self._driver = PlaybackDriver(events, self._surface)
        self._driver.reset()
