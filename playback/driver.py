"""Step-by-step replay of a recorded traversal

The driver owns no algorithmic logic: it walks the recorder's event log
with a cursor and applies each event to a rendering surface. The event log
is never modified, so several drivers may replay the same log.
"""

from collections.abc import Sequence
from enum import Enum

from tarjan import (
    EdgeClass,
    EdgeClassified,
    NodeEntered,
    NodeFinished,
    TraversalEvent,
    VisualClass,
    node_element_id,
)

from .surface import RenderSurface


class PlaybackStatus(str, Enum):
    """Position of a driver within its event log."""

    IDLE = "idle"
    PLAYING = "playing"
    COMPLETE = "complete"


class PlaybackDriver:
    """Replays traversal events onto a surface one at a time.

    Visual rules:
    - NodeEntered: the previous current node loses "current"; the node loses
      "visited" and gains "visiting" and "current"
    - NodeFinished: the node loses "visiting" and "current" and gains
      "visited"; its parent, if any, becomes current again
    - EdgeClassified: the edge gains its class
    """

    def __init__(self, events: Sequence[TraversalEvent], surface: RenderSurface):
        self._events = tuple(events)
        self._surface = surface
        self._cursor = 0
        self._current: str | None = None

    @property
    def events(self) -> tuple[TraversalEvent, ...]:
        return self._events

    @property
    def surface(self) -> RenderSurface:
        return self._surface

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def total(self) -> int:
        return len(self._events)

    @property
    def status(self) -> PlaybackStatus:
        if self.is_complete():
            return PlaybackStatus.COMPLETE
        if self._cursor == 0:
            return PlaybackStatus.IDLE
        return PlaybackStatus.PLAYING

    def is_complete(self) -> bool:
        return self._cursor >= len(self._events)

    def step(self) -> TraversalEvent | None:
        """Apply the next event and return it, or None when complete."""
        if self.is_complete():
            return None
        event = self._events[self._cursor]
        self._apply(event)
        self._cursor += 1
        return event

    def run(self) -> list[TraversalEvent]:
        """Apply every remaining event."""
        applied = []
        while (event := self.step()) is not None:
            applied.append(event)
        return applied

    def reset(self) -> None:
        """Clear the surface and rewind to the first event."""
        self._surface.clear()
        self._cursor = 0
        self._current = None

    def _apply(self, event: TraversalEvent) -> None:
        surface = self._surface
        match event:
            case NodeEntered(node=node):
                element = node_element_id(node)
                if self._current is not None:
                    surface.remove_class(self._current, VisualClass.CURRENT)
                surface.remove_class(element, VisualClass.VISITED)
                surface.add_class(element, VisualClass.VISITING)
                surface.add_class(element, VisualClass.CURRENT)
                self._current = element
            case NodeFinished(node=node, parent=parent):
                element = node_element_id(node)
                surface.remove_class(element, VisualClass.VISITING)
                surface.remove_class(element, VisualClass.CURRENT)
                surface.add_class(element, VisualClass.VISITED)
                if parent is not None:
                    self._current = node_element_id(parent)
                    surface.add_class(self._current, VisualClass.CURRENT)
                else:
                    self._current = None
            case EdgeClassified(edge_id=eid, edge_class=edge_class):
                surface.add_class(eid, VisualClass(EdgeClass(edge_class).value))
            case _:
                raise TypeError(f"Unknown traversal event: {event!r}")
