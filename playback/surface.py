"""Rendering surfaces for traversal playback

A surface only knows element ids (str(node) for nodes, the edge id for
edges) and the named visual classes applied to them. How a class looks is
up to whatever front end sits behind the surface.
"""

from typing import Any, Protocol

from tarjan import VisualClass


class RenderSurface(Protocol):
    """What the playback driver needs from a rendering surface."""

    def add_class(self, element_id: str, visual_class: VisualClass) -> None: ...

    def remove_class(self, element_id: str, visual_class: VisualClass) -> None: ...

    def clear(self) -> None: ...


class InMemorySurface:
    """Surface that keeps element classes in a dict.

    Elements registered up front always appear in snapshots, even with no
    classes; unknown element ids are added on first use.
    """

    def __init__(self, element_ids: list[str] | None = None):
        self._classes: dict[str, set[str]] = {eid: set() for eid in element_ids or []}

    def add_class(self, element_id: str, visual_class: VisualClass) -> None:
        self._classes.setdefault(element_id, set()).add(VisualClass(visual_class).value)

    def remove_class(self, element_id: str, visual_class: VisualClass) -> None:
        self._classes.setdefault(element_id, set()).discard(VisualClass(visual_class).value)

    def clear(self) -> None:
        for classes in self._classes.values():
            classes.clear()

    def classes_of(self, element_id: str) -> set[str]:
        return set(self._classes.get(element_id, ()))

    def snapshot(self) -> dict[str, list[str]]:
        """Sorted class lists per element, safe to serialize."""
        return {eid: sorted(classes) for eid, classes in self._classes.items()}


class PatchSurface(InMemorySurface):
    """In-memory surface that also records changes as JSON Patch ops.

    The state document it describes is {"classes": {element_id: [...]}};
    drain_patch() returns one RFC 6902 "replace" op per element touched since
    the previous drain.
    """

    def __init__(self, element_ids: list[str] | None = None):
        super().__init__(element_ids)
        self._dirty: list[str] = []

    def _touch(self, element_id: str) -> None:
        if element_id not in self._dirty:
            self._dirty.append(element_id)

    def add_class(self, element_id: str, visual_class: VisualClass) -> None:
        super().add_class(element_id, visual_class)
        self._touch(element_id)

    def remove_class(self, element_id: str, visual_class: VisualClass) -> None:
        super().remove_class(element_id, visual_class)
        self._touch(element_id)

    def clear(self) -> None:
        super().clear()
        self._dirty.clear()

    def state(self) -> dict[str, Any]:
        return {"classes": self.snapshot()}

    def drain_patch(self) -> list[dict[str, Any]]:
        # Element ids are digits and dashes, no JSON Pointer escaping needed.
        ops = [
            {
                "op": "replace",
                "path": f"/classes/{eid}",
                "value": sorted(self._classes[eid]),
            }
            for eid in self._dirty
        ]
        self._dirty.clear()
        return ops
