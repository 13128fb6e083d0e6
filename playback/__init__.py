"""Playback of recorded DFS traversals

This package provides:
- RenderSurface protocol plus in-memory and JSON Patch surfaces
- PlaybackDriver stepping through an event log with reset support
- TraversalSession tying a graph, its event log and a driver together
"""

from .driver import PlaybackDriver, PlaybackStatus
from .session import TraversalSession, element_ids
from .surface import InMemorySurface, PatchSurface, RenderSurface

__all__ = [
    "RenderSurface",
    "InMemorySurface",
    "PatchSurface",
    "PlaybackDriver",
    "PlaybackStatus",
    "TraversalSession",
    "element_ids",
]
