"""Enums for the DFS edge classification recorder

Provides enums used for node states, edge classes, and the visual classes
applied to a rendering surface during playback.
"""

from enum import Enum


class NodeState(str, Enum):
    """State of a node during DFS."""

    UNVISITED = "unvisited"
    VISITING = "visiting"  # on the active DFS path
    VISITED = "visited"


class EdgeClass(str, Enum):
    """Tarjan classification of an edge."""

    TREE = "tree"
    BACK = "back"
    FORWARD = "forward"
    CROSS = "cross"


class VisualClass(str, Enum):
    """Named classes a rendering surface applies to nodes and edges.

    Edge classes share their values with EdgeClass so a classified edge maps
    straight onto its visual class.
    """

    TREE = "tree"
    BACK = "back"
    FORWARD = "forward"
    CROSS = "cross"
    VISITING = "visiting"
    VISITED = "visited"
    CURRENT = "current"
