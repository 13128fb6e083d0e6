"""Exceptions raised by the recorder and the graph builder

Builder errors carry a human-readable message meant to be shown to the user
as-is; recorder errors signal a caller bug (the builder never produces them).
"""


class TraversalError(Exception):
    """Base class for recorder failures."""


class UnknownNodeError(TraversalError):
    """An edge references a node that is not in the node set."""

    def __init__(self, node: int, edge: tuple[int, int]):
        self.node = node
        self.edge = edge
        super().__init__(f"Edge {edge[0]} {edge[1]} references unknown node {node}")


class GraphValidationError(ValueError):
    """User-entered graph text could not be turned into a graph."""


class InvalidNodeCountError(GraphValidationError):
    """Node count is missing, not a positive integer, or above the limit."""


class EmptyGraphError(GraphValidationError):
    """No valid edge survived parsing."""
