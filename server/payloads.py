"""REST API request/response payload types

These types define the contract for the REST API endpoints:
- /api/graph, /api/graph/default: Build a graph from node count and edge text
- /api/classify: Record a traversal and return its events
- /api/classify/stream: Same request, streamed as AG-UI events
"""

from pydantic import BaseModel, Field

from tarjan import GraphEdge, TraversalEvent, TraversalStats


class GraphRequest(BaseModel):
    """Request body for building a graph from user-entered text."""

    node_count: int | str
    edges: str  # one "u v" pair per line
    directed: bool = True


class GraphResponse(BaseModel):
    """Response for /api/graph endpoints."""

    nodes: list[int]
    edges: list[GraphEdge]
    directed: bool
    edge_text: str  # canonical "u v" lines for the form
    skipped_lines: list[str] = []  # Lines that were malformed, out of range or duplicates
    stats: TraversalStats  # Edge class counts for the built graph


class ClassifyRequest(BaseModel):
    """Request body for recording a traversal.

    Used by both /api/classify and /api/classify/stream endpoints.
    """

    nodes: list[int]
    edges: list[tuple[int, int]] = Field(default_factory=list)
    directed: bool = True


class ClassifyResponse(BaseModel):
    """Response for /api/classify endpoint."""

    events: list[TraversalEvent]
    stats: TraversalStats
