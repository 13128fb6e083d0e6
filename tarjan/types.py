"""Data types for the DFS edge classification recorder

These types are the single source of truth for graphs and traversal events,
used by the recorder, the playback driver, and the HTTP payloads.

ConfigDict(use_enum_values=True) keeps enums serializing as plain strings
(e.g., "tree") rather than enum objects, matching what front ends expect.
Events are frozen: once the recorder emits them they never change.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .enums import EdgeClass


def edge_id(source: int, target: int) -> str:
    """Canonical identifier for the edge (source, target) as given."""
    return f"{source}-{target}"


def node_element_id(node: int) -> str:
    """Element id of a node on a rendering surface."""
    return str(node)


class GraphEdge(BaseModel):
    """An edge between two nodes.

    In undirected mode the edge is symmetric but keeps the id built from
    (source, target) in the order it was given.
    """

    model_config = ConfigDict(frozen=True)

    source: int
    target: int

    @computed_field
    @property
    def id(self) -> str:
        return edge_id(self.source, self.target)

    def as_pair(self) -> tuple[int, int]:
        return (self.source, self.target)


class Graph(BaseModel):
    """A node set plus an edge list.

    The builder guarantees every endpoint is a node and that duplicate
    edges were removed.
    """

    nodes: list[int]
    edges: list[GraphEdge]
    directed: bool = True


class NodeEntered(BaseModel):
    """A node became active (visiting) under `parent`."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["node_entered"] = "node_entered"
    node: int
    parent: int | None = None


class NodeFinished(BaseModel):
    """A node's adjacency list was exhausted."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["node_finished"] = "node_finished"
    node: int
    parent: int | None = None


class EdgeClassified(BaseModel):
    """An edge received its tree/back/forward/cross class."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    kind: Literal["edge_classified"] = "edge_classified"
    edge_id: str
    edge_class: EdgeClass


TraversalEvent = Annotated[
    NodeEntered | NodeFinished | EdgeClassified,
    Field(discriminator="kind"),
]


class TraversalStats(BaseModel):
    """Summary counts for one recorded traversal."""

    node_count: int
    edge_count: int
    event_count: int
    tree: int = 0
    back: int = 0
    forward: int = 0
    cross: int = 0
