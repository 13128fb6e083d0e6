"""DFS edge classification package

This package provides:
- Graph and event types (Graph, GraphEdge, NodeEntered, NodeFinished, EdgeClassified)
- Enums (NodeState, EdgeClass, VisualClass)
- The traversal recorder (classify_edges) producing a replayable event log
- The graph builder turning "u v" edge text into a Graph

Nothing in this package performs I/O; the playback and server packages
consume the event log it produces.
"""

from .builder import (
    build_graph,
    build_graph_with_report,
    dedupe_edges,
    format_edge_lines,
    parse_edge_lines,
    parse_node_count,
)
from .enums import EdgeClass, NodeState, VisualClass
from .errors import (
    EmptyGraphError,
    GraphValidationError,
    InvalidNodeCountError,
    TraversalError,
    UnknownNodeError,
)
from .recorder import classify_edges, classify_graph, summarize
from .samples import SAMPLE_EDGES, SAMPLE_NODES, sample_graph
from .types import (
    EdgeClassified,
    Graph,
    GraphEdge,
    NodeEntered,
    NodeFinished,
    TraversalEvent,
    TraversalStats,
    edge_id,
    node_element_id,
)

__all__ = [
    # Enums
    "NodeState",
    "EdgeClass",
    "VisualClass",
    # Types
    "Graph",
    "GraphEdge",
    "NodeEntered",
    "NodeFinished",
    "EdgeClassified",
    "TraversalEvent",
    "TraversalStats",
    "edge_id",
    "node_element_id",
    # Errors
    "TraversalError",
    "UnknownNodeError",
    "GraphValidationError",
    "InvalidNodeCountError",
    "EmptyGraphError",
    # Recorder
    "classify_edges",
    "classify_graph",
    "summarize",
    # Builder
    "build_graph",
    "build_graph_with_report",
    "dedupe_edges",
    "parse_edge_lines",
    "parse_node_count",
    "format_edge_lines",
    # Samples
    "SAMPLE_NODES",
    "SAMPLE_EDGES",
    "sample_graph",
]
