"""DFS traversal recorder with Tarjan edge classification

This module provides:
- classify_edges(): run DFS over every component and record the event log
- classify_graph(): the same, for a built Graph
- summarize(): per-class counts for a recorded log

The recorder is a pure function of its inputs. Node state, discovery times
and adjacency live in arrays indexed by each node's position in the node
list and are discarded when the call returns.

DFS runs on an explicit stack of frames instead of recursion. A frame is
pushed when a tree edge is followed and popped when its adjacency cursor is
exhausted, so the events of a subtree appear contiguously before the
parent's next neighbor, exactly as in the recursive formulation.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .enums import EdgeClass, NodeState
from .errors import UnknownNodeError
from .types import (
    EdgeClassified,
    Graph,
    GraphEdge,
    NodeEntered,
    NodeFinished,
    TraversalEvent,
    TraversalStats,
    edge_id,
)

EdgeLike = GraphEdge | tuple[int, int] | Sequence[int]


@dataclass
class _Frame:
    node: int  # slot, not node id
    parent: int | None  # slot
    cursor: int = 0


def _endpoints(edge: EdgeLike) -> tuple[int, int]:
    if isinstance(edge, GraphEdge):
        return edge.as_pair()
    source, target = edge
    return (source, target)


def _build_adjacency(
    slot: dict[int, int],
    edges: Iterable[EdgeLike],
    directed: bool,
) -> list[list[tuple[int, str]]]:
    """Build per-slot neighbor lists of (neighbor slot, edge id).

    Raises UnknownNodeError before any traversal happens.
    """
    adj: list[list[tuple[int, str]]] = [[] for _ in slot]
    for edge in edges:
        u, v = _endpoints(edge)
        for endpoint in (u, v):
            if endpoint not in slot:
                raise UnknownNodeError(endpoint, (u, v))
        eid = edge_id(u, v)
        adj[slot[u]].append((slot[v], eid))
        # Undirected: the reverse direction shares the id so the edge is
        # classified once. A self-loop only needs one entry.
        if not directed and u != v:
            adj[slot[v]].append((slot[u], eid))
    return adj


def classify_edges(
    nodes: Iterable[int],
    edges: Iterable[EdgeLike],
    directed: bool = True,
) -> list[TraversalEvent]:
    """Run DFS over all components and record its events.

    Roots are taken in node order; neighbors are visited in edge insertion
    order. In directed mode an edge to an already finished node is a forward
    edge when that node was discovered after the current one, otherwise a
    cross edge. In undirected mode only tree and back edges exist.

    Args:
        nodes: Node ids in root-selection order (duplicates are ignored)
        edges: (u, v) pairs or GraphEdge models
        directed: Whether edges are one-way

    Returns:
        Ordered list of NodeEntered, EdgeClassified and NodeFinished events

    Raises:
        UnknownNodeError: an edge endpoint is not in `nodes`
    """
    order = list(dict.fromkeys(nodes))
    if not order:
        return []

    slot = {node: i for i, node in enumerate(order)}
    adj = _build_adjacency(slot, edges, directed)

    state = [NodeState.UNVISITED] * len(order)
    dfn = [0] * len(order)
    time = 0
    events: list[TraversalEvent] = []

    def node_of(s: int | None) -> int | None:
        return None if s is None else order[s]

    def enter(s: int, parent: int | None) -> _Frame:
        nonlocal time
        time += 1
        dfn[s] = time
        state[s] = NodeState.VISITING
        events.append(NodeEntered(node=order[s], parent=node_of(parent)))
        return _Frame(node=s, parent=parent)

    for root in range(len(order)):
        if state[root] is not NodeState.UNVISITED:
            continue

        stack = [enter(root, None)]
        while stack:
            frame = stack[-1]
            u = frame.node
            neighbors = adj[u]

            if frame.cursor == len(neighbors):
                state[u] = NodeState.VISITED
                events.append(NodeFinished(node=order[u], parent=node_of(frame.parent)))
                stack.pop()
                continue

            v, eid = neighbors[frame.cursor]
            frame.cursor += 1

            if not directed and v == frame.parent:
                continue

            if state[v] is NodeState.UNVISITED:
                events.append(EdgeClassified(edge_id=eid, edge_class=EdgeClass.TREE))
                stack.append(enter(v, u))
            elif state[v] is NodeState.VISITING:
                events.append(EdgeClassified(edge_id=eid, edge_class=EdgeClass.BACK))
            elif directed:
                if dfn[v] > dfn[u]:
                    edge_class = EdgeClass.FORWARD
                else:
                    edge_class = EdgeClass.CROSS
                events.append(EdgeClassified(edge_id=eid, edge_class=edge_class))

    return events


def classify_graph(graph: Graph) -> list[TraversalEvent]:
    """Record the traversal of a built graph."""
    return classify_edges(graph.nodes, graph.edges, graph.directed)


def summarize(
    events: Sequence[TraversalEvent],
    node_count: int,
    edge_count: int,
) -> TraversalStats:
    """Count classified edges per class in an event log."""
    stats = TraversalStats(
        node_count=node_count,
        edge_count=edge_count,
        event_count=len(events),
    )
    for event in events:
        if isinstance(event, EdgeClassified):
            field = EdgeClass(event.edge_class).value
            setattr(stats, field, getattr(stats, field) + 1)
    return stats
