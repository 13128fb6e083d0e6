"""FastAPI server for DFS edge classification playback

Includes:
- REST API for graph building and traversal recording
- AG-UI streaming endpoint replaying a traversal step by step
- SSE (Server-Sent Events) with JSON Patch updates of visual classes
"""

import time
import uuid
from typing import AsyncGenerator

from ag_ui.core import (
    BaseEvent,
    CustomEvent,
    RunErrorEvent,
    RunFinishedEvent,
    RunStartedEvent,
    StateDeltaEvent,
    StateSnapshotEvent,
    StepFinishedEvent,
    StepStartedEvent,
)
from ag_ui.encoder import EventEncoder
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse

from tarjan import (
    Graph,
    GraphValidationError,
    TraversalError,
    build_graph_with_report,
    classify_edges,
    classify_graph,
    edge_id,
    format_edge_lines,
    node_element_id,
    sample_graph,
    summarize,
)
from playback import PatchSurface, PlaybackDriver

from .config import SERVER_CONFIG
from .payloads import ClassifyRequest, ClassifyResponse, GraphRequest, GraphResponse

encoder = EventEncoder()


def encode_event(event: BaseEvent) -> str:
    """Encode an AG-UI event as SSE with a millisecond timestamp.

    The original event is left untouched.
    """
    stamped = event.model_copy(update={"timestamp": int(time.time() * 1000)})
    return encoder.encode(stamped)


def graph_response(graph: Graph, skipped_lines: list[str] | None = None) -> GraphResponse:
    return GraphResponse(
        nodes=graph.nodes,
        edges=graph.edges,
        directed=graph.directed,
        edge_text=format_edge_lines(graph.edges),
        skipped_lines=skipped_lines or [],
        stats=summarize(classify_graph(graph), len(graph.nodes), len(graph.edges)),
    )


# --- FastAPI App ---

app = FastAPI(
    title="Tarjan DFS Edge Classification",
    description="Step-by-step replay of DFS tree/back/forward/cross edge classification",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=SERVER_CONFIG.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/graph/default", response_model=GraphResponse)
async def get_default_graph(directed: bool = True) -> GraphResponse:
    """Return the sample graph shown before the user enters their own."""
    return graph_response(sample_graph(directed))


@app.post("/api/graph", response_model=GraphResponse)
async def build_graph_endpoint(request: GraphRequest) -> GraphResponse:
    """Build a graph from a node count and "u v" edge lines."""
    try:
        graph, skipped = build_graph_with_report(
            request.node_count,
            request.edges,
            directed=request.directed,
            max_nodes=SERVER_CONFIG.max_nodes,
        )
    except GraphValidationError as e:
        print(f"[GRAPH] Rejected input: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    print(f"[GRAPH] Built graph: nodes={len(graph.nodes)}, edges={len(graph.edges)}, skipped={len(skipped)}")
    return graph_response(graph, skipped)


@app.post("/api/classify", response_model=ClassifyResponse)
async def classify_endpoint(request: ClassifyRequest) -> ClassifyResponse:
    """Record the DFS traversal and return the full event log."""
    try:
        events = classify_edges(request.nodes, request.edges, request.directed)
    except TraversalError as e:
        print(f"[CLASSIFY] Rejected input: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    stats = summarize(events, len(set(request.nodes)), len(request.edges))
    print(f"[CLASSIFY] Recorded {stats.event_count} events "
          f"(tree={stats.tree}, back={stats.back}, forward={stats.forward}, cross={stats.cross})")
    return ClassifyResponse(events=events, stats=stats)


# --- Streaming Playback Endpoint ---


@app.post("/api/classify/stream")
async def stream_classify(request: ClassifyRequest):
    """Replay a recorded traversal with AG-UI streaming.

    Returns SSE stream with events:
    - RUN_STARTED: Playback begins
    - STATE_SNAPSHOT: Every node and edge with no visual classes
    - STEP_STARTED: One traversal event is being applied
    - STATE_DELTA: JSON Patch ops replacing the class lists that changed
    - CUSTOM (traversal_event): The traversal event itself
    - STEP_FINISHED: Event applied
    - RUN_FINISHED: Playback complete, stats as result
    - RUN_ERROR: The input could not be traversed
    """
    thread_id = str(uuid.uuid4())
    run_id = str(uuid.uuid4())

    async def event_generator() -> AsyncGenerator[str, None]:
        """Generate AG-UI SSE events."""
        yield encode_event(RunStartedEvent(thread_id=thread_id, run_id=run_id))

        try:
            events = classify_edges(request.nodes, request.edges, request.directed)
        except TraversalError as e:
            print(f"[STREAM] Traversal failed: {e}")
            yield encode_event(RunErrorEvent(message=str(e)))
            return

        nodes = list(dict.fromkeys(request.nodes))
        element_ids = [node_element_id(n) for n in nodes] + [edge_id(u, v) for u, v in request.edges]
        surface = PatchSurface(element_ids)
        driver = PlaybackDriver(events, surface)

        print(f"[STREAM] Replaying {driver.total} events (directed={request.directed})")
        yield encode_event(StateSnapshotEvent(snapshot=surface.state()))

        while not driver.is_complete():
            step_name = f"step-{driver.cursor}"
            yield encode_event(StepStartedEvent(step_name=step_name))
            event = driver.step()
            ops = surface.drain_patch()
            if ops:
                yield encode_event(StateDeltaEvent(delta=ops))
            yield encode_event(CustomEvent(name="traversal_event", value=event.model_dump(mode="json")))
            yield encode_event(StepFinishedEvent(step_name=step_name))

        stats = summarize(events, len(nodes), len(request.edges))
        yield encode_event(RunFinishedEvent(
            thread_id=thread_id,
            run_id=run_id,
            result=stats.model_dump(),
        ))
        print("[STREAM] Stream complete")

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
