"""Server-side components for DFS traversal playback

This package contains the FastAPI server, AG-UI streaming, configuration,
and REST API payloads. Uses the official ag-ui-protocol package for AG-UI
event types and encoding.
"""

from .app import app, encode_event
from .config import SERVER_CONFIG, ServerConfig, load_config
from .payloads import (
    ClassifyRequest,
    ClassifyResponse,
    GraphRequest,
    GraphResponse,
)

__all__ = [
    "app",
    "encode_event",
    "SERVER_CONFIG",
    "ServerConfig",
    "load_config",
    "GraphRequest",
    "GraphResponse",
    "ClassifyRequest",
    "ClassifyResponse",
]
