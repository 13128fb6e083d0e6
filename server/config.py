"""Server configuration

Values come from the environment (TARJAN_*), with command-line flags from
`python -m server` taking precedence for host and port.
"""

import os
from dataclasses import dataclass, field


def _default_origins() -> list[str]:
    return ["*"]


@dataclass
class ServerConfig:
    """Configuration for the HTTP adapter.

    Attributes:
        host: Interface to bind
        port: Port to listen on
        max_nodes: Largest node count accepted when building graphs
        cors_origins: Origins allowed by the CORS middleware
    """

    host: str = "0.0.0.0"
    port: int = 8000
    max_nodes: int = 500
    cors_origins: list[str] = field(default_factory=_default_origins)


def _int_setting(env, name: str) -> int:
    try:
        return int(env[name])
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {env[name]!r}") from None


def load_config(environ: dict[str, str] | None = None) -> ServerConfig:
    """Build a ServerConfig from environment variables.

    Recognized variables:
        TARJAN_HOST, TARJAN_PORT, TARJAN_MAX_NODES,
        TARJAN_CORS_ORIGINS (comma separated)
    """
    env = os.environ if environ is None else environ
    config = ServerConfig()

    if env.get("TARJAN_HOST"):
        config.host = env["TARJAN_HOST"]
    if env.get("TARJAN_PORT"):
        config.port = _int_setting(env, "TARJAN_PORT")
    if env.get("TARJAN_MAX_NODES"):
        config.max_nodes = _int_setting(env, "TARJAN_MAX_NODES")
    if env.get("TARJAN_CORS_ORIGINS"):
        config.cors_origins = [o.strip() for o in env["TARJAN_CORS_ORIGINS"].split(",") if o.strip()]

    return config


# Global server configuration, read once at import
SERVER_CONFIG: ServerConfig = load_config()
