"""Entry point for running the server as a module

Usage:
    tarjan-server
    tarjan-server --port 8080
    python -m server --host 127.0.0.1 --port 8080
"""

import sys

import uvicorn

from .config import SERVER_CONFIG


def main():
    """Run the server."""
    host = SERVER_CONFIG.host
    port = SERVER_CONFIG.port
    args = sys.argv[1:]
    for i, arg in enumerate(args):
        if arg == "--port" and i + 1 < len(args):
            port = int(args[i + 1])
        elif arg == "--host" and i + 1 < len(args):
            host = args[i + 1]

    print(f"[SERVER] Listening on {host}:{port} (max_nodes={SERVER_CONFIG.max_nodes})")
    uvicorn.run("server.app:app", host=host, port=port)


if __name__ == "__main__":
    main()
