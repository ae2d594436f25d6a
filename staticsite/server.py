import socket
import sys
from typing import Optional

import uvicorn

from .config import Settings
from .main import create_app


def bind_socket(host: str, port: int) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    return sock


def run(settings: Optional[Settings] = None) -> None:
    """Bind the port, announce the root directory and serve until stopped."""
    settings = settings or Settings.from_env()
    try:
        sock = bind_socket(settings.host, settings.port)
    except OSError as exc:
        print(f"Could not bind to {settings.host}:{settings.port}: {exc}", file=sys.stderr)
        raise SystemExit(1)

    print(f"Server listening at http://localhost:{settings.port}")
    print(f"Serving static files from: {settings.root_dir}")

    # No request logging; uvicorn still reports its own errors.
    config = uvicorn.Config(create_app(settings), log_level="warning", access_log=False)
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    except KeyboardInterrupt:
        pass
    finally:
        sock.close()
