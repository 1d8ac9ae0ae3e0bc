from __future__ import annotations

import logging
import socket
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request, Response, status
from starlette.types import Receive, Scope, Send

from ..core.errors import ServerBindError

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
INDEX_FILE = "index.html"
NOT_FOUND_BODY = b"404 Not Found"


def resolve_request_path(out_dir: Path, target: str) -> Path:
    """Map a literal request target to a path under ``out_dir``.

    ``/`` maps to ``index.html``; any other target loses its first character
    and is joined onto ``out_dir`` as is. The result is not normalized, so
    ``..`` segments are not contained.
    """
    if target == "/":
        return out_dir / INDEX_FILE
    return out_dir / target[1:]


def request_target(request: Request) -> str:
    """Return the request target as sent: undecoded path plus query string."""
    raw_path = request.scope.get("raw_path") or request.url.path.encode("utf-8")
    target = raw_path.decode("latin-1")
    query = request.scope.get("query_string", b"")
    if query:
        target = f"{target}?{query.decode('latin-1')}"
    return target


class OutputDirectory:
    """ASGI endpoint answering every request method from ``out_dir``."""

    def __init__(self, out_dir: Path) -> None:
        self.out_dir = out_dir

    def respond(self, request: Request) -> Response:
        target = request_target(request)
        file_path = resolve_request_path(self.out_dir, target)
        if not file_path.is_file():
            logger.debug(f"{request.method} {target} -> 404")
            return Response(content=NOT_FOUND_BODY, status_code=status.HTTP_404_NOT_FOUND)
        logger.debug(f"{request.method} {target} -> {file_path}")
        return Response(content=file_path.read_bytes(), status_code=status.HTTP_200_OK)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        response = self.respond(Request(scope, receive))
        await response(scope, receive, send)


def create_app(out_dir: Path) -> FastAPI:
    app = FastAPI(title="mdsite", docs_url=None, redoc_url=None, openapi_url=None)
    # An ASGI endpoint gets a route with no method list.
    app.add_route("/{full_path:path}", OutputDirectory(out_dir))
    return app


class SiteServer:
    """Serve ``out_dir`` on ``host:port`` until :meth:`stop` is called."""

    def __init__(self, out_dir: Path, port: int, host: str = DEFAULT_HOST) -> None:
        self.out_dir = out_dir
        self.host = host
        self.port = port
        self._socket: socket.socket | None = None
        self._server = uvicorn.Server(
            uvicorn.Config(
                create_app(out_dir),
                host=host,
                port=port,
                lifespan="off",
                log_config=None,
                access_log=False,
                workers=1,
            )
        )

    @property
    def started(self) -> bool:
        return self._server.started

    @property
    def address(self) -> tuple[str, int]:
        if self._socket is None:
            return self.host, self.port
        host, port = self._socket.getsockname()[:2]
        return host, port

    @property
    def url(self) -> str:
        host, port = self.address
        return f"http://{host}:{port}"

    def bind(self) -> socket.socket:
        """Bind the listening socket.

        Raises:
            ServerBindError: If the address cannot be bound
        """
        if self._socket is not None:
            return self._socket
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((self.host, self.port))
        except OSError as e:
            sock.close()
            raise ServerBindError(
                f"Failed to start server on {self.host}:{self.port}: {e}"
            ) from e
        self._socket = sock
        return sock

    def run(self) -> None:
        """Bind (if needed) and serve requests until stopped."""
        sock = self.bind()
        if not (self.out_dir / INDEX_FILE).exists():
            logger.warning(f"No '{INDEX_FILE}' found in '{self.out_dir}'")

        logger.info(f"Serving on {self.url}")
        try:
            self._server.run(sockets=[sock])
        finally:
            sock.close()
            self._socket = None

    def stop(self) -> None:
        self._server.should_exit = True
