"""ASGI middleware providing request-scoped loggers.

Works with any ASGI server or framework (uvicorn, Starlette, FastAPI)
without depending on one. For every HTTP request the middleware builds a
JSON worker logger carrying the request id, exposes it to the application
as ``scope["state"]["logger"]``, echoes the request id in the response and
logs one summary line when the request finishes.
"""

import fnmatch
import time
from collections.abc import Callable, Coroutine
from typing import Any, TextIO

from contextlog.core.logger import Logger
from contextlog.core.models import LogLevel
from contextlog.presets.worker import create_worker_logger, get_request_id

# ASGI type aliases
Scope = dict[str, Any]
Receive = Callable[[], Coroutine[Any, Any, dict[str, Any]]]
Send = Callable[[dict[str, Any]], Coroutine[Any, Any, None]]
ASGIApp = Callable[[Scope, Receive, Send], Coroutine[Any, Any, None]]


def _extract_request_id(scope: Scope, header_name: str = "X-Request-ID") -> str:
    """Extract or generate a request ID from ASGI scope headers.

    Searches for the specified header (case-insensitive), then ``cf-ray``.
    If neither is present, generates a new UUID.
    """
    headers: list[tuple[bytes, bytes]] = scope.get("headers", [])
    decoded = {
        name.decode("latin-1"): value.decode("utf-8", errors="replace")
        for name, value in headers
    }
    wanted = header_name.lower()
    for name, value in decoded.items():
        if name.lower() == wanted and value:
            return value
    return get_request_id(decoded)


def _get_log_level_for_status(status_code: int) -> LogLevel:
    """Determine log level based on HTTP status code.

    Maps status codes to log levels:
    - 400-499 (4xx) → "warn"
    - 500-599 (5xx) → "error"
    - Other → "info"
    """
    if 400 <= status_code < 500:
        return "warn"
    if 500 <= status_code < 600:
        return "error"
    return "info"


class RequestLoggerMiddleware:
    """ASGI middleware attaching a request logger to every HTTP request."""

    def __init__(
        self,
        app: ASGIApp,
        service: str,
        environment: str,
        version: str | None = None,
        request_id_header: str = "X-Request-ID",
        exclude_paths: list[str] | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize the middleware.

        Args:
            app: The ASGI application to wrap.
            service: Service name put on every entry.
            environment: Deployment environment put on every entry.
            version: Optional API version put on every entry.
            request_id_header: Header to read and echo the request id with.
            exclude_paths: Paths whose summary line is skipped. Supports
                exact matches and wildcard patterns (e.g. "/health*").
            stream: Output stream for the JSON transport.
        """
        self.app = app
        self.service = service
        self.environment = environment
        self.version = version
        self.request_id_header = request_id_header
        self.exclude_paths = exclude_paths or []
        self.stream = stream

    def _path_excluded(self, path: str) -> bool:
        """Check if path matches any pattern in exclude_paths."""
        return any(fnmatch.fnmatch(path, pattern) for pattern in self.exclude_paths)

    def create_logger(self, request_id: str) -> Logger:
        return create_worker_logger(
            service=self.service,
            environment=self.environment,
            version=self.version,
            request_id=request_id,
            stream=self.stream,
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI callable interface that processes requests through the wrapped app."""
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start_time = time.perf_counter()
        request_id = _extract_request_id(scope, self.request_id_header)
        logger = self.create_logger(request_id)
        scope.setdefault("state", {})["logger"] = logger
        header = (self.request_id_header.lower().encode(), request_id.encode())
        captured: dict[str, Any] = {"status": None}

        async def wrapped_send(message: dict[str, Any]) -> None:
            if message["type"] == "http.response.start":
                captured["status"] = message["status"]
                message = {
                    **message,
                    "headers": [*message.get("headers", []), header],
                }
            await send(message)

        try:
            await self.app(scope, receive, wrapped_send)
        except Exception as exc:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"{scope['method']} {scope['path']}",
                exc,
                {"status": 500, "duration_ms": duration_ms},
            )
            raise

        if self._path_excluded(scope["path"]):
            return
        status = captured["status"] or 0
        duration_ms = (time.perf_counter() - start_time) * 1000
        context = {"status": status, "duration_ms": duration_ms}
        message = f"{scope['method']} {scope['path']}"
        level = _get_log_level_for_status(status)
        if level == "error":
            logger.error(message, context=context)
        elif level == "warn":
            logger.warn(message, context)
        else:
            logger.info(message, context)
