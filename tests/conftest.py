"""Shared test fixtures for all test modules."""

import time
from collections.abc import Callable
from typing import Any

import pytest

from contextlog.adapters.transports.in_memory import InMemoryTransport
from contextlog.core.logger import Logger

# 2024-01-15T12:00:00.000Z
FROZEN_TIME = 1705320000.0

try:
    import httpx
except ImportError:
    httpx = None


@pytest.fixture
def transport() -> InMemoryTransport:
    """Provide an empty in-memory transport."""
    return InMemoryTransport()


@pytest.fixture
def make_logger(transport: InMemoryTransport) -> Callable[..., Logger]:
    """Factory fixture creating loggers that write to the shared transport.

    Usage:
        def test_something(make_logger, transport):
            logger = make_logger(level="debug")
            logger.debug("hello")
            assert transport.entries[0].message == "hello"
    """

    def _make(**overrides: Any) -> Logger:
        return Logger(transport, **overrides)

    return _make


@pytest.fixture
def frozen_time(monkeypatch: pytest.MonkeyPatch) -> float:
    """Pin time.time() so entry timestamps are deterministic."""
    monkeypatch.setattr(time, "time", lambda: FROZEN_TIME)
    return FROZEN_TIME


# === ASGI Test Fixtures ===


@pytest.fixture
def basic_asgi_app():
    """Basic ASGI app fixture that returns 200 OK."""
    from contextlog.adapters.frameworks.asgi import Receive, Scope, Send

    async def app(scope: Scope, receive: Receive, send: Send) -> None:
        """Simple ASGI app that returns 200 OK."""
        await send({"type": "http.response.start", "status": 200, "headers": []})
        await send({"type": "http.response.body", "body": b"OK"})

    return app


@pytest.fixture
def asgi_scope():
    """Factory fixture for creating ASGI scope dicts."""
    from contextlog.adapters.frameworks.asgi import Scope

    def _scope(method: str = "GET", path: str = "/test") -> Scope:
        return {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": b"",
            "headers": [],
        }

    return _scope


@pytest.fixture
def asgi_send_capture():
    """Fixture that returns a send callable and a responses list for capture."""

    responses: list[dict[str, object]] = []

    async def send(message: dict[str, object]) -> None:
        """Capture ASGI messages."""
        responses.append(message)

    return send, responses


@pytest.fixture
def asgi_test_client():
    """Factory fixture that creates an httpx.AsyncClient for ASGI testing."""
    if httpx is None:
        pytest.skip("httpx not installed")

    def _get_client(app):
        """Return an AsyncClient context manager for the given app."""
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        )

    return _get_client
