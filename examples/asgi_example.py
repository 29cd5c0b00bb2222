"""Example ASGI application with request-scoped structured logging.

Run with:
    uvicorn examples.asgi_example:app --reload

Every request gets a JSON logger carrying service, environment and request
id. Handlers reach it through ``scope["state"]["logger"]``; the middleware
logs one summary line per request and echoes ``X-Request-ID``.

Endpoints:
    /          - Says hello, logs a child entry with timing
    /fail      - Raises, producing an error entry with a sanitized message
    /health    - Excluded from request summaries
"""

import asyncio
import json

from contextlog import Logger
from contextlog.adapters.frameworks.asgi import (
    Receive,
    RequestLoggerMiddleware,
    Scope,
    Send,
)


async def _respond(send: Send, status: int, body: dict[str, str]) -> None:
    await send(
        {
            "type": "http.response.start",
            "status": status,
            "headers": [(b"content-type", b"application/json")],
        }
    )
    await send({"type": "http.response.body", "body": json.dumps(body).encode()})


async def _load_greeting() -> str:
    # Simulate some work
    await asyncio.sleep(0.01)
    return "hello"


async def application(scope: Scope, receive: Receive, send: Send) -> None:
    logger: Logger = scope["state"]["logger"]
    path = scope["path"]

    if path == "/fail":
        raise ConnectionError("upstream rejected password=hunter2")
    if path == "/health":
        await _respond(send, 200, {"status": "ok"})
        return

    handler_logger = logger.child({"handler": "root"})
    greeting = await handler_logger.time_async("load-greeting", _load_greeting)
    handler_logger.info("Greeting prepared", {"api_key": "abc", "length": len(greeting)})
    await _respond(send, 200, {"message": greeting})


app = RequestLoggerMiddleware(
    application,
    service="example-api",
    environment="development",
    version="v1",
    exclude_paths=["/health"],
)
