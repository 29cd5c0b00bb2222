"""Preset for request-serving workers emitting JSON logs.

Every entry carries service, environment and (optionally) version and
request id so aggregated logs can be filtered and correlated.
"""

import uuid
from collections.abc import Mapping
from typing import TextIO

from contextlog.adapters.transports.json import JsonTransport
from contextlog.core.config import LoggerConfig
from contextlog.core.logger import Logger
from contextlog.core.models import WORKER_REDACT_FIELDS, LogContext, LogLevel

DEFAULT_SERVICE_NAME = "contextlog-worker"


def create_worker_logger(
    service: str,
    environment: str,
    version: str | None = None,
    level: LogLevel | None = None,
    request_id: str | None = None,
    stream: TextIO | None = None,
) -> Logger:
    """Create a JSON logger with service context.

    Args:
        service: Service name for log aggregation.
        environment: Deployment environment (production, staging, ...).
        version: Optional API version.
        level: Minimum level (default: "info" in production, else "debug").
        request_id: Optional request correlation id.
        stream: Output stream for the JSON transport.
    """
    config = LoggerConfig(
        level=level or ("info" if environment == "production" else "debug"),
        format="json",
        timestamps=True,
        sanitize_errors=True,
        redact_fields=WORKER_REDACT_FIELDS,
    )
    logger = Logger(JsonTransport(stream), config)

    context: LogContext = {"service": service, "environment": environment}
    if version:
        context["version"] = version
    if request_id:
        context["requestId"] = request_id
    logger.set_context(context)

    return logger


def create_request_logger(
    env: Mapping[str, str],
    request_id: str,
    stream: TextIO | None = None,
) -> Logger:
    """Create a request-scoped logger from deployment settings.

    Reads ``ENVIRONMENT``, ``API_VERSION`` and ``SERVICE_NAME`` from env.
    """
    return create_worker_logger(
        service=env.get("SERVICE_NAME") or DEFAULT_SERVICE_NAME,
        environment=env.get("ENVIRONMENT", ""),
        version=env.get("API_VERSION"),
        request_id=request_id,
        stream=stream,
    )


def get_request_id(headers: Mapping[str, str]) -> str:
    """Return the request id from headers or generate one.

    Looks at ``x-request-id`` then ``cf-ray`` (case-insensitive), falling
    back to a new UUID4.
    """
    lowered = {name.lower(): value for name, value in headers.items()}
    return lowered.get("x-request-id") or lowered.get("cf-ray") or str(uuid.uuid4())
