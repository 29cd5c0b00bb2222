"""contextlog: structured logging with context inheritance and redaction.

Example:
    ```python
    from contextlog import create_worker_logger

    logger = create_worker_logger("orders-api", "production", request_id="abc-123")
    logger.info("Order placed", {"operation": "checkout", "token": "s3cr3t"})
    # {"level":"info","message":"Order placed",...,"context":{...,"token":"[REDACTED]"}}
    ```
"""

import logging

from contextlog.adapters.logging import ContextLogHandler, LoggingTransport
from contextlog.adapters.transports import (
    ConsoleTransport,
    InMemoryTransport,
    JsonTransport,
    NoopTransport,
    RingBufferTransport,
)
from contextlog.core.config import LoggerConfig
from contextlog.core.encoding.ndjson import encode_entry, encode_logs
from contextlog.core.levels import LOG_LEVELS, should_log
from contextlog.core.logger import DelegatingLogger, Logger, create_simple_logger
from contextlog.core.models import (
    CORE_REDACT_FIELDS,
    DEFAULT_REDACT_FIELDS,
    MISSING,
    REDACTED,
    WORKER_REDACT_FIELDS,
    ErrorInfo,
    LogContext,
    LogEntry,
    LogLevel,
)
from contextlog.core.ports import (
    ErrorTrackerPort,
    ExtendedLoggerPort,
    LoggerPort,
    TransportPort,
)
from contextlog.core.redaction import redact_fields, sanitize_message
from contextlog.core.timers import TimerMetrics, TimerRegistry
from contextlog.presets import (
    ConsoleLogger,
    ErrorTrackingLogger,
    NoOpLogger,
    create_browser_logger,
    create_library_logger,
    create_request_logger,
    create_worker_logger,
    get_request_id,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CORE_REDACT_FIELDS",
    "DEFAULT_REDACT_FIELDS",
    "LOG_LEVELS",
    "MISSING",
    "REDACTED",
    "WORKER_REDACT_FIELDS",
    "ConsoleLogger",
    "ConsoleTransport",
    "ContextLogHandler",
    "DelegatingLogger",
    "ErrorInfo",
    "ErrorTrackerPort",
    "ErrorTrackingLogger",
    "ExtendedLoggerPort",
    "InMemoryTransport",
    "JsonTransport",
    "LogContext",
    "LogEntry",
    "LogLevel",
    "Logger",
    "LoggerConfig",
    "LoggerPort",
    "LoggingTransport",
    "NoOpLogger",
    "NoopTransport",
    "RingBufferTransport",
    "TimerMetrics",
    "TimerRegistry",
    "TransportPort",
    "create_browser_logger",
    "create_library_logger",
    "create_request_logger",
    "create_simple_logger",
    "encode_entry",
    "encode_logs",
    "get_request_id",
    "redact_fields",
    "sanitize_message",
    "should_log",
]
