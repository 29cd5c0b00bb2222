"""Loggers for code shipped as a library.

Libraries default to NoOpLogger so they never write into a consumer's
output; consumers opt in by passing ConsoleLogger or their own logger.
"""

from typing import Any

from contextlog.adapters.transports.console import ConsoleTransport
from contextlog.adapters.transports.noop import NoopTransport
from contextlog.core.config import LoggerConfig
from contextlog.core.logger import Logger

DEFAULT_LIBRARY_PREFIX = "contextlog"

NoOpLogger = Logger(
    NoopTransport(),
    LoggerConfig(level="error", timestamps=False, sanitize_errors=False),
)


def create_library_logger(prefix: str, **overrides: Any) -> Logger:
    """Create a verbose pretty console logger with a custom prefix.

    Args:
        prefix: Prefix identifying the library module, e.g. "mylib:color".
        **overrides: LoggerConfig fields to change.
    """
    config = LoggerConfig(
        level="debug", format="pretty", timestamps=True, prefix=prefix
    ).replace(**overrides)
    return Logger(ConsoleTransport(config), config)


ConsoleLogger = create_library_logger(DEFAULT_LIBRARY_PREFIX)
