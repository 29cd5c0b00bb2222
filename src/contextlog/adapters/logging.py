"""Bridges between contextlog and Python's standard library logging.

``LoggingTransport`` sends contextlog entries to a stdlib logger, so an
application that already configures ``logging`` handlers keeps one output
path. ``ContextLogHandler`` goes the other way and routes stdlib records
through a contextlog logger, picking up its context and redaction.
"""

import logging

from contextlog.core.models import LogEntry, LogLevel
from contextlog.core.ports import LoggerPort

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)

# Default attributes to extract from LogRecord
_DEFAULT_INCLUDE_ATTRS = ["module", "funcName", "lineno"]

_STDLIB_LEVELS: dict[LogLevel, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def _level_for_record(levelno: int) -> LogLevel:
    """Map a stdlib level number to the nearest contextlog severity."""
    if levelno >= logging.ERROR:
        return "error"
    if levelno >= logging.WARNING:
        return "warn"
    if levelno >= logging.INFO:
        return "info"
    return "debug"


class LoggingTransport:
    """Transport that forwards entries to a stdlib logger.

    The entry's wire dict is attached as ``record.contextlog`` so formatters
    can render context and error details.

    Example:
        ```python
        logger = Logger(LoggingTransport(logging.getLogger("app")))
        ```
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("contextlog.output")

    def write(self, entry: LogEntry) -> None:
        self._logger.log(
            _STDLIB_LEVELS[entry.level],
            entry.message,
            extra={"contextlog": entry.to_dict()},
        )


class ContextLogHandler(logging.Handler):
    """Logging handler that writes records through a contextlog logger.

    Example:
        ```python
        handler = ContextLogHandler(create_worker_logger("api", "production"))
        logging.getLogger().addHandler(handler)
        ```
    """

    def __init__(
        self,
        logger: LoggerPort,
        include_attrs: list[str] | None = None,
    ) -> None:
        """Initialize the handler with a target logger.

        Args:
            logger: contextlog logger receiving the records.
            include_attrs: List of LogRecord attributes to include. Defaults to
                ["module", "funcName", "lineno"].
        """
        super().__init__()
        self._target = logger
        self._include_attrs = (
            _DEFAULT_INCLUDE_ATTRS if include_attrs is None else include_attrs
        )

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record through the target logger.

        Args:
            record: The log record to emit.
        """
        # Map of attribute names to their values from LogRecord
        attr_mapping: dict[str, str | int] = {
            "module": record.name,
            "funcName": record.funcName or "",
            "lineno": record.lineno,
            "pathname": record.pathname,
        }

        # Build context based on include_attrs configuration
        context: dict[str, object] = {
            key: attr_mapping[key] for key in self._include_attrs if key in attr_mapping
        }

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and isinstance(
                value, (str, int, float, bool)
            ):
                context[key] = value

        try:
            message = record.getMessage()
            level = _level_for_record(record.levelno)
            if level == "error":
                exc = record.exc_info[1] if record.exc_info else None
                if exc is not None:
                    self._target.error(message, exc, context)
                else:
                    self._target.error(message, context=context)
            elif level == "warn":
                self._target.warn(message, context)
            elif level == "info":
                self._target.info(message, context)
            else:
                self._target.debug(message, context)
        except Exception:
            self.handleError(record)
