"""Construction of immutable LogEntry records."""

import time
import traceback
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from contextlog.core.config import LoggerConfig
from contextlog.core.models import MISSING, ErrorInfo, LogContext, LogEntry, LogLevel
from contextlog.core.redaction import redact_fields, sanitize_message


def iso_timestamp(seconds: float | None = None) -> str:
    """Format a Unix timestamp as ISO-8601 UTC with milliseconds.

    Args:
        seconds: Unix timestamp (default: time.time()).

    Returns:
        A string such as "2024-01-15T12:00:00.000Z".
    """
    if seconds is None:
        seconds = time.time()
    moment = datetime.fromtimestamp(seconds, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_message(message: str, prefix: str | None) -> str:
    """Apply the configured prefix as "[prefix] message"."""
    return f"[{prefix}] {message}" if prefix else message


def merge_context(
    global_context: Mapping[str, Any],
    context: Mapping[str, Any] | None,
    redact: tuple[str, ...],
) -> LogContext | None:
    """Overlay call-site context on global context and redact the result.

    Returns:
        The merged, redacted dict, or None when both inputs are empty.
    """
    if not context and not global_context:
        return None
    merged = {**global_context, **(context or {})}
    return redact_fields(merged, redact)


def format_error(error: object, sanitize: bool) -> ErrorInfo:
    """Convert an arbitrary error value into ErrorInfo.

    Exceptions keep their class name and message. When sanitizing, secrets
    are scrubbed from the message and the traceback is dropped. A string
    ``code`` attribute is carried over. Any other value is reported as
    name "Unknown" with its ``str()`` as the message.
    """
    if isinstance(error, BaseException):
        raw_message = str(error)
        code = getattr(error, "code", None)
        return ErrorInfo(
            name=type(error).__name__,
            message=sanitize_message(raw_message) if sanitize else raw_message,
            code=code if isinstance(code, str) else None,
            stack=None if sanitize else _format_stack(error),
        )

    return ErrorInfo(name="Unknown", message=str(error))


def _format_stack(error: BaseException) -> str:
    return "".join(
        traceback.format_exception(type(error), error, error.__traceback__)
    )


def build_entry(
    level: LogLevel,
    message: str,
    config: LoggerConfig,
    global_context: Mapping[str, Any],
    context: Mapping[str, Any] | None = None,
    error: object = MISSING,
) -> LogEntry:
    """Build one structured log entry.

    Args:
        level: Severity of the call.
        message: Raw message from the caller.
        config: Owning logger's configuration.
        global_context: Owning logger's global context.
        context: Call-site context, overriding global keys.
        error: Error value; leave as MISSING when there is none.

    Returns:
        A frozen LogEntry with context redacted and error formatted.
    """
    return LogEntry(
        level=level,
        message=format_message(message, config.prefix),
        timestamp=iso_timestamp(),
        context=merge_context(global_context, context, config.redact_fields),
        error=None if error is MISSING else format_error(error, config.sanitize_errors),
    )
