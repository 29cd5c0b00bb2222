"""Core domain models for structured log entries."""

from dataclasses import dataclass
from typing import Any, Literal

LogLevel = Literal["debug", "info", "warn", "error"]
LogFormat = Literal["json", "pretty"]
LogContext = dict[str, Any]

# Sentinel written in place of any redacted value
REDACTED = "[REDACTED]"

# Core fields to redact from context; shared by every preset
CORE_REDACT_FIELDS: tuple[str, ...] = (
    "password",
    "token",
    "secret",
    "authorization",
    "cookie",
    "api_key",
    "apiKey",
    "access_token",
    "refresh_token",
)

# Service secrets only worker deployments carry
WORKER_SPECIFIC_REDACT_FIELDS: tuple[str, ...] = (
    "jwt_secret",
    "bot_api_secret",
    "bot_signing_secret",
    "discord_client_secret",
)

WORKER_REDACT_FIELDS: tuple[str, ...] = (
    CORE_REDACT_FIELDS + WORKER_SPECIFIC_REDACT_FIELDS
)

DEFAULT_REDACT_FIELDS = CORE_REDACT_FIELDS


class _Missing:
    """Marker for an argument that was not passed at all."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass(frozen=True)
class ErrorInfo:
    """Error details attached to a log entry.

    Attributes:
        name: Exception class name, or "Unknown" for non-exception values.
        message: Error message, sanitized when the logger sanitizes errors.
        code: Optional string error code copied from the exception.
        stack: Formatted traceback, only present when not sanitizing.
    """

    name: str
    message: str
    code: str | None = None
    stack: str | None = None

    def to_dict(self) -> dict[str, str]:
        """Return the wire representation, omitting unset optional keys."""
        data = {"name": self.name, "message": self.message}
        if self.code is not None:
            data["code"] = self.code
        if self.stack is not None:
            data["stack"] = self.stack
        return data


@dataclass(frozen=True)
class LogEntry:
    """A structured log entry.

    Attributes:
        level: Severity (debug, info, warn, error).
        message: The log message, already prefixed.
        timestamp: ISO-8601 UTC timestamp captured when the entry was built.
        context: Merged and redacted context, None when there is none.
        error: Formatted error information, if an error was logged.
    """

    level: LogLevel
    message: str
    timestamp: str
    context: LogContext | None = None
    error: ErrorInfo | None = None

    def __post_init__(self) -> None:
        # An empty mapping means "no context"; never carry {} on an entry
        if self.context is not None and len(self.context) == 0:
            object.__setattr__(self, "context", None)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation in its stable key order."""
        data: dict[str, Any] = {
            "level": self.level,
            "message": self.message,
            "timestamp": self.timestamp,
        }
        if self.context is not None:
            data["context"] = dict(self.context)
        if self.error is not None:
            data["error"] = self.error.to_dict()
        return data
