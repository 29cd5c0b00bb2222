"""Port interfaces for transports and collaborators.

These protocols define the contracts that adapters must implement.
The core depends only on these interfaces, not concrete implementations.
"""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

from contextlog.core.models import LogContext, LogEntry

T = TypeVar("T")


@runtime_checkable
class TransportPort(Protocol):
    """Port for log output.

    Adapters implementing this protocol receive finished, redacted entries.
    Examples: ConsoleTransport, JsonTransport, NoopTransport.
    """

    def write(self, entry: LogEntry) -> None:
        """Output a log entry. Must not raise."""
        ...


@runtime_checkable
class ErrorTrackerPort(Protocol):
    """Port for an external error-tracking service (e.g. Sentry)."""

    def capture_exception(
        self, error: object, context: Mapping[str, Any] | None = None
    ) -> None:
        """Capture an exception with optional context."""
        ...

    def capture_message(self, message: str, level: str | None = None) -> None:
        """Capture a message with a severity label."""
        ...

    def set_tag(self, key: str, value: str) -> None:
        """Set a tag for subsequent events."""
        ...

    def set_user(self, user: Mapping[str, str]) -> None:
        """Set user identity (id, username, email)."""
        ...


@runtime_checkable
class LoggerPort(Protocol):
    """Basic logging contract shared by every logger shape."""

    def debug(self, message: str, context: LogContext | None = None) -> None: ...

    def info(self, message: str, context: LogContext | None = None) -> None: ...

    def warn(self, message: str, context: LogContext | None = None) -> None: ...

    def error(
        self,
        message: str,
        error: object = ...,
        context: LogContext | None = None,
    ) -> None: ...


@runtime_checkable
class ExtendedLoggerPort(LoggerPort, Protocol):
    """Logging contract plus context inheritance and timing helpers."""

    def child(self, context: LogContext) -> "ExtendedLoggerPort": ...

    def set_context(self, context: LogContext) -> None: ...

    def time(self, label: str) -> Callable[[], float]: ...

    async def time_async(
        self, label: str, fn: Callable[[], Awaitable[T]]
    ) -> T: ...
