"""Logging core and delegating child loggers.

``Logger`` owns a configuration, a global context and exactly one
transport. ``Logger.child()`` returns a ``DelegatingLogger`` that layers
extra context on top and forwards every call back to its parent, so the
configuration and transport are shared rather than copied and later
``set_context`` calls on the parent are visible through the child.

Example:
    ```python
    from contextlog import Logger, JsonTransport

    logger = Logger(JsonTransport(), level="debug")
    logger.set_context({"service": "api"})
    request_logger = logger.child({"requestId": "abc-123"})
    request_logger.info("Processing request", {"operation": "fetch"})
    ```
"""

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Generator, Mapping
from contextlib import contextmanager
from typing import Any, TypeVar

from contextlog.core.config import LoggerConfig
from contextlog.core.entries import build_entry
from contextlog.core.levels import should_log
from contextlog.core.models import MISSING, LogContext, LogEntry, LogLevel
from contextlog.core.ports import TransportPort

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class _TimingMixin(ABC):
    """Timing helpers built on top of a ``debug`` method."""

    @abstractmethod
    def debug(self, message: str, context: LogContext | None = None) -> None: ...

    def time(self, label: str) -> Callable[[], float]:
        """Start a timer.

        Args:
            label: Label used in the timing message.

        Returns:
            A callable that logs "<label>: <ms>ms" at debug level with
            ``duration`` and ``label`` context and returns the elapsed
            milliseconds.
        """
        start = time.perf_counter()

        def end() -> float:
            duration = (time.perf_counter() - start) * 1000
            self.debug(f"{label}: {duration:.2f}ms", {"duration": duration, "label": label})
            return duration

        return end

    async def time_async(self, label: str, fn: Callable[[], Awaitable[T]]) -> T:
        """Await ``fn()`` and log how long it took.

        The timing entry is emitted whether ``fn`` returns or raises; its
        result or exception is passed through unchanged.
        """
        end = self.time(label)
        try:
            return await fn()
        finally:
            end()

    @contextmanager
    def timed(self, label: str) -> Generator[None, None, None]:
        """Context manager that logs the elapsed time of its block."""
        end = self.time(label)
        try:
            yield
        finally:
            end()


class Logger(_TimingMixin):
    """Structured logger writing redacted entries to one transport.

    Args:
        transport: Output strategy receiving finished entries.
        config: Logger configuration (default: LoggerConfig()).
        **overrides: Config fields applied on top of ``config``.
    """

    def __init__(
        self,
        transport: TransportPort,
        config: LoggerConfig | None = None,
        **overrides: Any,
    ) -> None:
        base = config or LoggerConfig()
        self._config = base.replace(**overrides) if overrides else base
        self._transport = transport
        self._global_context: LogContext = {}

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def transport(self) -> TransportPort:
        return self._transport

    @property
    def global_context(self) -> LogContext:
        """A copy of the current global context (not redacted)."""
        return dict(self._global_context)

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Return True if a call at ``level`` would be emitted."""
        return should_log(self._config.level, level)

    def _log(
        self,
        level: LogLevel,
        message: str,
        context: Mapping[str, Any] | None = None,
        error: object = MISSING,
    ) -> None:
        if not self.is_enabled_for(level):
            return
        try:
            entry = build_entry(
                level,
                message,
                self._config,
                self._global_context,
                context=context,
                error=error,
            )
        except Exception:
            _logger.exception("Failed to build %s log entry %r", level, message)
            return
        self._dispatch(entry)

    def _dispatch(self, entry: LogEntry) -> None:
        try:
            self._transport.write(entry)
        except Exception:
            _logger.exception(
                "Transport %s failed to write log entry", type(self._transport).__name__
            )

    def debug(self, message: str, context: LogContext | None = None) -> None:
        self._log("debug", message, context)

    def info(self, message: str, context: LogContext | None = None) -> None:
        self._log("info", message, context)

    def warn(self, message: str, context: LogContext | None = None) -> None:
        self._log("warn", message, context)

    def error(
        self,
        message: str,
        error: object = MISSING,
        context: LogContext | None = None,
    ) -> None:
        """Log at error level.

        Args:
            message: The log message.
            error: Exception or any other value describing the failure.
            context: Optional call-site context.
        """
        self._log("error", message, context, error)

    def set_context(self, context: LogContext) -> None:
        """Merge ``context`` into the global context; new keys win.

        Values are stored as given; redaction happens when entries are built.
        """
        self._global_context = {**self._global_context, **context}

    def child(self, context: LogContext) -> "DelegatingLogger":
        """Create a logger that adds ``context`` to every call."""
        return DelegatingLogger(self, context)


class DelegatingLogger(_TimingMixin):
    """Context layer forwarding every call to a parent logger.

    Holds a reference to its parent and its own context dict, nothing else.
    Nested children chain through each other, so a grandchild merges the
    root's global context, the child layer, its own layer and the call-site
    context in that order of increasing precedence.
    """

    def __init__(self, parent: "Logger | DelegatingLogger", context: LogContext) -> None:
        self._parent = parent
        self._context: LogContext = dict(context)

    @property
    def parent(self) -> "Logger | DelegatingLogger":
        return self._parent

    @property
    def context(self) -> LogContext:
        """A copy of this logger's own context layer."""
        return dict(self._context)

    @property
    def config(self) -> LoggerConfig:
        return self._parent.config

    def _merge(self, context: LogContext | None) -> LogContext:
        return {**self._context, **context} if context else dict(self._context)

    def debug(self, message: str, context: LogContext | None = None) -> None:
        self._parent.debug(message, self._merge(context))

    def info(self, message: str, context: LogContext | None = None) -> None:
        self._parent.info(message, self._merge(context))

    def warn(self, message: str, context: LogContext | None = None) -> None:
        self._parent.warn(message, self._merge(context))

    def error(
        self,
        message: str,
        error: object = MISSING,
        context: LogContext | None = None,
    ) -> None:
        self._parent.error(message, error, self._merge(context))

    def set_context(self, context: LogContext) -> None:
        """Merge ``context`` into this child's layer only."""
        self._context.update(context)

    def child(self, context: LogContext) -> "DelegatingLogger":
        return DelegatingLogger(self, context)


class CallableTransport:
    """Transport adapter around a plain ``write(entry)`` function."""

    def __init__(self, write_fn: Callable[[LogEntry], None]) -> None:
        self._write_fn = write_fn

    def write(self, entry: LogEntry) -> None:
        self._write_fn(entry)


def create_simple_logger(
    write_fn: Callable[[LogEntry], None],
    config: LoggerConfig | None = None,
    **overrides: Any,
) -> Logger:
    """Create a logger that hands every entry to ``write_fn``.

    Args:
        write_fn: Function receiving each finished LogEntry.
        config: Optional configuration.
        **overrides: Config fields applied on top of ``config``.

    Returns:
        A Logger backed by a CallableTransport.
    """
    return Logger(CallableTransport(write_fn), config, **overrides)
