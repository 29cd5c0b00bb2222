"""Preset for interactive (developer console) applications.

In development the logger is verbose and shows raw errors. In production
it only emits warnings and errors, sanitizes error messages and can forward
both to an external error tracker.
"""

import logging
import os
from collections.abc import Callable, Mapping
from typing import TextIO

from contextlog.adapters.transports.console import ConsoleTransport
from contextlog.core.config import LoggerConfig
from contextlog.core.logger import Logger
from contextlog.core.models import MISSING, LogContext
from contextlog.core.ports import ErrorTrackerPort, TransportPort

_logger = logging.getLogger(__name__)

# Checked in order; the first one that is set decides
DEV_ENV_VARS = ("CONTEXTLOG_ENV", "PYTHON_ENV", "ENVIRONMENT")


def default_is_dev(environ: Mapping[str, str] | None = None) -> bool:
    """Return True when the environment says "development".

    Defaults to False (production) when none of DEV_ENV_VARS is set.
    """
    env = os.environ if environ is None else environ
    for name in DEV_ENV_VARS:
        value = env.get(name)
        if value:
            return value.strip().lower() == "development"
    return False


class ErrorTrackingLogger(Logger):
    """Logger that also reports errors and warnings to an error tracker.

    The normal transport write always happens first; tracker failures are
    logged and never propagate to the caller.
    """

    def __init__(
        self,
        transport: TransportPort,
        error_tracker: ErrorTrackerPort,
        config: LoggerConfig | None = None,
    ) -> None:
        super().__init__(transport, config)
        self._tracker = error_tracker

    @property
    def error_tracker(self) -> ErrorTrackerPort:
        return self._tracker

    def error(
        self,
        message: str,
        error: object = MISSING,
        context: LogContext | None = None,
    ) -> None:
        super().error(message, error, context)
        try:
            if isinstance(error, BaseException):
                self._tracker.capture_exception(error, context)
            elif error:
                self._tracker.capture_message(f"{message}: {error}", "error")
            else:
                self._tracker.capture_message(message, "error")
        except Exception:
            _logger.exception("Error tracker failed to capture error")

    def warn(self, message: str, context: LogContext | None = None) -> None:
        super().warn(message, context)
        try:
            self._tracker.capture_message(message, "warning")
        except Exception:
            _logger.exception("Error tracker failed to capture warning")


def create_browser_logger(
    dev_only: bool = True,
    is_dev: Callable[[], bool] | None = None,
    error_tracker: ErrorTrackerPort | None = None,
    prefix: str = "contextlog",
    stream: TextIO | None = None,
) -> Logger:
    """Create a console logger tuned for development vs production.

    Args:
        dev_only: Reserved; production output is already limited to warn.
        is_dev: Development-mode detector (default: default_is_dev).
        error_tracker: Optional tracker used in production only.
        prefix: Message prefix.
        stream: Output stream for the console transport.

    Returns:
        A Logger, or an ErrorTrackingLogger in production with a tracker.
    """
    dev_mode = (is_dev or default_is_dev)()

    config = LoggerConfig(
        level="debug" if dev_mode else "warn",
        format="pretty",
        timestamps=True,
        prefix=prefix,
        sanitize_errors=not dev_mode,
    )
    transport = ConsoleTransport(config, stream=stream)

    if error_tracker is not None and not dev_mode:
        return ErrorTrackingLogger(transport, error_tracker, config)
    return Logger(transport, config)
