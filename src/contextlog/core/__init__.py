"""Logging pipeline: models, redaction, entry building and the logger core."""

from contextlog.core.config import LoggerConfig
from contextlog.core.logger import DelegatingLogger, Logger, create_simple_logger
from contextlog.core.models import ErrorInfo, LogEntry
from contextlog.core.timers import TimerMetrics, TimerRegistry

__all__ = [
    "DelegatingLogger",
    "ErrorInfo",
    "LogEntry",
    "Logger",
    "LoggerConfig",
    "TimerMetrics",
    "TimerRegistry",
    "create_simple_logger",
]
