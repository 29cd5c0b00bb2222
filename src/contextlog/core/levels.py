"""Severity ordering and level filtering."""

from contextlog.core.models import LogLevel

# Log levels in order of severity
LOG_LEVELS: tuple[LogLevel, ...] = ("debug", "info", "warn", "error")

DEFAULT_LEVEL: LogLevel = "info"


def is_valid_level(level: object) -> bool:
    """Return True if level is one of the four recognised severities."""
    return level in LOG_LEVELS


def level_rank(level: LogLevel) -> int:
    """Return the position of level in the severity order.

    Raises:
        ValueError: If level is not a recognised severity.
    """
    return LOG_LEVELS.index(level)


def should_log(minimum: LogLevel, candidate: LogLevel) -> bool:
    """Decide whether a call at candidate severity passes the minimum.

    Args:
        minimum: The configured threshold.
        candidate: The severity of the log call.

    Returns:
        True when candidate is at least as severe as minimum.
    """
    return level_rank(candidate) >= level_rank(minimum)
