"""Logger configuration.

A LoggerConfig is immutable once built. Invalid values are never rejected:
an unknown level falls back to "info" so a misconfigured deployment still
logs instead of crashing.
"""

import dataclasses
import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from contextlog.core.levels import DEFAULT_LEVEL, is_valid_level
from contextlog.core.models import DEFAULT_REDACT_FIELDS, LogFormat, LogLevel

_logger = logging.getLogger(__name__)

ENV_PREFIX = "CONTEXTLOG_"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class LoggerConfig:
    """Configuration shared by a logger and all of its children.

    Attributes:
        level: Minimum severity to emit (default "info").
        format: Output shape, "json" or "pretty" (default "json").
        timestamps: Whether human-readable output shows timestamps.
        prefix: Optional prefix rendered as "[prefix] message".
        sanitize_errors: Scrub secrets from error messages and drop stacks.
        redact_fields: Context keys whose values are replaced on output.
    """

    level: LogLevel = DEFAULT_LEVEL
    format: LogFormat = "json"
    timestamps: bool = True
    prefix: str | None = None
    sanitize_errors: bool = True
    redact_fields: tuple[str, ...] = DEFAULT_REDACT_FIELDS

    def __post_init__(self) -> None:
        if not is_valid_level(self.level):
            _logger.warning(
                "Unknown log level %r, falling back to %r", self.level, DEFAULT_LEVEL
            )
            object.__setattr__(self, "level", DEFAULT_LEVEL)
        # Accept any iterable (lists from callers) but store a tuple
        if not isinstance(self.redact_fields, tuple):
            object.__setattr__(self, "redact_fields", tuple(self.redact_fields))

    def replace(self, **changes: Any) -> "LoggerConfig":
        """Return a copy of this config with the given fields changed."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        prefix: str = ENV_PREFIX,
        **defaults: Any,
    ) -> "LoggerConfig":
        """Build a config from environment variables.

        Reads ``<prefix>LEVEL``, ``FORMAT``, ``TIMESTAMPS``, ``PREFIX``,
        ``SANITIZE_ERRORS`` and ``REDACT_FIELDS`` (comma separated).
        Unparseable booleans keep their default.

        Args:
            environ: Mapping to read from (default: os.environ).
            prefix: Variable name prefix (default: "CONTEXTLOG_").
            **defaults: Field values used when a variable is not set.

        Returns:
            A new LoggerConfig.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = dict(defaults)

        level = env.get(f"{prefix}LEVEL")
        if level:
            values["level"] = level.strip().lower()

        fmt = env.get(f"{prefix}FORMAT")
        if fmt:
            values["format"] = fmt.strip().lower()

        log_prefix = env.get(f"{prefix}PREFIX")
        if log_prefix:
            values["prefix"] = log_prefix

        for field_name in ("timestamps", "sanitize_errors"):
            raw = env.get(f"{prefix}{field_name.upper()}")
            parsed = _parse_bool(raw)
            if parsed is not None:
                values[field_name] = parsed

        redact = env.get(f"{prefix}REDACT_FIELDS")
        if redact:
            values["redact_fields"] = _split_fields(redact.split(","))

        return cls(**values)


def _parse_bool(raw: str | None) -> bool | None:
    """Parse a boolean environment value, None if missing or unrecognised."""
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    _logger.warning("Ignoring unrecognised boolean value %r", raw)
    return None


def _split_fields(fields: Iterable[str]) -> tuple[str, ...]:
    """Strip names and drop empties, preserving order and first occurrence."""
    seen: dict[str, None] = {}
    for name in fields:
        name = name.strip()
        if name:
            seen.setdefault(name, None)
    return tuple(seen)
