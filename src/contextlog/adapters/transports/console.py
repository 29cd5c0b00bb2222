"""Console transport with pretty or JSON formatting.

Best for development and debugging. Pretty output looks like::

    [2024-01-15T10:30:00.000Z] [MyApp] Server started {"port":3000}
"""

import json
import sys
from typing import TextIO

from contextlog.core.config import LoggerConfig
from contextlog.core.encoding.ndjson import encode_entry
from contextlog.core.models import LogEntry


def _compact(value: object) -> str:
    return json.dumps(value, default=str, separators=(",", ":"))


def format_pretty(entry: LogEntry, timestamps: bool = True) -> str:
    """Render an entry as a single human-readable line.

    Args:
        entry: The entry to render.
        timestamps: Whether to include the "[timestamp]" part.

    Returns:
        "[timestamp] message {context} {error}" with absent parts skipped.
    """
    parts: list[str] = []
    if timestamps:
        parts.append(f"[{entry.timestamp}]")
    parts.append(entry.message)
    if entry.context:
        parts.append(_compact(entry.context))
    if entry.error is not None:
        parts.append(_compact(entry.error.to_dict()))
    return " ".join(parts)


class ConsoleTransport:
    """Writes entries to a text stream, one line each.

    Args:
        config: Supplies ``format`` ("pretty" or "json") and ``timestamps``.
            Any format other than "pretty" is written as JSON.
        stream: Target stream (default: sys.stderr at write time).
    """

    def __init__(
        self, config: LoggerConfig | None = None, stream: TextIO | None = None
    ) -> None:
        self._config = config or LoggerConfig(format="pretty")
        self._stream = stream

    def write(self, entry: LogEntry) -> None:
        if self._config.format == "pretty":
            line = format_pretty(entry, self._config.timestamps)
        else:
            line = encode_entry(entry)
        stream = self._stream or sys.stderr
        stream.write(line + "\n")
