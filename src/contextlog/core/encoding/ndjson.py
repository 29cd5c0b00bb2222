"""JSON and NDJSON encoders for log entries.

The encoded shape ``{level, message, timestamp, context?, error?}`` is what
downstream aggregation consumes; keys appear in that order and optional
keys are omitted rather than written as null.
"""

import json
from collections.abc import Iterable

from contextlog.core.models import LogEntry


def encode_entry(entry: LogEntry) -> str:
    """Encode a single log entry as one compact JSON object.

    Values that are not JSON serializable are written using ``str()``.
    """
    return json.dumps(entry.to_dict(), default=str, separators=(",", ":"))


def encode_logs(entries: Iterable[LogEntry]) -> str:
    """Encode log entries to newline-delimited JSON.

    Args:
        entries: An iterable of LogEntry objects.

    Returns:
        NDJSON string with one JSON object per line.
        Empty string if no entries.
    """
    lines = [encode_entry(entry) for entry in entries]

    if not lines:
        return ""

    return "\n".join(lines) + "\n"
