"""JSON transport for log aggregation systems."""

import sys
from typing import TextIO

from contextlog.core.encoding.ndjson import encode_entry
from contextlog.core.models import LogEntry


class JsonTransport:
    """Writes every entry as one JSON line.

    All output goes to a single stream (default: sys.stdout at write time)
    so collectors see a uniform NDJSON feed regardless of level.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, entry: LogEntry) -> None:
        stream = self._stream or sys.stdout
        stream.write(encode_entry(entry) + "\n")
