"""In-memory transports that keep entries for inspection."""

from collections import deque

from contextlog.core.models import LogEntry, LogLevel


class InMemoryTransport:
    """Stores log entries in a list.

    Suitable for testing and for inspecting what an application logged.
    """

    def __init__(self) -> None:
        self._entries: list[LogEntry] = []

    def write(self, entry: LogEntry) -> None:
        """Store a log entry."""
        self._entries.append(entry)

    @property
    def entries(self) -> list[LogEntry]:
        return list(self._entries)

    def read(self, level: LogLevel | None = None) -> list[LogEntry]:
        """Return stored entries in write order, optionally for one level."""
        return [e for e in self._entries if level is None or e.level == level]

    def clear(self) -> None:
        self._entries.clear()


class RingBufferTransport:
    """Stores log entries in a fixed-size circular buffer.

    When the buffer is full, the oldest entry is evicted to make room.

    Args:
        max_size: Maximum number of entries to keep.
    """

    def __init__(self, max_size: int) -> None:
        self._buffer: deque[LogEntry] = deque(maxlen=max_size)

    def write(self, entry: LogEntry) -> None:
        """Store a log entry, evicting the oldest when full."""
        self._buffer.append(entry)

    @property
    def entries(self) -> list[LogEntry]:
        return list(self._buffer)

    def read(self, level: LogLevel | None = None) -> list[LogEntry]:
        """Return buffered entries oldest first, optionally for one level."""
        return [e for e in self._buffer if level is None or e.level == level]
