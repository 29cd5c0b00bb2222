"""Transport that discards everything."""

from contextlog.core.models import LogEntry


class NoopTransport:
    """Discards all entries. Used by library defaults to stay silent."""

    def write(self, entry: LogEntry) -> None:
        pass
