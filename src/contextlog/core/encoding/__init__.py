"""Wire encoders for log entries."""

from contextlog.core.encoding.ndjson import encode_entry, encode_logs

__all__ = [
    "encode_entry",
    "encode_logs",
]
