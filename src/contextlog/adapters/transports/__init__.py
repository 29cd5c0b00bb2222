"""Transport adapters implementing TransportPort."""

from contextlog.adapters.transports.console import ConsoleTransport, format_pretty
from contextlog.adapters.transports.in_memory import (
    InMemoryTransport,
    RingBufferTransport,
)
from contextlog.adapters.transports.json import JsonTransport
from contextlog.adapters.transports.noop import NoopTransport

__all__ = [
    "ConsoleTransport",
    "InMemoryTransport",
    "JsonTransport",
    "NoopTransport",
    "RingBufferTransport",
    "format_pretty",
]
