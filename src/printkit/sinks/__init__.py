"""Output sinks: the byte and text destinations rendering writes into.

Exports:
    Sink: Protocol every destination implements
    exclusive: Scoped acquisition of a sink's exclusivity
    SinkLock: Owner-tracked exclusive lock each sink carries
    BufferSink: Growable in-memory buffer (captured output)
    StreamSink: Adapter over file-like streams
    stdout_sink: Shared sink for sys.stdout

Python 3.13+.
"""

from .buffer import BufferSink
from .lock import SinkLock
from .protocol import Sink, exclusive
from .stream import StreamSink, stdout_sink

__all__ = [
    "BufferSink",
    "Sink",
    "SinkLock",
    "StreamSink",
    "exclusive",
    "stdout_sink",
]
