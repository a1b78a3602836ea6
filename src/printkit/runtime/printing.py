"""Printing entry points: atomic output to a sink.

print_, println and show hold the sink's exclusivity for the whole call,
so output from concurrent callers never interleaves within one call.
Renderers invoked from inside must write through render_plain /
render_literal; calling print_ on the same sink from within raises
RuntimeError instead of deadlocking.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from printkit.sinks.protocol import exclusive

from .render import render_literal, render_plain

if TYPE_CHECKING:
    from printkit.sinks.protocol import Sink

__all__ = ["print_", "println", "show"]


def print_(sink: Sink, *values: object, timeout: float | None = None) -> None:
    """Write the plain form of every value as one exclusive section.

    Args:
        sink: Destination
        *values: Values rendered in order with no separators
        timeout: Seconds to wait for exclusivity (None waits indefinitely)

    Raises:
        TimeoutError: If exclusivity is not obtained within timeout
        RuntimeError: If the calling thread already holds the sink
    """
    with exclusive(sink, timeout):
        render_plain(sink, *values)


def println(sink: Sink, *values: object, timeout: float | None = None) -> None:
    """Like print_, followed by a newline inside the same exclusive section."""
    with exclusive(sink, timeout):
        render_plain(sink, *values)
        sink.write("\n")


def show(sink: Sink, value: object, *, timeout: float | None = None) -> None:
    """Write the literal form of value as one exclusive section.

    Example:
        >>> buf = BufferSink()
        >>> show(buf, ["a", 1])
        >>> buf.take()
        '["a", 1]'
    """
    with exclusive(sink, timeout):
        render_literal(sink, value)
