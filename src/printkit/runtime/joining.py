"""Joining values with delimiters.

join_to writes items separated by delim, using last for the final
boundary, e.g. "a, b and c". Items and delimiters render in plain form.

join_to writes like render_plain: it never locks, so renderers may call it
on the sink they were handed. print_join is the locked top-level form.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from printkit.sinks.protocol import exclusive

from .builder import sprint
from .render import render_plain

if TYPE_CHECKING:
    from collections.abc import Iterable

    from printkit.sinks.protocol import Sink

__all__ = ["join", "join_to", "print_join"]

_END = object()


def join_to(
    sink: Sink,
    items: Iterable[object],
    delim: object = "",
    last: object | None = None,
) -> None:
    """Write items to sink separated by delim, with last before the final item.

    Items are consumed once, with one item of lookahead, so any iterable
    works including generators.

    Args:
        sink: Destination
        items: Values to join
        delim: Separator between items
        last: Separator before the final item (None = delim)

    Example:
        >>> buf = BufferSink()
        >>> join_to(buf, ["x", "y", "z"], ", ", " and ")
        >>> buf.take()
        'x, y and z'
    """
    if last is None:
        last = delim
    iterator = iter(items)
    current = next(iterator, _END)
    if current is _END:
        return
    render_plain(sink, current)
    current = next(iterator, _END)
    while current is not _END:
        following = next(iterator, _END)
        render_plain(sink, last if following is _END else delim, current)
        current = following


def print_join(
    sink: Sink,
    items: Iterable[object],
    delim: object = "",
    last: object | None = None,
    *,
    timeout: float | None = None,
) -> None:
    """join_to inside one exclusive section on sink.

    Raises:
        TimeoutError: If the sink cannot be acquired within timeout
    """
    with exclusive(sink, timeout):
        join_to(sink, items, delim, last)


def join(items: Iterable[object], delim: object = "", last: object | None = None) -> str:
    """Return items joined as by join_to.

    Example:
        >>> join(["x", "y"], ", ", " and ")
        'x and y'
        >>> join([])
        ''
    """
    return sprint(join_to, items, delim, last)
