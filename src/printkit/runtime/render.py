"""Two-mode rendering protocol.

Every value has two text forms:
    - plain: canonical, undecorated text ("abc", 1.5, true)
    - literal: self-describing text suitable for debugging ("\\"abc\\"", [1, 2])

render_plain and render_literal write these forms to a sink. They never
lock and never buffer; callers that need atomic output use the printing
entry points, which hold the sink's exclusivity around them.

Resolution order for one value:
    1. A renderer registered for the value's type (nearest along the MRO)
       in the shared RendererRegistry
    2. The value's own render_plain / render_literal method
    3. Built-in forms for str, bool, None, numbers, bytes and containers
    4. str(value) for plain, repr(value) for literal

A type with a literal form but no plain form renders plain as literal.

Container recursion is tracked by a DepthGuard stored in a ContextVar, so
concurrent threads and tasks track depth independently.

Python 3.13+. Uses Babel (optional) for locale-aware numbers.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from decimal import Decimal
from typing import TYPE_CHECKING, Protocol

from printkit.constants import CYCLE_MARKER, ELLIPSIS, FALSE_TEXT, NONE_TEXT, TRUE_TEXT
from printkit.core.depth_guard import DepthGuard
from printkit.syntax.escapes import escape_bytes, quote

from .context import RenderContext, config_of
from .locale_format import format_number
from .registry import get_shared_registry

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable

    from printkit.sinks.protocol import Sink

    from .render_config import RenderConfig

__all__ = ["Renderable", "render_literal", "render_plain"]

logger = logging.getLogger(__name__)

# (underlying sink, requested max_depth, guard) of the outermost container render
_GUARD: ContextVar[tuple[object, int, DepthGuard] | None] = ContextVar(
    "printkit_render_guard", default=None
)


class Renderable(Protocol):
    """Capability of types that render themselves.

    Implementing either method is enough. A type with only render_literal
    renders plain as literal; a type with only render_plain renders literal
    through repr().

    Implementations write through render_plain / render_literal (never
    print_ or show), since the sink is already held by the caller.

    Example:
        >>> class Point:
        ...     def __init__(self, x, y):
        ...         self.x, self.y = x, y
        ...     def render_plain(self, sink):
        ...         render_plain(sink, self.x, ",", self.y)
        ...     def render_literal(self, sink):
        ...         render_plain(sink, "Point(", self.x, ", ", self.y, ")")
    """

    def render_plain(self, sink: Sink) -> None:
        """Write the canonical text of self."""
        ...  # pragma: no cover  # Protocol stub - not executable

    def render_literal(self, sink: Sink) -> None:
        """Write the self-describing text of self."""
        ...  # pragma: no cover  # Protocol stub - not executable


def render_plain(sink: Sink, *values: object) -> None:
    """Write the plain form of each value in order, with no separators.

    Args:
        sink: Destination
        *values: Values to render

    Example:
        >>> buf = BufferSink()
        >>> render_plain(buf, "a", 1, True)
        >>> buf.take()
        'a1true'
    """
    for value in values:
        _render_plain_one(sink, value)


def render_literal(sink: Sink, value: object) -> None:
    """Write the literal form of value.

    Raises:
        DepthLimitExceededError: If containers nest deeper than the sink's
            RenderConfig.max_depth
    """
    cls = type(value)
    entry = get_shared_registry().lookup(cls)
    if entry is not None and entry.literal is not None:
        entry.literal(sink, value)
        return
    method = getattr(cls, "render_literal", None)
    if callable(method):
        method(value, sink)
        return
    _render_builtin_literal(sink, value)


def _render_plain_one(sink: Sink, value: object) -> None:
    cls = type(value)
    entry = get_shared_registry().lookup(cls)
    if entry is not None and entry.plain is not None:
        entry.plain(sink, value)
        return
    method = getattr(cls, "render_plain", None)
    if callable(method):
        method(value, sink)
        return
    # No plain form of its own: a literal form takes over
    if (entry is not None and entry.literal is not None) or callable(
        getattr(cls, "render_literal", None)
    ):
        render_literal(sink, value)
        return
    _render_builtin_plain(sink, value)


# ============================================================================
# BUILT-IN FORMS
# ============================================================================


def _render_builtin_plain(sink: Sink, value: object) -> None:
    match value:
        case str():
            sink.write(value)
        case bool():
            sink.write(TRUE_TEXT if value else FALSE_TEXT)
        case None:
            sink.write(NONE_TEXT)
        case int() | float() | Decimal():
            locale = config_of(sink).locale
            if locale is not None:
                sink.write(format_number(value, locale))
            else:
                sink.write(str(value))
        case bytes() | bytearray() | list() | tuple() | set() | frozenset() | dict():
            _render_builtin_literal(sink, value)
        case _:
            sink.write(str(value))


def _render_builtin_literal(sink: Sink, value: object) -> None:
    match value:
        case str():
            quote(sink, value)
        case bool():
            sink.write(TRUE_TEXT if value else FALSE_TEXT)
        case None:
            sink.write(NONE_TEXT)
        case int() | float() | Decimal():
            sink.write(repr(value))
        case bytes() | bytearray():
            sink.write('b"')
            sink.write(escape_bytes(value))
            sink.write('"')
        case list():
            _write_container(sink, value, "[", "]", value)
        case tuple():
            _write_container(sink, value, "(", ")", value)
        case set() | frozenset():
            if not value:
                sink.write(f"{type(value).__name__}()")
            else:
                _write_container(sink, value, "{", "}", value)
        case dict():
            _write_container(sink, value, "{", "}", value.items(), pairs=True)
        case _:
            sink.write(repr(value))


# ============================================================================
# CONTAINERS
# ============================================================================


@contextmanager
def _active_guard(sink: Sink, config: RenderConfig) -> Generator[DepthGuard]:
    """Yield the guard of the enclosing render, installing one if needed.

    The enclosing guard is shared only when it belongs to the same
    underlying sink and max_depth. A render into another sink, such as a
    repr_ call made by a renderer, counts its depth from zero.
    """
    target = sink.sink if isinstance(sink, RenderContext) else sink
    active = _GUARD.get()
    if active is not None:
        owner, max_depth, guard = active
        if owner is target and max_depth == config.max_depth:
            yield guard
            return
    guard = DepthGuard(max_depth=config.max_depth)
    token = _GUARD.set((target, config.max_depth, guard))
    try:
        yield guard
    finally:
        _GUARD.reset(token)


def _write_container(
    sink: Sink,
    container: object,
    opener: str,
    closer: str,
    items: Iterable[object],
    *,
    pairs: bool = False,
) -> None:
    """Write opener, element literals joined by separators, closer.

    A container already being rendered further up writes the cycle marker
    instead of its elements. A one-element tuple keeps its trailing comma.
    """
    config = config_of(sink)
    with _active_guard(sink, config) as guard:
        if guard.is_visiting(container):
            sink.write(opener + CYCLE_MARKER + closer)
            return
        with guard.visiting(container):
            separator = "," if config.compact else ", "
            colon = ":" if config.compact else ": "
            limit = config.limit
            sink.write(opener)
            count = 0
            for item in items:
                if limit is not None and count >= limit:
                    if count:
                        sink.write(separator)
                    sink.write(ELLIPSIS)
                    logger.debug("Truncated %s after %d elements", type(container).__name__, limit)
                    break
                if count:
                    sink.write(separator)
                if pairs:
                    key, item_value = item  # type: ignore[misc]
                    render_literal(sink, key)
                    sink.write(colon)
                    render_literal(sink, item_value)
                else:
                    render_literal(sink, item)
                count += 1
            else:
                if count == 1 and opener == "(":
                    sink.write(",")
            sink.write(closer)
