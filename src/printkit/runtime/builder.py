"""String builder: run a writer against a fresh buffer and keep the text.

sprint is the general form; string, repr_ and print_to_string cover the
common cases. Every call owns a private BufferSink, so builders are safe
to use concurrently and never share state.

Size hints only pre-size the buffer. They never change the result.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from printkit.constants import SIZEHINT_FLOAT, SIZEHINT_UNSET
from printkit.sinks.buffer import BufferSink

from .context import RenderContext
from .printing import print_, show

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from printkit.sinks.protocol import Sink

    from .render_config import RenderConfig

__all__ = [
    "print_to_string",
    "repr_",
    "sprint",
    "string",
    "string_from_chars",
    "string_with_config",
    "tostr_sizehint",
]


def sprint(
    f: Callable[..., object],
    *args: object,
    config: RenderConfig | None = None,
    sizehint: int = SIZEHINT_UNSET,
) -> str:
    """Call f(sink, *args) against a fresh buffer and return what it wrote.

    Args:
        f: Writer taking a sink as its first argument
        *args: Remaining arguments for f
        config: Rendering properties for the buffer (None = defaults)
        sizehint: Bytes to pre-allocate

    Returns:
        The text f wrote

    Raises:
        Whatever f raises; the partial buffer is discarded.

    Example:
        >>> sprint(show, "hi")
        '"hi"'
        >>> sprint(show, [1, 2], config=RenderConfig(compact=True))
        '[1,2]'
    """
    buf = BufferSink(sizehint)
    sink: Sink = buf if config is None else RenderContext(buf, config)
    f(sink, *args)
    return buf.take()


def tostr_sizehint(x: object) -> int:
    """Estimate the byte length of x's plain form.

    Exact for bytes, a lower bound for str (non-ASCII text encodes to more
    bytes), a fixed bound for floats, and unknown (0) for everything else.
    """
    match x:
        case str() | bytes() | bytearray():
            return len(x)
        case float():
            return SIZEHINT_FLOAT
        case _:
            return SIZEHINT_UNSET


def print_to_string(*xs: object, config: RenderConfig | None = None) -> str:
    """Render all xs in plain form and return the concatenation.

    The buffer is sized from the first argument only.
    """
    if not xs:
        return ""
    return sprint(print_, *xs, config=config, sizehint=tostr_sizehint(xs[0]))


def string(*xs: object) -> str:
    """Concatenate the plain forms of xs.

    Example:
        >>> string("a", 1, True)
        'a1true'
        >>> string()
        ''
    """
    return print_to_string(*xs)


def string_with_config(config: RenderConfig, *xs: object) -> str:
    """Like string, with rendering properties applied.

    Example:
        >>> string_with_config(RenderConfig(locale="en_US"), 1234567)
        '1,234,567'
    """
    return print_to_string(*xs, config=config)


def repr_(x: object, config: RenderConfig | None = None) -> str:
    """Return the literal form of x.

    Example:
        >>> repr_("a\\tb")
        '"a\\\\tb"'
    """
    return sprint(show, x, config=config)


def string_from_chars(chars: Iterable[str | int]) -> str:
    """Build a string from characters or code points.

    Raises:
        ValueError: If an integer is not a valid code point
        TypeError: If an element is neither str nor int
    """
    buf = BufferSink()
    for c in chars:
        match c:
            case str():
                buf.write(c)
            case int() if not isinstance(c, bool):
                buf.write(chr(c))
            case _:
                msg = f"expected str or int, got {type(c).__name__}"
                raise TypeError(msg)
    return buf.take()

