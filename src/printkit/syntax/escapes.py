"""Quoting and escaping of string and bytes literals.

Provides the escape table used by literal rendering and its inverse:

    escape_string / unescape_string   text body <-> escaped text body
    escape_bytes / bytes_literal      raw bytes <-> escaped bytes body
    quote / quote_literal             write a complete "..." literal to a sink
    raw_str / escape_raw_string       raw literal bodies (no unescaping)

Escape policy (escape_string):
    - characters listed in ``esc`` get a backslash prefix
    - backslash is always doubled
    - BEL BS TAB LF VT FF CR ESC use their mnemonic (\\a \\b \\t \\n \\v \\f \\r \\e)
    - NUL is \\0, or \\x00 when an octal digit follows
    - printable characters pass through
    - anything else becomes \\xNN (ASCII), \\uNNNN (BMP) or \\UNNNNNNNN

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from printkit.constants import QUOTE
from printkit.diagnostics import EscapeError
from printkit.diagnostics.templates import ErrorTemplate

if TYPE_CHECKING:
    from collections.abc import Iterator

    from printkit.sinks.protocol import Sink

__all__ = [
    "bytes_literal",
    "escape_bytes",
    "escape_raw_string",
    "escape_string",
    "quote",
    "quote_literal",
    "raw_str",
    "unescape_string",
]

_OCTAL_DIGITS = frozenset("01234567")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Maximum digit count per numeric escape letter.
_HEX_ESCAPE_WIDTH: dict[str, int] = {"x": 2, "u": 4, "U": 8}
_OCTAL_ESCAPE_WIDTH: int = 3

_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\v": "\\v",
    "\f": "\\f",
    "\r": "\\r",
    "\x1b": "\\e",
}

# Escape letter -> character, for unescaping.
_UNESCAPES: dict[str, str] = {seq[1]: char for char, seq in _ESCAPES.items()}

_BYTE_ESCAPES: dict[int, str] = {ord(char): seq for char, seq in _ESCAPES.items()}
_BYTE_ESCAPES[ord(QUOTE)] = "\\" + QUOTE


def escape_string(s: str, esc: str = "") -> str:
    """Escape s so that unescape_string() restores it exactly.

    Args:
        s: Text to escape
        esc: Extra characters to protect with a backslash (e.g. the quote)

    Returns:
        Escaped text containing only printable characters

    Examples:
        >>> escape_string('tab\\there "q"', '"')
        'tab\\\\there \\\\"q\\\\"'
        >>> escape_string("\\x00" + "7")
        '\\\\x007'
    """
    parts: list[str] = []
    last = len(s) - 1
    for i, c in enumerate(s):
        if c in esc:
            parts.append("\\" + c)
        elif c == "\0":
            parts.append("\\x00" if i < last and s[i + 1] in _OCTAL_DIGITS else "\\0")
        elif (seq := _ESCAPES.get(c)) is not None:
            parts.append(seq)
        elif c.isprintable():
            parts.append(c)
        else:
            cp = ord(c)
            if cp < 0x80:
                parts.append(f"\\x{cp:02x}")
            elif cp <= 0xFFFF:
                parts.append(f"\\u{cp:04x}")
            else:
                parts.append(f"\\U{cp:08x}")
    return "".join(parts)


def _decode(s: str) -> Iterator[tuple[int, str | int]]:
    """Split escaped text into (offset, piece) pairs.

    A str piece is literal text (or a character from a mnemonic/unicode
    escape). An int piece is a byte value from a hex or octal escape; text
    callers map it to chr(), bytes callers store it as one byte.
    """
    i = 0
    n = len(s)
    while i < n:
        j = s.find("\\", i)
        if j < 0:
            yield i, s[i:]
            return
        if j > i:
            yield i, s[i:j]
        if j + 1 == n:
            # Trailing lone backslash is kept as-is
            yield j, "\\"
            return

        c = s[j + 1]
        start = j + 2
        if c in _HEX_ESCAPE_WIDTH:
            end = start
            limit = min(n, start + _HEX_ESCAPE_WIDTH[c])
            while end < limit and s[end] in _HEX_DIGITS:
                end += 1
            if end == start:
                raise EscapeError(ErrorTemplate.escape_missing_digits(c, j))
            value = int(s[start:end], 16)
            if c == "x":
                yield j, value
            elif value > 0x10FFFF:
                raise EscapeError(ErrorTemplate.escape_codepoint_out_of_range(value, j))
            else:
                yield j, chr(value)
            i = end
        elif c in _OCTAL_DIGITS:
            end = j + 1
            limit = min(n, end + _OCTAL_ESCAPE_WIDTH)
            while end < limit and s[end] in _OCTAL_DIGITS:
                end += 1
            value = int(s[j + 1 : end], 8)
            if value > 0xFF:
                raise EscapeError(ErrorTemplate.escape_octal_out_of_range(value, j))
            yield j, value
            i = end
        else:
            # Unknown escapes stand for the escaped character itself
            yield j, _UNESCAPES.get(c, c)
            i = start


def unescape_string(s: str) -> str:
    """Undo escape_string().

    Hex and octal escapes denote code points U+0000..U+00FF.

    Raises:
        EscapeError: On a numeric escape without digits, an octal value
            above 377, or a code point above U+10FFFF

    Example:
        >>> unescape_string('a\\\\tb\\\\x41\\\\u00e9')
        'a\\tbAé'
    """
    return "".join(piece if isinstance(piece, str) else chr(piece) for _, piece in _decode(s))


def bytes_literal(s: str) -> bytes:
    """Decode the body of a bytes literal.

    Hex and octal escapes produce single raw bytes; every other character
    (literal or escaped) is encoded as UTF-8.

    Raises:
        EscapeError: Same conditions as unescape_string(), or a character
            with no UTF-8 encoding (lone surrogate)

    Example:
        >>> bytes_literal('\\\\xff\\\\u00e9')
        b'\\xff\\xc3\\xa9'
    """
    out = bytearray()
    for offset, piece in _decode(s):
        if isinstance(piece, int):
            out.append(piece)
            continue
        try:
            out += piece.encode("utf-8")
        except UnicodeEncodeError as e:
            diagnostic = ErrorTemplate.escape_unencodable(ord(piece[e.start]), offset + e.start)
            raise EscapeError(diagnostic) from e
    return bytes(out)


def escape_bytes(data: bytes | bytearray) -> str:
    """Escape raw bytes as the body of a bytes literal.

    Printable ASCII passes through; the quote and backslash are escaped;
    other bytes use mnemonics or \\xNN.

    Example:
        >>> escape_bytes(b'a"\\x00\\n')
        'a\\\\"\\\\x00\\\\n'
    """
    parts: list[str] = []
    for b in data:
        if (seq := _BYTE_ESCAPES.get(b)) is not None:
            parts.append(seq)
        elif 0x20 <= b < 0x7F:
            parts.append(chr(b))
        else:
            parts.append(f"\\x{b:02x}")
    return "".join(parts)


def quote(sink: Sink, s: str) -> None:
    """Write s as a double-quoted, escaped literal.

    The output always has exactly one opening and one closing unescaped
    quote; every quote inside the body is escaped.

    Example:
        >>> buf = BufferSink()
        >>> quote(buf, 'say "hi"')
        >>> buf.take()
        '"say \\\\"hi\\\\""'
    """
    sink.write(QUOTE)
    sink.write(escape_string(s, QUOTE))
    sink.write(QUOTE)


def quote_literal(sink: Sink, s: str) -> None:
    """Write s between quotes, escaping only the quote character.

    Backslashes and control characters pass through untouched, so the
    result reads back correctly only through a raw-literal reader.
    """
    sink.write(QUOTE)
    sink.write(s.replace(QUOTE, "\\" + QUOTE))
    sink.write(QUOTE)


def raw_str(s: str) -> str:
    """Return raw literal text unchanged.

    Delimiter unescaping happens in whatever parser extracted s.
    """
    return s


def escape_raw_string(s: str, delim: str = QUOTE) -> str:
    """Escape s for use as the body of a raw literal.

    Backslashes only escape in front of the delimiter or at the end of the
    body: a run of n backslashes before a delimiter becomes 2n+1 backslashes
    plus the delimiter, and a trailing run of n becomes 2n. Every other
    character, including backslashes elsewhere, is written verbatim.

    Examples:
        >>> escape_raw_string('say "hi"')
        'say \\\\"hi\\\\"'
        >>> escape_raw_string('dir\\\\')
        'dir\\\\\\\\'
    """
    parts: list[str] = []
    backslashes = 0
    for c in s:
        if c == "\\":
            backslashes += 1
            continue
        if c == delim:
            parts.append("\\" * (2 * backslashes + 1))
        elif backslashes:
            parts.append("\\" * backslashes)
        backslashes = 0
        parts.append(c)
    parts.append("\\" * (2 * backslashes))
    return "".join(parts)
