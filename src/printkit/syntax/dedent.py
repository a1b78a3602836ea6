"""Indentation measurement and removal for multi-line block literals.

Columns, not characters, are the unit of indentation: a tab advances the
column to the next multiple of ``tabwidth``. unindent() therefore cuts
leading whitespace by column count and, on the rest of each line, expands
tabs into the spaces they occupied at their original column so every
output line stays aligned under fixed-width rendering.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import NamedTuple

from printkit.constants import DEFAULT_TABWIDTH
from printkit.diagnostics.templates import ErrorTemplate
from printkit.sinks.buffer import BufferSink

__all__ = [
    "Indentation",
    "common_indentation",
    "dedent",
    "indentation",
    "unindent",
]


class Indentation(NamedTuple):
    """Leading whitespace width of one line.

    Attributes:
        width: Column reached after the leading spaces and tabs
        blank: True if the line holds nothing but spaces and tabs
    """

    width: int
    blank: bool


def _check_tabwidth(tabwidth: int) -> None:
    if tabwidth < 1:
        raise ValueError(ErrorTemplate.tabwidth_invalid(tabwidth).message)


def _next_tab_stop(col: int, tabwidth: int) -> int:
    return (col + tabwidth) // tabwidth * tabwidth


def indentation(line: str, *, tabwidth: int = DEFAULT_TABWIDTH) -> Indentation:
    """Measure the leading whitespace of line.

    A space adds one column; a tab advances to the next tab stop; any other
    character ends the scan.

    Args:
        line: One line of text (a newline also ends the scan)
        tabwidth: Tab stop width in columns

    Returns:
        Indentation(width, blank) where blank means the scan consumed the whole line

    Raises:
        ValueError: If tabwidth is less than 1

    Examples:
        >>> indentation("\\tfoo")
        Indentation(width=8, blank=False)
        >>> indentation("  \\t ", tabwidth=4)
        Indentation(width=5, blank=True)
    """
    _check_tabwidth(tabwidth)
    col = 0
    for ch in line:
        if ch == " ":
            col += 1
        elif ch == "\t":
            col = _next_tab_stop(col, tabwidth)
        else:
            return Indentation(col, False)
    return Indentation(col, True)


def unindent(text: str, indent: int, *, tabwidth: int = DEFAULT_TABWIDTH) -> str:
    """Remove indent columns of leading whitespace from every line of text.

    Single forward pass. While "cutting" (leading whitespace of a line) the
    column is only counted; the first other character or newline writes
    max(0, column - indent) spaces and then the character. After that, tabs
    are expanded to spaces at their original column positions.

    Lines indented less than indent lose all of their indentation. A trailing
    line without a newline that is still all whitespace at the end of input is
    flushed the same way a newline would have flushed it.

    Args:
        text: Multi-line text
        indent: Columns to strip; callers normally pass common_indentation(text)
        tabwidth: Tab stop width in columns

    Returns:
        The dedented text (text itself when indent is 0)

    Raises:
        ValueError: If tabwidth is less than 1

    Example:
        >>> unindent("    a\\n      b\\n    c", 4)
        'a\\n  b\\nc'
    """
    if indent == 0:
        return text
    _check_tabwidth(tabwidth)

    buf = BufferSink(sizehint=len(text))
    cutting = True
    col = 0
    for ch in text:
        if cutting:
            if ch == " ":
                col += 1
            elif ch == "\t":
                col = _next_tab_stop(col, tabwidth)
            elif ch == "\n":
                buf.write(" " * max(0, col - indent))
                col = 0
                buf.write("\n")
            else:
                cutting = False
                buf.write(" " * max(0, col - indent))
                col += 1
                buf.write(ch)
        elif ch == "\t":
            stop = _next_tab_stop(col, tabwidth)
            buf.write(" " * (stop - col))
            col = stop
        elif ch == "\n":
            cutting = True
            col = 0
            buf.write("\n")
        else:
            col += 1
            buf.write(ch)

    if cutting:
        buf.write(" " * max(0, col - indent))
    return buf.take()


def common_indentation(text: str, *, tabwidth: int = DEFAULT_TABWIDTH) -> int:
    """Return the smallest indentation over the non-blank lines of text.

    Blank lines (including a whitespace-only last line) do not count.
    Returns 0 when every line is blank.
    """
    widths = [
        measured.width
        for line in text.split("\n")
        if not (measured := indentation(line, tabwidth=tabwidth)).blank
    ]
    return min(widths, default=0)


def dedent(text: str, *, tabwidth: int = DEFAULT_TABWIDTH) -> str:
    """Strip the common indentation from a block of text.

    Example:
        >>> dedent("    if x:\\n        y\\n")
        'if x:\\n    y\\n'
    """
    return unindent(text, common_indentation(text, tabwidth=tabwidth), tabwidth=tabwidth)
