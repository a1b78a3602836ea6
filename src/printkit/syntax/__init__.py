"""Literal-text transforms: escaping, quoting and block dedent.

This package works on raw text only and never consults the renderer
registry, so it is safe to use from parsers and code generators.

Exports:
    quote, quote_literal: Write quoted literals to a sink
    escape_string, unescape_string: Escape table and its inverse
    escape_bytes, bytes_literal: Bytes literal bodies
    raw_str, escape_raw_string: Raw literal bodies
    indentation, unindent, common_indentation, dedent: Tab-aware dedent

Python 3.13+.
"""

from .dedent import Indentation, common_indentation, dedent, indentation, unindent
from .escapes import (
    bytes_literal,
    escape_bytes,
    escape_raw_string,
    escape_string,
    quote,
    quote_literal,
    raw_str,
    unescape_string,
)

__all__ = [
    "Indentation",
    "bytes_literal",
    "common_indentation",
    "dedent",
    "escape_bytes",
    "escape_raw_string",
    "escape_string",
    "indentation",
    "quote",
    "quote_literal",
    "raw_str",
    "unescape_string",
    "unindent",
]
