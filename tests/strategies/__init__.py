"""Hypothesis strategies for printkit property-based testing.

Strategies are organized by domain:

- text: strings, escape-heavy strings, indented blocks and nested values

Usage:
    from tests.strategies import any_text, indented_blocks
    from tests.strategies.text import nested_values

Event-Emitting Strategies (HypoFuzz-Optimized):
    indented_blocks emits hypothesis.event() calls bucketing the line count.
"""

from .text import (
    any_text,
    delimiters,
    escape_heavy_text,
    indent_lines,
    indented_blocks,
    nested_values,
    scalars,
    tabwidths,
)

__all__ = [
    "any_text",
    "delimiters",
    "escape_heavy_text",
    "indent_lines",
    "indented_blocks",
    "nested_values",
    "scalars",
    "tabwidths",
]
