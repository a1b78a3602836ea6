"""Enumerations for printkit type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class RenderMode(StrEnum):
    """Which of the two rendering forms is requested.

    StrEnum provides automatic string conversion: str(RenderMode.PLAIN) == "plain"
    """

    PLAIN = "plain"
    """Canonical, undecorated text for end users: print_("a") writes a"""

    LITERAL = "literal"
    """Self-describing debug text that can be read back: show("a") writes "a" """


__all__ = [
    "RenderMode",
]
