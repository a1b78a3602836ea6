"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Rendering errors (dispatch protocol, container recursion)
        2000-2999: Escape errors (malformed or unencodable literal text)
        3000-3999: Configuration and locale errors
    """

    # Rendering errors (1000-1999)
    RENDER_DEPTH_EXCEEDED = 1001
    RENDERER_INVALID = 1002

    # Escape errors (2000-2999)
    ESCAPE_MISSING_DIGITS = 2001
    ESCAPE_CODEPOINT_OUT_OF_RANGE = 2002
    ESCAPE_OCTAL_OUT_OF_RANGE = 2003
    ESCAPE_UNENCODABLE = 2004

    # Configuration and locale errors (3000-3999)
    CONFIG_INVALID = 3001
    TABWIDTH_INVALID = 3002
    LOCALE_UNAVAILABLE = 3003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough information for
    both humans and tools to act on a failure.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        offset: Character offset in the input that triggered the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    offset: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[ESCAPE_MISSING_DIGITS]: \\x escape without hex digits
              --> offset 4
              = help: Write at least one hex digit after \\x, or escape the backslash

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
