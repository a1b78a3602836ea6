"""printkit exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class PrintkitError(Exception):
    """Base exception for all printkit errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PrintkitError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class RenderError(PrintkitError):
    """Rendering a value through the dispatch protocol failed.

    Failures raised by sinks or by user renderers are never wrapped in this
    type; they propagate unchanged.
    """


class EscapeError(PrintkitError, ValueError):
    """Literal text could not be unescaped or encoded.

    Examples:
    - A hex or unicode escape with no digits
    - A code point above U+10FFFF
    - A lone surrogate in a bytes literal

    Attributes:
        offset: Character offset of the offending escape sequence
    """

    def __init__(self, message: str | Diagnostic, *, offset: int | None = None) -> None:
        """Initialize EscapeError.

        Args:
            message: Error message string OR Diagnostic object
            offset: Character offset of the offending escape sequence
        """
        super().__init__(message)
        if offset is None and self.diagnostic is not None:
            offset = self.diagnostic.offset
        self.offset = offset
