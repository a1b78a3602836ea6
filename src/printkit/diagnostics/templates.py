"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def render_depth_exceeded(max_depth: int) -> Diagnostic:
        """Container nesting exceeded the configured limit.

        Args:
            max_depth: The limit that was exceeded

        Returns:
            Diagnostic for RENDER_DEPTH_EXCEEDED
        """
        msg = f"Maximum rendering depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.RENDER_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten the value or raise RenderConfig.max_depth",
        )

    @staticmethod
    def renderer_invalid(type_name: str) -> Diagnostic:
        """A registry entry was created without any render function.

        Args:
            type_name: Name of the type being registered

        Returns:
            Diagnostic for RENDERER_INVALID
        """
        msg = f"No renderer given for type '{type_name}'"
        return Diagnostic(
            code=DiagnosticCode.RENDERER_INVALID,
            message=msg,
            hint="Pass plain=..., literal=... or both",
        )

    @staticmethod
    def escape_missing_digits(kind: str, offset: int) -> Diagnostic:
        """A numeric escape was not followed by any digit.

        Args:
            kind: Escape letter ('x', 'u' or 'U')
            offset: Character offset of the backslash

        Returns:
            Diagnostic for ESCAPE_MISSING_DIGITS
        """
        msg = f"Escape '{kind}' requires at least one hex digit"
        return Diagnostic(
            code=DiagnosticCode.ESCAPE_MISSING_DIGITS,
            message=msg,
            hint="Add hex digits after the escape letter or double the backslash",
            offset=offset,
        )

    @staticmethod
    def escape_codepoint_out_of_range(value: int, offset: int) -> Diagnostic:
        """A unicode escape names a code point beyond U+10FFFF.

        Args:
            value: The decoded integer value
            offset: Character offset of the backslash

        Returns:
            Diagnostic for ESCAPE_CODEPOINT_OUT_OF_RANGE
        """
        msg = f"Code point 0x{value:X} is outside the Unicode range"
        return Diagnostic(
            code=DiagnosticCode.ESCAPE_CODEPOINT_OUT_OF_RANGE,
            message=msg,
            hint="Unicode code points end at 0x10FFFF",
            offset=offset,
        )

    @staticmethod
    def escape_octal_out_of_range(value: int, offset: int) -> Diagnostic:
        """An octal escape does not fit in one byte.

        Args:
            value: The decoded integer value
            offset: Character offset of the backslash

        Returns:
            Diagnostic for ESCAPE_OCTAL_OUT_OF_RANGE
        """
        msg = f"Octal escape value {value:o} does not fit in a byte"
        return Diagnostic(
            code=DiagnosticCode.ESCAPE_OCTAL_OUT_OF_RANGE,
            message=msg,
            hint="Octal escapes are limited to 377",
            offset=offset,
        )

    @staticmethod
    def escape_unencodable(codepoint: int, offset: int) -> Diagnostic:
        """A character of a bytes literal has no UTF-8 encoding.

        Args:
            codepoint: The offending code point (a lone surrogate)
            offset: Character offset in the literal

        Returns:
            Diagnostic for ESCAPE_UNENCODABLE
        """
        msg = f"Code point U+{codepoint:04X} cannot be encoded as UTF-8"
        return Diagnostic(
            code=DiagnosticCode.ESCAPE_UNENCODABLE,
            message=msg,
            hint="Use a hex escape to write raw bytes",
            offset=offset,
        )

    @staticmethod
    def config_invalid(field: str, requirement: str, value: object) -> Diagnostic:
        """A RenderConfig field failed validation.

        Args:
            field: Field name
            requirement: Human description of the constraint
            value: Rejected value

        Returns:
            Diagnostic for CONFIG_INVALID
        """
        msg = f"RenderConfig.{field} must be {requirement}, got {value!r}"
        return Diagnostic(code=DiagnosticCode.CONFIG_INVALID, message=msg)

    @staticmethod
    def tabwidth_invalid(tabwidth: int) -> Diagnostic:
        """Tab stop width is not a positive integer.

        Args:
            tabwidth: Rejected tab width

        Returns:
            Diagnostic for TABWIDTH_INVALID
        """
        msg = f"tabwidth must be a positive integer, got {tabwidth}"
        return Diagnostic(
            code=DiagnosticCode.TABWIDTH_INVALID,
            message=msg,
            hint="Use the default tab stop of 8 unless the source uses another one",
        )

    @staticmethod
    def locale_unavailable(locale_code: str, fallback: str) -> Diagnostic:
        """Requested locale is unknown to CLDR.

        Args:
            locale_code: Requested locale
            fallback: Locale used instead

        Returns:
            Diagnostic for LOCALE_UNAVAILABLE (warning severity)
        """
        msg = f"Unknown locale '{locale_code}', falling back to {fallback}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNAVAILABLE,
            message=msg,
            severity="warning",
        )
