"""urlparamcursor exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Both concrete errors also inherit the closest builtin exception so callers
can catch ValueError / RuntimeError without importing this package.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "IllegalStateError",
    "InvalidArgumentError",
    "ParamCursorError",
]


class ParamCursorError(Exception):
    """Base exception for all urlparamcursor errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ParamCursorError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidArgumentError(ParamCursorError, ValueError):
    """Argument rejected by the cursor.

    Raised for a None or non-string URL, a None or non-string key,
    a non-string value, or an invalid parameter separator.
    """


class IllegalStateError(ParamCursorError, RuntimeError):
    """Operation not valid for the current cursor position.

    Raised when remove(), insert_before() or insert_after() is called
    before advance() has selected a parameter.
    """
