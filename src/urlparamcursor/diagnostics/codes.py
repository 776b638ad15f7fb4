"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every
urlparamcursor exception.
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
        1000-1999: Argument errors (bad URL, key, value or separator)
        2000-2999: State errors (operation not valid for the cursor position)
    """

    # Argument errors (1000-1999)
    URL_REQUIRED = 1001
    URL_TYPE = 1002
    KEY_REQUIRED = 1003
    KEY_TYPE = 1004
    VALUE_TYPE = 1005
    SEPARATOR_INVALID = 1006

    # State errors (2000-2999)
    NO_PARAMETER_SELECTED = 2001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        argument_name: Argument name that caused the error
        expected_type: Expected type for the argument
        received_type: Actual type received
        operation: Cursor operation that was called
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    operation: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[KEY_REQUIRED]: Parameter key must not be None
              = operation: insert_before
              = argument: key
              = help: Pass an empty string to insert a parameter with an empty key

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
