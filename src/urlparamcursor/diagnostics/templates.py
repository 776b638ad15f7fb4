"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every failure the cursor can raise.
    """

    @staticmethod
    def url_required() -> Diagnostic:
        """URL passed to the cursor constructor is None.

        Returns:
            Diagnostic for URL_REQUIRED
        """
        return Diagnostic(
            code=DiagnosticCode.URL_REQUIRED,
            message="URL must not be None",
            hint="Pass an empty string to iterate a URL without parameters",
            argument_name="url",
            operation="ParamCursor",
        )

    @staticmethod
    def url_type(received: object) -> Diagnostic:
        """URL passed to the cursor constructor is not a string.

        Args:
            received: The rejected object

        Returns:
            Diagnostic for URL_TYPE
        """
        return Diagnostic(
            code=DiagnosticCode.URL_TYPE,
            message="URL must be a string",
            hint="Decode bytes before building the cursor",
            argument_name="url",
            expected_type="str",
            received_type=type(received).__name__,
            operation="ParamCursor",
        )

    @staticmethod
    def key_required(operation: str) -> Diagnostic:
        """Parameter key passed to an insertion is None.

        Args:
            operation: Name of the insertion method

        Returns:
            Diagnostic for KEY_REQUIRED
        """
        return Diagnostic(
            code=DiagnosticCode.KEY_REQUIRED,
            message="Parameter key must not be None",
            hint="Pass an empty string to insert a parameter with an empty key",
            argument_name="key",
            operation=operation,
        )

    @staticmethod
    def key_type(operation: str, received: object) -> Diagnostic:
        """Parameter key passed to an insertion is not a string.

        Args:
            operation: Name of the insertion method
            received: The rejected object

        Returns:
            Diagnostic for KEY_TYPE
        """
        return Diagnostic(
            code=DiagnosticCode.KEY_TYPE,
            message="Parameter key must be a string",
            hint="Encode the key yourself before inserting it",
            argument_name="key",
            expected_type="str",
            received_type=type(received).__name__,
            operation=operation,
        )

    @staticmethod
    def value_type(operation: str, received: object) -> Diagnostic:
        """Parameter value passed to an insertion is neither a string nor None.

        Args:
            operation: Name of the insertion method
            received: The rejected object

        Returns:
            Diagnostic for VALUE_TYPE
        """
        return Diagnostic(
            code=DiagnosticCode.VALUE_TYPE,
            message="Parameter value must be a string or None",
            hint="Use None to insert a parameter without '='",
            argument_name="value",
            expected_type="str | None",
            received_type=type(received).__name__,
            operation=operation,
        )

    @staticmethod
    def separator_invalid(separator: object) -> Diagnostic:
        """Parameter separator is not a single non-reserved character.

        Args:
            separator: The rejected separator

        Returns:
            Diagnostic for SEPARATOR_INVALID
        """
        msg = f"Invalid parameter separator {separator!r}"
        return Diagnostic(
            code=DiagnosticCode.SEPARATOR_INVALID,
            message=msg,
            hint="Use exactly one character other than '?', '#' or '='",
            argument_name="separator",
            expected_type="str",
            received_type=type(separator).__name__,
        )

    @staticmethod
    def no_parameter_selected(operation: str) -> Diagnostic:
        """Edit attempted before any parameter was selected.

        Args:
            operation: Name of the edit method

        Returns:
            Diagnostic for NO_PARAMETER_SELECTED
        """
        msg = f"No parameter selected for {operation}()"
        return Diagnostic(
            code=DiagnosticCode.NO_PARAMETER_SELECTED,
            message=msg,
            hint="Call advance() until it returns True before editing",
            operation=operation,
        )
