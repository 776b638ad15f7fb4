"""Cursor configuration.

Provides a single frozen dataclass holding the settings that shape how a
ParamCursor splits a query. Validation happens once, at construction.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from urlparamcursor.constants import DEFAULT_PARAM_SEP, RESERVED_CHARS
from urlparamcursor.diagnostics import ErrorTemplate, InvalidArgumentError

__all__ = ["CursorConfig", "validate_separator"]


def validate_separator(separator: object) -> str:
    """Return the separator if it is usable, raise otherwise.

    Args:
        separator: Candidate parameter separator

    Returns:
        The same separator, typed as str

    Raises:
        InvalidArgumentError: If the separator is not a one-character string
            or is one of the reserved delimiters '?', '#' and '='.
    """
    if (
        not isinstance(separator, str)
        or len(separator) != 1
        or separator in RESERVED_CHARS
    ):
        raise InvalidArgumentError(ErrorTemplate.separator_invalid(separator))
    return separator


@dataclass(frozen=True, slots=True)
class CursorConfig:
    """Immutable configuration for ParamCursor.

    Constructing ``CursorConfig()`` with no arguments gives the standard
    ``&``-separated query layout.

    Attributes:
        separator: Parameter separator character (default: '&').
            Some legacy servers use ';'.

    Example:
        >>> config = CursorConfig(separator=";")
        >>> cursor = ParamCursor("AA?b=2;c=3", config=config)
        >>> cursor.separator
        ';'
    """

    separator: str = DEFAULT_PARAM_SEP

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            InvalidArgumentError: If separator is not a single
                non-reserved character.
        """
        validate_separator(self.separator)
