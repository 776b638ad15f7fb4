"""Shared constants for urlparamcursor.

Single source of truth for the delimiters the cursor treats as reserved.
Every other character in a URL is opaque data.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Delimiters
    "QUERY_SEP",
    "FRAGMENT_SEP",
    "VALUE_SEP",
    "DEFAULT_PARAM_SEP",
    "RESERVED_CHARS",
    # Position markers
    "UNSET",
    # Logging
    "LOG_TRUNCATE_LENGTH",
]

# ============================================================================
# DELIMITERS
# ============================================================================

QUERY_SEP: str = "?"
"""Marks the start of the query section."""

FRAGMENT_SEP: str = "#"
"""Marks the start of the fragment; ends the query section."""

VALUE_SEP: str = "="
"""Separates a parameter key from its value."""

DEFAULT_PARAM_SEP: str = "&"
"""Separates parameters unless another separator is configured."""

RESERVED_CHARS: frozenset[str] = frozenset({QUERY_SEP, FRAGMENT_SEP, VALUE_SEP})
"""Characters that can never be used as the parameter separator."""

# ============================================================================
# POSITION MARKERS
# ============================================================================

UNSET: int = -1
"""Offset value of a cursor that has not selected any parameter."""

# ============================================================================
# LOGGING
# ============================================================================

# URLs may carry tokens in their query; debug records only show a prefix.
LOG_TRUNCATE_LENGTH: int = 50
