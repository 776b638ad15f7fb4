"""urlparamcursor - editable single-pass cursor over URL query parameters.

Reads the parameters of a URL one at a time and records removals and
insertions without modifying the input or re-parsing after each edit.
Keys and values are handled as raw text; encoding and decoding stay with
the caller.

Public API:
    ParamCursor - Traverse and edit the query parameters of a URL
    ParamSpan - Offsets of the selected parameter
    CursorConfig - Immutable cursor configuration (parameter separator)

Exceptions:
    ParamCursorError - Base exception class
    InvalidArgumentError - Rejected URL, key, value or separator
    IllegalStateError - Edit attempted with no parameter selected

Submodules:
    urlparamcursor.diagnostics - Error codes, templates and formatting
    urlparamcursor.constants - Reserved delimiters and defaults
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .config import CursorConfig
from .cursor import ParamCursor
from .diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    IllegalStateError,
    InvalidArgumentError,
    OutputFormat,
    ParamCursorError,
)
from .span import ParamSpan

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("urlparamcursor")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CursorConfig",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "IllegalStateError",
    "InvalidArgumentError",
    "OutputFormat",
    "ParamCursor",
    "ParamCursorError",
    "ParamSpan",
    "__version__",
]
