"""Diagnostic system for urlparamcursor errors.

Provides structured error diagnostics with codes, hints and argument details.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import IllegalStateError, InvalidArgumentError, ParamCursorError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "IllegalStateError",
    "InvalidArgumentError",
    "OutputFormat",
    "ParamCursorError",
]
