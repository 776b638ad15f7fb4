"""Hypothesis strategies for urlparamcursor property-based testing.

Usage:
    from tests.strategies import urls, param_keys, param_values
"""

from .urls import (
    PARAM_TEXT_CHARS,
    param_keys,
    param_texts,
    param_values,
    separators,
    url_prefixes,
    urls,
)

__all__ = [
    "PARAM_TEXT_CHARS",
    "param_keys",
    "param_texts",
    "param_values",
    "separators",
    "url_prefixes",
    "urls",
]
