"""Tests for the urlparamcursor package __init__.py module.

Covers:
- __all__ integrity: every exported name is accessible
- Fallback version when package metadata is unavailable
"""

from __future__ import annotations

import importlib
from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

import urlparamcursor


class TestPublicApi:
    """Exported names resolve to the implementing objects."""

    def test_all_names_accessible(self) -> None:
        """Every name in __all__ is an attribute of the package."""
        for name in urlparamcursor.__all__:
            assert hasattr(urlparamcursor, name), name

    def test_param_cursor_export(self) -> None:
        """ParamCursor is the class from urlparamcursor.cursor."""
        from urlparamcursor.cursor import ParamCursor  # noqa: PLC0415

        assert urlparamcursor.ParamCursor is ParamCursor

    def test_version_is_string(self) -> None:
        """__version__ is always populated."""
        assert isinstance(urlparamcursor.__version__, str)
        assert urlparamcursor.__version__


class TestVersionFallback:
    """Development installs report a placeholder version."""

    def test_version_fallback_when_not_installed(self) -> None:
        """PackageNotFoundError yields the +dev placeholder."""
        try:
            with patch(
                "importlib.metadata.version",
                side_effect=PackageNotFoundError("urlparamcursor"),
            ):
                reloaded = importlib.reload(urlparamcursor)
                assert reloaded.__version__ == "0.0.0+dev"
        finally:
            importlib.reload(urlparamcursor)
