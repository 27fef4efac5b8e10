"""Tests for Datematch package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_datematch() -> None:
    """Import datematch package succeeds."""
    import datematch

    assert hasattr(datematch, "__version__")
    assert datematch.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import datematch.core submodule succeeds."""
    from datematch import core

    assert hasattr(core, "__all__")


def test_import_matchers_module() -> None:
    """Import datematch.matchers submodule succeeds."""
    from datematch import matchers

    assert hasattr(matchers, "__all__")


def test_import_format_module() -> None:
    """Import datematch.format submodule succeeds."""
    from datematch import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_public_names_resolve() -> None:
    """Every name in datematch.__all__ is an attribute of the package."""
    import datematch

    for name in datematch.__all__:
        assert hasattr(datematch, name), name
