"""Verify package imports work correctly."""

import pytest


def test_import_pluma() -> None:
    """Test that pluma can be imported and version matches pyproject."""
    tomllib = pytest.importorskip("tomllib")
    from pathlib import Path

    import pluma

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert pluma.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from pluma import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_subpackages_import() -> None:
    from pluma.lexer import Lexer
    from pluma.renderers import HtmlGenerator

    assert Lexer.__module__ == "pluma.lexer.core"
    assert HtmlGenerator.__module__ == "pluma.renderers.html"
