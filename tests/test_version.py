"""Test that the package version is importable and non-empty."""

from reelsort import __version__


def test_version() -> None:
    """__version__ is a non-empty string."""
    assert isinstance(__version__, str)
    assert len(__version__) > 0
