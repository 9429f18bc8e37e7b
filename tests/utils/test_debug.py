"""Tests for reelsort.utils.debug."""

import logging

import pytest

from reelsort.utils.debug import debug_enabled, setup_logger


@pytest.mark.parametrize(("value", "expected"), [("1", True), ("true", True), ("0", False)])
def test_debug_enabled(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: bool
) -> None:
    monkeypatch.setenv("REELSORT_DEBUG", value)
    assert debug_enabled() is expected


def test_setup_logger_levels(monkeypatch: pytest.MonkeyPatch) -> None:
    """--debug selects DEBUG, otherwise INFO; the handler is added once."""
    monkeypatch.delenv("REELSORT_DEBUG", raising=False)

    logger = setup_logger(debug=True)
    handlers = list(logger.handlers)
    assert logger.name == "reelsort"
    assert logger.level == logging.DEBUG

    logger = setup_logger()
    assert logger.level == logging.INFO
    assert logger.handlers == handlers
