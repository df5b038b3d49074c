# topmark:header:start
#
#   project      : CMC
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for CMC logging setup (TRACE level, env resolution, chalk formatting)."""

from __future__ import annotations

import logging as std_logging

import pytest

from cmc.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    CmcLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", std_logging.DEBUG),
        (" warn ", std_logging.WARNING),
        ("20", 20),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    """CMC_LOG_LEVEL accepts names (incl. TRACE) and numbers."""
    monkeypatch.setenv("CMC_LOG_LEVEL", value)
    assert resolve_env_log_level() == expected


def test_unset_env_log_level() -> None:
    """Without the variable there is no level."""
    assert resolve_env_log_level() is None


def test_get_logger_supports_trace() -> None:
    """Loggers are CmcLogger instances with a trace method."""
    logger = get_logger("cmc.tests.logging")
    assert isinstance(logger, CmcLogger)
    assert std_logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_setup_logging_installs_single_handler() -> None:
    """Repeated setup does not stack handlers."""
    setup_logging(level=std_logging.INFO)
    setup_logging(level=TRACE_LEVEL)
    root = std_logging.getLogger()
    assert root.level == TRACE_LEVEL
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, ChalkFormatter)


def test_chalk_formatter_keeps_message() -> None:
    """Coloring wraps, but does not alter, the formatted text."""
    record = std_logging.LogRecord("x", std_logging.WARNING, __file__, 1, "hello %s", ("cmc",), None)
    assert "[WARNING] hello cmc" in ChalkFormatter("[%(levelname)s] %(message)s").format(record)
