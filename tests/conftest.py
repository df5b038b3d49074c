# topmark:header:start
#
#   project      : CMC
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the CMC test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, so engine decisions are traced in captured output of failing tests.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from cmc.config import logging

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.hypothesis_slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


# A small, complete inventory shared by the navigation and scheduling tests.
#
#   A
#   └── P
#       └── PB
#           ├── PBA01
#           │   ├── PBA01A01
#           │   │   └── PBA01A0101
#           │   └── PBA01B01
#           └── PBB02
#   Z
#   └── ZB
#       └── ZBC01
INVENTORY: tuple[str, ...] = (
    "A",
    "P",
    "PB",
    "PBA01",
    "PBA01A01",
    "PBA01A0101",
    "PBA01B01",
    "PBB02",
    "Z",
    "ZB",
    "ZBC01",
)


@pytest.fixture
def inventory() -> list[str]:
    """Return a fresh copy of the shared inventory."""
    return list(INVENTORY)


@pytest.fixture(autouse=True)
def silence_cmc_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure CMC's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("CMC_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
