# topmark:header:start
#
#   project      : ProtoMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ProtoMark test suite.

Sets up typed marker helpers, TRACE logging for the whole run, and shared
source fixtures used by parser, editing and CLI tests.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from protomark.config import logging

F = TypeVar("F", bound=Callable[..., object])

# Decorator type: takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.pipeline`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_protomark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure PROTOMARK_LOG_LEVEL from the developer's shell does not leak into tests."""
    monkeypatch.delenv("PROTOMARK_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Enable TRACE logging for the test run so failures carry full parser traces."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


SWIFT_SOURCE: str = (
    "import UIKit\n"
    "\n"
    "class ViewController: UIViewController, UITableViewDelegate {\n"
    "    var items: [String] = []\n"
    "}\n"
    "\n"
    "extension ViewController: UITableViewDataSource {\n"
    "}\n"
)


@pytest.fixture
def swift_source() -> str:
    """A small Swift file with one declaration and one single-conformance extension."""
    return SWIFT_SOURCE
