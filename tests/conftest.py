# topmark:header:start
#
#   project      : CarbonCat
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the CarbonCat test suite.

This file sets up global fixtures, shared helpers and the logging configuration
for test runs.

Notes:
    Build options with the fluent `Options` setters or with `make_options`;
    never mutate a frozen `Options`.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from carboncat.config import MutableOptions, NumberingMode, Options, logging
from carboncat.engine.runner import cat

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def silence_carboncat_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so engine trace records are exercised."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_options(**overrides: Any) -> Options:
    """Return frozen `Options` built from defaults and overrides.

    Args:
        **overrides (Any): Field overrides applied to a `MutableOptions` builder.

    Returns:
        Options: An immutable snapshot for use in tests.
    """
    m = MutableOptions()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


def run_engine(data: bytes, options: Options) -> bytes:
    """Run the single-source engine over in-memory input and return the output."""
    out = io.BytesIO()
    cat(io.BytesIO(data), out, options)
    return out.getvalue()


def split_every(data: bytes, size: int) -> list[bytes]:
    """Split ``data`` into consecutive pieces of ``size`` bytes (last one shorter)."""
    return [data[i : i + size] for i in range(0, len(data), size)] or [b""]


#: Every option combination worth running the engine under.
ALL_OPTION_SETS: tuple[Options, ...] = tuple(
    Options(
        numbering=numbering,
        show_ends=show_ends,
        squeeze_blank=squeeze_blank,
        show_tabs=show_tabs,
        show_nonprinting=show_nonprinting,
    )
    for numbering in NumberingMode
    for show_ends in (False, True)
    for squeeze_blank in (False, True)
    for show_tabs in (False, True)
    for show_nonprinting in (False, True)
)
