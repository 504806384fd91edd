# topmark:header:start
#
#   project      : cljstyle
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Pytest configuration for the cljstyle test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, and provides helpers to lay out configuration trees under ``tmp_path``.

Notes:
    `Settings` values are immutable. Tests build new tables with plain dict
    literals and wrap them with `settings_of` rather than editing existing values.
"""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from cljstyle.config import logging
from cljstyle.config.model import Settings
from cljstyle.constants import CONFIG_FILE_NAME, LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.config`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_config: DecoratorType[Any] = as_typed_mark(pytest.mark.config)
mark_files: DecoratorType[Any] = as_typed_mark(pytest.mark.files)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_cljstyle_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure cljstyle's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so failing tests show the locator's narration.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def write_text(path: Path, content: str) -> Path:
    """Write dedented content to a file, creating parents.

    Args:
        path (Path): Destination file.
        content (str): Text to write; common indentation and a leading newline are removed.

    Returns:
        Path: ``path``, for chaining.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
    return path


def write_config(directory: Path, content: str) -> Path:
    """Write a ``.cljstyle.toml`` file into ``directory`` (created if needed).

    Args:
        directory (Path): Directory that receives the configuration file.
        content (str): TOML text, dedented before writing.

    Returns:
        Path: The configuration file written.
    """
    return write_text(directory / CONFIG_FILE_NAME, content)


def settings_of(data: dict[str, Any], *paths: str) -> Settings:
    """Return a `Settings` wrapping ``data`` with the given provenance."""
    return Settings(data=data, paths=tuple(paths))
