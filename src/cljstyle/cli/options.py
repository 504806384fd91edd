# topmark:header:start
#
#   project      : cljstyle
#   file         : options.py
#   file_relpath : src/cljstyle/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, search limit) and their
resolution logic, so commands and the group can stay thin.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from cljstyle.cli.errors import CljstyleUsageError
from cljstyle.config.logging import TRACE_LEVEL
from cljstyle.constants import DEFAULT_SEARCH_LIMIT

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count (int): Number of times the verbose flag (-v) is passed.
        quiet_count (int): Number of times the quiet flag (-q) is passed.

    Returns:
        int: The logging level.

    Raises:
        CljstyleUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR level. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise CljstyleUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO

    if quiet_count >= 1:  # -q
        return logging.ERROR

    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command.

    The options are mutually exclusive and control logging verbosity.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


def search_limit_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--search-limit`` option bounding the upward configuration search."""
    return click.option(
        "--search-limit",
        type=click.IntRange(min=1),
        default=DEFAULT_SEARCH_LIMIT,
        show_default=True,
        help="Maximum number of directories searched upwards for configuration files.",
    )(f)
