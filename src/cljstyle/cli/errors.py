# topmark:header:start
#
#   project      : cljstyle
#   file         : errors.py
#   file_relpath : src/cljstyle/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Exceptions for the cljstyle CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Click prints the message and exits with the
    exception's ``exit_code``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cljstyle.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from cljstyle.config.errors import ConfigError


class CljstyleError(click.ClickException):
    """Base class for all cljstyle CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))


class CljstyleUsageError(CljstyleError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class CljstyleFileNotFoundError(CljstyleError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class CljstyleConfigError(CljstyleError):
    """Error for configuration errors (unreadable, malformed or invalid files)."""

    exit_code = ExitCode.CONFIG_ERROR

    @classmethod
    def from_config_error(cls, exc: ConfigError) -> CljstyleConfigError:
        """Wrap a configuration-layer error for display by Click."""
        return cls(exc.message)
