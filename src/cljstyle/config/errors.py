# topmark:header:start
#
#   project      : cljstyle
#   file         : errors.py
#   file_relpath : src/cljstyle/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Errors raised while reading configuration files.

Every error carries a kind, the path of the offending file and a message, so
callers (the CLI layer, or an editor integration) can render it as they see fit.
A malformed configuration file is never skipped silently: both kinds abort the
whole resolution.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cljstyle.config.schema import ValidationResult


class ConfigErrorKind(str, Enum):
    """Categories of configuration failures."""

    PARSE = "parse"
    SCHEMA = "schema"


class ConfigError(Exception):
    """Base class for configuration file failures.

    Attributes:
        kind (ConfigErrorKind): The failure category.
        path (str): Absolute path of the configuration file.
        message (str): Human-readable description.
    """

    kind: ConfigErrorKind

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path: str = path
        self.message: str = message

    def __str__(self) -> str:
        return self.message


class ConfigParseError(ConfigError):
    """The file could not be read or is not a well-formed configuration document."""

    kind = ConfigErrorKind.PARSE


class ConfigSchemaError(ConfigError):
    """The file parsed but its settings failed validation."""

    kind = ConfigErrorKind.SCHEMA

    def __init__(self, path: str, message: str, result: ValidationResult) -> None:
        super().__init__(path, message)
        self.result: ValidationResult = result
