# topmark:header:start
#
#   project      : cljstyle
#   file         : __init__.py
#   file_relpath : src/cljstyle/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Configuration handling for cljstyle.

Configuration lives in ``.cljstyle.toml`` files anywhere in the source tree.
Resolving the effective settings for a path means:

1. walking up from the path, reading each directory's file (`find_up`);
2. translating legacy flat-schema files and validating every fragment;
3. folding the fragments over the built-in defaults (`merge_settings`).

The most common entry point is `resolve_settings`.
"""

from __future__ import annotations

from cljstyle.config.defaults import default_settings
from cljstyle.config.errors import (
    ConfigError,
    ConfigErrorKind,
    ConfigParseError,
    ConfigSchemaError,
)
from cljstyle.config.legacy import is_legacy, translate_legacy
from cljstyle.config.locator import dir_config, find_up, read_config, resolve_settings
from cljstyle.config.merge import merge_settings
from cljstyle.config.model import Settings
from cljstyle.config.schema import Problem, ValidationResult, validate
from cljstyle.config.types import Directive, Tagged

__all__: list[str] = [
    "ConfigError",
    "ConfigErrorKind",
    "ConfigParseError",
    "ConfigSchemaError",
    "Directive",
    "Problem",
    "Settings",
    "Tagged",
    "ValidationResult",
    "default_settings",
    "dir_config",
    "find_up",
    "is_legacy",
    "merge_settings",
    "read_config",
    "resolve_settings",
    "translate_legacy",
    "validate",
]
