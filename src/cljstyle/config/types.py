# topmark:header:start
#
#   project      : cljstyle
#   file         : types.py
#   file_relpath : src/cljstyle/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts stable, import-friendly definitions that other config modules
can depend on without risk of circular imports.

Exports:
    - `SettingsTable`: the nested, string-keyed mapping holding settings values.
    - `Directive`: per-value merge directive (``replace`` / ``displace``).
    - `Tagged`: a collection value carrying a `Directive`.
    - `unwrap` / `unwrap_deep`: strip directives for consumers and validation.

Design notes:
    - Keep side effects out of this module; it should stay dependency-free
      (stdlib only) to remain safe for low-level imports.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

# SettingsTable: nested settings mapping. Treated as immutable once built.
SettingsTable = dict[str, Any]

# Compiled regular expression type used for file patterns, ignore rules and indent keys.
Pattern = re.Pattern[str]


class Directive(str, Enum):
    """Merge directive a configuration author can attach to a collection value."""

    # Use this value verbatim, discarding the ancestor's value.
    REPLACE = "replace"
    # Yield to a deeper value instead of being combined with it.
    DISPLACE = "displace"

    @property
    def marker(self) -> str:
        """Return the TOML table key that declares this directive (e.g. ``^replace``)."""
        return f"^{self.value}"

    @classmethod
    def from_marker(cls, key: str) -> Directive | None:
        """Return the directive declared by a TOML marker key, or None if ``key`` is not one."""
        if not key.startswith("^"):
            return None
        try:
            return cls(key[1:])
        except ValueError:
            return None


@dataclass(frozen=True)
class Tagged:
    """A collection value annotated with a merge `Directive`.

    Attributes:
        directive (Directive): How the merger treats this value.
        value (Any): The wrapped collection (tuple, frozenset or mapping).
    """

    directive: Directive
    value: Any


def is_pattern(value: object) -> bool:
    """True if the value is a compiled regular expression."""
    return isinstance(value, re.Pattern)


def directive_of(value: object) -> Directive | None:
    """Return the directive attached to ``value``, if any."""
    return value.directive if isinstance(value, Tagged) else None


def unwrap(value: Any) -> Any:
    """Return the plain value behind a `Tagged` wrapper (one level)."""
    return value.value if isinstance(value, Tagged) else value


def unwrap_deep(value: Any) -> Any:
    """Recursively strip `Tagged` wrappers from a settings value."""
    value = unwrap(value)
    if isinstance(value, Mapping):
        return {k: unwrap_deep(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return tuple(unwrap_deep(v) for v in value)
    if isinstance(value, frozenset):
        return frozenset(unwrap_deep(v) for v in value)
    return value
