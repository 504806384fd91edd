# topmark:header:start
#
#   project      : cljstyle
#   file         : model.py
#   file_relpath : src/cljstyle/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Settings value and provenance.

This module defines `Settings`, the immutable value handed from configuration
resolution to the formatter.

Immutability:
    - `Settings` is ``frozen=True``; its leaf collections are tuples, frozensets
      and compiled patterns. Nested tables are plain dicts that are never mutated
      after construction: merging and translation always build new tables.

Provenance:
    - ``paths`` records the configuration files folded into the value, shallowest
      first. It rides alongside the table (``compare=False``) and never appears as
      a settings key, so it takes no part in equality or validation.

Merge directives:
    - Values may carry `cljstyle.config.types.Tagged` wrappers until they reach a
      consumer; `Settings.get_in` and `Settings.to_plain` strip them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from cljstyle.config.keys import Keys
from cljstyle.config.types import unwrap, unwrap_deep

if TYPE_CHECKING:
    from cljstyle.config.types import SettingsTable


@dataclass(frozen=True)
class Settings:
    """Immutable configuration settings plus the files they were read from.

    Attributes:
        data (SettingsTable): Current-schema settings table.
        paths (tuple[str, ...]): Source configuration files, shallowest first.
    """

    data: SettingsTable = field(default_factory=lambda: {})
    paths: tuple[str, ...] = field(default=(), compare=False)

    def get_in(self, path: Iterable[str], default: Any = None) -> Any:
        """Return the value at ``path`` with merge directives stripped.

        Args:
            path (Iterable[str]): Keys to follow, e.g. ``("rules", "indentation", "enabled")``.
            default (Any): Value returned when any key along the path is missing.

        Returns:
            Any: The value found, or ``default``.
        """
        value: Any = self.data
        for key in path:
            value = unwrap(value)
            if not isinstance(value, Mapping) or key not in value:
                return default
            value = value[key]
        return unwrap_deep(value)

    def rule(self, name: str) -> SettingsTable:
        """Return the settings of rule group ``name`` (empty if unconfigured)."""
        value = self.get_in((Keys.SECTION_RULES, name), {})
        return value if isinstance(value, dict) else {}

    def rule_enabled(self, name: str) -> bool:
        """True if rule group ``name`` is explicitly enabled."""
        return self.get_in((Keys.SECTION_RULES, name, Keys.KEY_ENABLED)) is True

    def to_plain(self) -> SettingsTable:
        """Return the settings table with every merge directive stripped."""
        return unwrap_deep(self.data)
