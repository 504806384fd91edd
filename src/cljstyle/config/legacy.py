# topmark:header:start
#
#   project      : cljstyle
#   file         : legacy.py
#   file_relpath : src/cljstyle/config/legacy.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Translate the deprecated flat configuration schema into the nested one.

The legacy schema is a flat table of 18 keys (see `LegacyKeys`). Each key has
exactly one destination in the current schema (`LegacyKeys.PATHS`).

Defaults are not propagated:
    A legacy value equal to that key's legacy default is dropped instead of being
    written forward. An explicit-but-default legacy value therefore never shadows
    an override from another fragment. The flip side is that an author who
    restates a default in legacy form (e.g. ``list-indent-size = 2``) expresses
    no intent at all after translation. This is long-standing behavior and is
    kept as is.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from cljstyle.config.defaults import legacy_defaults
from cljstyle.config.keys import LegacyKeys
from cljstyle.config.logging import get_logger
from cljstyle.config.types import Tagged

if TYPE_CHECKING:
    from cljstyle.config.keys import KeyPath
    from cljstyle.config.logging import CljstyleLogger
    from cljstyle.config.types import SettingsTable

logger: CljstyleLogger = get_logger(__name__)


def is_legacy(table: Mapping[str, Any]) -> bool:
    """True if the table contains at least one legacy key."""
    return any(key in table for key in LegacyKeys.ALL)


def _same(value: Any, default: Any) -> bool:
    # 1 == True in Python; a legacy toggle set to 1 is not the default.
    return type(value) is type(default) and value == default


def _assoc_in(table: Mapping[str, Any], path: KeyPath, value: Any) -> SettingsTable:
    """Return a copy of ``table`` with ``value`` stored at ``path``."""
    head, rest = path[0], path[1:]
    if not rest:
        return {**table, head: value}
    child = table.get(head)
    if isinstance(child, Tagged) and isinstance(child.value, Mapping):
        return {**table, head: Tagged(child.directive, _assoc_in(child.value, rest, value))}
    base: Mapping[str, Any] = child if isinstance(child, Mapping) else {}
    return {**table, head: _assoc_in(base, rest, value)}


def translate_legacy(table: SettingsTable) -> SettingsTable:
    """Convert a legacy settings table into a current-schema one.

    Every legacy key whose value differs from its legacy default is written to its
    current-schema path, creating intermediate tables as needed. All legacy keys
    are removed from the result. Non-legacy keys are kept, so a table mixing both
    schemas translates into one current-schema table; where both set the same
    path, the legacy value wins.

    Args:
        table (SettingsTable): A decoded settings table.

    Returns:
        SettingsTable: A new translated table, or ``table`` itself when it holds
        no legacy keys.
    """
    if not is_legacy(table):
        return table

    defaults: SettingsTable = legacy_defaults()
    result: SettingsTable = {k: v for k, v in table.items() if k not in LegacyKeys.ALL}
    for key, path in LegacyKeys.PATHS.items():
        if key not in table:
            continue
        value = table[key]
        if value is None or _same(value, defaults[key]):
            logger.debug("Dropping legacy key %s: value equals the legacy default", key)
            continue
        logger.debug("Translating legacy key %s -> %s", key, ".".join(path))
        result = _assoc_in(result, path, value)
    return result


def legacy_source_key(path: KeyPath) -> str | None:
    """Return the legacy key translated into ``path`` (or a parent of it), if any."""
    for key, dest in LegacyKeys.PATHS.items():
        if path[: len(dest)] == dest:
            return key
    return None
