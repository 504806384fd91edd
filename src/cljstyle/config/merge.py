# topmark:header:start
#
#   project      : cljstyle
#   file         : merge.py
#   file_relpath : src/cljstyle/config/merge.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Merge policy for settings.

Settings are folded in discovery order, shallowest directory first, so that the
deeper (more specific) fragment always sits on the right-hand side of a pairwise
merge. For each key present on either side:

    1. the right value carries ``replace``   -> the right value, verbatim
    2. the left value carries ``displace``   -> the right value
    3. both values are sequences             -> concatenation (left, then right)
    4. both values are sets                  -> union
    5. both values are tables                -> recursive merge
    6. anything else                         -> the right value

A key present on only one side passes through unchanged. Inputs are never
mutated; every merged table is a new dict.

Merging is not commutative, and no sort step is needed: folding fragments in the
order `cljstyle.config.locator.find_up` returns them yields deepest-wins.
"""

from __future__ import annotations

from collections.abc import Mapping, Set
from typing import TYPE_CHECKING, Any

from cljstyle.config.model import Settings
from cljstyle.config.types import Directive, directive_of, unwrap

if TYPE_CHECKING:
    from cljstyle.config.types import SettingsTable


def _is_sequence(value: object) -> bool:
    return isinstance(value, (tuple, list))


def merge_values(left: Any, right: Any) -> Any:
    """Merge two values found under the same key; ``right`` is the deeper one."""
    if directive_of(right) is Directive.REPLACE:
        return right
    if directive_of(left) is Directive.DISPLACE:
        return right

    lv, rv = unwrap(left), unwrap(right)
    if _is_sequence(lv) and _is_sequence(rv):
        return tuple(lv) + tuple(rv)
    if isinstance(lv, Set) and isinstance(rv, Set):
        return frozenset(lv) | frozenset(rv)
    if isinstance(lv, Mapping) and isinstance(rv, Mapping):
        return merge_tables(lv, rv)
    return right


def merge_tables(left: Mapping[Any, Any], right: Mapping[Any, Any]) -> SettingsTable:
    """Merge two settings tables key by key; ``right`` is the deeper one."""
    merged: SettingsTable = dict(left)
    for key, value in right.items():
        merged[key] = merge_values(left[key], value) if key in left else value
    return merged


def merge_settings(*settings: Settings) -> Settings:
    """Merge settings left to right, accumulating provenance.

    Args:
        *settings (Settings): Settings ordered from least to most specific.

    Returns:
        Settings: An empty `Settings` for no arguments, the argument itself for one,
        otherwise the left fold of pairwise merges. ``paths`` is the concatenation of
        every argument's ``paths`` in order.
    """
    if not settings:
        return Settings()
    result: Settings = settings[0]
    for nxt in settings[1:]:
        result = Settings(
            data=merge_tables(result.data, nxt.data),
            paths=result.paths + nxt.paths,
        )
    return result
