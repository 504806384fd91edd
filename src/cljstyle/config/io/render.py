# topmark:header:start
#
#   project      : cljstyle
#   file         : render.py
#   file_relpath : src/cljstyle/config/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Render settings tables as TOML.

This is the inverse of `cljstyle.config.io.loaders.decode_settings`: compiled
patterns are written back as ``"/regex/"`` (or as a bare regex string for the
file inclusion pattern), sets become sorted arrays and merge directives become
``^replace`` / ``^displace`` tables.

TOML has no `null` value, so `None` entries are stripped during rendering.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit

from cljstyle.config.logging import get_logger
from cljstyle.config.types import Tagged, is_pattern

from .loaders import PATTERN_PATHS

if TYPE_CHECKING:
    from cljstyle.config.keys import KeyPath
    from cljstyle.config.logging import CljstyleLogger
    from cljstyle.config.model import Settings
    from cljstyle.config.types import SettingsTable

    from .types import TomlTable

logger: CljstyleLogger = get_logger(__name__)


def _encode_text(value: Any) -> Any:
    if is_pattern(value):
        return f"/{value.pattern}/"
    return value


def _sort_key(value: Any) -> str:
    return str(_encode_text(value))


def _encode(value: Any, path: KeyPath) -> Any:
    if isinstance(value, Tagged):
        return {value.directive.marker: _encode(value.value, path)}
    if isinstance(value, Mapping):
        out: dict[str, Any] = {}
        m = cast("Mapping[Any, Any]", value)
        for k, v in m.items():
            if v is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k)
                continue
            key = str(_encode_text(k))
            out[key] = _encode(v, (*path, key))
        return out
    if isinstance(value, (frozenset, set)):
        items = cast("frozenset[Any]", value)
        return [_encode(v, path) for v in sorted(items, key=_sort_key)]
    if isinstance(value, (tuple, list)):
        return [_encode(v, path) for v in cast("tuple[Any, ...]", value) if v is not None]
    if is_pattern(value):
        return value.pattern if path in PATTERN_PATHS else f"/{value.pattern}/"
    return value


def encode_settings(table: SettingsTable) -> TomlTable:
    """Convert a settings table into TOML-serializable plain values."""
    return cast("TomlTable", _encode(table, ()))


def to_toml(table: SettingsTable) -> str:
    """Serialize a settings table to a TOML document string.

    Args:
        table (SettingsTable): Settings table to render.

    Returns:
        str: The rendered TOML document.
    """
    return cast("str", cast("Any", tomlkit).dumps(encode_settings(table)))


def render_settings(settings: Settings) -> str:
    """Render settings as a TOML document preceded by provenance comments.

    Each configuration file folded into ``settings`` is listed on its own
    ``# source:`` comment line, shallowest first.

    Args:
        settings (Settings): Settings to render.

    Returns:
        str: The commented TOML document.
    """
    if settings.paths:
        header = "".join(f"# source: {path}\n" for path in settings.paths)
    else:
        header = "# source: built-in defaults\n"
    return f"{header}\n{to_toml(settings.data)}"
