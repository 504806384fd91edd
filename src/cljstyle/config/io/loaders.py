# topmark:header:start
#
#   project      : cljstyle
#   file         : loaders.py
#   file_relpath : src/cljstyle/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Load and decode TOML configuration sources.

This module reads cljstyle configuration from:
- on-disk ``.cljstyle.toml`` files, and
- TOML resources bundled with the package (e.g. the default indents).

Parsing is done with `tomlkit`. Plain TOML values are then *decoded* into
settings values that TOML cannot express directly:

- the file inclusion pattern (``files.pattern`` / legacy ``file-pattern``) is a
  regular expression string compiled with `re`;
- ignore rules and indent keys written as ``"/regex/"`` become compiled patterns,
  any other string is an exact file name or symbol;
- arrays become tuples, except ``files.extensions``, ``files.ignored`` and the
  legacy ``file-ignore``, which become frozensets;
- an inline table with the single key ``^replace`` or ``^displace`` attaches a
  merge directive to its array or table value (see `Tagged`).

Unlike discovery helpers that tolerate bad input, every failure here raises
`ConfigParseError`: a configuration file that cannot be read must never be
silently ignored.
"""

from __future__ import annotations

import re
from importlib.resources import files
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from cljstyle.config.errors import ConfigParseError
from cljstyle.config.keys import Keys, LegacyKeys
from cljstyle.config.logging import get_logger
from cljstyle.config.types import Directive, Tagged

if TYPE_CHECKING:
    from pathlib import Path

    from cljstyle.config.keys import KeyPath
    from cljstyle.config.logging import CljstyleLogger
    from cljstyle.config.types import SettingsTable

    from .types import TomlTable

logger: CljstyleLogger = get_logger(__name__)

# Paths whose string value is a bare regular expression.
PATTERN_PATHS: Final[frozenset[KeyPath]] = frozenset(
    {Keys.PATTERN_PATH, (LegacyKeys.FILE_PATTERN,)}
)
# Paths holding sets of ignore rules (names or /regex/ patterns).
IGNORE_PATHS: Final[frozenset[KeyPath]] = frozenset({Keys.IGNORED_PATH, (LegacyKeys.FILE_IGNORE,)})
# Paths holding plain sets.
SET_PATHS: Final[frozenset[KeyPath]] = IGNORE_PATHS | {Keys.EXTENSIONS_PATH}
# Paths holding indent rule tables (symbol or /regex/ keys).
INDENT_PATHS: Final[frozenset[KeyPath]] = frozenset({Keys.INDENTS_PATH, (LegacyKeys.INDENTS,)})


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (e.g. ``.cljstyle.toml``).

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigParseError: If the file cannot be read or is not valid TOML.
    """
    source = str(path)
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error reading TOML from %s: %s", path, e)
        raise ConfigParseError(source, _load_error_message(source, e)) from e
    except (TomlkitParseError, ValueError) as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigParseError(source, _load_error_message(source, e)) from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any)


def load_resource_toml(package: str, name: str) -> TomlTable:
    """Load a TOML resource bundled inside ``package``.

    Args:
        package (str): Dotted package name holding the resource.
        name (str): Resource file name.

    Returns:
        TomlTable: The parsed TOML content.
    """
    text: str = files(package).joinpath(name).read_text(encoding="utf-8")
    data_any: Any = tomlkit.parse(text).unwrap()
    return cast("TomlTable", data_any)


def _load_error_message(source: str, exc: Exception) -> str:
    return f"Error loading configuration from file: {source}\n{type(exc).__name__}: {exc}"


# --- Decoding TOML values into settings values ---


def is_regex_literal(text: str) -> bool:
    """True if ``text`` is written as ``/regex/``."""
    return len(text) >= 3 and text.startswith("/") and text.endswith("/")


def _compile(text: str, path: KeyPath, source: str) -> re.Pattern[str]:
    try:
        return re.compile(text)
    except re.error as e:
        raise ConfigParseError(
            source,
            f"Error loading configuration from file: {source}\n"
            f"Invalid regular expression {text!r} at {'.'.join(path)}: {e}",
        ) from e


def _decode_rule_text(value: Any, path: KeyPath, source: str) -> Any:
    """Decode an ignore rule or indent key: ``/regex/`` compiles, anything else is kept."""
    if isinstance(value, str) and is_regex_literal(value):
        return _compile(value[1:-1], path, source)
    return value


def _split_directive(table: dict[str, Any], path: KeyPath, source: str) -> Tagged | None:
    markers = [k for k in table if k.startswith("^")]
    if not markers:
        return None
    directive = Directive.from_marker(markers[0])
    if len(table) != 1 or directive is None:
        raise ConfigParseError(
            source,
            f"Error loading configuration from file: {source}\n"
            f"Malformed merge directive at {'.'.join(path)}: expected a table with the single "
            f"key {Directive.REPLACE.marker!r} or {Directive.DISPLACE.marker!r}, "
            f"got keys {sorted(table)}",
        )
    inner = table[markers[0]]
    if not isinstance(inner, (list, dict)):
        raise ConfigParseError(
            source,
            f"Error loading configuration from file: {source}\n"
            f"Merge directive {markers[0]!r} at {'.'.join(path)} must wrap an array or a table, "
            f"got {inner!r}",
        )
    return Tagged(directive, _decode(inner, path, source))


def _is_hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


def _decode_set(items: list[Any], path: KeyPath, source: str) -> Any:
    decoded = [
        _decode_rule_text(v, path, source) if path in IGNORE_PATHS else _decode(v, path, source)
        for v in items
    ]
    if not all(_is_hashable(v) for v in decoded):
        # Not representable as a set; the validator reports the bad shape.
        return tuple(decoded)
    return frozenset(decoded)


def _decode_indents(table: dict[str, Any], path: KeyPath, source: str) -> dict[Any, Any]:
    out: dict[Any, Any] = {}
    for key, value in table.items():
        out[_decode_rule_text(key, path, source)] = _decode(value, (*path, key), source)
    return out


def _decode(value: Any, path: KeyPath, source: str) -> Any:
    if isinstance(value, dict):
        table = cast("dict[str, Any]", value)
        tagged = _split_directive(table, path, source)
        if tagged is not None:
            return tagged
        if path in INDENT_PATHS:
            return _decode_indents(table, path, source)
        return {k: _decode(v, (*path, k), source) for k, v in table.items()}
    if isinstance(value, list):
        items = cast("list[Any]", value)
        if path in SET_PATHS:
            return _decode_set(items, path, source)
        return tuple(_decode(v, path, source) for v in items)
    if path in PATTERN_PATHS and isinstance(value, str):
        return _compile(value, path, source)
    return value


def decode_settings(data: TomlTable, *, source: str) -> SettingsTable:
    """Decode a parsed TOML table into a settings table.

    Works for both the current and the legacy schema; translation happens later.

    Args:
        data (TomlTable): Parsed TOML content.
        source (str): Path of the originating file, used in error messages.

    Returns:
        SettingsTable: The decoded settings table.

    Raises:
        ConfigParseError: On invalid regular expressions or malformed directive tables.
    """
    decoded = _decode(data, (), source)
    if isinstance(decoded, Tagged):
        raise ConfigParseError(
            source,
            f"Error loading configuration from file: {source}\n"
            "Merge directives cannot be attached to the whole document",
        )
    logger.trace("Decoded settings from %s: %s", source, decoded)
    return cast("SettingsTable", decoded)


def decode_indents(data: TomlTable, *, source: str) -> dict[Any, Any]:
    """Decode a standalone indent rule table (e.g. the bundled defaults)."""
    return _decode_indents(data, Keys.INDENTS_PATH, source)
