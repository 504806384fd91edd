# topmark:header:start
#
#   project      : cljstyle
#   file         : defaults.py
#   file_relpath : src/cljstyle/config/defaults.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Built-in default settings.

Runtime defaults are defined in code, except for the default indentation rules,
which are long enough to live in the bundled ``indents.toml`` resource. The
defaults form the base layer of `cljstyle.config.locator.resolve_settings`; they
are not read from a file and therefore carry no provenance.
"""

from __future__ import annotations

import functools
import re
from typing import TYPE_CHECKING, Any

from cljstyle.config.io import decode_indents, load_resource_toml
from cljstyle.config.keys import Keys, LegacyKeys
from cljstyle.config.logging import get_logger
from cljstyle.config.model import Settings
from cljstyle.constants import DEFAULT_INDENTS_NAME, DEFAULT_RESOURCE_PACKAGE

if TYPE_CHECKING:
    from cljstyle.config.logging import CljstyleLogger
    from cljstyle.config.types import SettingsTable

logger: CljstyleLogger = get_logger(__name__)

DEFAULT_EXTENSIONS: frozenset[str] = frozenset({".clj", ".cljs", ".cljc", ".cljx"})
DEFAULT_IGNORED: frozenset[str] = frozenset({".git", ".hg"})


@functools.cache
def default_indents() -> dict[Any, Any]:
    """Return the default indentation rules bundled with cljstyle.

    The resource is read once; callers must treat the returned table as immutable.
    """
    data = load_resource_toml(DEFAULT_RESOURCE_PACKAGE, DEFAULT_INDENTS_NAME)
    indents = decode_indents(data, source=f"{DEFAULT_RESOURCE_PACKAGE}/{DEFAULT_INDENTS_NAME}")
    logger.debug("Loaded %d default indent rule(s)", len(indents))
    return indents


@functools.cache
def legacy_defaults() -> SettingsTable:
    """Return the default value of every legacy (flat schema) key."""
    return {
        LegacyKeys.FILE_PATTERN: re.compile(r"\.clj[csx]?$"),
        LegacyKeys.FILE_IGNORE: frozenset(),
        LegacyKeys.INDENTATION: True,
        LegacyKeys.LIST_INDENT_SIZE: 2,
        LegacyKeys.INDENTS: default_indents(),
        LegacyKeys.REMOVE_SURROUNDING_WHITESPACE: True,
        LegacyKeys.REMOVE_TRAILING_WHITESPACE: True,
        LegacyKeys.INSERT_MISSING_WHITESPACE: True,
        LegacyKeys.REMOVE_CONSECUTIVE_BLANK_LINES: True,
        LegacyKeys.MAX_CONSECUTIVE_BLANK_LINES: 2,
        LegacyKeys.INSERT_PADDING_LINES: True,
        LegacyKeys.PADDING_LINES: 2,
        LegacyKeys.REQUIRE_EOF_NEWLINE: True,
        LegacyKeys.LINE_BREAK_VARS: True,
        LegacyKeys.LINE_BREAK_FUNCTIONS: True,
        LegacyKeys.REFORMAT_TYPES: True,
        LegacyKeys.REWRITE_NAMESPACES: True,
        LegacyKeys.SINGLE_IMPORT_BREAK_WIDTH: 30,
    }


def default_table() -> SettingsTable:
    """Return the current-schema default settings table.

    Returns:
        SettingsTable: A new table; no ``files.pattern`` is set, so source files are
        recognized by extension.
    """
    return {
        Keys.SECTION_FILES: {
            Keys.KEY_EXTENSIONS: DEFAULT_EXTENSIONS,
            Keys.KEY_IGNORED: DEFAULT_IGNORED,
        },
        Keys.SECTION_RULES: {
            Keys.RULE_INDENTATION: {
                Keys.KEY_ENABLED: True,
                Keys.KEY_LIST_INDENT: 2,
                Keys.KEY_INDENTS: default_indents(),
            },
            Keys.RULE_WHITESPACE: {
                Keys.KEY_ENABLED: True,
                Keys.KEY_REMOVE_SURROUNDING: True,
                Keys.KEY_REMOVE_TRAILING: True,
                Keys.KEY_INSERT_MISSING: True,
            },
            Keys.RULE_BLANK_LINES: {
                Keys.KEY_ENABLED: True,
                Keys.KEY_REMOVE_CONSECUTIVE: True,
                Keys.KEY_MAX_CONSECUTIVE: 2,
                Keys.KEY_INSERT_PADDING: True,
                Keys.KEY_PADDING_LINES: 2,
            },
            Keys.RULE_EOF_NEWLINE: {
                Keys.KEY_ENABLED: True,
            },
            Keys.RULE_VARS: {
                Keys.KEY_ENABLED: True,
                Keys.KEY_LINE_BREAKS: True,
            },
            Keys.RULE_FUNCTIONS: {
                Keys.KEY_ENABLED: True,
                Keys.KEY_LINE_BREAKS: True,
            },
            Keys.RULE_TYPES: {
                Keys.KEY_ENABLED: True,
            },
            Keys.RULE_NAMESPACES: {
                Keys.KEY_ENABLED: True,
                Keys.KEY_SINGLE_IMPORT_BREAK_WIDTH: 60,
            },
        },
    }


def default_settings() -> Settings:
    """Return the built-in default `Settings` (no provenance)."""
    return Settings(data=default_table())
