# topmark:header:start
#
#   project      : cljstyle
#   file         : keys.py
#   file_relpath : src/cljstyle/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Canonical section and key names for cljstyle configuration.

This module defines the authoritative string constants used when reading,
translating, validating and rendering cljstyle configuration (``.cljstyle.toml``).

Two schema generations exist:
    - `Keys`: the current nested schema (``[files]`` and ``[rules.<name>]``).
    - `LegacyKeys`: the deprecated flat schema. Every legacy key maps to exactly
      one path in the current schema (`LegacyKeys.PATHS`).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final

# A key path into a nested settings table, e.g. ("rules", "indentation", "enabled").
KeyPath = tuple[str, ...]


class Keys:
    """Section names and keys of the current configuration schema.

    The ordering of constants mirrors the rendered default configuration.
    """

    # [files]
    SECTION_FILES: Final[str] = "files"

    KEY_PATTERN: Final[str] = "pattern"
    KEY_EXTENSIONS: Final[str] = "extensions"
    KEY_IGNORED: Final[str] = "ignored"

    # [rules]
    SECTION_RULES: Final[str] = "rules"

    # Shared by every rule group.
    KEY_ENABLED: Final[str] = "enabled"

    # [rules.indentation]
    RULE_INDENTATION: Final[str] = "indentation"

    KEY_LIST_INDENT: Final[str] = "list-indent"
    KEY_INDENTS: Final[str] = "indents"

    # [rules.whitespace]
    RULE_WHITESPACE: Final[str] = "whitespace"

    KEY_REMOVE_SURROUNDING: Final[str] = "remove-surrounding"
    KEY_REMOVE_TRAILING: Final[str] = "remove-trailing"
    KEY_INSERT_MISSING: Final[str] = "insert-missing"

    # [rules.blank-lines]
    RULE_BLANK_LINES: Final[str] = "blank-lines"

    KEY_REMOVE_CONSECUTIVE: Final[str] = "remove-consecutive"
    KEY_MAX_CONSECUTIVE: Final[str] = "max-consecutive"
    KEY_INSERT_PADDING: Final[str] = "insert-padding"
    KEY_PADDING_LINES: Final[str] = "padding-lines"

    # [rules.eof-newline]
    RULE_EOF_NEWLINE: Final[str] = "eof-newline"

    # [rules.vars] and [rules.functions]
    RULE_VARS: Final[str] = "vars"
    RULE_FUNCTIONS: Final[str] = "functions"

    KEY_LINE_BREAKS: Final[str] = "line-breaks"

    # [rules.types]
    RULE_TYPES: Final[str] = "types"

    # [rules.namespaces]
    RULE_NAMESPACES: Final[str] = "namespaces"

    KEY_SINGLE_IMPORT_BREAK_WIDTH: Final[str] = "single-import-break-width"

    # ---------------------------- Schema helpers ----------------------------

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {
            SECTION_FILES,
            SECTION_RULES,
        }
    )

    ALLOWED_FILES_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_PATTERN,
            KEY_EXTENSIONS,
            KEY_IGNORED,
        }
    )

    # Allowed keys per rule group, with `enabled` implied for every group.
    ALLOWED_RULE_KEYS: Final[dict[str, frozenset[str]]] = {
        RULE_INDENTATION: frozenset({KEY_ENABLED, KEY_LIST_INDENT, KEY_INDENTS}),
        RULE_WHITESPACE: frozenset(
            {
                KEY_ENABLED,
                KEY_REMOVE_SURROUNDING,
                KEY_REMOVE_TRAILING,
                KEY_INSERT_MISSING,
            }
        ),
        RULE_BLANK_LINES: frozenset(
            {
                KEY_ENABLED,
                KEY_REMOVE_CONSECUTIVE,
                KEY_MAX_CONSECUTIVE,
                KEY_INSERT_PADDING,
                KEY_PADDING_LINES,
            }
        ),
        RULE_EOF_NEWLINE: frozenset({KEY_ENABLED}),
        RULE_VARS: frozenset({KEY_ENABLED, KEY_LINE_BREAKS}),
        RULE_FUNCTIONS: frozenset({KEY_ENABLED, KEY_LINE_BREAKS}),
        RULE_TYPES: frozenset({KEY_ENABLED}),
        RULE_NAMESPACES: frozenset({KEY_ENABLED, KEY_SINGLE_IMPORT_BREAK_WIDTH}),
    }

    # Rule keys holding non-negative integers; every other scalar rule key is a boolean.
    NAT_RULE_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_LIST_INDENT,
            KEY_MAX_CONSECUTIVE,
            KEY_PADDING_LINES,
            KEY_SINGLE_IMPORT_BREAK_WIDTH,
        }
    )

    # Indenter kinds accepted in an indent rule.
    INDENTER_KINDS: Final[frozenset[str]] = frozenset({"inner", "block", "stair"})

    # Paths consulted outside the validator.
    PATTERN_PATH: Final[KeyPath] = (SECTION_FILES, KEY_PATTERN)
    EXTENSIONS_PATH: Final[KeyPath] = (SECTION_FILES, KEY_EXTENSIONS)
    IGNORED_PATH: Final[KeyPath] = (SECTION_FILES, KEY_IGNORED)
    INDENTS_PATH: Final[KeyPath] = (SECTION_RULES, RULE_INDENTATION, KEY_INDENTS)


class LegacyKeys:
    """Keys of the deprecated flat configuration schema."""

    FILE_PATTERN: Final[str] = "file-pattern"
    FILE_IGNORE: Final[str] = "file-ignore"
    INDENTATION: Final[str] = "indentation"
    LIST_INDENT_SIZE: Final[str] = "list-indent-size"
    INDENTS: Final[str] = "indents"
    REMOVE_SURROUNDING_WHITESPACE: Final[str] = "remove-surrounding-whitespace"
    REMOVE_TRAILING_WHITESPACE: Final[str] = "remove-trailing-whitespace"
    INSERT_MISSING_WHITESPACE: Final[str] = "insert-missing-whitespace"
    REMOVE_CONSECUTIVE_BLANK_LINES: Final[str] = "remove-consecutive-blank-lines"
    MAX_CONSECUTIVE_BLANK_LINES: Final[str] = "max-consecutive-blank-lines"
    INSERT_PADDING_LINES: Final[str] = "insert-padding-lines"
    PADDING_LINES: Final[str] = "padding-lines"
    REQUIRE_EOF_NEWLINE: Final[str] = "require-eof-newline"
    LINE_BREAK_VARS: Final[str] = "line-break-vars"
    LINE_BREAK_FUNCTIONS: Final[str] = "line-break-functions"
    REFORMAT_TYPES: Final[str] = "reformat-types"
    REWRITE_NAMESPACES: Final[str] = "rewrite-namespaces"
    SINGLE_IMPORT_BREAK_WIDTH: Final[str] = "single-import-break-width"

    # Destination of every legacy key in the current schema, in translation order.
    PATHS: Final[dict[str, KeyPath]] = {
        # File matching
        FILE_PATTERN: (Keys.SECTION_FILES, Keys.KEY_PATTERN),
        FILE_IGNORE: (Keys.SECTION_FILES, Keys.KEY_IGNORED),
        # Indentation rule
        INDENTATION: (Keys.SECTION_RULES, Keys.RULE_INDENTATION, Keys.KEY_ENABLED),
        LIST_INDENT_SIZE: (Keys.SECTION_RULES, Keys.RULE_INDENTATION, Keys.KEY_LIST_INDENT),
        INDENTS: (Keys.SECTION_RULES, Keys.RULE_INDENTATION, Keys.KEY_INDENTS),
        # Whitespace rule
        REMOVE_SURROUNDING_WHITESPACE: (
            Keys.SECTION_RULES,
            Keys.RULE_WHITESPACE,
            Keys.KEY_REMOVE_SURROUNDING,
        ),
        REMOVE_TRAILING_WHITESPACE: (
            Keys.SECTION_RULES,
            Keys.RULE_WHITESPACE,
            Keys.KEY_REMOVE_TRAILING,
        ),
        INSERT_MISSING_WHITESPACE: (
            Keys.SECTION_RULES,
            Keys.RULE_WHITESPACE,
            Keys.KEY_INSERT_MISSING,
        ),
        # Blank lines rule
        REMOVE_CONSECUTIVE_BLANK_LINES: (
            Keys.SECTION_RULES,
            Keys.RULE_BLANK_LINES,
            Keys.KEY_REMOVE_CONSECUTIVE,
        ),
        MAX_CONSECUTIVE_BLANK_LINES: (
            Keys.SECTION_RULES,
            Keys.RULE_BLANK_LINES,
            Keys.KEY_MAX_CONSECUTIVE,
        ),
        INSERT_PADDING_LINES: (
            Keys.SECTION_RULES,
            Keys.RULE_BLANK_LINES,
            Keys.KEY_INSERT_PADDING,
        ),
        PADDING_LINES: (Keys.SECTION_RULES, Keys.RULE_BLANK_LINES, Keys.KEY_PADDING_LINES),
        # EOF newline rule
        REQUIRE_EOF_NEWLINE: (Keys.SECTION_RULES, Keys.RULE_EOF_NEWLINE, Keys.KEY_ENABLED),
        # Vars and functions rules
        LINE_BREAK_VARS: (Keys.SECTION_RULES, Keys.RULE_VARS, Keys.KEY_LINE_BREAKS),
        LINE_BREAK_FUNCTIONS: (Keys.SECTION_RULES, Keys.RULE_FUNCTIONS, Keys.KEY_LINE_BREAKS),
        # Types rule
        REFORMAT_TYPES: (Keys.SECTION_RULES, Keys.RULE_TYPES, Keys.KEY_ENABLED),
        # Namespaces rule
        REWRITE_NAMESPACES: (Keys.SECTION_RULES, Keys.RULE_NAMESPACES, Keys.KEY_ENABLED),
        SINGLE_IMPORT_BREAK_WIDTH: (
            Keys.SECTION_RULES,
            Keys.RULE_NAMESPACES,
            Keys.KEY_SINGLE_IMPORT_BREAK_WIDTH,
        ),
    }

    ALL: Final[frozenset[str]] = frozenset(PATHS)
