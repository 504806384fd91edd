# topmark:header:start
#
#   project      : cljstyle
#   file         : strategies_cljstyle.py
#   file_relpath : tests/strategies_cljstyle.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating settings tables and legacy configurations.

The strategies stay inside the shapes the decoder produces (tuples, frozensets,
nested string-keyed tables) so property tests exercise realistic values.
"""

from __future__ import annotations

from typing import Any

from hypothesis import strategies as st

from cljstyle.config.keys import Keys, LegacyKeys
from cljstyle.config.types import Directive, Tagged

NAMES: st.SearchStrategy[str] = st.sampled_from(
    ["build", "target", "node_modules", "out", ".cpcache", "resources", "dev"]
)

KEYS: st.SearchStrategy[str] = st.sampled_from(["a", "b", "c", "d", "e"])

SCALARS: st.SearchStrategy[Any] = st.one_of(
    st.booleans(),
    st.integers(min_value=0, max_value=120),
    NAMES,
)

COLLECTIONS: st.SearchStrategy[Any] = st.one_of(
    st.lists(NAMES, max_size=4).map(tuple),
    st.frozensets(NAMES, max_size=4),
)


def _tag(value: Any) -> st.SearchStrategy[Any]:
    return st.one_of(
        st.just(value),
        st.sampled_from(list(Directive)).map(lambda d: Tagged(d, value)),
    )


LEAVES: st.SearchStrategy[Any] = st.one_of(SCALARS, COLLECTIONS.flatmap(_tag))

# Nested settings tables a few levels deep, with occasional merge directives.
TABLES: st.SearchStrategy[dict[str, Any]] = st.recursive(
    st.dictionaries(KEYS, LEAVES, max_size=4),
    lambda children: st.dictionaries(KEYS, st.one_of(LEAVES, children), max_size=4),
    max_leaves=12,
)

_BOOL_LEGACY_KEYS: tuple[str, ...] = (
    LegacyKeys.INDENTATION,
    LegacyKeys.REMOVE_SURROUNDING_WHITESPACE,
    LegacyKeys.REMOVE_TRAILING_WHITESPACE,
    LegacyKeys.INSERT_MISSING_WHITESPACE,
    LegacyKeys.REMOVE_CONSECUTIVE_BLANK_LINES,
    LegacyKeys.INSERT_PADDING_LINES,
    LegacyKeys.REQUIRE_EOF_NEWLINE,
    LegacyKeys.LINE_BREAK_VARS,
    LegacyKeys.LINE_BREAK_FUNCTIONS,
    LegacyKeys.REFORMAT_TYPES,
    LegacyKeys.REWRITE_NAMESPACES,
)

_NAT_LEGACY_KEYS: tuple[str, ...] = (
    LegacyKeys.LIST_INDENT_SIZE,
    LegacyKeys.MAX_CONSECUTIVE_BLANK_LINES,
    LegacyKeys.PADDING_LINES,
    LegacyKeys.SINGLE_IMPORT_BREAK_WIDTH,
)


@st.composite
def legacy_tables(draw: st.DrawFn) -> dict[str, Any]:
    """Draw a legacy flat-schema table holding at least one legacy key.

    Current-schema sections are sometimes mixed in to cover partially migrated files.
    """
    table: dict[str, Any] = {}
    for key in draw(st.lists(st.sampled_from(_BOOL_LEGACY_KEYS), unique=True, max_size=5)):
        table[key] = draw(st.booleans())
    for key in draw(st.lists(st.sampled_from(_NAT_LEGACY_KEYS), unique=True, max_size=3)):
        table[key] = draw(st.integers(min_value=0, max_value=80))
    if draw(st.booleans()):
        table[LegacyKeys.FILE_IGNORE] = draw(st.frozensets(NAMES, max_size=3))
    if not table:
        table[LegacyKeys.INDENTATION] = draw(st.booleans())
    if draw(st.booleans()):
        table[Keys.SECTION_RULES] = {Keys.RULE_TYPES: {Keys.KEY_ENABLED: draw(st.booleans())}}
    return table
