# topmark:header:start
#
#   project      : cljstyle
#   file         : test_legacy.py
#   file_relpath : tests/config/test_legacy.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Tests for translating the legacy flat schema into the nested one."""

from __future__ import annotations

import re
from typing import Any

from hypothesis import given

from cljstyle.config.defaults import default_indents, legacy_defaults
from cljstyle.config.keys import LegacyKeys
from cljstyle.config.legacy import is_legacy, legacy_source_key, translate_legacy
from cljstyle.config.schema import validate
from cljstyle.config.types import Directive, Tagged
from tests.conftest import mark_config, parametrize
from tests.strategies_cljstyle import legacy_tables


@mark_config
def test_is_legacy() -> None:
    """A table is legacy when it holds at least one legacy key."""
    assert is_legacy({"indentation": False})
    assert is_legacy({"rules": {}, "file-ignore": frozenset()})
    assert not is_legacy({"rules": {"indentation": {"enabled": False}}})
    assert not is_legacy({})


@mark_config
def test_translation_moves_keys_to_their_paths() -> None:
    """Each non-default legacy value lands at its current-schema path."""
    pattern = re.compile(r"\.cljx?$")
    translated = translate_legacy(
        {
            "file-pattern": pattern,
            "file-ignore": frozenset({"checkouts"}),
            "indentation": False,
            "list-indent-size": 1,
            "max-consecutive-blank-lines": 1,
            "line-break-functions": False,
            "single-import-break-width": 80,
        }
    )
    assert translated == {
        "files": {"pattern": pattern, "ignored": frozenset({"checkouts"})},
        "rules": {
            "indentation": {"enabled": False, "list-indent": 1},
            "blank-lines": {"max-consecutive": 1},
            "functions": {"line-breaks": False},
            "namespaces": {"single-import-break-width": 80},
        },
    }


@mark_config
def test_default_values_are_dropped() -> None:
    """A legacy value equal to its default expresses no override."""
    translated = translate_legacy({"list-indent-size": 2, "indentation": True})
    assert translated == {}


@mark_config
def test_default_indents_and_pattern_are_dropped() -> None:
    """Collection and pattern defaults are compared by value."""
    translated = translate_legacy(
        {
            "indents": dict(default_indents()),
            "file-pattern": re.compile(r"\.clj[csx]?$"),
            "file-ignore": frozenset(),
        }
    )
    assert translated == {}


@mark_config
@parametrize("value", [1, 0, 2.0])
def test_default_comparison_is_type_strict(value: Any) -> None:
    """Numbers that merely compare equal to a boolean default are kept."""
    translated = translate_legacy({"require-eof-newline": value})
    assert translated == {"rules": {"eof-newline": {"enabled": value}}}


@mark_config
def test_every_legacy_key_has_a_default() -> None:
    """The default table covers exactly the legacy keys."""
    assert set(legacy_defaults()) == LegacyKeys.ALL


@mark_config
def test_current_schema_is_returned_unchanged() -> None:
    """Translating a table without legacy keys is a no-op."""
    table: dict[str, Any] = {"rules": {"vars": {"line-breaks": False}}}
    assert translate_legacy(table) is table


@mark_config
def test_mixed_table_keeps_current_keys() -> None:
    """Current-schema keys survive; on conflict the legacy value wins."""
    translated = translate_legacy(
        {
            "reformat-types": False,
            "rules": {"types": {"enabled": True}, "vars": {"enabled": False}},
        }
    )
    assert translated == {
        "rules": {"types": {"enabled": False}, "vars": {"enabled": False}},
    }


@mark_config
def test_tagged_destination_keeps_its_directive() -> None:
    """Writing into a tagged table keeps the directive on the table."""
    translated = translate_legacy(
        {
            "padding-lines": 1,
            "rules": {"blank-lines": Tagged(Directive.REPLACE, {"enabled": True})},
        }
    )
    assert translated == {
        "rules": {
            "blank-lines": Tagged(Directive.REPLACE, {"enabled": True, "padding-lines": 1}),
        }
    }


@mark_config
def test_legacy_source_key() -> None:
    """Problems at (or below) a translated path point back to the legacy key."""
    assert legacy_source_key(("rules", "blank-lines", "max-consecutive")) == (
        "max-consecutive-blank-lines"
    )
    assert legacy_source_key(("rules", "indentation", "indents", "let", "0")) == "indents"
    assert legacy_source_key(("rules", "comments")) is None


@mark_config
@given(table=legacy_tables())
def test_translation_removes_every_legacy_key(table: dict[str, Any]) -> None:
    """No legacy key survives translation."""
    assert not is_legacy(translate_legacy(table))


@mark_config
@given(table=legacy_tables())
def test_translation_is_idempotent(table: dict[str, Any]) -> None:
    """Translating twice equals translating once."""
    once = translate_legacy(table)
    assert translate_legacy(once) == once


@mark_config
@given(table=legacy_tables())
def test_translation_of_well_typed_values_validates(table: dict[str, Any]) -> None:
    """Well-typed legacy values always translate into a valid current-schema table."""
    result = validate(translate_legacy(table))
    assert result.ok, result.explanation


@mark_config
@given(table=legacy_tables())
def test_translation_does_not_mutate_its_input(table: dict[str, Any]) -> None:
    """The input table is left untouched."""
    snapshot = {k: (dict(v) if isinstance(v, dict) else v) for k, v in table.items()}
    translate_legacy(table)
    assert table == snapshot
