# topmark:header:start
#
#   project      : cljstyle
#   file         : test_merge.py
#   file_relpath : tests/config/test_merge.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Tests for the settings merge policy."""

from __future__ import annotations

from typing import Any

from hypothesis import given
from hypothesis import strategies as st

from cljstyle.config.merge import merge_settings, merge_tables, merge_values
from cljstyle.config.model import Settings
from cljstyle.config.types import Directive, Tagged
from tests.conftest import mark_config, settings_of
from tests.strategies_cljstyle import SCALARS, TABLES


@mark_config
def test_deeper_toggle_wins() -> None:
    """The right-hand (deeper) fragment overrides scalars."""
    a = settings_of({"rules": {"indentation": {"enabled": True, "list-indent": 2}}})
    b = settings_of({"rules": {"indentation": {"enabled": False}}})
    merged = merge_settings(a, b)
    assert merged.data == {"rules": {"indentation": {"enabled": False, "list-indent": 2}}}


@mark_config
def test_sets_are_unioned() -> None:
    """Ignore sets accumulate across fragments."""
    a = settings_of({"files": {"ignored": frozenset({"x"})}})
    b = settings_of({"files": {"ignored": frozenset({"y"})}})
    assert merge_settings(a, b).get_in(("files", "ignored")) == frozenset({"x", "y"})


@mark_config
def test_sequences_are_concatenated() -> None:
    """Sequences append the deeper value after the shallower one."""
    assert merge_values(("a", "b"), ("c",)) == ("a", "b", "c")


@mark_config
def test_replace_discards_the_ancestor_value() -> None:
    """A ``replace`` directive on the deeper value wins outright."""
    a = settings_of({"files": {"ignored": frozenset({"x"})}})
    replacement = Tagged(Directive.REPLACE, frozenset({"y"}))
    b = settings_of({"files": {"ignored": replacement}})
    merged = merge_settings(a, b)
    assert merged.data["files"]["ignored"] is replacement
    assert merged.get_in(("files", "ignored")) == frozenset({"y"})


@mark_config
def test_displace_yields_to_the_deeper_value() -> None:
    """A ``displace`` directive on the shallower value is dropped in favor of the deeper one."""
    indents = Tagged(Directive.DISPLACE, {"let": ()})
    a = settings_of({"rules": {"indentation": {"indents": indents}}})
    b = settings_of({"rules": {"indentation": {"indents": {"when": ()}}}})
    assert merge_settings(a, b).get_in(("rules", "indentation", "indents")) == {"when": ()}


@mark_config
def test_displace_survives_when_not_overridden() -> None:
    """A displaceable value without a deeper counterpart passes through."""
    a = settings_of({"files": {"extensions": Tagged(Directive.DISPLACE, frozenset({".clj"}))}})
    b = settings_of({"rules": {}})
    assert merge_settings(a, b).get_in(("files", "extensions")) == frozenset({".clj"})


@mark_config
def test_mismatched_kinds_take_the_deeper_value() -> None:
    """A collection meeting a scalar (or vice versa) is simply overridden."""
    assert merge_values(frozenset({"x"}), 3) == 3
    assert merge_values({"a": 1}, ("a",)) == ("a",)


@mark_config
def test_nested_tables_merge_recursively() -> None:
    """Tables merge key by key at every depth."""
    merged = merge_tables(
        {"rules": {"blank-lines": {"enabled": True, "padding-lines": 2}}},
        {"rules": {"blank-lines": {"padding-lines": 1}, "types": {"enabled": False}}},
    )
    assert merged == {
        "rules": {
            "blank-lines": {"enabled": True, "padding-lines": 1},
            "types": {"enabled": False},
        }
    }


@mark_config
def test_arity() -> None:
    """Zero arguments give empty settings; one argument is returned as is."""
    assert merge_settings() == Settings()
    only = settings_of({"rules": {}}, "/a/.cljstyle.toml")
    assert merge_settings(only) is only


@mark_config
def test_provenance_concatenates() -> None:
    """Paths accumulate left to right and take no part in equality."""
    a = settings_of({}, "/a/.cljstyle.toml")
    b = settings_of({}, "/a/b/.cljstyle.toml")
    c = settings_of({}, "/a/b/c/.cljstyle.toml")
    merged = merge_settings(a, b, c)
    assert merged.paths == ("/a/.cljstyle.toml", "/a/b/.cljstyle.toml", "/a/b/c/.cljstyle.toml")
    assert merged == Settings()


@mark_config
def test_inputs_are_not_mutated() -> None:
    """Merging builds new tables."""
    left: dict[str, Any] = {"rules": {"vars": {"enabled": True}}}
    right: dict[str, Any] = {"rules": {"vars": {"enabled": False}}}
    merge_tables(left, right)
    assert left == {"rules": {"vars": {"enabled": True}}}
    assert right == {"rules": {"vars": {"enabled": False}}}


@mark_config
@given(a=TABLES, b=TABLES, c=TABLES)
def test_fold_equals_pairwise_accumulation(
    a: dict[str, Any], b: dict[str, Any], c: dict[str, Any]
) -> None:
    """Folding ``[a, b, c]`` equals merging ``a`` with ``b`` and then with ``c``."""
    sa, sb, sc = settings_of(a, "a"), settings_of(b, "b"), settings_of(c, "c")
    folded = merge_settings(sa, sb, sc)
    stepwise = merge_settings(merge_settings(sa, sb), sc)
    assert folded == stepwise
    assert folded.paths == stepwise.paths == ("a", "b", "c")


@mark_config
@given(table=TABLES)
def test_empty_table_is_neutral(table: dict[str, Any]) -> None:
    """Merging with an empty table on either side changes nothing."""
    assert merge_tables({}, table) == table
    assert merge_tables(table, {}) == table


@mark_config
@given(a=TABLES, key=st.sampled_from(["a", "b", "c"]), value=SCALARS)
def test_deeper_scalar_always_wins(a: dict[str, Any], key: str, value: Any) -> None:
    """Whatever the shallower value, a deeper scalar overrides it."""
    assert merge_tables(a, {key: value})[key] == value


@mark_config
@given(a=TABLES, b=TABLES)
def test_keys_are_preserved(a: dict[str, Any], b: dict[str, Any]) -> None:
    """The merged table has exactly the keys of both sides."""
    assert set(merge_tables(a, b)) == set(a) | set(b)
