# topmark:header:start
#
#   project      : cljstyle
#   file         : schema.py
#   file_relpath : src/cljstyle/config/schema.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Shape validation for current-schema settings tables.

`validate` checks a decoded settings table against the nested ``files`` /
``rules`` schema and reports every problem it finds. It only understands the
current schema: legacy tables must go through
`cljstyle.config.legacy.translate_legacy` first.

Every key is optional, so a fragment may set any subset of the schema. The
schema is closed: unknown sections, rule groups and keys are rejected.
Merge directives (`cljstyle.config.types.Tagged`) are transparent here: the
wrapped value is validated in place of the wrapper.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from cljstyle.config.keys import Keys
from cljstyle.config.logging import get_logger
from cljstyle.config.types import is_pattern, unwrap

if TYPE_CHECKING:
    from cljstyle.config.keys import KeyPath
    from cljstyle.config.logging import CljstyleLogger

logger: CljstyleLogger = get_logger(__name__)


@dataclass(frozen=True)
class Problem:
    """A single schema violation.

    Attributes:
        path (KeyPath): Location of the offending value in the settings table.
        expected (str): Description of what the schema requires there.
        actual (Any): The value that was found.
    """

    path: KeyPath
    expected: str
    actual: Any

    @property
    def field(self) -> str:
        """Dotted field path, e.g. ``rules.blank-lines.max-consecutive``."""
        return ".".join(self.path) if self.path else "<root>"

    def describe(self) -> str:
        """Return a one-line human-readable description of the problem."""
        return f"{self.field}: expected {self.expected}, got {self.actual!r}"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of `validate`.

    Attributes:
        problems (tuple[Problem, ...]): Every violation found, in table order.
    """

    problems: tuple[Problem, ...] = ()

    @property
    def ok(self) -> bool:
        """True if the table satisfies the schema."""
        return not self.problems

    @property
    def explanation(self) -> str:
        """One line per problem; empty when the table is valid."""
        return "\n".join(p.describe() for p in self.problems)


def _is_nat(value: object) -> bool:
    # bool is a subclass of int but never a count
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _key_text(key: object) -> str:
    if is_pattern(key):
        return f"/{key.pattern}/"  # type: ignore[attr-defined]
    return str(key)


def _is_indent_key(key: object) -> bool:
    return (isinstance(key, str) and bool(key)) or is_pattern(key)


def _is_ignore_rule(rule: object) -> bool:
    return isinstance(rule, str) or is_pattern(rule)


def _check_files(value: Any, path: KeyPath, problems: list[Problem]) -> None:
    value = unwrap(value)
    if not isinstance(value, Mapping):
        problems.append(Problem(path, "a table", value))
        return
    for key, raw in value.items():
        sub: KeyPath = (*path, str(key))
        item = unwrap(raw)
        if key == Keys.KEY_PATTERN:
            if not is_pattern(item):
                problems.append(Problem(sub, "a regular expression", item))
        elif key == Keys.KEY_EXTENSIONS:
            if not isinstance(item, frozenset) or not all(isinstance(e, str) for e in item):
                problems.append(Problem(sub, "a set of strings", item))
        elif key == Keys.KEY_IGNORED:
            if not isinstance(item, frozenset) or not all(_is_ignore_rule(r) for r in item):
                problems.append(Problem(sub, "a set of names or /regex/ patterns", item))
        else:
            allowed = ", ".join(sorted(Keys.ALLOWED_FILES_KEYS))
            problems.append(Problem(sub, f"a known key ({allowed})", key))


def _check_indenter(value: Any, path: KeyPath, problems: list[Problem]) -> None:
    value = unwrap(value)
    if (
        not isinstance(value, tuple)
        or len(value) < 2
        or not isinstance(value[0], str)
        or value[0] not in Keys.INDENTER_KINDS
        or not all(_is_nat(arg) for arg in value[1:])
    ):
        kinds = "|".join(sorted(Keys.INDENTER_KINDS))
        problems.append(
            Problem(path, f"an indenter [{kinds}, <non-negative integers>...]", value)
        )


def _check_indents(value: Any, path: KeyPath, problems: list[Problem]) -> None:
    value = unwrap(value)
    if not isinstance(value, Mapping):
        problems.append(Problem(path, "a table of indent rules", value))
        return
    for key, raw in value.items():
        sub: KeyPath = (*path, _key_text(key))
        if not _is_indent_key(key):
            problems.append(Problem(sub, "a symbol or /regex/ pattern key", key))
            continue
        rule = unwrap(raw)
        if not isinstance(rule, tuple):
            problems.append(Problem(sub, "an array of indenters", rule))
            continue
        for i, indenter in enumerate(rule):
            _check_indenter(indenter, (*sub, str(i)), problems)


def _check_rule(name: str, value: Any, path: KeyPath, problems: list[Problem]) -> None:
    value = unwrap(value)
    if not isinstance(value, Mapping):
        problems.append(Problem(path, "a table", value))
        return
    allowed: frozenset[str] = Keys.ALLOWED_RULE_KEYS[name]
    for key, raw in value.items():
        sub: KeyPath = (*path, str(key))
        item = unwrap(raw)
        if key not in allowed:
            problems.append(Problem(sub, f"a known key ({', '.join(sorted(allowed))})", key))
        elif key == Keys.KEY_INDENTS:
            _check_indents(raw, sub, problems)
        elif key in Keys.NAT_RULE_KEYS:
            if not _is_nat(item):
                problems.append(Problem(sub, "a non-negative integer", item))
        elif not isinstance(item, bool):
            problems.append(Problem(sub, "a boolean", item))


def _check_rules(value: Any, path: KeyPath, problems: list[Problem]) -> None:
    value = unwrap(value)
    if not isinstance(value, Mapping):
        problems.append(Problem(path, "a table of rule groups", value))
        return
    for name, raw in value.items():
        sub: KeyPath = (*path, str(name))
        if name not in Keys.ALLOWED_RULE_KEYS:
            known = ", ".join(sorted(Keys.ALLOWED_RULE_KEYS))
            problems.append(Problem(sub, f"a known rule ({known})", name))
            continue
        _check_rule(name, raw, sub, problems)


def validate(table: Any) -> ValidationResult:
    """Validate a current-schema settings table.

    Args:
        table (Any): The decoded (and, if needed, translated) settings table.

    Returns:
        ValidationResult: ``ok`` when valid, otherwise the list of problems with an
        ``explanation`` naming each offending field, the expectation and the actual value.
    """
    problems: list[Problem] = []
    if not isinstance(table, Mapping):
        problems.append(Problem((), "a table", table))
        return ValidationResult(tuple(problems))

    for key, value in table.items():
        if key == Keys.SECTION_FILES:
            _check_files(value, (key,), problems)
        elif key == Keys.SECTION_RULES:
            _check_rules(value, (key,), problems)
        else:
            allowed = ", ".join(sorted(Keys.ALLOWED_TOP_LEVEL_KEYS))
            problems.append(Problem((str(key),), f"a known section ({allowed})", key))

    if problems:
        logger.debug("Settings failed validation with %d problem(s)", len(problems))
    return ValidationResult(tuple(problems))
