# topmark:header:start
#
#   project      : cljstyle
#   file         : files.py
#   file_relpath : src/cljstyle/files.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Decide which files cljstyle processes.

Two independent predicates consult the effective `Settings`:

- `is_source_file`: a readable regular file whose bare name matches
  ``files.pattern`` (or, when no pattern is configured, ends with one of
  ``files.extensions``).
- `is_ignored`: an existing, readable entry whose name equals a string ignore
  rule, whose canonical path matches a pattern ignore rule, or which matches one
  of the caller-supplied exclusion globs.

`find_source_files` combines both with the configuration locator to walk
directory trees, picking up each subdirectory's ``.cljstyle.toml`` on the way
down. The result is sorted so output is deterministic.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from cljstyle.config.keys import Keys
from cljstyle.config.locator import dir_config, resolve_settings
from cljstyle.config.logging import get_logger
from cljstyle.config.merge import merge_settings
from cljstyle.config.paths import is_directory, is_file, is_readable
from cljstyle.config.types import is_pattern
from cljstyle.constants import DEFAULT_SEARCH_LIMIT

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from os import PathLike

    from cljstyle.config.logging import CljstyleLogger
    from cljstyle.config.model import Settings

logger: CljstyleLogger = get_logger(__name__)

__all__: list[str] = [
    "find_source_files",
    "is_directory",
    "is_file",
    "is_ignored",
    "is_readable",
    "is_source_file",
]


def is_source_file(settings: Settings, path: Path) -> bool:
    """True if ``path`` is a recognized source file.

    Args:
        settings (Settings): Effective settings for the file's directory.
        path (Path): Candidate file.

    Returns:
        bool: Whether the file is a readable regular file whose name matches the
        configured inclusion pattern, or a configured extension when no pattern is set.
    """
    if not (is_file(path) and is_readable(path)):
        return False
    pattern = settings.get_in(Keys.PATTERN_PATH)
    if pattern is not None:
        return pattern.search(path.name) is not None
    extensions: frozenset[str] = settings.get_in(Keys.EXTENSIONS_PATH, frozenset())
    return any(path.name.endswith(ext) for ext in extensions)


def _glob_target(path: Path) -> str:
    """Return the POSIX path string a gitwildmatch pattern is tested against."""
    text = path.as_posix()
    return text.lstrip("/") if path.is_absolute() else text


def _matches_glob(glob: str, path: Path) -> bool:
    spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, [glob])
    return spec.match_file(_glob_target(path))


def _matches_rule(rule: object, path: Path) -> bool:
    if isinstance(rule, str):
        return rule == path.name
    if is_pattern(rule):
        return rule.search(str(path.absolute().resolve())) is not None  # type: ignore[attr-defined]
    return False


def is_ignored(settings: Settings, exclude_globs: Iterable[str], path: Path) -> bool:
    """True if ``path`` should be skipped.

    Args:
        settings (Settings): Effective settings for the entry's directory.
        exclude_globs (Iterable[str]): Extra gitwildmatch globs supplied by the caller;
            each is compiled for this call only.
        path (Path): File or directory to test.

    Returns:
        bool: Whether the entry exists, is readable and matches an ignore rule or
        an exclusion glob. Stops at the first match.
    """
    if not (path.exists() and is_readable(path)):
        return False
    rules = settings.get_in(Keys.IGNORED_PATH, frozenset())
    for rule in rules:
        if _matches_rule(rule, path):
            logger.trace("%s matches ignore rule %r", path, rule)
            return True
    for glob in exclude_globs:
        if _matches_glob(glob, path):
            logger.trace("%s matches exclusion glob %r", path, glob)
            return True
    return False


def _walk(settings: Settings, exclude_globs: tuple[str, ...], directory: Path) -> Iterator[Path]:
    if not is_readable(directory):
        logger.warning("Skipping unreadable directory: %s", directory)
        return
    for child in sorted(directory.iterdir()):
        if is_ignored(settings, exclude_globs, child):
            logger.debug("Ignoring %s", child)
            continue
        if is_directory(child):
            child_settings: Settings = settings
            config: Settings | None = dir_config(child)
            if config is not None:
                child_settings = merge_settings(settings, config)
            yield from _walk(child_settings, exclude_globs, child)
        elif is_source_file(settings, child):
            yield child


def find_source_files(
    paths: Iterable[str | PathLike[str]],
    *,
    exclude_globs: Iterable[str] = (),
    search_limit: int = DEFAULT_SEARCH_LIMIT,
) -> Iterator[Path]:
    """Yield the source files found under ``paths``.

    For each start path the effective settings are resolved by searching up the
    tree (`resolve_settings`). Directories are then walked in sorted order; a
    subdirectory's configuration file is merged in before its contents are
    examined, and ignored entries prune whole subtrees. Explicitly named files are
    yielded when they are source files and not ignored.

    Args:
        paths (Iterable[str | PathLike[str]]): Files and directories to search.
        exclude_globs (Iterable[str]): Exclusion globs applied in addition to the
            configured ignore rules.
        search_limit (int): Directory limit for the upward configuration search.

    Yields:
        Path: Each recognized, non-ignored source file.

    Raises:
        ConfigError: If a configuration file along the way is malformed.
    """
    globs: tuple[str, ...] = tuple(exclude_globs)
    for raw in paths:
        path = Path(raw)
        if not path.exists():
            logger.warning("No such file or directory: %s", path)
            continue
        settings: Settings = resolve_settings(path, search_limit)
        logger.debug("Resolved settings for %s from %s", path, list(settings.paths))
        if is_ignored(settings, globs, path):
            logger.debug("Ignoring %s", path)
            continue
        if is_directory(path):
            yield from _walk(settings, globs, path)
        elif is_source_file(settings, path):
            yield path
