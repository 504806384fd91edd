# topmark:header:start
#
#   project      : cljstyle
#   file         : locator.py
#   file_relpath : src/cljstyle/config/locator.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Discover and read ``.cljstyle.toml`` configuration files.

Configuration files may be sprinkled about the file tree; each one applies to
the subtree rooted in its directory, with deeper files merging into and
overriding their parents.

Layered discovery semantics:
    * `find_up` resolves the start path to a canonical directory **once**, then
      walks towards the filesystem root collecting one fragment per directory.
    * The walk stops after ``limit`` directories, at the filesystem root, or at
      the first directory that is missing or unreadable. None of these is an error.
    * Fragments are returned **root-most first, nearest last**, which is exactly
      the fold order `cljstyle.config.merge.merge_settings` needs.

Reading a fragment (`read_config`):
    parse TOML -> decode values -> translate legacy keys -> validate.
    A file that fails any step aborts the whole resolution with a
    `cljstyle.config.errors.ConfigError`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from cljstyle.config.defaults import default_settings
from cljstyle.config.errors import ConfigSchemaError
from cljstyle.config.io import decode_settings, load_toml_dict
from cljstyle.config.keys import LegacyKeys
from cljstyle.config.legacy import is_legacy, legacy_source_key, translate_legacy
from cljstyle.config.logging import get_logger
from cljstyle.config.merge import merge_settings
from cljstyle.config.model import Settings
from cljstyle.config.paths import canonical_dir, is_directory, is_file, is_readable
from cljstyle.config.schema import validate
from cljstyle.constants import CONFIG_FILE_NAME, DEFAULT_SEARCH_LIMIT

if TYPE_CHECKING:
    from os import PathLike

    from cljstyle.config.logging import CljstyleLogger
    from cljstyle.config.schema import ValidationResult
    from cljstyle.config.types import SettingsTable

logger: CljstyleLogger = get_logger(__name__)


def _schema_error_message(source: str, result: ValidationResult, legacy_keys: set[str]) -> str:
    lines: list[str] = [f"Invalid configuration loaded from file: {source}"]
    for problem in result.problems:
        line = problem.describe()
        legacy_key = legacy_source_key(problem.path)
        if legacy_key is not None and legacy_key in legacy_keys:
            line += f" (translated from legacy key {legacy_key!r})"
        lines.append(line)
    return "\n".join(lines)


def read_config(path: str | PathLike[str]) -> Settings:
    """Read a configuration file.

    Args:
        path (str | PathLike[str]): Path to a ``.cljstyle.toml`` file.

    Returns:
        Settings: The file's settings in the current schema, with ``paths`` set to
        the file's absolute path.

    Raises:
        ConfigParseError: If the file cannot be read or decoded.
        ConfigSchemaError: If the settings are not valid.
    """
    file = Path(path).absolute()
    source = str(file)

    table: SettingsTable = decode_settings(load_toml_dict(file), source=source)
    legacy_keys: set[str] = set()
    if is_legacy(table):
        legacy_keys = {k for k in table if k in LegacyKeys.ALL}
        logger.info("Translating legacy configuration keys in %s: %s", source, sorted(legacy_keys))
        table = translate_legacy(table)

    result: ValidationResult = validate(table)
    if not result.ok:
        message = _schema_error_message(source, result, legacy_keys)
        logger.error("%s", message)
        raise ConfigSchemaError(source, message, result)

    logger.debug("Read configuration from %s", source)
    return Settings(data=table, paths=(source,))


def dir_config(directory: Path) -> Settings | None:
    """Return the configuration declared in ``directory``, if any.

    Returns:
        Settings | None: The fragment when the configuration file exists and is
        readable, otherwise None.

    Raises:
        ConfigError: If the file exists but is malformed.
    """
    file: Path = directory / CONFIG_FILE_NAME
    if is_file(file) and is_readable(file):
        return read_config(file)
    return None


def find_up(start: str | PathLike[str], limit: int) -> list[Settings]:
    """Search upwards from ``start``, collecting configuration fragments.

    The search includes the start directory itself (or the directory containing
    ``start`` when it names a file) and terminates after ``limit`` directories,
    at the filesystem root, or at a directory the process cannot read.

    Args:
        start (str | PathLike[str]): File or directory the search starts from.
        limit (int): Maximum number of directories to visit; must be positive.

    Returns:
        list[Settings]: Fragments ordered shallowest first, nearest last.

    Raises:
        ValueError: If ``limit`` is not a positive integer.
        ConfigError: If a discovered configuration file is malformed.
    """
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"find_up() limit must be a positive integer, got {limit!r}")

    configs: list[Settings] = []
    directory: Path | None = canonical_dir(start)
    while limit > 0 and is_directory(directory) and is_readable(directory):
        assert directory is not None
        logger.trace("Looking for %s in %s", CONFIG_FILE_NAME, directory)
        config: Settings | None = dir_config(directory)
        if config is not None:
            configs.insert(0, config)
        parent: Path = directory.parent
        directory = parent if parent != directory else None
        limit -= 1

    if directory is None:
        logger.debug("Stopped configuration search at the filesystem root")
    elif limit == 0:
        logger.debug("Stopped configuration search at %s: search limit reached", directory)
    else:
        logger.debug("Stopped configuration search at unreadable directory %s", directory)
    return configs


def resolve_settings(
    start: str | PathLike[str],
    limit: int = DEFAULT_SEARCH_LIMIT,
    *,
    defaults: bool = True,
) -> Settings:
    """Return the effective settings governing ``start``.

    Args:
        start (str | PathLike[str]): File or directory to resolve configuration for.
        limit (int): Maximum number of directories `find_up` visits.
        defaults (bool): Whether to layer the fragments over the built-in defaults.

    Returns:
        Settings: The merged settings; ``paths`` lists every fragment folded in.
    """
    fragments: list[Settings] = find_up(start, limit)
    if defaults:
        return merge_settings(default_settings(), *fragments)
    return merge_settings(*fragments)
