# topmark:header:start
#
#   project      : cljstyle
#   file         : paths.py
#   file_relpath : src/cljstyle/config/paths.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Pure helpers for filesystem predicates and path canonicalization.

These utilities are shared by the configuration locator and the file
classifier. They do no I/O beyond ``stat``/``access`` calls and
``Path.resolve()``, and never raise for missing or unreadable entries: such
entries simply fail the predicate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from os import PathLike


def is_readable(path: Path | None) -> bool:
    """True if the process can read the given path."""
    return path is not None and os.access(path, os.R_OK)


def is_file(path: Path | None) -> bool:
    """True if the given path is a regular file."""
    return path is not None and path.is_file()


def is_directory(path: Path | None) -> bool:
    """True if the given path is a directory."""
    return path is not None and path.is_dir()


def canonical_dir(path: str | PathLike[str]) -> Path:
    """Return the nearest canonical directory for ``path``.

    The path is made absolute and resolved (symlinks, ``..``). If it names a
    directory, that directory is returned; anything else (a file, or a path that
    does not exist) yields its parent directory.
    """
    p: Path = Path(path).absolute().resolve()
    return p if p.is_dir() else p.parent
