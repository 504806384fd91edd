# topmark:header:start
#
#   project      : cljstyle
#   file         : __init__.py
#   file_relpath : src/cljstyle/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""TOML I/O helpers for cljstyle configuration.

This package centralizes helpers for reading, decoding and writing the TOML
used by cljstyle's configuration layer. Keeping these utilities separate helps
avoid import cycles and keeps the settings model small and focused.

TOML parsing/formatting:
    cljstyle uses `tomlkit` for parsing and rendering.

    - `load_toml_dict()` parses on-disk TOML and returns plain dicts.
    - `decode_settings()` turns TOML values into settings values (patterns,
      sets, merge directives).
    - `to_toml()` renders a settings table back to TOML;
      `render_settings()` adds the provenance comments.
"""

from __future__ import annotations

from .loaders import (
    decode_indents,
    decode_settings,
    is_regex_literal,
    load_resource_toml,
    load_toml_dict,
)
from .render import encode_settings, render_settings, to_toml
from .types import TomlTable

__all__: list[str] = [
    "TomlTable",
    "decode_indents",
    "decode_settings",
    "encode_settings",
    "is_regex_literal",
    "load_resource_toml",
    "load_toml_dict",
    "render_settings",
    "to_toml",
]
