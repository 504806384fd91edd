# topmark:header:start
#
#   project      : cljstyle
#   file         : __init__.py
#   file_relpath : src/cljstyle/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""cljstyle CLI subcommands."""

from __future__ import annotations
