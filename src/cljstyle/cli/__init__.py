# topmark:header:start
#
#   project      : cljstyle
#   file         : __init__.py
#   file_relpath : src/cljstyle/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Click-based command line interface for cljstyle."""

from __future__ import annotations
