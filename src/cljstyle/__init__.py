# topmark:header:start
#
#   project      : cljstyle
#   file         : __init__.py
#   file_relpath : src/cljstyle/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""cljstyle package.

cljstyle is a formatter for Clojure source trees. This package holds its
configuration layer: locating ``.cljstyle.toml`` files up the directory tree,
translating the legacy flat schema, validating and merging settings, and
classifying which files are Clojure sources to format.
"""

from __future__ import annotations
