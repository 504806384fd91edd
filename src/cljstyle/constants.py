# topmark:header:start
#
#   project      : cljstyle
#   file         : constants.py
#   file_relpath : src/cljstyle/constants.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""cljstyle Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

CLJSTYLE_VERSION: str = get_version("cljstyle")

# Name of the per-directory configuration file.
CONFIG_FILE_NAME: str = ".cljstyle.toml"

# Number of directories `find_up()` visits by default.
DEFAULT_SEARCH_LIMIT: int = 25

# Bundled resources inside the package `cljstyle.config`:
DEFAULT_RESOURCE_PACKAGE: str = "cljstyle.config"
DEFAULT_INDENTS_NAME: str = "indents.toml"

# Environment variable consulted by `setup_logging()`.
LOG_LEVEL_ENV_VAR: str = "CLJSTYLE_LOG_LEVEL"
