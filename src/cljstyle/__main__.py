# topmark:header:start
#
#   project      : cljstyle
#   file         : __main__.py
#   file_relpath : src/cljstyle/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""Module entry point for running cljstyle via ``python -m cljstyle``.

It delegates directly to :func:`cljstyle.cli.main.cli`, equivalent to running
the ``cljstyle`` console script.

Examples:
    Show the effective configuration for a directory::

        python -m cljstyle config src/
"""

from __future__ import annotations

from cljstyle.cli.main import cli

if __name__ == "__main__":
    cli()
