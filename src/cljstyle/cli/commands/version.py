# topmark:header:start
#
#   project      : cljstyle
#   file         : version.py
#   file_relpath : src/cljstyle/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""cljstyle `version` command.

Prints the cljstyle version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from cljstyle.constants import CLJSTYLE_VERSION


@click.command(
    name="version",
    help="Show the current version of cljstyle.",
)
def version_command() -> None:
    """Show the current version of cljstyle."""
    click.echo(CLJSTYLE_VERSION)
