# topmark:header:start
#
#   project      : cljstyle
#   file         : find.py
#   file_relpath : src/cljstyle/cli/commands/find.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""cljstyle `find` command.

Lists the source files cljstyle would process under the given paths, one per
line, honoring every ``.cljstyle.toml`` along the way plus any ``--exclude``
globs given on the command line.
"""

from __future__ import annotations

import click

from cljstyle.cli.errors import CljstyleConfigError
from cljstyle.config.errors import ConfigError
from cljstyle.config.logging import get_logger
from cljstyle.files import find_source_files

logger = get_logger(__name__)


@click.command(
    name="find",
    help="List the source files found under PATHS (default: the current directory).",
)
@click.argument("paths", nargs=-1, type=click.Path())
@click.option(
    "--exclude",
    "exclude_globs",
    multiple=True,
    metavar="GLOB",
    help="Skip paths matching this glob (gitignore-style). May be repeated.",
)
@click.pass_context
def find_command(ctx: click.Context, paths: tuple[str, ...], exclude_globs: tuple[str, ...]) -> None:
    """List recognized, non-ignored source files.

    Args:
        ctx (click.Context): Current Click context holding the search limit.
        paths (tuple[str, ...]): Files and directories to search.
        exclude_globs (tuple[str, ...]): Extra exclusion globs.
    """
    search_limit: int = ctx.obj["search_limit"]
    count = 0
    try:
        for path in find_source_files(
            paths or (".",),
            exclude_globs=exclude_globs,
            search_limit=search_limit,
        ):
            click.echo(path.as_posix())
            count += 1
    except ConfigError as exc:
        raise CljstyleConfigError.from_config_error(exc) from exc
    logger.info("Found %d source file(s)", count)
