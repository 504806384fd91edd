# topmark:header:start
#
#   project      : cljstyle
#   file         : main.py
#   file_relpath : src/cljstyle/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""cljstyle CLI entry point.

Group-level options are initialized once and placed into ``ctx.obj``:

- ``search_limit``: directory bound for the upward configuration search;
- ``log_level``: logging level from ``CLJSTYLE_LOG_LEVEL`` or ``-v``/``-q``.
"""

from __future__ import annotations

import click

from cljstyle.cli.commands.config import config_command
from cljstyle.cli.commands.find import find_command
from cljstyle.cli.commands.migrate import migrate_command
from cljstyle.cli.commands.version import version_command
from cljstyle.cli.options import common_verbose_options, resolve_verbosity, search_limit_option
from cljstyle.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int, search_limit: int) -> None:
    """Initialize shared state (logging and search limit) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        search_limit (int): Value of ``--search-limit``.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    # CLJSTYLE_LOG_LEVEL overrides -v/-q.
    level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    ctx.obj["search_limit"] = search_limit
    logger.debug("Logging level %s, search limit %d", level, search_limit)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="cljstyle configuration tools.",
)
@common_verbose_options
@search_limit_option
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, search_limit: int) -> None:
    """Entry point for the cljstyle CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, search_limit=search_limit)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(config_command)

cli.add_command(find_command)

cli.add_command(migrate_command)

if __name__ == "__main__":
    cli()
