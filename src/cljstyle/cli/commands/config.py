# topmark:header:start
#
#   project      : cljstyle
#   file         : config.py
#   file_relpath : src/cljstyle/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""cljstyle `config` command.

Prints the effective configuration governing a path as TOML. The files that
contributed to it are listed in ``# source:`` comments, shallowest first.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from cljstyle.cli.errors import CljstyleConfigError, CljstyleFileNotFoundError
from cljstyle.config.errors import ConfigError
from cljstyle.config.io import render_settings
from cljstyle.config.locator import resolve_settings
from cljstyle.config.logging import get_logger

if TYPE_CHECKING:
    from cljstyle.config.logging import CljstyleLogger
    from cljstyle.config.model import Settings

logger: CljstyleLogger = get_logger(__name__)


@click.command(
    name="config",
    help="Show the effective configuration for PATH (default: the current directory).",
)
@click.argument(
    "path",
    type=click.Path(path_type=Path),
    default=".",
    required=False,
)
@click.option(
    "--no-defaults",
    is_flag=True,
    default=False,
    help="Only merge the configuration files found; leave out the built-in defaults.",
)
@click.pass_context
def config_command(ctx: click.Context, path: Path, no_defaults: bool) -> None:
    """Show the effective configuration for a path.

    Args:
        ctx (click.Context): Current Click context holding the search limit.
        path (Path): File or directory to resolve configuration for.
        no_defaults (bool): Leave the built-in defaults out of the merge.
    """
    if not path.exists():
        raise CljstyleFileNotFoundError(f"No such file or directory: {path}")

    search_limit: int = ctx.obj["search_limit"]
    try:
        settings: Settings = resolve_settings(path, search_limit, defaults=not no_defaults)
    except ConfigError as exc:
        raise CljstyleConfigError.from_config_error(exc) from exc

    logger.info("Configuration for %s merged from %d file(s)", path, len(settings.paths))
    click.echo(render_settings(settings), nl=False)
