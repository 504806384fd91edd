# topmark:header:start
#
#   project      : cljstyle
#   file         : migrate.py
#   file_relpath : src/cljstyle/cli/commands/migrate.py
#   license      : MIT
#   copyright    : (c) 2025 cljstyle contributors
#
# topmark:header:end

"""cljstyle `migrate` command.

Prints the current-schema equivalent of a configuration file written in the
legacy flat schema. Legacy values equal to their defaults are dropped by the
translation, so they do not appear in the output.
"""

from __future__ import annotations

from pathlib import Path

import click

from cljstyle.cli.errors import CljstyleConfigError, CljstyleFileNotFoundError
from cljstyle.config.errors import ConfigError
from cljstyle.config.io import decode_settings, load_toml_dict, to_toml
from cljstyle.config.legacy import is_legacy
from cljstyle.config.locator import read_config
from cljstyle.config.paths import is_directory
from cljstyle.constants import CONFIG_FILE_NAME


@click.command(
    name="migrate",
    help=(
        "Print the current-schema translation of a legacy configuration file. "
        f"PATH is a {CONFIG_FILE_NAME} file or a directory containing one "
        "(default: the current directory)."
    ),
)
@click.argument(
    "path",
    type=click.Path(path_type=Path),
    default=".",
    required=False,
)
def migrate_command(path: Path) -> None:
    """Translate a legacy configuration file to the current schema.

    Args:
        path (Path): Configuration file, or the directory holding it.
    """
    file: Path = path / CONFIG_FILE_NAME if is_directory(path) else path
    if not file.is_file():
        raise CljstyleFileNotFoundError(f"No configuration file found: {file}")

    try:
        source = str(file.absolute())
        if not is_legacy(decode_settings(load_toml_dict(file), source=source)):
            click.echo(f"{source} already uses the current configuration schema.", err=True)
        settings = read_config(file)
    except ConfigError as exc:
        raise CljstyleConfigError.from_config_error(exc) from exc

    click.echo(to_toml(settings.data), nl=False)
