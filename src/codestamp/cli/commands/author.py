# topmark:header:start
#
#   project      : CodeStamp
#   file         : author.py
#   file_relpath : src/codestamp/cli/commands/author.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""CodeStamp `author` command.

Persists the author name written into stamps. The name goes into the user
config file unless ``--file`` points elsewhere (a project ``codestamp.toml``
or ``pyproject.toml``); other settings and comments in that file are kept.
When NAME is omitted, the command prompts with the current value.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from codestamp.cli.config_resolver import resolve_config_from_click
from codestamp.cli.errors import CodestampConfigError
from codestamp.config import ConfigError, save_author_name

if TYPE_CHECKING:
    from codestamp.cli.console import ClickConsole
    from codestamp.config import Config


@click.command(
    name="author",
    help="Set the author name written into stamps.",
)
@click.argument("name", required=False)
@click.option(
    "--file",
    "target",
    metavar="FILE",
    type=click.Path(dir_okay=False),
    default=None,
    help="Config file to update (default: the user config file).",
)
def author_command(*, name: str | None, target: str | None) -> None:
    """Set (or prompt for) the persisted author name."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if name is None:
        current: Config = resolve_config_from_click(anchor=None, no_config=False, config_paths=())
        name = click.prompt("Author name", default=current.author_name)

    try:
        written: Path = save_author_name(name, path=Path(target) if target else None)
    except ConfigError as e:
        raise CodestampConfigError(str(e)) from e

    console.print(
        f"Author name set to {console.styled(name.strip(), bold=True)} in {written}"
    )
