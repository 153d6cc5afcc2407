# topmark:header:start
#
#   project      : CodeStamp
#   file         : version.py
#   file_relpath : src/codestamp/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""CodeStamp `version` command.

Prints the current CodeStamp version as installed in the active Python environment.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from codestamp.constants import CODESTAMP_VERSION

if TYPE_CHECKING:
    from codestamp.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of CodeStamp.",
)
def version_command() -> None:
    """Show the current version of CodeStamp."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if ctx.obj.get("verbosity_level", logging.WARNING) <= logging.INFO:
        console.print(console.styled("CodeStamp version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(CODESTAMP_VERSION, bold=True)}")
    else:
        console.print(console.styled(CODESTAMP_VERSION, bold=True))
