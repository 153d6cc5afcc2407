# topmark:header:start
#
#   project      : CodeStamp
#   file         : main.py
#   file_relpath : src/codestamp/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""CodeStamp command-line interface.

Key ideas:
- Group-level options (verbosity, color) are initialized once and placed into
  ``ctx.obj`` together with the program-output console.
- Internal logging is configured from ``CODESTAMP_LOG_LEVEL`` and stays separate
  from program output.
"""

from __future__ import annotations

import click

from codestamp.cli.commands.author import author_command
from codestamp.cli.commands.stamp import stamp_command
from codestamp.cli.commands.styles import styles_command
from codestamp.cli.commands.version import version_command
from codestamp.cli.console import ClickConsole
from codestamp.cli.options import (
    color_enabled,
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from codestamp.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Value of ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging via env
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    enable_color: bool = color_enabled(color_mode, no_color=no_color)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="CodeStamp: annotate changed lines with author and timestamp comments.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the CodeStamp CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'codestamp stamp PATH' to stamp changed lines.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(stamp_command)

cli.add_command(author_command)

cli.add_command(styles_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
