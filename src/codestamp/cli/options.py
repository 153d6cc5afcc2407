# topmark:header:start
#
#   project      : CodeStamp
#   file         : options.py
#   file_relpath : src/codestamp/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Shared Click options for CodeStamp commands.

Verbosity (``-v``/``-q``), color (``--color``/``--no-color``) and config
(``--config``/``--no-config``) are declared here once and resolved into plain
values before any command runs.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Callable, ParamSpec, TextIO, TypeVar

import click

from codestamp.cli.errors import CodestampUsageError
from codestamp.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

# Indexed by the number of -v flags (capped)
VERBOSE_LEVELS: tuple[int, ...] = (logging.WARNING, logging.INFO, logging.DEBUG, TRACE_LEVEL)
QUIET_LEVEL: int = logging.ERROR

COLOR_CHOICES: tuple[str, ...] = ("auto", "always", "never")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Turn the ``-v``/``-q`` counts into a program-output level.

    Raises:
        CodestampUsageError: If both flags are given.
    """
    if verbose_count and quiet_count:
        raise CodestampUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count:
        return QUIET_LEVEL
    return VERBOSE_LEVELS[min(verbose_count, len(VERBOSE_LEVELS) - 1)]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Report more (unchanged files with -v, debug details with -vv).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Report errors only.",
    )(f)
    return f


def color_enabled(
    color_mode: str | None,
    *,
    no_color: bool = False,
    stream: TextIO | None = None,
) -> bool:
    """Decide whether program output is colorized.

    ``--no-color`` and an explicit ``--color`` win. In ``auto`` mode the
    ``FORCE_COLOR`` and ``NO_COLOR`` environment variables are honored before
    falling back to whether ``stream`` (STDOUT by default) is a terminal.
    """
    if no_color or color_mode == "never":
        return False
    if color_mode == "always":
        return True
    if os.getenv("FORCE_COLOR", "0") != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False
    target: TextIO = stream or sys.stdout
    try:
        return target.isatty()
    except (AttributeError, ValueError, OSError):
        return False


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice(COLOR_CHOICES),
        default=None,
        help="Colorize output: auto (default), always or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Same as --color=never.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` (repeatable) and ``--no-config`` to a command."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore user and project config files (only use defaults).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f
