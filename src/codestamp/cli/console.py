# topmark:header:start
#
#   project      : CodeStamp
#   file         : console.py
#   file_relpath : src/codestamp/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Console abstraction for user-facing program output.

This module provides a `ClickConsole` class that separates CLI output from
internal logging. Use this for messages intended for end users, while
reserving `logging` for diagnostics.

Two kinds of styling are supported:
    - `ClickConsole.styled` wraps `click.style` for ad-hoc emphasis (bold
      names, titles).
    - `ClickConsole.colorize` applies a `Colorizer` (typically the yachalk
      builder carried by a pipeline status member) so that a status reads in
      the same color wherever it is shown.

Both return plain text when color is disabled.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, TextIO

import click

if TYPE_CHECKING:
    from codestamp.utils.colored_enum import Colorizer


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
            Otherwise, all output is plain text.
        out (TextIO | None): The text stream to use for standard output.
            Defaults to `sys.stdout`.
        err (TextIO | None): The text stream to use for notices, warnings and
            errors. Defaults to `sys.stderr`.

    Attributes:
        enable_color (bool): Whether to emit ANSI color codes.
        out (TextIO): Stream for standard output.
        err (TextIO): Stream for diagnostics meant for the user.
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def notice(self, text: str, *, nl: bool = True) -> None:
        """Write an informational message to stderr.

        Used in STDIN mode, where stdout carries the stamped buffer and must
        not be mixed with status lines.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="blue")

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr.

        Args:
            text (str): Warning text.
            nl (bool): If True, append a newline.
        """
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr.

        Args:
            text (str): Error text.
            nl (bool): If True, append a newline.
        """
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments accepted by `click.style`
                (``fg``, ``bold``, ``underline``, ...).

        Returns:
            str: The styled text (or plain text if color is disabled).
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)

    def colorize(self, styler: Colorizer, text: str) -> str:
        """Apply ``styler`` to ``text`` when color output is enabled.

        Args:
            styler (Colorizer): Callable that decorates a string, usually the
                ``color`` of a `ColoredStrEnum` member.
            text (str): Text to render.

        Returns:
            str: The decorated text, or ``text`` unchanged when color is disabled.
        """
        return styler(text) if self.enable_color else text
