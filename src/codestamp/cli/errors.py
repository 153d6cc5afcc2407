# topmark:header:start
#
#   project      : CodeStamp
#   file         : errors.py
#   file_relpath : src/codestamp/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Exceptions for the CodeStamp CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from codestamp.cli.exit_codes import ExitCode


class CodestampError(click.ClickException):
    """Base class for all CodeStamp CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colour is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class CodestampUsageError(CodestampError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class CodestampConfigError(CodestampError):
    """Error for configuration errors (invalid or unwritable config)."""

    exit_code = ExitCode.CONFIG_ERROR


class CodestampFileNotFoundError(CodestampError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class CodestampIOError(CodestampError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class CodestampEncodingError(CodestampError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR


class CodestampPipelineError(CodestampError):
    """Error for stamping failures inside the pipeline."""

    exit_code = ExitCode.PIPELINE_ERROR
