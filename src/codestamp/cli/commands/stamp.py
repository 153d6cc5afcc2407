# topmark:header:start
#
#   project      : CodeStamp
#   file         : stamp.py
#   file_relpath : src/codestamp/cli/commands/stamp.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""CodeStamp `stamp` command.

Stamps changed lines of one or more files.

File mode (``codestamp stamp PATH...``):
    The buffer is the file on disk and the last-saved snapshot is its committed
    version (or ``--base FILE``). Dry run by default: exits with
    ``WOULD_CHANGE`` (2) when stamps would be written. ``--apply`` writes the
    files atomically and ``--diff`` prints a unified diff.

STDIN mode (``codestamp stamp - --stdin-filename NAME``):
    The buffer is read from STDIN and the last-saved snapshot is ``NAME`` on
    disk (empty if missing). The buffer is always echoed to STDOUT, stamped
    when possible, so editors can pipe their buffer through on save. Notices
    and diffs go to STDERR.

Examples:
    Preview stamps for a file:

        $ codestamp stamp --diff src/app.py

    Editor "on will save" integration:

        $ codestamp stamp - --stdin-filename src/app.py < buffer
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from codestamp import api
from codestamp.api import Outcome
from codestamp.cli.config_resolver import resolve_config_from_click
from codestamp.cli.errors import (
    CodestampEncodingError,
    CodestampFileNotFoundError,
    CodestampIOError,
    CodestampUsageError,
)
from codestamp.cli.exit_codes import ExitCode
from codestamp.cli.options import common_config_options
from codestamp.config.logging import get_logger
from codestamp.engine.tags import Timestamp
from codestamp.pipeline.context import OutputSink
from codestamp.pipeline.status import (
    ReadStatus,
    ResolveStatus,
    SnapshotStatus,
    StampStatus,
    WriteStatus,
)
from codestamp.utils.diff import render_patch
from codestamp.utils.file import read_text

if TYPE_CHECKING:
    from codestamp.api import StampResult
    from codestamp.cli.console import ClickConsole
    from codestamp.config import Config
    from codestamp.config.logging import CodestampLogger
    from codestamp.utils.colored_enum import ColoredStrEnum

logger: CodestampLogger = get_logger(__name__)

STDIN_MARKER: str = "-"


def _read_base(base: str | None) -> str | None:
    if base is None:
        return None
    try:
        return read_text(Path(base))
    except UnicodeDecodeError as e:
        raise CodestampEncodingError(f"Cannot decode {base} as UTF-8: {e}") from e
    except OSError as e:
        raise CodestampIOError(f"Cannot read {base}: {e}") from e


def _error_code(result: StampResult) -> ExitCode:
    """Map a failed result to the exit code that describes it best."""
    if result.status.read == ReadStatus.NOT_FOUND:
        return ExitCode.FILE_NOT_FOUND
    if result.status.read == ReadStatus.UNICODE_DECODE_ERROR:
        return ExitCode.ENCODING_ERROR
    if result.status.read == ReadStatus.UNREADABLE or result.status.write == WriteStatus.FAILED:
        return ExitCode.IO_ERROR
    if result.status.stamp == StampStatus.FAILED:
        return ExitCode.PIPELINE_ERROR
    return ExitCode.FAILURE


def _skip_status(result: StampResult) -> ColoredStrEnum:
    """Return the status axis that made the pipeline skip ``result``."""
    if result.status.resolve != ResolveStatus.RESOLVED:
        return result.status.resolve
    if result.status.snapshot == SnapshotStatus.UNREADABLE:
        return result.status.snapshot
    return result.status.stamp


def _describe(result: StampResult) -> str:
    counts: dict[str, int] = {}
    for outcome in result.outcomes:
        if not outcome.skipped:
            counts[outcome.value] = counts.get(outcome.value, 0) + 1
    if result.handled_lines:
        counts["reverted line"] = len(result.handled_lines)
    return ", ".join(f"{n} {what}" for what, n in counts.items()) or "stamps updated"


def _report(
    console: ClickConsole,
    result: StampResult,
    *,
    show_diff: bool,
    level: int,
    to_stderr: bool,
) -> None:
    """Print one line per file (and its diff when requested)."""
    emit = console.notice if to_stderr else console.print
    path: str = str(result.path)
    reason: str = "; ".join(result.messages)

    if result.outcome == Outcome.SKIPPED:
        if result.status.resolve == ResolveStatus.EXCLUDED:
            if level <= logging.INFO:
                skipped: str = console.colorize(result.status.resolve.color, "skipped")
                emit(f"{path}: {skipped} (matches an exclude pattern)")
        elif level <= logging.WARNING:
            console.warn(f"{path}: skipped ({reason or _skip_status(result).value})")
        return
    if result.outcome == Outcome.ERROR:
        console.error(f"{path}: {reason or 'stamping failed'}")
        return
    if result.outcome == Outcome.UNCHANGED:
        if level <= logging.INFO:
            emit(f"{path}: {console.colorize(result.status.stamp.color, 'unchanged')}")
        return

    if level > logging.WARNING:
        return
    verb: str = "stamped" if result.outcome == Outcome.CHANGED else "would stamp"
    emit(f"{path}: {console.colorize(result.status.write.color, verb)} ({_describe(result)})")
    if show_diff and result.diff:
        diff_text: str = render_patch(result.diff) if console.enable_color else result.diff
        emit(diff_text, nl=False)


@click.command(
    name="stamp",
    help="Stamp changed lines with author and timestamp comments.",
)
@click.argument("paths", nargs=-1, required=True, metavar="PATH... | -")
@click.option(
    "--stdin-filename",
    "stdin_filename",
    metavar="NAME",
    default=None,
    help="File the STDIN buffer belongs to (required with '-').",
)
@click.option(
    "--base",
    "base",
    metavar="FILE",
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    default=None,
    help="Use FILE as the last-saved version instead of git HEAD (single file only).",
)
@click.option("--diff", "show_diff", is_flag=True, help="Show a unified diff of the stamps.")
@click.option("--apply", "apply_changes", is_flag=True, help="Write the stamps to the files.")
@click.option("--author", "author", default=None, help="Author name to write into stamps.")
@click.option(
    "--language",
    "language_id",
    default=None,
    metavar="ID",
    help="Language identifier (e.g. 'python'); detected from the file name by default.",
)
@click.option(
    "--no-revert-detection",
    "no_revert_detection",
    is_flag=True,
    help="Do not compare with committed content to undo stale stamps.",
)
@click.option(
    "--merge-threshold",
    "merge_threshold",
    type=click.IntRange(min=1),
    default=None,
    help="Fold runs of more than N inline stamps into one block.",
)
@click.option(
    "--exclude",
    "exclude",
    multiple=True,
    metavar="PATTERN",
    help="Gitignore-style pattern of files never to stamp (repeatable).",
)
@common_config_options
def stamp_command(
    *,
    paths: tuple[str, ...],
    stdin_filename: str | None,
    base: str | None,
    show_diff: bool,
    apply_changes: bool,
    author: str | None,
    language_id: str | None,
    no_revert_detection: bool,
    merge_threshold: int | None,
    exclude: tuple[str, ...],
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Stamp changed lines of the given files (or of a STDIN buffer)."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    level: int = ctx.obj.get("verbosity_level", logging.WARNING)

    stdin_mode: bool = STDIN_MARKER in paths
    if stdin_mode:
        if len(paths) > 1:
            raise CodestampUsageError("'-' (STDIN) cannot be combined with other paths.")
        if not stdin_filename:
            raise CodestampUsageError("Reading from STDIN requires --stdin-filename NAME.")
        if apply_changes:
            raise CodestampUsageError("--apply cannot be used with STDIN; output goes to STDOUT.")
    elif stdin_filename:
        raise CodestampUsageError("--stdin-filename is only valid with '-' (STDIN).")
    if base is not None and len(paths) > 1:
        raise CodestampUsageError("--base can only be used with a single file.")

    targets: list[Path] = [Path(stdin_filename)] if stdin_mode and stdin_filename else []
    if not stdin_mode:
        for raw in paths:
            p = Path(raw)
            if not p.exists():
                raise CodestampFileNotFoundError(f"No such file: {raw}")
            if p.is_dir():
                raise CodestampUsageError(f"{raw} is a directory; pass files to stamp.")
            targets.append(p)

    config: Config = resolve_config_from_click(
        anchor=targets[0] if targets else None,
        no_config=no_config,
        config_paths=config_paths,
        author=author,
        revert_detection=False if no_revert_detection else None,
        merge_threshold=merge_threshold,
        exclude=exclude,
    )
    base_text: str | None = _read_base(base)
    # One time for the whole run
    timestamp: Timestamp = Timestamp.now(
        date_format=config.date_format, time_format=config.time_format
    )

    if stdin_mode:
        _stamp_stdin(
            console,
            targets[0],
            config=config,
            base_text=base_text,
            language_id=language_id,
            timestamp=timestamp,
            show_diff=show_diff,
            level=level,
        )
        return

    error_code: ExitCode | None = None
    would_change = False
    for path in targets:
        result: StampResult = api.stamp_file(
            path,
            config=config,
            base_text=base_text,
            language_id=language_id,
            timestamp=timestamp,
            sink=OutputSink.FILE if apply_changes else OutputSink.NONE,
        )
        _report(console, result, show_diff=show_diff, level=level, to_stderr=False)
        if result.outcome == Outcome.ERROR:
            error_code = error_code or _error_code(result)
        elif result.outcome == Outcome.WOULD_CHANGE:
            would_change = True

    if error_code is not None:
        ctx.exit(error_code)
    if would_change:
        ctx.exit(ExitCode.WOULD_CHANGE)


def _stamp_stdin(
    console: ClickConsole,
    path: Path,
    *,
    config: Config,
    base_text: str | None,
    language_id: str | None,
    timestamp: Timestamp,
    show_diff: bool,
    level: int,
) -> None:
    raw: bytes = click.get_binary_stream("stdin").read()
    try:
        buffer: str = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CodestampEncodingError(f"Cannot decode STDIN as UTF-8: {e}") from e

    result: StampResult = api.stamp_file(
        path,
        config=config,
        base_text=base_text,
        buffer_text=buffer,
        language_id=language_id,
        timestamp=timestamp,
        sink=OutputSink.STDOUT,
    )
    if result.status.write != WriteStatus.WRITTEN:
        # The pipeline stopped early; hand the buffer back untouched
        click.echo(buffer, nl=False)
    _report(console, result, show_diff=show_diff, level=level, to_stderr=True)
