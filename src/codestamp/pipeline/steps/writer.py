# topmark:header:start
#
#   project      : CodeStamp
#   file         : writer.py
#   file_relpath : src/codestamp/pipeline/steps/writer.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Writer step for committing the stamped buffer to a sink.

Sinks
-----
- FileSystemSink: replaces the file at ``ctx.path`` atomically, only when
  stamping changed it.
- StdoutSink: always emits the buffer (stamped or not) to stdout; this is the
  editor integration, which replaces its buffer with whatever it receives.
- NullSink: no-op (dry-run).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from codestamp.config.logging import get_logger
from codestamp.pipeline.context import OutputSink
from codestamp.pipeline.status import StampStatus, WriteStatus
from codestamp.pipeline.steps.base import BaseStep
from codestamp.utils.file import write_text_atomic

if TYPE_CHECKING:
    from codestamp.config.logging import CodestampLogger
    from codestamp.pipeline.context import StampContext

logger: CodestampLogger = get_logger(__name__)


@dataclass
class WriteResult:
    """Structured result of a write operation."""

    status: WriteStatus
    bytes_written: int = 0


class WriteSink(Protocol):
    """Protocol for write sinks used by the writer step."""

    def write(self, *, ctx: StampContext) -> WriteResult:
        """Write the stamped buffer of ``ctx`` to the target sink."""
        ...


class NullSink:
    """Dry-run sink: does not write anything."""

    def write(self, *, ctx: StampContext) -> WriteResult:
        status: WriteStatus = WriteStatus.PREVIEWED if ctx.would_change else WriteStatus.SKIPPED
        return WriteResult(status=status)


class StdoutSink:
    """Standard-output sink (stdin-content mode)."""

    def write(self, *, ctx: StampContext) -> WriteResult:
        """Emit the buffer to standard output, stamped or not.

        Returns:
            WriteResult: ``WRITTEN`` with the number of UTF-8 bytes printed, or
            ``SKIPPED`` when no buffer was read.
        """
        text: str | None = ctx.updated_text
        if text is None:
            return WriteResult(status=WriteStatus.SKIPPED)
        print(text, end="")  # noqa: T201 (intentional: pipeline handles stdout here)
        return WriteResult(status=WriteStatus.WRITTEN, bytes_written=len(text.encode("utf-8")))


class FileSystemSink:
    """Filesystem sink that replaces ``ctx.path`` in place."""

    def write(self, *, ctx: StampContext) -> WriteResult:
        """Write the stamped buffer to ``ctx.path`` when stamping changed it.

        Returns:
            WriteResult: ``WRITTEN`` with the bytes written, ``SKIPPED`` when
            there is nothing to write, ``FAILED`` on an I/O error.
        """
        text: str | None = ctx.updated_text
        if ctx.path is None or text is None or not ctx.would_change:
            return WriteResult(status=WriteStatus.SKIPPED)
        try:
            bytes_written: int = write_text_atomic(ctx.path, text)
        except OSError as e:
            logger.error("Cannot write %s: %s", ctx.path, e)
            ctx.messages.append(f"Cannot write {ctx.path}: {e}")
            return WriteResult(status=WriteStatus.FAILED)
        logger.debug("FileSystemSink: wrote %d bytes to file %s", bytes_written, ctx.path)
        return WriteResult(status=WriteStatus.WRITTEN, bytes_written=bytes_written)


def _select_sink(ctx: StampContext) -> WriteSink:
    """Return the sink matching ``ctx.sink``."""
    if ctx.sink == OutputSink.STDOUT:
        logger.debug("Selected STDOUT sink")
        return StdoutSink()
    if ctx.sink == OutputSink.FILE:
        logger.debug("Selected file system sink")
        return FileSystemSink()
    logger.debug("Selected NULL sink")
    return NullSink()


class WriterStep(BaseStep):
    """Commit the stamped buffer and set `WriteStatus`.

    Axes written:
      - write

    Sets:
      - WriteStatus: {WRITTEN, PREVIEWED, SKIPPED, FAILED}
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis="write")

    def may_proceed(self, ctx: StampContext) -> bool:
        # A stale or failed stamping still hands the untouched buffer to stdout
        return ctx.document is not None and ctx.status.stamp != StampStatus.PENDING

    def run(self, ctx: StampContext) -> None:
        result: WriteResult = _select_sink(ctx).write(ctx=ctx)
        ctx.status.write = result.status
        ctx.bytes_written = result.bytes_written
