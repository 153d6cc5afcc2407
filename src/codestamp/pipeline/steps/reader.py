# topmark:header:start
#
#   project      : CodeStamp
#   file         : reader.py
#   file_relpath : src/codestamp/pipeline/steps/reader.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Reader step: load the buffer into a `TextDocument`.

The buffer is the text supplied by the host (editor buffer, STDIN) or, when
none is given, the file at ``ctx.path``. Newlines are preserved: the document
remembers the first newline sequence it saw and uses it when rendering.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger
from codestamp.engine.document import TextDocument
from codestamp.pipeline.status import ReadStatus
from codestamp.pipeline.steps.base import BaseStep
from codestamp.utils.file import read_text

if TYPE_CHECKING:
    from codestamp.config.logging import CodestampLogger
    from codestamp.pipeline.context import StampContext

logger: CodestampLogger = get_logger(__name__)


class ReaderStep(BaseStep):
    """Load the buffer text and set `ReadStatus`.

    Axes written:
      - read

    Sets:
      - ReadStatus: {OK, NOT_FOUND, UNREADABLE, UNICODE_DECODE_ERROR}
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis="read")

    def run(self, ctx: StampContext) -> None:
        """Read the buffer and record the snapshot version the edits refer to."""
        text: str | None = ctx.buffer_text
        if text is None:
            if ctx.path is None:
                ctx.status.read = ReadStatus.NOT_FOUND
                ctx.halt("No buffer text and no file to read", self.name)
                return
            try:
                text = read_text(ctx.path)
            except FileNotFoundError:
                ctx.status.read = ReadStatus.NOT_FOUND
                ctx.halt(f"File not found: {ctx.path}", self.name)
                return
            except UnicodeDecodeError as e:
                ctx.status.read = ReadStatus.UNICODE_DECODE_ERROR
                ctx.halt(f"Cannot decode {ctx.path} as UTF-8: {e}", self.name)
                return
            except OSError as e:
                ctx.status.read = ReadStatus.UNREADABLE
                ctx.halt(f"Cannot read {ctx.path}: {e}", self.name)
                return

        ctx.document = TextDocument.from_text(text, path=ctx.path, language_id=ctx.language_id)
        ctx.snapshot_version = ctx.document.version
        ctx.original_lines = list(ctx.document.lines)
        logger.debug("Read %d line(s) from %s", ctx.document.line_count, ctx.path or "<buffer>")
        ctx.status.read = ReadStatus.OK
