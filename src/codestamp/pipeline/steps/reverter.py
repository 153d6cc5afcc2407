# topmark:header:start
#
#   project      : CodeStamp
#   file         : reverter.py
#   file_relpath : src/codestamp/pipeline/steps/reverter.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Revert step: restore committed lines whose only difference is a stamp."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger
from codestamp.engine.diff import diff_line_lists
from codestamp.engine.document import split_lines
from codestamp.engine.revert import detect_reverts
from codestamp.pipeline.status import VcsStatus
from codestamp.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from codestamp.config.logging import CodestampLogger
    from codestamp.pipeline.context import StampContext

logger: CodestampLogger = get_logger(__name__)


class RevertStep(BaseStep):
    """Diff committed content against the buffer and collect revert edits."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: StampContext) -> bool:
        return (
            ctx.document is not None
            and ctx.style is not None
            and ctx.committed_text is not None
            and ctx.status.vcs != VcsStatus.DISABLED
        )

    def run(self, ctx: StampContext) -> None:
        assert ctx.document is not None and ctx.style is not None
        assert ctx.committed_text is not None
        segments = diff_line_lists(split_lines(ctx.committed_text), ctx.document.lines)
        ctx.revert = detect_reverts(segments, style=ctx.style, author=ctx.config.author_name)
        if ctx.revert.edits:
            logger.info(
                "%s: %d reverted block(s) restored to committed content",
                ctx.path or "<buffer>",
                len(ctx.revert.edits),
            )
