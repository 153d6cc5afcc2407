# topmark:header:start
#
#   project      : CodeStamp
#   file         : patcher.py
#   file_relpath : src/codestamp/pipeline/steps/patcher.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Patcher step: unified diff between the buffer and its stamped version.

Outputs:
  * ``ctx.diff_text``: the unified diff text, or ``None`` when unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger
from codestamp.pipeline.status import StampStatus
from codestamp.pipeline.steps.base import BaseStep
from codestamp.utils.diff import render_patch, unified_patch

if TYPE_CHECKING:
    from codestamp.config.logging import CodestampLogger
    from codestamp.pipeline.context import StampContext

logger: CodestampLogger = get_logger(__name__)


class PatcherStep(BaseStep):
    """Attach ``ctx.diff_text`` when stamping changed the buffer."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: StampContext) -> bool:
        return ctx.document is not None and ctx.status.stamp == StampStatus.STAMPED

    def run(self, ctx: StampContext) -> None:
        assert ctx.document is not None
        label: str = ctx.path.as_posix() if ctx.path is not None else "<buffer>"
        patch: str = unified_patch(ctx.original_lines, ctx.document.lines, label=label)
        ctx.diff_text = patch or None
        if patch:
            logger.info("Patch (rendered):\n%s", render_patch(patch))
