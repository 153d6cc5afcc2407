# topmark:header:start
#
#   project      : CodeStamp
#   file         : stamper.py
#   file_relpath : src/codestamp/pipeline/steps/stamper.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Stamper step: turn reverts and merged ranges into one edit list.

Revert replacements go into the `EditPlan` first and lock their lines; the
`StampBlockManager` then handles each merged range in buffer order. The plan
folds everything into ordered, non-overlapping `LineEdit` objects against the
snapshot the ranges were computed from.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger
from codestamp.engine.blocks import StampBlockManager
from codestamp.engine.plan import EditPlan
from codestamp.pipeline.status import SnapshotStatus
from codestamp.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from codestamp.config.logging import CodestampLogger
    from codestamp.engine.blocks import StampOutcome
    from codestamp.pipeline.context import StampContext

logger: CodestampLogger = get_logger(__name__)


class StamperStep(BaseStep):
    """Compute ``ctx.edits`` and ``ctx.outcomes``."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: StampContext) -> bool:
        return (
            ctx.document is not None
            and ctx.style is not None
            and ctx.timestamp is not None
            and ctx.status.snapshot in (SnapshotStatus.LOADED, SnapshotStatus.EMPTY)
        )

    def run(self, ctx: StampContext) -> None:
        assert ctx.document is not None and ctx.style is not None and ctx.timestamp is not None
        lines: list[str] = ctx.document.lines
        plan = EditPlan(lines)

        for edit in ctx.revert.edits:
            plan.replace_block(edit.start, edit.end, edit.lines)

        manager = StampBlockManager(
            lines,
            plan,
            style=ctx.style,
            author=ctx.config.author_name,
            timestamp=ctx.timestamp,
            merge_threshold=ctx.config.merge_threshold,
        )
        for span in ctx.merged_ranges:
            try:
                outcome: StampOutcome = manager.stamp(span)
            except (IndexError, ValueError) as e:
                logger.warning("Skipping range [%d, %d]: %s", span.start, span.end, e)
                continue
            ctx.outcomes.append(outcome)

        ctx.edits = plan.to_edits()
        logger.debug("%d edit(s) planned for %s", len(ctx.edits), ctx.path or "<buffer>")
