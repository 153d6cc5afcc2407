# topmark:header:start
#
#   project      : CodeStamp
#   file         : extractor.py
#   file_relpath : src/codestamp/pipeline/steps/extractor.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Extractor step: changed line ranges since the last save."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.engine.diff import diff_line_lists
from codestamp.engine.document import split_lines
from codestamp.engine.ranges import extract_change_ranges
from codestamp.pipeline.status import SnapshotStatus
from codestamp.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from codestamp.pipeline.context import StampContext


class ExtractorStep(BaseStep):
    """Diff the last-saved snapshot against the buffer into candidate ranges."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: StampContext) -> bool:
        return ctx.document is not None and ctx.status.snapshot in (
            SnapshotStatus.LOADED,
            SnapshotStatus.EMPTY,
        )

    def run(self, ctx: StampContext) -> None:
        assert ctx.document is not None
        ctx.segments = diff_line_lists(split_lines(ctx.saved_text or ""), ctx.document.lines)
        ctx.candidate_ranges = extract_change_ranges(ctx.segments, ctx.revert.handled_lines)
