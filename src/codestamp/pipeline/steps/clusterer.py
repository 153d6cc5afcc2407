# topmark:header:start
#
#   project      : CodeStamp
#   file         : clusterer.py
#   file_relpath : src/codestamp/pipeline/steps/clusterer.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Clusterer step: merge candidate ranges separated only by blank lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.engine.ranges import cluster_ranges
from codestamp.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from codestamp.pipeline.context import StampContext


class ClustererStep(BaseStep):
    """Populate ``ctx.merged_ranges``."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: StampContext) -> bool:
        return ctx.document is not None and bool(ctx.candidate_ranges)

    def run(self, ctx: StampContext) -> None:
        assert ctx.document is not None
        ctx.merged_ranges = cluster_ranges(ctx.candidate_ranges, ctx.document.lines)
