# topmark:header:start
#
#   project      : CodeStamp
#   file         : runner.py
#   file_relpath : src/codestamp/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Run a stamping pipeline for a single document."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from codestamp.config.logging import CodestampLogger
    from codestamp.pipeline.context import StampContext
    from codestamp.pipeline.steps.base import BaseStep

logger: CodestampLogger = get_logger(__name__)


def run(ctx: StampContext, steps: Sequence[BaseStep]) -> StampContext:
    """Execute the pipeline sequentially.

    Args:
        ctx (StampContext): Mutable processing context.
        steps (Sequence[BaseStep]): Ordered sequence of pipeline steps.
            Each step takes and returns a context.

    Returns:
        StampContext: The final context after all steps have run.
    """
    logger.info(
        "Stamping %s as %s (snapshot: %s)",
        ctx.path or "<buffer>",
        ctx.config.author_name,
        ctx.snapshot_source.value,
    )
    for step in steps:
        ctx = step(ctx)
    logger.debug("Steps run for %s: %s", ctx.path or "<buffer>", ", ".join(ctx.steps))
    return ctx
