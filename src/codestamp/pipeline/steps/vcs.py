# topmark:header:start
#
#   project      : CodeStamp
#   file         : vcs.py
#   file_relpath : src/codestamp/pipeline/steps/vcs.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""VCS step: committed content for revert detection.

Runs at most one git lookup per save. Content already supplied by the caller or
fetched by the snapshot step is reused. Any failure leaves the committed text
unset and stamping continues without revert detection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger
from codestamp.pipeline.status import ReadStatus, VcsStatus
from codestamp.pipeline.steps.base import BaseStep
from codestamp.vcs import committed_content

if TYPE_CHECKING:
    from codestamp.config.logging import CodestampLogger
    from codestamp.pipeline.context import StampContext

logger: CodestampLogger = get_logger(__name__)


class VcsStep(BaseStep):
    """Look up the committed content and set `VcsStatus`.

    Axes written:
      - vcs

    Sets:
      - VcsStatus: {FOUND, UNAVAILABLE, DISABLED}
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis="vcs")

    def may_proceed(self, ctx: StampContext) -> bool:
        return ctx.status.read == ReadStatus.OK

    def run(self, ctx: StampContext) -> None:
        if not ctx.config.revert_detection:
            ctx.committed_text = None
            ctx.status.vcs = VcsStatus.DISABLED
            return
        if ctx.status.vcs != VcsStatus.PENDING:
            # Already looked up by the snapshot step
            return
        if ctx.committed_text is None and ctx.path is not None and ctx.vcs_lookup:
            ctx.committed_text = committed_content(ctx.path, timeout=ctx.config.vcs_timeout)
        found: bool = ctx.committed_text is not None
        ctx.status.vcs = VcsStatus.FOUND if found else VcsStatus.UNAVAILABLE
        logger.debug("Committed content for %s: %s", ctx.path, ctx.status.vcs.value)
