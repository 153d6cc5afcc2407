# topmark:header:start
#
#   project      : CodeStamp
#   file         : updater.py
#   file_relpath : src/codestamp/pipeline/steps/updater.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Updater step: apply the planned edits to the document atomically.

The edits are applied against the snapshot version recorded by the reader. If
the document moved on in the meantime the save proceeds untouched
(``STALE``); nothing is raised to the user.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger
from codestamp.engine.document import EditConflictError, StaleDocumentError
from codestamp.pipeline.status import StampStatus
from codestamp.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from codestamp.config.logging import CodestampLogger
    from codestamp.pipeline.context import StampContext

logger: CodestampLogger = get_logger(__name__)


class UpdaterStep(BaseStep):
    """Apply ``ctx.edits`` and set `StampStatus`.

    Axes written:
      - stamp

    Sets:
      - StampStatus: {STAMPED, UNCHANGED, STALE, FAILED}
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis="stamp")

    def may_proceed(self, ctx: StampContext) -> bool:
        return ctx.document is not None

    def run(self, ctx: StampContext) -> None:
        assert ctx.document is not None
        if not ctx.edits:
            ctx.status.stamp = StampStatus.UNCHANGED
            return
        try:
            ctx.document.apply_edits(ctx.edits, expected_version=ctx.snapshot_version)
        except StaleDocumentError as e:
            logger.warning("%s: %s; saving without stamps", ctx.path or "<buffer>", e)
            ctx.status.stamp = StampStatus.STALE
            return
        except EditConflictError as e:
            logger.error("%s: conflicting stamp edits: %s", ctx.path or "<buffer>", e)
            ctx.status.stamp = StampStatus.FAILED
            return

        if ctx.document.lines == ctx.original_lines:
            ctx.status.stamp = StampStatus.UNCHANGED
        else:
            ctx.status.stamp = StampStatus.STAMPED
