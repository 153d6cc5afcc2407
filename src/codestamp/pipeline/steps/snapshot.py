# topmark:header:start
#
#   project      : CodeStamp
#   file         : snapshot.py
#   file_relpath : src/codestamp/pipeline/steps/snapshot.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Snapshot step: load the last-saved text the buffer is diffed against.

Sources:

* ``TEXT``: supplied by the caller (``--base``, API ``saved``).
* ``DISK``: the file on disk while the buffer comes from elsewhere. A missing
  file means everything is new; an unreadable one aborts stamping so the save
  goes through untouched.
* ``VCS``: the committed version of the file. An untracked file (or no
  repository) means everything is new. The looked-up content is kept for the
  revert detector so git runs only once per save.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger
from codestamp.pipeline.context import SnapshotSource
from codestamp.pipeline.status import ReadStatus, SnapshotStatus, VcsStatus
from codestamp.pipeline.steps.base import BaseStep
from codestamp.utils.file import read_text
from codestamp.vcs import committed_content

if TYPE_CHECKING:
    from codestamp.config.logging import CodestampLogger
    from codestamp.pipeline.context import StampContext

logger: CodestampLogger = get_logger(__name__)


class SnapshotStep(BaseStep):
    """Load the last-saved snapshot and set `SnapshotStatus`.

    Axes written:
      - snapshot (and vcs, when the snapshot itself comes from git)

    Sets:
      - SnapshotStatus: {LOADED, EMPTY, UNREADABLE}
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis="snapshot")

    def may_proceed(self, ctx: StampContext) -> bool:
        return ctx.status.read == ReadStatus.OK

    def run(self, ctx: StampContext) -> None:
        """Fill ``ctx.saved_text`` from the configured source."""
        if ctx.snapshot_source == SnapshotSource.DISK:
            self._load_from_disk(ctx)
        elif ctx.snapshot_source == SnapshotSource.VCS:
            self._load_from_vcs(ctx)

        if ctx.status.snapshot == SnapshotStatus.UNREADABLE:
            return
        if ctx.saved_text is None:
            ctx.saved_text = ""
        ctx.status.snapshot = SnapshotStatus.LOADED if ctx.saved_text else SnapshotStatus.EMPTY

    def _load_from_disk(self, ctx: StampContext) -> None:
        if ctx.path is None:
            ctx.saved_text = None
            return
        try:
            ctx.saved_text = read_text(ctx.path)
        except FileNotFoundError:
            logger.debug("No saved file at %s; every line is new", ctx.path)
            ctx.saved_text = None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read saved file %s: %s", ctx.path, e)
            ctx.status.snapshot = SnapshotStatus.UNREADABLE
            ctx.halt(
                f"Saved file {ctx.path} is unreadable; leaving the buffer untouched", self.name
            )

    def _load_from_vcs(self, ctx: StampContext) -> None:
        if ctx.committed_text is None and ctx.path is not None and ctx.vcs_lookup:
            ctx.committed_text = committed_content(ctx.path, timeout=ctx.config.vcs_timeout)
            ctx.status.vcs = (
                VcsStatus.FOUND if ctx.committed_text is not None else VcsStatus.UNAVAILABLE
            )
        ctx.saved_text = ctx.committed_text
