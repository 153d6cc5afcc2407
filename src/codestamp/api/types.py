# topmark:header:start
#
#   project      : CodeStamp
#   file         : types.py
#   file_relpath : src/codestamp/api/types.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Stable public types for the CodeStamp API.

This module defines the enums and dataclasses that appear in the public
function signatures and return values of [`codestamp.api`][codestamp.api].
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from codestamp.pipeline.status import (
    ReadStatus,
    ResolveStatus,
    StampStatus,
    WriteStatus,
)

if TYPE_CHECKING:
    from pathlib import Path

    from codestamp.engine.blocks import StampOutcome
    from codestamp.engine.document import LineEdit
    from codestamp.engine.ranges import LineRange
    from codestamp.pipeline.context import StampContext, StampStatusBundle


class Outcome(str, Enum):
    """Per-document outcome bucket.

    Values mirror CLI semantics:
      - ``UNCHANGED``: Nothing to stamp.
      - ``WOULD_CHANGE``: Stamps were computed but not written (dry run).
      - ``CHANGED``: The stamped buffer was written.
      - ``SKIPPED``: Not stamped on purpose (excluded, no comment syntax,
        unreadable saved file, buffer changed while stamping).
      - ``ERROR``: The document could not be processed.
    """

    UNCHANGED = "unchanged"
    WOULD_CHANGE = "would_change"
    CHANGED = "changed"
    SKIPPED = "skipped"
    ERROR = "error"


def _classify(ctx: StampContext) -> Outcome:
    status: StampStatusBundle = ctx.status
    if status.resolve in (ResolveStatus.EXCLUDED, ResolveStatus.UNSUPPORTED):
        return Outcome.SKIPPED
    if status.read not in (ReadStatus.PENDING, ReadStatus.OK):
        return Outcome.ERROR
    if status.stamp == StampStatus.FAILED or status.write == WriteStatus.FAILED:
        return Outcome.ERROR
    if ctx.flow.halt or status.stamp == StampStatus.STALE:
        return Outcome.SKIPPED
    if status.stamp != StampStatus.STAMPED:
        return Outcome.UNCHANGED
    if status.write == WriteStatus.WRITTEN:
        return Outcome.CHANGED
    return Outcome.WOULD_CHANGE


@dataclass(frozen=True)
class StampResult:
    """Result of stamping one buffer.

    Attributes:
        path (Path | None): The document's path (``None`` for bare buffers).
        outcome (Outcome): High-level outcome bucket.
        edits (tuple[LineEdit, ...]): Ordered, non-overlapping edits against the buffer.
        text (str | None): Buffer text after the edits (``None`` if nothing was read).
        handled_lines (frozenset[int]): Buffer lines restored by revert detection.
        ranges (tuple[LineRange, ...]): Merged change ranges that were considered.
        outcomes (tuple[StampOutcome, ...]): What was done with each range.
        diff (str | None): Unified diff of the change (file pipelines only).
        language_id (str | None): Resolved language identifier.
        status (StampStatusBundle): Per-axis pipeline statuses.
        messages (tuple[str, ...]): Human-readable notes (halt reasons, write errors).
    """

    path: Path | None
    outcome: Outcome
    edits: tuple[LineEdit, ...]
    text: str | None
    handled_lines: frozenset[int]
    ranges: tuple[LineRange, ...]
    outcomes: tuple[StampOutcome, ...]
    diff: str | None
    language_id: str | None
    status: StampStatusBundle
    messages: tuple[str, ...]

    @property
    def changed(self) -> bool:
        """True if the stamped text differs from the buffer."""
        return self.status.stamp == StampStatus.STAMPED

    @classmethod
    def from_context(cls, ctx: StampContext) -> StampResult:
        """Build the public result from a finished pipeline context."""
        return cls(
            path=ctx.path,
            outcome=_classify(ctx),
            edits=tuple(ctx.edits),
            text=ctx.updated_text,
            handled_lines=ctx.revert.handled_lines,
            ranges=tuple(ctx.merged_ranges),
            outcomes=tuple(ctx.outcomes),
            diff=ctx.diff_text,
            language_id=ctx.language_id,
            status=ctx.status,
            messages=tuple(ctx.messages),
        )
