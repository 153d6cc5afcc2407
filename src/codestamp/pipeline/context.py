# topmark:header:start
#
#   project      : CodeStamp
#   file         : context.py
#   file_relpath : src/codestamp/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Per-save processing context shared by the pipeline steps.

A `StampContext` is created for one document and handed through every step.
Inputs (path, config, optional texts) are set by the caller; each step fills in
its own results and status axis. Once a step calls `StampContext.halt`, the
remaining steps are skipped by the runner.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from codestamp.engine.revert import NO_REVERTS
from codestamp.pipeline.status import (
    ReadStatus,
    ResolveStatus,
    SnapshotStatus,
    StampStatus,
    VcsStatus,
    WriteStatus,
)

if TYPE_CHECKING:
    from pathlib import Path

    from codestamp.config import Config
    from codestamp.engine.blocks import StampOutcome
    from codestamp.engine.diff import DiffSegment
    from codestamp.engine.document import LineEdit, TextDocument
    from codestamp.engine.ranges import LineRange
    from codestamp.engine.revert import RevertResult
    from codestamp.engine.tags import Timestamp
    from codestamp.styles.base import CommentStyle


class SnapshotSource(str, Enum):
    """Where the last-saved snapshot comes from."""

    TEXT = "text"  # supplied by the caller (saved_text)
    DISK = "disk"  # the file on disk; the buffer came from elsewhere (editor save)
    VCS = "vcs"  # the committed version (stamping a file in place)


class OutputSink(str, Enum):
    """Where the writer step sends the stamped buffer."""

    NONE = "none"
    FILE = "file"
    STDOUT = "stdout"


@dataclass
class StampStatusBundle:
    """Status of every pipeline axis."""

    resolve: ResolveStatus = ResolveStatus.PENDING
    read: ReadStatus = ReadStatus.PENDING
    snapshot: SnapshotStatus = SnapshotStatus.PENDING
    vcs: VcsStatus = VcsStatus.PENDING
    stamp: StampStatus = StampStatus.PENDING
    write: WriteStatus = WriteStatus.PENDING


@dataclass
class Flow:
    """Pipeline control flow."""

    halt: bool = False
    reason: str = ""
    at_step: str = ""


@dataclass
class StampContext:
    """Mutable state for stamping one document.

    Attributes:
        path (Path | None): The document's file path (also used for language
            detection); None for bare buffers.
        config (Config): Effective configuration.
        buffer_text (str | None): Buffer content; read from ``path`` when None.
        saved_text (str | None): Last-saved snapshot when ``snapshot_source`` is TEXT.
        committed_text (str | None): Committed content; looked up when the
            VCS status is still pending.
        snapshot_source (SnapshotSource): Where the last-saved snapshot comes from.
        vcs_lookup (bool): Ask git for the committed content when none was supplied.
        sink (OutputSink): Where the writer step sends the result.
        language_id (str | None): Host-provided language; detected when None.
        style (CommentStyle | None): Comment style; resolved when None.
        timestamp (Timestamp | None): Stamp time; captured once when None.
    """

    path: Path | None
    config: Config
    buffer_text: str | None = None
    saved_text: str | None = None
    committed_text: str | None = None
    snapshot_source: SnapshotSource = SnapshotSource.VCS
    vcs_lookup: bool = True
    sink: OutputSink = OutputSink.NONE
    language_id: str | None = None
    style: CommentStyle | None = None
    timestamp: Timestamp | None = None

    status: StampStatusBundle = field(default_factory=StampStatusBundle)
    flow: Flow = field(default_factory=Flow)
    steps: list[str] = field(default_factory=lambda: [])

    # Results
    document: TextDocument | None = None
    snapshot_version: int = 0
    revert: RevertResult = NO_REVERTS
    segments: list[DiffSegment] = field(default_factory=lambda: [])
    candidate_ranges: list[LineRange] = field(default_factory=lambda: [])
    merged_ranges: list[LineRange] = field(default_factory=lambda: [])
    outcomes: list[StampOutcome] = field(default_factory=lambda: [])
    edits: list[LineEdit] = field(default_factory=lambda: [])
    original_lines: list[str] = field(default_factory=lambda: [])
    diff_text: str | None = None
    bytes_written: int = 0
    messages: list[str] = field(default_factory=lambda: [])

    def halt(self, reason: str, at_step: str) -> None:
        """Stop the pipeline after the current step."""
        self.flow.halt = True
        self.flow.reason = reason
        self.flow.at_step = at_step
        self.messages.append(reason)

    @property
    def updated_text(self) -> str | None:
        """The buffer text after stamping, or None if nothing was read."""
        return self.document.get_text() if self.document is not None else None

    @property
    def would_change(self) -> bool:
        """True if stamping changed the buffer."""
        return self.status.stamp == StampStatus.STAMPED
