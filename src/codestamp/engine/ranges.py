# topmark:header:start
#
#   project      : CodeStamp
#   file         : ranges.py
#   file_relpath : src/codestamp/engine/ranges.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Changed-line ranges: extraction from a diff and clustering.

Extraction walks the (last saved -> buffer) diff with a cursor over buffer
line positions and yields one candidate range per inserted segment. Lines the
revert detector already handled are excluded so that an undone change is not
stamped again.

Clustering merges neighbouring candidates when only blank lines separate them,
so a multi-line edit spanning a blank separator produces one stamp block.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger
from codestamp.engine.diff import DiffKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from codestamp.config.logging import CodestampLogger
    from codestamp.engine.diff import DiffSegment

logger: CodestampLogger = get_logger(__name__)


@dataclass(frozen=True)
class LineRange:
    """Inclusive, 0-based span of buffer lines.

    Attributes:
        start (int): First line of the span.
        end (int): Last line of the span (inclusive).
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid line range [{self.start}, {self.end}]")

    @property
    def height(self) -> int:
        """Number of lines covered."""
        return self.end - self.start + 1

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))

    def __contains__(self, line: object) -> bool:
        return isinstance(line, int) and self.start <= line <= self.end


def extract_change_ranges(
    segments: Iterable[DiffSegment],
    handled_lines: frozenset[int] = frozenset(),
) -> list[LineRange]:
    """Return buffer line ranges that were inserted or modified since the last save.

    Args:
        segments (Iterable[DiffSegment]): Diff of last-saved content against the buffer.
        handled_lines (frozenset[int]): Buffer lines already attributed to a revert.

    Returns:
        list[LineRange]: Ordered, non-overlapping candidate ranges.
    """
    ranges: list[LineRange] = []
    cursor = 0
    for segment in segments:
        count: int = segment.line_count
        if segment.kind is DiffKind.DELETED:
            # Deleted lines exist only in the old text
            continue
        if segment.kind is DiffKind.INSERTED and count > 0:
            span = LineRange(cursor, cursor + count - 1)
            if any(line in handled_lines for line in span):
                logger.debug("Skipping range [%d, %d]: handled by revert", span.start, span.end)
            else:
                ranges.append(span)
        cursor += count
    logger.trace("Candidate ranges: %s", ranges)
    return ranges


def _is_blank_gap(lines: Sequence[str], start: int, end: int) -> bool:
    # Lines past the buffer end count as blank
    for index in range(start, min(end, len(lines) - 1) + 1):
        if lines[index].strip():
            return False
    return True


def cluster_ranges(ranges: Sequence[LineRange], lines: Sequence[str]) -> list[LineRange]:
    """Merge consecutive ranges separated only by blank or whitespace-only lines.

    Args:
        ranges (Sequence[LineRange]): Ordered candidate ranges.
        lines (Sequence[str]): Current buffer lines.

    Returns:
        list[LineRange]: Ordered, non-overlapping merged ranges.
    """
    if not ranges:
        return []

    merged: list[LineRange] = []
    active: LineRange = ranges[0]
    for nxt in ranges[1:]:
        if _is_blank_gap(lines, active.end + 1, nxt.start - 1):
            active = LineRange(active.start, nxt.end)
        else:
            merged.append(active)
            active = nxt
    merged.append(active)
    logger.trace("Merged ranges: %s", merged)
    return merged
