# topmark:header:start
#
#   project      : CodeStamp
#   file         : blocks.py
#   file_relpath : src/codestamp/engine/blocks.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Stamp block manager.

Decides, for each merged change range, which stamp to write:

1. Refresh the enclosing ``Start``/``End`` block when it belongs to the author
   and was written today.
2. For a single changed line, write a line stamp above it (styles that force
   stamps above the code) or an inline stamp after it, turning a dense run of
   inline stamps into one block.
3. For several changed lines, wrap them in ``Start``/``End`` tags, reusing
   adjacent tags of the same author.

All writes go into a shared `EditPlan`; ranges that touch lines an earlier
range already claimed are skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger
from codestamp.constants import DEFAULT_MERGE_THRESHOLD
from codestamp.engine.ranges import LineRange
from codestamp.engine.tags import (
    EndTag,
    LineTag,
    MalformedTag,
    StartTag,
    get_tag_parser,
    leading_whitespace,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from codestamp.config.logging import CodestampLogger
    from codestamp.engine.plan import EditPlan
    from codestamp.engine.tags import TagParser, Timestamp
    from codestamp.styles.base import CommentStyle

logger: CodestampLogger = get_logger(__name__)


class StampOutcome(str, Enum):
    """What the manager did with one range."""

    BLOCK_REFRESHED = "block refreshed"
    BLOCK_WRAPPED = "block wrapped"
    RUN_MERGED = "inline run merged"
    INLINE_STAMPED = "inline stamped"
    ABOVE_STAMPED = "stamped above"
    SKIPPED_OUT_OF_RANGE = "skipped: outside buffer"
    SKIPPED_BLANK = "skipped: blank"
    SKIPPED_STAMP_ONLY = "skipped: stamp only"
    SKIPPED_CLAIMED = "skipped: already claimed"

    @property
    def skipped(self) -> bool:
        return self.name.startswith("SKIPPED_")


@dataclass(frozen=True)
class EnclosingBlock:
    """An existing ``Start``/``End`` pair around a change range.

    Attributes:
        start_line (int): Line of the ``Start`` tag.
        end_line (int): Line of the ``End`` tag.
        author (str): Author recorded on both tags.
        stamp (str): Timestamp text recorded on the ``Start`` tag.
    """

    start_line: int
    end_line: int
    author: str
    stamp: str


def find_enclosing_block(
    lines: Sequence[str],
    span: LineRange,
    parser: TagParser,
) -> EnclosingBlock | None:
    """Return the ``Start``/``End`` block that encloses ``span``, if any.

    The upward scan starts at ``span.start`` and stops at the first ``Start``
    tag; an ``End`` tag or a malformed tag met first means ``span`` is not inside
    a block. The downward scan starts at ``span.end`` and accepts the first
    ``End`` tag only if it carries the same author as the ``Start`` tag.
    """
    start_line: int | None = None
    start_tag: StartTag | None = None
    for index in range(min(span.start, len(lines) - 1), -1, -1):
        parsed = parser.parse(lines[index])
        if isinstance(parsed, StartTag):
            start_line, start_tag = index, parsed
            break
        if isinstance(parsed, (EndTag, MalformedTag)):
            return None
    if start_line is None or start_tag is None:
        return None

    for index in range(max(span.end, start_line + 1), len(lines)):
        parsed = parser.parse(lines[index])
        if isinstance(parsed, EndTag):
            if parsed.author != start_tag.author:
                return None
            return EnclosingBlock(
                start_line=start_line,
                end_line=index,
                author=start_tag.author,
                stamp=start_tag.stamp,
            )
        if isinstance(parsed, (StartTag, MalformedTag)):
            return None
    return None


class StampBlockManager:
    """Write stamps for change ranges of one buffer snapshot into an `EditPlan`.

    Args:
        lines (Sequence[str]): Buffer lines the plan was built on.
        plan (EditPlan): Shared plan receiving the edits.
        style (CommentStyle): Comment style of the document.
        author (str): Name written into new stamps.
        timestamp (Timestamp): Time captured for this save.
        merge_threshold (int): Inline stamp run length above which the run
            becomes a block.
    """

    def __init__(
        self,
        lines: Sequence[str],
        plan: EditPlan,
        *,
        style: CommentStyle,
        author: str,
        timestamp: Timestamp,
        merge_threshold: int = DEFAULT_MERGE_THRESHOLD,
    ) -> None:
        self.lines: Sequence[str] = lines
        self.plan: EditPlan = plan
        self.style: CommentStyle = style
        self.parser: TagParser = get_tag_parser(style)
        self.author: str = author
        self.timestamp: Timestamp = timestamp
        self.merge_threshold: int = merge_threshold

    def stamp(self, span: LineRange) -> StampOutcome:
        """Stamp one merged change range."""
        outcome: StampOutcome = self._stamp(span)
        logger.debug("Range [%d, %d]: %s", span.start, span.end, outcome.value)
        return outcome

    def _stamp(self, span: LineRange) -> StampOutcome:
        if span.end >= len(self.lines):
            return StampOutcome.SKIPPED_OUT_OF_RANGE
        if not self.plan.is_free(span):
            return StampOutcome.SKIPPED_CLAIMED

        if not any(self.lines[i].strip() for i in span):
            return StampOutcome.SKIPPED_BLANK
        trimmed: LineRange | None = self._trim_edges(span)
        if trimmed is None:
            return StampOutcome.SKIPPED_STAMP_ONLY
        span = trimmed

        if span.height == 1 and not self.parser.strip_inline_stamp(
            self.lines[span.start], self.author
        ).strip():
            return StampOutcome.SKIPPED_STAMP_ONLY

        block: EnclosingBlock | None = find_enclosing_block(self.lines, span, self.parser)
        if block is not None and self._refresh_block(block):
            return StampOutcome.BLOCK_REFRESHED

        if span.height == 1:
            if self.style.force_above:
                return self._stamp_above(span.start)
            return self._stamp_inline(span.start)
        return self._wrap_block(span)

    # ---- Step 1: enclosing block ----------------------------------------------

    def _refresh_block(self, block: EnclosingBlock) -> bool:
        if block.author != self.author:
            return False
        if not self.timestamp.same_day(block.stamp):
            logger.debug("Block [%d, %d] is from another day", block.start_line, block.end_line)
            return False
        if not (self.plan.can_edit(block.start_line) and self.plan.can_edit(block.end_line)):
            return False

        start_tag = self.parser.parse(self.lines[block.start_line])
        end_tag = self.parser.parse(self.lines[block.end_line])
        start_indent: str = start_tag.indent if isinstance(start_tag, StartTag) else ""
        end_indent: str = end_tag.indent if isinstance(end_tag, EndTag) else start_indent

        self.plan.replace_line(
            block.start_line, self.parser.render_start(start_indent, self.author, self.timestamp)
        )
        self.plan.replace_line(
            block.end_line, self.parser.render_end(end_indent, self.author, self.timestamp)
        )
        self._strip_stubs(range(block.start_line + 1, block.end_line))
        self.plan.claim(range(block.start_line, block.end_line + 1))
        return True

    # ---- Step 2: single line --------------------------------------------------

    def _stamp_above(self, index: int) -> StampOutcome:
        tag: str = self.parser.render_line_tag(
            leading_whitespace(self.lines[index]), self.author, self.timestamp
        )
        above: int = index - 1
        if above >= 0 and self.plan.can_edit(above):
            parsed = self.parser.parse(self.lines[above])
            if isinstance(parsed, LineTag) and parsed.author == self.author:
                self.plan.replace_line(above, tag)
                self.plan.claim((above, index))
                return StampOutcome.ABOVE_STAMPED
        self.plan.insert_before(index, tag)
        self.plan.claim((index,))
        return StampOutcome.ABOVE_STAMPED

    def _has_own_inline(self, index: int) -> bool:
        return (
            self.plan.can_edit(index)
            and self.plan.is_free((index,))
            and self.parser.has_inline_stamp(self.lines[index], self.author)
        )

    def _stamp_inline(self, index: int) -> StampOutcome:
        first: int = index
        while first - 1 >= 0 and self._has_own_inline(first - 1):
            first -= 1
        last: int = index
        while last + 1 < len(self.lines) and self._has_own_inline(last + 1):
            last += 1

        if last - first + 1 > self.merge_threshold:
            indent: str = leading_whitespace(self.lines[first])
            self.plan.insert_before(
                first, self.parser.render_start(indent, self.author, self.timestamp)
            )
            self.plan.insert_after(
                last, self.parser.render_end(indent, self.author, self.timestamp)
            )
            self._strip_stubs(range(first, last + 1))
            self.plan.claim(range(first, last + 1))
            return StampOutcome.RUN_MERGED

        code: str = self.parser.strip_inline_stamp(self.lines[index], self.author)
        self.plan.replace_line(index, self.parser.render_inline(code, self.author, self.timestamp))
        self.plan.claim((index,))
        return StampOutcome.INLINE_STAMPED

    # ---- Step 3: multi-line block ---------------------------------------------

    def _wrap_block(self, span: LineRange) -> StampOutcome:
        indent: str = leading_whitespace(self.lines[span.start])
        start_text: str = self.parser.render_start(indent, self.author, self.timestamp)
        end_text: str = self.parser.render_end(indent, self.author, self.timestamp)

        above: int = span.start - 1
        if self._is_own(above, StartTag):
            self.plan.replace_line(above, start_text)
            self.plan.claim((above,))
        else:
            self.plan.insert_before(span.start, start_text)

        below: int = span.end + 1
        if self._is_own(below, EndTag):
            self.plan.replace_line(below, end_text)
            self.plan.claim((below,))
        else:
            self.plan.insert_after(span.end, end_text)

        self._strip_stubs(span)
        self.plan.claim(span)
        return StampOutcome.BLOCK_WRAPPED

    # ---- Helpers --------------------------------------------------------------

    def _trim_edges(self, span: LineRange) -> LineRange | None:
        # Stamp lines at the edges were written by a previous save, not by the user.
        # Trailing blank lines (the empty line after a final newline included) stay
        # outside the block.
        start, end = span.start, span.end
        while start <= end and self.parser.is_tag(self.lines[start]):
            start += 1
        while end >= start and (
            self.parser.is_tag(self.lines[end]) or not self.lines[end].strip()
        ):
            end -= 1
        if start > end:
            return None
        return span if (start, end) == (span.start, span.end) else LineRange(start, end)

    def _is_own(self, index: int, kind: type[StartTag] | type[EndTag]) -> bool:
        if not (0 <= index < len(self.lines)) or not self.plan.can_edit(index):
            return False
        if not self.plan.is_free((index,)):
            return False
        parsed = self.parser.parse(self.lines[index])
        return isinstance(parsed, kind) and parsed.author == self.author

    def _strip_stubs(self, indices: range | LineRange) -> None:
        for index in indices:
            if not self.plan.can_edit(index):
                continue
            line: str = self.lines[index]
            stripped: str = self.parser.strip_inline_stamp(line, self.author)
            if stripped != line:
                self.plan.replace_line(index, stripped)
