# topmark:header:start
#
#   project      : CodeStamp
#   file         : revert.py
#   file_relpath : src/codestamp/engine/revert.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Revert detector: undo stamps on code that is back to its committed state.

The committed content is diffed against the current buffer. Every replaced
block (a ``DELETED`` segment directly followed by an ``INSERTED`` one) whose
two sides only differ by the author's stamps and whitespace is a *stamp-only
difference*: the buffer lines are restored to the committed lines and marked as
handled, so range extraction does not stamp them again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger
from codestamp.engine.diff import DiffKind
from codestamp.engine.document import LineEdit
from codestamp.engine.tags import EndTag, LineTag, StartTag, get_tag_parser

if TYPE_CHECKING:
    from collections.abc import Sequence

    from codestamp.config.logging import CodestampLogger
    from codestamp.engine.diff import DiffSegment
    from codestamp.engine.tags import TagParser
    from codestamp.styles.base import CommentStyle

logger: CodestampLogger = get_logger(__name__)


@dataclass(frozen=True)
class RevertResult:
    """Outcome of revert detection for one save.

    Attributes:
        edits (tuple[LineEdit, ...]): Replacements restoring committed lines.
        handled_lines (frozenset[int]): Buffer lines covered by those edits.
    """

    edits: tuple[LineEdit, ...] = ()
    handled_lines: frozenset[int] = frozenset()


NO_REVERTS = RevertResult()


def _is_own_tag(parser: TagParser, line: str, author: str) -> bool:
    parsed = parser.parse(line)
    return isinstance(parsed, (StartTag, EndTag, LineTag)) and parsed.author == author


def normalize_code(lines: Sequence[str], parser: TagParser, author: str) -> str:
    """Return ``lines`` with the author's stamps and all whitespace removed."""
    kept: list[str] = [
        parser.strip_inline_stamp(line, author)
        for line in lines
        if not _is_own_tag(parser, line, author)
    ]
    return "".join("".join(kept).split())


def detect_reverts(
    segments: Sequence[DiffSegment],
    *,
    style: CommentStyle,
    author: str,
) -> RevertResult:
    """Find replaced blocks that differ from the committed text only by stamps.

    Args:
        segments (Sequence[DiffSegment]): Diff of committed content against the buffer.
        style (CommentStyle): Comment style of the document.
        author (str): Current author; only their stamps are ignored.

    Returns:
        RevertResult: Restoring edits and the buffer lines they cover.
    """
    parser: TagParser = get_tag_parser(style)
    edits: list[LineEdit] = []
    handled: set[int] = set()
    cursor = 0
    for index, segment in enumerate(segments):
        if segment.kind is DiffKind.DELETED:
            following = segments[index + 1] if index + 1 < len(segments) else None
            if following is None or following.kind is not DiffKind.INSERTED:
                continue
            if normalize_code(segment.lines, parser, author) != normalize_code(
                following.lines, parser, author
            ):
                continue
            restored: int = following.line_count
            if (
                index + 2 == len(segments)
                and restored > 1
                and following.lines[-1] == ""
                and segment.lines[-1] != ""
            ):
                # Keep the buffer's final newline
                restored -= 1
            span = range(cursor, cursor + restored)
            logger.debug(
                "Revert detected on lines [%d, %d): restoring %d committed line(s)",
                span.start,
                span.stop,
                segment.line_count,
            )
            edits.append(LineEdit.replace(span.start, span.stop, segment.lines))
            handled.update(span)
            continue
        cursor += segment.line_count

    return RevertResult(edits=tuple(edits), handled_lines=frozenset(handled))
