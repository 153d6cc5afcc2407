# topmark:header:start
#
#   project      : CodeStamp
#   file         : diff.py
#   file_relpath : src/codestamp/engine/diff.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Line-level differ.

Produces the ordered segment sequence the rest of the engine walks. Segments
are consumed left to right: ``EQUAL`` advances both texts, ``DELETED`` only
the old one, ``INSERTED`` only the new one. A replaced block is reported as a
``DELETED`` segment immediately followed by an ``INSERTED`` segment; the revert
detector relies on that pairing.
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from codestamp.engine.document import split_lines

if TYPE_CHECKING:
    from collections.abc import Sequence


class DiffKind(str, Enum):
    """Segment kind."""

    EQUAL = "equal"
    INSERTED = "inserted"
    DELETED = "deleted"


@dataclass(frozen=True)
class DiffSegment:
    """One run of equal, inserted or deleted lines.

    Attributes:
        kind (DiffKind): What happened to the lines.
        lines (tuple[str, ...]): Literal line content, without terminators.
    """

    kind: DiffKind
    lines: tuple[str, ...]

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def diff_line_lists(old: Sequence[str], new: Sequence[str]) -> list[DiffSegment]:
    """Diff two line sequences.

    Args:
        old (Sequence[str]): Lines of the old text.
        new (Sequence[str]): Lines of the new text.

    Returns:
        list[DiffSegment]: Ordered segments; empty segments are never emitted.
    """
    # autojunk would treat frequent lines (blank lines, braces) as noise in long files
    matcher = difflib.SequenceMatcher(a=list(old), b=list(new), autojunk=False)
    segments: list[DiffSegment] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            segments.append(DiffSegment(DiffKind.EQUAL, tuple(new[j1:j2])))
            continue
        if tag in ("replace", "delete"):
            segments.append(DiffSegment(DiffKind.DELETED, tuple(old[i1:i2])))
        if tag in ("replace", "insert"):
            segments.append(DiffSegment(DiffKind.INSERTED, tuple(new[j1:j2])))
    return segments


def diff_lines(old_text: str, new_text: str) -> list[DiffSegment]:
    """Diff two texts line by line.

    Both texts are split with `split_lines`, so line positions in the result
    match `TextDocument` line indices of the new text.
    """
    return diff_line_lists(split_lines(old_text), split_lines(new_text))
