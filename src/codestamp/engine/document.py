# topmark:header:start
#
#   project      : CodeStamp
#   file         : document.py
#   file_relpath : src/codestamp/engine/document.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""In-memory text document and line edits.

`TextDocument` is the buffer model the engine reads from: lines addressed by a
0-based index, without their terminators. A text ending in a newline therefore
has a trailing empty line, exactly like an editor buffer, and
``newline.join(lines)`` restores the original text.

`LineEdit` replaces the half-open line span ``[start, end)`` with new lines; an
empty span is a point insertion before line ``start``. A set of edits is applied
all-or-nothing by `TextDocument.apply_edits`, which also performs the
optimistic version check that protects a save from racing buffer changes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from codestamp.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from codestamp.config.logging import CodestampLogger

logger: CodestampLogger = get_logger(__name__)

_RE_LINE_BREAK: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


class DocumentError(Exception):
    """Base class for document edit failures."""


class StaleDocumentError(DocumentError):
    """The buffer changed after the snapshot the edits were computed from."""


class EditConflictError(DocumentError):
    """Edits overlap each other or address lines outside the buffer."""


def split_lines(text: str) -> list[str]:
    r"""Split ``text`` into lines without terminators.

    ``""`` yields ``[""]`` and ``"a\n"`` yields ``["a", ""]``, so the number of
    lines matches what an editor reports.
    """
    return _RE_LINE_BREAK.split(text)


def detect_newline(text: str) -> str:
    r"""Return the first newline sequence found in ``text`` (``"\n"`` when none)."""
    match = _RE_LINE_BREAK.search(text)
    return match.group(0) if match else "\n"


@dataclass(frozen=True)
class LineEdit:
    """Replace buffer lines ``[start, end)`` with ``lines``.

    Attributes:
        start (int): First replaced line (0-based).
        end (int): One past the last replaced line; ``start == end`` inserts.
        lines (tuple[str, ...]): Replacement lines, without terminators.
    """

    start: int
    end: int
    lines: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid edit span [{self.start}, {self.end})")

    @classmethod
    def insert(cls, line: int, lines: Sequence[str]) -> LineEdit:
        """Insert ``lines`` before buffer line ``line``."""
        return cls(line, line, tuple(lines))

    @classmethod
    def replace(cls, start: int, end: int, lines: Sequence[str]) -> LineEdit:
        """Replace buffer lines ``[start, end)`` with ``lines``."""
        return cls(start, end, tuple(lines))

    @property
    def is_insertion(self) -> bool:
        return self.start == self.end

    @property
    def text(self) -> str:
        """Replacement text joined with ``\\n``."""
        return "\n".join(self.lines)

    def overlaps(self, other: LineEdit) -> bool:
        """Return True if applying both edits would be ambiguous.

        Two replacements overlap when their spans share a line. An insertion
        overlaps a replacement that strictly contains its point, and another
        insertion at the same point (their order would be undefined).
        """
        if self.is_insertion and other.is_insertion:
            return self.start == other.start
        if self.is_insertion:
            return other.start < self.start < other.end
        if other.is_insertion:
            return self.start < other.start < self.end
        return self.start < other.end and other.start < self.end


def check_edits(edits: Sequence[LineEdit], line_count: int) -> list[LineEdit]:
    """Validate edits against a buffer size and return them in application order.

    Args:
        edits (Sequence[LineEdit]): Edits computed from one snapshot.
        line_count (int): Number of lines in that snapshot.

    Returns:
        list[LineEdit]: The edits sorted by ``(start, end)``.

    Raises:
        EditConflictError: If an edit addresses lines past the buffer end or two
            edits overlap.
    """
    ordered: list[LineEdit] = sorted(edits, key=lambda e: (e.start, e.end))
    for edit in ordered:
        if edit.end > line_count:
            raise EditConflictError(
                f"Edit [{edit.start}, {edit.end}) exceeds buffer of {line_count} lines"
            )
    for i, edit in enumerate(ordered):
        for other in ordered[i + 1 :]:
            if other.start > edit.end:
                break
            if edit.overlaps(other):
                raise EditConflictError(
                    f"Edits [{edit.start}, {edit.end}) and [{other.start}, {other.end}) overlap"
                )
    return ordered


def apply_line_edits(lines: Sequence[str], edits: Sequence[LineEdit]) -> list[str]:
    """Return a copy of ``lines`` with all ``edits`` applied at once.

    Raises:
        EditConflictError: See `check_edits`.
    """
    ordered: list[LineEdit] = check_edits(edits, len(lines))
    out: list[str] = []
    cursor = 0
    for edit in ordered:
        out.extend(lines[cursor : edit.start])
        out.extend(edit.lines)
        cursor = edit.end
    out.extend(lines[cursor:])
    return out


@dataclass
class TextDocument:
    """A mutable text buffer addressed by line.

    Attributes:
        lines (list[str]): Buffer lines without terminators.
        newline (str): Newline sequence used when rendering the text.
        path (Path | None): File the buffer belongs to, if any.
        language_id (str | None): Language identifier supplied by the host.
        version (int): Incremented on every change; used for optimistic checks.
    """

    lines: list[str]
    newline: str = "\n"
    path: Path | None = None
    language_id: str | None = None
    version: int = field(default=0)

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        path: Path | None = None,
        language_id: str | None = None,
    ) -> TextDocument:
        """Build a document from raw text, remembering its newline style."""
        return cls(
            lines=split_lines(text),
            newline=detect_newline(text),
            path=path,
            language_id=language_id,
        )

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_at(self, index: int) -> str:
        """Return the text of line ``index``.

        Raises:
            IndexError: If ``index`` is outside the buffer.
        """
        if index < 0 or index >= len(self.lines):
            raise IndexError(f"Line {index} outside buffer of {len(self.lines)} lines")
        return self.lines[index]

    def get_text(self) -> str:
        """Return the full buffer text."""
        return self.newline.join(self.lines)

    def set_text(self, text: str) -> None:
        """Replace the whole buffer (e.g. the user kept typing)."""
        self.lines = split_lines(text)
        self.version += 1

    def apply_edits(
        self,
        edits: Iterable[LineEdit],
        *,
        expected_version: int | None = None,
    ) -> None:
        """Apply ``edits`` atomically.

        Args:
            edits (Iterable[LineEdit]): Non-overlapping edits computed from a snapshot.
            expected_version (int | None): Version of that snapshot. When given and
                the buffer has moved on, nothing is applied.

        Raises:
            StaleDocumentError: If ``expected_version`` does not match.
            EditConflictError: If the edits overlap or exceed the buffer.
        """
        if expected_version is not None and expected_version != self.version:
            raise StaleDocumentError(
                f"Document version {self.version} does not match snapshot {expected_version}"
            )
        edit_list: list[LineEdit] = list(edits)
        if not edit_list:
            return
        self.lines = apply_line_edits(self.lines, edit_list)
        self.version += 1
        logger.debug("Applied %d edit(s); document now at version %d", len(edit_list), self.version)
