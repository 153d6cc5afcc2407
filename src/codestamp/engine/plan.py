# topmark:header:start
#
#   project      : CodeStamp
#   file         : plan.py
#   file_relpath : src/codestamp/engine/plan.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Edit plan: collects per-line operations and emits non-overlapping edits.

The stamp block manager never emits `LineEdit` objects directly. It records
operations against buffer lines of the snapshot:

* ``replace_line(i, text)`` rewrites line ``i``;
* ``insert_before(i, text)`` / ``insert_after(i, text)`` add lines around it;
* ``replace_block(start, end, lines)`` swaps a whole span (used for reverts)
  and locks those lines against any further operation.

`EditPlan.to_edits` folds all operations on one line into a single
replacement of that line. Because every emitted edit covers either exactly one
line or one locked block, no two edits can overlap.

Lines are also *claimed* by the range that stamped them, so a later range that
touches the same lines is skipped instead of stamping them twice.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger
from codestamp.engine.document import LineEdit

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from codestamp.config.logging import CodestampLogger

logger: CodestampLogger = get_logger(__name__)


class EditPlan:
    """Per-save collection of line operations against one buffer snapshot."""

    def __init__(self, lines: Sequence[str]) -> None:
        self._lines: Sequence[str] = lines
        self._replacements: dict[int, str] = {}
        self._before: dict[int, list[str]] = {}
        self._after: dict[int, list[str]] = {}
        self._blocks: list[LineEdit] = []
        self._locked: set[int] = set()
        self._claimed: set[int] = set()

    # ---- Queries --------------------------------------------------------------

    def can_edit(self, index: int) -> bool:
        """Return True if line ``index`` exists and may still be rewritten."""
        return (
            0 <= index < len(self._lines)
            and index not in self._locked
            and index not in self._replacements
        )

    def is_free(self, lines: Iterable[int]) -> bool:
        """Return True if none of ``lines`` is locked or claimed."""
        return not any(i in self._locked or i in self._claimed for i in lines)

    @property
    def locked_lines(self) -> frozenset[int]:
        return frozenset(self._locked)

    # ---- Operations -----------------------------------------------------------

    def claim(self, lines: Iterable[int]) -> None:
        """Mark ``lines`` as owned by the range currently being stamped."""
        self._claimed.update(lines)

    def replace_block(self, start: int, end: int, lines: Sequence[str]) -> bool:
        """Replace buffer lines ``[start, end)`` and lock them.

        Returns:
            bool: False (and records nothing) if any line is already in use.
        """
        span = range(start, end)
        if end > len(self._lines) or not self.is_free(span) or any(
            i in self._replacements or i in self._before or i in self._after for i in span
        ):
            logger.debug("Block replacement [%d, %d) conflicts with earlier edits", start, end)
            return False
        self._blocks.append(LineEdit.replace(start, end, lines))
        self._locked.update(span)
        return True

    def replace_line(self, index: int, text: str) -> bool:
        """Rewrite line ``index``; the first replacement of a line wins."""
        if not self.can_edit(index):
            logger.debug("Line %d already rewritten or locked; keeping earlier edit", index)
            return False
        self._replacements[index] = text
        return True

    def insert_before(self, index: int, text: str) -> bool:
        """Insert ``text`` as a new line above line ``index``."""
        if not 0 <= index < len(self._lines) or index in self._locked:
            logger.debug("Cannot insert above line %d", index)
            return False
        self._before.setdefault(index, []).append(text)
        return True

    def insert_after(self, index: int, text: str) -> bool:
        """Insert ``text`` as a new line below line ``index``."""
        if not 0 <= index < len(self._lines) or index in self._locked:
            logger.debug("Cannot insert below line %d", index)
            return False
        self._after.setdefault(index, []).append(text)
        return True

    # ---- Output ---------------------------------------------------------------

    def to_edits(self) -> list[LineEdit]:
        """Return the planned edits in buffer order, dropping no-op rewrites."""
        edits: list[LineEdit] = list(self._blocks)
        touched: set[int] = set(self._replacements) | set(self._before) | set(self._after)
        for index in touched:
            original: str = self._lines[index]
            new_lines: list[str] = [
                *self._before.get(index, ()),
                self._replacements.get(index, original),
                *self._after.get(index, ()),
            ]
            if new_lines == [original]:
                continue
            edits.append(LineEdit.replace(index, index + 1, new_lines))
        edits.sort(key=lambda e: (e.start, e.end))
        return edits
