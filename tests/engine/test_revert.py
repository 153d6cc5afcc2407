# topmark:header:start
#
#   project      : CodeStamp
#   file         : test_revert.py
#   file_relpath : tests/engine/test_revert.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Tests for the revert detector."""

from __future__ import annotations

from codestamp.engine.diff import diff_lines
from codestamp.engine.document import LineEdit
from codestamp.engine.revert import RevertResult, detect_reverts, normalize_code
from codestamp.engine.tags import get_tag_parser
from codestamp.styles import POUND, SLASH, CommentStyle
from tests.conftest import AUTHOR

STAMP = "01/01/2025, 09:00:00"


def _detect(committed: str, buffer: str, *, style: CommentStyle = SLASH) -> RevertResult:
    return detect_reverts(diff_lines(committed, buffer), style=style, author=AUTHOR)


def test_inline_stamp_on_committed_code_is_reverted() -> None:
    result: RevertResult = _detect("x=1\ny=2", f"x=1 // Eve | {STAMP}\ny=2")
    assert result.edits == (LineEdit.replace(0, 1, ["x=1"]),)
    assert result.handled_lines == frozenset({0})


def test_block_around_reindented_code_is_reverted() -> None:
    committed = "a\n  b\nc"
    buffer = f"a\n// Start Eve | {STAMP}\nb\n// End Eve | {STAMP}\nc"
    result: RevertResult = _detect(committed, buffer)
    assert result.edits == (LineEdit.replace(1, 4, ["  b"]),)
    assert result.handled_lines == frozenset({1, 2, 3})


def test_whitespace_only_difference_with_stamp_is_reverted() -> None:
    result: RevertResult = _detect(
        "if x:\n    y()", f"if x:\n    # Eve | {STAMP}\n  y()", style=POUND
    )
    assert result.edits == (LineEdit.replace(1, 3, ["    y()"]),)


def test_real_change_is_not_reverted() -> None:
    result: RevertResult = _detect("x=1", f"x=2 // Eve | {STAMP}")
    assert result.edits == ()
    assert result.handled_lines == frozenset()


def test_reformatted_code_is_restored() -> None:
    """A whitespace-only edit is not a change, stamped or not."""
    result: RevertResult = _detect("x = 1", "x=1")
    assert result.edits == (LineEdit.replace(0, 1, ["x = 1"]),)
    assert result.handled_lines == frozenset({0})


def test_restore_keeps_the_final_newline_of_the_buffer() -> None:
    result: RevertResult = _detect("x = 1", f"x=1 // Eve | {STAMP}\n")
    assert result.edits == (LineEdit.replace(0, 1, ["x = 1"]),)
    assert result.handled_lines == frozenset({0})


def test_other_authors_stamps_are_code() -> None:
    assert _detect("x=1", f"x=1 // Bob | {STAMP}").edits == ()


def test_buffer_positions_account_for_equal_and_inserted_runs() -> None:
    committed = "a\nb"
    buffer = f"new\na\nb // Eve | {STAMP}"
    result: RevertResult = _detect(committed, buffer)
    assert result.edits == (LineEdit.replace(2, 3, ["b"]),)
    assert result.handled_lines == frozenset({2})


def test_normalize_code_drops_own_stamps_and_whitespace() -> None:
    parser = get_tag_parser(SLASH)
    lines = [f"// Start Eve | {STAMP}", "  x = 1;", f"y // Eve | {STAMP}", f"// End Eve | {STAMP}"]
    assert normalize_code(lines, parser, AUTHOR) == "x=1;y"


def test_inserted_tags_around_unchanged_code_stay() -> None:
    """Only replaced blocks are candidates; pure insertions are left alone."""
    buffer = f"a\n// Start Eve | {STAMP}\nb\n// End Eve | {STAMP}\nc"
    assert _detect("a\nb\nc", buffer).edits == ()
