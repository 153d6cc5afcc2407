# topmark:header:start
#
#   project      : CodeStamp
#   file         : test_blocks.py
#   file_relpath : tests/engine/test_blocks.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Tests for the stamp block manager.

Each test stamps one or more ranges of a small buffer and checks the buffer
after the planned edits are applied.
"""

from __future__ import annotations

from codestamp.engine.blocks import (
    EnclosingBlock,
    StampBlockManager,
    StampOutcome,
    find_enclosing_block,
)
from codestamp.engine.document import apply_line_edits
from codestamp.engine.plan import EditPlan
from codestamp.engine.ranges import LineRange
from codestamp.engine.tags import get_tag_parser
from codestamp.styles import POUND, SLASH, XML, CommentStyle
from tests.conftest import AUTHOR, TS

OLD_DAY = "31/12/2024, 09:00:00"
SAME_DAY = "01/01/2025, 09:00:00"
NOW = TS.text


def _run(
    lines: list[str],
    *spans: LineRange,
    style: CommentStyle = SLASH,
    merge_threshold: int = 3,
) -> tuple[list[str], list[StampOutcome]]:
    plan = EditPlan(lines)
    manager = StampBlockManager(
        lines,
        plan,
        style=style,
        author=AUTHOR,
        timestamp=TS,
        merge_threshold=merge_threshold,
    )
    outcomes: list[StampOutcome] = [manager.stamp(span) for span in spans]
    return apply_line_edits(lines, plan.to_edits()), outcomes


# --- Single line -------------------------------------------------------------


def test_single_line_gets_inline_stamp() -> None:
    out, outcomes = _run(["a=1", "b=2"], LineRange(1, 1))
    assert out == ["a=1", f"b=2 // Eve | {NOW}"]
    assert outcomes == [StampOutcome.INLINE_STAMPED]


def test_inline_stamp_is_replaced_not_duplicated() -> None:
    out, _ = _run([f"b=3 // Eve | {OLD_DAY}"], LineRange(0, 0))
    assert out == [f"b=3 // Eve | {NOW}"]


def test_forced_above_style_inserts_line_tag_with_indent() -> None:
    out, outcomes = _run(["def f():", "    return 2"], LineRange(1, 1), style=POUND)
    assert out == ["def f():", f"    # Eve | {NOW}", "    return 2"]
    assert outcomes == [StampOutcome.ABOVE_STAMPED]


def test_forced_above_style_reuses_own_tag() -> None:
    out, _ = _run([f"    # Eve | {OLD_DAY}", "    x = 2"], LineRange(1, 1), style=POUND)
    assert out == [f"    # Eve | {NOW}", "    x = 2"]


def test_forced_above_style_keeps_other_authors_tag() -> None:
    out, _ = _run([f"# Bob | {OLD_DAY}", "x = 2"], LineRange(1, 1), style=POUND)
    assert out == [f"# Bob | {OLD_DAY}", f"# Eve | {NOW}", "x = 2"]


def test_stamp_lines_at_range_edges_are_trimmed() -> None:
    """A range that starts on the previous stamp only stamps the code line."""
    out, _ = _run([f"# Eve | {OLD_DAY}", "x = 2"], LineRange(0, 1), style=POUND)
    assert out == [f"# Eve | {NOW}", "x = 2"]


# --- Skips -------------------------------------------------------------------


def test_blank_line_is_skipped() -> None:
    out, outcomes = _run(["a", "   "], LineRange(1, 1))
    assert out == ["a", "   "]
    assert outcomes == [StampOutcome.SKIPPED_BLANK]
    assert outcomes[0].skipped


def test_stamp_only_line_is_skipped() -> None:
    lines: list[str] = [f"// Eve | {OLD_DAY}"]
    out, outcomes = _run(lines, LineRange(0, 0))
    assert out == lines
    assert outcomes == [StampOutcome.SKIPPED_STAMP_ONLY]


def test_range_past_buffer_end_is_skipped() -> None:
    _, outcomes = _run(["a"], LineRange(3, 3))
    assert outcomes == [StampOutcome.SKIPPED_OUT_OF_RANGE]


def test_claimed_lines_are_not_stamped_twice() -> None:
    out, outcomes = _run(["a", "B"], LineRange(1, 1), LineRange(1, 1))
    assert out == ["a", f"B // Eve | {NOW}"]
    assert outcomes == [StampOutcome.INLINE_STAMPED, StampOutcome.SKIPPED_CLAIMED]


# --- Blocks ------------------------------------------------------------------


def test_multi_line_range_is_wrapped() -> None:
    out, outcomes = _run(["a", "  B", "  C", "d"], LineRange(1, 2))
    assert out == ["a", f"  // Start Eve | {NOW}", "  B", "  C", f"  // End Eve | {NOW}", "d"]
    assert outcomes == [StampOutcome.BLOCK_WRAPPED]


def test_wrap_uses_block_comment_suffix() -> None:
    out, _ = _run(["<p>", "<b>x</b>", "</p>"], LineRange(0, 1), style=XML)
    assert out == [
        f"<!-- Start Eve | {NOW} -->",
        "<p>",
        "<b>x</b>",
        f"<!-- End Eve | {NOW} -->",
        "</p>",
    ]


def test_same_day_enclosing_block_is_refreshed() -> None:
    lines: list[str] = [
        f"// Start Eve | {SAME_DAY}",
        f"x // Eve | {SAME_DAY}",
        "Y",
        f"// End Eve | {SAME_DAY}",
    ]
    out, outcomes = _run(lines, LineRange(2, 2))
    assert out == [f"// Start Eve | {NOW}", "x", "Y", f"// End Eve | {NOW}"]
    assert outcomes == [StampOutcome.BLOCK_REFRESHED]


def test_old_block_tags_are_reused_by_a_new_wrap() -> None:
    lines: list[str] = [f"// Start Eve | {OLD_DAY}", "B", "C", f"// End Eve | {OLD_DAY}"]
    out, outcomes = _run(lines, LineRange(1, 2))
    assert out == [f"// Start Eve | {NOW}", "B", "C", f"// End Eve | {NOW}"]
    assert outcomes == [StampOutcome.BLOCK_WRAPPED]


def test_other_authors_block_gets_own_stamp() -> None:
    lines: list[str] = [f"// Start Bob | {NOW}", "Y", f"// End Bob | {NOW}"]
    out, _ = _run(lines, LineRange(1, 1))
    assert out == [f"// Start Bob | {NOW}", f"Y // Eve | {NOW}", f"// End Bob | {NOW}"]


def test_dense_inline_run_is_merged_into_block() -> None:
    lines: list[str] = [
        f"a=1 // Eve | {OLD_DAY}",
        f"b=1 // Eve | {OLD_DAY}",
        f"c=1 // Eve | {OLD_DAY}",
        "d=2",
    ]
    out, outcomes = _run(lines, LineRange(3, 3))
    assert out == [f"// Start Eve | {NOW}", "a=1", "b=1", "c=1", "d=2", f"// End Eve | {NOW}"]
    assert outcomes == [StampOutcome.RUN_MERGED]


def test_run_within_threshold_stays_inline() -> None:
    lines: list[str] = [f"a=1 // Eve | {OLD_DAY}", f"b=1 // Eve | {OLD_DAY}", "c=2"]
    out, outcomes = _run(lines, LineRange(2, 2))
    assert out == [*lines[:2], f"c=2 // Eve | {NOW}"]
    assert outcomes == [StampOutcome.INLINE_STAMPED]


def test_merge_threshold_is_configurable() -> None:
    lines: list[str] = [f"a=1 // Eve | {OLD_DAY}", "b=2"]
    _, outcomes = _run(lines, LineRange(1, 1), merge_threshold=1)
    assert outcomes == [StampOutcome.RUN_MERGED]


# --- Enclosing block lookup ----------------------------------------------------


def test_find_enclosing_block() -> None:
    parser = get_tag_parser(SLASH)
    lines: list[str] = [f"// Start Eve | {NOW}", "a", "b", f"// End Eve | {NOW}"]
    assert find_enclosing_block(lines, LineRange(1, 2), parser) == EnclosingBlock(
        start_line=0, end_line=3, author="Eve", stamp=NOW
    )


def test_end_tag_above_means_no_enclosing_block() -> None:
    parser = get_tag_parser(SLASH)
    lines: list[str] = [
        f"// Start Eve | {NOW}",
        "a",
        f"// End Eve | {NOW}",
        "b",
        f"// End Eve | {NOW}",
    ]
    assert find_enclosing_block(lines, LineRange(3, 3), parser) is None


def test_mismatched_end_author_means_no_enclosing_block() -> None:
    parser = get_tag_parser(SLASH)
    lines: list[str] = [f"// Start Eve | {NOW}", "a", f"// End Bob | {NOW}"]
    assert find_enclosing_block(lines, LineRange(1, 1), parser) is None
