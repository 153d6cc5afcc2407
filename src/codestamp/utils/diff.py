# topmark:header:start
#
#   project      : CodeStamp
#   file         : diff.py
#   file_relpath : src/codestamp/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Unified diff helpers for previewing stamps.

`unified_patch` produces the plain diff the CLI prints with ``--diff``;
`render_patch` colorizes it with yachalk for terminals and debug logs.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

from codestamp.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from codestamp.config.logging import CodestampLogger

logger: CodestampLogger = get_logger(__name__)


def unified_patch(
    current: Sequence[str],
    updated: Sequence[str],
    *,
    label: str,
    context: int = 3,
) -> str:
    """Return a unified diff between two line lists (empty when identical).

    Args:
        current (Sequence[str]): Lines before stamping, without terminators.
        updated (Sequence[str]): Lines after stamping, without terminators.
        label (str): File name shown in the diff headers.
        context (int): Number of context lines around each hunk.

    Returns:
        str: The diff text, each line terminated by ``\\n``.
    """
    patch_lines: list[str] = list(
        difflib.unified_diff(
            list(current),
            list(updated),
            fromfile=f"{label} (current)",
            tofile=f"{label} (stamped)",
            n=context,
            lineterm="",
        )
    )
    logger.trace("Patch has %d line(s)", len(patch_lines))
    return "".join(f"{line}\n" for line in patch_lines)


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch (Sequence[str] | str): A unified diff as a sequence of lines or a
            single multiline string.
        show_line_numbers (bool): Whether to prefix output with line numbers.

    Returns:
        str: The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = list(patch)

    def process_line(line: str) -> str:
        content: str = line.replace("\r", "\\r").replace("\n", "\\n")
        if line.startswith(("---", "+++")):
            return chalk.bold.white(content)
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.white(content)

    if show_line_numbers is True:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
