# topmark:header:start
#
#   project      : CodeStamp
#   file         : test_misc_commands.py
#   file_relpath : tests/cli/test_misc_commands.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""CLI tests: `styles`, `version` and the bare command group."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.constants import CODESTAMP_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli

if TYPE_CHECKING:
    from click.testing import Result


def _line_for(output: str, language: str) -> str:
    return next(line for line in output.splitlines() if line.split()[:1] == [language])


def test_styles_lists_languages_with_their_comment_style() -> None:
    result: Result = run_cli(["--no-color", "styles"])

    assert_SUCCESS(result)
    assert _line_for(result.output, "python").endswith("# (above)")
    assert _line_for(result.output, "javascript").endswith("//")
    assert _line_for(result.output, "html").endswith("<!-- ... -->")
    assert _line_for(result.output, "css").endswith("/* ... */")
    assert _line_for(result.output, "json").endswith("(not stamped)")
    assert ".py" not in result.output


def test_verbose_styles_show_file_patterns() -> None:
    result: Result = run_cli(["--no-color", "-v", "styles"])

    assert_SUCCESS(result)
    assert ".py" in result.output
    assert "Dockerfile" in result.output


def test_version_prints_installed_version() -> None:
    result: Result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == CODESTAMP_VERSION


def test_verbose_version_has_a_title() -> None:
    result: Result = run_cli(["--no-color", "-v", "version"])

    assert_SUCCESS(result)
    assert "CodeStamp version:" in result.output
    assert CODESTAMP_VERSION in result.output


def test_group_without_command_prints_help() -> None:
    result: Result = run_cli(["--no-color"])

    assert_SUCCESS(result)
    assert "codestamp stamp PATH" in result.output
    assert "Commands:" in result.output
