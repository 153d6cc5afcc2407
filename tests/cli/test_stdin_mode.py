# topmark:header:start
#
#   project      : CodeStamp
#   file         : test_stdin_mode.py
#   file_relpath : tests/cli/test_stdin_mode.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""CLI tests for `codestamp stamp -` (editor buffer piped through STDIN).

STDOUT carries the buffer only, so these tests pass ``-q`` whenever they
compare the output exactly; notices would otherwise be interleaved by the
Click test runner.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.cli.exit_codes import ExitCode
from tests.cli.conftest import GitStub, assert_SUCCESS, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


def _stdin(tmp_path: Path, name: str, buffer: str | bytes, *extra: str) -> Result:
    return run_cli_in(
        tmp_path,
        ["-q", "stamp", "-", "--stdin-filename", name, "--author", "Eve", *extra],
        input_text=buffer,
    )


def test_buffer_is_stamped_against_file_on_disk(tmp_path: Path) -> None:
    (tmp_path / "app.js").write_text("a=1\nb=1\n", encoding="utf-8")

    result: Result = _stdin(tmp_path, "app.js", "a=1\nb=2\n")

    assert_SUCCESS(result)
    lines: list[str] = result.output.split("\n")
    assert lines[0] == "a=1"
    assert lines[1].startswith("b=2 // Eve | ")
    assert lines[2] == ""
    # The file on disk is the editor's business
    assert (tmp_path / "app.js").read_text(encoding="utf-8") == "a=1\nb=1\n"


def test_unchanged_buffer_is_echoed(tmp_path: Path) -> None:
    (tmp_path / "app.js").write_text("a=1\n", encoding="utf-8")
    result: Result = _stdin(tmp_path, "app.js", "a=1\n")
    assert_SUCCESS(result)
    assert result.output == "a=1\n"


def test_new_file_buffer_is_wrapped(tmp_path: Path) -> None:
    result: Result = _stdin(tmp_path, "new.py", "x = 1\ny = 2\n")

    assert_SUCCESS(result)
    lines: list[str] = result.output.splitlines()
    assert lines[0].startswith("# Start Eve | ")
    assert lines[1:3] == ["x = 1", "y = 2"]
    assert lines[3].startswith("# End Eve | ")


def test_excluded_buffer_is_echoed_untouched(tmp_path: Path) -> None:
    result: Result = _stdin(tmp_path, "gen.js", "a=1\r\n", "--exclude", "gen.js")
    assert_SUCCESS(result)
    # Result.output normalizes CRLF, the raw bytes do not
    assert result.stdout_bytes == b"a=1\r\n"


def test_unsupported_language_buffer_is_echoed(tmp_path: Path) -> None:
    result: Result = _stdin(tmp_path, "data.json", '{"a": 1}')
    assert_SUCCESS(result)
    assert result.output == '{"a": 1}'


def test_explicit_base_replaces_file_on_disk(tmp_path: Path) -> None:
    (tmp_path / "app.js").write_text("unrelated\n", encoding="utf-8")
    (tmp_path / "saved.js").write_text("a=2\n", encoding="utf-8")

    result: Result = _stdin(tmp_path, "app.js", "a=2\n", "--base", "saved.js")

    assert_SUCCESS(result)
    assert result.output == "a=2\n"


def test_revert_restores_committed_line(tmp_path: Path, git_stub: GitStub) -> None:
    (tmp_path / "app.js").write_text("x=2 // Eve | 01/01/2025, 09:00:00\n", encoding="utf-8")
    git_stub.committed["app.js"] = "x=1\n"

    result: Result = _stdin(tmp_path, "app.js", "x=1 // Eve | 01/01/2025, 09:00:00\n")

    assert_SUCCESS(result)
    assert result.output == "x=1\n"


def test_language_option_overrides_detection(tmp_path: Path) -> None:
    result: Result = _stdin(tmp_path, "page.tpl", "<p>\n", "--language", "html")

    assert_SUCCESS(result)
    first: str = result.output.splitlines()[0]
    assert first.startswith("<p> <!-- Eve | ") and first.endswith(" -->")


def test_undecodable_stdin_exits_encoding_error(tmp_path: Path) -> None:
    result: Result = _stdin(tmp_path, "app.js", b"\xff\xfe\xfa")
    assert result.exit_code == ExitCode.ENCODING_ERROR
