# topmark:header:start
#
#   project      : CodeStamp
#   file         : test_author_command.py
#   file_relpath : tests/cli/test_author_command.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""CLI tests for `codestamp author`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.cli.exit_codes import ExitCode
from codestamp.config.io import load_toml_dict
from tests.cli.conftest import assert_SUCCESS, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


def test_author_is_saved_to_user_config(tmp_path: Path, isolate_user_config: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["--no-color", "author", "Ada Lovelace"])

    assert_SUCCESS(result)
    target: Path = isolate_user_config / "codestamp" / "codestamp.toml"
    assert f"Author name set to Ada Lovelace in {target}" in result.output
    assert load_toml_dict(target) == {"author_name": "Ada Lovelace"}


def test_saved_author_is_used_by_stamp(tmp_path: Path) -> None:
    (tmp_path / "a.js").write_text("x\n", encoding="utf-8")

    assert_SUCCESS(run_cli_in(tmp_path, ["author", "Grace"]))
    result: Result = run_cli_in(tmp_path, ["stamp", "--apply", "a.js"])

    assert_SUCCESS(result)
    assert (tmp_path / "a.js").read_text(encoding="utf-8").startswith("x // Grace | ")


def test_author_prompts_with_current_name(tmp_path: Path, isolate_user_config: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["--no-color", "author"], input_text="Bob\n")

    assert_SUCCESS(result)
    assert "Author name [User]:" in result.output
    target: Path = isolate_user_config / "codestamp" / "codestamp.toml"
    assert load_toml_dict(target) == {"author_name": "Bob"}


def test_author_into_project_file_keeps_other_settings(tmp_path: Path) -> None:
    pyproject: Path = tmp_path / "pyproject.toml"
    pyproject.write_text(
        '[project]\nname = "demo"  # keep me\n\n[tool.codestamp]\nmerge_threshold = 5\n',
        encoding="utf-8",
    )

    result: Result = run_cli_in(tmp_path, ["author", "--file", "pyproject.toml", "Eve"])

    assert_SUCCESS(result)
    text: str = pyproject.read_text(encoding="utf-8")
    assert "# keep me" in text
    assert load_toml_dict(pyproject)["tool"]["codestamp"] == {
        "merge_threshold": 5,
        "author_name": "Eve",
    }


def test_blank_author_is_a_config_error(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["author", "   "])
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
