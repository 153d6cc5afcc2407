# topmark:header:start
#
#   project      : CodeStamp
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""CLI test helpers for running CodeStamp in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so that relative file names resolve against the
temporary test directory and project config discovery starts there.

The git lookup is stubbed for every CLI test: files under ``tmp_path`` count
as untracked unless a test sets ``committed`` on the `git_stub` fixture.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

import pytest
from click.testing import CliRunner, Result

from codestamp.cli.exit_codes import ExitCode
from codestamp.cli.main import cli
from codestamp.pipeline.steps import snapshot as snapshot_step
from codestamp.pipeline.steps import vcs as vcs_step

if TYPE_CHECKING:
    from pathlib import Path


class GitStub:
    """Stand-in for the committed-content lookup."""

    def __init__(self) -> None:
        self.committed: dict[str, str] = {}

    def __call__(self, path: Path, cwd: Path | None = None, **_: Any) -> str | None:
        return self.committed.get(path.name)


@pytest.fixture(autouse=True)
def git_stub(monkeypatch: pytest.MonkeyPatch) -> GitStub:
    """Replace git with a per-test mapping of file name to committed text."""
    stub = GitStub()
    monkeypatch.setattr(snapshot_step, "committed_content", stub)
    monkeypatch.setattr(vcs_step, "committed_content", stub)
    return stub


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD for the
            command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["stamp", "a.py"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input (STDIN mode).

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        res = run_cli_in(tmp_path, ["stamp", "--apply", "app.js"])
        assert res.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does **not** depend on files created in
    ``tmp_path`` (e.g. ``styles`` or ``version``) or when all provided paths
    are absolute.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2).

    Click's own usage errors also exit with 2, so their usage banner must be absent.
    """
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output
    assert "Usage:" not in result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
