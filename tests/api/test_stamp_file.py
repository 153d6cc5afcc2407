# topmark:header:start
#
#   project      : CodeStamp
#   file         : test_stamp_file.py
#   file_relpath : tests/api/test_stamp_file.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""`codestamp.api.stamp_file`: snapshot selection, sinks and skip buckets."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from codestamp import api
from codestamp.api import Outcome
from codestamp.pipeline.context import OutputSink
from codestamp.pipeline.status import WriteStatus
from codestamp.pipeline.steps import snapshot as snapshot_step
from codestamp.pipeline.steps import vcs as vcs_step
from tests.conftest import TS, make_config

if TYPE_CHECKING:
    from pathlib import Path

    from codestamp.api import StampResult

T: str = TS.text


@pytest.fixture(autouse=True)
def no_git(monkeypatch: pytest.MonkeyPatch) -> None:
    """Behave as if no file is tracked."""

    def untracked(*_: Any, **__: Any) -> None:
        return None

    monkeypatch.setattr(snapshot_step, "committed_content", untracked)
    monkeypatch.setattr(vcs_step, "committed_content", untracked)


def _file(tmp_path: Path, name: str, text: str) -> Path:
    f: Path = tmp_path / name
    f.write_text(text, encoding="utf-8")
    return f


def test_dry_run_reports_diff_without_writing(tmp_path: Path) -> None:
    f: Path = _file(tmp_path, "app.js", "a=1\nb=2\n")

    result: StampResult = api.stamp_file(
        f, config=make_config(), base_text="a=1\n", timestamp=TS
    )

    assert result.outcome == Outcome.WOULD_CHANGE
    assert result.language_id == "javascript"
    assert result.text == f"a=1\nb=2 // Eve | {T}\n"
    assert result.diff is not None and "(stamped)" in result.diff
    assert f.read_text(encoding="utf-8") == "a=1\nb=2\n"


def test_file_sink_writes_stamped_text(tmp_path: Path) -> None:
    f: Path = _file(tmp_path, "app.js", "a=1\nb=2\n")

    result: StampResult = api.stamp_file(
        f, config=make_config(), base_text="a=1\n", timestamp=TS, sink=OutputSink.FILE
    )

    assert result.outcome == Outcome.CHANGED
    assert result.status.write == WriteStatus.WRITTEN
    assert f.read_text(encoding="utf-8") == f"a=1\nb=2 // Eve | {T}\n"


def test_editor_buffer_is_diffed_against_file_on_disk(tmp_path: Path) -> None:
    f: Path = _file(tmp_path, "app.js", "a=1\n")

    result: StampResult = api.stamp_file(
        f, config=make_config(), buffer_text="a=2\n", timestamp=TS
    )

    assert result.text == f"a=2 // Eve | {T}\n"


def test_untracked_file_is_stamped_as_new(tmp_path: Path) -> None:
    f: Path = _file(tmp_path, "app.js", "a\n")

    result: StampResult = api.stamp_file(f, config=make_config(), timestamp=TS)

    assert result.text == f"a // Eve | {T}\n"


def test_host_language_overrides_detection(tmp_path: Path) -> None:
    f: Path = _file(tmp_path, "notes.txt", "x = 1\n")

    result: StampResult = api.stamp_file(
        f, config=make_config(), base_text="", language_id="python", timestamp=TS
    )

    assert result.text == f"# Eve | {T}\nx = 1\n"


def test_current_time_is_used_by_default(tmp_path: Path) -> None:
    f: Path = _file(tmp_path, "app.js", "a\n")

    result: StampResult = api.stamp_file(f, config=make_config(), base_text="")

    assert result.text is not None and result.text.startswith("a // Eve | ")


@pytest.mark.parametrize(
    "name, cfg_overrides",
    [
        ("data.json", {}),
        ("gen/app.js", {"exclude_patterns": ["gen/"]}),
    ],
)
def test_skipped_files_are_left_alone(
    tmp_path: Path, name: str, cfg_overrides: dict[str, Any]
) -> None:
    (tmp_path / "gen").mkdir()
    f: Path = _file(tmp_path, name, "a\n")

    result: StampResult = api.stamp_file(
        f,
        config=make_config(root_dir=tmp_path, **cfg_overrides),
        base_text="",
        timestamp=TS,
        sink=OutputSink.FILE,
    )

    assert result.outcome == Outcome.SKIPPED
    assert result.edits == ()
    assert f.read_text(encoding="utf-8") == "a\n"


def test_missing_file_is_an_error(tmp_path: Path) -> None:
    result: StampResult = api.stamp_file(tmp_path / "nope.js", config=make_config())
    assert result.outcome == Outcome.ERROR
    assert result.messages


def test_version_is_a_string() -> None:
    assert isinstance(api.version(), str)
