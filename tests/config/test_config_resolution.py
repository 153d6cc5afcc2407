# topmark:header:start
#
#   project      : CodeStamp
#   file         : test_config_resolution.py
#   file_relpath : tests/config/test_config_resolution.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Tests for layered configuration: defaults, user, project, explicit and CLI."""

from __future__ import annotations

from pathlib import Path

import pytest

from codestamp.config import Config, ConfigError, MutableConfig, save_author_name
from codestamp.config.io import load_toml_dict
from codestamp.constants import DEFAULT_AUTHOR_NAME, DEFAULT_MERGE_THRESHOLD


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_freeze_to_documented_values() -> None:
    cfg: Config = MutableConfig.from_defaults().freeze()
    assert cfg.author_name == DEFAULT_AUTHOR_NAME
    assert cfg.merge_threshold == DEFAULT_MERGE_THRESHOLD
    assert cfg.revert_detection is True
    assert cfg.exclude_patterns == ()


def test_empty_draft_freezes_with_defaults() -> None:
    cfg: Config = MutableConfig(author_name="   ").freeze()
    assert cfg.author_name == DEFAULT_AUTHOR_NAME
    assert cfg.date_format == "%d/%m/%Y"


@pytest.mark.parametrize("field, value", [("merge_threshold", 0), ("vcs_timeout", 0.0)])
def test_freeze_rejects_out_of_range_values(field: str, value: float) -> None:
    draft: MutableConfig = MutableConfig.from_defaults()
    setattr(draft, field, value)
    with pytest.raises(ConfigError):
        draft.freeze()


def test_thaw_then_freeze_is_identity() -> None:
    cfg: Config = MutableConfig(author_name="Eve", languages={".tpl": "html"}).freeze()
    assert cfg.thaw().freeze() == cfg


def test_from_toml_dict_skips_invalid_entries() -> None:
    draft: MutableConfig = MutableConfig.from_toml_dict(
        {
            "author_name": "Eve",
            "merge_threshold": "three",
            "exclude": ["build/", "", 42],
            "languages": {".tpl": "html", ".bad": 1},
        }
    )
    assert draft.author_name == "Eve"
    assert draft.merge_threshold is None
    assert draft.exclude_patterns == ["build/"]
    assert draft.languages == {".tpl": "html"}


def test_project_configs_merge_root_most_first(tmp_path: Path) -> None:
    root: Path = tmp_path / "repo"
    _write(root / "codestamp.toml", 'root = true\nauthor_name = "Outer"\nmerge_threshold = 2\n')
    _write(root / "pkg" / "pyproject.toml", "[tool.codestamp]\nmerge_threshold = 5\n")
    _write(root / "pkg" / "codestamp.toml", "exclude = ['gen/']\n")

    draft: MutableConfig = MutableConfig.load_merged(anchor=root / "pkg" / "mod.py")
    cfg: Config = draft.freeze()

    assert cfg.author_name == "Outer"
    assert cfg.merge_threshold == 5
    assert cfg.exclude_patterns == ("gen/",)
    assert cfg.root_dir == (root / "pkg").resolve()
    sources: list[str] = [Path(p).name for p in cfg.config_files if isinstance(p, Path)]
    assert sources == ["codestamp.toml", "pyproject.toml", "codestamp.toml"]


def test_root_true_stops_upward_discovery(tmp_path: Path) -> None:
    _write(tmp_path / "outer" / "codestamp.toml", 'root = true\nauthor_name = "Outer"\n')
    _write(tmp_path / "outer" / "inner" / "codestamp.toml", "root = true\nmerge_threshold = 7\n")

    found: list[Path] = MutableConfig.discover_local_config_files(tmp_path / "outer" / "inner")
    assert found == [(tmp_path / "outer" / "inner" / "codestamp.toml").resolve()]

    cfg: Config = MutableConfig.load_merged(anchor=tmp_path / "outer" / "inner").freeze()
    assert cfg.author_name == DEFAULT_AUTHOR_NAME
    assert cfg.merge_threshold == 7


def test_pyproject_without_section_is_ignored(tmp_path: Path) -> None:
    f: Path = _write(tmp_path / "pyproject.toml", '[project]\nname = "demo"\n')
    assert MutableConfig.from_toml_file(f) is None


def test_user_config_is_overridden_by_project(tmp_path: Path, isolate_user_config: Path) -> None:
    _write(isolate_user_config / "codestamp" / "codestamp.toml", 'author_name = "Home"\n')
    _write(tmp_path / "a" / "codestamp.toml", "root = true\nmerge_threshold = 6\n")
    _write(tmp_path / "b" / "codestamp.toml", 'root = true\nauthor_name = "Project"\n')

    cfg_a: Config = MutableConfig.load_merged(anchor=tmp_path / "a" / "x.py").freeze()
    cfg_b: Config = MutableConfig.load_merged(anchor=tmp_path / "b" / "x.py").freeze()

    assert (cfg_a.author_name, cfg_a.merge_threshold) == ("Home", 6)
    assert cfg_b.author_name == "Project"


def test_no_config_ignores_discovered_files(tmp_path: Path, isolate_user_config: Path) -> None:
    _write(isolate_user_config / "codestamp" / "codestamp.toml", 'author_name = "Home"\n')
    _write(tmp_path / "codestamp.toml", "root = true\nmerge_threshold = 6\n")

    cfg: Config = MutableConfig.load_merged(anchor=tmp_path, no_config=True).freeze()
    assert cfg.author_name == DEFAULT_AUTHOR_NAME
    assert cfg.merge_threshold == DEFAULT_MERGE_THRESHOLD


def test_explicit_config_files_are_strict(tmp_path: Path) -> None:
    good: Path = _write(tmp_path / "extra.toml", "revert_detection = false\n")
    bad: Path = _write(tmp_path / "bad.toml", "revert_detection = \n")

    cfg: Config = MutableConfig.load_merged(
        anchor=tmp_path, extra_config_files=[good], no_config=True
    ).freeze()
    assert cfg.revert_detection is False

    with pytest.raises(ConfigError):
        MutableConfig.load_merged(anchor=tmp_path, extra_config_files=[bad], no_config=True)


def test_cli_args_apply_last() -> None:
    draft: MutableConfig = MutableConfig.from_toml_dict({"author_name": "Eve", "exclude": ["a/"]})
    draft.apply_cli_args(
        {
            "author": "Bob",
            "revert_detection": False,
            "merge_threshold": None,
            "exclude": ["b/"],
            "language_map": {".tpl": "html"},
        }
    )
    cfg: Config = draft.freeze()
    assert cfg.author_name == "Bob"
    assert cfg.revert_detection is False
    assert cfg.merge_threshold == DEFAULT_MERGE_THRESHOLD
    assert cfg.exclude_patterns == ("a/", "b/")
    assert cfg.languages == {".tpl": "html"}


def test_exclude_patterns_match_relative_to_root_dir(tmp_path: Path) -> None:
    cfg: Config = MutableConfig(
        exclude_patterns=["generated/", "*.min.js"],
        root_dir=tmp_path,
    ).freeze()
    assert cfg.is_excluded(tmp_path / "generated" / "api.py")
    assert cfg.is_excluded(tmp_path / "web" / "app.min.js")
    assert not cfg.is_excluded(tmp_path / "src" / "api.py")


def test_save_author_name_defaults_to_user_config(isolate_user_config: Path) -> None:
    written: Path = save_author_name("  Ada Lovelace  ")
    assert written == isolate_user_config / "codestamp" / "codestamp.toml"
    assert load_toml_dict(written) == {"author_name": "Ada Lovelace"}
    assert MutableConfig.load_merged(anchor=written.parent).freeze().author_name == "Ada Lovelace"


def test_save_author_name_into_pyproject(tmp_path: Path) -> None:
    target: Path = _write(tmp_path / "pyproject.toml", '[project]\nname = "demo"\n')
    save_author_name("Eve", path=target)
    assert load_toml_dict(target)["tool"]["codestamp"] == {"author_name": "Eve"}


def test_save_author_name_rejects_blank() -> None:
    with pytest.raises(ConfigError):
        save_author_name("   ")
