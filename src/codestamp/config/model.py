# topmark:header:start
#
#   project      : CodeStamp
#   file         : model.py
#   file_relpath : src/codestamp/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Configuration model: immutable `Config` and its `MutableConfig` builder.

Layered merging, lowest to highest precedence:

1. Built-in defaults (``MutableConfig.from_defaults``)
2. User config (``$XDG_CONFIG_HOME/codestamp/codestamp.toml``)
3. Project configs discovered upward from the target file, root-most first;
   within a directory ``pyproject.toml`` (``[tool.codestamp]``) merges before
   ``codestamp.toml``. A file with ``root = true`` stops the upward walk.
4. Explicit ``--config`` files, then CLI overrides (``apply_cli_args``).

Every field of `MutableConfig` is optional; ``None`` means "inherit from the
layer below". `MutableConfig.freeze` fills the remaining gaps with defaults.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from codestamp.config.io import (
    ConfigError,
    TomlTable,
    get_bool_value_or_none,
    get_float_value_or_none,
    get_int_value_or_none,
    get_list_value,
    get_string_value_or_none,
    get_table_value,
    load_toml_dict,
    update_toml_file,
)
from codestamp.config.keys import Toml
from codestamp.config.logging import CodestampLogger, get_logger
from codestamp.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_AUTHOR_NAME,
    DEFAULT_DATE_FORMAT,
    DEFAULT_EXCLUDE_PATTERNS,
    DEFAULT_MERGE_THRESHOLD,
    DEFAULT_TIME_FORMAT,
    DEFAULT_VCS_TIMEOUT,
    PYPROJECT_FILE_NAME,
    PYPROJECT_TOOL_SECTION,
)

# ArgsLike: generic mapping accepted by config loaders (CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: CodestampLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration for one stamping run.

    Attributes:
        author_name (str): Name written into stamps.
        date_format (str): strftime format of the date part of a stamp.
        time_format (str): strftime format of the time part of a stamp.
        merge_threshold (int): Inline stamp run length above which the run is
            folded into a block.
        revert_detection (bool): Compare against committed content and undo
            stamp-only differences.
        vcs_timeout (float): Seconds to wait for the version-control lookup.
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns of files
            that are never stamped.
        languages (Mapping[str, str]): Extra ``extension -> language id``
            associations.
        root_dir (Path | None): Directory exclude patterns are relative to
            (nearest project config, else the working directory).
        config_files (tuple[Path | str, ...]): Config sources that were merged.
    """

    author_name: str
    date_format: str
    time_format: str
    merge_threshold: int
    revert_detection: bool
    vcs_timeout: float
    exclude_patterns: tuple[str, ...]
    languages: Mapping[str, str]
    root_dir: Path | None
    config_files: tuple[Path | str, ...]

    def is_excluded(self, path: Path) -> bool:
        """Return True if ``path`` matches one of the exclude patterns."""
        if not self.exclude_patterns:
            return False
        spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, self.exclude_patterns)
        base: Path = self.root_dir or Path.cwd()
        try:
            candidate: str = path.resolve().relative_to(base.resolve()).as_posix()
        except ValueError:
            candidate = path.name
        excluded: bool = spec.match_file(candidate)
        logger.trace("Exclude check %s (as %s): %s", path, candidate, excluded)
        return excluded

    def to_toml_dict(self) -> TomlTable:
        """Convert this Config into a TOML-serializable dict (for display)."""
        return {
            Toml.KEY_AUTHOR_NAME: self.author_name,
            Toml.KEY_DATE_FORMAT: self.date_format,
            Toml.KEY_TIME_FORMAT: self.time_format,
            Toml.KEY_MERGE_THRESHOLD: self.merge_threshold,
            Toml.KEY_REVERT_DETECTION: self.revert_detection,
            Toml.KEY_VCS_TIMEOUT: self.vcs_timeout,
            Toml.KEY_EXCLUDE: list(self.exclude_patterns),
            Toml.SECTION_LANGUAGES: dict(self.languages),
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            author_name=self.author_name,
            date_format=self.date_format,
            time_format=self.time_format,
            merge_threshold=self.merge_threshold,
            revert_detection=self.revert_detection,
            vcs_timeout=self.vcs_timeout,
            exclude_patterns=list(self.exclude_patterns),
            languages=dict(self.languages),
            root_dir=self.root_dir,
            config_files=list(self.config_files),
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration draft used during discovery and merging.

    Scalars are ``None`` when a layer does not set them. Lists and tables
    accumulate: ``exclude_patterns`` are appended and ``languages`` entries are
    overridden key by key.
    """

    author_name: str | None = None
    date_format: str | None = None
    time_format: str | None = None
    merge_threshold: int | None = None
    revert_detection: bool | None = None
    vcs_timeout: float | None = None
    exclude_patterns: list[str] = field(default_factory=lambda: [])
    languages: dict[str, str] = field(default_factory=lambda: {})
    root_dir: Path | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this draft into an immutable Config, filling gaps with defaults.

        Raises:
            ConfigError: If a value is out of range.
        """
        merge_threshold: int = (
            DEFAULT_MERGE_THRESHOLD if self.merge_threshold is None else self.merge_threshold
        )
        if merge_threshold < 1:
            raise ConfigError(f"merge_threshold must be at least 1 (got {merge_threshold})")
        vcs_timeout: float = DEFAULT_VCS_TIMEOUT if self.vcs_timeout is None else self.vcs_timeout
        if vcs_timeout <= 0:
            raise ConfigError(f"vcs_timeout must be positive (got {vcs_timeout})")
        author_name: str = (self.author_name or "").strip() or DEFAULT_AUTHOR_NAME

        return Config(
            author_name=author_name,
            date_format=self.date_format or DEFAULT_DATE_FORMAT,
            time_format=self.time_format or DEFAULT_TIME_FORMAT,
            merge_threshold=merge_threshold,
            revert_detection=True if self.revert_detection is None else self.revert_detection,
            vcs_timeout=vcs_timeout,
            exclude_patterns=tuple(dict.fromkeys(self.exclude_patterns)),
            languages=dict(self.languages),
            root_dir=self.root_dir,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft holding the built-in defaults."""
        return cls(
            author_name=DEFAULT_AUTHOR_NAME,
            date_format=DEFAULT_DATE_FORMAT,
            time_format=DEFAULT_TIME_FORMAT,
            merge_threshold=DEFAULT_MERGE_THRESHOLD,
            revert_detection=True,
            vcs_timeout=DEFAULT_VCS_TIMEOUT,
            exclude_patterns=list(DEFAULT_EXCLUDE_PATTERNS),
            config_files=["<defaults>"],
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft from a parsed CodeStamp table.

        Args:
            data (TomlTable): Contents of ``codestamp.toml`` or ``[tool.codestamp]``.
            config_file (Path | None): Source file, recorded for provenance.

        Returns:
            MutableConfig: The resulting draft.
        """
        draft: MutableConfig = cls(
            author_name=get_string_value_or_none(data, Toml.KEY_AUTHOR_NAME),
            date_format=get_string_value_or_none(data, Toml.KEY_DATE_FORMAT),
            time_format=get_string_value_or_none(data, Toml.KEY_TIME_FORMAT),
            merge_threshold=get_int_value_or_none(data, Toml.KEY_MERGE_THRESHOLD),
            revert_detection=get_bool_value_or_none(data, Toml.KEY_REVERT_DETECTION),
            vcs_timeout=get_float_value_or_none(data, Toml.KEY_VCS_TIMEOUT),
        )

        for pattern in get_list_value(data, Toml.KEY_EXCLUDE):
            if isinstance(pattern, str) and pattern.strip():
                draft.exclude_patterns.append(pattern.strip())
            else:
                logger.warning("Ignoring invalid exclude pattern: %r", pattern)

        for ext, language_id in get_table_value(data, Toml.SECTION_LANGUAGES).items():
            if isinstance(language_id, str):
                draft.languages[str(ext)] = language_id
            else:
                logger.warning("Ignoring non-string language id for '%s': %r", ext, language_id)

        if config_file is not None:
            draft.config_files = [config_file]
        logger.trace("Parsed config draft: %s", draft)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path, *, strict: bool = False) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``codestamp.toml`` and ``pyproject.toml`` (``[tool.codestamp]``).

        Args:
            path (Path): Path to the TOML file.
            strict (bool): Raise `ConfigError` on unreadable or invalid files.

        Returns:
            MutableConfig | None: The draft, or None if a ``pyproject.toml`` has
                no CodeStamp section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable = load_toml_dict(path, strict=strict)
        if path.name == PYPROJECT_FILE_NAME:
            data = get_table_value(get_table_value(data, "tool"), PYPROJECT_TOOL_SECTION)
            if not data:
                logger.debug("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
                return None
        return cls.from_toml_dict(data, config_file=path)

    @staticmethod
    def _declares_root(path: Path) -> bool:
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_FILE_NAME:
            data = get_table_value(get_table_value(data, "tool"), PYPROJECT_TOOL_SECTION)
        return bool(get_bool_value_or_none(data, Toml.KEY_ROOT))

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return project config files found by walking upward from ``start``.

        Args:
            start (Path): File or directory where discovery starts.

        Returns:
            list[Path]: Config files ordered root-most first, nearest last; within
            a directory ``pyproject.toml`` precedes ``codestamp.toml``.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file() or not cur.exists():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []
            for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME):
                p: Path = cur / name
                if p.is_file():
                    dir_entries.append(p)
                    logger.debug("Discovered config file: %s", p)
                    if cls._declares_root(p):
                        root_stop_here = True
            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def user_config_path(cls) -> Path:
        """Return the user config location (whether or not it exists)."""
        xdg: str | None = os.environ.get("XDG_CONFIG_HOME")
        base: Path = Path(xdg) if xdg else Path.home() / ".config"
        return base / "codestamp" / CONFIG_FILE_NAME

    @classmethod
    def discover_user_config_file(cls) -> Path | None:
        """Return the user config file if it exists."""
        path: Path = cls.user_config_path()
        return path if path.is_file() else None

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            anchor (Path | None): File or directory discovery starts from (CWD if None).
            extra_config_files (Iterable[Path] | None): Explicit files merged last,
                loaded strictly.
            no_config (bool): Skip user and project discovery.

        Returns:
            MutableConfig: A draft ready to receive CLI overrides and be frozen.

        Raises:
            ConfigError: If an explicit config file is unreadable or invalid.
        """
        draft: MutableConfig = cls.from_defaults()
        start: Path = anchor or Path.cwd()

        if not no_config:
            user_cfg_path: Path | None = cls.discover_user_config_file()
            if user_cfg_path is not None:
                user_cfg: MutableConfig | None = cls.from_toml_file(user_cfg_path)
                if user_cfg is not None:
                    draft = draft.merge_with(user_cfg)

            for cfg_path in cls.discover_local_config_files(start):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)
                    draft.root_dir = cfg_path.parent.resolve()

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra), strict=True)
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""

        def pick(mine: Any, theirs: Any) -> Any:
            return mine if theirs is None else theirs

        return MutableConfig(
            author_name=pick(self.author_name, other.author_name),
            date_format=pick(self.date_format, other.date_format),
            time_format=pick(self.time_format, other.time_format),
            merge_threshold=pick(self.merge_threshold, other.merge_threshold),
            revert_detection=pick(self.revert_detection, other.revert_detection),
            vcs_timeout=pick(self.vcs_timeout, other.vcs_timeout),
            exclude_patterns=[*self.exclude_patterns, *other.exclude_patterns],
            languages={**self.languages, **other.languages},
            root_dir=pick(self.root_dir, other.root_dir),
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI (or API) overrides in place and return ``self``.

        Recognized keys: ``author``, ``revert_detection``, ``merge_threshold``,
        ``exclude`` and ``language_map``. ``None`` values are ignored.
        """
        if args.get("author") is not None:
            self.author_name = str(args["author"])
        if args.get("revert_detection") is not None:
            self.revert_detection = bool(args["revert_detection"])
        if args.get("merge_threshold") is not None:
            self.merge_threshold = int(args["merge_threshold"])
        for pattern in args.get("exclude") or ():
            self.exclude_patterns.append(pattern)
        self.languages.update(args.get("language_map") or {})
        self.config_files.append("<CLI overrides>")
        return self


def save_author_name(name: str, *, path: Path | None = None) -> Path:
    """Persist the author name into the user config file.

    Args:
        name (str): Author name to store; surrounding whitespace is dropped.
        path (Path | None): Target file (defaults to the user config path).

    Returns:
        Path: The file that was written.

    Raises:
        ConfigError: If the name is empty or the file cannot be updated.
    """
    author: str = name.strip()
    if not author:
        raise ConfigError("Author name must not be empty")
    target: Path = path or MutableConfig.user_config_path()
    section: tuple[str, ...] = (
        ("tool", PYPROJECT_TOOL_SECTION) if target.name == PYPROJECT_FILE_NAME else ()
    )
    update_toml_file(target, {Toml.KEY_AUTHOR_NAME: author}, section=section)
    return target
