# topmark:header:start
#
#   project      : CodeStamp
#   file         : config_resolver.py
#   file_relpath : src/codestamp/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Resolve the CodeStamp configuration from Click parameters.

Resolution order (lowest → highest precedence):
  1. Built-in defaults.
  2. User config: ``$XDG_CONFIG_HOME/codestamp/codestamp.toml``
     (or ``~/.config/codestamp/codestamp.toml``).
  3. Project configs discovered upward from the anchor (root-most first),
     unless ``--no-config`` is set. In each directory ``pyproject.toml``
     (``[tool.codestamp]``) is merged before ``codestamp.toml``; a file that sets
     ``root = true`` stops the walk.
  4. Explicit ``--config`` files, merged in order.
  5. CLI overrides, applied last.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from codestamp.cli.errors import CodestampConfigError
from codestamp.config import ConfigError, MutableConfig
from codestamp.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from codestamp.config import Config
    from codestamp.config.logging import CodestampLogger

logger: CodestampLogger = get_logger(__name__)


def resolve_config_from_click(
    *,
    anchor: Path | None,
    no_config: bool,
    config_paths: Sequence[str],
    author: str | None = None,
    revert_detection: bool | None = None,
    merge_threshold: int | None = None,
    exclude: Sequence[str] = (),
) -> Config:
    """Build a frozen `Config` from Click parameters.

    Args:
        anchor (Path | None): File or directory config discovery starts from
            (the current working directory when None).
        no_config (bool): If True, ignore user and project config files.
        config_paths (Sequence[str]): Extra config TOML files to merge.
        author (str | None): ``--author`` override.
        revert_detection (bool | None): ``False`` for ``--no-revert-detection``.
        merge_threshold (int | None): ``--merge-threshold`` override.
        exclude (Sequence[str]): ``--exclude`` patterns, appended to configured ones.

    Returns:
        Config: The frozen configuration.

    Raises:
        CodestampConfigError: If an explicit config file is invalid or a value
            is out of range.
    """
    args: dict[str, Any] = {
        "author": author,
        "revert_detection": revert_detection,
        "merge_threshold": merge_threshold,
        "exclude": list(exclude),
    }
    logger.trace("CLI overrides: %s", args)
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            anchor=anchor,
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
        draft = draft.apply_cli_args(args)
        config: Config = draft.freeze()
    except ConfigError as e:
        raise CodestampConfigError(str(e)) from e
    logger.debug("Effective config sources: %s", [str(f) for f in config.config_files])
    return config
