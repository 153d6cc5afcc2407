# topmark:header:start
#
#   project      : CodeStamp
#   file         : keys.py
#   file_relpath : src/codestamp/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Canonical TOML section and key names for CodeStamp configuration.

These names are the external configuration schema as it appears in
``codestamp.toml`` and in ``[tool.codestamp]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by CodeStamp configuration."""

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # Top-level keys
    KEY_AUTHOR_NAME: Final[str] = "author_name"
    KEY_DATE_FORMAT: Final[str] = "date_format"
    KEY_TIME_FORMAT: Final[str] = "time_format"
    KEY_MERGE_THRESHOLD: Final[str] = "merge_threshold"
    KEY_REVERT_DETECTION: Final[str] = "revert_detection"
    KEY_VCS_TIMEOUT: Final[str] = "vcs_timeout"
    KEY_EXCLUDE: Final[str] = "exclude"

    # [languages]: extension or file name -> language id
    SECTION_LANGUAGES: Final[str] = "languages"
