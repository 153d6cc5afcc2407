# topmark:header:start
#
#   project      : CodeStamp
#   file         : constants.py
#   file_relpath : src/codestamp/constants.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""CodeStamp Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

CODESTAMP_VERSION: str = get_version("codestamp")

# Keywords of block stamp tags: "<prefix> Start <author> | <timestamp> <suffix>"
START_KEYWORD: str = "Start"
END_KEYWORD: str = "End"
AUTHOR_SEPARATOR: str = "|"

# Separator between the date and time parts of a rendered timestamp
TIMESTAMP_SEPARATOR: str = ", "

DEFAULT_AUTHOR_NAME: str = "User"
DEFAULT_DATE_FORMAT: str = "%d/%m/%Y"
DEFAULT_TIME_FORMAT: str = "%H:%M:%S"

# A run of inline stamps longer than this is folded into a Start/End block
DEFAULT_MERGE_THRESHOLD: int = 3

# Seconds to wait for `git show` before giving up on revert detection
DEFAULT_VCS_TIMEOUT: float = 2.0

# Gitignore-style patterns of files that are never stamped
DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = ()

CONFIG_FILE_NAME: str = "codestamp.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "codestamp"

VALUE_NOT_SET: str = "<not set>"
