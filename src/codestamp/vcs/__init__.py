# topmark:header:start
#
#   project      : CodeStamp
#   file         : __init__.py
#   file_relpath : src/codestamp/vcs/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Version-control lookups used for revert detection."""

from __future__ import annotations

from codestamp.vcs.git import committed_content

__all__ = ["committed_content"]
