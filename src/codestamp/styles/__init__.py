# topmark:header:start
#
#   project      : CodeStamp
#   file         : __init__.py
#   file_relpath : src/codestamp/styles/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Comment styles and language detection."""

from __future__ import annotations

from codestamp.styles.base import CBLOCK, POUND, REM, SLASH, XML, CommentStyle, Language
from codestamp.styles.registry import (
    PLAINTEXT,
    detect_language,
    get_language_registry,
    is_stampable,
    resolve_comment_style,
)

__all__ = [
    "CBLOCK",
    "POUND",
    "PLAINTEXT",
    "REM",
    "SLASH",
    "XML",
    "CommentStyle",
    "Language",
    "detect_language",
    "get_language_registry",
    "is_stampable",
    "resolve_comment_style",
]
