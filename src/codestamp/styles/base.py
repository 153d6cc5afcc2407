# topmark:header:start
#
#   project      : CodeStamp
#   file         : base.py
#   file_relpath : src/codestamp/styles/base.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Comment style and language definitions.

A `CommentStyle` tells the engine how to write a stamp for a language: the
comment introducer, an optional closing suffix for block-comment syntaxes, and
whether single-line stamps must go on their own line above the change.

A `Language` describes how a file is recognized (extensions, exact filenames)
and which comment style it uses. Languages flagged with ``skip_processing`` are
recognized but never stamped (e.g. JSON, which has no comment syntax).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath


@dataclass(frozen=True)
class CommentStyle:
    """How stamps are written for one language family.

    Attributes:
        prefix (str): Comment introducer, e.g. ``"//"``, ``"#"``, ``"<!--"``.
        suffix (str): Closing token for block-comment syntaxes (``"-->"``, ``"*/"``),
            stored without its leading space. Empty for line comments.
        force_above (bool): When True, a single changed line receives a stamp on
            its own line above it instead of an inline trailing stamp. Used for
            languages where trailing comments are unsafe or unidiomatic.
    """

    prefix: str
    suffix: str = ""
    force_above: bool = False

    def __post_init__(self) -> None:
        if not self.prefix.strip():
            raise ValueError("CommentStyle.prefix must not be empty")

    @property
    def rendered_suffix(self) -> str:
        """Return the suffix as appended to a stamp (with a leading space), or ``""``."""
        return f" {self.suffix}" if self.suffix else ""


POUND = CommentStyle(prefix="#", force_above=True)
SLASH = CommentStyle(prefix="//")
XML = CommentStyle(prefix="<!--", suffix="-->")
CBLOCK = CommentStyle(prefix="/*", suffix="*/")
REM = CommentStyle(prefix="REM")


@dataclass(frozen=True)
class Language:
    """A language recognized by CodeStamp.

    Attributes:
        name (str): Language identifier, aligned with editor language ids
            (e.g. ``"python"``, ``"shellscript"``).
        extensions (tuple[str, ...]): Filename extensions including the leading dot.
        filenames (tuple[str, ...]): Exact basenames (e.g. ``"Makefile"``).
        description (str): Human-readable description.
        style (CommentStyle): Comment style used for stamps.
        skip_processing (bool): Recognize the file but never stamp it.
    """

    name: str
    extensions: tuple[str, ...] = ()
    filenames: tuple[str, ...] = ()
    description: str = ""
    style: CommentStyle = field(default=SLASH)
    skip_processing: bool = False

    def matches(self, path: PurePath) -> bool:
        """Return True if ``path`` belongs to this language by name or extension."""
        if path.name in self.filenames:
            return True
        # Dotfiles such as ".env" have no suffix; match them by full name too
        return any(path.name.endswith(ext) for ext in self.extensions)
