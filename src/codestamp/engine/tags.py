# topmark:header:start
#
#   project      : CodeStamp
#   file         : tags.py
#   file_relpath : src/codestamp/engine/tags.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Stamp timestamps, the stamp line parser, and stamp renderers.

Stamp shapes for a style with prefix ``P`` and optional suffix ``S``:

    <indent>P Start <author> | <date>, <time> S     block start
    <indent>P End <author> | <date>, <time> S       block end
    <indent>P <author> | <date>, <time> S           line stamp (above a line)
    <code> P <author> | <date>, <time> S            inline stamp

`TagParser.parse` classifies a line in one regex pass into a `ParsedLine`
variant. Lines that look like a Start/End tag at a glance but do not parse are
reported as `MalformedTag` so callers can treat them as "not found".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache
from typing import TYPE_CHECKING, Final, Union

from codestamp.constants import (
    AUTHOR_SEPARATOR,
    DEFAULT_DATE_FORMAT,
    DEFAULT_TIME_FORMAT,
    END_KEYWORD,
    START_KEYWORD,
    TIMESTAMP_SEPARATOR,
)

if TYPE_CHECKING:
    from codestamp.styles.base import CommentStyle

_RE_INDENT: Final[re.Pattern[str]] = re.compile(r"^\s*")
_RE_KEYWORD: Final[re.Pattern[str]] = re.compile(rf"\b(?:{START_KEYWORD}|{END_KEYWORD})\b")


@dataclass(frozen=True)
class Timestamp:
    """A stamp time captured once per save, kept as a ``date``/``time`` pair.

    Attributes:
        date (str): Formatted calendar date, e.g. ``"30/12/2025"``.
        time (str): Formatted time of day, e.g. ``"21:02:33"``.
    """

    date: str
    time: str

    @property
    def text(self) -> str:
        """Rendered form used in stamps: ``"<date>, <time>"``."""
        if not self.time:
            return self.date
        return f"{self.date}{TIMESTAMP_SEPARATOR}{self.time}"

    def __str__(self) -> str:
        return self.text

    @classmethod
    def now(
        cls,
        *,
        date_format: str = DEFAULT_DATE_FORMAT,
        time_format: str = DEFAULT_TIME_FORMAT,
        moment: datetime | None = None,
    ) -> Timestamp:
        """Capture the current local time (or ``moment``) with the given formats."""
        moment = moment or datetime.now()
        return cls(date=moment.strftime(date_format), time=moment.strftime(time_format))

    @classmethod
    def parse(cls, text: str) -> Timestamp | None:
        """Split a rendered stamp back into its parts.

        The time part is taken after the *last* separator so that date formats
        containing ``", "`` still round-trip. Returns None when the text has no
        separator (stamps written by other tools or older formats).
        """
        date, sep, time = text.strip().rpartition(TIMESTAMP_SEPARATOR)
        if not sep or not date:
            return None
        return cls(date=date.strip(), time=time.strip())

    def same_day(self, stamp_text: str) -> bool:
        """Return True if a recorded stamp was written on this timestamp's date.

        Structured stamps compare their date parts. Unstructured stamps are
        accepted when they start with this date.
        """
        recorded: Timestamp | None = Timestamp.parse(stamp_text)
        if recorded is not None:
            return recorded.date == self.date
        return stamp_text.strip().startswith(self.date)


# --- Parsed line variants -----------------------------------------------------


@dataclass(frozen=True)
class NotATag:
    """The line is code or an unrelated comment."""


@dataclass(frozen=True)
class StartTag:
    """``P Start <author> | <stamp> S``."""

    indent: str
    author: str
    stamp: str


@dataclass(frozen=True)
class EndTag:
    """``P End <author> | <stamp> S``."""

    indent: str
    author: str
    stamp: str


@dataclass(frozen=True)
class LineTag:
    """``P <author> | <stamp> S`` on a line of its own."""

    indent: str
    author: str
    stamp: str


@dataclass(frozen=True)
class MalformedTag:
    """Looks like a Start/End tag but cannot be parsed (no author or separator)."""

    text: str


ParsedLine = Union[NotATag, StartTag, EndTag, LineTag, MalformedTag]

NOT_A_TAG: Final[NotATag] = NotATag()


def leading_whitespace(line: str) -> str:
    """Return the indentation of ``line``."""
    match = _RE_INDENT.match(line)
    return match.group(0) if match else ""


class TagParser:
    """Parse and render stamps for one comment style.

    Use `get_tag_parser` to share compiled instances per style.
    """

    def __init__(self, style: CommentStyle) -> None:
        self.style: CommentStyle = style
        prefix: str = re.escape(style.prefix)
        suffix: str = rf"(?:\s*{re.escape(style.suffix)})?" if style.suffix else ""
        sep: str = re.escape(AUTHOR_SEPARATOR)
        self._re_block: re.Pattern[str] = re.compile(
            rf"^(?P<indent>\s*){prefix}\s+(?P<kw>{START_KEYWORD}|{END_KEYWORD})\s+"
            rf"(?P<author>\S.*?)\s+{sep}\s*(?P<stamp>.*?){suffix}\s*$"
        )
        self._re_line: re.Pattern[str] = re.compile(
            rf"^(?P<indent>\s*){prefix}\s+(?P<author>\S.*?)\s+{sep}\s*(?P<stamp>.*?){suffix}\s*$"
        )

    # ---- Classification -------------------------------------------------------

    def parse(self, line: str) -> ParsedLine:
        """Classify ``line`` as a stamp tag variant or `NOT_A_TAG`."""
        stripped: str = line.strip()
        if not stripped.startswith(self.style.prefix):
            return NOT_A_TAG

        match = self._re_block.match(line)
        if match is not None:
            cls = StartTag if match.group("kw") == START_KEYWORD else EndTag
            return cls(
                indent=match.group("indent"),
                author=match.group("author"),
                stamp=match.group("stamp").strip(),
            )
        if _RE_KEYWORD.search(stripped) and AUTHOR_SEPARATOR in stripped:
            return MalformedTag(text=line)

        match = self._re_line.match(line)
        if match is not None:
            return LineTag(
                indent=match.group("indent"),
                author=match.group("author"),
                stamp=match.group("stamp").strip(),
            )
        return NOT_A_TAG

    def is_tag(self, line: str) -> bool:
        """Return True if ``line`` is any stamp tag (block, line or malformed)."""
        return not isinstance(self.parse(line), NotATag)

    # ---- Inline stamps --------------------------------------------------------

    def stub(self, author: str) -> str:
        """Return the marker that starts an inline stamp by ``author``."""
        return f"{self.style.prefix} {author} {AUTHOR_SEPARATOR}"

    def split_inline_stamp(self, line: str, author: str) -> tuple[str, str] | None:
        """Split ``line`` into ``(code, stamp_tail)`` at the author's first stub.

        Returns None when the line carries no stamp by ``author``. ``code`` has
        trailing whitespace removed; it is empty for a line that is only a stamp.
        """
        index: int = line.find(self.stub(author))
        if index < 0:
            return None
        return line[:index].rstrip(), line[index:]

    def strip_inline_stamp(self, line: str, author: str) -> str:
        """Return ``line`` without the author's inline stamp (unchanged if none)."""
        parts = self.split_inline_stamp(line, author)
        return line if parts is None else parts[0]

    def has_inline_stamp(self, line: str, author: str) -> bool:
        """Return True if ``line`` is code followed by an inline stamp by ``author``."""
        parts = self.split_inline_stamp(line, author)
        return parts is not None and bool(parts[0].strip())

    # ---- Rendering ------------------------------------------------------------

    def _tail(self, author: str, timestamp: Timestamp) -> str:
        return f"{author} {AUTHOR_SEPARATOR} {timestamp.text}{self.style.rendered_suffix}"

    def render_inline(self, code: str, author: str, timestamp: Timestamp) -> str:
        """Render ``code`` followed by an inline stamp."""
        return f"{code} {self.style.prefix} {self._tail(author, timestamp)}"

    def render_line_tag(self, indent: str, author: str, timestamp: Timestamp) -> str:
        """Render a stamp meant to sit on its own line."""
        return f"{indent}{self.style.prefix} {self._tail(author, timestamp)}"

    def render_start(self, indent: str, author: str, timestamp: Timestamp) -> str:
        """Render a block ``Start`` tag."""
        return f"{indent}{self.style.prefix} {START_KEYWORD} {self._tail(author, timestamp)}"

    def render_end(self, indent: str, author: str, timestamp: Timestamp) -> str:
        """Render a block ``End`` tag."""
        return f"{indent}{self.style.prefix} {END_KEYWORD} {self._tail(author, timestamp)}"


@lru_cache(maxsize=32)
def get_tag_parser(style: CommentStyle) -> TagParser:
    """Return the shared `TagParser` for ``style``."""
    return TagParser(style)
