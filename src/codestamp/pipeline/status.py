# topmark:header:start
#
#   project      : CodeStamp
#   file         : status.py
#   file_relpath : src/codestamp/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Status enums for each axis of the stamping pipeline.

Each step writes only its own axis. Values are human-readable strings used by
the CLI; compare members with ``==``.
"""

from __future__ import annotations

from yachalk import chalk

from codestamp.utils.colored_enum import ColoredStrEnum


class ResolveStatus(ColoredStrEnum):
    """Language and comment style resolution."""

    PENDING = ("resolve pending", chalk.gray)
    RESOLVED = ("resolved", chalk.green)
    EXCLUDED = ("excluded by configuration", chalk.yellow)
    UNSUPPORTED = ("language has no comment syntax", chalk.yellow)


class ReadStatus(ColoredStrEnum):
    """Reading the buffer (file on disk or supplied text)."""

    PENDING = ("read pending", chalk.gray)
    OK = ("ok", chalk.green)
    NOT_FOUND = ("not found", chalk.red)
    UNREADABLE = ("read error", chalk.red_bright)
    UNICODE_DECODE_ERROR = ("Unicode decode error", chalk.yellow)


class SnapshotStatus(ColoredStrEnum):
    """Loading the last-saved snapshot the buffer is diffed against."""

    PENDING = ("snapshot pending", chalk.gray)
    LOADED = ("snapshot loaded", chalk.green)
    EMPTY = ("no snapshot, everything is new", chalk.blue)
    UNREADABLE = ("snapshot unreadable", chalk.red_bright)


class VcsStatus(ColoredStrEnum):
    """Committed-content lookup for revert detection."""

    PENDING = ("lookup pending", chalk.gray)
    FOUND = ("committed content found", chalk.green)
    UNAVAILABLE = ("no committed content", chalk.blue)
    DISABLED = ("revert detection disabled", chalk.gray)


class StampStatus(ColoredStrEnum):
    """Computing and applying stamp edits."""

    PENDING = ("stamping pending", chalk.gray)
    STAMPED = ("stamps updated", chalk.green_bright)
    UNCHANGED = ("no changes", chalk.green)
    STALE = ("buffer changed while stamping", chalk.yellow)
    FAILED = ("stamping failed", chalk.red_bright)


class WriteStatus(ColoredStrEnum):
    """Writing the stamped buffer to its sink."""

    PENDING = ("write pending", chalk.gray)
    WRITTEN = ("written", chalk.green)
    PREVIEWED = ("would change", chalk.yellow)
    SKIPPED = ("write skipped", chalk.gray)
    FAILED = ("write failed", chalk.red_bright)
