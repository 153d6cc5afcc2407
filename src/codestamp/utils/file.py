# topmark:header:start
#
#   project      : CodeStamp
#   file         : file.py
#   file_relpath : src/codestamp/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""File helpers: UTF-8 reads and atomic writes."""

from __future__ import annotations

import os
import tempfile
from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from codestamp.config.logging import CodestampLogger

logger: CodestampLogger = get_logger(__name__)


def read_text(path: Path) -> str:
    """Read ``path`` as UTF-8 without translating newlines.

    Newlines are kept as they are on disk so a CRLF file stays CRLF when it
    is written back.

    Args:
        path (Path): File to read.

    Returns:
        str: The decoded file content.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def write_text_atomic(path: Path, text: str) -> int:
    """Replace the content of ``path`` with ``text`` atomically.

    The text goes to a temporary file in the same directory which is then
    renamed over ``path``; the original file mode is kept.

    Args:
        path (Path): Destination file; its directory must exist.
        text (str): New content, encoded as UTF-8.

    Returns:
        int: Number of UTF-8 bytes written.

    Raises:
        OSError: If the temporary file cannot be written or renamed.
    """
    data: bytes = text.encode("utf-8")
    fd, tmp_path = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        if path.exists():
            os.chmod(tmp_path, path.stat().st_mode & 0o7777)
        os.replace(tmp_path, path)
    except OSError:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return len(data)
