# topmark:header:start
#
#   project      : CodeStamp
#   file         : test_file_io.py
#   file_relpath : tests/utils/test_file_io.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""File helpers: newline-preserving reads and atomic writes."""

from __future__ import annotations

import os
import stat
from typing import TYPE_CHECKING

import pytest

from codestamp.utils.file import read_text, write_text_atomic

if TYPE_CHECKING:
    from pathlib import Path


def test_read_text_keeps_crlf(tmp_path: Path) -> None:
    f: Path = tmp_path / "a.txt"
    f.write_bytes(b"one\r\ntwo\r\n")
    assert read_text(f) == "one\r\ntwo\r\n"


def test_read_text_rejects_invalid_utf8(tmp_path: Path) -> None:
    f: Path = tmp_path / "bin.dat"
    f.write_bytes(b"\xff\xfe\x00")
    with pytest.raises(UnicodeDecodeError):
        read_text(f)


def test_write_text_atomic_replaces_content_and_keeps_mode(tmp_path: Path) -> None:
    f: Path = tmp_path / "run.sh"
    f.write_text("old\n", encoding="utf-8")
    os.chmod(f, 0o755)

    written: int = write_text_atomic(f, "né\n")

    assert written == len("né\n".encode())
    assert f.read_bytes() == "né\n".encode()
    assert stat.S_IMODE(f.stat().st_mode) == 0o755
    assert sorted(p.name for p in tmp_path.iterdir()) == ["run.sh"]


def test_write_text_atomic_creates_new_file(tmp_path: Path) -> None:
    f: Path = tmp_path / "new.txt"
    write_text_atomic(f, "x")
    assert f.read_text(encoding="utf-8") == "x"


def test_write_text_atomic_fails_for_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        write_text_atomic(tmp_path / "missing" / "x.txt", "x")
