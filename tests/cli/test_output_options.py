# topmark:header:start
#
#   project      : CodeStamp
#   file         : test_output_options.py
#   file_relpath : tests/cli/test_output_options.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Verbosity and color resolution for the CLI group options."""

from __future__ import annotations

import io
import logging

import pytest

from codestamp.cli.console import ClickConsole
from codestamp.cli.errors import CodestampUsageError
from codestamp.cli.options import color_enabled, resolve_verbosity
from codestamp.config.logging import TRACE_LEVEL
from codestamp.pipeline.status import WriteStatus


class _Tty(io.StringIO):
    def isatty(self) -> bool:
        return True


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (7, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
        (0, 2, logging.ERROR),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    assert resolve_verbosity(verbose, quiet) == expected


def test_verbose_and_quiet_together_are_rejected() -> None:
    with pytest.raises(CodestampUsageError):
        resolve_verbosity(1, 1)


def test_explicit_color_mode_wins_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert color_enabled("always", stream=io.StringIO())
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert not color_enabled("never", stream=_Tty())
    assert not color_enabled("always", no_color=True, stream=_Tty())


def test_auto_mode_follows_environment_then_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert color_enabled(None, stream=_Tty())
    assert not color_enabled("auto", stream=io.StringIO())

    monkeypatch.setenv("NO_COLOR", "")
    assert not color_enabled(None, stream=_Tty())

    monkeypatch.setenv("FORCE_COLOR", "1")
    assert color_enabled(None, stream=io.StringIO())

    monkeypatch.setenv("FORCE_COLOR", "0")
    assert not color_enabled(None, stream=_Tty())


def test_console_colorize_uses_the_styler_only_with_color() -> None:
    def shout(*args: object, sep: str = " ") -> str:
        return sep.join(str(a) for a in args).upper()

    assert ClickConsole(enable_color=True).colorize(shout, "written") == "WRITTEN"
    assert ClickConsole(enable_color=False).colorize(shout, "written") == "written"


def test_status_members_are_plain_strings_with_a_colorizer() -> None:
    assert WriteStatus.WRITTEN == "written"
    assert WriteStatus.WRITTEN.value == "written"
    assert WriteStatus("written") is WriteStatus.WRITTEN
    assert "written" in WriteStatus.WRITTEN.color("written")
