# topmark:header:start
#
#   project      : CodeStamp
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Pytest configuration for the CodeStamp test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `codestamp.config.MutableConfig` (mutable), then
      `freeze()` into a `codestamp.config.Config` for **public API** calls
      (``codestamp.api.stamp_file``).
    - Do **not** mutate a frozen `Config`. If you need to tweak one, call
      `Config.thaw()`, edit the returned `MutableConfig`, then `freeze()` again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from codestamp.config import MutableConfig, logging
from codestamp.engine.tags import Timestamp

if TYPE_CHECKING:
    from pathlib import Path

    from codestamp.config import Config

#: Fixed stamp time used by engine and API tests.
TS: Timestamp = Timestamp("01/01/2025", "10:00:00")

#: Author used by engine and API tests.
AUTHOR: str = "Eve"


@pytest.fixture(autouse=True)
def silence_codestamp_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure CodeStamp's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to
            manipulate environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@pytest.fixture(autouse=True)
def isolate_user_config(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Point the user config location at an empty temporary directory.

    Keeps the developer's own ``~/.config/codestamp/codestamp.toml`` out of
    every test run.

    Returns:
        Path: The directory used as ``$XDG_CONFIG_HOME``.
    """
    xdg: Path = tmp_path_factory.mktemp("xdg")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    return xdg


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated temporary project directory.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The temporary project root, which is also the working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Attribute overrides applied to the mutable builder
            before freezing (e.g. ``author_name="Eve"``).

    Returns:
        Config: An immutable configuration snapshot for use in tests.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    m.author_name = AUTHOR
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()
