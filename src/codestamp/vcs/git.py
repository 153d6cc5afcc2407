# topmark:header:start
#
#   project      : CodeStamp
#   file         : git.py
#   file_relpath : src/codestamp/vcs/git.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Last-committed file content from git.

`committed_content` runs ``git show HEAD:./<name>`` from the file's directory,
so git resolves the repository and the relative path itself and only one
process is spawned per save. Every failure (no repository, untracked file,
missing git binary, timeout, undecodable output) yields ``None``: revert
detection is then skipped and the save proceeds.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from codestamp.config.logging import CodestampLogger, get_logger
from codestamp.constants import DEFAULT_VCS_TIMEOUT

logger: CodestampLogger = get_logger(__name__)

GIT_EXECUTABLE: str = "git"


def committed_content(
    path: Path,
    cwd: Path | None = None,
    *,
    timeout: float = DEFAULT_VCS_TIMEOUT,
) -> str | None:
    """Return the content of ``path`` at ``HEAD``, or None when unavailable.

    Args:
        path (Path): File whose committed version is wanted.
        cwd (Path | None): Directory to run git from; defaults to the file's directory.
        timeout (float): Seconds before the lookup is abandoned.

    Returns:
        str | None: The committed text, or None for no repository, untracked
            file, command failure, timeout or missing git binary.
    """
    resolved: Path = path.resolve()
    workdir: Path = cwd.resolve() if cwd is not None else resolved.parent
    try:
        spec: str = resolved.relative_to(workdir).as_posix()
    except ValueError:
        logger.debug("%s is outside %s; no committed content", resolved, workdir)
        return None

    cmd: list[str] = [GIT_EXECUTABLE, "-C", str(workdir), "show", f"HEAD:./{spec}"]
    logger.trace("Running: %s", " ".join(cmd))
    try:
        proc = subprocess.run(cmd, capture_output=True, timeout=timeout, check=False)
    except subprocess.TimeoutExpired:
        logger.warning("git lookup for %s timed out after %.1fs", path, timeout)
        return None
    except OSError as e:
        logger.info("git is not available: %s", e)
        return None

    if proc.returncode != 0:
        logger.debug(
            "No committed content for %s: %s",
            path,
            proc.stderr.decode("utf-8", errors="replace").strip(),
        )
        return None
    try:
        return proc.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.info("Committed content of %s is not UTF-8: %s", path, e)
        return None
