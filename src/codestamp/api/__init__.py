# topmark:header:start
#
#   project      : CodeStamp
#   file         : __init__.py
#   file_relpath : src/codestamp/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Public CodeStamp API (stable surface).

Two entry points run the stamping pipeline without going through the CLI:

- `stamp_text`: stamp a bare buffer given its last-saved and committed text.
  No file system access, no git; the comment style is supplied by the caller.
  This is what an editor plugin calls on "will save".
- `stamp_file`: stamp a file (or a buffer that belongs to it), with language
  detection, exclusion, snapshot loading and the git lookup done for you.

Notes:
-----
- Functions here are **thin wrappers** around the internal pipeline.
- Writes are performed exclusively by the pipeline writer step; the API only
  reports statuses determined by the pipeline.
- The returned edits always refer to the buffer as it was passed in; they are
  ordered and never overlap.

```python
from codestamp import api
from codestamp.engine.tags import Timestamp
from codestamp.styles import SLASH

result = api.stamp_text(
    "a=2",
    saved="a=1",
    style=SLASH,
    author="Eve",
    timestamp=Timestamp("2025-01-01", "10:00:00"),
)
assert result.text == "a=2 // Eve | 2025-01-01, 10:00:00"
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.config import MutableConfig
from codestamp.config.logging import get_logger
from codestamp.constants import CODESTAMP_VERSION, DEFAULT_MERGE_THRESHOLD
from codestamp.pipeline import runner
from codestamp.pipeline.context import OutputSink, SnapshotSource, StampContext
from codestamp.pipeline.pipelines import Pipeline

from .types import Outcome, StampResult

if TYPE_CHECKING:
    from pathlib import Path

    from codestamp.config import Config
    from codestamp.config.logging import CodestampLogger
    from codestamp.engine.tags import Timestamp
    from codestamp.styles.base import CommentStyle

logger: CodestampLogger = get_logger(__name__)


__all__: list[str] = [
    "Outcome",
    "StampResult",
    "stamp_text",
    "stamp_file",
    "version",
]


def stamp_text(
    buffer: str,
    *,
    saved: str,
    committed: str | None = None,
    style: CommentStyle,
    author: str,
    timestamp: Timestamp,
    merge_threshold: int = DEFAULT_MERGE_THRESHOLD,
    revert_detection: bool = True,
) -> StampResult:
    """Stamp a bare buffer.

    Args:
        buffer (str): Current buffer content (the text about to be saved).
        saved (str): Last-saved content; ``""`` when the file is new.
        committed (str | None): Committed content for revert detection, or
            ``None`` when unavailable.
        style (CommentStyle): Comment style of the document.
        author (str): Name written into stamps.
        timestamp (Timestamp): Time captured for this save.
        merge_threshold (int): Inline stamp run length above which the run
            becomes a block.
        revert_detection (bool): Undo stamps on code that is back to its
            committed state.

    Returns:
        StampResult: Edits against ``buffer`` plus the resulting text.

    Raises:
        ConfigError: If ``merge_threshold`` is smaller than 1.
    """
    config: Config = MutableConfig(
        author_name=author,
        merge_threshold=merge_threshold,
        revert_detection=revert_detection,
    ).freeze()
    ctx = StampContext(
        path=None,
        config=config,
        buffer_text=buffer,
        saved_text=saved,
        committed_text=committed,
        snapshot_source=SnapshotSource.TEXT,
        vcs_lookup=False,
        style=style,
        timestamp=timestamp,
    )
    ctx = runner.run(ctx, Pipeline.TEXT.steps)
    return StampResult.from_context(ctx)


def stamp_file(
    path: Path,
    *,
    config: Config,
    base_text: str | None = None,
    buffer_text: str | None = None,
    language_id: str | None = None,
    timestamp: Timestamp | None = None,
    sink: OutputSink = OutputSink.NONE,
) -> StampResult:
    """Stamp a file, or a buffer that will be saved to it.

    The last-saved snapshot is ``base_text`` when given. Otherwise it is the
    file on disk when ``buffer_text`` is given (an editor save), or the
    committed version when the file itself is the buffer.

    Args:
        path (Path): The file being stamped.
        config (Config): Effective configuration.
        base_text (str | None): Explicit last-saved snapshot.
        buffer_text (str | None): Buffer content; read from ``path`` when None.
        language_id (str | None): Language identifier; detected from ``path`` when None.
        timestamp (Timestamp | None): Stamp time; the current time when None.
        sink (OutputSink): Where to write the stamped buffer; nothing is
            written with ``OutputSink.NONE`` (dry run).

    Returns:
        StampResult: Outcome, edits, stamped text and unified diff.
    """
    source: SnapshotSource
    if base_text is not None:
        source = SnapshotSource.TEXT
    elif buffer_text is not None:
        source = SnapshotSource.DISK
    else:
        source = SnapshotSource.VCS

    ctx = StampContext(
        path=path,
        config=config,
        buffer_text=buffer_text,
        saved_text=base_text,
        snapshot_source=source,
        sink=sink,
        language_id=language_id,
        timestamp=timestamp,
    )
    pipeline: Pipeline = Pipeline.STAMP if sink == OutputSink.NONE else Pipeline.STAMP_APPLY
    ctx = runner.run(ctx, pipeline.steps)
    return StampResult.from_context(ctx)


def version() -> str:
    """Return the installed CodeStamp version."""
    return CODESTAMP_VERSION
