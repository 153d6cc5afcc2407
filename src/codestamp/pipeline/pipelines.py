# topmark:header:start
#
#   project      : CodeStamp
#   file         : pipelines.py
#   file_relpath : src/codestamp/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Named pipeline variants for CodeStamp (immutable, typed step sequences).

Overview
--------
- ``ENGINE``: revert → extract → cluster → stamp → update
- ``TEXT``: read → snapshot → vcs + ENGINE (bare buffers, style supplied)
- ``STAMP``: resolve → read → snapshot → vcs + ENGINE + patch
- ``STAMP_APPLY``: STAMP + write

Mermaid (orientation)
---------------------
```mermaid
flowchart TD
  subgraph Discovery
    R[resolver] --> D[reader] --> S[snapshot] --> V[vcs]
  end
  subgraph Engine
    V --> X[reverter] --> E[extractor] --> C[clusterer] --> T[stamper] --> U[updater]
  end
  subgraph Output
    U --> H[patcher] --> W[writer]
  end
```

Notes:
* Pipelines are immutable (Final[tuple[BaseStep, ...]]) and steps are
  instantiated objects (not functions).
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from codestamp.pipeline.steps.base import BaseStep
from codestamp.pipeline.steps.clusterer import ClustererStep
from codestamp.pipeline.steps.extractor import ExtractorStep
from codestamp.pipeline.steps.patcher import PatcherStep
from codestamp.pipeline.steps.reader import ReaderStep
from codestamp.pipeline.steps.resolver import ResolverStep
from codestamp.pipeline.steps.reverter import RevertStep
from codestamp.pipeline.steps.snapshot import SnapshotStep
from codestamp.pipeline.steps.stamper import StamperStep
from codestamp.pipeline.steps.updater import UpdaterStep
from codestamp.pipeline.steps.vcs import VcsStep
from codestamp.pipeline.steps.writer import WriterStep

ENGINE_PIPELINE: Final[tuple[BaseStep, ...]] = (
    RevertStep(),  # Undo stamps on code that is back to its committed state
    ExtractorStep(),  # Changed ranges since the last save
    ClustererStep(),  # Merge ranges separated by blank lines
    StamperStep(),  # Plan stamp edits
    UpdaterStep(),  # Apply them atomically
)

TEXT_PIPELINE: Final[tuple[BaseStep, ...]] = (
    ReaderStep(),
    SnapshotStep(),
    VcsStep(),
) + ENGINE_PIPELINE

STAMP_PIPELINE: Final[tuple[BaseStep, ...]] = (
    ResolverStep(),  # Language, comment style and stamp time
    ReaderStep(),
    SnapshotStep(),
    VcsStep(),
) + ENGINE_PIPELINE + (
    PatcherStep(),  # Unified diff for previews
)

STAMP_APPLY_PIPELINE: Final[tuple[BaseStep, ...]] = STAMP_PIPELINE + (
    WriterStep(),  # Write to file/stdout
)


class Pipeline(tuple[BaseStep, ...], Enum):
    """Available execution pipelines, mapped to their step sequences."""

    ENGINE = ENGINE_PIPELINE
    TEXT = TEXT_PIPELINE
    STAMP = STAMP_PIPELINE
    STAMP_APPLY = STAMP_APPLY_PIPELINE

    @property
    def steps(self) -> tuple[BaseStep, ...]:
        """Return the instantiated, ordered step sequence for this pipeline."""
        return self.value
