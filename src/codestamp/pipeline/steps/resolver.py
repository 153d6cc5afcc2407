# topmark:header:start
#
#   project      : CodeStamp
#   file         : resolver.py
#   file_relpath : src/codestamp/pipeline/steps/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Resolver step: language, comment style and stamp time for a document.

The language comes from the host when it supplies one, otherwise from the file
name (configured ``languages`` overrides first). Excluded files and languages
without comment syntax halt the pipeline; everything else resolves to a
`CommentStyle`, falling back to the ``//`` style for unknown languages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger
from codestamp.engine.tags import Timestamp
from codestamp.pipeline.status import ResolveStatus
from codestamp.pipeline.steps.base import BaseStep
from codestamp.styles.registry import detect_language, is_stampable, resolve_comment_style

if TYPE_CHECKING:
    from codestamp.config.logging import CodestampLogger
    from codestamp.pipeline.context import StampContext

logger: CodestampLogger = get_logger(__name__)


class ResolverStep(BaseStep):
    """Resolve the language and `CommentStyle`, and capture the stamp time.

    Axes written:
      - resolve

    Sets:
      - ResolveStatus: {RESOLVED, EXCLUDED, UNSUPPORTED}
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis="resolve")

    def run(self, ctx: StampContext) -> None:
        """Populate ``ctx.language_id``, ``ctx.style`` and ``ctx.timestamp``."""
        if ctx.path is not None and ctx.config.is_excluded(ctx.path):
            ctx.status.resolve = ResolveStatus.EXCLUDED
            ctx.halt(f"{ctx.path} matches an exclude pattern", self.name)
            return

        filename: str = ctx.path.name if ctx.path is not None else ""
        if ctx.language_id is None:
            ctx.language_id = detect_language(filename, overrides=ctx.config.languages)

        if not is_stampable(ctx.language_id):
            ctx.status.resolve = ResolveStatus.UNSUPPORTED
            ctx.halt(f"Language '{ctx.language_id}' has no comment syntax", self.name)
            return

        if ctx.style is None:
            ctx.style = resolve_comment_style(ctx.language_id, filename)
        if ctx.timestamp is None:
            ctx.timestamp = Timestamp.now(
                date_format=ctx.config.date_format,
                time_format=ctx.config.time_format,
            )

        logger.debug(
            "Resolved %s: language=%s prefix=%r suffix=%r above=%s",
            ctx.path,
            ctx.language_id,
            ctx.style.prefix,
            ctx.style.suffix,
            ctx.style.force_above,
        )
        ctx.status.resolve = ResolveStatus.RESOLVED
