# topmark:header:start
#
#   project      : CodeStamp
#   file         : base.py
#   file_relpath : src/codestamp/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: may_proceed → run? → hint

Subclasses override ``may_proceed()`` and ``run()``, and optionally ``hint()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger

if TYPE_CHECKING:
    from codestamp.config.logging import CodestampLogger
    from codestamp.pipeline.context import StampContext

logger: CodestampLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Attributes:
        name (str): Stable step identifier for logs.
        axis (str | None): Status axis this step writes (see `StampStatusBundle`).
    """

    name: str
    axis: str | None = None

    def __call__(self, ctx: StampContext) -> StampContext:
        """Invoke the step lifecycle: gate → run (if allowed) → hint.

        Args:
            ctx (StampContext): The mutable context for the current document.

        Returns:
            StampContext: The same context instance after mutation.
        """
        ctx.steps.append(self.name)

        if ctx.flow.halt:
            logger.debug("Step %s skipped: pipeline halted by %s", self.name, ctx.flow.at_step)
            return ctx

        if self.may_proceed(ctx):
            logger.trace("Step %s - running", self.name)
            self.run(ctx)
            if ctx.flow.halt:
                logger.info("Pipeline halted by %s: %s", ctx.flow.at_step, ctx.flow.reason)
        else:
            logger.debug("Step %s may not proceed", self.name)

        self.hint(ctx)
        return ctx

    def may_proceed(self, ctx: StampContext) -> bool:
        """Return whether the step should run given the current context.

        Default: ``True``. Override in subclasses to respect pipeline gates
        (for instance, the writer only runs once the updater produced text).

        Args:
            ctx (StampContext): The context for the current document.

        Returns:
            bool: True if `run()` should be called.
        """
        return True

    def run(self, ctx: StampContext) -> None:
        """Perform the step's work, mutating ``ctx`` in place.

        Steps write their own status axis and may call `StampContext.halt` to
        stop the remaining steps.

        Args:
            ctx (StampContext): The mutable context for the current document.

        Raises:
            NotImplementedError: If a subclass does not override it.
        """
        raise NotImplementedError

    def hint(self, ctx: StampContext) -> None:
        """Log a one-line summary of the step's axis.

        Args:
            ctx (StampContext): The context after `run()` (or the skipped gate).
        """
        if self.axis is not None:
            logger.debug("%s: %s=%s", self.name, self.axis, getattr(ctx.status, self.axis).value)
