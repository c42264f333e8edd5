import inspect
import time
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, List, Optional, Sequence, Union

from loguru import logger

from eventflow.config import Settings
from eventflow.core.container import ServiceContainer
from eventflow.core.context import PipelineContext
from eventflow.core.steps import load_builtin_steps
from eventflow.core.steps.base import PipelineStep
from eventflow.core.steps.registry import StepRegistry


@dataclass
class PipelineResult:
    status: str
    context: PipelineContext
    history: List[str] = field(default_factory=list)
    error: Optional[BaseException] = None
    failed_step: Optional[str] = None
    failed_index: Optional[int] = None

    @property
    def success(self) -> bool:
        return self.status == "completed"


CompletionHandler = Callable[[PipelineResult], Union[None, Awaitable[None]]]


class PipelineRunner:
    """
    Runs steps strictly one after another over a shared PipelineContext.

    The first failing step stops the run; later steps never execute and
    nothing already done is rolled back.
    """

    def __init__(self, steps: Sequence[PipelineStep]):
        self.steps = list(steps)

    async def run(
        self,
        ctx: Optional[PipelineContext] = None,
        on_complete: Optional[CompletionHandler] = None,
    ) -> PipelineResult:
        ctx = ctx if ctx is not None else PipelineContext()
        logger.info(f"Starting pipeline with {len(self.steps)} steps: {[s.name for s in self.steps]}")

        result = None
        for i, step in enumerate(self.steps):
            logger.info(f"Executing step {i+1}: {step.name}")
            started = time.monotonic()
            try:
                await step.execute(ctx)
            except Exception as e:
                ctx.add_trace(step.name, time.monotonic() - started, "failed", str(e))
                logger.error(f"Pipeline failed at step {step.name}: {e}")
                result = PipelineResult(
                    status="failed",
                    context=ctx,
                    history=list(ctx.history),
                    error=e,
                    failed_step=step.name,
                    failed_index=i,
                )
                break

            ctx.add_trace(step.name, time.monotonic() - started, "completed")
            ctx.history.append(step.name)

        if result is None:
            logger.success(f"Pipeline completed: {ctx.history}")
            result = PipelineResult(status="completed", context=ctx, history=list(ctx.history))

        if on_complete is not None:
            outcome: Any = on_complete(result)
            if inspect.isawaitable(outcome):
                await outcome

        return result


def build_steps(names: Sequence[str], settings: Settings, container: ServiceContainer) -> List[PipelineStep]:
    """Instantiate registered steps in the given order."""
    load_builtin_steps()
    return [StepRegistry.get(name)(settings, container) for name in names]
