import asyncio
import contextlib
import threading
from typing import Any, Callable

from loguru import logger

from eventflow.core.steps.base import PipelineStep
from eventflow.core.steps.registry import StepRegistry
from eventflow.core.context import PipelineContext
from eventflow.core.container import Services


async def run_in_daemon_thread(func: Callable[[], Any]) -> Any:
    """
    Run a blocking call on a daemon thread and await its result.

    A thread blocked on stdin must not keep the interpreter alive, so Ctrl-C
    at a prompt cancels the await and the process can exit right away.
    """
    loop = asyncio.get_running_loop()
    future = loop.create_future()

    def settle(result, error):
        if future.done():
            return
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(result)

    def worker():
        try:
            result, error = func(), None
        except BaseException as e:
            result, error = None, e
        # The loop is gone once the run was interrupted
        with contextlib.suppress(RuntimeError):
            loop.call_soon_threadsafe(settle, result, error)

    threading.Thread(target=worker, name="eventflow-prompts", daemon=True).start()
    return await future


@StepRegistry.register
class InquireStep(PipelineStep):
    name = "inquire"

    async def execute(self, ctx: PipelineContext):
        prompter = self.service(Services.PROMPTER)

        details = await run_in_daemon_thread(prompter.collect)

        ctx.update(details.model_dump())
        logger.success(f"Step Inquire finished. Event: {details.event_name} on {details.event_date}")
