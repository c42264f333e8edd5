import asyncio
import time

import pytest
from unittest.mock import AsyncMock, MagicMock

from eventflow.core.container import ServiceContainer
from eventflow.core.context import PipelineContext
from eventflow.core.pipeline import PipelineResult, PipelineRunner, build_steps
from eventflow.core.steps.base import PipelineStep


class RecordingStep(PipelineStep):
    """Adds one field and records when it ran and what it saw."""

    def __init__(self, settings, name, log, fail=False):
        super().__init__(settings, ServiceContainer())
        self.name = name
        self.log = log
        self.fail = fail
        self.calls = 0
        self.seen_keys = None

    async def execute(self, ctx: PipelineContext):
        self.calls += 1
        self.seen_keys = set(ctx.data)
        start = time.monotonic()
        await asyncio.sleep(0.01)
        end = time.monotonic()
        self.log.append((self.name, start, end))
        if self.fail:
            raise RuntimeError(f"{self.name} exploded")
        ctx.set(f"{self.name}_field", self.name)


@pytest.mark.asyncio
async def test_steps_run_in_order_without_overlap(settings):
    log = []
    steps = [RecordingStep(settings, f"s{i}", log) for i in range(4)]

    result = await PipelineRunner(steps).run()

    assert result.success
    assert [name for name, _, _ in log] == ["s0", "s1", "s2", "s3"]
    for (_, _, prev_end), (_, next_start, _) in zip(log, log[1:]):
        assert next_start >= prev_end
    assert result.history == ["s0", "s1", "s2", "s3"]


@pytest.mark.asyncio
async def test_failure_stops_later_steps(settings):
    log = []
    steps = [
        RecordingStep(settings, "first", log),
        RecordingStep(settings, "broken", log, fail=True),
        RecordingStep(settings, "third", log),
        RecordingStep(settings, "fourth", log),
    ]
    on_complete = MagicMock()

    result = await PipelineRunner(steps).run(on_complete=on_complete)

    assert result.status == "failed"
    assert result.failed_step == "broken"
    assert result.failed_index == 1
    assert isinstance(result.error, RuntimeError)
    assert steps[2].calls == 0
    assert steps[3].calls == 0
    # Context at the point of failure is surfaced
    assert result.context.get("first_field") == "first"
    assert "broken_field" not in result.context
    on_complete.assert_called_once_with(result)


@pytest.mark.asyncio
async def test_context_accumulates_fields_from_all_prior_steps(settings):
    log = []
    steps = [RecordingStep(settings, name, log) for name in ("a", "b", "c", "d")]

    result = await PipelineRunner(steps).run()

    for k, step in enumerate(steps):
        expected = {f"{s.name}_field" for s in steps[:k]}
        assert step.seen_keys == expected
    assert set(result.context.data) == {"a_field", "b_field", "c_field", "d_field"}


@pytest.mark.asyncio
async def test_async_completion_handler_is_awaited(settings):
    handler = AsyncMock()
    step = RecordingStep(settings, "only", [])

    result = await PipelineRunner([step]).run(on_complete=handler)

    handler.assert_awaited_once_with(result)
    assert isinstance(result, PipelineResult)


@pytest.mark.asyncio
async def test_trace_records_status_per_step(settings):
    steps = [RecordingStep(settings, "ok", []), RecordingStep(settings, "bad", [], fail=True)]

    result = await PipelineRunner(steps).run()

    trace = result.context.trace
    assert [t["step"] for t in trace] == ["ok", "bad"]
    assert trace[0]["status"] == "completed"
    assert trace[1]["status"] == "failed"
    assert "bad exploded" in trace[1]["error"]


@pytest.mark.asyncio
async def test_runner_uses_given_context(settings):
    ctx = PipelineContext({"seed": 1})
    step = RecordingStep(settings, "next", [])

    result = await PipelineRunner([step]).run(ctx)

    assert result.context is ctx
    assert step.seen_keys == {"seed"}


def test_build_steps_keeps_configured_order(settings):
    steps = build_steps(["website", "inquire", "mentor_issue"], settings, ServiceContainer())
    assert [s.name for s in steps] == ["website", "inquire", "mentor_issue"]


def test_build_steps_rejects_unknown_name(settings):
    with pytest.raises(ValueError, match="Unknown pipeline step: 'nope'"):
        build_steps(["inquire", "nope"], settings, ServiceContainer())
