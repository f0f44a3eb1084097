"""Tests for sundries.concurrency.parallel."""
import asyncio
from typing import Any

import pytest

from sundries.concurrency import parallel
from sundries.core.exceptions import InvalidArgumentError


class TestParallel:
    """Bounded-concurrency runner."""

    @pytest.mark.asyncio
    async def test_runs_all_tasks(self, delayed_task_factory: Any) -> None:
        tasks = [delayed_task_factory(value, delay_ms=5) for value in (1, 2, 3, 4)]
        results = await parallel(tasks, 2)
        assert sorted(results) == [1, 2, 3, 4]

    @pytest.mark.asyncio
    async def test_empty_task_list(self) -> None:
        assert await parallel([], 3) == []

    @pytest.mark.asyncio
    async def test_results_in_completion_order(self, delayed_task_factory: Any) -> None:
        tasks = [
            delayed_task_factory("slow", delay_ms=60),
            delayed_task_factory("fast", delay_ms=5),
        ]
        assert await parallel(tasks, 2) == ["fast", "slow"]

    @pytest.mark.asyncio
    async def test_respects_concurrency_limit(self) -> None:
        running = 0
        peak = 0

        def make_task(value: int) -> Any:
            async def _task() -> int:
                nonlocal running, peak
                running += 1
                peak = max(peak, running)
                await asyncio.sleep(0.01)
                running -= 1
                return value
            return _task

        results = await parallel([make_task(i) for i in range(6)], 2)
        assert sorted(results) == list(range(6))
        assert peak == 2

    @pytest.mark.asyncio
    async def test_invokes_tasks_in_input_order(self) -> None:
        started: list[int] = []

        def make_task(value: int) -> Any:
            async def _task() -> int:
                started.append(value)
                await asyncio.sleep(0)
                return value
            return _task

        await parallel([make_task(i) for i in range(4)], 1)
        assert started == [0, 1, 2, 3]

    @pytest.mark.asyncio
    async def test_first_failure_is_raised(
        self, delayed_task_factory: Any, failing_task_factory: Any,
    ) -> None:
        tasks = [
            delayed_task_factory(1, delay_ms=5),
            failing_task_factory(ValueError("boom"), delay_ms=1),
            delayed_task_factory(3, delay_ms=5),
        ]
        with pytest.raises(ValueError, match="boom"):
            await parallel(tasks, 2)

    @pytest.mark.asyncio
    async def test_failure_leaves_in_flight_tasks_running(self, failing_task_factory: Any) -> None:
        finished = asyncio.Event()

        async def _slow() -> int:
            await asyncio.sleep(0.03)
            finished.set()
            return 1

        with pytest.raises(RuntimeError):
            await parallel([_slow, failing_task_factory(RuntimeError("x"))], 2)
        assert not finished.is_set()
        await asyncio.wait_for(finished.wait(), 1)

    @pytest.mark.asyncio
    async def test_late_sibling_failure_is_consumed(
        self, failing_task_factory: Any, log_capture: Any,
    ) -> None:
        tasks = [
            failing_task_factory(ValueError("first"), delay_ms=1),
            failing_task_factory(KeyError("second"), delay_ms=30),
        ]
        with pytest.raises(ValueError, match="first"):
            await parallel(tasks, 2)
        await asyncio.sleep(0.06)
        assert "Abandoned operation failed" in log_capture.getvalue()
        assert "KeyError" in log_capture.getvalue()

    @pytest.mark.asyncio
    async def test_cancelling_runner_cancels_in_flight_tasks(self) -> None:
        cancelled = asyncio.Event()

        async def _slow() -> int:
            try:
                await asyncio.sleep(1)
            except asyncio.CancelledError:
                cancelled.set()
                raise
            return 1

        runner = asyncio.ensure_future(parallel([_slow], 1))
        await asyncio.sleep(0.01)
        runner.cancel()
        with pytest.raises(asyncio.CancelledError):
            await runner
        await asyncio.wait_for(cancelled.wait(), 1)

    @pytest.mark.asyncio
    async def test_concurrency_larger_than_task_count(self, delayed_task_factory: Any) -> None:
        results = await parallel([delayed_task_factory("only")], 10)
        assert results == ["only"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("concurrency", [0, -1])
    async def test_rejects_invalid_concurrency(self, concurrency: int) -> None:
        with pytest.raises(InvalidArgumentError, match="concurrency"):
            await parallel([], concurrency)

    @pytest.mark.asyncio
    async def test_logs_run(self, delayed_task_factory: Any, log_capture: Any) -> None:
        await parallel([delayed_task_factory(1)], 1)
        output = log_capture.getvalue()
        assert "Starting task runner" in output
        assert "'concurrency': 1" in output
        assert "Task runner finished" in output
