# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Bounded-concurrency task runner."""
import asyncio
from collections.abc import Awaitable, Sequence
from typing import Any

from loguru import logger

from sundries.concurrency.outcome import abandon
from sundries.core.exceptions import InvalidArgumentError
from sundries.core.types import Task


async def parallel[T](tasks: Sequence[Task[T]], concurrency: int) -> list[T]:
    """Run deferred tasks with at most ``concurrency`` of them in flight.

    Tasks are invoked in input order. Once the ceiling is reached the runner
    waits for one in-flight task to settle before invoking the next.

    Results are collected in completion order, not input order; pair each
    task with its index beforehand when input order matters. The first
    failure observed is re-raised immediately: partial results are dropped
    and tasks still running are abandoned. They run to completion and their
    outcomes are discarded. In-flight tasks are cancelled only when the runner
    itself is cancelled.

    Args:
        tasks: Zero-argument callables returning awaitables.
        concurrency: Maximum number of simultaneously running tasks (>= 1).

    Returns:
        Results of every task, in the order they completed.

    Raises:
        InvalidArgumentError: If concurrency is lower than 1.
        Exception: The first failure raised by any task.
    """
    if concurrency < 1:
        raise InvalidArgumentError(f"concurrency must be >= 1, got {concurrency}")

    results: list[T] = []
    executing: set[asyncio.Future[None]] = set()

    async def _collect(awaitable: Awaitable[T]) -> None:
        results.append(await awaitable)

    logger.debug("Starting task runner", tasks=len(tasks), concurrency=concurrency)

    try:
        for task in tasks:
            executing.add(asyncio.ensure_future(_collect(task())))
            if len(executing) >= concurrency:
                done, _ = await asyncio.wait(executing, return_when=asyncio.FIRST_COMPLETED)
                _settle(done, executing)

        while executing:
            done, _ = await asyncio.wait(executing, return_when=asyncio.FIRST_EXCEPTION)
            _settle(done, executing)
    except BaseException:
        current = asyncio.current_task()
        runner_cancelled = current is not None and current.cancelling() > 0
        for pending in executing:
            if runner_cancelled:
                pending.cancel()
            else:
                abandon(pending)
        raise

    logger.debug("Task runner finished", results=len(results))
    return results


def _settle(done: set[asyncio.Future[Any]], executing: set[asyncio.Future[None]]) -> None:
    """Drop settled tasks from the in-flight set, re-raising the first failure."""
    executing.difference_update(done)
    # Calling exception() also marks sibling failures as retrieved
    failures = [
        future for future in done
        if future.cancelled() or future.exception() is not None
    ]
    if not failures:
        return
    logger.debug("Task failed, aborting runner", in_flight=len(executing))
    failures[0].result()
