# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Shared fixtures and helpers for all tests.

Provides factories for deferred tasks with controlled timing and outcome,
a seeded random source, and loguru output capture.
"""
import asyncio
import random
from collections.abc import Awaitable, Callable, Generator
from io import StringIO
from typing import Any

import pytest
from loguru import logger


TaskFactory = Callable[..., Callable[[], Awaitable[Any]]]


@pytest.fixture
def delayed_task_factory() -> TaskFactory:
    """Factory fixture for tasks that resolve with a value after a delay.

    Usage:
        task = delayed_task_factory(42, delay_ms=10)
        assert await task() == 42
    """
    def _create(value: Any, delay_ms: float = 0) -> Callable[[], Awaitable[Any]]:
        async def _task() -> Any:
            await asyncio.sleep(delay_ms / 1000)
            return value
        return _task
    return _create


@pytest.fixture
def failing_task_factory() -> TaskFactory:
    """Factory fixture for tasks that raise after a delay."""
    def _create(error: BaseException, delay_ms: float = 0) -> Callable[[], Awaitable[Any]]:
        async def _task() -> Any:
            await asyncio.sleep(delay_ms / 1000)
            raise error
        return _task
    return _create


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source for the randomised helpers."""
    return random.Random(1234)


@pytest.fixture
def log_capture() -> Generator[StringIO, None, None]:
    """Capture sundries log records (message and extra fields) at DEBUG level."""
    output = StringIO()
    logger.enable("sundries")
    handler_id = logger.add(output, format="{message} {extra}", level="DEBUG")
    try:
        yield output
    finally:
        logger.remove(handler_id)
        logger.disable("sundries")
