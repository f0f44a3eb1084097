# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Deadline enforcement for awaitables."""
import asyncio
from collections.abc import Awaitable

from loguru import logger

from sundries.concurrency.outcome import abandon
from sundries.core.exceptions import OperationTimeoutError


async def timeout[T](awaitable: Awaitable[T], ms: float) -> T:
    """Await ``awaitable`` but give up after ``ms`` milliseconds.

    Unlike ``asyncio.wait_for``, the operation is abandoned rather than
    cancelled when the deadline passes: it keeps running and its eventual
    outcome is discarded. The same happens when the caller is cancelled
    while waiting. The deadline timer is released as soon as either side
    settles.

    With ``ms == 0`` only an already-settled future gets through.

    Args:
        awaitable: Coroutine, task or future to wait for.
        ms: Deadline in milliseconds.

    Returns:
        The awaitable's result if it settles in time.

    Raises:
        OperationTimeoutError: If the deadline elapses first.
        Exception: Whatever the awaitable raises before the deadline.
    """
    future = asyncio.ensure_future(awaitable)

    if not future.done():
        try:
            await asyncio.wait({future}, timeout=max(ms, 0) / 1000)
        except asyncio.CancelledError:
            abandon(future)
            raise

    if future.done():
        return future.result()

    logger.debug("Deadline elapsed, abandoning operation", ms=ms)
    abandon(future)
    raise OperationTimeoutError(ms)
