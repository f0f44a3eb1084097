# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Retry an async operation a fixed number of times."""
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from loguru import logger

from sundries.concurrency.sleep import sleep
from sundries.core.types import RetryOptions


async def retry[T](
    fn: Callable[[], Awaitable[T]],
    options: RetryOptions | Mapping[str, Any] | None = None,
) -> T:
    """Call ``fn`` until it succeeds or the attempts run out.

    Attempts run strictly one after another. After a failed attempt that is
    not the last one, the helper waits ``delay_ms`` (no wait when it is 0).
    Only ``Exception`` subclasses are retried, so cancellation propagates
    right away.

    Args:
        fn: Zero-argument callable returning an awaitable.
        options: RetryOptions, or a mapping such as
            ``{"attempts": 5, "delay_ms": 100}``. Defaults to 3 attempts
            without delay.

    Returns:
        The value of the first successful attempt.

    Raises:
        pydantic.ValidationError: If the options are invalid.
        Exception: The failure of the last attempt, unchanged.
    """
    if options is None:
        options = RetryOptions()
    elif not isinstance(options, RetryOptions):
        options = RetryOptions.model_validate(options)

    last_error: Exception | None = None

    for attempt in range(1, options.attempts + 1):
        try:
            return await fn()
        except Exception as e:
            last_error = e
            logger.debug(
                f"Attempt {attempt}/{options.attempts} failed",
                error=f"{type(e).__name__}: {e}",
            )
            if attempt < options.attempts and options.delay_ms > 0:
                await sleep(options.delay_ms)

    assert last_error is not None
    raise last_error
