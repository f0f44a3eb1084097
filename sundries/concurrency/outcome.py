# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Handling for operations the async helpers stop waiting for."""
import asyncio

from loguru import logger


def abandon(future: asyncio.Future[object]) -> None:
    """Let ``future`` run on, consuming its outcome once it settles."""
    future.add_done_callback(discard_outcome)


def discard_outcome(future: asyncio.Future[object]) -> None:
    """Consume the outcome of an abandoned operation.

    Retrieving the exception keeps asyncio from reporting it as never
    retrieved.
    """
    if future.cancelled():
        return
    if (error := future.exception()) is not None:
        logger.debug("Abandoned operation failed", error=f"{type(error).__name__}: {error}")
