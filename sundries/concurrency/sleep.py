# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Millisecond-based asyncio sleep."""
import asyncio


async def sleep(ms: float) -> None:
    """Suspend the current coroutine for ``ms`` milliseconds.

    A zero delay still yields control to the event loop once.
    """
    await asyncio.sleep(max(ms, 0) / 1000)
