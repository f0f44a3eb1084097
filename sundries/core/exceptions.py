# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# sundries/core/exceptions.py
"""Custom exceptions for sundries."""


class SundriesError(Exception):
    """Base exception for all sundries errors."""

    pass


class InvalidArgumentError(SundriesError, ValueError):
    """Raised when a helper receives an argument it cannot work with."""

    pass


class OperationTimeoutError(SundriesError, TimeoutError):
    """Raised when an awaited operation misses its deadline.

    Attributes:
        ms: The deadline that elapsed, in milliseconds.
    """

    def __init__(self, ms: float) -> None:
        super().__init__(f"Operation timed out after {ms} ms")
        self.ms = ms
