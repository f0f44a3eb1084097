# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Date conversion helpers."""
import math
from datetime import UTC, date, datetime, time

from sundries.core.exceptions import InvalidArgumentError
from sundries.predicates import is_nil


def unix(value: datetime | date | str | int | float) -> int:
    """Convert a date-like value to whole seconds since the Unix epoch.

    Naive datetimes and plain dates are read as UTC. Strings are parsed as
    ISO-8601 (a trailing ``Z`` is accepted). Numbers are epoch milliseconds.

    Args:
        value: datetime, date, ISO string, or milliseconds since the epoch.

    Returns:
        Seconds since the epoch, rounded down.

    Raises:
        InvalidArgumentError: If value is None or MISSING.
        TypeError: If value has any other type.
        ValueError: If a string is not valid ISO-8601.
    """
    if is_nil(value):
        raise InvalidArgumentError("Date must not be null or undefined")

    if isinstance(value, str):
        return _seconds(datetime.fromisoformat(value))
    if isinstance(value, bool):
        raise TypeError("Invalid date type. Expected datetime, date, str, or number.")
    if isinstance(value, (int, float)):
        return math.floor(value / 1000)
    if isinstance(value, datetime):
        return _seconds(value)
    if isinstance(value, date):
        return _seconds(datetime.combine(value, time(), tzinfo=UTC))
    raise TypeError("Invalid date type. Expected datetime, date, str, or number.")


def _seconds(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return math.floor(moment.timestamp())
