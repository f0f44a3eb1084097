# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Numeric and statistical helpers."""
import math
import random

from sundries.core.exceptions import InvalidArgumentError


# Widest span random_int will draw from
MAX_RANDOM_SPAN = 1_000_000_000

_rng = random.Random()


def sum_values(*values: float) -> float:
    return sum(values)


def average(*values: float) -> float:
    """Arithmetic mean; 0 when no values are given."""
    if not values:
        return 0
    return sum(values) / len(values)


def median(*values: float) -> float:
    """Middle value (mean of the two middle values for even counts); 0 when empty."""
    if not values:
        return 0
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]


def percentile(values: list[float], p: float) -> float:
    """Return the ``p``-th percentile using linear interpolation between ranks.

    Args:
        values: Sample values, in any order.
        p: Percentile between 0 and 100 inclusive.

    Returns:
        The interpolated percentile; 0 for an empty sample.

    Raises:
        InvalidArgumentError: If p is outside [0, 100].
    """
    if not values:
        return 0
    if p < 0 or p > 100:
        raise InvalidArgumentError("Percentile must be between 0 and 100")

    ordered = sorted(values)
    index = (p / 100) * (len(ordered) - 1)
    lower, upper = math.floor(index), math.ceil(index)
    if lower == upper:
        return ordered[lower]
    weight = index - lower
    return ordered[lower] * (1 - weight) + ordered[upper] * weight


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit ``value`` to the closed range [lower, upper].

    When lower exceeds upper, upper wins.
    """
    return min(max(value, lower), upper)


def ceil(value: float) -> int:
    return math.ceil(value)


def floor(value: float) -> int:
    return math.floor(value)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def random_int(lower: int = 0, upper: int = 999, rng: random.Random | None = None) -> int:
    """Return a random integer in [lower, upper].

    Reversed bounds are swapped, and the span is capped at
    ``MAX_RANDOM_SPAN`` above the lower bound.
    """
    low, high = min(lower, upper), max(lower, upper)
    high = clamp(high, low, low + MAX_RANDOM_SPAN)
    source = rng or _rng
    return math.floor(source.random() * (high - low + 1)) + low
