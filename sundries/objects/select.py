# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Key selection helpers built on clone: defaults, omit and pick."""
from collections.abc import Iterable
from typing import Any

from sundries.core.types import MISSING
from sundries.objects.clone import clone
from sundries.objects.entries import own_items


def defaults(obj: Any, default_values: Any) -> dict[Any, Any]:
    """Fill absent keys of ``obj`` from ``default_values``.

    A key counts as absent when it is not present or holds MISSING. None,
    0, False and "" are real values and are kept.

    Args:
        obj: Keyed value providing the explicit settings.
        default_values: Keyed value providing fallbacks.

    Returns:
        A new dict; neither input is modified.
    """
    result = {clone(key): clone(value) for key, value in own_items(obj)}
    for key, value in own_items(default_values):
        if result.get(key, MISSING) is MISSING:
            result[key] = clone(value)
    return result


def omit(obj: Any, keys: Iterable[Any]) -> dict[Any, Any]:
    """Return a deep copy of ``obj``'s own data without ``keys``."""
    excluded = list(keys)
    return {
        clone(key): clone(value)
        for key, value in own_items(obj)
        if key not in excluded
    }


def pick(obj: Any, keys: Iterable[Any]) -> dict[Any, Any]:
    """Return a deep copy of the listed keys that ``obj`` actually has."""
    data = dict(own_items(obj))
    return {clone(key): clone(data[key]) for key in keys if key in data}
