# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Recursive key renaming."""
from collections.abc import Callable
from typing import Any

from sundries.core.types import ValueCategory, categorize
from sundries.objects.clone import clone
from sundries.objects.entries import own_items


# Keyed values whose keys get renamed; map-likes keep their arbitrary keys
_RENAMED = frozenset({ValueCategory.PLAIN_OBJECT, ValueCategory.OTHER})


def transform_keys(obj: Any, transform: Callable[[str], str]) -> dict[str, Any]:
    """Rename every key of ``obj`` and of its nested plain objects.

    Dates, patterns, sets, map-likes, buffers and sequences are cloned
    without being descended into.

    Args:
        obj: Keyed value to transform.
        transform: Function applied to each key.

    Returns:
        New dict with transformed keys.
    """
    result: dict[str, Any] = {}
    for key, value in own_items(obj):
        new_key = transform(key)
        if categorize(value) in _RENAMED:
            result[new_key] = transform_keys(value, transform)
        else:
            result[new_key] = clone(value)
    return result
