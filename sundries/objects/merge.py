# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Deep merge of keyed values."""
from collections.abc import Mapping
from typing import Any

from sundries.objects.clone import clone
from sundries.objects.entries import own_items


def merge(*objects: Any) -> dict[Any, Any]:
    """Merge keyed values left to right into a new dict.

    For each key of each input, in order:

    - a mapping value is cloned in when the key is new, or merged recursively
      into the value already present;
    - any other value (primitives, None, lists, tuples, callables, dates,
      arbitrary objects) replaces the key with a clone of itself.

    Lists are never merged element-wise: a later list fully replaces an
    earlier value. Keys are never removed. The result shares no mutable
    structure with the inputs.

    Args:
        *objects: Dicts, other mappings, or objects carrying own data.

    Returns:
        The merged dict. ``merge()`` returns ``{}``.

    Example:
        >>> merge({"a": {"x": 1}, "l": [1, 2]}, {"a": {"y": 2}, "l": [3]})
        {'a': {'x': 1, 'y': 2}, 'l': [3]}
    """
    result: dict[Any, Any] = {}

    for obj in objects:
        for key, value in own_items(obj):
            if isinstance(value, Mapping):
                if key not in result:
                    result[key] = clone(value)
                else:
                    result[key] = merge(result[key], value)
            else:
                result[key] = clone(value)

    return result
