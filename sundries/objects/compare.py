# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Deep structural equality."""
import math
from typing import Any

from sundries.core.types import MISSING, ValueCategory, categorize
from sundries.objects.entries import KEYED_CATEGORIES, own_items


# Composites that are compared by value rather than walked
VALUE_CATEGORIES = frozenset({
    ValueCategory.SET,
    ValueCategory.DATE,
    ValueCategory.PATTERN,
    ValueCategory.BUFFER,
})


def type_tag(value: Any) -> str:
    """Return the coarse runtime tag used to reject cross-type comparisons.

    Tags: ``undefined``, ``null``, ``boolean``, ``number``, ``string``,
    ``function`` and ``object`` (every composite).
    """
    if value is MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float, complex)):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value):
        return "function"
    if categorize(value) is ValueCategory.PRIMITIVE:
        return type(value).__name__
    return "object"


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def compare(a: Any, b: Any) -> bool:
    """Return True when ``a`` and ``b`` are structurally equal.

    Sequences compare element by element in order. Keyed values (dicts,
    mappings, errors and plain data objects) compare by exact key set and
    recursively equal values, regardless of key order. A sequence never
    equals a keyed value. NaN never equals anything, itself included.

    Args:
        a: First value.
        b: Second value.

    Returns:
        Whether the two values are deeply equal.
    """
    if a is b and not _is_nan(a):
        return True

    if type_tag(a) != type_tag(b):
        return False

    if type_tag(a) != "object":
        return bool(a == b)

    category_a, category_b = categorize(a), categorize(b)

    if category_a is ValueCategory.SEQUENCE and category_b is ValueCategory.SEQUENCE:
        if len(a) != len(b):
            return False
        return all(compare(item_a, item_b) for item_a, item_b in zip(a, b, strict=True))

    if category_a in KEYED_CATEGORIES and category_b in KEYED_CATEGORIES:
        if ValueCategory.ERROR in (category_a, category_b):
            if type(a) is not type(b) or not compare(list(a.args), list(b.args)):
                return False
        return _compare_keyed(dict(own_items(a)), dict(own_items(b)))

    if category_a in VALUE_CATEGORIES and category_a is category_b:
        return bool(a == b)

    return False


def _compare_keyed(a: dict[Any, Any], b: dict[Any, Any]) -> bool:
    if len(a) != len(b):
        return False
    for key, item in a.items():
        if key not in b or not compare(item, b[key]):
            return False
    return True
