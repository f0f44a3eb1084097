# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Own-data views over keyed values: entries, keys and values."""
from collections.abc import Mapping
from typing import Any

from sundries.core.types import ValueCategory, categorize


KEYED_CATEGORIES = frozenset({
    ValueCategory.PLAIN_OBJECT,
    ValueCategory.MAPPING,
    ValueCategory.ERROR,
    ValueCategory.OTHER,
})


def own_items(value: Any) -> list[tuple[Any, Any]]:
    """Return the own key/value pairs of a keyed value, in insertion order.

    Mappings contribute their items. Errors and other objects contribute
    their instance ``__dict__`` or, failing that, their populated
    ``__slots__``. Every other value has no own data.

    Args:
        value: Any value.

    Returns:
        List of (key, value) pairs. The values are not copied.
    """
    if isinstance(value, Mapping):
        return list(value.items())
    if categorize(value) not in KEYED_CATEGORIES:
        return []
    if hasattr(value, "__dict__"):
        return list(vars(value).items())
    pairs: list[tuple[Any, Any]] = []
    for cls in type(value).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        for name in (slots,) if isinstance(slots, str) else slots:
            if name in ("__dict__", "__weakref__") or not hasattr(value, name):
                continue
            pairs.append((name, getattr(value, name)))
    return pairs


def entries(obj: Any) -> list[tuple[Any, Any]]:
    """Return cloned (key, value) pairs of ``obj``'s own data."""
    from sundries.objects.clone import clone

    return [(clone(key), clone(item)) for key, item in own_items(obj)]


def keys(obj: Any) -> list[Any]:
    """Return cloned keys of ``obj``'s own data."""
    from sundries.objects.clone import clone

    return [clone(key) for key, _ in own_items(obj)]


def values(obj: Any) -> list[Any]:
    """Return cloned values of ``obj``'s own data."""
    from sundries.objects.clone import clone

    return [clone(item) for _, item in own_items(obj)]
