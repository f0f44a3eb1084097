# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""List helpers: chunking, set-like operations, grouping and random picks."""
import random
from collections.abc import Hashable, Iterable, Mapping, Sequence
from typing import Any

from sundries.core.exceptions import InvalidArgumentError
from sundries.predicates import is_nil


_rng = random.Random()


class _Seen:
    """Membership set that falls back to equality for unhashable items."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._hashed: set[Any] = set()
        self._unhashed: list[Any] = []
        for item in items:
            self.add(item)

    def add(self, item: Any) -> None:
        if isinstance(item, Hashable):
            try:
                self._hashed.add(item)
                return
            except TypeError:
                pass
        self._unhashed.append(item)

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, Hashable):
            try:
                return item in self._hashed
            except TypeError:
                pass
        return item in self._unhashed


def chunk[T](items: Sequence[T], size: int) -> list[list[T]]:
    """Split ``items`` into lists of ``size`` elements; the last may be shorter.

    Raises:
        InvalidArgumentError: If size is lower than 1.
    """
    if size <= 0:
        raise InvalidArgumentError("Chunk size must be greater than 0")
    return [list(items[start:start + size]) for start in range(0, len(items), size)]


def difference[T](items: Iterable[T], *others: Iterable[T]) -> list[T]:
    """Return the items not present in any of ``others``, order kept."""
    excluded = _Seen(item for other in others for item in other)
    return [item for item in items if item not in excluded]


def flatten(items: Iterable[Any]) -> list[Any]:
    """Flatten nested lists and tuples to any depth."""
    result: list[Any] = []
    for item in items:
        if isinstance(item, (list, tuple)):
            result.extend(flatten(item))
        else:
            result.append(item)
    return result


def group_by(items: Iterable[Any], key: Any) -> dict[Any, list[Any]]:
    """Group items by the value they hold under ``key``.

    Items may be mappings or objects; groups keep first-seen order and items
    keep their relative order inside each group. Items lacking the key are
    grouped under None. Unhashable values, such as lists, are grouped under
    their repr.
    """
    groups: dict[Any, list[Any]] = {}
    for item in items:
        groups.setdefault(_group_key(_lookup(item, key)), []).append(item)
    return groups


def intersection[T](*arrays: Iterable[T]) -> list[T]:
    """Return the distinct items of the first array present in all the others."""
    if not arrays:
        return []
    first, *rest = arrays
    others = [_Seen(other) for other in rest]
    seen = _Seen()
    result: list[T] = []
    for item in first:
        if item in seen:
            continue
        seen.add(item)
        if all(item in other for other in others):
            result.append(item)
    return result


def pluck(items: Iterable[Any], key: Any) -> list[Any]:
    """Return the value under ``key`` for every item."""
    return [_lookup(item, key) for item in items]


def sample[T](items: Sequence[T] | None, rng: random.Random | None = None) -> T:
    """Return one random element of ``items``.

    Raises:
        InvalidArgumentError: If items is None, MISSING or empty.
    """
    if is_nil(items) or len(items) == 0:  # type: ignore[arg-type]
        raise InvalidArgumentError("Array must not be null or empty")
    source = rng or _rng
    return items[int(source.random() * len(items))]  # type: ignore[index]


def shuffle[T](items: Iterable[T], rng: random.Random | None = None) -> list[T]:
    """Return a shuffled copy of ``items`` (Fisher-Yates); the input is untouched."""
    source = rng or _rng
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = int(source.random() * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result


def union[T](*arrays: Iterable[T]) -> list[T]:
    """Return the distinct items of all arrays in first-seen order."""
    seen = _Seen()
    result: list[T] = []
    for array in arrays:
        for item in array:
            if item not in seen:
                seen.add(item)
                result.append(item)
    return result


def _lookup(item: Any, key: Any) -> Any:
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)


def _group_key(value: Any) -> Any:
    try:
        hash(value)
    except TypeError:
        return repr(value)
    return value
