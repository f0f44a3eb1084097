# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Deep clone of arbitrarily nested values."""
import array
import asyncio
import re
from collections import defaultdict
from collections.abc import Coroutine, Mapping
from typing import Any

from sundries.core.types import ValueCategory, categorize
from sundries.objects.entries import own_items


def clone[T](value: T) -> T:
    """Return a deep copy of ``value`` that shares no mutable substructure with it.

    Atoms (None, MISSING, str, numbers, callables, ...) are returned as-is.
    Containers are rebuilt with the same concrete type and cloned contents.
    Objects outside the known categories are flattened into a plain dict of
    their cloned own data, so their class is not preserved.

    Cyclic structures are not detected and end in RecursionError.

    Args:
        value: Value to copy.

    Returns:
        The copy.

    Example:
        >>> original = {"a": [1, {"b": 2}]}
        >>> copy = clone(original)
        >>> copy == original, copy["a"] is original["a"]
        (True, False)
    """
    result: Any
    match categorize(value):
        case ValueCategory.PRIMITIVE:
            result = value
        case ValueCategory.DATE:
            # replace() always constructs a fresh instance with the same fields
            result = value.replace()  # type: ignore[attr-defined]
        case ValueCategory.PATTERN:
            result = re.compile(value.pattern, value.flags)  # type: ignore[attr-defined]
        case ValueCategory.SEQUENCE:
            result = _clone_sequence(value)  # type: ignore[arg-type]
        case ValueCategory.PLAIN_OBJECT | ValueCategory.MAPPING:
            result = _clone_mapping(value)  # type: ignore[arg-type]
        case ValueCategory.SET:
            result = type(value)(clone(member) for member in value)  # type: ignore[call-arg, attr-defined]
        case ValueCategory.BUFFER:
            result = _clone_buffer(value)
        case ValueCategory.ERROR:
            result = _clone_error(value)  # type: ignore[arg-type]
        case ValueCategory.DEFERRED:
            result = _clone_deferred(value)
        case ValueCategory.OTHER:
            result = {clone(key): clone(item) for key, item in own_items(value)}
    return result  # type: ignore[no-any-return]


def _clone_sequence(value: list[Any] | tuple[Any, ...]) -> list[Any] | tuple[Any, ...]:
    items = [clone(item) for item in value]
    if isinstance(value, list):
        return items if type(value) is list else type(value)(items)
    if hasattr(value, "_make"):
        # Named tuples take their fields positionally
        return value._make(items)  # type: ignore[no-any-return]
    return type(value)(items)


def _clone_mapping(value: Mapping[Any, Any]) -> Mapping[Any, Any]:
    pairs = [(clone(key), clone(item)) for key, item in value.items()]
    if type(value) is dict:
        return dict(pairs)
    if isinstance(value, defaultdict):
        return type(value)(value.default_factory, pairs)
    try:
        # Counter and ChainMap do not read a list of pairs as items
        return type(value)(dict(pairs))  # type: ignore[call-arg]
    except TypeError:
        return dict(pairs)


def _clone_buffer(value: bytearray | array.array[Any] | memoryview) -> Any:
    if isinstance(value, array.array):
        return array.array(value.typecode, value)
    if isinstance(value, memoryview):
        view = memoryview(bytearray(value.tobytes()))
        if value.ndim == 0 or value.format == "B" and value.ndim == 1:
            return view
        return view.cast(value.format, list(value.shape))
    return bytearray(value)


def _clone_error(value: BaseException) -> BaseException:
    error_type = type(value)
    args = clone(value.args)
    try:
        error = error_type(*args)
    except TypeError:
        # Constructor signature does not accept the stored args
        error = error_type.__new__(error_type)
        error.args = args
    for key, item in vars(value).items():
        setattr(error, key, clone(item))
    return error


def _clone_deferred(value: Any) -> Any:
    if isinstance(value, Coroutine):
        return _clone_outcome(value)

    source: asyncio.Future[Any] = value
    target: asyncio.Future[Any] = source.get_loop().create_future()

    def _transfer(done: asyncio.Future[Any]) -> None:
        if target.cancelled():
            if not done.cancelled():
                done.exception()
            return
        if done.cancelled():
            target.cancel()
        elif (error := done.exception()) is not None:
            target.set_exception(clone(error))
        else:
            target.set_result(clone(done.result()))

    source.add_done_callback(_transfer)
    return target


async def _clone_outcome(awaitable: Coroutine[Any, Any, Any]) -> Any:
    try:
        result = await awaitable
    except Exception as error:
        raise clone(error) from None
    return clone(result)
