# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Runtime type predicates."""
import asyncio
import inspect
from collections.abc import Coroutine
from typing import Any, TypeGuard

from sundries.core.types import MISSING


def is_null(value: Any) -> TypeGuard[None]:
    """Return True for an explicit None."""
    return value is None


def is_undefined(value: Any) -> bool:
    """Return True for the MISSING sentinel."""
    return value is MISSING


def is_nil(value: Any) -> bool:
    """Return True for either absent marker (None or MISSING)."""
    return is_null(value) or is_undefined(value)


def is_string(value: Any) -> TypeGuard[str]:
    return isinstance(value, str)


def is_boolean(value: Any) -> TypeGuard[bool]:
    return isinstance(value, bool)


def is_number(value: Any) -> TypeGuard[int | float]:
    """Return True for ints and floats, NaN and infinities included.

    Booleans are excluded even though bool subclasses int.
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_function(value: Any) -> bool:
    """Return True for anything callable: functions, lambdas, classes, async functions."""
    return callable(value)


def is_iterable(value: Any) -> bool:
    """Return True when the value implements the iteration protocol."""
    return not is_nil(value) and is_function(getattr(value, "__iter__", None))


def is_plain_object(value: Any) -> TypeGuard[dict[Any, Any]]:
    """Return True only for instances of exactly ``dict``.

    Subclasses (OrderedDict, defaultdict) and arbitrary objects are not plain.
    """
    return type(value) is dict


def is_promise(value: Any) -> TypeGuard[asyncio.Future[Any] | Coroutine[Any, Any, Any]]:
    """Return True for asyncio futures/tasks and coroutine objects.

    Objects that merely define ``__await__`` are not considered promises.
    """
    return asyncio.isfuture(value) or inspect.iscoroutine(value)
