# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Shared type definitions for sundries.

Contains the MISSING sentinel, the ValueCategory enumeration with its
classification function, the Task alias and the RetryOptions model used by
the object and concurrency helpers.
"""
import array
import asyncio
import inspect
import re
from collections.abc import Awaitable, Callable, Mapping
from datetime import date, time, timedelta
from decimal import Decimal
from enum import Enum, StrEnum
from fractions import Fraction
from pathlib import PurePath
from typing import Any, Final
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class _MissingType:
    """Type of the MISSING sentinel.

    MISSING marks a value that was never provided, as opposed to None which
    is an explicit "no value".
    """

    _instance: "_MissingType | None" = None

    def __new__(cls) -> "_MissingType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_MissingType":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "_MissingType":
        return self

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _MissingType()

type Task[T] = Callable[[], Awaitable[T]]


class ValueCategory(StrEnum):
    """Structural category of a value, as seen by the deep object helpers."""

    PRIMITIVE = "primitive"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    SET = "set"
    DATE = "date"
    PATTERN = "pattern"
    BUFFER = "buffer"
    ERROR = "error"
    DEFERRED = "deferred"
    PLAIN_OBJECT = "plain_object"
    OTHER = "other"


# Immutable value types that are safe to share between a value and its copy
ATOM_TYPES: tuple[type, ...] = (
    str,
    bytes,
    int,
    float,
    complex,
    Decimal,
    Fraction,
    Enum,
    timedelta,
    UUID,
    PurePath,
    range,
)

BUFFER_TYPES: tuple[type, ...] = (bytearray, array.array, memoryview)


def categorize(value: Any) -> ValueCategory:
    """Classify a value into exactly one ValueCategory.

    Order matters: absent markers, atoms and callables are checked before any
    structural test so that classes and functions are never walked.

    Args:
        value: Any Python value.

    Returns:
        The category used to dispatch clone/compare/merge.
    """
    if value is None or value is MISSING or isinstance(value, ATOM_TYPES):
        return ValueCategory.PRIMITIVE
    if callable(value):
        return ValueCategory.PRIMITIVE
    if isinstance(value, (list, tuple)):
        return ValueCategory.SEQUENCE
    if type(value) is dict:
        return ValueCategory.PLAIN_OBJECT
    if isinstance(value, Mapping):
        return ValueCategory.MAPPING
    if isinstance(value, (set, frozenset)):
        return ValueCategory.SET
    if isinstance(value, (date, time)):
        return ValueCategory.DATE
    if isinstance(value, re.Pattern):
        return ValueCategory.PATTERN
    if isinstance(value, BUFFER_TYPES):
        return ValueCategory.BUFFER
    if isinstance(value, BaseException):
        return ValueCategory.ERROR
    if asyncio.isfuture(value) or inspect.iscoroutine(value):
        return ValueCategory.DEFERRED
    return ValueCategory.OTHER


class RetryOptions(BaseModel):
    """Retry policy for one call of :func:`sundries.concurrency.retry`.

    Attributes:
        attempts: Total number of attempts, including the first one (>= 1).
        delay_ms: Pause between a failed attempt and the next one, in
            milliseconds (>= 0). No pause follows the final attempt.
    """

    model_config = ConfigDict(frozen=True)

    attempts: int = Field(default=3, ge=1, description="Total number of attempts")
    delay_ms: float = Field(
        default=0, ge=0, description="Delay between attempts in milliseconds"
    )
