# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Function composition and decoration helpers.

The timer-based decorators (debounce, throttle) run their delayed calls on
``threading.Timer`` threads so they work with or without an event loop.
"""
import functools
import inspect
import json
import threading
import time
from collections.abc import Callable
from typing import Any, Literal

from sundries.core.exceptions import InvalidArgumentError
from sundries.core.types import MISSING


def compose[T](*fns: Callable[[T], T]) -> Callable[[T], T]:
    """Compose functions right to left: ``compose(f, g)(x) == f(g(x))``."""
    def composed(arg: T) -> T:
        return functools.reduce(lambda acc, fn: fn(acc), reversed(fns), arg)
    return composed


def pipe[T](*fns: Callable[[T], T]) -> Callable[[T], T]:
    """Compose functions left to right: ``pipe(f, g)(x) == g(f(x))``."""
    def piped(arg: T) -> T:
        return functools.reduce(lambda acc, fn: fn(acc), fns, arg)
    return piped


def flow[T](direction: Literal["left", "right"], *fns: Callable[[T], T]) -> Callable[[T], T]:
    """Compose in the given direction: "left" behaves as pipe, "right" as compose."""
    if direction == "right":
        return compose(*fns)
    if direction == "left":
        return pipe(*fns)
    raise InvalidArgumentError(f"direction must be 'left' or 'right', got {direction!r}")


def _arity(fn: Callable[..., Any]) -> int:
    """Count the positional parameters that have no default."""
    return sum(
        1
        for param in inspect.signature(fn).parameters.values()
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD)
        and param.default is param.empty
    )


def curry(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Collect positional arguments across calls until ``fn`` can be called.

    Example:
        >>> add = curry(lambda a, b, c: a + b + c)
        >>> add(1)(2)(3), add(1, 2)(3)
        (6, 6)
    """
    arity = _arity(fn)

    @functools.wraps(fn)
    def curried(*args: Any) -> Any:
        if len(args) >= arity:
            return fn(*args)
        return lambda *more: curried(*args, *more)

    return curried


def partial(fn: Callable[..., Any], *preset: Any) -> Callable[..., Any]:
    """Pre-fill positional arguments of ``fn``.

    A MISSING entry in ``preset`` leaves a hole that is filled, in order, by
    the arguments of the later call.

    Raises:
        InvalidArgumentError: At call time, when the holes cannot all be filled.
    """
    arity = _arity(fn)

    @functools.wraps(fn)
    def applied(*later: Any) -> Any:
        remaining = iter(later)
        args: list[Any] = []
        for index in range(max(arity, len(preset))):
            if index < len(preset) and preset[index] is not MISSING:
                args.append(preset[index])
                continue
            value = next(remaining, MISSING)
            if value is MISSING:
                raise InvalidArgumentError("Not enough arguments provided")
            args.append(value)
        return fn(*args, *remaining)

    return applied


def memoize[**P, R](fn: Callable[P, R]) -> Callable[P, R]:
    """Cache results per wrapper, keyed by a JSON rendering of the arguments.

    Arguments that JSON cannot encode are keyed by their repr. The wrapper
    exposes ``cache`` and ``cache_clear()``.
    """
    cache: dict[str, R] = {}

    @functools.wraps(fn)
    def memoized(*args: P.args, **kwargs: P.kwargs) -> R:
        key = json.dumps([args, kwargs], sort_keys=True, default=repr)
        if key not in cache:
            cache[key] = fn(*args, **kwargs)
        return cache[key]

    memoized.cache = cache  # type: ignore[attr-defined]
    memoized.cache_clear = cache.clear  # type: ignore[attr-defined]
    return memoized


def once[**P, R](fn: Callable[P, R]) -> Callable[P, R]:
    """Run ``fn`` on the first call only; later calls return the first result."""
    called = False
    result: Any = None
    lock = threading.RLock()

    @functools.wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        nonlocal called, result
        with lock:
            if not called:
                called = True
                result = fn(*args, **kwargs)
        return result  # type: ignore[no-any-return]

    return wrapper


class _Debounced:
    """Callable returned by :func:`debounce`."""

    def __init__(self, fn: Callable[..., Any], wait_ms: float) -> None:
        self._fn = fn
        self._wait = wait_ms / 1000
        self._timer: threading.Timer | None = None
        self._lock = threading.Lock()
        functools.update_wrapper(self, fn)

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self._wait, self._fn, args, kwargs)
            self._timer.daemon = True
            self._timer.start()

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        # Bind like a plain function so decorated methods receive self
        if instance is None:
            return self
        return functools.partial(self, instance)

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None


def debounce(fn: Callable[..., Any], wait_ms: float) -> _Debounced:
    """Delay calls to ``fn`` until ``wait_ms`` passed without a new call.

    Only the last call of a burst runs, with that call's arguments.
    """
    return _Debounced(fn, wait_ms)


def throttle(fn: Callable[..., Any], wait_ms: float) -> Callable[..., None]:
    """Run ``fn`` at most once per ``wait_ms``.

    The first call runs immediately. A call inside the window schedules one
    trailing call for the end of the window; further calls in the same window
    are dropped.
    """
    wait = wait_ms / 1000
    last_call = float("-inf")
    timer: threading.Timer | None = None
    lock = threading.Lock()

    def _trailing(*args: Any, **kwargs: Any) -> None:
        nonlocal last_call, timer
        with lock:
            last_call = time.monotonic()
            timer = None
        fn(*args, **kwargs)

    @functools.wraps(fn)
    def throttled(*args: Any, **kwargs: Any) -> None:
        nonlocal last_call, timer
        with lock:
            now = time.monotonic()
            elapsed = now - last_call
            if elapsed >= wait:
                last_call = now
                run_now = True
            else:
                run_now = False
                if timer is None:
                    timer = threading.Timer(wait - elapsed, _trailing, args, kwargs)
                    timer.daemon = True
                    timer.start()
        if run_now:
            fn(*args, **kwargs)

    return throttled
