"""sundries: small, stateless helpers for everyday Python."""

from loguru import logger

from sundries.arrays import (
    chunk,
    difference,
    flatten,
    group_by,
    intersection,
    pluck,
    sample,
    shuffle,
    union,
)
from sundries.concurrency import parallel, retry, sleep, timeout
from sundries.config import SundriesSettings, load_settings
from sundries.core import (
    MISSING,
    InvalidArgumentError,
    OperationTimeoutError,
    RetryOptions,
    SundriesError,
    ValueCategory,
    categorize,
)
from sundries.dates import unix
from sundries.functions import (
    compose,
    curry,
    debounce,
    flow,
    memoize,
    once,
    partial,
    pipe,
    throttle,
)
from sundries.logging import configure_logging
from sundries.numeric import (
    average,
    ceil,
    clamp,
    floor,
    median,
    percentile,
    random_int,
    round_half_up,
    sum_values,
)
from sundries.objects import (
    clone,
    compare,
    defaults,
    entries,
    keys,
    merge,
    omit,
    pick,
    transform_keys,
    values,
)
from sundries.predicates import (
    is_boolean,
    is_function,
    is_iterable,
    is_nil,
    is_null,
    is_number,
    is_plain_object,
    is_promise,
    is_string,
    is_undefined,
)
from sundries.strings import (
    camel_case,
    capitalize,
    kebab_case,
    random_string,
    reverse,
    snake_case,
    strip_tags,
    truncate,
)


# Library code stays silent until the application calls configure_logging()
logger.disable("sundries")

__version__ = "0.1.0"

__all__ = [
    "MISSING",
    "InvalidArgumentError",
    "OperationTimeoutError",
    "RetryOptions",
    "SundriesError",
    "SundriesSettings",
    "ValueCategory",
    "average",
    "camel_case",
    "capitalize",
    "categorize",
    "ceil",
    "chunk",
    "clamp",
    "clone",
    "compare",
    "compose",
    "configure_logging",
    "curry",
    "debounce",
    "defaults",
    "difference",
    "entries",
    "flatten",
    "floor",
    "flow",
    "group_by",
    "intersection",
    "is_boolean",
    "is_function",
    "is_iterable",
    "is_nil",
    "is_null",
    "is_number",
    "is_plain_object",
    "is_promise",
    "is_string",
    "is_undefined",
    "kebab_case",
    "keys",
    "load_settings",
    "median",
    "memoize",
    "merge",
    "omit",
    "once",
    "parallel",
    "partial",
    "percentile",
    "pick",
    "pipe",
    "pluck",
    "random_int",
    "random_string",
    "retry",
    "reverse",
    "round_half_up",
    "sample",
    "shuffle",
    "sleep",
    "snake_case",
    "strip_tags",
    "sum_values",
    "throttle",
    "timeout",
    "transform_keys",
    "truncate",
    "union",
    "unix",
    "values",
    "__version__",
]
