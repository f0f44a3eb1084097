from sundries.core.exceptions import (
    InvalidArgumentError as InvalidArgumentError,
    OperationTimeoutError as OperationTimeoutError,
    SundriesError as SundriesError,
)
from sundries.core.types import (
    MISSING as MISSING,
    RetryOptions as RetryOptions,
    Task as Task,
    ValueCategory as ValueCategory,
    categorize as categorize,
)
