"""tagged_result: explicit success/failure values instead of exceptions.

Public API:
    - success() / failure(): Result constructors
    - Success / Failure: the two Result variants
    - Result / AsyncResult: type aliases over the variants
    - is_success() / is_failure(): narrowing type guards
    - ResultError: raised when the wrong variant is unwrapped
"""

from __future__ import annotations

import logging

from tagged_result.errors import ResultError
from tagged_result.result import (
    AsyncResult,
    Failure,
    Result,
    Success,
    failure,
    is_failure,
    is_success,
    success,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("tagged-result")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("tagged_result").addHandler(logging.NullHandler())

__all__ = [
    "AsyncResult",
    "Failure",
    "Result",
    "ResultError",
    "Success",
    "failure",
    "is_failure",
    "is_success",
    "success",
]
