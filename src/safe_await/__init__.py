"""safe-await: await an operation and get a Result back instead of an exception.

Public API:
    - safe_await(): Await one operation with optional transforms and deadline
    - Options: Per-call transforms and timeout
    - Success / Failure / Result: The returned tagged union
"""

from __future__ import annotations

import logging

from safe_await.core import safe_await
from safe_await.errors import (
    ConfigurationError,
    OperationTimeoutError,
    SafeAwaitError,
    UnwrapError,
)
from safe_await.options import Options
from safe_await.result import (
    Failure,
    Result,
    Success,
    is_failure,
    is_success,
    unwrap,
    unwrap_or,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("safe-await")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("safe_await").addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "Failure",
    "OperationTimeoutError",
    "Options",
    "Result",
    "SafeAwaitError",
    "Success",
    "UnwrapError",
    "is_failure",
    "is_success",
    "safe_await",
    "unwrap",
    "unwrap_or",
]
