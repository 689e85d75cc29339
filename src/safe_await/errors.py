"""Exception hierarchy for safe-await."""

from __future__ import annotations

from typing import Any


class SafeAwaitError(Exception):
    """Base exception for all safe-await errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(SafeAwaitError):
    """Options validation failed."""


class OperationTimeoutError(SafeAwaitError, TimeoutError):
    """The wrapped operation did not settle before its deadline.

    Subclasses the built-in ``TimeoutError`` so callers can branch with a plain
    ``isinstance`` check instead of matching on the message.
    """

    def __init__(self, timeout_ms: float) -> None:
        super().__init__(
            f"Operation timed out after {timeout_ms}ms",
            hint="Raise timeout_ms or investigate why the operation is slow.",
        )
        self.timeout_ms = timeout_ms


class UnwrapError(SafeAwaitError):
    """``unwrap()`` was called on a Failure holding a non-exception error."""

    def __init__(self, error: Any) -> None:
        super().__init__(
            f"Called unwrap() on a Failure: {error!r}",
            hint="Check is_success() first or use unwrap_or().",
        )
        self.error = error
