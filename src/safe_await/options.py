"""Per-call options for ``safe_await``."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
import numbers
from typing import Any

from safe_await.errors import ConfigurationError

SuccessTransform = Callable[[Any], Any | Awaitable[Any]]
ErrorTransform = Callable[[Any], Any | Awaitable[Any]]


@dataclass(frozen=True)
class Options:
    """Optional transforms and deadline for a single ``safe_await`` call.

    Example:
        options = Options(on_success=lambda n: f"Number is {n}", timeout_ms=50)
        result = await safe_await(fetch_number(), options)
    """

    #: Maps the resolved value; may be sync or async.
    on_success: SuccessTransform | None = None
    #: Maps a caught error; never invoked for this call's own timeout.
    on_error: ErrorTransform | None = None
    #: Zero, negative, or *None* disables the deadline.
    timeout_ms: float | None = None

    def __post_init__(self) -> None:
        """Validate option shapes early for clear errors."""
        if self.on_success is not None and not callable(self.on_success):
            raise ConfigurationError(
                "on_success must be callable",
                hint="Pass on_success=lambda value: ... or an async function.",
            )

        if self.on_error is not None and not callable(self.on_error):
            raise ConfigurationError(
                "on_error must be callable",
                hint="Pass on_error=lambda exc: ... or an async function.",
            )

        if self.timeout_ms is not None and (
            isinstance(self.timeout_ms, bool)
            or not isinstance(self.timeout_ms, numbers.Real)
        ):
            raise ConfigurationError(
                f"timeout_ms must be a number, got {type(self.timeout_ms).__name__}",
                hint="Pass timeout_ms=5000 for a five second deadline.",
            )

    @property
    def deadline_s(self) -> float | None:
        """Deadline in seconds, or *None* when no timer should be created."""
        if self.timeout_ms is None or not self.timeout_ms > 0:
            return None
        return self.timeout_ms / 1000
