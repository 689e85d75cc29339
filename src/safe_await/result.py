"""Result type returned by ``safe_await``.

A result is either ``Success(value)`` or ``Failure(error)``. The two variants
are separate classes, so a result can never carry both a value and an error.
"""

from __future__ import annotations

import dataclasses
from typing import TypeGuard

from safe_await.errors import UnwrapError


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T]:
    """The operation (and any ``on_success`` transform) completed."""

    value: T


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[E]:
    """The operation failed, timed out, or a transform raised."""

    error: E


type Result[T, E] = Success[T] | Failure[E]


def is_success[T, E](result: Result[T, E]) -> TypeGuard[Success[T]]:
    return isinstance(result, Success)


def is_failure[T, E](result: Result[T, E]) -> TypeGuard[Failure[E]]:
    return isinstance(result, Failure)


def unwrap[T, E](result: Result[T, E]) -> T:
    """Return the success value or raise.

    Exception errors are re-raised as-is; any other error value is wrapped in
    ``UnwrapError``.
    """
    if isinstance(result, Success):
        return result.value
    if isinstance(result.error, BaseException):
        raise result.error
    raise UnwrapError(result.error)


def unwrap_or[T, E, D](result: Result[T, E], default: D) -> T | D:
    if isinstance(result, Success):
        return result.value
    return default
