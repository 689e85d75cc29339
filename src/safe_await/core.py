"""``safe_await``: turn an awaitable's outcome into a Result."""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import TYPE_CHECKING, Any

from safe_await._race import first_settled
from safe_await.errors import OperationTimeoutError
from safe_await.options import Options
from safe_await.result import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from safe_await.options import ErrorTransform
    from safe_await.result import Result

logger = logging.getLogger(__name__)


async def _resolve(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


async def safe_await(
    operation: Awaitable[Any],
    options: Options | None = None,
) -> Result[Any, Any]:
    """Await *operation* and return its outcome instead of raising.

    Args:
        operation: A coroutine, Task, or Future to wait for.
        options: Optional transforms and deadline.

    Returns:
        ``Success`` with the (transformed) value, or ``Failure`` with the
        (transformed) error. A deadline miss yields ``Failure`` holding an
        ``OperationTimeoutError`` and skips ``on_error``.

    Example:
        result = await safe_await(fetch_user(1), Options(timeout_ms=500))
        match result:
            case Success(value=user):
                print(user)
            case Failure(error=err):
                print("failed:", err)
    """
    opts = options if options is not None else Options()
    deadline_s = opts.deadline_s
    timeout_error = (
        OperationTimeoutError(opts.timeout_ms)
        if deadline_s is not None and opts.timeout_ms is not None
        else None
    )

    try:
        value = await first_settled(
            operation, deadline_s=deadline_s, on_deadline=timeout_error
        )
        if opts.on_success is not None:
            value = await _resolve(opts.on_success(value))
    except asyncio.CancelledError:
        raise
    except Exception as exc:
        if exc is timeout_error:
            return Failure(exc)
        return await _fail(exc, opts.on_error)
    return Success(value)


async def _fail(exc: Exception, on_error: ErrorTransform | None) -> Failure[Any]:
    if on_error is None:
        return Failure(exc)
    try:
        return Failure(await _resolve(on_error(exc)))
    except asyncio.CancelledError:
        raise
    except Exception as transform_exc:
        # Not fed back into on_error.
        logger.debug("on_error transform failed: %s", transform_exc)
        return Failure(transform_exc)
