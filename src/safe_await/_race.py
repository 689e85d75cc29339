"""First-settle-wins race between an operation and an optional deadline."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable

T = TypeVar("T")

logger = logging.getLogger(__name__)


def consume_future_exception(fut: asyncio.Future[Any]) -> None:
    """Avoid 'exception was never retrieved' for abandoned operations."""
    try:
        _ = fut.exception()
    except asyncio.CancelledError:
        return


async def first_settled(
    operation: Awaitable[T],
    *,
    deadline_s: float | None = None,
    on_deadline: BaseException | None = None,
) -> T:
    """Await *operation*, failing with *on_deadline* if *deadline_s* passes first.

    The operation and the timer feed one single-assignment slot; whichever
    settles it first wins. The timer is cancelled as soon as the operation
    wins and again on every exit path. The operation is never cancelled: when
    the deadline wins it keeps running and its outcome is discarded.
    """
    fut = asyncio.ensure_future(operation)
    loop = asyncio.get_running_loop()
    slot: asyncio.Future[T] = loop.create_future()
    timer: asyncio.TimerHandle | None = None

    def _operation_done(done: asyncio.Future[T]) -> None:
        if timer is not None:
            timer.cancel()
        if slot.done():
            consume_future_exception(done)
            logger.debug("Abandoned operation settled after the race was decided")
            return
        if done.cancelled():
            slot.cancel()
            return
        exc = done.exception()
        if exc is not None:
            slot.set_exception(exc)
        else:
            slot.set_result(done.result())

    def _deadline_reached() -> None:
        if slot.done():
            return
        logger.debug("Deadline of %ss reached; abandoning operation", deadline_s)
        slot.set_exception(on_deadline or TimeoutError())

    # An already settled operation never needs a timer.
    if deadline_s is not None and not fut.done():
        timer = loop.call_later(deadline_s, _deadline_reached)
    fut.add_done_callback(_operation_done)

    try:
        return await slot
    finally:
        if timer is not None:
            timer.cancel()
