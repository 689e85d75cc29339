"""Test helpers for observing event-loop timers and background failures."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest


def spy_call_later(
    monkeypatch: pytest.MonkeyPatch, loop: asyncio.AbstractEventLoop
) -> list[tuple[float, asyncio.TimerHandle]]:
    """Record every ``loop.call_later`` as ``(delay, handle)``."""
    calls: list[tuple[float, asyncio.TimerHandle]] = []
    original = loop.call_later

    def _spy(delay: float, callback: Any, *args: Any, **kwargs: Any) -> Any:
        handle = original(delay, callback, *args, **kwargs)
        calls.append((delay, handle))
        return handle

    monkeypatch.setattr(loop, "call_later", _spy)
    return calls


def timers_with_delay(
    calls: list[tuple[float, asyncio.TimerHandle]], delay: float
) -> list[asyncio.TimerHandle]:
    return [handle for d, handle in calls if d == delay]


def collect_loop_errors(loop: asyncio.AbstractEventLoop) -> list[dict[str, Any]]:
    """Route unhandled loop errors into a list instead of the default logger."""
    errors: list[dict[str, Any]] = []
    loop.set_exception_handler(lambda _loop, context: errors.append(context))
    return errors


async def resolved(value: Any) -> Any:
    return value


async def rejected(exc: BaseException) -> Any:
    raise exc


async def delayed(delay_s: float, value: Any = None) -> Any:
    await asyncio.sleep(delay_s)
    return value
