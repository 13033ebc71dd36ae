"""
Опускание Future в значение.

Waiting for a Future on an asyncio loop and getting its outcome back as a
kungfu Result, a plain value, or a lazy kungfu computation.
"""

from __future__ import annotations

import asyncio

from kungfu import Error, LazyCoroResult, Ok, Result

from .._types import Unsettled
from ..future import Future


async def to_result[T, E](future: Future[T, E]) -> Result[T, E]:
    """
    Wait for settlement and return the outcome as a Result.

    **When to use:** Standard way to consume a Future from async code.

    Example:
        from pledge import lift as L

        result = await L.down.to_result(upload)
        # result: Ok(...) or Error(...)

        # Or await the future directly:
        result = await upload

    NOTE: The loop is never blocked. A future settled from another thread
          hands its outcome over with call_soon_threadsafe.
    """
    match future.outcome:
        case Unsettled():
            pass
        case settled:
            return settled

    loop = asyncio.get_running_loop()
    waiter: asyncio.Future[Result[T, E]] = loop.create_future()

    def settle(outcome: Result[T, E]) -> None:
        if not waiter.done():
            waiter.set_result(outcome)

    def schedule(outcome: Result[T, E]) -> None:
        # the waiter may be cancelled, or its loop gone, long before settlement
        if waiter.done() or loop.is_closed():
            return
        loop.call_soon_threadsafe(settle, outcome)

    def on_success(value: T) -> None:
        schedule(Ok(value))

    def on_failure(error: E) -> None:
        schedule(Error(error))

    future.on_success(on_success).on_failure(on_failure)
    try:
        return await waiter
    finally:
        future.remove_callback(on_success).remove_callback(on_failure)


async def unsafe[T, E](future: Future[T, E]) -> T:
    """
    Wait and unwrap, raises on Error.

    **When to use:** When failure should become an exception.
    """
    result = await to_result(future)
    return result.unwrap()


async def or_else[T, E](future: Future[T, E], default: T) -> T:
    """
    Wait and return the value, or ``default`` if the future failed.

    Example:
        from pledge import lift as L

        avatar = await L.down.or_else(fetch_avatar(user), default=PLACEHOLDER)
    """
    result = await to_result(future)
    match result:
        case Ok(v):
            return v
        case Error(_):
            return default


def to_lazy_coro_result[T, E](future: Future[T, E]) -> LazyCoroResult[T, E]:
    """
    Wrap a Future as a kungfu LazyCoroResult that waits for it when run.

    Lets a Future take part in kungfu pipelines (``.map``, ``.then``, ...).
    """

    async def run() -> Result[T, E]:
        return await to_result(future)

    return LazyCoroResult(run)


__all__ = (
    "to_result",
    "unsafe",
    "or_else",
    "to_lazy_coro_result",
)
