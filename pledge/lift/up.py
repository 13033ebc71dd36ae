"""
Подъем значений в Future.

Turning plain values, kungfu Results, LazyCoroResults and asyncio awaitables
into a Future that settles with them.
"""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Awaitable, Callable

from kungfu import Error, LazyCoroResult, Ok, Result

from ..future import Future

logger = logging.getLogger(__name__)


def resolved[T](value: T) -> Future[T, typing.Never]:
    """
    Lift a value into an already-succeeded Future.

    Example:
        from pledge import lift as L

        user = L.up.resolved(User(id=42))
        user.on_success(print)  # prints right away
    """
    return Future.resolved(value)


def rejected[E](error: E) -> Future[typing.Never, E]:
    """Create an already-failed Future. Dual of resolved()."""
    return Future.rejected(error)


def from_result[T, E](result: Result[T, E]) -> Future[T, E]:
    """
    Lift an already-computed Result: Ok resolves, Error rejects.

    Example:
        from pledge import lift as L

        def validate(raw: str) -> Result[int, str]: ...

        L.up.from_result(validate("42")).on_success(store)
    """
    future: Future[T, E] = Future()
    from_result_into(future, result)
    return future


def from_awaitable[T](awaitable: Awaitable[T]) -> Future[T, BaseException]:
    """
    Schedule an awaitable on the running loop and settle with its outcome.

    A returned value resolves the future, a raised exception rejects it with
    that exception, and cancellation rejects it with ``CancelledError``.

    NOTE: Must be called from inside a running event loop.
    """
    loop = asyncio.get_running_loop()
    task = asyncio.ensure_future(awaitable, loop=loop)
    future: Future[T, BaseException] = Future()
    _track(task, _settle_from_task(future, _resolve_value))
    return future


def from_lazy_coro_result[T, E](
    lazy: LazyCoroResult[T, E],
) -> Future[T, E | BaseException]:
    """
    Run a kungfu LazyCoroResult on the running loop and settle with its Result.

    ``Ok`` resolves and ``Error`` rejects. An exception escaping the
    computation rejects with the exception itself.

    NOTE: Must be called from inside a running event loop.
    """

    async def run() -> Result[T, E]:
        return await lazy

    loop = asyncio.get_running_loop()
    task = loop.create_task(run())
    future: Future[T, E | BaseException] = Future()
    _track(task, _settle_from_task(future, from_result_into))
    return future


# Task completion -> Future settlement

# The loop only keeps weak references to tasks; a task must stay reachable
# until it finishes or its Future never settles.
_pending: set[asyncio.Future[typing.Any]] = set()


def _track[R](
    task: asyncio.Future[R],
    done: Callable[[asyncio.Future[R]], None],
) -> None:
    _pending.add(task)
    task.add_done_callback(_pending.discard)
    task.add_done_callback(done)


def _resolve_value[T, E](future: Future[T, E], value: T) -> None:
    future.resolve(value)


def from_result_into[T, E](future: Future[T, E], result: Result[T, E]) -> None:
    """Settle ``future`` with an existing Result."""
    match result:
        case Ok(value):
            future.resolve(value)
        case Error(error):
            future.reject(error)


def _settle_from_task[R, T, E](
    future: Future[T, E],
    settle: Callable[[Future[T, E], R], None],
) -> Callable[[asyncio.Future[R]], None]:
    def done(task: asyncio.Future[R]) -> None:
        if task.cancelled():
            logger.debug("Task %r cancelled, rejecting %r", task, future)
            future.reject(typing.cast(E, asyncio.CancelledError()))
            return
        exc = task.exception()
        if exc is not None:
            future.reject(typing.cast(E, exc))
            return
        settle(future, task.result())

    return done


__all__ = (
    "resolved",
    "rejected",
    "from_result",
    "from_result_into",
    "from_awaitable",
    "from_lazy_coro_result",
)
