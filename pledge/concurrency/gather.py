"""
Gather combinator
=================

The ``all`` combinator: wait for every future, fail on the first failure.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Sequence

from ..future import Future


def gather[T, E](futures: Sequence[Future[T, E]], /) -> Future[list[T], E]:
    """
    Succeed with every value, in input order, once all futures have succeeded.

    Fails with the error of the first future to fail, verbatim. Futures that
    are already settled count in registration (input) order, so ties go to
    the earliest index. Later outcomes are ignored.

    Example:
        users = gather([fetch_user(1), fetch_user(2)])
        users.on_success(lambda both: render(*both))

    An empty input succeeds immediately with ``[]``.
    """
    output: Future[list[T], E] = Future()
    if not futures:
        return output.resolve([])

    remaining = len(futures)
    results: list[T | None] = [None] * len(futures)
    has_failed = False

    def on_success(index: int) -> Callable[[T], None]:
        def store(value: T) -> None:
            nonlocal remaining
            if has_failed:
                return
            results[index] = value
            remaining -= 1
            if remaining == 0:
                output.resolve(typing.cast(list[T], list(results)))

        return store

    def on_failure(error: E) -> None:
        nonlocal has_failed
        if has_failed:
            return
        has_failed = True
        output.reject(error)

    for index, future in enumerate(futures):
        future.on_success(on_success(index)).on_failure(on_failure)

    return output


__all__ = ("gather",)
