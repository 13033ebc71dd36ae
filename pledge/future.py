"""
Future
======

Single-settlement container for the eventual outcome of an operation.

A producer settles a future once, with ``resolve`` or ``reject``, and may
report progress before that. Consumers register reactions at any time: a
reaction registered after settlement is replayed immediately, one registered
before is queued and fired at settlement. Either way it runs exactly once.

Everything here is synchronous. Callbacks run on whatever context calls
``resolve``/``reject``/``progress``; there is no scheduler and no locking.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Generator, Sequence
from typing import Self

from kungfu import Error, Ok, Result

from ._helpers import accepts_progress, fire, invoke
from ._types import (
    UNSETTLED,
    Executor,
    FailureCallback,
    Outcome,
    ProgressCallback,
    SettledCallback,
    SuccessCallback,
    Unsettled,
)

if typing.TYPE_CHECKING:
    from .concurrency.race import RacePolicy

logger = logging.getLogger(__name__)


class Future[T, E]:
    """
    Eventual outcome of an operation: ``Unsettled``, ``Ok(value)`` or ``Error(error)``.

    Every operation returns the future itself, so registrations chain:

        Future(fetch).on_success(show).on_failure(report).on_settled(hide_spinner)

    Settlement is idempotent: the first ``resolve``/``reject`` wins and later
    calls are ignored, which makes a future safe to hand to racing producers.
    """

    __slots__ = (
        "_outcome",
        "_on_success",
        "_on_failure",
        "_on_settled",
        "_on_progress",
        "__weakref__",
    )

    def __init__(self, executor: Executor[T, E] | None = None, /) -> None:
        """
        Create an unsettled future.

        When ``executor`` is given it runs right away, exactly once, with this
        future's ``resolve`` and ``reject`` (plus ``progress`` if it accepts a
        third argument). If the executor raises before settling, the future is
        rejected with the raised exception.
        """
        self._outcome: Outcome[T, E] = UNSETTLED
        self._on_success: list[SuccessCallback[T]] = []
        self._on_failure: list[FailureCallback[E]] = []
        self._on_settled: list[SettledCallback] = []
        self._on_progress: list[ProgressCallback] = []
        if executor is not None:
            self._execute(executor)

    # Constructors

    @staticmethod
    def resolved[V](value: V, /) -> Future[V, typing.Never]:
        """Create a future that has already succeeded with ``value``."""
        future: Future[V, typing.Never] = Future()
        return future.resolve(value)

    @staticmethod
    def rejected[Err](error: Err, /) -> Future[typing.Never, Err]:
        """Create a future that has already failed with ``error``."""
        future: Future[typing.Never, Err] = Future()
        return future.reject(error)

    @staticmethod
    def all[V, Err](futures: Sequence[Future[V, Err]], /) -> Future[list[V], Err]:
        """Succeed with every value in input order, or fail with the first error."""
        from .concurrency.gather import gather

        return gather(futures)

    @staticmethod
    def race[V, Err](
        futures: Sequence[Future[V, Err]],
        /,
        *,
        policy: RacePolicy | None = None,
    ) -> Future[V, Err]:
        """Settle like whichever future settles first."""
        from .concurrency.race import RacePolicy, race

        return race(futures, policy=policy or RacePolicy())

    # State

    @property
    def outcome(self) -> Outcome[T, E]:
        """``Unsettled``, ``Ok(value)`` or ``Error(error)``."""
        return self._outcome

    @property
    def is_settled(self) -> bool:
        return not isinstance(self._outcome, Unsettled)

    @property
    def is_succeeded(self) -> bool:
        return isinstance(self._outcome, Ok)

    @property
    def is_failed(self) -> bool:
        return isinstance(self._outcome, Error)

    # Settlement

    def resolve(self, value: T, /) -> Self:
        """Succeed with ``value`` unless already settled."""
        if self.is_settled:
            logger.debug("Ignoring resolve(%r) on settled %r", value, self)
            return self
        self._settle(Ok(value))
        return self

    def reject(self, error: E, /) -> Self:
        """Fail with ``error`` unless already settled."""
        if self.is_settled:
            logger.debug("Ignoring reject(%r) on settled %r", error, self)
            return self
        self._settle(Error(error))
        return self

    def progress(self, percent: float, message: str | None = None, /) -> Self:
        """
        Report partial completion to the progress callbacks.

        Dropped once the future is settled. ``percent`` is passed through as
        given; nothing checks that it lies in [0, 1] or only grows.
        """
        for callback in tuple(self._on_progress):
            # a progress callback may settle the future
            if self.is_settled:
                break
            invoke(callback, percent, message)
        return self

    # Registration

    def on_success(self, callback: SuccessCallback[T], /) -> Self:
        """Call ``callback(value)`` once the future succeeds (now, if it already has)."""
        match self._outcome:
            case Unsettled():
                self._on_success.append(callback)
            case Ok(value):
                invoke(callback, value)
            case Error(_):
                pass
        return self

    def on_failure(self, callback: FailureCallback[E], /) -> Self:
        """Call ``callback(error)`` once the future fails (now, if it already has)."""
        match self._outcome:
            case Unsettled():
                self._on_failure.append(callback)
            case Error(error):
                invoke(callback, error)
            case Ok(_):
                pass
        return self

    def on_settled(self, callback: SettledCallback, /) -> Self:
        """Call ``callback()`` after either outcome, following the success/failure callbacks."""
        if self.is_settled:
            invoke(callback)
        else:
            self._on_settled.append(callback)
        return self

    def on_progress(self, callback: ProgressCallback, /) -> Self:
        """Call ``callback(percent, message)`` on every progress report until settlement."""
        # progress is transient: nothing to replay, nothing to fire after settlement
        if not self.is_settled:
            self._on_progress.append(callback)
        return self

    def remove_callback(self, callback: typing.Callable[..., object], /) -> Self:
        """
        Drop every queued registration of ``callback``.

        Has no effect on callbacks that already fired or were never registered.
        """
        for queue in (self._on_success, self._on_failure, self._on_settled, self._on_progress):
            queue[:] = [registered for registered in queue if registered != callback]
        return self

    # Internals

    def _execute(self, executor: Executor[T, E]) -> None:
        try:
            if accepts_progress(executor):
                typing.cast(typing.Any, executor)(self.resolve, self.reject, self.progress)
            else:
                typing.cast(typing.Any, executor)(self.resolve, self.reject)
        except Exception as exc:
            if not self.is_settled:
                logger.debug("Executor %r raised %r, rejecting", executor, exc)
            self.reject(typing.cast(E, exc))

    def _settle(self, outcome: Result[T, E]) -> None:
        # Queues are detached before firing so that a callback registering
        # another one gets replay instead of a second invocation.
        self._outcome = outcome
        on_success, self._on_success = self._on_success, []
        on_failure, self._on_failure = self._on_failure, []
        on_settled, self._on_settled = self._on_settled, []
        self._on_progress = []

        match outcome:
            case Ok(value):
                fire(on_success, value)
            case Error(error):
                fire(on_failure, error)
        fire(on_settled)

    # Protocol methods

    def __await__(self) -> Generator[typing.Any, None, Result[T, E]]:
        """Wait for settlement on the running event loop, yielding the outcome as a Result."""
        from .lift.down import to_result

        return to_result(self).__await__()

    def __repr__(self) -> str:
        return f"Future({self._outcome!r})"


__all__ = ("Future",)
