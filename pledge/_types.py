"""
Core type definitions for pledge.

Callback shapes, executor shapes and the outcome union shared by the
future and its combinators.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Result

# ============================================================================
# Outcome
# ============================================================================


@typing.final
class Unsettled:
    """Marker for a future that has neither succeeded nor failed yet."""

    __slots__ = ()

    _instance: typing.ClassVar[Unsettled | None] = None

    def __new__(cls) -> Unsettled:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Unsettled"

    def __bool__(self) -> bool:
        return False


UNSETTLED = Unsettled()

# Outcome = Unsettled | Ok(T) | Error(E)
type Outcome[T, E] = Unsettled | Result[T, E]

# ============================================================================
# Callbacks
# ============================================================================

type SuccessCallback[T] = Callable[[T], object]
type FailureCallback[E] = Callable[[E], object]
type SettledCallback = Callable[[], object]

# (percent, message) -> ...
# NOTE: percent is caller telemetry, nothing bounds it to [0, 1].
type ProgressCallback = Callable[[float, str | None], object]

# ============================================================================
# Executors
# ============================================================================

type Resolve[T] = Callable[[T], object]
type Reject[E] = Callable[[E], object]
type Progress = Callable[[float, str | None], object]

type Executor[T, E] = (
    Callable[[Resolve[T], Reject[E]], object]
    | Callable[[Resolve[T], Reject[E], Progress], object]
)

__all__ = (
    # Outcome
    "Unsettled",
    "UNSETTLED",
    "Outcome",
    # Callbacks
    "SuccessCallback",
    "FailureCallback",
    "SettledCallback",
    "ProgressCallback",
    # Executors
    "Resolve",
    "Reject",
    "Progress",
    "Executor",
)
