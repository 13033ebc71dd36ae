"""
Race combinator
===============

Settle with whichever future settles first.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from .._errors import EmptyRaceError
from ..future import Future

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RacePolicy:
    """Configuration for race: what an empty race does."""

    on_empty: Literal["pending", "reject"] = "pending"

    def __post_init__(self) -> None:
        if self.on_empty not in ("pending", "reject"):
            raise ValueError("RacePolicy.on_empty must be 'pending' or 'reject'")


def race[T, E](
    futures: Sequence[Future[T, E]],
    /,
    *,
    policy: RacePolicy = RacePolicy(),
) -> Future[T, E]:
    """
    Return a future mirroring the first input to settle, success or failure.

    Futures already settled win in input order. The output's own settlement
    is idempotent, so the handlers left on the losers are harmless.

    With no futures the result never settles, unless ``policy.on_empty`` is
    ``"reject"``, in which case it fails with ``EmptyRaceError``.
    """
    output: Future[T, E] = Future()
    if not futures:
        if policy.on_empty == "reject":
            logger.debug("Empty race rejected by policy")
            output.reject(EmptyRaceError())  # type: ignore[arg-type]
        return output

    for future in futures:
        future.on_success(output.resolve).on_failure(output.reject)

    return output


__all__ = ("RacePolicy", "race")
