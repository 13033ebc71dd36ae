"""
Single-settlement futures with replayed callbacks.

A Future holds the eventual outcome of an operation. Producers settle it
once; consumers register callbacks before or after and see the same result.

Architecture:
- Future                  - state machine (resolve/reject/progress + on_* registration)
- gather / race           - combinators building a Future from other Futures
- lift.up / lift.down     - bridges to asyncio and kungfu Result types
"""

import logging

# Core types
from ._types import Outcome, Unsettled, UNSETTLED
from ._errors import EmptyRaceError

# Future
from .future import Future

# Combinators
from .concurrency import RacePolicy, gather, race

# Lift helpers
from . import lift
from .lift import from_result, rejected, resolved

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Core types
    "Outcome",
    "Unsettled",
    "UNSETTLED",
    # Errors
    "EmptyRaceError",
    # Future
    "Future",
    # Combinators
    "RacePolicy",
    "gather",
    "race",
    # Lift
    "lift",
    "resolved",
    "rejected",
    "from_result",
)
