from __future__ import annotations

class EmptyRaceError(Exception):
    """race() was given no futures and its policy asks for a failure."""

    def __init__(self) -> None:
        super().__init__("race() received no futures to race")

__all__ = ("EmptyRaceError",)
