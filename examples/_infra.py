"""Shared fakes for the examples. Run them after `pip install -e .`."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
from dataclasses import dataclass

from kungfu import Error, Ok, Result


class Failure(Exception):
    """Error value used by the example producers."""


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str


@dataclass(slots=True)
class FakeBackend:
    """A user store answering after `delay_seconds`, or always failing."""

    name: str
    delay_seconds: float = 0.0
    fail: bool = False

    async def fetch_user(self, user_id: int) -> Result[User, Failure]:
        await asyncio.sleep(self.delay_seconds)
        if self.fail:
            return Error(Failure(f"{self.name}: unavailable"))
        return Ok(User(id=user_id, name=f"user:{user_id}@{self.name}"))


def banner(title: str) -> None:
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    asyncio.run(main())
