from __future__ import annotations

from _infra import FakeBackend, User, banner, run

from pledge import Future, RacePolicy, gather, race
from pledge import lift as L
from kungfu import Error, LazyCoroResult, Ok


def fetch(backend: FakeBackend, user_id: int) -> Future[User, object]:
    return L.up.from_lazy_coro_result(LazyCoroResult(lambda: backend.fetch_user(user_id)))


async def main() -> None:
    banner("02_gather_race: race replicas, gather users")

    replicas = [
        FakeBackend(name="replica-a", delay_seconds=0.03),
        FakeBackend(name="replica-b", delay_seconds=0.01),
        FakeBackend(name="replica-c", delay_seconds=0.02, fail=True),
    ]

    fastest = race([fetch(r, 42) for r in replicas])
    match await fastest:
        case Ok(user):
            print(f"race winner: {user.name}")
        case Error(err):
            print(f"race lost: {err!r}")

    primary = FakeBackend(name="primary", delay_seconds=0.01)
    users = gather([fetch(primary, user_id) for user_id in (1, 2, 3)])
    users.on_success(lambda found: print([u.name for u in found]))
    await users

    # Any failure fails the whole batch with that error.
    flaky = FakeBackend(name="flaky", fail=True)
    match await gather([fetch(primary, 1), fetch(flaky, 2)]):
        case Ok(found):
            print(f"unexpected: {found}")
        case Error(err):
            print(f"batch failed: {err}")

    empty = race([], policy=RacePolicy(on_empty="reject"))
    print(f"empty race: {empty!r}")


if __name__ == "__main__":
    run(main)
