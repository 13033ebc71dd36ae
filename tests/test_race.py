"""
Tests for the race combinator.
"""

import pytest
from kungfu import Error, Ok

from pledge import EmptyRaceError, Future, RacePolicy, race


def unpack(outcome):
    match outcome:
        case Ok(value):
            return ("ok", value)
        case Error(error):
            return ("error", error)
    return outcome


class TestRace:
    """First settlement wins."""

    def test_first_resolved_executor_wins(self):
        a = Future(lambda resolve, reject: resolve("a"))
        b = Future(lambda resolve, reject: resolve("b"))
        assert unpack(race([a, b]).outcome) == ("ok", "a")

    def test_first_rejected_executor_wins(self):
        err = RuntimeError("c failed")
        ran = []

        def ok(name):
            def executor(resolve, reject):
                ran.append(name)
                resolve(name)

            return executor

        c = Future(lambda resolve, reject: reject(err))
        d = Future(ok("d"))
        e = Future(ok("e"))
        assert unpack(race([c, d, e]).outcome) == ("error", err)
        assert ran == ["d", "e"]

    def test_pending_inputs_first_to_fire_wins(self):
        a, b = Future(), Future()
        results = []
        output = race([a, b]).on_success(results.append).on_failure(results.append)
        b.resolve("b")
        a.resolve("a")
        a.reject("late")
        assert unpack(output.outcome) == ("ok", "b")
        assert results == ["b"]

    def test_failure_first_then_success(self):
        a, b = Future(), Future()
        output = race([a, b])
        a.reject("a-err")
        b.resolve("b")
        assert unpack(output.outcome) == ("error", "a-err")

    def test_settled_callback_fires_once(self):
        a, b = Future(), Future()
        settled = []
        race([a, b]).on_settled(lambda: settled.append(True))
        a.resolve(1)
        b.resolve(2)
        assert settled == [True]

    def test_future_race_alias(self):
        a = Future()
        output = Future.race([a, Future()])
        a.resolve("won")
        assert unpack(output.outcome) == ("ok", "won")


class TestEmptyRace:
    """Empty input policy."""

    def test_default_never_settles(self):
        output = race([])
        assert not output.is_settled

    def test_reject_policy(self):
        output = race([], policy=RacePolicy(on_empty="reject"))
        match output.outcome:
            case Error(error):
                assert isinstance(error, EmptyRaceError)
            case _:
                raise AssertionError(output.outcome)

    def test_reject_policy_through_alias(self):
        output = Future.race([], policy=RacePolicy(on_empty="reject"))
        assert output.is_failed

    def test_policy_ignored_with_inputs(self):
        output = race([Future.resolved(1)], policy=RacePolicy(on_empty="reject"))
        assert unpack(output.outcome) == ("ok", 1)

    def test_invalid_policy(self):
        with pytest.raises(ValueError):
            RacePolicy(on_empty="explode")
