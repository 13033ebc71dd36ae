"""
Tests for the gather (all) combinator.
"""

from kungfu import Error, Ok

from pledge import Future, gather


def unpack(outcome):
    match outcome:
        case Ok(value):
            return ("ok", value)
        case Error(error):
            return ("error", error)
    return outcome


class TestGatherSuccess:
    """All inputs succeed."""

    def test_waits_for_every_future(self):
        a, b = Future(), Future()
        settled = []
        aggregate = gather([a, b]).on_settled(lambda: settled.append(True))

        a.resolve(1)
        assert not aggregate.is_settled
        assert settled == []

        b.resolve(2)
        assert unpack(aggregate.outcome) == ("ok", [1, 2])
        assert settled == [True]

    def test_preserves_input_order(self):
        a, b, c = Future(), Future(), Future()
        aggregate = gather([a, b, c])
        c.resolve("c")
        a.resolve("a")
        b.resolve("b")
        assert unpack(aggregate.outcome) == ("ok", ["a", "b", "c"])

    def test_already_settled_inputs(self):
        aggregate = gather([Future.resolved(1), Future.resolved(2)])
        assert unpack(aggregate.outcome) == ("ok", [1, 2])

    def test_executor_inputs(self):
        aggregate = gather(
            [
                Future(lambda resolve, reject: resolve("x")),
                Future(lambda resolve, reject: resolve("y")),
            ]
        )
        assert unpack(aggregate.outcome) == ("ok", ["x", "y"])

    def test_empty_input_resolves_immediately(self):
        values = []
        aggregate = gather([]).on_success(values.append)
        assert unpack(aggregate.outcome) == ("ok", [])
        assert values == [[]]

    def test_same_future_twice(self):
        a = Future()
        aggregate = gather([a, a])
        a.resolve(9)
        assert unpack(aggregate.outcome) == ("ok", [9, 9])

    def test_future_all_alias(self):
        a = Future()
        aggregate = Future.all([a, Future.resolved(2)])
        a.resolve(1)
        assert unpack(aggregate.outcome) == ("ok", [1, 2])


class TestGatherFailure:
    """First failure wins."""

    def test_rejects_with_first_error(self):
        c, d, e, f = Future(), Future(), Future(), Future()
        err1, err2 = RuntimeError("err1"), RuntimeError("err2")
        calls = {"ok": 0, "err": [], "settled": 0}

        def on_ok(_):
            calls["ok"] += 1

        def on_settled():
            calls["settled"] += 1

        aggregate = (
            gather([c, d, e, f])
            .on_success(on_ok)
            .on_failure(calls["err"].append)
            .on_settled(on_settled)
        )

        c.resolve(0)
        assert not aggregate.is_settled

        d.reject(err1)
        assert unpack(aggregate.outcome) == ("error", err1)
        assert calls == {"ok": 0, "err": [err1], "settled": 1}

        e.resolve(0)
        f.reject(err2)
        assert unpack(aggregate.outcome) == ("error", err1)
        assert calls == {"ok": 0, "err": [err1], "settled": 1}

    def test_error_is_not_wrapped(self):
        err = KeyError("missing")
        aggregate = gather([Future(), Future.rejected(err)])
        match aggregate.outcome:
            case Error(error):
                assert error is err
            case _:
                raise AssertionError(aggregate.outcome)

    def test_already_failed_inputs_tie_break_by_order(self):
        aggregate = gather([Future.resolved(1), Future.rejected("first"), Future.rejected("second")])
        assert unpack(aggregate.outcome) == ("error", "first")

    def test_success_after_failure_does_not_resolve(self):
        a, b = Future(), Future()
        aggregate = gather([a, b])
        a.reject("boom")
        b.resolve(2)
        assert unpack(aggregate.outcome) == ("error", "boom")
