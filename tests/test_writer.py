"""
Tests for the logged kind (writer monad)
"""
import pytest

from chainbind import (
    LOGGED,
    KindMismatchError,
    Log,
    Logged,
    bind,
    bind_chain_logged,
    bind_logged,
    logged,
    tell,
    unit_logged,
)


def append(entry: str):
    def step(value):
        return logged(value, entry)
    return step


def test_unit_has_empty_log():
    wrapped = unit_logged(987)

    assert wrapped.value == 987
    assert wrapped.log == []
    assert LOGGED.unit(987) == wrapped


def test_two_steps_accumulate_in_call_order():
    result = bind_chain_logged(unit_logged("x"), append("first"), append("second"))

    assert result.log == ["first", "second"]


def test_existing_log_comes_first():
    result = bind_logged(logged(1, "created"), lambda n: logged(n + 1, "incremented"))

    assert result == Logged(2, ["created", "incremented"])


def test_transform_runs_exactly_once(counting):
    stub = counting(append("once"))

    result = bind(unit_logged("v"), stub)

    assert stub.calls == 1
    assert result.log == ["once"]


def test_value_type_can_change():
    result = bind_logged(unit_logged("21"), lambda s: logged(int(s) * 2, "parsed"))

    assert result.value == 42


def test_tell_carries_only_log():
    told = tell("a", "b")

    assert told.value is None
    assert told.log == ["a", "b"]


def test_logged_is_not_affected_by_caller_list():
    entries = ["a"]
    wrapped = Logged(1, entries)
    entries.append("b")
    wrapped.log.append("c")

    assert wrapped.log == ["a"]


def test_logged_match_args():
    match logged(3, "three"):
        case Logged(value, log):
            assert value == 3
            assert log == ["three"]


def test_log_combine_does_not_mutate():
    left = Log.of("a")
    right = Log.of("b")

    combined = left.combine(right)

    assert combined == ["a", "b"]
    assert left == ["a"]
    assert right == ["b"]


def test_log_tell_and_render():
    log = Log.of("first").tell("second")

    assert isinstance(log, Log)
    assert log.render() == "first\nsecond"
    assert log.render(" | ") == "first | second"


def test_log_monoid_identity():
    x = Log.of(1, 2)

    assert Log().combine(x) == x
    assert x.combine(Log()) == x


def test_transform_returning_plain_value_is_rejected():
    with pytest.raises(KindMismatchError) as exc_info:
        bind_logged(unit_logged(1), lambda n: n + 1)

    assert exc_info.value.kind == "logged"
