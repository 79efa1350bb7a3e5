"""
Tests for the sample transforms
"""
import math

import pytest
from kungfu import Nothing, Some

from chainbind import bind_chain, bind_chain_seq, bind_maybe, is_nothing, unit_logged, unwrap_or
from chainbind.samples import (
    add1,
    divide_by_2,
    divide_by_3,
    faces,
    flags,
    fruits,
    maybe_integer,
    multiply_by_2,
    parse_number,
    to_exponential,
    to_fixed,
)


def value_of(maybe):
    return unwrap_or(maybe, None)


@pytest.mark.parametrize("raw", [3.14, None, "8", True, math.nan, math.inf])
def test_maybe_integer_rejects_non_integers(raw):
    assert is_nothing(maybe_integer(raw))


def test_maybe_integer_normalizes_whole_floats():
    wrapped = maybe_integer(8.0)

    assert isinstance(wrapped, Some)
    assert value_of(wrapped) == 8
    assert isinstance(value_of(wrapped), int)


def test_add1_on_non_integer_is_nothing_not_error():
    result = add1(3.14)

    assert is_nothing(result)
    assert is_nothing(bind_maybe(result, add1))


def test_add1_then_multiply():
    assert value_of(bind_chain(maybe_integer(8), add1, multiply_by_2)) == 18


def test_exact_division():
    assert value_of(divide_by_2(10)) == 5
    assert value_of(divide_by_3(9)) == 3


def test_inexact_division_is_nothing():
    assert is_nothing(bind_chain(maybe_integer(8), add1, divide_by_2))
    assert value_of(bind_chain(maybe_integer(8), add1, divide_by_3)) == 3


def test_long_chain_fails_at_divide_by_3():
    # 8 -> 9 -> 18 -> 6 -> 3
    assert value_of(bind_chain(maybe_integer(8), add1, multiply_by_2, divide_by_3, divide_by_2)) == 3
    # 7 -> 8 -> 16 -> not divisible by 3
    assert isinstance(bind_chain(maybe_integer(7), add1, multiply_by_2, divide_by_3), Nothing)


def test_negative_division():
    assert value_of(divide_by_2(-4)) == -2
    assert is_nothing(divide_by_2(-3))


def test_parse_number_prefix():
    assert parse_number("12.34") == 12.34
    assert parse_number("  12.34kg") == 12.34
    assert parse_number("1e3") == 1000.0
    assert parse_number("-Infinity") == -math.inf
    assert math.isnan(parse_number("kg"))


def test_to_fixed():
    result = to_fixed("12.34")

    assert result.value == "12.340"
    assert result.log == ["12.34 toFixed(3) is used"]


def test_to_exponential_drops_exponent_padding():
    result = to_exponential("12.34")

    assert result.value == "1.23400e+1"
    assert result.log == ["12.34 toExponential(5) is used"]


def test_to_exponential_negative_exponent():
    assert to_exponential("0.00123", digits=2).value == "1.23e-3"


def test_formatting_unparseable_input():
    assert to_fixed("abc").value == "NaN"
    assert to_exponential("Infinity").value == "Infinity"


def test_formatting_chain_accumulates_log():
    result = bind_chain(unit_logged("12.34"), to_exponential, to_fixed)

    assert result.value == "12.340"
    assert result.log == [
        "12.34 toExponential(5) is used",
        "1.23400e+1 toFixed(3) is used",
    ]


def test_emoji_fan_out():
    assert fruits("s") == ["s 🍎", "s 🍏"]
    assert len(faces("s")) == 3
    assert len(flags("s")) == 3


def test_emoji_chain_size():
    assert len(bind_chain_seq(["start"], fruits, faces, flags)) == 18
