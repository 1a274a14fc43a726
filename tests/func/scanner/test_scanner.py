# -*- coding: utf-8 -*-
import pytest  # noqa
from infixeval import is_digit, is_operator, read_number
from infixeval.exceptions import PreconditionError, MalformedLiteralError


def test_is_digit():
    assert all(is_digit(c) for c in "0123456789")
    assert not any(is_digit(c) for c in "+-*/.() a")
    assert not is_digit(None)


def test_is_operator():
    assert all(is_operator(c) for c in "+-*/")
    assert not any(is_operator(c) for c in "0.() x")
    assert not is_operator(None)


@pytest.mark.parametrize("input_str, value, end", [
    ("42", 42, 2),
    ("3.08", 3.08, 4),
    ("-17", -17, 3),
    ("-0.5", -0.5, 4),
    (".25", 0.25, 3),
    ("7.", 7, 2),
    ("12+3", 12, 2),
    ("12 ", 12, 2),
    ("0.0003101", 0.0003101, 9),
])
def test_read_number(input_str, value, end):
    result, position = read_number(input_str)
    assert result == pytest.approx(value)
    assert position == end


def test_read_number_from_position():
    value, position = read_number("1 + 23.5)", 4)
    assert value == 23.5
    assert position == 8


def test_second_decimal_point_ends_literal():
    """
    Test that a second decimal point ends the literal and is left for
    the caller.
    """
    value, position = read_number("12.3.5")
    assert value == pytest.approx(12.3)
    assert position == 4


@pytest.mark.parametrize("input_str", ["", None])
def test_read_number_empty_input(input_str):
    with pytest.raises(PreconditionError):
        read_number(input_str)


def test_read_number_position_out_of_range():
    with pytest.raises(PreconditionError) as e:
        read_number("12", 2)
    assert e.value.kind == "precondition"


@pytest.mark.parametrize("input_str", ["+1", "(1)", "-", ".", "-.", "x"])
def test_read_number_without_digits(input_str):
    with pytest.raises(MalformedLiteralError) as e:
        read_number(input_str)
    assert e.value.location.start_position == 0


def test_read_number_long_fraction():
    """
    Test that very long fractional parts neither overflow nor lose the
    end position.
    """
    assert read_number("1." + "0" * 320) == (1.0, 322)

    value, position = read_number("0." + "3" * 400 + "+1")
    assert value == pytest.approx(1 / 3)
    assert position == 402
