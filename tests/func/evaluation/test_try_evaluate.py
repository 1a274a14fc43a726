# -*- coding: utf-8 -*-
import pytest  # noqa
from infixeval import (try_evaluate, Result, DivisionByZeroError,
                       MalformedLiteralError)


def test_success():
    result = try_evaluate("1+2*3")

    assert result.ok
    assert result
    assert result.value == 7
    assert result.error is None
    assert result.error_kind is None
    assert result.unwrap() == 7


@pytest.mark.parametrize("expression, kind", [
    ("", "precondition"),
    ("1+", "malformed-literal"),
    ("1+2 3", "malformed-literal"),
    ("(1+2", "unmatched-parenthesis"),
    ("1+2)", "unmatched-parenthesis"),
    ("1/0", "division-by-zero"),
])
def test_error_kinds(expression, kind):
    result = try_evaluate(expression)

    assert not result.ok
    assert not result
    assert result.value is None
    assert result.error_kind == kind


def test_unwrap_raises_stored_error():
    result = try_evaluate("4/(2-2)")

    with pytest.raises(DivisionByZeroError) as e:
        result.unwrap()
    assert e.value is result.error


def test_config_is_passed_to_evaluator():
    assert not try_evaluate("2*3 x")
    assert try_evaluate("2*3 x", allow_trailing=True).value == 6


def test_repr():
    assert repr(Result(value=1.5)) == "<Result(value=1.5)>"
    result = try_evaluate("1+")
    assert isinstance(result.error, MalformedLiteralError)
    assert repr(result) == "<Result(error=malformed-literal)>"
