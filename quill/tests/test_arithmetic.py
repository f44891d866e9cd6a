"""
Tests for expression evaluation in Quill.
"""
import math

import pytest

from quill.exceptions import (
    DivisionByZeroException,
    InvalidExpressionException,
    UndefinedVariableException,
    UnmatchedParenthesisException,
)

from quill.tests.utils import evaluate


@pytest.mark.parametrize("literal", ["0", "1", "42", "3.25", "0.5", "1e-3", "12.0", "-7", "-0.125"])
def test_literal_evaluates_to_itself(literal):
    assert evaluate(literal) == float(literal)


@pytest.mark.parametrize(
    "code, expected",
    [
        pytest.param("1 + 2", 3.0),
        pytest.param("(2 + 3) * 4", 20.0),
        pytest.param("2 + 3 * 4", 14.0),
        pytest.param("(((1)))", 1.0),
        pytest.param("10 / 5 / 2", 1.0),
        pytest.param("10 - 4 - 3", 3.0),
        pytest.param("7 -2", 5.0),
        pytest.param("3 * -2", -6.0),
        pytest.param("2.5 * 2", 5.0),
        pytest.param("0 / 5", 0.0),
        pytest.param("1 / 4", 0.25),
        pytest.param("10 + 2 * (5 + 3 - 1)", 24.0),
    ],
)
def test_eval_arithmetic(code, expected):
    assert evaluate(code) == expected


def test_builtin_constants():
    assert evaluate("pi") == math.pi
    assert evaluate("e") == math.e
    assert evaluate("2 * pi") == 2 * math.pi


@pytest.mark.parametrize("code", ["1 / 0", "1 / (2 - 2)", "5 / 0.0", "1 * 2 / (3 - 3)"])
def test_division_by_zero(code):
    with pytest.raises(DivisionByZeroException):
        evaluate(code)


def test_unmatched_parenthesis():
    with pytest.raises(UnmatchedParenthesisException):
        evaluate("(1 + 2")


def test_undefined_variable():
    with pytest.raises(UndefinedVariableException) as excinfo:
        evaluate("missing + 1")
    assert excinfo.value.varname == 'missing'
    assert "Undefined variable 'missing'" in str(excinfo.value)


def test_undefined_variable_is_invalid_expression():
    with pytest.raises(InvalidExpressionException):
        evaluate("missing")


def test_unknown_leading_token():
    with pytest.raises(InvalidExpressionException):
        evaluate("* 2")
