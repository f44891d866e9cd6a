"""
Tests for function definitions and calls in Quill.
"""
import pytest

from quill.exceptions import (
    ArgumentCountException,
    DivisionByZeroException,
    DuplicateFunctionException,
    ExpectedOpenParenException,
    InvalidExpressionException,
    ReturnOutsideFunctionException,
)

from quill.tests.utils import run_source


def test_call_returns_value():
    interpreter = run_source(
        "func add a b { return a + b\n"
        "var r = add(2,3)\n"
    )
    assert interpreter.vars['r'] == 5.0
    func = interpreter.functions['add']
    assert func.params == ['a', 'b']
    assert func.source == 'return a + b'


def test_call_inside_expression():
    interpreter = run_source(
        "func sq x { return x * x\n"
        "var r = 1 + sq(3) * 2\n"
    )
    assert interpreter.vars['r'] == 19.0


def test_function_without_return_gives_zero():
    interpreter = run_source(
        "func f x { var t = x\n"
        "var r = f(9)\n"
    )
    assert interpreter.vars['r'] == 0.0


def test_function_without_parameters():
    interpreter = run_source(
        "var g = 7\n"
        "func getg { return g\n"
        "var r = getg()\n"
    )
    assert interpreter.vars['r'] == 7.0


def test_parameters_shadow_globals_for_the_call_only():
    interpreter = run_source(
        "var a = 100\n"
        "func add a b { return a + b\n"
        "var r = add(2, 3)\n"
    )
    assert interpreter.vars['r'] == 5.0
    assert interpreter.vars['a'] == 100.0
    assert 'b' not in interpreter.vars


def test_callee_writes_are_discarded():
    interpreter = run_source(
        "var g = 1\n"
        "func setg x { g = x\n"
        "var r = setg(5)\n"
    )
    assert interpreter.vars['g'] == 1.0


def test_callee_declarations_do_not_leak():
    interpreter = run_source(
        "func f x { var t = x\n"
        "var r = f(1)\n"
    )
    assert 't' not in interpreter.vars


def test_first_argument_sees_caller_variables():
    interpreter = run_source(
        "var a = 1\n"
        "var b = 10\n"
        "func sub a b { return a - b\n"
        "var r = sub(b, 2)\n"
    )
    assert interpreter.vars['r'] == 8.0


def test_parameters_are_bound_one_at_a_time():
    """
    Each parameter is bound before the next argument is evaluated, so a later
    argument naming an earlier parameter sees the new binding.
    """
    interpreter = run_source(
        "var a = 10\n"
        "func f a b { return b\n"
        "var r = f(1, a)\n"
    )
    assert interpreter.vars['r'] == 1.0
    assert interpreter.vars['a'] == 10.0


def test_failing_argument_restores_environment():
    interpreter = run_source(
        "var a = 10\n"
        "func f a b { return b\n"
    )
    with pytest.raises(DivisionByZeroException):
        interpreter.execute_line("var r = f(1, 1 / 0)")
    assert interpreter.vars['a'] == 10.0
    assert interpreter.env.frames == []


def test_nested_calls_of_distinct_functions():
    interpreter = run_source(
        "func sq x { return x * x\n"
        "func sumsq a b { return sq(a) + sq(b)\n"
        "var r = sumsq(3, 4)\n"
    )
    assert interpreter.vars['r'] == 25.0


def test_recursive_call_returns_zero():
    """
    A function is not re-entrant: the inner call runs its body but gives 0.0.
    With real recursion f(3) would be 3 + 2 + 1 = 6.
    """
    interpreter = run_source(
        "func f n { if n then return n + f(n - 1)\n"
        "var r = f(3)\n"
    )
    assert interpreter.vars['r'] == 3.0
    assert interpreter.env.frames == []


def test_indirect_recursive_call_returns_zero():
    """
    a -> b -> a: the second call of 'a' is guarded just like a direct one.
    """
    interpreter = run_source(
        "func a n { if n then return n + b(n - 1)\n"
        "func b n { return 10 + a(n)\n"
        "var r = a(2)\n"
    )
    assert interpreter.vars['r'] == 12.0


def test_false_if_in_body_is_empty():
    interpreter = run_source(
        "func f n { if n then return 1\n"
        "var r = f(0)\n"
    )
    assert interpreter.vars['r'] == 0.0


def test_one_line_loop_in_body():
    interpreter = run_source(
        "func count n { for var i = 0 { n - i do var i = i + 1\n"
        "var r = count(4)\n"
    )
    assert interpreter.vars['r'] == 0.0
    assert 'i' not in interpreter.vars


def test_failing_call_restores_environment():
    interpreter = run_source(
        "var x = 1\n"
        "func bad x { return x / 0\n"
    )
    with pytest.raises(DivisionByZeroException):
        interpreter.execute_line("var r = bad(5)")
    assert interpreter.vars['x'] == 1.0
    assert 'r' not in interpreter.vars
    assert interpreter.env.frames == []


def test_return_outside_function(interpreter):
    with pytest.raises(ReturnOutsideFunctionException):
        interpreter.execute_line("return 1")


def test_duplicate_function(interpreter):
    interpreter.execute_line("func f x { return x")
    with pytest.raises(DuplicateFunctionException):
        interpreter.execute_line("func f y { return y")
    assert interpreter.functions['f'].params == ['x']


def test_unknown_function(interpreter):
    with pytest.raises(InvalidExpressionException):
        interpreter.execute_line("var r = nope(1)")


def test_function_name_without_parenthesis(interpreter):
    interpreter.execute_line("func f x { return x")
    with pytest.raises(ExpectedOpenParenException):
        interpreter.execute_line("var r = f")


def test_wrong_argument_count(interpreter):
    interpreter.execute_line("func add a b { return a + b")
    with pytest.raises(ArgumentCountException) as excinfo:
        interpreter.execute_line("var r = add(1)")
    assert isinstance(excinfo.value, InvalidExpressionException)
    assert "expects 2 arguments, got 1" in str(excinfo.value)


def test_body_is_parsed_at_definition(interpreter):
    with pytest.raises(InvalidExpressionException):
        interpreter.execute_line("func f { return )")
    assert 'f' not in interpreter.functions
