import math

import pytest
import sympy as sp
from sympy.core.function import AppliedUndef

from postfix_eval import (
    ArityMismatchError, Expression, Function, MalformedResultError, Operator,
    OperatorToken, NumberToken,
)
from postfix_eval.engine.utils import count_tokens_by_type, tokens_to_infix


def test_to_string_renders_infix(rpn):
    expr = Expression(rpn(10, 'x', '-', 'neg', 2, 'logb'))
    assert expr.to_string() == "logb((-(10 - x)), 2)"


def test_to_string_keeps_fractional_numbers(rpn):
    assert Expression(rpn(1.5, 2, '*')).to_string() == "(1.5 * 2)"


def test_to_string_is_cached(rpn):
    expr = Expression(rpn(1, 2, '+'))
    assert expr.to_string() is expr.to_string()


def test_infix_rendering_reports_structural_errors(rpn):
    with pytest.raises(ArityMismatchError):
        tokens_to_infix(rpn(1, '+'))
    with pytest.raises(MalformedResultError):
        tokens_to_infix(rpn(1, 2))


def test_to_sympy_builtin_mapping(rpn):
    result = Expression(rpn('x', 'sin', 'y', 2, '^', '+')).to_sympy()
    x, y = sp.symbols('x y')
    assert result.free_symbols == {x, y}
    assert float(result.subs({x: 0.3, y: 1.7})) == pytest.approx(math.sin(0.3) + 1.7 ** 2)


def test_to_sympy_subtraction_and_division(rpn):
    result = Expression(rpn('a', 'b', '-', 'c', '/')).to_sympy()
    a, b, c = sp.symbols('a b c')
    assert float(result.subs({a: 7.0, b: 1.0, c: 4.0})) == pytest.approx(1.5)


def test_to_sympy_user_function_is_opaque(rpn):
    hyp = Function('hyp', 2, lambda a, b: (a * a + b * b) ** 0.5)
    result = Expression(rpn('a', 'b', 'hyp', functions={'hyp': hyp}), {'hyp'}).to_sympy()
    assert result == sp.Function('hyp')(sp.Symbol('a'), sp.Symbol('b'))


def test_to_sympy_user_operator_is_opaque():
    ne = Operator('<>', 2, True, 500, lambda a, b: float(a != b))
    tokens = [NumberToken(1), NumberToken(2), OperatorToken(ne)]
    result = Expression(tokens).to_sympy()
    assert isinstance(result, AppliedUndef)
    assert result.func.__name__ == '<>'


def test_count_tokens_by_type(rpn):
    counts = count_tokens_by_type(rpn(1, 'x', '+', 'sin'))
    assert counts == {'number': 1, 'variable': 1, 'operator': 1, 'function': 1}
