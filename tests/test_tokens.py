import pytest

from postfix_eval import (
    FunctionToken, NumberToken, OperatorToken, TokenType, VariableToken,
    get_builtin_function, get_builtin_operator,
)


def test_token_types():
    assert NumberToken(1).type == TokenType.NUMBER
    assert VariableToken('x').type == TokenType.VARIABLE
    assert OperatorToken(get_builtin_operator('+', 2)).type == TokenType.OPERATOR
    assert FunctionToken(get_builtin_function('sin')).type == TokenType.FUNCTION


def test_number_token_stores_float():
    token = NumberToken(3)
    assert isinstance(token.value, float)
    assert token.value == 3.0


def test_tokens_are_immutable():
    token = NumberToken(1.0)
    with pytest.raises(AttributeError):
        token.value = 2.0
    with pytest.raises(AttributeError):
        VariableToken('x').name = 'y'


def test_token_equality():
    assert NumberToken(2.0) == NumberToken(2)
    assert VariableToken('x') == VariableToken('x')
    assert VariableToken('x') != VariableToken('y')
    plus = get_builtin_operator('+', 2)
    assert OperatorToken(plus) == OperatorToken(plus)
    assert len({NumberToken(1.0), NumberToken(1.0)}) == 1


def test_token_argument_checks():
    with pytest.raises(ValueError):
        VariableToken('')
    with pytest.raises(TypeError):
        OperatorToken('+')
    with pytest.raises(TypeError):
        FunctionToken('sin')
