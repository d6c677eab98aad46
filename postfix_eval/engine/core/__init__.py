"""Core token and operator components."""

from .operators import (
    Operator, Function, ALLOWED_OPERATOR_CHARS, BUILTIN_FUNCTION_NAMES,
    get_builtin_operator, get_builtin_function, is_builtin_function,
    is_valid_function_name
)
from .tokens import TokenType, Token, NumberToken, VariableToken, OperatorToken, FunctionToken
from .constants import get_builtin_constants

__all__ = [
    'Operator', 'Function', 'ALLOWED_OPERATOR_CHARS', 'BUILTIN_FUNCTION_NAMES',
    'get_builtin_operator', 'get_builtin_function', 'is_builtin_function',
    'is_valid_function_name',
    'TokenType', 'Token', 'NumberToken', 'VariableToken', 'OperatorToken', 'FunctionToken',
    'get_builtin_constants'
]
