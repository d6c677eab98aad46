"""Postfix Evaluation Engine

Stack machine, structural validator and scratch-memory reuse for repeatedly
evaluating pre-parsed expressions.
"""

from .expression import Expression, VariableValue
from .exceptions import (
    ExpressionError, InvalidNameError, InvalidExpressionError,
    UnboundVariableError, ArityMismatchError, MalformedResultError
)
from .core import (
    TokenType, Token, NumberToken, VariableToken, OperatorToken, FunctionToken,
    Operator, Function, ALLOWED_OPERATOR_CHARS, BUILTIN_FUNCTION_NAMES,
    get_builtin_operator, get_builtin_function, is_builtin_function,
    get_builtin_constants
)
from .optimization import ScratchBufferPool, OperandStack
from .utils import ValidationResult, ExpressionValidator, tokens_to_infix, tokens_to_sympy

__all__ = [
    "Expression", "VariableValue",
    "ExpressionError", "InvalidNameError", "InvalidExpressionError",
    "UnboundVariableError", "ArityMismatchError", "MalformedResultError",
    "TokenType", "Token", "NumberToken", "VariableToken", "OperatorToken", "FunctionToken",
    "Operator", "Function", "ALLOWED_OPERATOR_CHARS", "BUILTIN_FUNCTION_NAMES",
    "get_builtin_operator", "get_builtin_function", "is_builtin_function",
    "get_builtin_constants",
    "ScratchBufferPool", "OperandStack",
    "ValidationResult", "ExpressionValidator", "tokens_to_infix", "tokens_to_sympy"
]
