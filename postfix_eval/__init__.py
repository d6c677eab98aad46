"""Postfix Expression Evaluation Package

Repeated, allocation-light evaluation of pre-parsed arithmetic expressions
with named variables.
"""

from .engine import (
  Expression, VariableValue,
  ExpressionError, InvalidNameError, InvalidExpressionError,
  UnboundVariableError, ArityMismatchError, MalformedResultError,
  TokenType, Token, NumberToken, VariableToken, OperatorToken, FunctionToken,
  Operator, Function, BUILTIN_FUNCTION_NAMES,
  get_builtin_operator, get_builtin_function, is_builtin_function,
  get_builtin_constants,
  ScratchBufferPool, OperandStack,
  ValidationResult, ExpressionValidator
)
from .config import EngineConfig, DEFAULT_CONFIG
from .logging_system import (
  LogLevel, ExpressionLogger, get_logger, set_log_level, configure_logging,
  log_info, log_warning, log_debug
)

__version__ = "0.1.0"
__all__ = [
  "Expression", "VariableValue",
  "ExpressionError", "InvalidNameError", "InvalidExpressionError",
  "UnboundVariableError", "ArityMismatchError", "MalformedResultError",
  "TokenType", "Token", "NumberToken", "VariableToken", "OperatorToken", "FunctionToken",
  "Operator", "Function", "BUILTIN_FUNCTION_NAMES",
  "get_builtin_operator", "get_builtin_function", "is_builtin_function",
  "get_builtin_constants",
  "ScratchBufferPool", "OperandStack",
  "ValidationResult", "ExpressionValidator",
  "EngineConfig", "DEFAULT_CONFIG",
  "LogLevel", "ExpressionLogger", "get_logger", "set_log_level", "configure_logging",
  "log_info", "log_warning", "log_debug"
]
