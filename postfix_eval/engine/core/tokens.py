from enum import IntEnum
from typing import Any
from .operators import Operator, Function


class TokenType(IntEnum):
  NUMBER = 0
  VARIABLE = 1
  OPERATOR = 2
  FUNCTION = 3


class Token:
  """Base token. Subclasses are immutable once constructed."""

  __slots__ = ()

  type: TokenType

  def __setattr__(self, name: str, value: Any):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def _key(self) -> tuple:
    raise NotImplementedError

  def __eq__(self, other) -> bool:
    if not isinstance(other, Token):
      return NotImplemented
    return self._key() == other._key()

  def __hash__(self) -> int:
    return hash(self._key())


class NumberToken(Token):
  __slots__ = ('value',)

  type = TokenType.NUMBER

  def __init__(self, value: float):
    object.__setattr__(self, 'value', float(value))

  def _key(self) -> tuple:
    return (TokenType.NUMBER, self.value)

  def __repr__(self) -> str:
    return f"NumberToken({self.value!r})"


class VariableToken(Token):
  __slots__ = ('name',)

  type = TokenType.VARIABLE

  def __init__(self, name: str):
    if not isinstance(name, str):
      raise TypeError("variable name must be a string")
    if not name:
      raise ValueError("variable name must not be empty")
    object.__setattr__(self, 'name', name)

  def _key(self) -> tuple:
    return (TokenType.VARIABLE, self.name)

  def __repr__(self) -> str:
    return f"VariableToken({self.name!r})"


class OperatorToken(Token):
  __slots__ = ('operator',)

  type = TokenType.OPERATOR

  def __init__(self, operator: Operator):
    if not isinstance(operator, Operator):
      raise TypeError("OperatorToken requires an Operator")
    object.__setattr__(self, 'operator', operator)

  def _key(self) -> tuple:
    return (TokenType.OPERATOR, id(self.operator))

  def __repr__(self) -> str:
    return f"OperatorToken({self.operator.symbol!r}, {self.operator.num_operands})"


class FunctionToken(Token):
  __slots__ = ('function',)

  type = TokenType.FUNCTION

  def __init__(self, function: Function):
    if not isinstance(function, Function):
      raise TypeError("FunctionToken requires a Function")
    object.__setattr__(self, 'function', function)

  def _key(self) -> tuple:
    return (TokenType.FUNCTION, id(self.function))

  def __repr__(self) -> str:
    return f"FunctionToken({self.function.name!r}, {self.function.num_arguments})"
