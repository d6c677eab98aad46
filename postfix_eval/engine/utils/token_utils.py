import math
from typing import Callable, List, Sequence, TypeVar
from ..core.tokens import Token, TokenType
from ..exceptions import ArityMismatchError, MalformedResultError

T = TypeVar('T')


def format_number(value: float) -> str:
  if math.isfinite(value) and value.is_integer() and abs(value) < 1e15:
    return str(int(value))
  return repr(value)


def get_variable_names(tokens: Sequence[Token]) -> List[str]:
  """Distinct variable names in order of first appearance"""
  seen = {}
  for tok in tokens:
    if tok.type == TokenType.VARIABLE and tok.name not in seen:
      seen[tok.name] = None
  return list(seen)


def count_tokens_by_type(tokens: Sequence[Token]) -> dict:
  counts = {token_type.name.lower(): 0 for token_type in TokenType}
  for tok in tokens:
    counts[tok.type.name.lower()] += 1
  return counts


def fold_postfix(tokens: Sequence[Token],
                 number: Callable[[float], T],
                 variable: Callable[[str], T],
                 operator: Callable[[object, List[T]], T],
                 function: Callable[[object, List[T]], T]) -> T:
  """Reduce a postfix token sequence into a single symbolic value.

  Same stack discipline as evaluation, but over arbitrary values (strings,
  sympy expressions). Arguments are passed in their original left-to-right
  order.
  """
  stack: List[T] = []
  for tok in tokens:
    tok_type = tok.type
    if tok_type == TokenType.NUMBER:
      stack.append(number(tok.value))
    elif tok_type == TokenType.VARIABLE:
      stack.append(variable(tok.name))
    elif tok_type == TokenType.OPERATOR:
      op = tok.operator
      if len(stack) < op.num_operands:
        raise ArityMismatchError('operator', op.symbol, op.num_operands, len(stack))
      args = stack[len(stack) - op.num_operands:]
      del stack[len(stack) - op.num_operands:]
      stack.append(operator(op, args))
    elif tok_type == TokenType.FUNCTION:
      func = tok.function
      if len(stack) < func.num_arguments:
        raise ArityMismatchError('function', func.name, func.num_arguments, len(stack))
      args = stack[len(stack) - func.num_arguments:]
      del stack[len(stack) - func.num_arguments:]
      stack.append(function(func, args))
  if len(stack) != 1:
    raise MalformedResultError(len(stack))
  return stack[0]


def tokens_to_infix(tokens: Sequence[Token]) -> str:
  """Fully parenthesised infix rendering of a postfix token sequence"""

  def render_operator(op, args):
    if len(args) == 1:
      return f"({op.symbol}{args[0]})"
    return f"({args[0]} {op.symbol} {args[1]})"

  def render_function(func, args):
    return f"{func.name}({', '.join(args)})"

  return fold_postfix(tokens, format_number, str, render_operator, render_function)
