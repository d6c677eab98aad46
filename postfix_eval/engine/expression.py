import numpy as np
import sympy as sp
from concurrent.futures import Executor, Future
from typing import Dict, Iterable, List, Mapping, Optional, FrozenSet, Tuple

from ..config import EngineConfig, DEFAULT_CONFIG
from ..logging_system import is_debug_enabled, log_debug, log_info, log_warning
from .core.tokens import Token, TokenType
from .core.operators import BUILTIN_FUNCTION_NAMES
from .core.constants import get_builtin_constants
from .exceptions import (
  InvalidNameError, UnboundVariableError, ArityMismatchError, MalformedResultError
)
from .optimization.memory_pool import ScratchBufferPool
from .optimization.operand_stack import OperandStack
from .utils.validator import ExpressionValidator, ValidationResult
from .utils.token_utils import tokens_to_infix, get_variable_names
from .utils.sympy_utils import tokens_to_sympy


class VariableValue:
  """Mutable cell so re-binding a name never re-inserts into the mapping"""

  __slots__ = ('value',)

  def __init__(self, value: float = 0.0):
    self.value = value

  def __repr__(self) -> str:
    return f"VariableValue({self.value!r})"


class Expression:
  """Postfix token sequence evaluated against mutable variable bindings.

  One instance must not be evaluated from several threads at once: the
  operand stack and scratch buffers are per-instance state. Give each thread
  its own copy() instead.
  """

  __slots__ = ('_tokens', '_variables', '_user_function_names', '_reserved_names',
               '_stack', '_pool', '_config', '_string_cache')

  def __init__(self, tokens: Iterable[Token], user_function_names: Optional[Iterable[str]] = None,
               config: Optional[EngineConfig] = None):
    self._config = config if config is not None else DEFAULT_CONFIG
    self._tokens: Tuple[Token, ...] = tuple(tokens)
    for tok in self._tokens:
      if not isinstance(tok, Token):
        raise TypeError(f"Expected a Token, got {type(tok).__name__}")
    self._user_function_names: FrozenSet[str] = frozenset(user_function_names or ())
    self._reserved_names: FrozenSet[str] = BUILTIN_FUNCTION_NAMES | self._user_function_names
    self._variables: Dict[str, VariableValue] = {}
    self._stack = OperandStack(self._config.initial_stack_capacity)
    self._pool = ScratchBufferPool(self._config.scratch_pool_size)
    self._string_cache: Optional[str] = None

    for name, value in get_builtin_constants().items():
      # A user function may shadow a constant name; the function wins
      if name in self._reserved_names:
        log_warning(f"User function '{name}' shadows the built-in constant; constant not bound")
        continue
      self._variables[name] = VariableValue(value)

    if is_debug_enabled():
      log_debug(f"Created expression with {len(self._tokens)} tokens")

  def copy(self) -> 'Expression':
    """Independent copy: shared tokens, copied bindings, fresh stack and pool"""
    clone = Expression.__new__(Expression)
    clone._config = self._config
    clone._tokens = self._tokens
    clone._user_function_names = frozenset(self._user_function_names)
    clone._reserved_names = frozenset(self._reserved_names)
    clone._variables = {name: VariableValue(cell.value) for name, cell in self._variables.items()}
    clone._stack = OperandStack(self._config.initial_stack_capacity)
    clone._pool = ScratchBufferPool(self._config.scratch_pool_size)
    clone._string_cache = self._string_cache
    return clone

  def __copy__(self) -> 'Expression':
    return self.copy()

  def __deepcopy__(self, memo) -> 'Expression':
    return self.copy()

  # Variable bindings

  def set_variable(self, name: str, value: float) -> 'Expression':
    self._check_variable_name(name)
    cell = self._variables.get(name)
    if cell is None:
      self._variables[name] = VariableValue(float(value))
    else:
      cell.value = float(value)
    return self

  def set_variables(self, variables: Mapping[str, float]) -> 'Expression':
    """Bind every entry in order. Stops at the first invalid name; earlier
    entries stay bound."""
    for name, value in variables.items():
      self.set_variable(name, value)
    return self

  def get_variable(self, name: str) -> float:
    cell = self._variables.get(name)
    if cell is None:
      raise UnboundVariableError(name)
    return cell.value

  def _check_variable_name(self, name: str):
    if name in self._reserved_names:
      if is_debug_enabled():
        log_debug(f"Rejected variable name '{name}': function with the same name exists")
      raise InvalidNameError(
        f"The variable name '{name}' is invalid. Since there exists a function with the same name"
      )

  @property
  def variables(self) -> Dict[str, float]:
    """Snapshot of all current bindings, constants included"""
    return {name: cell.value for name, cell in self._variables.items()}

  @property
  def variable_names(self) -> List[str]:
    """Variable names referenced by the token sequence"""
    return get_variable_names(self._tokens)

  @property
  def user_function_names(self) -> FrozenSet[str]:
    return self._user_function_names

  @property
  def tokens(self) -> Tuple[Token, ...]:
    return self._tokens

  @property
  def stack_depth(self) -> int:
    return self._stack.size()

  def get_pool_stats(self) -> dict:
    return self._pool.get_stats()

  # Validation and evaluation

  def validate(self, check_variables_set: Optional[bool] = None) -> ValidationResult:
    if check_variables_set is None:
      check_variables_set = self._config.check_variables_on_validate
    result = ExpressionValidator.validate(self._tokens, self._variables, check_variables_set)
    if not result.valid:
      log_info(f"Validation failed: {'; '.join(result.errors)}")
    return result

  def evaluate(self) -> float:
    stack = self._stack
    pool = self._pool
    variables = self._variables
    stack.reset()
    with np.errstate(all='ignore'):
      for tok in self._tokens:
        tok_type = tok.type
        if tok_type == TokenType.NUMBER:
          stack.push(tok.value)
        elif tok_type == TokenType.VARIABLE:
          cell = variables.get(tok.name)
          if cell is None:
            raise self._evaluation_error(UnboundVariableError(tok.name))
          stack.push(cell.value)
        elif tok_type == TokenType.OPERATOR:
          operator = tok.operator
          num_operands = operator.num_operands
          if stack.size() < num_operands:
            raise self._evaluation_error(
              ArityMismatchError('operator', operator.symbol, num_operands, stack.size()))
          ops = pool.acquire(num_operands)
          for j in range(num_operands - 1, -1, -1):
            ops[j] = stack.pop()
          stack.push(operator.apply(ops))
        elif tok_type == TokenType.FUNCTION:
          function = tok.function
          num_arguments = function.num_arguments
          if stack.size() < num_arguments:
            raise self._evaluation_error(
              ArityMismatchError('function', function.name, num_arguments, stack.size()))
          args = pool.acquire(num_arguments)
          for j in range(num_arguments - 1, -1, -1):
            args[j] = stack.pop()
          stack.push(function.apply(args))

    if stack.size() != 1:
      raise self._evaluation_error(MalformedResultError(stack.size()))
    return float(stack.pop())

  def evaluate_async(self, executor: Executor) -> Future:
    """Schedule evaluate() on the executor; errors surface from result()"""
    log_info(f"Submitting evaluation to {type(executor).__name__}")
    return executor.submit(self.evaluate)

  @staticmethod
  def _evaluation_error(error: Exception) -> Exception:
    if is_debug_enabled():
      log_debug(f"Evaluation failed: {error}")
    return error

  # Rendering

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = tokens_to_infix(self._tokens)
    return self._string_cache

  def to_sympy(self) -> sp.Expr:
    return tokens_to_sympy(self._tokens)

  def size(self) -> int:
    """Token count"""
    return len(self._tokens)

  def __repr__(self) -> str:
    return f"Expression(tokens={len(self._tokens)}, variables={sorted(self.variable_names)})"
