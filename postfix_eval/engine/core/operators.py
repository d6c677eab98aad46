import numpy as np
import numba
from typing import Callable, Dict, FrozenSet, Optional, Sequence, Tuple

ALLOWED_OPERATOR_CHARS: FrozenSet[str] = frozenset('+-*/%^!#§$&;:~<>|=÷√∛⊥')

PRECEDENCE_ADDITION = 500
PRECEDENCE_SUBTRACTION = PRECEDENCE_ADDITION
PRECEDENCE_MULTIPLICATION = 1000
PRECEDENCE_DIVISION = PRECEDENCE_MULTIPLICATION
PRECEDENCE_MODULO = PRECEDENCE_DIVISION
PRECEDENCE_POWER = 10000
PRECEDENCE_UNARY_MINUS = 5000
PRECEDENCE_UNARY_PLUS = PRECEDENCE_UNARY_MINUS


# Scalar kernels behind the built-in + - * / ^. Compiled with
# error_model='numpy' so a zero divisor gives inf/nan and a negative base
# with a fractional exponent gives nan, for Python floats as well as numpy
# scalars. Each call goes through numba's dispatcher.
@numba.njit(cache=True, inline='always', error_model='numpy')
def add_kernel(a, b):
  return a + b

@numba.njit(cache=True, inline='always', error_model='numpy')
def subtract_kernel(a, b):
  return a - b

@numba.njit(cache=True, inline='always', error_model='numpy')
def multiply_kernel(a, b):
  return a * b

@numba.njit(cache=True, inline='always', error_model='numpy')
def divide_kernel(a, b):
  return a / b

@numba.njit(cache=True, error_model='numpy')
def power_kernel(a, b):
  return a ** b


def is_allowed_operator_char(ch: str) -> bool:
  return ch in ALLOWED_OPERATOR_CHARS


def is_valid_function_name(name: str) -> bool:
  if not isinstance(name, str) or not name:
    return False
  first = name[0]
  if not (first.isalpha() or first == '_'):
    return False
  return all(ch.isalnum() or ch == '_' for ch in name[1:])


class Operator:
  """Unary or binary operator applied to values staged in a scratch buffer.

  Pass impl, or subclass and override apply(); with neither, apply() raises
  NotImplementedError.
  """

  __slots__ = ('symbol', 'num_operands', 'left_associative', 'precedence', '_impl')

  def __init__(self, symbol: str, num_operands: int, left_associative: bool,
               precedence: int, impl: Optional[Callable[..., float]] = None):
    if not isinstance(symbol, str) or not symbol:
      raise ValueError("Operator symbol must be a non-empty string")
    for ch in symbol:
      if not is_allowed_operator_char(ch):
        raise ValueError(f"The operator symbol '{symbol}' is invalid")
    if num_operands not in (1, 2):
      raise ValueError(f"Operator '{symbol}' must have 1 or 2 operands, got {num_operands}")
    self.symbol = symbol
    self.num_operands = num_operands
    self.left_associative = left_associative
    self.precedence = precedence
    self._impl = impl

  def apply(self, args: Sequence[float]) -> float:
    if self._impl is None:
      raise NotImplementedError(f"Operator '{self.symbol}' has no implementation")
    return self._impl(*args)

  def __repr__(self) -> str:
    return f"Operator({self.symbol!r}, num_operands={self.num_operands})"


class Function:
  """Named function with a fixed number of arguments.

  Like Operator, either takes impl or is subclassed with apply() overridden.
  """

  __slots__ = ('name', 'num_arguments', '_impl')

  def __init__(self, name: str, num_arguments: int = 1,
               impl: Optional[Callable[..., float]] = None):
    if not is_valid_function_name(name):
      raise ValueError(f"The function name '{name}' is invalid")
    if not isinstance(num_arguments, int) or num_arguments < 0:
      raise ValueError(f"The number of function arguments can not be less than 0 for '{name}'")
    self.name = name
    self.num_arguments = num_arguments
    self._impl = impl

  def apply(self, args: Sequence[float]) -> float:
    if self._impl is None:
      raise NotImplementedError(f"Function '{self.name}' has no implementation")
    return self._impl(*args)

  def __repr__(self) -> str:
    return f"Function({self.name!r}, num_arguments={self.num_arguments})"


def _modulo(a, b):
  # Sign follows the dividend, as C fmod
  return np.fmod(a, b)

def _cot(x):
  return 1.0 / np.tan(x)

def _csc(x):
  return 1.0 / np.sin(x)

def _sec(x):
  return 1.0 / np.cos(x)

def _csch(x):
  return 1.0 / np.sinh(x)

def _sech(x):
  return 1.0 / np.cosh(x)

def _coth(x):
  return np.cosh(x) / np.sinh(x)

def _logb(x, base):
  return np.log(x) / np.log(base)


_BUILTIN_OPERATORS: Dict[Tuple[str, int], Operator] = {
  ('+', 2): Operator('+', 2, True, PRECEDENCE_ADDITION, add_kernel),
  ('-', 2): Operator('-', 2, True, PRECEDENCE_SUBTRACTION, subtract_kernel),
  ('*', 2): Operator('*', 2, True, PRECEDENCE_MULTIPLICATION, multiply_kernel),
  ('/', 2): Operator('/', 2, True, PRECEDENCE_DIVISION, divide_kernel),
  ('^', 2): Operator('^', 2, False, PRECEDENCE_POWER, power_kernel),
  ('%', 2): Operator('%', 2, True, PRECEDENCE_MODULO, _modulo),
  ('-', 1): Operator('-', 1, False, PRECEDENCE_UNARY_MINUS, np.negative),
  ('+', 1): Operator('+', 1, False, PRECEDENCE_UNARY_PLUS, np.positive),
}

_BUILTIN_FUNCTIONS: Dict[str, Function] = {f.name: f for f in (
  Function('sin', 1, np.sin),
  Function('cos', 1, np.cos),
  Function('tan', 1, np.tan),
  Function('cot', 1, _cot),
  Function('csc', 1, _csc),
  Function('sec', 1, _sec),
  Function('asin', 1, np.arcsin),
  Function('acos', 1, np.arccos),
  Function('atan', 1, np.arctan),
  Function('sinh', 1, np.sinh),
  Function('cosh', 1, np.cosh),
  Function('tanh', 1, np.tanh),
  Function('csch', 1, _csch),
  Function('sech', 1, _sech),
  Function('coth', 1, _coth),
  Function('log', 1, np.log),
  Function('log2', 1, np.log2),
  Function('log10', 1, np.log10),
  Function('log1p', 1, np.log1p),
  Function('logb', 2, _logb),
  Function('exp', 1, np.exp),
  Function('expm1', 1, np.expm1),
  Function('sqrt', 1, np.sqrt),
  Function('cbrt', 1, np.cbrt),
  Function('abs', 1, np.abs),
  Function('ceil', 1, np.ceil),
  Function('floor', 1, np.floor),
  Function('pow', 2, np.power),
  Function('signum', 1, np.sign),
  Function('toradian', 1, np.radians),
  Function('todegree', 1, np.degrees),
)}

BUILTIN_FUNCTION_NAMES: FrozenSet[str] = frozenset(_BUILTIN_FUNCTIONS)


def get_builtin_operator(symbol: str, num_operands: int) -> Optional[Operator]:
  return _BUILTIN_OPERATORS.get((symbol, num_operands))


def get_builtin_function(name: str) -> Optional[Function]:
  return _BUILTIN_FUNCTIONS.get(name)


def is_builtin_function(name: str) -> bool:
  return name in _BUILTIN_FUNCTIONS
