import sympy as sp
from typing import Callable, Dict, Sequence
from ..core.tokens import Token
from ..core.operators import is_builtin_function, get_builtin_function
from .token_utils import fold_postfix

_BINARY_SYMPY_OPS: Dict[str, Callable[[sp.Expr, sp.Expr], sp.Expr]] = {
  '+': lambda a, b: sp.Add(a, b),
  '-': lambda a, b: sp.Add(a, sp.Mul(-1, b)),
  '*': lambda a, b: sp.Mul(a, b),
  '/': lambda a, b: sp.Mul(a, sp.Pow(b, -1)),
  '^': lambda a, b: sp.Pow(a, b),
  '%': lambda a, b: sp.Mod(a, b),
}

_UNARY_SYMPY_OPS: Dict[str, Callable[[sp.Expr], sp.Expr]] = {
  '-': lambda a: sp.Mul(-1, a),
  '+': lambda a: a,
}

_SYMPY_FUNCTIONS: Dict[str, Callable[..., sp.Expr]] = {
  'sin': sp.sin, 'cos': sp.cos, 'tan': sp.tan, 'cot': sp.cot,
  'csc': sp.csc, 'sec': sp.sec,
  'asin': sp.asin, 'acos': sp.acos, 'atan': sp.atan,
  'sinh': sp.sinh, 'cosh': sp.cosh, 'tanh': sp.tanh,
  'csch': sp.csch, 'sech': sp.sech, 'coth': sp.coth,
  'log': sp.log,
  'log2': lambda x: sp.log(x, 2),
  'log10': lambda x: sp.log(x, 10),
  'log1p': lambda x: sp.log(1 + x),
  'logb': lambda x, base: sp.log(x, base),
  'exp': sp.exp,
  'expm1': lambda x: sp.exp(x) - 1,
  'sqrt': sp.sqrt,
  'cbrt': sp.cbrt,
  'abs': sp.Abs,
  'ceil': sp.ceiling,
  'floor': sp.floor,
  'pow': sp.Pow,
  'signum': sp.sign,
  'toradian': lambda x: x * sp.pi / 180,
  'todegree': lambda x: x * 180 / sp.pi,
}


def _convert_operator(op, args):
  table = _UNARY_SYMPY_OPS if len(args) == 1 else _BINARY_SYMPY_OPS
  converter = table.get(op.symbol)
  if converter is None:
    # User-defined operator: keep it as an opaque applied function
    return sp.Function(op.symbol)(*args)
  return converter(*args)


def _convert_function(func, args):
  # Only the registry's own Function objects map onto sympy builtins; a user
  # function reusing a builtin name still gets an opaque symbol.
  if is_builtin_function(func.name) and get_builtin_function(func.name) is func:
    return _SYMPY_FUNCTIONS[func.name](*args)
  return sp.Function(func.name)(*args)


def tokens_to_sympy(tokens: Sequence[Token]) -> sp.Expr:
  """Convert postfix tokens to a sympy expression without simplifying it"""
  return fold_postfix(tokens, sp.Float, sp.Symbol, _convert_operator, _convert_function)
