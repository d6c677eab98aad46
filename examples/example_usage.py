import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import time
from concurrent.futures import ThreadPoolExecutor

from postfix_eval import (
  Expression, Function, FunctionToken, NumberToken, OperatorToken, VariableToken,
  get_builtin_function, get_builtin_operator, LogLevel, configure_logging
)


def build_projectile_expression() -> Expression:
  """y = v * t * sin(theta) - 0.5 * g * t^2 in postfix order"""
  mul = OperatorToken(get_builtin_operator('*', 2))
  tokens = [
    VariableToken('v'), VariableToken('t'), mul,
    VariableToken('theta'), FunctionToken(get_builtin_function('sin')), mul,
    NumberToken(0.5), VariableToken('g'), mul,
    VariableToken('t'), NumberToken(2), OperatorToken(get_builtin_operator('^', 2)), mul,
    OperatorToken(get_builtin_operator('-', 2)),
  ]
  return Expression(tokens)


def main():
  configure_logging(LogLevel.MINIMAL)

  expr = build_projectile_expression()
  print(f"Expression: {expr.to_string()}")
  print(f"SymPy form: {expr.to_sympy()}")

  expr.set_variables({'v': 20.0, 'theta': 0.8, 'g': 9.81})
  result = expr.validate()
  print(f"Valid: {result.valid} {result.errors}")

  # Re-bind and evaluate in a tight loop without re-parsing
  start_time = time.time()
  samples = []
  for step in range(10000):
    expr.set_variable('t', step * 0.0003)
    samples.append(expr.evaluate())
  elapsed = time.time() - start_time
  print(f"10000 evaluations in {elapsed:.3f}s, peak height {max(samples):.3f}")
  print(f"Scratch pool: {expr.get_pool_stats()}")

  # Each worker gets its own copy
  clamp = Function('clamp', 3, lambda x, lo, hi: min(max(x, lo), hi))
  clamped = Expression([VariableToken('x'), NumberToken(0), NumberToken(1), FunctionToken(clamp)],
                       user_function_names={'clamp'})
  with ThreadPoolExecutor(max_workers=4) as executor:
    futures = []
    for x in (-0.5, 0.25, 0.75, 1.5):
      worker_expr = clamped.copy().set_variable('x', x)
      futures.append(worker_expr.evaluate_async(executor))
    print(f"Clamped: {[f.result() for f in futures]}")


if __name__ == "__main__":
  main()
