"""Errors raised by expression binding and evaluation."""


class ExpressionError(ValueError):
  """Base class for every error raised by an Expression"""


class InvalidNameError(ExpressionError):
  """A variable name collides with a known function name"""


class InvalidExpressionError(ExpressionError):
  """The token sequence cannot be evaluated with the current bindings"""


class UnboundVariableError(InvalidExpressionError):

  def __init__(self, name: str):
    super().__init__(f"No value has been set for the variable '{name}'.")
    self.name = name


class ArityMismatchError(InvalidExpressionError):

  def __init__(self, kind: str, name: str, required: int, available: int):
    noun = 'operands' if kind == 'operator' else 'arguments'
    super().__init__(
      f"Invalid number of {noun} available for '{name}' {kind}: "
      f"requires {required}, found {available}"
    )
    self.name = name
    self.required = required
    self.available = available


class MalformedResultError(InvalidExpressionError):

  def __init__(self, remaining: int):
    if remaining == 0:
      message = "Expression produced no value on the operand stack."
    else:
      message = (f"Invalid number of items on the operand stack ({remaining}). "
                 "Might be caused by an invalid number of arguments for a function.")
    super().__init__(message)
    self.remaining = remaining
