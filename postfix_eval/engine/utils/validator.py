from dataclasses import dataclass
from typing import ClassVar, List, Mapping, Sequence, Tuple
from ..core.tokens import Token, TokenType


@dataclass(frozen=True)
class ValidationResult:
  """Outcome of a structural check. Falsy when any error was recorded."""
  valid: bool
  errors: Tuple[str, ...] = ()

  SUCCESS: ClassVar['ValidationResult']

  def __bool__(self) -> bool:
    return self.valid


ValidationResult.SUCCESS = ValidationResult(True)


class ExpressionValidator:

  @staticmethod
  def validate(tokens: Sequence[Token], variables: Mapping[str, object],
               check_variables_set: bool = True) -> ValidationResult:
    errors: List[str] = []
    if check_variables_set:
      errors.extend(ExpressionValidator.unbound_variable_errors(tokens, variables))

    # Net number of values available on the stack. Must stay >= 1 after
    # every token and end at exactly 1.
    count = 0
    for tok in tokens:
      tok_type = tok.type
      if tok_type == TokenType.NUMBER or tok_type == TokenType.VARIABLE:
        count += 1
      elif tok_type == TokenType.FUNCTION:
        func = tok.function
        args_num = func.num_arguments
        if args_num > count:
          errors.append(f"Not enough arguments for '{func.name}'")
        if args_num > 1:
          count -= args_num - 1
      elif tok_type == TokenType.OPERATOR:
        if tok.operator.num_operands == 2:
          count -= 1
      if count < 1:
        errors.append("Too many operators")
        return ValidationResult(False, tuple(errors))

    if count > 1:
      errors.append("Too many operands")
    if not errors:
      return ValidationResult.SUCCESS
    return ValidationResult(False, tuple(errors))

  @staticmethod
  def unbound_variable_errors(tokens: Sequence[Token], variables: Mapping[str, object]) -> List[str]:
    """One message per variable token whose name has no value"""
    return [
      f"The variable '{tok.name}' has not been set"
      for tok in tokens
      if tok.type == TokenType.VARIABLE and tok.name not in variables
    ]
