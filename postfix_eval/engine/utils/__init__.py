"""Utilities for token sequences."""

from .validator import ValidationResult, ExpressionValidator
from .token_utils import (
    fold_postfix, tokens_to_infix, get_variable_names, count_tokens_by_type,
    format_number
)
from .sympy_utils import tokens_to_sympy

__all__ = [
    'ValidationResult', 'ExpressionValidator',
    'fold_postfix', 'tokens_to_infix', 'get_variable_names', 'count_tokens_by_type',
    'format_number', 'tokens_to_sympy'
]
