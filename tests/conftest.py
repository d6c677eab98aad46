from typing import Callable, Dict, List, Optional, Union

import pytest

from postfix_eval import (
    Function, FunctionToken, NumberToken, OperatorToken, Token, VariableToken,
    get_builtin_function, get_builtin_operator,
)

BINARY_SYMBOLS = ('+', '-', '*', '/', '^', '%')
UNARY_ALIASES = {'neg': '-', 'pos': '+'}


def build_tokens(*items: Union[int, float, str],
                 functions: Optional[Dict[str, Function]] = None) -> List[Token]:
    """Turn a compact postfix listing into tokens.

    Numbers become NumberTokens, the binary symbols become builtin binary
    operators, 'neg'/'pos' the unary ones, builtin or supplied function names
    become FunctionTokens and every other string a VariableToken.
    """
    functions = functions or {}
    tokens: List[Token] = []
    for item in items:
        if isinstance(item, (int, float)):
            tokens.append(NumberToken(item))
        elif item in BINARY_SYMBOLS:
            tokens.append(OperatorToken(get_builtin_operator(item, 2)))
        elif item in UNARY_ALIASES:
            tokens.append(OperatorToken(get_builtin_operator(UNARY_ALIASES[item], 1)))
        elif item in functions:
            tokens.append(FunctionToken(functions[item]))
        elif get_builtin_function(item) is not None:
            tokens.append(FunctionToken(get_builtin_function(item)))
        else:
            tokens.append(VariableToken(item))
    return tokens


@pytest.fixture
def rpn() -> Callable[..., List[Token]]:
    return build_tokens
