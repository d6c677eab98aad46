from concurrent.futures import Future, ThreadPoolExecutor, as_completed

import pytest

from postfix_eval import Expression, UnboundVariableError


def test_evaluate_async_resolves_to_result(rpn):
    expr = Expression(rpn('x', 2, '^')).set_variable('x', 3.0)
    with ThreadPoolExecutor(max_workers=1) as executor:
        future = expr.evaluate_async(executor)
        assert isinstance(future, Future)
        assert future.result(timeout=10) == 9.0


def test_evaluate_async_propagates_errors(rpn):
    expr = Expression(rpn('missing', 1, '+'))
    with ThreadPoolExecutor(max_workers=1) as executor:
        future = expr.evaluate_async(executor)
        with pytest.raises(UnboundVariableError):
            future.result(timeout=10)


def test_copies_evaluate_concurrently(rpn):
    template = Expression(rpn('x', 'x', '*', 1, '+'))
    copies = []
    for x in range(20):
        clone = template.copy()
        clone.set_variable('x', float(x))
        copies.append((x, clone))

    with ThreadPoolExecutor(max_workers=4) as executor:
        futures = {clone.evaluate_async(executor): x for x, clone in copies}
        results = {futures[fut]: fut.result(timeout=10) for fut in as_completed(futures)}

    assert results == {x: float(x * x + 1) for x in range(20)}
