import pytest

from postfix_eval import OperandStack


def test_push_pop_is_lifo():
    stack = OperandStack()
    for value in (1.0, 2.0, 3.0):
        stack.push(value)
    assert stack.size() == 3
    assert stack.pop() == 3.0
    assert stack.pop() == 2.0
    assert stack.pop() == 1.0
    assert stack.is_empty()


def test_push_grows_beyond_initial_capacity():
    stack = OperandStack(initial_capacity=2)
    for i in range(17):
        stack.push(float(i))
    assert stack.size() == 17
    assert stack.capacity >= 17
    assert [stack.pop() for _ in range(17)] == [float(i) for i in reversed(range(17))]


def test_reset_keeps_capacity():
    stack = OperandStack(initial_capacity=2)
    for i in range(10):
        stack.push(float(i))
    capacity = stack.capacity
    stack.reset()
    assert len(stack) == 0
    assert stack.capacity == capacity


def test_peek_does_not_remove():
    stack = OperandStack()
    stack.push(4.5)
    assert stack.peek() == 4.5
    assert stack.size() == 1


def test_empty_stack_errors():
    stack = OperandStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_rejects_non_positive_capacity():
    with pytest.raises(ValueError):
        OperandStack(initial_capacity=0)
