import pytest

from dsakit.stack import BoundedStack, StackOverflowError, StackUnderflowError


def test_push_beyond_capacity_overflows():
    values = [10, 20, 30, 40, 50]
    stack = BoundedStack(5)
    for value in values:
        stack.push(value)
    with pytest.raises(StackOverflowError):
        stack.push(60)
    assert len(stack) == len(values)


def test_pop_returns_last_pushed():
    values = [10, 20, 30, 40, 50]
    stack = BoundedStack()
    for value in values:
        stack.push(value)
    assert stack.pop() == values[-1]
    assert list(stack) == values[-2::-1]
    assert stack.pop() == values[-2]
    assert stack.peek() == values[-3]


def test_peek_does_not_remove():
    stack = BoundedStack()
    stack.push(1)
    stack.push(2)
    assert stack.peek() == 2
    assert len(stack) == 2


def test_iteration_is_top_to_bottom():
    values = [10, 20, 30, 40]
    stack = BoundedStack()
    for value in values:
        stack.push(value)
    assert list(stack) == list(reversed(values))
    assert stack.render() == "40 30 20 10"


def test_empty_stack_underflows():
    stack = BoundedStack()
    with pytest.raises(StackUnderflowError):
        stack.pop()
    with pytest.raises(StackUnderflowError):
        stack.peek()


def test_render_empty_stack():
    assert BoundedStack().render() == "Stack is empty"


def test_push_pop_round_trip_empties_stack():
    stack = BoundedStack(3)
    for value in (7, 8, 9):
        stack.push(value)
    popped = [stack.pop() for _ in range(3)]
    assert popped == [9, 8, 7]
    assert len(stack) == 0


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedStack(-1)