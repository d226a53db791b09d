import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.stack import BoundedStack, StackEmptyError, StackFullError


def _demo_stack():
    stack = BoundedStack()
    for value in (5, 4, 3, 2, 1):
        stack.push(value)
    return stack


def test_string_form_lists_bottom_to_top():
    assert str(_demo_stack()) == "54321"


def test_pop_returns_top_and_shrinks():
    stack = _demo_stack()
    assert stack.pop() == 1
    assert str(stack) == "5432"
    assert len(stack) == 4


def test_iteration_runs_bottom_to_top():
    assert list(_demo_stack()) == [5, 4, 3, 2, 1]


def test_default_capacity_holds_ten_items():
    stack = BoundedStack()
    for value in range(10):
        stack.push(value)
    with pytest.raises(StackFullError):
        stack.push(10)
    assert len(stack) == 10


def test_custom_capacity_is_enforced():
    stack = BoundedStack(2)
    stack.push("a")
    stack.push("b")
    with pytest.raises(StackFullError):
        stack.push("c")
    assert list(stack) == ["a", "b"]


def test_pop_from_empty_raises():
    with pytest.raises(StackEmptyError):
        BoundedStack().pop()


def test_pop_after_draining_raises():
    stack = BoundedStack(3)
    stack.push(7)
    assert stack.pop() == 7
    with pytest.raises(StackEmptyError):
        stack.pop()


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedStack(-1)


def test_empty_stack_string_is_empty():
    assert str(BoundedStack()) == ""


@given(st.lists(st.integers(), max_size=10))
def test_popping_everything_reverses_pushes(values):
    stack = BoundedStack()
    for value in values:
        stack.push(value)
    popped = [stack.pop() for _ in range(len(values))]
    assert popped == values[::-1]
    assert len(stack) == 0