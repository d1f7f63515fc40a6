import pytest

from dspractice.intstack import IntStack

ELEMENTS = [111, 222, 333, 444, 777, 888, 999]


def test_push_until_full():
    stack = IntStack(6)
    for value in ELEMENTS[:6]:
        stack.push(value)
    assert stack.is_full()
    with pytest.raises(OverflowError):
        stack.push(ELEMENTS[6])
    assert str(stack) == "111 222 333 444 777 888"


def test_pop_order_and_reuse():
    stack = IntStack(6)
    for value in ELEMENTS[:6]:
        stack.push(value)
    assert stack.pop() == 888
    assert stack.pop() == 777
    stack.push(1234)
    stack.push(2345)
    assert str(stack) == "111 222 333 444 1234 2345"
    assert stack.top() == 2345


def test_empty_stack_errors():
    stack = IntStack()
    assert stack.is_empty()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()


def test_push_pop_round_trip():
    stack = IntStack(5)
    for value in range(5):
        stack.push(value)
    assert [stack.pop() for _ in range(5)] == [4, 3, 2, 1, 0]
    assert len(stack) == 0