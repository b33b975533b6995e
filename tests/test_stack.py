import pytest

from dsakit.stack import Stack, StackEmptyError, StackFullError


def test_bounded_stack_session():
    s = Stack(4)
    for value in (10, 20, 30, 40):
        s.push(value)
    with pytest.raises(StackFullError):
        s.push(50)
    assert s.top() == 40
    assert s.pop() == 40
    assert s.pop() == 30
    assert s.pop() == 20
    assert len(s) == 1
    assert bool(s) is True


def test_growing_stack_session():
    s = Stack()
    for value in (10, 20, 30, 40, 50):
        s.push(value)
    assert s.top() == 50
    assert [s.pop(), s.pop(), s.pop()] == [50, 40, 30]
    assert len(s) == 2


def test_growing_stack_holds_many():
    s = Stack(items=range(100))
    assert len(s) == 100
    assert list(s) == list(range(99, -1, -1))


def test_pop_on_empty_raises():
    with pytest.raises(StackEmptyError):
        Stack().pop()


def test_top_on_empty_raises():
    s = Stack(2)
    s.push("a")
    s.pop()
    with pytest.raises(StackEmptyError):
        s.top()


def test_stack_of_characters():
    s = Stack()
    for ch in "defgh":
        s.push(ch)
    assert s.top() == "h"
    assert [s.pop() for _ in range(3)] == ["h", "g", "f"]
    assert len(s) == 2


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(-1)


def test_zero_capacity_refuses_push():
    with pytest.raises(StackFullError):
        Stack(0).push(1)


def test_empty_stack_is_falsy():
    s = Stack()
    assert len(s) == 0
    assert not s