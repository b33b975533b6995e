import pytest

from dsakit.circular_queue import CircularQueue, QueueEmptyError


def test_queue_session_with_growth():
    q = CircularQueue(5)
    for value in (10, 20, 30, 40, 50, 60):
        q.enqueue(value)
    assert q.front() == 10
    assert q.dequeue() == 10
    assert q.dequeue() == 20
    assert q.dequeue() == 30
    assert len(q) == 3
    assert bool(q) is True


def test_growth_doubles_capacity():
    q = CircularQueue(5, items=range(6))
    assert q.capacity == 10
    assert list(q) == list(range(6))


def test_growth_after_wraparound_keeps_order():
    q = CircularQueue(3)
    for value in (1, 2, 3):
        q.enqueue(value)
    assert q.dequeue() == 1
    q.enqueue(4)
    q.enqueue(5)
    assert q.capacity == 6
    assert [q.dequeue() for _ in range(4)] == [2, 3, 4, 5]
    assert len(q) == 0


def test_fifo_order_over_many_operations():
    q = CircularQueue(2)
    expected = []
    for value in range(20):
        q.enqueue(value)
        expected.append(value)
        if value % 3 == 0:
            assert q.dequeue() == expected.pop(0)
    assert list(q) == expected


def test_dequeue_on_empty_raises():
    with pytest.raises(QueueEmptyError):
        CircularQueue().dequeue()


def test_front_on_empty_after_draining_raises():
    q = CircularQueue(2, items=["a"])
    assert q.dequeue() == "a"
    with pytest.raises(QueueEmptyError):
        q.front()


def test_reuse_after_emptying():
    q = CircularQueue(2, items=[1, 2])
    q.dequeue()
    q.dequeue()
    q.enqueue(7)
    assert q.front() == 7
    assert q.capacity == 2


def test_invalid_capacity_rejected():
    with pytest.raises(ValueError):
        CircularQueue(0)