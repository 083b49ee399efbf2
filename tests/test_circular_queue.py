import pytest
from hypothesis import given, strategies as st

from algokit.circular_queue import BoundedQueue, QueueEmptyError


def test_fifo_order():
    q = BoundedQueue(5)
    for item in ["a", "b", "c"]:
        assert q.enqueue(item)
    assert q.front() == "a"
    assert q.dequeue() == "a"
    assert q.dequeue() == "b"
    assert q.front() == "c"
    assert len(q) == 1


def test_full_queue_rejects():
    q = BoundedQueue(2)
    assert q.enqueue(1)
    assert q.enqueue(2)
    assert not q.enqueue(3)
    assert len(q) == 2
    assert q.capacity() == 2


def test_wraps_after_dequeue():
    q = BoundedQueue(2)
    q.enqueue(1)
    q.enqueue(2)
    q.dequeue()
    assert q.enqueue(3)
    assert [q.dequeue(), q.dequeue()] == [2, 3]
    assert q.is_empty()


def test_front_of_empty_raises():
    q = BoundedQueue(3)
    with pytest.raises(QueueEmptyError):
        q.front()


def test_dequeue_empty_is_noop():
    q = BoundedQueue(3)
    assert q.dequeue() is None
    assert len(q) == 0
    assert q.is_empty()


def test_zero_capacity():
    q = BoundedQueue(0)
    assert not q.enqueue(1)
    assert q.is_empty()


def test_negative_capacity():
    with pytest.raises(ValueError):
        BoundedQueue(-1)


@given(st.integers(1, 10), st.lists(st.integers(), max_size=30))
def test_holds_at_most_capacity(capacity, values):
    q = BoundedQueue(capacity)
    accepted = [v for v in values if q.enqueue(v)]
    assert accepted == values[:capacity]
    assert len(q) == min(capacity, len(values))
    drained = []
    while not q.is_empty():
        drained.append(q.dequeue())
    assert drained == accepted