import pytest

from dsakit.bounded_queue import BoundedQueue, QueueEmptyError, QueueFullError


def test_fifo_order():
    queue = BoundedQueue(5)
    for item in (10, 20, 30):
        queue.enqueue(item)
    assert list(queue) == [10, 20, 30]
    assert queue.dequeue() == 10
    assert list(queue) == [20, 30]
    assert len(queue) == 2


def test_empty_queue_raises():
    queue = BoundedQueue(3)
    assert queue.is_empty()
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_full_queue_raises():
    queue = BoundedQueue(2)
    queue.enqueue("a")
    queue.enqueue("b")
    with pytest.raises(QueueFullError):
        queue.enqueue("c")


def test_slots_are_not_reused_after_dequeue():
    queue = BoundedQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.dequeue() == 1
    with pytest.raises(QueueFullError):
        queue.enqueue(3)
    assert list(queue) == [2]


def test_drain_to_empty():
    queue = BoundedQueue()
    items = list(range(10))
    for item in items:
        queue.enqueue(item)
    drained = [queue.dequeue() for _ in items]
    assert drained == items
    assert queue.is_empty()
    assert len(queue) == 0


def test_default_capacity():
    queue = BoundedQueue()
    assert queue.capacity == 10


def test_str_joins_items():
    queue = BoundedQueue(4)
    queue.enqueue(10)
    queue.enqueue(20)
    assert str(queue) == "10 20"


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedQueue(-1)