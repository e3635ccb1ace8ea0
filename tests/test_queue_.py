import pytest

from nodekit.queue_ import Queue


def test_first_in_first_out():
    queue = Queue()
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert [queue.dequeue(), queue.dequeue(), queue.dequeue()] == [1, 2, 3]
    assert queue.is_empty()


def test_front_does_not_remove():
    queue = Queue(["x", "y"])
    assert queue.front() == "x"
    assert len(queue) == 2


def test_iteration_order_matches_insertion():
    items = [4, 5, 6]
    assert list(Queue(items)) == items


def test_interleaved_operations():
    queue = Queue([1])
    queue.enqueue(2)
    assert queue.dequeue() == 1
    queue.enqueue(3)
    assert list(queue) == [2, 3]
    assert len(queue) == 2


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        Queue().dequeue()


def test_front_empty_raises():
    queue = Queue([1])
    queue.dequeue()
    with pytest.raises(IndexError):
        queue.front()