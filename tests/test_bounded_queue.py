import pytest

from algokit.bounded_queue import BoundedQueue, QueueEmptyError


def test_fifo_order():
    q = BoundedQueue(5)
    for i in range(5):
        assert q.enqueue(i) is True
    assert [q.dequeue() for _ in range(5)] == [0, 1, 2, 3, 4]
    assert q.is_empty()


def test_enqueue_refused_when_full():
    q = BoundedQueue(2)
    assert q.enqueue("a")
    assert q.enqueue("b")
    assert q.enqueue("c") is False
    assert len(q) == 2
    assert q.front() == "a"


def test_front_on_empty_raises():
    q = BoundedQueue(3)
    with pytest.raises(QueueEmptyError, match="Queue is empty."):
        q.front()


def test_dequeue_on_empty_raises():
    q = BoundedQueue(3)
    with pytest.raises(QueueEmptyError):
        q.dequeue()


def test_reuse_after_wraparound():
    q = BoundedQueue(3)
    for round_ in range(4):
        for i in range(3):
            assert q.enqueue((round_, i))
        assert not q.enqueue("overflow")
        assert [q.dequeue() for _ in range(3)] == [(round_, i) for i in range(3)]
    assert len(q) == 0
    assert q.capacity == 3


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedQueue(-1)