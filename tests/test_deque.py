import pytest

from linkedlists.deque import Deque


def _front_filled(*values):
    deque = Deque()
    for value in values:
        deque.push_front(value)
    return deque


def test_basics():
    deque = Deque()
    assert deque.pop_front() is None

    deque.push_front(1)
    deque.push_front(2)
    deque.push_front(3)
    assert deque.pop_front() == 3
    assert deque.pop_front() == 2

    deque.push_front(4)
    deque.push_front(5)
    assert deque.pop_front() == 5
    assert deque.pop_front() == 4

    assert deque.pop_front() == 1
    assert deque.pop_front() is None

    assert deque.pop_back() is None

    deque.push_back(1)
    deque.push_back(2)
    deque.push_back(3)
    assert deque.pop_back() == 3
    assert deque.pop_back() == 2

    deque.push_back(4)
    deque.push_back(5)
    assert deque.pop_back() == 5
    assert deque.pop_back() == 4

    assert deque.pop_back() == 1
    assert deque.pop_back() is None


def test_peek():
    deque = Deque()
    assert deque.peek_front() is None
    assert deque.peek_back() is None

    deque.push_front(1)
    deque.push_front(2)
    deque.push_front(3)
    assert deque.peek_front() == 3
    assert deque.peek_back() == 1


def test_set_ends():
    deque = _front_filled(1, 2, 3)
    deque.set_front(30)
    deque.set_back(10)
    assert deque.pop_front() == 30
    assert deque.pop_back() == 10
    assert deque.pop_front() == 2


def test_set_on_empty_raises():
    deque = Deque()
    with pytest.raises(IndexError):
        deque.set_front(1)
    with pytest.raises(IndexError):
        deque.set_back(1)


def test_drain():
    deque = _front_filled(1, 2, 3)
    it = deque.drain()
    assert next(it) == 3
    assert it.next_back() == 1
    assert next(it) == 2
    assert it.next_back() is None
    with pytest.raises(StopIteration):
        next(it)


def test_drain_reversed_and_list():
    assert list(_front_filled(1, 2, 3).drain()) == [3, 2, 1]
    assert list(reversed(_front_filled(1, 2, 3).drain())) == [1, 2, 3]


def test_mixed_ends_and_len():
    deque = Deque()
    assert len(deque) == 0
    assert not deque
    deque.push_back(2)
    deque.push_front(1)
    deque.push_back(3)
    assert len(deque) == 3
    assert deque
    assert deque.pop_front() == 1
    assert deque.pop_back() == 3
    assert deque.peek_front() == deque.peek_back() == 2
    assert deque.pop_back() == 2
    assert len(deque) == 0
    assert deque.peek_front() is None