import pytest

from exprtree.deque import Deque


def test_new_deque_is_empty():
    d = Deque()
    assert d.empty()
    assert len(d) == 0


def test_push_back_keeps_order():
    d = Deque()
    for item in (1, 2, 3):
        d.push_back(item)
    assert list(d) == [1, 2, 3]
    assert d.front() == 1
    assert d.back() == 3


def test_push_front_reverses_order():
    d = Deque()
    for item in (1, 2, 3):
        d.push_front(item)
    assert list(d) == [3, 2, 1]


def test_pop_front_and_back_return_items():
    d = Deque([1, 2, 3])
    assert d.pop_front() == 1
    assert d.pop_back() == 3
    assert list(d) == [2]


def test_pop_on_empty_does_nothing():
    d = Deque()
    assert d.pop_front() is None
    assert d.pop_back() is None
    assert d.empty()


def test_front_and_back_of_empty_raise():
    d = Deque()
    with pytest.raises(IndexError):
        d.front()
    with pytest.raises(IndexError):
        d.back()


def test_copy_is_independent():
    original = Deque([1, 2])
    copy = Deque(original)
    copy.push_back(3)
    assert list(original) == [1, 2]
    assert list(copy) == [1, 2, 3]
    assert Deque([1, 2]) == original


def test_str_format():
    assert str(Deque()) == "[]"
    assert str(Deque([1, 2, 3])) == "[1, 2, 3]"


def test_single_item_push_pop_round_trip():
    d = Deque()
    d.push_front("x")
    assert d.front() == d.back() == "x"
    assert d.pop_back() == "x"
    assert d.empty()