import pytest

from triage_desk.linked_list import LinkedList


def make(*items):
    lst = LinkedList()
    for item in items:
        lst.push_back(item)
    return lst


def test_push_back_keeps_order():
    lst = make(1, 2, 3)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_push_front_prepends():
    lst = make(2)
    lst.push_front(1)
    assert list(lst) == [1, 2]


def test_cursor_walks_the_list():
    lst = make("a", "b")
    assert lst.first() == "a"
    assert lst.next() == "b"
    assert lst.next() is None


def test_first_on_empty_is_none():
    assert LinkedList().first() is None
    assert LinkedList().next() is None


def test_push_current_inserts_after_cursor():
    lst = make(1, 3)
    lst.first()
    lst.push_current(2)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_push_current_at_tail_updates_tail():
    lst = make(1)
    lst.first()
    lst.push_current(2)
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]


def test_push_current_without_cursor_raises():
    with pytest.raises(IndexError):
        make(1).push_current(2)


def test_sorted_insert_orders_items():
    lst = LinkedList()
    for value in [5, 1, 4, 2, 3]:
        lst.sorted_insert(value, lambda a, b: a < b)
    assert list(lst) == [1, 2, 3, 4, 5]


def test_sorted_insert_is_stable_for_equal_keys():
    lst = LinkedList()
    for item in [(1, "a"), (0, "b"), (1, "c")]:
        lst.sorted_insert(item, lambda a, b: a[0] < b[0])
    assert list(lst) == [(0, "b"), (1, "a"), (1, "c")]


def test_pop_front_and_back():
    lst = make(1, 2, 3)
    assert lst.pop_front() == 1
    assert lst.pop_back() == 3
    assert list(lst) == [2]
    assert lst.pop_back() == 2
    assert len(lst) == 0


def test_pop_from_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()
    with pytest.raises(IndexError):
        LinkedList().pop_back()


def test_pop_back_then_push_back_uses_new_tail():
    lst = make(1, 2)
    lst.pop_back()
    lst.push_back(9)
    assert list(lst) == [1, 9]


def test_pop_current_middle_advances_cursor():
    lst = make(1, 2, 3)
    lst.first()
    lst.next()
    assert lst.pop_current() == 2
    assert list(lst) == [1, 3]
    assert lst.pop_current() == 3
    assert list(lst) == [1]


def test_pop_current_head():
    lst = make(1, 2)
    lst.first()
    assert lst.pop_current() == 1
    assert list(lst) == [2]


def test_pop_current_without_cursor_raises():
    with pytest.raises(IndexError):
        make(1).pop_current()


def test_clear_empties_list():
    lst = make(1, 2)
    lst.first()
    lst.clear()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.first() is None