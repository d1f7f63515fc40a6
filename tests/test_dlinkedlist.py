import pytest

from dspractice.dlinkedlist import DoublyLinkedList

ELEMENTS = [111, 222, 333, 444, 777, 888, 999]


def _assert_links(lst):
    size = len(lst)
    if size:
        assert lst.get_node(0).prev is None
    for i in range(1, size):
        assert lst.get_node(i).prev is lst.get_node(i - 1)


def test_sequential_inserts_append():
    lst = DoublyLinkedList()
    for i, value in enumerate(ELEMENTS[:5]):
        lst.insert(i, value)
    assert list(lst) == ELEMENTS[:5]
    assert str(lst) == "-".join(str(v) for v in ELEMENTS[:5])
    _assert_links(lst)


def test_insert_front_and_after_position():
    lst = DoublyLinkedList(ELEMENTS[:5])
    lst.insert(0, 100)
    lst.insert(3, 345)
    assert list(lst) == [100, 111, 222, 333, 345, 444, 777]
    _assert_links(lst)
    assert lst.remove_at(1) == 111
    assert list(lst) == [100, 222, 333, 345, 444, 777]
    _assert_links(lst)


def test_front_inserts_reverse_and_remove_front():
    lst = DoublyLinkedList()
    values = [1, 2, 3, 4, 5, 6, 7, 8, 9]
    for value in values:
        lst.insert(0, value)
    assert list(lst) == values[::-1]
    removed = [lst.remove_at(0) for _ in range(4)]
    assert removed == values[::-1][:4]
    assert list(lst) == values[::-1][4:]
    _assert_links(lst)


def test_remove_last_and_single():
    lst = DoublyLinkedList([1, 2, 3])
    assert lst.remove_at(2) == 3
    assert list(lst) == [1, 2]
    single = DoublyLinkedList([5])
    assert single.remove_at(0) == 5
    assert single.is_empty()


def test_remove_errors():
    lst = DoublyLinkedList([1, 2])
    with pytest.raises(IndexError):
        lst.remove_at(2)
    with pytest.raises(IndexError):
        lst.remove_at(-1)
    with pytest.raises(IndexError):
        DoublyLinkedList().remove_at(0)


def test_get_set():
    lst = DoublyLinkedList(ELEMENTS)
    assert lst.get(3) == ELEMENTS[3]
    lst.set(3, 0)
    assert lst.get(3) == 0
    assert lst.get_node(len(ELEMENTS)) is None
    with pytest.raises(IndexError):
        lst.get(len(ELEMENTS))
    with pytest.raises(IndexError):
        lst.set(-1, 0)


def test_concat():
    first = DoublyLinkedList(ELEMENTS[:3])
    second = DoublyLinkedList([1, 2])
    first.concat(second)
    assert list(first) == ELEMENTS[:3] + [1, 2]
    assert second.is_empty()
    _assert_links(first)
    empty = DoublyLinkedList()
    empty.concat(first)
    assert list(empty) == ELEMENTS[:3] + [1, 2]
    assert first.is_empty()


def test_clear_and_len():
    lst = DoublyLinkedList(ELEMENTS)
    assert len(lst) == len(ELEMENTS)
    lst.clear()
    assert lst.is_empty()
    assert len(lst) == 0