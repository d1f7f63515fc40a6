import pytest

from dspractice.intlist import IntList


@pytest.fixture
def filled():
    lst = IntList(4)
    lst.insert(1, 222)
    lst.insert(2, 333)
    lst.insert(2, 444)
    lst.insert(2, 555)
    return lst


def test_insert_position_zero_rejected():
    with pytest.raises(IndexError):
        IntList(4).insert(0, 111)


def test_insert_order(filled):
    assert list(filled) == [222, 555, 444, 333]
    assert filled[2] == 444
    assert filled.is_full()


def test_insert_when_full(filled):
    with pytest.raises(OverflowError):
        filled.insert(1, 1)


def test_remove_one_based(filled):
    assert filled.remove(1) == 222
    assert list(filled) == [555, 444, 333]
    with pytest.raises(IndexError):
        filled.remove(4)


def test_getitem_out_of_range_is_zero(filled):
    assert filled[10] == 0
    assert filled[-1] == 0


def test_get_raises(filled):
    assert filled.get(0) == 222
    with pytest.raises(IndexError):
        filled.get(4)


def test_find_prior_next(filled):
    assert filled.find(444) == 2
    assert filled.prior(444) == 555
    assert filled.next_of(444) == 333
    with pytest.raises(ValueError):
        filled.prior(222)
    with pytest.raises(ValueError):
        filled.next_of(333)
    with pytest.raises(ValueError):
        filled.find(1)


def test_clear(filled):
    filled.clear()
    assert filled.is_empty()
    assert len(filled) == 0


def test_str(filled):
    assert str(filled) == "222 555 444 333"