import pytest

from dspractice.search import linear_search, remove_all_lw, remove_all_me, remove_all_zq

SAMPLE = [2, 3, 4, 2, 5, 7, 2, 2, 2, 8, 2]


def test_linear_search_finds_first():
    items = [4, 9, 7, 9]
    pos = linear_search(items, 9)
    assert items[pos] == 9
    assert 9 not in items[:pos]


def test_linear_search_missing_and_empty():
    assert linear_search([1, 2, 3], 5) == -1
    assert linear_search([], 5) == -1


def test_remove_all_lw_sample():
    data = list(SAMPLE)
    loops = remove_all_lw(data, 2)
    kept = [x for x in SAMPLE if x != 2]
    assert data == kept + [0] * (len(SAMPLE) - len(kept))
    assert loops > 0


def test_remove_all_lw_no_match():
    data = [1, 3, 5]
    remove_all_lw(data, 2)
    assert data == [1, 3, 5]


def test_remove_all_me_sample():
    data = list(SAMPLE)
    loops = remove_all_me(data, 2)
    assert data == [x for x in SAMPLE if x != 2]
    assert loops >= len(SAMPLE)


def test_remove_all_me_everything():
    data = [2, 2, 2]
    remove_all_me(data, 2)
    assert data == []


def test_remove_all_zq_sample():
    data = list(SAMPLE)
    loops = remove_all_zq(data, 2)
    assert data == [3, 4, 5, 7, 8, 2, 2, 2, 2, 2, 2]
    assert loops == len(SAMPLE) - 1 + SAMPLE[:-1].count(2)


def test_remove_all_zq_keeps_last_element():
    data = [1, 2, 3, 2]
    remove_all_zq(data, 2)
    assert data[:2] == [1, 3]
    assert data[-1] == 2


@pytest.mark.parametrize("func", [remove_all_lw, remove_all_me, remove_all_zq])
def test_empty_data_rejected(func):
    with pytest.raises(ValueError):
        func([], 2)