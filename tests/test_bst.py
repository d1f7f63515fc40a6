from dspractice.bst import BinarySortTree

SORT_LIST = [54, 18, 66, 87, 36, 12, 54, 81, 15, 76, 57, 6, 40, 99, 85, 99]


def build(recursive=True):
    tree = BinarySortTree()
    add = tree.insert_recursive if recursive else tree.insert
    inserted = [value for value in SORT_LIST if add(value) is not None]
    return tree, inserted


def test_recursive_insert_sorts_and_skips_duplicates():
    tree, inserted = build(recursive=True)
    assert len(inserted) == len(set(SORT_LIST))
    assert tree.inorder() == sorted(set(SORT_LIST))
    assert tree.count() == len(set(SORT_LIST))


def test_iterative_insert_matches_recursive():
    rec, _ = build(recursive=True)
    it, inserted = build(recursive=False)
    assert it.preorder() == rec.preorder()
    assert inserted == list(dict.fromkeys(SORT_LIST))
    assert list(it.inorder_iter()) == sorted(set(SORT_LIST))


def test_search_both_ways():
    tree, _ = build()
    for value in (99, 36, 66):
        assert tree.search(value).data == value
        assert tree.search_recursive(value).data == value
    assert tree.search(100) is None
    assert tree.search_recursive(1) is None


def test_remove_root_with_two_children_and_reinsert():
    tree, _ = build()
    assert tree.remove_recursive(54)
    expected = sorted(set(SORT_LIST) - {54})
    assert tree.inorder() == expected
    assert tree.search(54) is None
    assert tree.insert_recursive(54) is not None
    assert tree.inorder() == sorted(set(SORT_LIST))


def test_remove_every_value_keeps_order():
    tree, _ = build()
    remaining = sorted(set(SORT_LIST))
    for value in list(dict.fromkeys(SORT_LIST)):
        assert tree.remove_recursive(value)
        remaining.remove(value)
        assert tree.inorder() == remaining
    assert tree.is_empty()


def test_remove_missing_and_from_empty():
    tree, _ = build()
    assert not tree.remove_recursive(1000)
    assert not BinarySortTree().remove_recursive(1)


def test_remove_root_with_single_child():
    tree = BinarySortTree()
    tree.insert(5)
    tree.insert(3)
    tree.insert(1)
    assert tree.remove_recursive(5)
    assert tree.root.data == 3
    assert tree.inorder() == [1, 3]