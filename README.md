# dspractice

A collection of classic data structures and algorithms, written as plain,
readable Python for study and experimentation. Operations that fail raise
exceptions (`IndexError`, `ValueError`, `OverflowError`, ...), and
traversals and sorts return their results as lists rather than printing them.

## What is inside

- `dspractice.core`: the size limits (`MAX_WEIGHT`, `MAX_SQLIST_SIZE`, ...),
  the weighted `Edge`, and the node types `LinkListNode`, `DLinkListNode`
  and `BinaryNode`.
- Linear structures:
  - `SeqList` (`dspractice.sqlist`): an array-backed list whose capacity
    doubles when full; `insert` clamps out-of-range positions.
  - `IntList` (`dspractice.intlist`): a bounded integer list with one-based
    `insert`/`remove` and zero-based `get` and indexing.
  - `IntStack` (`dspractice.intstack`) and `IntQueue`
    (`dspractice.intqueue`): bounded integer stack and ring-buffer queue.
  - `SeqQueue` (`dspractice.sqqueue`): a ring-buffer queue that doubles its
    array when full.
  - `LinkQueue` (`dspractice.linkqueue`): an unbounded queue of linked nodes.
  - `SinglyLinkedList` (`dspractice.linkedlist`), with `find_mid`,
    `reverse` and `reverse_recursive`, and `DoublyLinkedList`
    (`dspractice.dlinkedlist`).
- Trees:
  - `BinaryTree` and `CompleteBinaryTree` (`dspractice.binarytree`), with
    recursive and stack-based traversals, level order, `parent`,
    `ancestors` and `to_glist`; built with `from_preorder`, `from_pre_in`,
    `build_sample_tree` or `parse_glist`.
  - `BinarySortTree` (`dspractice.bst`) with recursive and iterative
    search and insert, and `remove_recursive`.
  - `HuffmanTree` (`dspractice.huffman`): node table in `nodes`, prefix
    codes in `codes`, and a text rendering from `format()`.
- Graphs:
  - `AbstractGraph` (`dspractice.graph`): `dfs` and `bfs` return one list of
    vertex data per connected piece.
  - `AdjMatrixGraph` (`dspractice.matrixgraph`) with `min_span_tree_prim`.
  - `AdjListGraph` (`dspractice.listgraph`), keeping each vertex's out-edges
    sorted by destination.
- Algorithms:
  - `dspractice.sorting`: `insert_sort`, `shell_sort`, `bubble_sort`,
    `quick_sort`, `select_sort`, `max_heap_sort`, `min_heap_sort`
    (descending), `merge_sort_recursive` and `merge_sort`. Each sorts its
    argument in place and returns the sequence as it stood initially and
    after every pass. `find_pairs` returns pairs that add up to a limit.
  - `dspractice.search`: `linear_search` and the in-place
    `remove_all_lw`, `remove_all_me` and `remove_all_zq`, which return the
    number of loop steps taken.
- Strings:
  - `itoa` and `atoi` (`dspractice.strconvert`) for 32-bit integers in
    bases 2, 8, 10 and 16.
  - `StringSplit`, `str_tok` and `string_tok` (`dspractice.split`) for
    splitting delimited text into ints, 64-bit ints, floats or strings.
- `Worker` (`dspractice.worker`): a thread wrapper with a `ThreadStatus`
  life cycle; subclasses override `run`.

## Installing

```
pip install .
```

## A short tour

```python
from dspractice.binarytree import parse_glist
from dspractice.bst import BinarySortTree
from dspractice.huffman import HuffmanTree
from dspractice.sorting import quick_sort

tree = parse_glist("A(B(D(^,H),E(I,^)),C(^,F(G,^)))")
print(tree.preorder(), tree.height(), tree.to_glist())

bst = BinarySortTree()
for value in (54, 18, 66, 87, 36):
    bst.insert(value)
print(bst.inorder())

print(HuffmanTree([5, 29, 7, 8, 14, 23, 3, 11]).format())

data = [55, 11, 66, 88, 33]
passes = quick_sort(data)
print(data, len(passes))
```

## What it does not do

This is a library only: it has no command-line program and prints nothing
by itself. `AdjMatrixGraph` offers Prim's minimum spanning tree but no
Kruskal variant, and there is no binary search routine. `Worker` runs a
single thread; there is no pool of workers.

## Running the tests

```
pip install .[test]
pytest
```