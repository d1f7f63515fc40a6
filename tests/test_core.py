from dspractice.core import (
    MAX_WEIGHT,
    BinaryNode,
    DLinkListNode,
    Edge,
    LinkListNode,
)


def test_edge_str_format():
    assert str(Edge(0, 1, 5)) == " (0,1,5)"


def test_edge_defaults_are_zero():
    edge = Edge()
    assert (edge.start, edge.dest, edge.weight) == (0, 0, 0)


def test_edge_equality_by_value():
    assert Edge(2, 4, 3) == Edge(2, 4, 3)
    assert not Edge(2, 4, 3) == Edge(4, 2, 3)


def test_edge_with_max_weight_formats_value():
    assert str(Edge(1, 2, MAX_WEIGHT)) == " (1,2,9999)"


def test_linked_nodes_chain():
    tail = LinkListNode(2)
    head = LinkListNode(1, tail)
    assert head.next is tail
    assert tail.next is None
    assert [head.data, head.next.data] == [1, 2]


def test_nodes_compare_by_identity():
    nodes = [LinkListNode(1), LinkListNode(1)]
    assert nodes.index(nodes[1]) == 1
    tree_nodes = [BinaryNode("A"), BinaryNode("A")]
    assert tree_nodes.count(tree_nodes[0]) == 1


def test_doubly_linked_node_links():
    first = DLinkListNode("a")
    second = DLinkListNode("b", prev=first)
    first.next = second
    assert first.next.prev is first
    assert first.prev is None


def test_binary_node_children():
    left = BinaryNode("B")
    root = BinaryNode("A", left)
    assert root.left is left
    assert root.right is None
    assert left.left is None and left.right is None