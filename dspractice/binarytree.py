"""Binary tree of linked nodes, with recursive and stack-based traversals."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional, Sequence

from .core import BinaryNode
from .linkqueue import LinkQueue


class BinaryTree:
    """A binary tree held through its root node."""

    def __init__(self, root: Optional[BinaryNode] = None):
        self.root = root

    @classmethod
    def from_preorder(cls, pre_list: Iterable[Any]) -> "BinaryTree":
        """Build a tree from a preorder sequence where None marks an empty subtree."""
        items = iter(pre_list)
        exhausted = object()

        def build() -> Optional[BinaryNode]:
            elem = next(items, exhausted)
            if elem is exhausted or elem is None:
                return None
            node = BinaryNode(elem)
            node.left = build()
            node.right = build()
            return node

        return cls(build())

    @classmethod
    def from_pre_in(cls, pre_list: Sequence[Any], in_list: Sequence[Any]) -> "BinaryTree":
        """Build the unique tree with the given preorder and inorder sequences."""
        if len(pre_list) != len(in_list):
            raise ValueError("preorder and inorder sequences differ in length")

        def build(pre_start: int, in_start: int, n: int) -> Optional[BinaryNode]:
            if n <= 0:
                return None
            elem = pre_list[pre_start]
            node = BinaryNode(elem)
            for i in range(n):
                if in_list[in_start + i] == elem:
                    break
            else:
                raise ValueError(f"{elem!r} is missing from the inorder sequence")
            node.left = build(pre_start + 1, in_start, i)
            node.right = build(pre_start + 1 + i, in_start + 1 + i, n - i - 1)
            return node

        return cls(build(0, 0, len(pre_list)))

    def is_empty(self) -> bool:
        return self.root is None

    def preorder(self) -> List[Any]:
        out: List[Any] = []

        def walk(node: Optional[BinaryNode]) -> None:
            if node is not None:
                out.append(node.data)
                walk(node.left)
                walk(node.right)

        walk(self.root)
        return out

    def inorder(self) -> List[Any]:
        out: List[Any] = []

        def walk(node: Optional[BinaryNode]) -> None:
            if node is not None:
                walk(node.left)
                out.append(node.data)
                walk(node.right)

        walk(self.root)
        return out

    def postorder(self) -> List[Any]:
        out: List[Any] = []

        def walk(node: Optional[BinaryNode]) -> None:
            if node is not None:
                walk(node.left)
                walk(node.right)
                out.append(node.data)

        walk(self.root)
        return out

    def count(self) -> int:
        def walk(node: Optional[BinaryNode]) -> int:
            if node is None:
                return 0
            return 1 + walk(node.left) + walk(node.right)

        return walk(self.root)

    def height(self) -> int:
        def walk(node: Optional[BinaryNode]) -> int:
            if node is None:
                return 0
            return max(walk(node.left), walk(node.right)) + 1

        return walk(self.root)

    def leaf_count(self) -> int:
        def walk(node: Optional[BinaryNode]) -> int:
            if node is None:
                return 0
            if node.left is None and node.right is None:
                return 1
            return walk(node.left) + walk(node.right)

        return walk(self.root)

    def search(self, value: Any) -> Optional[BinaryNode]:
        """Return the first node in preorder holding ``value``, or None."""

        def walk(node: Optional[BinaryNode]) -> Optional[BinaryNode]:
            if node is None:
                return None
            if node.data == value:
                return node
            found = walk(node.left)
            return found if found is not None else walk(node.right)

        return walk(self.root)

    def parent(self, node: Optional[BinaryNode]) -> Optional[BinaryNode]:
        """Return the parent of ``node``; None for the root or a foreign node."""
        if self.root is None or node is None or node is self.root:
            return None

        def walk(candidate: Optional[BinaryNode]) -> Optional[BinaryNode]:
            if candidate is None:
                return None
            if candidate.left is node or candidate.right is node:
                return candidate
            found = walk(candidate.left)
            return found if found is not None else walk(candidate.right)

        return walk(self.root)

    def ancestors(self, value: Any) -> List[Any]:
        """Return the values above the node holding ``value``, nearest first."""
        node = self.search(value)
        if node is None:
            raise ValueError(f"{value!r} is not in the tree")
        result = []
        parent = self.parent(node)
        while parent is not None:
            result.append(parent.data)
            parent = self.parent(parent)
        return result

    def to_glist(self) -> str:
        """Render the tree as a generalised list, with ``^`` for an empty subtree."""

        def render(node: Optional[BinaryNode]) -> str:
            if node is None:
                return "^"
            if node.left is None and node.right is None:
                return str(node.data)
            return f"{node.data}({render(node.left)},{render(node.right)})"

        return render(self.root)

    def insert(self, node: BinaryNode, value: Any, left: bool = True) -> BinaryNode:
        """Insert ``value`` as the left or right child of ``node``.

        The previous child on that side becomes the new node's child on the same side.
        """
        if node is None:
            raise ValueError("cannot insert under a missing node")
        new = BinaryNode(value)
        if left:
            new.left = node.left
            node.left = new
        else:
            new.right = node.right
            node.right = new
        return new

    def remove_child(self, node: BinaryNode, left: bool = True) -> None:
        """Drop the whole left or right subtree of ``node``."""
        if node is None:
            raise ValueError("cannot remove under a missing node")
        if left:
            node.left = None
        else:
            node.right = None

    def preorder_iter(self) -> Iterator[Any]:
        stack: List[BinaryNode] = []
        node = self.root
        while node is not None or stack:
            if node is not None:
                yield node.data
                stack.append(node)
                node = node.left
            else:
                node = stack.pop().right

    def inorder_iter(self) -> Iterator[Any]:
        stack: List[BinaryNode] = []
        node = self.root
        while node is not None or stack:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                yield node.data
                node = node.right

    def postorder_iter(self) -> Iterator[Any]:
        if self.root is None:
            return
        nodes = [self.root]
        values: List[Any] = []
        while nodes:
            node = nodes.pop()
            values.append(node.data)
            if node.left is not None:
                nodes.append(node.left)
            if node.right is not None:
                nodes.append(node.right)
        yield from reversed(values)

    def level_order(self) -> Iterator[Any]:
        queue = LinkQueue()
        node = self.root
        while node is not None:
            yield node.data
            if node.left is not None:
                queue.enqueue(node.left)
            if node.right is not None:
                queue.enqueue(node.right)
            node = None if queue.is_empty() else queue.dequeue()


class CompleteBinaryTree(BinaryTree):
    """A complete binary tree built from its level-order sequence."""

    def __init__(self, level_list: Sequence[Any] = ()):
        items = list(level_list)

        def build(i: int) -> Optional[BinaryNode]:
            if i >= len(items):
                return None
            node = BinaryNode(items[i])
            node.left = build(2 * i + 1)
            node.right = build(2 * i + 2)
            return node

        super().__init__(build(0))


def build_sample_tree() -> BinaryTree:
    """Return the fixed tree A(B(D(^,G),^),C(E,F(H,^)))."""
    g = BinaryNode("G")
    d = BinaryNode("D", None, g)
    b = BinaryNode("B", d)
    h = BinaryNode("H")
    f = BinaryNode("F", h)
    e = BinaryNode("E")
    c = BinaryNode("C", e, f)
    return BinaryTree(BinaryNode("A", b, c))


def parse_glist(text: str) -> BinaryTree:
    """Build a tree of single upper-case letters from its generalised-list form."""
    pos = 0

    def peek() -> str:
        return text[pos] if pos < len(text) else ""

    def build() -> Optional[BinaryNode]:
        nonlocal pos
        node = None
        ch = peek()
        if "A" <= ch <= "Z" and ch:
            node = BinaryNode(ch)
            pos += 1
            if peek() == "(":
                pos += 1
                node.left = build()
                pos += 1
                node.right = build()
                pos += 1
        if peek() == "^":
            pos += 1
        return node

    return BinaryTree(build())