"""Binary sort tree (binary search tree) with recursive and iterative operations."""

from __future__ import annotations

from typing import Any, Optional

from .binarytree import BinaryTree
from .core import BinaryNode


class BinarySortTree(BinaryTree):
    """A binary tree whose inorder sequence is sorted and holds no duplicates."""

    def search_recursive(self, value: Any) -> Optional[BinaryNode]:
        def walk(node: Optional[BinaryNode]) -> Optional[BinaryNode]:
            if node is None:
                return None
            if value == node.data:
                return node
            if value < node.data:
                return walk(node.left)
            return walk(node.right)

        return walk(self.root)

    def search(self, value: Any) -> Optional[BinaryNode]:
        node = self.root
        while node is not None:
            if node.data == value:
                return node
            node = node.left if node.data > value else node.right
        return None

    def insert_recursive(self, value: Any) -> Optional[BinaryNode]:
        """Insert ``value``; return the new node, or None if it was already present."""
        if self.root is None:
            self.root = BinaryNode(value)
            return self.root

        def walk(node: BinaryNode) -> Optional[BinaryNode]:
            if value == node.data:
                return None
            if value < node.data:
                if node.left is not None:
                    return walk(node.left)
                node.left = BinaryNode(value)
                return node.left
            if node.right is not None:
                return walk(node.right)
            node.right = BinaryNode(value)
            return node.right

        return walk(self.root)

    def insert(self, value: Any) -> Optional[BinaryNode]:
        """Insert ``value``; return the new node, or None if it was already present."""
        if self.root is None:
            self.root = BinaryNode(value)
            return self.root
        node = self.root
        while node.data != value:
            if value < node.data:
                if node.left is None:
                    node.left = BinaryNode(value)
                    return node.left
                node = node.left
            else:
                if node.right is None:
                    node.right = BinaryNode(value)
                    return node.right
                node = node.right
        return None

    def remove_recursive(self, value: Any) -> bool:
        """Remove ``value``; report whether it was found."""
        return self.root is not None and self._remove(value, self.root, None)

    def _remove(self, value: Any, node: Optional[BinaryNode], parent: Optional[BinaryNode]) -> bool:
        if node is None:
            return False
        if value < node.data:
            return self._remove(value, node.left, node)
        if value > node.data:
            return self._remove(value, node.right, node)
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.data = successor.data
            return self._remove(node.data, node.right, node)
        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif node is parent.left:
            parent.left = child
        else:
            parent.right = child
        return True