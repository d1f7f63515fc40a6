"""Shared limits, the weighted edge and the node types used by the containers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

MAX_LIST_SIZE = 4
MAX_STACK_SIZE = 4
MAX_QUEUE_SIZE = 4

MAX_SQLIST_SIZE = 64
MAX_SQQUEUE_SIZE = 64
MAX_SQSTACK_SIZE = 64

MAX_WEIGHT = 9999

MAX_ADJMATRIX_SIZE = 10
MAX_ADJLIST_SIZE = 10


@dataclass
class Edge:
    """A weighted edge from vertex ``start`` to vertex ``dest``."""

    start: int = 0
    dest: int = 0
    weight: int = 0

    def __str__(self) -> str:
        return f" ({self.start},{self.dest},{self.weight})"


@dataclass(eq=False)
class LinkListNode:
    """Node of a singly linked list."""

    data: Any = None
    next: Optional["LinkListNode"] = None


@dataclass(eq=False)
class DLinkListNode:
    """Node of a doubly linked list."""

    data: Any = None
    prev: Optional["DLinkListNode"] = None
    next: Optional["DLinkListNode"] = None


@dataclass(eq=False)
class BinaryNode:
    """Node of a binary tree stored as linked nodes."""

    data: Any = None
    left: Optional["BinaryNode"] = None
    right: Optional["BinaryNode"] = None