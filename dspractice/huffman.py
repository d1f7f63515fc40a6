"""Huffman tree stored in a node array, with the resulting prefix codes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .core import MAX_WEIGHT


@dataclass
class TriNode:
    """Array-stored tree node linking to parent and children by index (-1 for none)."""

    weight: int = MAX_WEIGHT
    parent: int = -1
    left: int = -1
    right: int = -1


class HuffmanTree:
    """Huffman tree built from leaf weights; ``codes[i]`` is the code of leaf ``i``."""

    def __init__(self, weights: Sequence[int]):
        n = len(weights)
        if n <= 1:
            raise ValueError("a Huffman tree needs at least two weights")
        self.leaf_count = n
        self.nodes = [TriNode(weight=w) for w in weights]
        self.nodes.extend(TriNode() for _ in range(n - 1))
        self._build()
        self.codes = [self._code(i) for i in range(n)]

    def _build(self) -> None:
        n = self.leaf_count
        for i in range(n - 1):
            min1 = min2 = MAX_WEIGHT
            pos1 = pos2 = -1
            for j, node in enumerate(self.nodes[: n + i]):
                if node.parent != -1:
                    continue
                if node.weight < min1:
                    min2, pos2 = min1, pos1
                    min1, pos1 = node.weight, j
                elif node.weight < min2:
                    min2, pos2 = node.weight, j
            if pos1 == -1 or pos2 == -1:
                raise ValueError(f"weights must stay below {MAX_WEIGHT}")
            self.nodes[pos1].parent = n + i
            self.nodes[pos2].parent = n + i
            self.nodes[n + i] = TriNode(weight=min1 + min2, parent=-1, left=pos1, right=pos2)

    def _code(self, leaf: int) -> str:
        bits = []
        child = leaf
        parent = self.nodes[child].parent
        while parent != -1:
            bits.append("0" if self.nodes[parent].left == child else "1")
            child = parent
            parent = self.nodes[child].parent
        return "".join(reversed(bits))

    def format(self) -> str:
        """Render the node table followed by each leaf's code."""
        lines = ["Huffman tree nodes:"]
        for i, node in enumerate(self.nodes):
            lines.append(
                f"Node[{i:2d}]: {node.weight:4d} {node.parent:4d} {node.left:4d} {node.right:4d}"
            )
        lines.append("")
        lines.append("Huffman codes:")
        for i, code in enumerate(self.codes):
            lines.append(f"Node[{i:2d}]: {self.nodes[i].weight:4d}  huffcode:{code}")
        lines.append("")
        return "\n".join(lines)