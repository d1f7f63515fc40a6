"""Weighted graph stored as an adjacency matrix."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from .core import MAX_ADJMATRIX_SIZE, MAX_WEIGHT, Edge
from .graph import AbstractGraph


class AdjMatrixGraph(AbstractGraph):
    """Weighted graph; ``MAX_WEIGHT`` marks a missing edge and the diagonal is 0."""

    def __init__(
        self,
        vertices: Optional[Iterable[Any]] = None,
        edges: Optional[Iterable[Edge]] = None,
        size: int = MAX_ADJMATRIX_SIZE,
    ):
        vertex_list = list(vertices) if vertices is not None else []
        self._capacity = max(size, len(vertex_list), MAX_ADJMATRIX_SIZE)
        self._matrix: List[List[int]] = [
            [0 if i == j else MAX_WEIGHT for j in range(self._capacity)]
            for i in range(self._capacity)
        ]
        self._vertices: List[Any] = []
        for vertex in vertex_list:
            self.insert_vertex(vertex)
        for edge in edges if edges is not None else ():
            self.add_edge(edge)

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._vertices):
            raise IndexError(f"vertex {v} out of range")

    def vertex_count(self) -> int:
        return len(self._vertices)

    def vertex(self, v: int) -> Any:
        self._check(v)
        return self._vertices[v]

    def first_neighbor(self, v: int) -> Optional[int]:
        return self.next_neighbor(v, -1)

    def next_neighbor(self, v: int, w: int) -> Optional[int]:
        self._check(v)
        n = len(self._vertices)
        if not -1 <= w < n:
            raise IndexError(f"vertex {w} out of range")
        if v == w:
            return None
        row = self._matrix[v]
        for i in range(w + 1, n):
            if 0 < row[i] < MAX_WEIGHT:
                return i
        return None

    def _grow(self) -> None:
        old = self._capacity
        new = old * 2
        for row in self._matrix:
            row.extend([MAX_WEIGHT] * (new - old))
        for i in range(old, new):
            self._matrix.append([0 if i == j else MAX_WEIGHT for j in range(new)])
        self._capacity = new

    def insert_vertex(self, vertex: Any) -> None:
        if len(self._vertices) >= self._capacity:
            self._grow()
        self._vertices.append(vertex)

    def _check_pair(self, start: int, dest: int) -> None:
        self._check(start)
        self._check(dest)
        if start == dest:
            raise ValueError("an edge needs two distinct vertices")

    def insert_edge(self, start: int, dest: int, weight: int) -> bool:
        """Add the edge; return False if one already joins these vertices."""
        self._check_pair(start, dest)
        if self._matrix[start][dest] != MAX_WEIGHT:
            return False
        self._matrix[start][dest] = weight
        return True

    def add_edge(self, edge: Edge) -> bool:
        return self.insert_edge(edge.start, edge.dest, edge.weight)

    def remove_edge(self, start: int, dest: int) -> bool:
        """Remove the edge; return False if there was none."""
        self._check_pair(start, dest)
        if self._matrix[start][dest] == MAX_WEIGHT:
            return False
        self._matrix[start][dest] = MAX_WEIGHT
        return True

    def remove_vertex(self, pos: int) -> Any:
        """Remove the vertex and its edges, renumbering later vertices; return its data."""
        self._check(pos)
        old = self._vertices.pop(pos)
        del self._matrix[pos]
        for row in self._matrix:
            del row[pos]
            row.append(MAX_WEIGHT)
        last = self._capacity - 1
        self._matrix.append([0 if j == last else MAX_WEIGHT for j in range(self._capacity)])
        return old

    def weight(self, start: int, dest: int) -> int:
        """Return the stored weight, ``MAX_WEIGHT`` when there is no edge."""
        self._check(start)
        self._check(dest)
        return self._matrix[start][dest]

    def min_span_tree_prim(self) -> List[Edge]:
        """Return the n-1 edges of a minimum spanning tree grown from vertex 0."""
        n = len(self._vertices)
        if n < 2:
            return []
        mst = [Edge(0, i, self._matrix[0][i]) for i in range(1, n)]
        for i in range(n - 1):
            best = min(range(i, n - 1), key=lambda j: mst[j].weight)
            mst[i], mst[best] = mst[best], mst[i]
            u = mst[i].dest
            for edge in mst[i + 1 :]:
                candidate = self._matrix[u][edge.dest]
                if candidate < edge.weight:
                    edge.weight = candidate
                    edge.start = u
        return mst

    def __str__(self) -> str:
        n = len(self._vertices)
        lines = [",".join(str(v) for v in self._vertices)]
        for i in range(n):
            cells = (
                " *" if self._matrix[i][j] == MAX_WEIGHT else f" {self._matrix[i][j]}"
                for j in range(n)
            )
            lines.append("".join(cells))
        return "\n".join(lines)