"""Weighted graph stored as adjacency lists ordered by destination."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, List, Optional

from .core import MAX_ADJLIST_SIZE, Edge
from .graph import AbstractGraph


@dataclass
class _Vertex:
    data: Any
    edges: List[Edge] = field(default_factory=list)


class AdjListGraph(AbstractGraph):
    """Weighted graph whose vertices each keep their out-edges sorted by destination."""

    def __init__(
        self,
        vertices: Optional[Iterable[Any]] = None,
        edges: Optional[Iterable[Edge]] = None,
        size: int = MAX_ADJLIST_SIZE,
    ):
        self._capacity = max(size, MAX_ADJLIST_SIZE)
        self._vertices: List[_Vertex] = []
        for vertex in vertices if vertices is not None else ():
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
        return self._vertices[v].data

    def first_neighbor(self, v: int) -> Optional[int]:
        return self.next_neighbor(v, -1)

    def next_neighbor(self, v: int, w: int) -> Optional[int]:
        self._check(v)
        if not -1 <= w < len(self._vertices):
            raise IndexError(f"vertex {w} out of range")
        for edge in self._vertices[v].edges:
            if edge.dest > w:
                return edge.dest
        return None

    def insert_vertex(self, vertex: Any) -> None:
        if len(self._vertices) == self._capacity:
            self._capacity *= 2
        self._vertices.append(_Vertex(vertex))

    def _check_pair(self, start: int, dest: int) -> None:
        self._check(start)
        self._check(dest)
        if start == dest:
            raise ValueError("an edge needs two distinct vertices")

    def insert_edge(self, start: int, dest: int, weight: int) -> bool:
        """Add the edge in destination order; return False if it already exists."""
        self._check_pair(start, dest)
        edges = self._vertices[start].edges
        dests = [e.dest for e in edges]
        pos = bisect.bisect_left(dests, dest)
        if pos < len(dests) and dests[pos] == dest:
            return False
        edges.insert(pos, Edge(start, dest, weight))
        return True

    def add_edge(self, edge: Edge) -> bool:
        return self.insert_edge(edge.start, edge.dest, edge.weight)

    def remove_edge(self, start: int, dest: int) -> bool:
        """Remove the edge; return False if there was none."""
        self._check_pair(start, dest)
        edges = self._vertices[start].edges
        for i, edge in enumerate(edges):
            if edge.dest == dest:
                del edges[i]
                return True
        return False

    def remove_vertex(self, pos: int) -> Any:
        """Remove the vertex with all edges touching it, renumber the rest; return its data."""
        self._check(pos)
        removed = self._vertices.pop(pos)
        for vertex in self._vertices:
            vertex.edges = [e for e in vertex.edges if e.dest != pos]
            for edge in vertex.edges:
                if edge.start > pos:
                    edge.start -= 1
                if edge.dest > pos:
                    edge.dest -= 1
        return removed.data

    def edges_from(self, v: int) -> List[Edge]:
        """Return copies of the out-edges of ``v`` in destination order."""
        self._check(v)
        return [replace(edge) for edge in self._vertices[v].edges]

    def __str__(self) -> str:
        lines = []
        for i, vertex in enumerate(self._vertices):
            edges = "".join(str(e) for e in vertex.edges) if vertex.edges else " ()"
            lines.append(f"[{i}] {vertex.data}:{edges}")
        return "\n".join(lines)