"""Common traversals for graphs that expose vertices and neighbours by index."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, List, Optional


class AbstractGraph(ABC):
    """Base class providing depth- and breadth-first traversal.

    Subclasses supply the vertex count, vertex data and neighbour iteration.
    ``next_neighbor(v, -1)`` yields the first neighbour of ``v``; a neighbour
    lookup returns None when there are no more neighbours.
    """

    @abstractmethod
    def vertex_count(self) -> int:
        """Return the number of vertices."""

    @abstractmethod
    def vertex(self, v: int) -> Any:
        """Return the data stored at vertex ``v``."""

    @abstractmethod
    def first_neighbor(self, v: int) -> Optional[int]:
        """Return the index of the first neighbour of ``v``, or None."""

    @abstractmethod
    def next_neighbor(self, v: int, w: int) -> Optional[int]:
        """Return the index of the neighbour of ``v`` after ``w``, or None."""

    def _start_order(self, v: int) -> List[int]:
        n = self.vertex_count()
        if not 0 <= v < n:
            raise IndexError(f"vertex {v} out of range")
        return [(v + k) % n for k in range(n)]

    def dfs(self, v: int) -> List[List[Any]]:
        """Depth-first traversal from ``v``, restarting at unvisited vertices.

        Returns one list of vertex data per connected piece, in visiting order.
        """
        order = self._start_order(v)
        visited = [False] * self.vertex_count()
        components: List[List[Any]] = []
        for i in order:
            if not visited[i]:
                component: List[Any] = []
                self._dfs_from(i, visited, component)
                components.append(component)
        return components

    def _dfs_from(self, v: int, visited: List[bool], out: List[Any]) -> None:
        out.append(self.vertex(v))
        visited[v] = True
        w = self.first_neighbor(v)
        while w is not None:
            if not visited[w]:
                self._dfs_from(w, visited, out)
            w = self.next_neighbor(v, w)

    def bfs(self, v: int) -> List[List[Any]]:
        """Breadth-first traversal from ``v``, restarting at unvisited vertices.

        Returns one list of vertex data per connected piece, in visiting order.
        """
        order = self._start_order(v)
        visited = [False] * self.vertex_count()
        components: List[List[Any]] = []
        for i in order:
            if not visited[i]:
                components.append(self._bfs_from(i, visited))
        return components

    def _bfs_from(self, start: int, visited: List[bool]) -> List[Any]:
        out = [self.vertex(start)]
        visited[start] = True
        queue = deque([start])
        while queue:
            u = queue.popleft()
            w = self.first_neighbor(u)
            while w is not None:
                if not visited[w]:
                    out.append(self.vertex(w))
                    visited[w] = True
                    queue.append(w)
                w = self.next_neighbor(u, w)
        return out