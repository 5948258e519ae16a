"""Adjacency-matrix graphs and a city travel-time table."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


class Graph:
    """Undirected graph on vertices ``0 .. vertices-1`` as an adjacency matrix."""

    def __init__(self, vertices: int) -> None:
        if vertices <= 0:
            raise ValueError("a graph needs at least one vertex")
        self._n = vertices
        self._adjacent = [[False] * vertices for _ in range(vertices)]

    @property
    def vertices(self) -> int:
        return self._n

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self._n:
            raise IndexError(f"vertex {vertex} out of range 0..{self._n - 1}")

    def add_edge(self, u: int, v: int) -> None:
        self._check(u)
        self._check(v)
        self._adjacent[u][v] = True
        self._adjacent[v][u] = True

    def matrix(self) -> list[list[int]]:
        """Adjacency matrix as rows of 0/1 values."""
        return [[int(cell) for cell in row] for row in self._adjacent]

    def bfs(self, start: int) -> list[int]:
        """Breadth-first visiting order, neighbours in ascending order."""
        self._check(start)
        visited = [False] * self._n
        visited[start] = True
        order = [start]
        queue = deque([start])
        while queue:
            v = queue.popleft()
            for j, linked in enumerate(self._adjacent[v]):
                if linked and not visited[j]:
                    visited[j] = True
                    order.append(j)
                    queue.append(j)
        return order

    def dfs(self, start: int) -> list[int]:
        """Depth-first visiting order, highest-numbered neighbour first."""
        self._check(start)
        visited = [False] * self._n
        visited[start] = True
        order = [start]
        stack = [start]
        while stack:
            v = stack.pop()
            for j in reversed(range(self._n)):
                if self._adjacent[v][j] and not visited[j]:
                    visited[j] = True
                    order.append(j)
                    stack.extend((v, j))
                    break
        return order


class TravelTimes:
    """Square table of travel times between named cities."""

    def __init__(self, cities: Sequence[str], times: Sequence[Sequence[int]]) -> None:
        self.cities = list(cities)
        n = len(self.cities)
        if len(times) != n or any(len(row) != n for row in times):
            raise ValueError(f"times must be a {n}x{n} table")
        self._times = [list(row) for row in times]
        self._index = {}
        for position, city in enumerate(self.cities):
            self._index.setdefault(city, position)

    def time(self, source: str, target: str) -> int:
        """Travel time from ``source`` to ``target``; KeyError for unknown cities."""
        return self._times[self._index[source]][self._index[target]]

    def format_table(self) -> str:
        """Rows of space-separated times, one row per line."""
        return "".join(
            "".join(f"{value} " for value in row) + "\n" for row in self._times
        )