"""Directed weighted graph stored as an adjacency matrix."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class Graph:
    """A directed graph on vertices ``0 .. vertices-1``; weight 0 means no edge."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must not be negative")
        self.vertices = vertices
        self.matrix = [[0] * vertices for _ in range(vertices)]
        self.edge_count = 0

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise IndexError(f"vertex {vertex} out of range")

    def _neighbours(self, vertex: int) -> Iterator[int]:
        return (i for i, weight in enumerate(self.matrix[vertex]) if weight != 0)

    def add_edge(self, i: int, j: int, weight: int) -> None:
        """Set the weight of the edge from ``i`` to ``j`` and count it."""
        self._check(i)
        self._check(j)
        self.matrix[i][j] = weight
        self.edge_count += 1

    def dfs(self, start: int) -> list[int]:
        """Return vertices in depth-first order from ``start``, lowest first."""
        self._check(start)
        visited = {start}
        order = [start]
        stack = [self._neighbours(start)]
        while stack:
            for nxt in stack[-1]:
                if nxt not in visited:
                    visited.add(nxt)
                    order.append(nxt)
                    stack.append(self._neighbours(nxt))
                    break
            else:
                stack.pop()
        return order

    def bfs(self, start: int) -> list[int]:
        """Return vertices in breadth-first order from ``start``, lowest first."""
        self._check(start)
        visited = {start}
        order = []
        queue = deque([start])
        while queue:
            current = queue.popleft()
            order.append(current)
            for nxt in self._neighbours(current):
                if nxt not in visited:
                    visited.add(nxt)
                    queue.append(nxt)
        return order

    def out_degrees(self) -> list[int]:
        """Return the number of outgoing edges of each vertex."""
        return [sum(1 for weight in row if weight != 0) for row in self.matrix]

    def format(self) -> str:
        """Render the matrix, each weight followed by a tab."""
        return "".join(
            "".join(f"{weight}\t" for weight in row) + "\n" for row in self.matrix
        )


def looks_isomorphic(first: Graph, second: Graph) -> bool:
    """Cheap isomorphism test: equal sizes, edge counts and out-degree multisets."""
    return (
        first.vertices == second.vertices
        and first.edge_count == second.edge_count
        and sorted(first.out_degrees()) == sorted(second.out_degrees())
    )