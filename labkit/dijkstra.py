"""Single-source shortest paths over a dense adjacency matrix."""

from __future__ import annotations

import math
from typing import Sequence

UNREACHABLE = -1.0


class Dijkstra:
    """Holds a weighted adjacency matrix and the distances from a start vertex.

    A negative weight in the matrix means there is no edge. After solving,
    vertices that cannot be reached have the distance ``UNREACHABLE``.
    """

    def __init__(self) -> None:
        self._matrix: list[list[float]] = []
        self._start = 0
        self._solved = False
        self._answer: list[float] = []

    @property
    def matrix(self) -> list[list[float]]:
        """A copy of the adjacency matrix."""
        return [list(row) for row in self._matrix]

    @property
    def answer(self) -> list[float]:
        """Distances from the start vertex, or an empty list before solving."""
        return list(self._answer) if self._solved else []

    @property
    def solved(self) -> bool:
        """True once the current task has been solved."""
        return self._solved

    def set_task(self, matrix: Sequence[Sequence[float]], start: int) -> None:
        """Set a new square matrix and start vertex; raises ValueError if invalid."""
        rows = [[float(weight) for weight in row] for row in matrix]
        size = len(rows)
        if size == 0 or any(len(row) != size for row in rows):
            raise ValueError("matrix must be square and non-empty")
        if not 0 <= start < size:
            raise ValueError("start must be a vertex of the matrix")
        self._matrix = rows
        self._start = start
        self._solved = False
        self._answer = [math.inf] * size

    def solve(self) -> None:
        """Compute the distances; does nothing when no task is set."""
        if not self._answer:
            return
        size = len(self._matrix)
        dist = [math.inf] * size
        done = [False] * size
        vertex = self._start
        dist[vertex] = 0.0

        for _ in range(size):
            next_vertex = -1
            min_path = math.inf
            for j, weight in enumerate(self._matrix[vertex]):
                if j == vertex:
                    continue
                if weight >= 0:
                    length = float(math.trunc(dist[vertex] + weight))
                    if length < dist[j]:
                        dist[j] = length
                if min_path > dist[j] and not done[j]:
                    min_path = dist[j]
                    next_vertex = j
            done[vertex] = True
            if next_vertex == -1:
                break
            vertex = next_vertex

        self._answer = [UNREACHABLE if math.isinf(d) else d for d in dist]
        self._solved = True

    def distance(self, finish: int) -> float:
        """Return the distance to ``finish``.

        Raises RuntimeError before solving and IndexError for an unknown vertex.
        """
        if not self._solved:
            raise RuntimeError("the task has not been solved")
        if not 0 <= finish < len(self._answer):
            raise IndexError("no such vertex")
        return self._answer[finish]

    def copy(self) -> Dijkstra:
        """Return an independent copy with the same task and state."""
        clone = Dijkstra()
        clone._matrix = self.matrix
        clone._start = self._start
        clone._solved = self._solved
        clone._answer = list(self._answer)
        return clone