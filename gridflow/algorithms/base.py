"""Shared constants and the algorithm selector enum."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

Cost = Union[int, float]
INF: float = float("inf")

# Parent index for cells without a predecessor
NO_PARENT = -1


class Algorithm(IntEnum):
    """Algorithms that can run over a lattice."""

    DIJKSTRA = 1
    ASTAR = 2
    FORD_FULKERSON = 3

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value: Union[str, int, Algorithm]) -> Algorithm:
        """Resolve a user-supplied name or number to an ``Algorithm``.

        Names are matched case-insensitively, ignoring ``-``, ``_``, spaces
        and apostrophes, so "fordFulkerson", "ford-fulkerson" and "A*" work.

        Raises:
            ValueError: If the value names no known algorithm.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        key = "".join(ch for ch in str(value).lower() if ch not in "-_ '")
        try:
            return _ALIASES[key]
        except KeyError:
            known = ", ".join(a.name.lower() for a in cls)
            raise ValueError(f"Unknown algorithm '{value}'. Known: {known}") from None


_LABELS = {
    Algorithm.DIJKSTRA: "Dijkstra's Algorithm",
    Algorithm.ASTAR: "A* Search",
    Algorithm.FORD_FULKERSON: "Ford-Fulkerson",
}

_ALIASES = {
    "dijkstra": Algorithm.DIJKSTRA,
    "ucs": Algorithm.DIJKSTRA,
    "astar": Algorithm.ASTAR,
    "a*": Algorithm.ASTAR,
    "astarsearch": Algorithm.ASTAR,
    "fordfulkerson": Algorithm.FORD_FULKERSON,
    "maxflow": Algorithm.FORD_FULKERSON,
    "ff": Algorithm.FORD_FULKERSON,
}
