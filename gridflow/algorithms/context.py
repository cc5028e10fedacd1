"""Per-run search bookkeeping kept beside, not inside, the lattice.

Every algorithm run builds a fresh ``SearchContext`` so that scores, parent
pointers and visited flags from one run can never leak into the next.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from gridflow.algorithms.base import INF, NO_PARENT, Cost


@dataclass(slots=True)
class SearchContext:
    """Arrays paralleling the lattice's flat cell indices.

    Attributes:
        distance: Best known cost from the start (``g_score`` for A*).
        f_score: ``distance + heuristic`` (A* only; unused by Dijkstra).
        parent: Predecessor index on the best known path, ``NO_PARENT`` if none.
        visited: True once a cell has been settled/expanded.
    """

    distance: List[Cost]
    f_score: List[Cost]
    parent: List[int]
    visited: List[bool]

    @classmethod
    def for_size(cls, size: int) -> SearchContext:
        return cls(
            distance=[INF] * size,
            f_score=[INF] * size,
            parent=[NO_PARENT] * size,
            visited=[False] * size,
        )

    def __len__(self) -> int:
        return len(self.parent)

    def settle(self, index: int) -> None:
        self.visited[index] = True

    def relax(self, index: int, distance: Cost, parent: int) -> None:
        """Record a better path to ``index`` arriving from ``parent``."""
        self.distance[index] = distance
        self.parent[index] = parent
