"""A* search over a lattice with a Manhattan-distance heuristic.

Since every weight is at least 1, Manhattan distance never overestimates the
remaining cost and is consistent, so the first expansion of the finish cell
carries an optimal ``g_score``.

The frontier is a binary heap keyed by ``(f_score, g_score, seq)``. Improving
a discovered cell pushes a new entry; entries whose ``g_score`` no longer
matches the live score are skipped when popped (lazy deletion), so every cell
is expanded at most once, with its best score.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import TYPE_CHECKING, Dict, List, Tuple

from gridflow.algorithms.base import Algorithm, Cost
from gridflow.algorithms.paths import path_cost, reconstruct_path
from gridflow.algorithms.types import SearchResult
from gridflow.logging import get_logger

if TYPE_CHECKING:
    from gridflow.lattice import CellRef, Coord, Lattice

logger = get_logger(__name__)


def manhattan(a: Coord, b: Coord) -> int:
    """Grid distance between two coordinates with 4-directional moves."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def astar(lattice: Lattice, start: CellRef, finish: CellRef) -> SearchResult:
    """Compute a minimum-cost path from ``start`` to ``finish`` with A*.

    Args:
        lattice: Lattice to search. It is not modified.
        start: Start cell or ``(row, col)``.
        finish: Finish cell or ``(row, col)``.

    Returns:
        SearchResult with the expansion order, the reconstructed path (empty
        when ``finish`` is unreachable), its cost and the ``g_score`` of every
        expanded cell.

    Raises:
        InvalidLatticeShape: If ``start`` or ``finish`` is off-grid or a wall.
    """
    src = lattice.resolve(start, "start")
    dst = lattice.resolve(finish, "finish")
    goal = lattice.coords(dst)
    ctx = lattice.new_context()
    g_score = ctx.distance

    seq = count()
    g_score[src] = 0
    ctx.f_score[src] = manhattan(lattice.coords(src), goal)
    open_pq: List[Tuple[Cost, Cost, int, int]] = [
        (ctx.f_score[src], 0, next(seq), src)
    ]
    expanded: List[int] = []

    while open_pq:
        _, g_node, _, node = heappop(open_pq)
        if ctx.visited[node] or g_node != g_score[node]:
            continue

        ctx.settle(node)
        expanded.append(node)
        if node == dst:
            break

        for neighbor in lattice.neighbor_indices(node):
            if ctx.visited[neighbor]:
                continue
            cell = lattice.cell_at(neighbor)
            if cell.is_wall:
                continue
            tentative = g_node + cell.weight
            if tentative < g_score[neighbor]:
                ctx.relax(neighbor, tentative, node)
                f_neighbor = tentative + manhattan(cell.coord, goal)
                ctx.f_score[neighbor] = f_neighbor
                heappush(open_pq, (f_neighbor, tentative, next(seq), neighbor))

    path = reconstruct_path(lattice, ctx.parent, src, dst)
    distances: Dict[Coord, Cost] = {lattice.coords(i): g_score[i] for i in expanded}
    logger.debug(
        "astar %s -> %s: expanded %d cells, path length %d",
        lattice.coords(src),
        goal,
        len(expanded),
        len(path),
    )
    return SearchResult(
        algorithm=Algorithm.ASTAR,
        visited=tuple(lattice.cell_at(i) for i in expanded),
        path=tuple(path),
        cost=path_cost(path),
        distances=distances,
    )
