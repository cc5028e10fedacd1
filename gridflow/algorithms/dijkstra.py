"""Uniform-cost search (Dijkstra) over a lattice.

Entering a cell costs that cell's weight, so the distance of a neighbor is
``distance[current] + neighbor.weight``. Cells are settled in non-decreasing
distance order; ties go to the entry pushed first. Walls are never pushed or
settled. The search stops as soon as the finish cell is settled.
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


def dijkstra(lattice: Lattice, start: CellRef, finish: CellRef) -> SearchResult:
    """Compute a minimum-cost path from ``start`` to ``finish``.

    Args:
        lattice: Lattice to search. It is not modified.
        start: Start cell or ``(row, col)``.
        finish: Finish cell or ``(row, col)``.

    Returns:
        SearchResult with the settlement order, the reconstructed path (empty
        when ``finish`` is unreachable), its cost and settled distances.

    Raises:
        InvalidLatticeShape: If ``start`` or ``finish`` is off-grid or a wall.
    """
    src = lattice.resolve(start, "start")
    dst = lattice.resolve(finish, "finish")
    ctx = lattice.new_context()

    seq = count()
    ctx.distance[src] = 0
    min_pq: List[Tuple[Cost, int, int]] = [(0, next(seq), src)]
    visited_order: List[int] = []

    while min_pq:
        current_cost, _, node = heappop(min_pq)
        # Stale entry: the node was settled or improved after this push
        if ctx.visited[node] or current_cost > ctx.distance[node]:
            continue

        ctx.settle(node)
        visited_order.append(node)
        if node == dst:
            break

        for neighbor in lattice.neighbor_indices(node):
            if ctx.visited[neighbor]:
                continue
            cell = lattice.cell_at(neighbor)
            if cell.is_wall:
                continue
            new_cost = current_cost + cell.weight
            if new_cost < ctx.distance[neighbor]:
                ctx.relax(neighbor, new_cost, node)
                heappush(min_pq, (new_cost, next(seq), neighbor))

    path = reconstruct_path(lattice, ctx.parent, src, dst)
    distances: Dict[Coord, Cost] = {
        lattice.coords(i): ctx.distance[i] for i in visited_order
    }
    logger.debug(
        "dijkstra %s -> %s: settled %d cells, path length %d",
        lattice.coords(src),
        lattice.coords(dst),
        len(visited_order),
        len(path),
    )
    return SearchResult(
        algorithm=Algorithm.DIJKSTRA,
        visited=tuple(lattice.cell_at(i) for i in visited_order),
        path=tuple(path),
        cost=path_cost(path),
        distances=distances,
    )
