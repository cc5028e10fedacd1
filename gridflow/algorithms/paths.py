"""Path reconstruction from parent-index arrays."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

from gridflow.algorithms.base import NO_PARENT, Cost

if TYPE_CHECKING:
    from gridflow.lattice import Cell, Lattice


def reconstruct_indices(
    parent: Sequence[int], src_index: int, dst_index: int
) -> List[int]:
    """Walk parent pointers back from ``dst_index``.

    The walk stops at the first index without a predecessor. The result is
    ordered source to destination and is empty unless that walk ends at
    ``src_index``.

    Args:
        parent: Parent index per flat cell index (``NO_PARENT`` when none).
        src_index: Flat index of the start cell.
        dst_index: Flat index of the finish cell.

    Returns:
        Flat indices from ``src_index`` to ``dst_index`` inclusive, or ``[]``.
    """
    chain: List[int] = [dst_index]
    cur = dst_index
    while parent[cur] != NO_PARENT:
        cur = parent[cur]
        chain.append(cur)
        if len(chain) > len(parent):
            raise ValueError("Parent pointers form a cycle.")
    if cur != src_index:
        return []
    chain.reverse()
    return chain


def reconstruct_path(
    lattice: Lattice, parent: Sequence[int], src_index: int, dst_index: int
) -> List[Cell]:
    """Cells on the recorded path from start to finish, or ``[]`` if unreachable."""
    return [
        lattice.cell_at(i) for i in reconstruct_indices(parent, src_index, dst_index)
    ]


def path_cost(path: Sequence[Cell]) -> Optional[Cost]:
    """Sum of the weights of every cell entered after the first.

    Returns None for an empty path; a single-cell path costs 0.
    """
    if not path:
        return None
    return sum(cell.weight for cell in path[1:])
