"""Immutable result containers returned by the lattice algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional, Set, Tuple

from gridflow.algorithms.base import Algorithm, Cost

if TYPE_CHECKING:
    from gridflow.lattice import Cell, Coord

# Directed lattice edge between two cells: ((row, col), (row, col))
Edge = Tuple["Coord", "Coord"]


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a shortest-path search.

    Attributes:
        algorithm: Which search produced this result.
        visited: Cells in the order they were settled/expanded.
        path: Cells from start to finish inclusive; empty if finish is unreachable.
        cost: Sum of destination-cell weights along ``path``; None when no path.
        distances: Final distance of every settled cell, keyed by coordinate.
    """

    algorithm: Algorithm
    visited: Tuple[Cell, ...]
    path: Tuple[Cell, ...]
    cost: Optional[Cost]
    distances: Dict[Coord, Cost] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return bool(self.path)


@dataclass(frozen=True)
class FlowSummary:
    """Residual-graph state after max-flow terminates.

    Attributes:
        edge_flow: Positive flow per directed edge.
        residual_cap: Remaining capacity per directed edge with nonzero capacity.
        reachable: Coordinates reachable from the source in the residual graph.
        min_cut: Edges leaving ``reachable`` with nonzero capacity (all saturated).
    """

    edge_flow: Dict[Edge, int]
    residual_cap: Dict[Edge, int]
    reachable: Set[Coord]
    min_cut: List[Edge]

    @property
    def cut_capacity(self) -> int:
        """Total capacity of the ``min_cut`` edges."""
        return sum(
            self.residual_cap[edge] + self.edge_flow.get(edge, 0)
            for edge in self.min_cut
        )


@dataclass(frozen=True)
class FlowResult:
    """Outcome of a max-flow computation.

    Attributes:
        max_flow: Total flow pushed from source to sink.
        path: The last augmenting path found; empty when none exists.
        visited: Every augmenting path concatenated in discovery order.
        paths: Each augmenting path, in discovery order.
        bottlenecks: Flow pushed along each entry of ``paths``.
        summary: Residual-graph analytics.
    """

    max_flow: int
    path: Tuple[Cell, ...]
    visited: Tuple[Cell, ...]
    paths: Tuple[Tuple[Cell, ...], ...]
    bottlenecks: Tuple[int, ...]
    summary: FlowSummary
    algorithm: Algorithm = Algorithm.FORD_FULKERSON

    @property
    def found(self) -> bool:
        return self.max_flow > 0
