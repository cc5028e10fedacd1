"""Single entry point that runs a selected algorithm over a lattice."""

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter
from typing import Callable, Dict, Optional, Union

from gridflow.algorithms.astar import astar
from gridflow.algorithms.base import Algorithm, Cost
from gridflow.algorithms.dijkstra import dijkstra
from gridflow.algorithms.max_flow import ford_fulkerson
from gridflow.algorithms.paths import path_cost
from gridflow.algorithms.types import FlowResult, SearchResult
from gridflow.lattice import CellRef, InvalidLatticeShape, Lattice
from gridflow.logging import get_logger

logger = get_logger(__name__)

AlgorithmResult = Union[SearchResult, FlowResult]

_RUNNERS: Dict[Algorithm, Callable[[Lattice, CellRef, CellRef], AlgorithmResult]] = {
    Algorithm.DIJKSTRA: dijkstra,
    Algorithm.ASTAR: astar,
    Algorithm.FORD_FULKERSON: ford_fulkerson,
}


@dataclass(frozen=True)
class RunResult:
    """Algorithm output plus run statistics.

    Attributes:
        algorithm: Algorithm that ran.
        result: The algorithm's own result object.
        elapsed: Wall-clock seconds spent inside the algorithm.
    """

    algorithm: Algorithm
    result: AlgorithmResult
    elapsed: float

    @property
    def visited_count(self) -> int:
        return len(self.result.visited)

    @property
    def path_length(self) -> int:
        return len(self.result.path)

    @property
    def path_cost(self) -> Optional[Cost]:
        return path_cost(self.result.path)

    @property
    def max_flow(self) -> Optional[int]:
        if isinstance(self.result, FlowResult):
            return self.result.max_flow
        return None

    @property
    def found(self) -> bool:
        return self.result.found


def run(
    algorithm: Union[Algorithm, str],
    lattice: Lattice,
    start: Optional[CellRef] = None,
    finish: Optional[CellRef] = None,
) -> RunResult:
    """Run one algorithm over ``lattice``.

    Args:
        algorithm: An ``Algorithm`` or a name accepted by ``Algorithm.parse``.
        lattice: The lattice to run on. It is not modified.
        start: Start/source cell; defaults to the lattice's start cell.
        finish: Finish/sink cell; defaults to the lattice's finish cell.

    Returns:
        RunResult wrapping the algorithm's result.

    Raises:
        ValueError: If the algorithm name is unknown.
        InvalidLatticeShape: If an endpoint is missing, off-grid or a wall.
    """
    algo = Algorithm.parse(algorithm)
    start = start if start is not None else lattice.start
    finish = finish if finish is not None else lattice.finish
    if start is None or finish is None:
        raise InvalidLatticeShape(
            "Both a start and a finish cell are required to run an algorithm."
        )

    t0 = perf_counter()
    result = _RUNNERS[algo](lattice, start, finish)
    elapsed = perf_counter() - t0

    logger.debug(
        "%s finished in %.6fs: %d visited, path length %d",
        algo.label,
        elapsed,
        len(result.visited),
        len(result.path),
    )
    return RunResult(algorithm=algo, result=result, elapsed=elapsed)
