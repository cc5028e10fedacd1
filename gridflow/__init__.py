"""gridflow: path search and max-flow on weighted grid lattices.

Primary API:
    Lattice, Cell - the grid model
    dijkstra(), astar() - shortest weighted paths
    ford_fulkerson() - maximum flow with augmenting paths
    run() - run an algorithm selected by name or ``Algorithm``

Example:
    from gridflow import Lattice, run

    lattice = Lattice(3, 3).with_start((0, 0)).with_finish((2, 2))
    result = run("astar", lattice)
    print(result.path_cost)  # 4
"""

from __future__ import annotations

from gridflow import cli, logging
from gridflow.algorithms import (
    Algorithm,
    FlowResult,
    FlowSummary,
    SearchResult,
    astar,
    dijkstra,
    ford_fulkerson,
    reconstruct_path,
)
from gridflow.lattice import Cell, InvalidLatticeShape, Lattice
from gridflow.runner import RunResult, run

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Algorithm",
    "Cell",
    "FlowResult",
    "FlowSummary",
    "InvalidLatticeShape",
    "Lattice",
    "RunResult",
    "SearchResult",
    "astar",
    "cli",
    "dijkstra",
    "ford_fulkerson",
    "logging",
    "reconstruct_path",
    "run",
]
