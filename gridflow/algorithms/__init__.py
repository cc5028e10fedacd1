"""Search and flow algorithms over a lattice.

Modules:
    dijkstra: uniform-cost search.
    astar: A* with a Manhattan heuristic.
    max_flow: Ford-Fulkerson with BFS augmenting paths.
    paths: parent-index path reconstruction.
    context: per-run search bookkeeping.
    types: result containers.
"""

from gridflow.algorithms.astar import astar, manhattan
from gridflow.algorithms.base import Algorithm
from gridflow.algorithms.context import SearchContext
from gridflow.algorithms.dijkstra import dijkstra
from gridflow.algorithms.max_flow import ResidualNetwork, ford_fulkerson
from gridflow.algorithms.paths import path_cost, reconstruct_path
from gridflow.algorithms.types import FlowResult, FlowSummary, SearchResult

__all__ = [
    "Algorithm",
    "FlowResult",
    "FlowSummary",
    "ResidualNetwork",
    "SearchContext",
    "SearchResult",
    "astar",
    "dijkstra",
    "ford_fulkerson",
    "manhattan",
    "path_cost",
    "reconstruct_path",
]
