"""Maximum flow over a lattice via Ford-Fulkerson with BFS augmenting paths.

The capacity graph has one node per cell (flat index ``row * cols + col``) and
a directed edge ``u -> v`` for every neighbor pair whose tail ``u`` is open.
Its capacity is the weight of the *destination* cell ``v``, or 0 when ``v`` is
a wall: a cell's weight is the capacity of entering it, mirroring the search
algorithms' cost of entering a cell.

Flow is stored antisymmetrically: pushing ``x`` along ``u -> v`` adds ``x`` to
``flow[u][v]`` and subtracts it from ``flow[v][u]``, so the residual capacity
``capacity - flow`` of the reverse edge grows and later paths can cancel flow.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterator, List, Set, Tuple

from gridflow.algorithms.base import NO_PARENT
from gridflow.algorithms.paths import reconstruct_indices
from gridflow.algorithms.types import Edge, FlowResult, FlowSummary
from gridflow.logging import get_logger

if TYPE_CHECKING:
    from gridflow.lattice import CellRef, Lattice

logger = get_logger(__name__)


@dataclass
class ResidualNetwork:
    """Capacity and flow matrices for one max-flow run.

    Both are stored sparsely as one dict per tail node. Entries of
    ``capacity[u]`` are inserted in ascending index order, which is the order
    the BFS scans them.

    Attributes:
        capacity: ``capacity[u][v]`` for every edge of the capacity graph.
        flow: ``flow[u][v]`` for the same edges; reverse entries may be negative.
    """

    capacity: List[Dict[int, int]]
    flow: List[Dict[int, int]]

    @classmethod
    def from_lattice(cls, lattice: Lattice) -> ResidualNetwork:
        """Build the capacity graph and a zero flow graph for ``lattice``."""
        capacity: List[Dict[int, int]] = [{} for _ in range(lattice.size)]
        for u in range(lattice.size):
            if lattice.cell_at(u).is_wall:
                continue
            for v in sorted(lattice.neighbor_indices(u)):
                cell = lattice.cell_at(v)
                capacity[u][v] = 0 if cell.is_wall else cell.weight
        flow = [dict.fromkeys(row, 0) for row in capacity]
        return cls(capacity=capacity, flow=flow)

    def __len__(self) -> int:
        return len(self.capacity)

    def residual(self, u: int, v: int) -> int:
        return self.capacity[u].get(v, 0) - self.flow[u].get(v, 0)

    def find_augmenting_path(self, source: int, sink: int) -> List[int]:
        """Breadth-first search for a source-to-sink path with residual capacity.

        Neighbors are scanned in ascending index order and the search returns
        as soon as the sink is first reached, giving a path with the fewest
        hops.

        Returns:
            Flat indices from ``source`` to ``sink``, or ``[]`` if none exists.
        """
        if source == sink:
            return []
        parent = [NO_PARENT] * len(self.capacity)
        seen = [False] * len(self.capacity)
        seen[source] = True
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for v in self.capacity[u]:
                if seen[v] or self.residual(u, v) <= 0:
                    continue
                seen[v] = True
                parent[v] = u
                if v == sink:
                    return reconstruct_indices(parent, source, sink)
                queue.append(v)
        return []

    def bottleneck(self, path: List[int]) -> int:
        """Smallest residual capacity over consecutive edges of ``path``."""
        return min(self.residual(u, v) for u, v in zip(path, path[1:]))

    def augment(self, path: List[int], amount: int) -> None:
        """Push ``amount`` along ``path`` and record the reverse residual."""
        for u, v in zip(path, path[1:]):
            self.flow[u][v] = self.flow[u].get(v, 0) + amount
            self.flow[v][u] = self.flow[v].get(u, 0) - amount

    def net_outflow(self, node: int) -> int:
        """Flow leaving ``node`` minus flow entering it."""
        return sum(self.flow[node].values())

    def is_antisymmetric(self) -> bool:
        """True when ``flow[u][v] == -flow[v][u]`` for every stored entry."""
        return all(
            f == -self.flow[v].get(u, 0)
            for u, row in enumerate(self.flow)
            for v, f in row.items()
        )

    def reachable_from(self, source: int) -> Set[int]:
        """Nodes reachable from ``source`` over edges with positive residual."""
        reachable = {source}
        stack = [source]
        while stack:
            u = stack.pop()
            for v in self.capacity[u]:
                if v not in reachable and self.residual(u, v) > 0:
                    reachable.add(v)
                    stack.append(v)
        return reachable

    def summary(self, lattice: Lattice, source: int) -> FlowSummary:
        """Edge flows, residual capacities and the s-t min-cut for this state."""
        edge_flow: Dict[Edge, int] = {}
        residual_cap: Dict[Edge, int] = {}
        for u, row in enumerate(self.capacity):
            for v, cap in row.items():
                edge = (lattice.coords(u), lattice.coords(v))
                f = self.flow[u][v]
                if f > 0:
                    edge_flow[edge] = f
                if cap > 0:
                    residual_cap[edge] = cap - f

        reachable = self.reachable_from(source)
        min_cut = [
            (lattice.coords(u), lattice.coords(v))
            for u in sorted(reachable)
            for v, cap in self.capacity[u].items()
            if cap > 0 and v not in reachable
        ]
        return FlowSummary(
            edge_flow=edge_flow,
            residual_cap=residual_cap,
            reachable={lattice.coords(n) for n in reachable},
            min_cut=min_cut,
        )


def augmenting_paths(
    network: ResidualNetwork, source: int, sink: int
) -> Iterator[Tuple[List[int], int]]:
    """Augment ``network`` until no augmenting path remains.

    Yields ``(path, pushed)`` after each augmentation has been applied, so a
    caller can inspect the network between steps.
    """
    while True:
        path = network.find_augmenting_path(source, sink)
        if not path:
            return
        pushed = network.bottleneck(path)
        network.augment(path, pushed)
        yield path, pushed


def ford_fulkerson(lattice: Lattice, source: CellRef, sink: CellRef) -> FlowResult:
    """Compute the maximum flow from ``source`` to ``sink``.

    Args:
        lattice: Lattice whose open-cell weights act as entry capacities.
        source: Source cell or ``(row, col)``.
        sink: Sink cell or ``(row, col)``.

    Returns:
        FlowResult with the flow value, the last augmenting path, every
        augmenting path (also concatenated as ``visited``) and a residual
        summary. ``source == sink`` or an isolated source gives a zero flow and
        empty paths.

    Raises:
        InvalidLatticeShape: If ``source`` or ``sink`` is off-grid or a wall.
    """
    src = lattice.resolve(source, "source")
    dst = lattice.resolve(sink, "sink")
    network = ResidualNetwork.from_lattice(lattice)

    max_flow = 0
    paths: List[Tuple] = []
    bottlenecks: List[int] = []
    for path, pushed in augmenting_paths(network, src, dst):
        max_flow += pushed
        paths.append(tuple(lattice.cell_at(i) for i in path))
        bottlenecks.append(pushed)
        logger.debug("augmented %d along %d-cell path", pushed, len(path))

    logger.debug(
        "ford_fulkerson %s -> %s: max flow %d over %d augmenting paths",
        lattice.coords(src),
        lattice.coords(dst),
        max_flow,
        len(paths),
    )
    return FlowResult(
        max_flow=max_flow,
        path=paths[-1] if paths else (),
        visited=tuple(cell for path in paths for cell in path),
        paths=tuple(paths),
        bottlenecks=tuple(bottlenecks),
        summary=network.summary(lattice, src),
    )
