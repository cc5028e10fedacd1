"""Lattice builders: empty grids, random mazes and flow-network baselines."""

from __future__ import annotations

import random
from dataclasses import replace
from typing import Iterable, Optional

from gridflow.config import LATTICE_CONFIG
from gridflow.lattice import Coord, InvalidLatticeShape, Lattice
from gridflow.logging import get_logger

logger = get_logger(__name__)


def empty_lattice(
    rows: Optional[int] = None,
    cols: Optional[int] = None,
    start: Optional[Coord] = None,
    finish: Optional[Coord] = None,
) -> Lattice:
    """Open, unweighted lattice with optional start and finish cells.

    Dimensions default to ``LATTICE_CONFIG.rows`` x ``LATTICE_CONFIG.cols``.

    Raises:
        InvalidLatticeShape: If an explicit dimension is not positive.
    """
    lattice = Lattice(
        rows if rows is not None else LATTICE_CONFIG.rows,
        cols if cols is not None else LATTICE_CONFIG.cols,
    )
    if start is not None:
        lattice = lattice.with_start(start)
    if finish is not None:
        lattice = lattice.with_finish(finish)
    return lattice


def random_maze(
    lattice: Lattice,
    density: Optional[float] = None,
    seed: Optional[int] = None,
) -> Lattice:
    """Wall cells of ``lattice`` at random, sparing the start and finish.

    Every other cell is reset to an open, weight-1 cell and then walled with
    probability ``density``.

    Args:
        lattice: Template lattice; only its shape and endpoints are kept.
        density: Wall probability per cell, clamped to [0, 1]. Defaults to
            ``LATTICE_CONFIG.wall_density``.
        seed: Seed for a private ``random.Random``; None is non-deterministic.

    Returns:
        New lattice with the generated walls.
    """
    if density is None:
        density = LATTICE_CONFIG.wall_density
    density = LATTICE_CONFIG.clamp_density(density)
    rng = random.Random(seed)

    cells = []
    walls = 0
    for cell in lattice:
        if cell.is_start or cell.is_finish:
            cells.append(replace(cell, is_wall=False))
            continue
        is_wall = rng.random() < density
        walls += is_wall
        cells.append(
            replace(cell, weight=LATTICE_CONFIG.default_weight, is_wall=is_wall)
        )
    logger.debug(
        "random_maze %dx%d density=%.2f seed=%s: %d walls",
        lattice.rows,
        lattice.cols,
        density,
        seed,
        walls,
    )
    return Lattice(lattice.rows, lattice.cols, _rows(cells, lattice.cols))


def flow_network(lattice: Lattice) -> Lattice:
    """Wall every cell except the start and finish.

    This is the blank canvas for authoring a flow network: callers then
    ``carve`` channels whose weights are their capacities.
    """
    cells = [
        replace(
            cell,
            weight=LATTICE_CONFIG.default_weight,
            is_wall=not (cell.is_start or cell.is_finish),
        )
        for cell in lattice
    ]
    return Lattice(lattice.rows, lattice.cols, _rows(cells, lattice.cols))


def carve(lattice: Lattice, coords: Iterable[Coord], weight: int = 1) -> Lattice:
    """Open ``coords`` and set their weight (capacity).

    Start and finish cells keep their own weight.

    Raises:
        InvalidLatticeShape: If a coordinate is off-grid or ``weight`` < 1.
    """
    if weight < 1:
        raise InvalidLatticeShape(f"Weight must be >= 1, got {weight}.")
    cells = list(lattice)
    for row, col in coords:
        cell = lattice.cell(row, col)
        if cell.is_start or cell.is_finish:
            continue
        cells[lattice.index(row, col)] = replace(cell, is_wall=False, weight=weight)
    return Lattice(lattice.rows, lattice.cols, _rows(cells, lattice.cols))


def _rows(cells, cols: int):
    return [cells[i : i + cols] for i in range(0, len(cells), cols)]
