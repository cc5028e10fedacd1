"""Shared lattice fixtures.

Maps use the ASCII format of ``gridflow.io``: ``.`` open, digits weighted,
``#`` wall, ``S`` start, ``F`` finish.
"""

from __future__ import annotations

import random

import pytest

from gridflow.generate import carve, empty_lattice, flow_network, random_maze
from gridflow.io import parse_map
from gridflow.lattice import Lattice


@pytest.fixture
def open3x3() -> Lattice:
    # S . .
    # . . .
    # . . F
    return empty_lattice(3, 3, start=(0, 0), finish=(2, 2))


@pytest.fixture
def blocked_row() -> Lattice:
    return parse_map("S#F")


@pytest.fixture
def weighted_detour() -> Lattice:
    # Going straight costs 5 + 1; the detour through row 1 costs 4.
    return parse_map(
        """
        S5F
        ...
        """
    )


@pytest.fixture
def walled_box() -> Lattice:
    # The start sits in a 2x2 pocket sealed by walls.
    return parse_map(
        """
        S.#..
        ..#..
        ###..
        ....F
        """
    )


@pytest.fixture
def three_channels() -> Lattice:
    # Top and bottom rows carry capacity 3, the middle row 2. Each edge into
    # the finish has capacity 1 (the finish weight), so the max flow is 3.
    base = flow_network(empty_lattice(3, 5, start=(1, 0), finish=(1, 4)))
    lattice = carve(base, [(0, c) for c in range(5)] + [(2, c) for c in range(5)], 3)
    return carve(lattice, [(1, 1), (1, 2), (1, 3)], 2)


def weighted_maze(seed: int, rows: int = 8, cols: int = 10) -> Lattice:
    """Random maze with random weights 1-9 on open cells."""
    lattice = random_maze(
        empty_lattice(rows, cols, start=(0, 0), finish=(rows - 1, cols - 1)),
        density=0.25,
        seed=seed,
    )
    rng = random.Random(seed)
    for cell in lattice:
        if cell.is_wall or cell.is_start or cell.is_finish:
            continue
        lattice = lattice.with_weight(cell.row, cell.col, rng.randint(1, 9))
    return lattice


@pytest.fixture(params=range(8))
def random_lattice(request) -> Lattice:
    return weighted_maze(request.param)
