import pytest

from gridflow.algorithms.base import NO_PARENT
from gridflow.algorithms.paths import path_cost, reconstruct_indices, reconstruct_path
from gridflow.lattice import Lattice


def test_reconstruct_indices_chain():
    parent = [NO_PARENT, 0, 1]
    assert reconstruct_indices(parent, 0, 2) == [0, 1, 2]


def test_reconstruct_indices_unreachable():
    parent = [NO_PARENT, 0, NO_PARENT]
    assert reconstruct_indices(parent, 0, 2) == []


def test_reconstruct_indices_src_is_dst():
    assert reconstruct_indices([NO_PARENT, NO_PARENT], 1, 1) == [1]


def test_reconstruct_indices_detects_cycle():
    with pytest.raises(ValueError):
        reconstruct_indices([1, 0], 5, 0)


def test_reconstruct_path_returns_cells():
    lattice = Lattice(1, 3)
    path = reconstruct_path(lattice, [NO_PARENT, 0, 1], 0, 2)
    assert [c.coord for c in path] == [(0, 0), (0, 1), (0, 2)]


def test_path_cost_counts_entered_cells():
    lattice = Lattice.from_weights([[7, 2, 3]])
    assert path_cost(list(lattice)) == 5
    assert path_cost([lattice.cell(0, 0)]) == 0
    assert path_cost([]) is None
