import pytest

from gridflow.lattice import Cell, InvalidLatticeShape, Lattice


def test_default_lattice_is_open():
    lattice = Lattice(2, 3)
    assert lattice.shape == (2, 3)
    assert lattice.size == len(lattice) == 6
    assert all(c.weight == 1 and not c.is_wall for c in lattice)
    assert lattice.start is None and lattice.finish is None


@pytest.mark.parametrize("rows, cols", [(0, 3), (3, 0), (-1, 2)])
def test_non_positive_dimensions(rows, cols):
    with pytest.raises(InvalidLatticeShape):
        Lattice(rows, cols)


def test_index_and_coords_round_trip():
    lattice = Lattice(3, 4)
    assert lattice.index(2, 1) == 9
    assert lattice.coords(9) == (2, 1)


def test_neighbors_order_and_bounds():
    lattice = Lattice(3, 3)
    assert [c.coord for c in lattice.neighbors(1, 1)] == [
        (0, 1),
        (2, 1),
        (1, 0),
        (1, 2),
    ]
    assert [c.coord for c in lattice.neighbors(0, 0)] == [(1, 0), (0, 1)]
    assert [c.coord for c in lattice.neighbors(2, 2)] == [(1, 2), (2, 1)]


def test_single_cell_has_no_neighbors():
    assert Lattice(1, 1).neighbors(0, 0) == []


def test_cell_out_of_bounds():
    with pytest.raises(InvalidLatticeShape):
        Lattice(2, 2).cell(2, 0)


def test_ragged_rows_rejected():
    cells = [[Cell(0, 0), Cell(0, 1)], [Cell(1, 0)]]
    with pytest.raises(InvalidLatticeShape, match="Row 1"):
        Lattice.from_cells(cells)


def test_misplaced_cell_rejected():
    with pytest.raises(InvalidLatticeShape):
        Lattice.from_cells([[Cell(0, 1), Cell(0, 0)]])


@pytest.mark.parametrize("weight", [0, -3, 1.5])
def test_bad_weight_rejected(weight):
    with pytest.raises(InvalidLatticeShape):
        Lattice.from_cells([[Cell(0, 0, weight=weight)]])


def test_wall_endpoint_rejected():
    with pytest.raises(InvalidLatticeShape):
        Lattice.from_cells([[Cell(0, 0, is_wall=True, is_start=True)]])


def test_two_starts_rejected():
    with pytest.raises(InvalidLatticeShape):
        Lattice.from_cells([[Cell(0, 0, is_start=True), Cell(0, 1, is_start=True)]])


def test_from_weights():
    lattice = Lattice.from_weights(
        [[1, 2], [3, 4]], walls=[(1, 0)], start=(0, 0), finish=(1, 1)
    )
    assert lattice.cell(0, 1).weight == 2
    assert lattice.cell(1, 0).is_wall
    assert lattice.start.coord == (0, 0)
    assert lattice.finish.coord == (1, 1)


def test_from_weights_endpoint_outside():
    with pytest.raises(InvalidLatticeShape, match="finish"):
        Lattice.from_weights([[1, 1]], start=(0, 0), finish=(3, 3))


def test_edits_return_new_lattices():
    base = Lattice(2, 2)
    walled = base.with_wall(0, 1)
    assert walled.cell(0, 1).is_wall
    assert not base.cell(0, 1).is_wall
    assert base == Lattice(2, 2)
    assert walled != base


def test_wall_resets_weight():
    lattice = Lattice(1, 2).with_weight(0, 1, 7).with_wall(0, 1)
    assert lattice.cell(0, 1).weight == 1
    assert not lattice.with_wall(0, 1, False).cell(0, 1).is_wall


def test_cannot_wall_endpoint():
    lattice = Lattice(1, 2).with_start((0, 0))
    with pytest.raises(InvalidLatticeShape):
        lattice.with_wall(0, 0)


def test_moving_start_clears_previous():
    lattice = Lattice(2, 2).with_start((0, 0)).with_start((1, 1))
    assert lattice.start.coord == (1, 1)
    assert not lattice.cell(0, 0).is_start


def test_endpoint_on_wall_opens_it():
    lattice = Lattice(1, 3).with_wall(0, 2).with_finish((0, 2))
    assert lattice.finish.coord == (0, 2)
    assert not lattice.finish.is_wall


def test_with_weight_validates():
    with pytest.raises(InvalidLatticeShape):
        Lattice(1, 1).with_weight(0, 0, 0)


def test_resolve():
    lattice = Lattice(2, 2).with_wall(1, 1)
    assert lattice.resolve((1, 0)) == 2
    assert lattice.resolve(lattice.cell(0, 1)) == 1
    with pytest.raises(InvalidLatticeShape, match="start"):
        lattice.resolve((5, 5), "start")
    with pytest.raises(InvalidLatticeShape, match="wall"):
        lattice.resolve((1, 1), "finish")


def test_grid_is_row_major():
    grid = Lattice(2, 3).grid()
    assert [[c.coord for c in row] for row in grid] == [
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
    ]


def test_from_weights_accepts_list_endpoints():
    lattice = Lattice.from_weights([[1, 1], [1, 1]], start=[0, 1], finish=[1, 0])
    assert lattice.start.coord == (0, 1)
    assert lattice.finish.coord == (1, 0)
