"""Rectangular lattice of weighted, possibly-blocked cells.

The lattice is the one structure shared by every algorithm. It is read-only
during a run: per-run bookkeeping lives in a ``SearchContext`` created by
``Lattice.new_context()``, and edits return new ``Lattice`` instances.

Adjacency is 4-directional (up, down, left, right) without diagonals or
wraparound. Cells are addressed either by ``(row, col)`` coordinates or by the
flat index ``row * cols + col``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from gridflow.algorithms.context import SearchContext

Coord = Tuple[int, int]


class InvalidLatticeShape(ValueError):
    """Raised when a lattice or a cell reference violates the lattice contract."""


@dataclass(frozen=True, slots=True)
class Cell:
    """A single lattice position.

    Attributes:
        row: Row coordinate.
        col: Column coordinate.
        weight: Cost of entering this cell, also its capacity for max-flow.
        is_wall: Whether the cell blocks traversal.
        is_start: Whether this is the designated start/source cell.
        is_finish: Whether this is the designated finish/sink cell.
    """

    row: int
    col: int
    weight: int = 1
    is_wall: bool = False
    is_start: bool = False
    is_finish: bool = False

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)


CellRef = Union[Cell, Coord]


class Lattice:
    """Fixed-size rectangular grid of cells with 4-directional adjacency.

    Example:
        >>> lat = Lattice(3, 3).with_start((0, 0)).with_finish((2, 2))
        >>> lat.index(2, 2)
        8
        >>> [c.coord for c in lat.neighbors(0, 0)]
        [(1, 0), (0, 1)]
    """

    __slots__ = ("rows", "cols", "_cells")

    def __init__(
        self,
        rows: int,
        cols: int,
        cells: Optional[Sequence[Sequence[Cell]]] = None,
    ) -> None:
        """Create a lattice.

        Args:
            rows: Number of rows (>= 1).
            cols: Number of columns (>= 1).
            cells: Optional row-major cells. When omitted, every cell is an
                open, unweighted cell with no start/finish flag.

        Raises:
            InvalidLatticeShape: If dimensions are not positive or ``cells``
                does not describe a valid ``rows x cols`` lattice.
        """
        if rows < 1 or cols < 1:
            raise InvalidLatticeShape(
                f"Lattice dimensions must be positive, got {rows}x{cols}."
            )
        self.rows = rows
        self.cols = cols
        if cells is None:
            self._cells: Tuple[Cell, ...] = tuple(
                Cell(r, c) for r in range(rows) for c in range(cols)
            )
        else:
            self._cells = _validated_cells(rows, cols, cells)

    @classmethod
    def from_cells(cls, cells: Sequence[Sequence[Cell]]) -> Lattice:
        """Build a lattice from row-major cells, inferring the dimensions."""
        if not cells or not cells[0]:
            raise InvalidLatticeShape("Lattice needs at least one row and column.")
        return cls(len(cells), len(cells[0]), cells)

    @classmethod
    def from_weights(
        cls,
        weights: Sequence[Sequence[int]],
        walls: Sequence[Coord] = (),
        start: Optional[Coord] = None,
        finish: Optional[Coord] = None,
    ) -> Lattice:
        """Build a lattice from a weight matrix plus wall and endpoint coordinates."""
        if not weights or not weights[0]:
            raise InvalidLatticeShape("Lattice needs at least one row and column.")
        wall_set = {tuple(w) for w in walls}
        start = tuple(start) if start is not None else None
        finish = tuple(finish) if finish is not None else None
        cells = [
            [
                Cell(
                    r,
                    c,
                    weight=w,
                    is_wall=(r, c) in wall_set,
                    is_start=(r, c) == start,
                    is_finish=(r, c) == finish,
                )
                for c, w in enumerate(row)
            ]
            for r, row in enumerate(weights)
        ]
        lattice = cls.from_cells(cells)
        for role, ref in (("start", start), ("finish", finish)):
            if ref is not None and not lattice.in_bounds(*ref):
                raise InvalidLatticeShape(f"{role} {ref} is outside the lattice.")
        return lattice

    #
    # Geometry
    #
    @property
    def size(self) -> int:
        return self.rows * self.cols

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def index(self, row: int, col: int) -> int:
        """Return the flat index ``row * cols + col``."""
        return row * self.cols + col

    def coords(self, index: int) -> Coord:
        """Return the ``(row, col)`` of a flat index."""
        return divmod(index, self.cols)

    def neighbor_indices(self, index: int) -> List[int]:
        """Flat indices of the in-bounds neighbors of ``index``: up, down, left, right."""
        row, col = divmod(index, self.cols)
        out: List[int] = []
        if row > 0:
            out.append(index - self.cols)
        if row < self.rows - 1:
            out.append(index + self.cols)
        if col > 0:
            out.append(index - 1)
        if col < self.cols - 1:
            out.append(index + 1)
        return out

    def neighbors(self, row: int, col: int) -> List[Cell]:
        """In-bounds 4-directional neighbors; off-grid directions are omitted."""
        return [self._cells[i] for i in self.neighbor_indices(self.index(row, col))]

    #
    # Cell access
    #
    def cell(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise InvalidLatticeShape(f"Cell ({row}, {col}) is outside the lattice.")
        return self._cells[row * self.cols + col]

    def cell_at(self, index: int) -> Cell:
        return self._cells[index]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lattice):
            return NotImplemented
        return self.shape == other.shape and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Lattice(rows={self.rows}, cols={self.cols})"

    def grid(self) -> List[List[Cell]]:
        """Row-major copy of the cells as nested lists."""
        return [
            list(self._cells[r * self.cols : (r + 1) * self.cols])
            for r in range(self.rows)
        ]

    @property
    def start(self) -> Optional[Cell]:
        return next((c for c in self._cells if c.is_start), None)

    @property
    def finish(self) -> Optional[Cell]:
        return next((c for c in self._cells if c.is_finish), None)

    def resolve(self, ref: CellRef, role: str = "cell") -> int:
        """Resolve a cell or coordinate to a flat index of a traversable cell.

        Args:
            ref: A ``Cell`` or a ``(row, col)`` tuple.
            role: Name used in error messages ("start", "finish", ...).

        Raises:
            InvalidLatticeShape: If ``ref`` is outside the lattice or is a wall.
        """
        row, col = ref.coord if isinstance(ref, Cell) else ref
        if not self.in_bounds(row, col):
            raise InvalidLatticeShape(
                f"{role} ({row}, {col}) is outside the {self.rows}x{self.cols} lattice."
            )
        index = self.index(row, col)
        if self._cells[index].is_wall:
            raise InvalidLatticeShape(f"{role} ({row}, {col}) is a wall.")
        return index

    def new_context(self) -> SearchContext:
        """Return fresh per-run bookkeeping sized to this lattice."""
        return SearchContext.for_size(self.size)

    #
    # Edits (each returns a new lattice)
    #
    def _with_cells(self, changes: dict) -> Lattice:
        cells = list(self._cells)
        for index, cell in changes.items():
            cells[index] = cell
        rows = [cells[r * self.cols : (r + 1) * self.cols] for r in range(self.rows)]
        return Lattice(self.rows, self.cols, rows)

    def with_wall(self, row: int, col: int, is_wall: bool = True) -> Lattice:
        """Return a copy with ``(row, col)`` walled (or opened); walls reset weight to 1."""
        cell = self.cell(row, col)
        if is_wall and (cell.is_start or cell.is_finish):
            raise InvalidLatticeShape(f"Cannot wall endpoint cell ({row}, {col}).")
        weight = 1 if is_wall else cell.weight
        return self._with_cells(
            {self.index(row, col): replace(cell, is_wall=is_wall, weight=weight)}
        )

    def with_weight(self, row: int, col: int, weight: int) -> Lattice:
        """Return a copy with the weight of ``(row, col)`` replaced."""
        cell = self.cell(row, col)
        return self._with_cells({self.index(row, col): replace(cell, weight=weight)})

    def _with_endpoint(self, coord: Coord, flag: str) -> Lattice:
        target = self.cell(*coord)
        changes = {
            self.index(c.row, c.col): replace(c, **{flag: False})
            for c in self._cells
            if getattr(c, flag)
        }
        changes[self.index(*coord)] = replace(target, is_wall=False, **{flag: True})
        return self._with_cells(changes)

    def with_start(self, coord: Coord) -> Lattice:
        """Return a copy whose start cell is ``coord`` (opened if it was a wall)."""
        return self._with_endpoint(coord, "is_start")

    def with_finish(self, coord: Coord) -> Lattice:
        """Return a copy whose finish cell is ``coord`` (opened if it was a wall)."""
        return self._with_endpoint(coord, "is_finish")


def _validated_cells(
    rows: int, cols: int, cells: Sequence[Sequence[Cell]]
) -> Tuple[Cell, ...]:
    if len(cells) != rows:
        raise InvalidLatticeShape(f"Expected {rows} rows, got {len(cells)}.")
    flat: List[Cell] = []
    starts = finishes = 0
    for r, row in enumerate(cells):
        if len(row) != cols:
            raise InvalidLatticeShape(
                f"Row {r} has {len(row)} cells; all rows must have {cols}."
            )
        for c, cell in enumerate(row):
            if (cell.row, cell.col) != (r, c):
                raise InvalidLatticeShape(
                    f"Cell at position ({r}, {c}) claims coordinates {cell.coord}."
                )
            if not isinstance(cell.weight, int) or cell.weight < 1:
                raise InvalidLatticeShape(
                    f"Cell ({r}, {c}) has weight {cell.weight!r}; weights must be integers >= 1."
                )
            if cell.is_wall and (cell.is_start or cell.is_finish):
                raise InvalidLatticeShape(f"Endpoint cell ({r}, {c}) cannot be a wall.")
            starts += cell.is_start
            finishes += cell.is_finish
            flat.append(cell)
    if starts > 1 or finishes > 1:
        raise InvalidLatticeShape(
            f"Lattice has {starts} start and {finishes} finish cells; at most one of each."
        )
    return tuple(flat)
