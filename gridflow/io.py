"""Reading and writing lattices and results.

ASCII maps use one line per row:

    ``.``  open cell (weight 1)
    ``1``-``9``  open cell with that weight
    ``#``  wall
    ``S``  start cell
    ``F``  finish cell

YAML documents wrap either an ASCII map or explicit coordinates under a
top-level ``lattice`` key::

    lattice:
      map: |
        S..
        .#.
        ..F
      weights:
        "0,1": 5

    lattice:
      rows: 3
      cols: 3
      start: [0, 0]
      finish: [2, 2]
      walls: [[1, 1]]
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import jsonschema
import yaml

from gridflow.algorithms.types import FlowResult
from gridflow.config import LATTICE_CONFIG
from gridflow.lattice import Cell, Coord, InvalidLatticeShape, Lattice
from gridflow.logging import get_logger
from gridflow.runner import RunResult

logger = get_logger(__name__)

WALL_CHAR = "#"
OPEN_CHAR = "."
START_CHAR = "S"
FINISH_CHAR = "F"
PATH_CHAR = "*"
HEAVY_CHAR = "+"

YAML_SUFFIXES = (".yaml", ".yml")


def parse_map(text: str) -> Lattice:
    """Parse an ASCII map into a lattice.

    Blank lines and surrounding whitespace are ignored.

    Raises:
        ValueError: On an unknown character.
        InvalidLatticeShape: If rows differ in length or the map is empty.
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise InvalidLatticeShape("Map is empty.")

    cells: List[List[Cell]] = []
    for r, line in enumerate(lines):
        row: List[Cell] = []
        for c, ch in enumerate(line):
            if ch == OPEN_CHAR:
                row.append(Cell(r, c))
            elif ch == WALL_CHAR:
                row.append(Cell(r, c, is_wall=True))
            elif ch == START_CHAR:
                row.append(Cell(r, c, is_start=True))
            elif ch == FINISH_CHAR:
                row.append(Cell(r, c, is_finish=True))
            elif ch.isdigit() and ch != "0":
                row.append(Cell(r, c, weight=int(ch)))
            else:
                raise ValueError(
                    f"Unknown map character {ch!r} at row {r}, column {c}."
                )
        cells.append(row)
    return Lattice.from_cells(cells)


def format_lattice(lattice: Lattice, path: Optional[Sequence[Cell]] = None) -> str:
    """Render ``lattice`` as an ASCII map, marking ``path`` cells with ``*``.

    Weights above ``LATTICE_CONFIG.max_weight`` have no digit and render as ``+``.
    """
    on_path = {cell.coord for cell in path or ()}
    lines = []
    for row in lattice.grid():
        chars = []
        for cell in row:
            if cell.is_start:
                chars.append(START_CHAR)
            elif cell.is_finish:
                chars.append(FINISH_CHAR)
            elif cell.is_wall:
                chars.append(WALL_CHAR)
            elif cell.coord in on_path:
                chars.append(PATH_CHAR)
            elif cell.weight == 1:
                chars.append(OPEN_CHAR)
            elif cell.weight <= LATTICE_CONFIG.max_weight:
                chars.append(str(cell.weight))
            else:
                chars.append(HEAVY_CHAR)
        lines.append("".join(chars))
    return "\n".join(lines)


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("gridflow.schemas")
        .joinpath("lattice.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def _normalize_weight_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    # YAML reads an unquoted key such as ``3`` as an int
    weights = data.get("weights")
    if isinstance(weights, dict):
        data = dict(data, weights={str(k): v for k, v in weights.items()})
    return data


def _coord(value: Sequence[int]) -> Coord:
    # The schema accepts integral floats such as 2.0
    return (int(value[0]), int(value[1]))


def _weight_key(key: str) -> Coord:
    row, col = (int(part) for part in key.split(","))
    return (row, col)


def _build_lattice(data: Dict[str, Any]) -> Lattice:
    if "map" in data:
        lattice = parse_map(data["map"])
    else:
        lattice = Lattice(int(data["rows"]), int(data["cols"]))
        for wall in data.get("walls") or []:
            lattice = lattice.with_wall(*_coord(wall))
        if data.get("start") is not None:
            lattice = lattice.with_start(_coord(data["start"]))
        if data.get("finish") is not None:
            lattice = lattice.with_finish(_coord(data["finish"]))

    for key, weight in (data.get("weights") or {}).items():
        row, col = _weight_key(key)
        if lattice.cell(row, col).is_wall:
            raise InvalidLatticeShape(f"Cannot weight wall cell ({row}, {col}).")
        lattice = lattice.with_weight(row, col, int(weight))
    return lattice


def lattice_from_dict(data: Dict[str, Any]) -> Lattice:
    """Build a lattice from the mapping stored under the ``lattice`` key.

    The mapping is validated against the packaged ``lattice.json`` schema
    before any cell is built.

    Raises:
        jsonschema.ValidationError: If the mapping does not match the schema.
        InvalidLatticeShape: If the resulting lattice is invalid, e.g. a
            coordinate is off-grid or a wall is weighted.
    """
    if isinstance(data, dict):
        data = _normalize_weight_keys(data)
    jsonschema.validate({"lattice": data}, _load_schema())
    return _build_lattice(data)


def parse_yaml(yaml_str: str) -> Lattice:
    """Parse and validate a YAML lattice document.

    Raises:
        ValueError: If the document is not a mapping with a ``lattice`` key.
        yaml.YAMLError: On malformed YAML.
        jsonschema.ValidationError: If the document does not match the schema.
    """
    data = yaml.safe_load(yaml_str)
    # Early shape check for a clearer message than the schema gives
    if not isinstance(data, dict) or "lattice" not in data:
        raise ValueError("YAML document must have a top-level 'lattice' key.")
    if isinstance(data["lattice"], dict):
        data = dict(data, lattice=_normalize_weight_keys(data["lattice"]))
    jsonschema.validate(data, _load_schema())
    return _build_lattice(data["lattice"])


def load_lattice(path: Path) -> Lattice:
    """Load a lattice from a YAML document or a plain ASCII map file."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        lattice = parse_yaml(text)
    else:
        lattice = parse_map(text)
    logger.debug("Loaded %dx%d lattice from %s", lattice.rows, lattice.cols, path)
    return lattice


def _coords(cells: Sequence[Cell]) -> List[List[int]]:
    return [[cell.row, cell.col] for cell in cells]


def _edge(edge: Tuple[Coord, Coord]) -> List[List[int]]:
    return [list(edge[0]), list(edge[1])]


def result_to_dict(run_result: RunResult) -> Dict[str, Any]:
    """Return JSON-safe primitives describing a run."""
    result = run_result.result
    data: Dict[str, Any] = {
        "algorithm": run_result.algorithm.name.lower(),
        "label": run_result.algorithm.label,
        "elapsed": run_result.elapsed,
        "visited_count": run_result.visited_count,
        "path_length": run_result.path_length,
        "path_cost": run_result.path_cost,
        "visited": _coords(result.visited),
        "path": _coords(result.path),
    }
    if isinstance(result, FlowResult):
        data["max_flow"] = result.max_flow
        data["paths"] = [_coords(p) for p in result.paths]
        data["bottlenecks"] = list(result.bottlenecks)
        data["min_cut"] = [_edge(e) for e in result.summary.min_cut]
    return data
