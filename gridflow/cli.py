"""Command-line interface for gridflow."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import jsonschema
import yaml

from gridflow.algorithms.base import Algorithm
from gridflow.config import LATTICE_CONFIG
from gridflow.generate import empty_lattice, random_maze
from gridflow.io import format_lattice, load_lattice, result_to_dict
from gridflow.logging import get_logger, level_for_flags, set_global_log_level
from gridflow.runner import RunResult, run

logger = get_logger(__name__)


def _format_summary(run_result: RunResult) -> str:
    lines = [
        f"Algorithm:     {run_result.algorithm.label}",
        f"Visited cells: {run_result.visited_count}",
        f"Path length:   {run_result.path_length}",
    ]
    if run_result.max_flow is not None:
        lines.append(f"Max flow:      {run_result.max_flow}")
    elif run_result.found:
        lines.append(f"Path cost:     {run_result.path_cost}")
    else:
        lines.append("Path cost:     no path")
    lines.append(f"Elapsed:       {run_result.elapsed * 1000:.3f} ms")
    return "\n".join(lines)


def _run_map(
    path: Path,
    algorithm: str,
    results: Optional[Path],
    stdout: bool,
    show: bool,
) -> None:
    """Load a lattice, run one algorithm and report the outcome."""
    logger.info("Loading lattice from %s", path)
    try:
        lattice = load_lattice(path)
        run_result = run(algorithm, lattice)
    except FileNotFoundError:
        logger.error("Map file not found: %s", path)
        raise SystemExit(1) from None
    except jsonschema.ValidationError as exc:
        logger.error("Invalid lattice document %s: %s", path, exc.message)
        raise SystemExit(1) from None
    except (ValueError, yaml.YAMLError) as exc:
        logger.error("Cannot run %s on %s: %s", algorithm, path, exc)
        raise SystemExit(1) from None

    logger.info(
        "%s: %d visited, path length %d",
        run_result.algorithm.label,
        run_result.visited_count,
        run_result.path_length,
    )
    print(_format_summary(run_result))

    if show:
        print()
        print(format_lattice(lattice, run_result.result.path))

    data = result_to_dict(run_result)
    if results is not None:
        results.parent.mkdir(parents=True, exist_ok=True)
        results.write_text(json.dumps(data, indent=2), encoding="utf-8")
        logger.info("Results written to %s", results)
    if stdout:
        print(json.dumps(data, indent=2))


def _print_maze(rows: int, cols: int, density: float, seed: Optional[int]) -> None:
    """Print a random maze with the start top-left and the finish bottom-right."""
    if rows < 1 or cols < 1 or rows * cols < 2:
        logger.error("A maze needs at least two cells, got %dx%d", rows, cols)
        raise SystemExit(1)
    lattice = empty_lattice(rows, cols, start=(0, 0), finish=(rows - 1, cols - 1))
    print(format_lattice(random_maze(lattice, density=density, seed=seed)))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``gridflow`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="gridflow",
        description="Run path-search and max-flow algorithms on grid lattices.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,maze}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Run an algorithm on a map")
    run_parser.add_argument(
        "map", type=Path, help="Path to a YAML lattice or an ASCII map"
    )
    run_parser.add_argument(
        "--algorithm",
        "-a",
        default="dijkstra",
        choices=[a.name.lower().replace("_", "-") for a in Algorithm],
        help="Algorithm to run (default: dijkstra)",
    )
    run_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help="Write results as JSON to this file",
    )
    run_parser.add_argument(
        "--stdout", action="store_true", help="Print JSON results to stdout"
    )
    run_parser.add_argument(
        "--show", action="store_true", help="Print the map with the path overlaid"
    )

    maze_parser = subparsers.add_parser("maze", help="Print a random ASCII maze")
    maze_parser.add_argument("--rows", type=int, default=LATTICE_CONFIG.rows)
    maze_parser.add_argument("--cols", type=int, default=LATTICE_CONFIG.cols)
    maze_parser.add_argument(
        "--density",
        type=float,
        default=LATTICE_CONFIG.wall_density,
        help="Wall probability per cell (default: %(default)s)",
    )
    maze_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(level_for_flags(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    if args.command == "run":
        _run_map(args.map, args.algorithm, args.results, args.stdout, args.show)
    elif args.command == "maze":
        _print_maze(args.rows, args.cols, args.density, args.seed)


if __name__ == "__main__":
    main()
