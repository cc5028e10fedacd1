"""``python -m gridflow`` runs the same CLI as the ``gridflow`` script."""

from __future__ import annotations

import runpy
from unittest.mock import patch

import pytest

from gridflow import cli


def run_module(*args: str) -> None:
    with patch("sys.argv", ["gridflow", *args]):
        runpy.run_module("gridflow", run_name="__main__")


def test_module_help_exits_zero(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        run_module("--help")
    assert exc_info.value.code == 0
    assert "{run,maze}" in capsys.readouterr().out


def test_module_prints_fully_walled_maze(capsys) -> None:
    run_module("maze", "--rows", "2", "--cols", "3", "--density", "1")
    assert capsys.readouterr().out.splitlines() == ["S##", "##F"]


def test_module_maze_matches_cli(capsys) -> None:
    run_module("maze", "--rows", "4", "--cols", "6", "--seed", "1")
    from_module = capsys.readouterr().out
    cli.main(["maze", "--rows", "4", "--cols", "6", "--seed", "1"])
    assert capsys.readouterr().out == from_module


def test_module_runs_a_map(tmp_path, capsys) -> None:
    path = tmp_path / "line.txt"
    path.write_text("S.3F\n")
    run_module("run", str(path), "--algorithm", "astar")
    out = capsys.readouterr().out
    assert "Path length:   4" in out
    assert "Path cost:     5" in out
