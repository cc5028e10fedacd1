"""Conversion of a lattice into a NetworkX ``DiGraph``.

Nodes are the ``(row, col)`` coordinates of open cells. Every 4-directional
neighbor pair of open cells yields two directed edges; edge ``u -> v`` carries
the weight of ``v`` both as ``weight`` (cost of entering ``v``) and as
``capacity`` (capacity of entering ``v``), matching the conventions of the
lattice algorithms.
"""

from __future__ import annotations

from typing import Optional

import networkx as nx

from gridflow.lattice import Lattice


def to_digraph(lattice: Lattice, include_walls: bool = False) -> nx.DiGraph:
    """Convert a lattice to a NetworkX DiGraph.

    Args:
        lattice: The lattice to convert.
        include_walls: If True, wall cells become isolated nodes so that every
            coordinate is present; they never receive edges.

    Returns:
        A DiGraph whose nodes carry ``weight``, ``is_wall``, ``is_start`` and
        ``is_finish`` attributes.
    """
    graph = nx.DiGraph()
    for cell in lattice:
        if cell.is_wall and not include_walls:
            continue
        graph.add_node(
            cell.coord,
            weight=cell.weight,
            is_wall=cell.is_wall,
            is_start=cell.is_start,
            is_finish=cell.is_finish,
        )

    for cell in lattice:
        if cell.is_wall:
            continue
        for neighbor in lattice.neighbors(cell.row, cell.col):
            if neighbor.is_wall:
                continue
            graph.add_edge(
                cell.coord,
                neighbor.coord,
                weight=neighbor.weight,
                capacity=neighbor.weight,
            )
    return graph


def shortest_path_cost(lattice: Lattice) -> Optional[int]:
    """Start-to-finish path cost computed by NetworkX, or None if unreachable.

    Raises:
        ValueError: If the lattice lacks a start or finish cell.
    """
    start, finish = lattice.start, lattice.finish
    if start is None or finish is None:
        raise ValueError("Lattice needs a start and a finish cell.")
    graph = to_digraph(lattice)
    try:
        return nx.dijkstra_path_length(graph, start.coord, finish.coord)
    except nx.NetworkXNoPath:
        return None


def max_flow_value(lattice: Lattice) -> int:
    """Start-to-finish maximum flow computed by NetworkX."""
    start, finish = lattice.start, lattice.finish
    if start is None or finish is None:
        raise ValueError("Lattice needs a start and a finish cell.")
    if start.coord == finish.coord:
        return 0
    return nx.maximum_flow_value(to_digraph(lattice), start.coord, finish.coord)
