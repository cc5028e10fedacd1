import networkx as nx
import pytest

from gridflow.algorithms import dijkstra, ford_fulkerson
from gridflow.graph.convert import max_flow_value, shortest_path_cost, to_digraph
from gridflow.io import parse_map
from gridflow.lattice import Lattice


def test_nodes_skip_walls(walled_box):
    graph = to_digraph(walled_box)
    assert (0, 2) not in graph
    assert graph.number_of_nodes() == sum(not c.is_wall for c in walled_box)


def test_include_walls_adds_isolated_nodes(walled_box):
    graph = to_digraph(walled_box, include_walls=True)
    assert graph.number_of_nodes() == walled_box.size
    assert graph.nodes[(0, 2)]["is_wall"]
    assert graph.degree((0, 2)) == 0


def test_edges_carry_destination_weight(weighted_detour):
    graph = to_digraph(weighted_detour)
    assert graph.edges[(0, 0), (0, 1)]["weight"] == 5
    assert graph.edges[(0, 1), (0, 0)]["weight"] == 1
    assert graph.edges[(0, 0), (0, 1)]["capacity"] == 5


def test_node_attributes(open3x3):
    graph = to_digraph(open3x3)
    assert graph.nodes[(0, 0)]["is_start"]
    assert graph.nodes[(2, 2)]["is_finish"]
    assert graph.number_of_edges() == 24


def test_shortest_path_cost(weighted_detour, blocked_row):
    assert shortest_path_cost(weighted_detour) == 4
    assert shortest_path_cost(blocked_row) is None


def test_networkx_helpers_need_endpoints():
    with pytest.raises(ValueError):
        shortest_path_cost(Lattice(2, 2))
    with pytest.raises(ValueError):
        max_flow_value(Lattice(2, 2).with_start((0, 0)))


def test_max_flow_matches(three_channels, open3x3):
    assert max_flow_value(three_channels) == 3
    assert max_flow_value(open3x3) == 2


def test_random_lattices_agree(random_lattice):
    start, finish = random_lattice.start, random_lattice.finish
    assert dijkstra(random_lattice, start, finish).cost == shortest_path_cost(
        random_lattice
    )
    assert ford_fulkerson(random_lattice, start, finish).max_flow == max_flow_value(
        random_lattice
    )


def test_isolated_endpoints():
    lattice = parse_map("S#\n#F")
    assert shortest_path_cost(lattice) is None
    assert max_flow_value(lattice) == 0
    assert nx.is_isolate(to_digraph(lattice), (0, 0))
