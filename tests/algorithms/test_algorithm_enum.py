import pytest

from gridflow.algorithms.base import Algorithm


@pytest.mark.parametrize(
    "name, expected",
    [
        ("dijkstra", Algorithm.DIJKSTRA),
        ("Dijkstra", Algorithm.DIJKSTRA),
        ("astar", Algorithm.ASTAR),
        ("A*", Algorithm.ASTAR),
        ("fordFulkerson", Algorithm.FORD_FULKERSON),
        ("ford-fulkerson", Algorithm.FORD_FULKERSON),
        ("ford_fulkerson", Algorithm.FORD_FULKERSON),
        (2, Algorithm.ASTAR),
        (Algorithm.DIJKSTRA, Algorithm.DIJKSTRA),
    ],
)
def test_parse(name, expected):
    assert Algorithm.parse(name) is expected


def test_parse_unknown_name():
    with pytest.raises(ValueError, match="Unknown algorithm"):
        Algorithm.parse("bfs")


def test_labels():
    assert Algorithm.DIJKSTRA.label == "Dijkstra's Algorithm"
    assert Algorithm.FORD_FULKERSON.label == "Ford-Fulkerson"
