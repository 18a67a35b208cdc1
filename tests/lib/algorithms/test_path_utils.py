import pytest

from pathfind.lib.algorithms.path_utils import path_cost, path_edges
from pathfind.lib.graph import GraphEdge
from .sample_graphs import *


def test_path_edges(square1):
    assert path_edges(square1, ["A", "D", "C"]) == [
        GraphEdge("A", "D", 2),
        GraphEdge("D", "C", 2),
    ]


def test_path_cost(square1, map1, map_nodes):
    n = map_nodes
    assert path_cost(square1, ["A", "B", "C"]) == 2
    assert path_cost(square1, ["A", "D", "C"]) == 4
    assert path_cost(map1, [n["A"], n["C"], n["E"]]) == pytest.approx(5.5)


def test_single_node_and_empty_paths(square1):
    assert path_cost(square1, ["A"]) == 0
    assert path_edges(square1, ["A"]) == []
    assert path_cost(square1, []) == 0


def test_path_with_missing_edge(square1):
    with pytest.raises(ValueError, match="No edge from 'A' to 'C'"):
        path_cost(square1, ["A", "C"])
    with pytest.raises(ValueError):
        path_edges(square1, ["C", "B"])
