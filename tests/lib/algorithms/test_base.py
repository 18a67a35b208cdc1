import pytest

from pathfind.lib.algorithms.base import (
    SearchContext,
    edge_data_cost,
    heuristic_from,
    zero_cost,
)
from pathfind.lib.algorithms.traversal import SearchNode
from pathfind.lib.graph import GraphEdge


@pytest.fixture
def ctx():
    parent = SearchNode("A", g_cost=2.0, h_cost=1.0)
    return SearchContext("S", "Z", parent, GraphEdge("A", "B", 3.0))


def test_zero_cost(ctx):
    assert zero_cost(ctx) == 0


def test_edge_data_cost(ctx):
    assert edge_data_cost(ctx) == 5.0


def test_heuristic_from(ctx):
    calls = []

    def heuristic(node, goal):
        calls.append((node, goal))
        return 7

    h_function = heuristic_from(heuristic)
    assert h_function(ctx) == 7
    assert calls == [("B", "Z")]


def test_heuristic_from_none_is_zero():
    assert heuristic_from(None) is zero_cost


def test_context_is_frozen(ctx):
    with pytest.raises(AttributeError):
        ctx.end = "Y"  # type: ignore[misc]


def test_search_node_costs_and_order():
    a = SearchNode("A", g_cost=1.0, h_cost=2.0)
    b = SearchNode("B", parent=a, g_cost=2.0, h_cost=2.0)
    assert a.f_cost == 3.0
    assert b.f_cost == 4.0
    assert a < b
    assert not b < a
    assert a.queue_index == -1
    assert b.backtrack() == ["A", "B"]
    assert repr(b) == "(B -> (A: 3.0): 4.0)"
