"""Search algorithms over DirectedGraph."""

from pathfind.lib.algorithms.base import (
    Cost,
    CostFunction,
    Heuristic,
    SearchContext,
    edge_data_cost,
    heuristic_from,
    zero_cost,
)
from pathfind.lib.algorithms.path_utils import path_cost, path_edges
from pathfind.lib.algorithms.traversal import GraphTraversal, SearchNode, shortest_path

__all__ = [
    "Cost",
    "CostFunction",
    "Heuristic",
    "SearchContext",
    "edge_data_cost",
    "heuristic_from",
    "zero_cost",
    "path_cost",
    "path_edges",
    "GraphTraversal",
    "SearchNode",
    "shortest_path",
]
