"""pathfind: best-first graph search.

pathfind provides a directed graph container, an index-tracking priority
queue, and a traversal engine that runs uniform-cost search, Dijkstra and A*
behind two injectable cost functions.

Primary API:
    DirectedGraph - Graph with at most one weighted edge per ordered node pair
    GraphTraversal - Reusable search engine with settable g/h functions
    shortest_path() - One-shot minimum-weight path search
    path_cost() - Total edge weight along a returned path
    from_networkx() - Convert NetworkX graph to DirectedGraph
    to_networkx() - Convert DirectedGraph back to NetworkX

Example:
    from pathfind import DirectedGraph, GraphTraversal, edge_data_cost

    graph = DirectedGraph()
    graph.add_edge("A", "B", 3.5)
    graph.add_edge("B", "D", 2.5)

    search = GraphTraversal(graph, g_function=edge_data_cost)
    search.find_path("A", "D")  # ["A", "B", "D"]
"""

from __future__ import annotations

from pathfind import logging
from pathfind.config import TRAVERSAL_CONFIG, TraversalConfig
from pathfind.exceptions import DuplicateEdgeError, DuplicateNodeError, NodeNotFoundError
from pathfind.lib.algorithms import (
    Cost,
    CostFunction,
    Heuristic,
    SearchContext,
    GraphTraversal,
    SearchNode,
    edge_data_cost,
    heuristic_from,
    path_cost,
    path_edges,
    shortest_path,
    zero_cost,
)
from pathfind.lib.graph import DirectedGraph, GraphEdge
from pathfind.lib.nx import from_networkx, to_networkx
from pathfind.lib.priority_queue import IndexedPriorityQueue, QueueItem

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Graph
    "DirectedGraph",
    "GraphEdge",
    # Queue
    "IndexedPriorityQueue",
    "QueueItem",
    # Search
    "GraphTraversal",
    "SearchNode",
    "SearchContext",
    "Cost",
    "CostFunction",
    "Heuristic",
    "zero_cost",
    "edge_data_cost",
    "heuristic_from",
    "shortest_path",
    "path_cost",
    "path_edges",
    # Errors
    "DuplicateNodeError",
    "DuplicateEdgeError",
    "NodeNotFoundError",
    # Configuration
    "TraversalConfig",
    "TRAVERSAL_CONFIG",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
