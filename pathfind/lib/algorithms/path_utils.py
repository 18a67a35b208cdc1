from __future__ import annotations

from typing import List, Sequence

from pathfind.lib.algorithms.base import Cost
from pathfind.lib.graph import DirectedGraph, GraphEdge, NodeID


def path_edges(graph: DirectedGraph, path: Sequence[NodeID]) -> List[GraphEdge]:
    """
    Resolve a node path into the graph edges it traverses.

    Args:
        graph: The graph the path was found in.
        path: Consecutive nodes, e.g. the result of `GraphTraversal.find_path`.

    Returns:
        One GraphEdge per consecutive node pair; empty for paths of length <= 1.

    Raises:
        ValueError: If a consecutive pair is not an edge of the graph.
    """
    edges: List[GraphEdge] = []
    for src_node, dst_node in zip(path, path[1:]):
        if not graph.contains_edge(src_node, dst_node):
            raise ValueError(f"No edge from '{src_node}' to '{dst_node}' in graph.")
        edges.append(
            GraphEdge(src_node, dst_node, graph.try_get_edge(src_node, dst_node))
        )
    return edges


def path_cost(graph: DirectedGraph, path: Sequence[NodeID]) -> Cost:
    """
    Sum the edge data (weights) along a node path.

    A single-node path costs 0.

    Raises:
        ValueError: If a consecutive pair is not an edge of the graph.
    """
    return sum((edge.data for edge in path_edges(graph, path)), 0)
