"""NetworkX graph conversion utilities.

This module converts between NetworkX graphs and `DirectedGraph`, whose edges
carry a single data value (typically a numeric weight).

Example:
    >>> import networkx as nx
    >>> from pathfind.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=10)
    >>> G.add_edge("B", "C", weight=5)
    >>>
    >>> graph = from_networkx(G)
    >>> graph.try_get_edge("A", "B")
    10
    >>>
    >>> G_out = to_networkx(graph)
"""

from __future__ import annotations

from typing import Any, Dict, Tuple, Union

import networkx as nx

from pathfind.lib.algorithms.base import Cost
from pathfind.lib.graph import DirectedGraph, NodeID
from pathfind.logging import get_logger

logger = get_logger(__name__)

NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]


def from_networkx(
    nx_graph: NxGraph,
    weight: str = "weight",
    default: Cost = 1.0,
) -> DirectedGraph[Cost]:
    """
    Convert a NetworkX graph into a DirectedGraph with weighted edges.

    Undirected graphs produce an edge in each direction. Parallel edges of
    multigraphs are consolidated into one edge carrying the minimum weight.
    Self-loops are skipped since DirectedGraph does not allow them.

    Args:
        nx_graph: The NetworkX graph to convert.
        weight: Edge attribute holding the weight.
        default: Weight used for edges without the `weight` attribute.

    Returns:
        A DirectedGraph whose nodes follow the NetworkX node order.
    """
    weights: Dict[Tuple[NodeID, NodeID], Cost] = {}
    skipped = 0

    for u, v, data in nx_graph.edges(data=True):
        if u == v:
            skipped += 1
            continue
        w = data.get(weight, default)
        pairs = [(u, v)] if nx_graph.is_directed() else [(u, v), (v, u)]
        for pair in pairs:
            if pair not in weights or w < weights[pair]:
                weights[pair] = w

    if skipped:
        logger.debug("Skipped %d self-loop edge(s) during conversion", skipped)

    graph: DirectedGraph[Cost] = DirectedGraph()
    for node in nx_graph.nodes:
        graph.add_node(node)
    for (u, v), w in weights.items():
        graph.add_edge(u, v, w)
    return graph


def to_networkx(graph: DirectedGraph[Any], weight: str = "weight") -> nx.DiGraph:
    """
    Convert a DirectedGraph into a NetworkX DiGraph.

    Args:
        graph: The graph to convert.
        weight: Attribute name under which edge data is stored.

    Returns:
        A NetworkX DiGraph with the same nodes and edges.
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(graph.nodes())
    for edge in graph.edges():
        nx_graph.add_edge(edge.src_node, edge.dst_node, **{weight: edge.data})
    return nx_graph
