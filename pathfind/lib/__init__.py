"""Core data structures for pathfind.

This package contains the directed graph, the indexed priority queue, and
the NetworkX integration module.
"""

from pathfind.lib.graph import DirectedGraph, GraphEdge
from pathfind.lib.nx import from_networkx, to_networkx
from pathfind.lib.priority_queue import IndexedPriorityQueue, QueueItem

__all__ = [
    "DirectedGraph",
    "GraphEdge",
    "IndexedPriorityQueue",
    "QueueItem",
    "from_networkx",
    "to_networkx",
]
