"""Best-first graph traversal with injectable cost and heuristic functions.

A single search loop covers uniform-cost search / Dijkstra (zero heuristic)
and A* (admissible heuristic). The engine never checks admissibility; the
returned path is optimal only when the heuristic never overestimates the
remaining cost and is consistent.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pathfind.config import TRAVERSAL_CONFIG
from pathfind.exceptions import NodeNotFoundError
from pathfind.lib.algorithms.base import (
    Cost,
    CostFunction,
    Heuristic,
    SearchContext,
    edge_data_cost,
    heuristic_from,
    zero_cost,
)
from pathfind.lib.graph import DirectedGraph, NodeID
from pathfind.lib.priority_queue import IndexedPriorityQueue, QueueItem
from pathfind.logging import get_logger

logger = get_logger(__name__)


class SearchNode(QueueItem):
    """
    A node in the search tree built during one traversal.

    Attributes:
        value: The wrapped graph node.
        parent: The search node this one was reached from, None for the root.
        g_cost: Accumulated cost from the start node.
        h_cost: Heuristic estimate of the remaining cost to the end node.
    """

    def __init__(
        self,
        value: NodeID,
        parent: Optional[SearchNode] = None,
        g_cost: Cost = 0.0,
        h_cost: Cost = 0.0,
    ) -> None:
        self.value = value
        self.parent = parent
        self.g_cost = g_cost
        self.h_cost = h_cost
        self.queue_index = -1

    @property
    def f_cost(self) -> Cost:
        """g_cost + h_cost; the open-set priority."""
        return self.g_cost + self.h_cost

    def __lt__(self, other: SearchNode) -> bool:
        return self.f_cost < other.f_cost

    def __repr__(self) -> str:
        parent = f" -> {self.parent!r}" if self.parent is not None else ""
        return f"({self.value}{parent}: {self.f_cost})"

    def backtrack(self) -> List[NodeID]:
        """Return the node values from the search root down to this node."""
        path: List[NodeID] = []
        current: Optional[SearchNode] = self
        while current is not None:
            path.append(current.value)
            current = current.parent
        path.reverse()
        return path


class GraphTraversal:
    """
    Best-first search over a DirectedGraph.

    The engine owns an open queue sized to the graph and a closed map from
    graph node to its finalized SearchNode; both are cleared at the start of
    every search. One instance must not run overlapping searches.

    Attributes:
        g_function: Computes the tentative cumulative cost of reaching the
            destination of the evaluated edge.
        h_function: Estimates the remaining cost from the destination of the
            evaluated edge to the end node.
    """

    def __init__(
        self,
        graph: DirectedGraph,
        ascending: Optional[bool] = None,
        g_function: CostFunction = zero_cost,
        h_function: CostFunction = zero_cost,
    ) -> None:
        """
        Args:
            graph: The graph to traverse. It must not change during a search.
            ascending: Whether the lowest f-cost is expanded first. Defaults
                to `TRAVERSAL_CONFIG.ascending`.
            g_function: Initial g-function; defaults to the zero cost.
            h_function: Initial h-function; defaults to the zero cost.

        Raises:
            ValueError: If graph is None or a function is not callable.
        """
        if graph is None:
            raise ValueError("Graph must not be None.")
        if ascending is None:
            ascending = TRAVERSAL_CONFIG.ascending

        self._graph = graph
        self._open: IndexedPriorityQueue[SearchNode] = IndexedPriorityQueue(
            TRAVERSAL_CONFIG.capacity_for(graph.node_count), ascending
        )
        self._closed: Dict[NodeID, SearchNode] = {}
        self.g_function = g_function
        self.h_function = h_function

    @property
    def graph(self) -> DirectedGraph:
        return self._graph

    @property
    def ascending(self) -> bool:
        return self._open.ascending

    @property
    def open_capacity(self) -> int:
        """Number of open-set slots; grows at the next search if the graph grew."""
        return self._open.capacity

    @property
    def g_function(self) -> CostFunction:
        return self._g_function

    @g_function.setter
    def g_function(self, func: CostFunction) -> None:
        if func is None or not callable(func):
            raise ValueError("g_function must be a callable.")
        self._g_function = func

    @property
    def h_function(self) -> CostFunction:
        return self._h_function

    @h_function.setter
    def h_function(self, func: CostFunction) -> None:
        if func is None or not callable(func):
            raise ValueError("h_function must be a callable.")
        self._h_function = func

    def find_path(self, start: NodeID, end: NodeID) -> Optional[List[NodeID]]:
        """
        Find a path from `start` to `end`.

        Args:
            start: The first node of the path.
            end: The last node of the path.

        Returns:
            The nodes of the path, start and end included, or None if `end`
            is not reachable from `start`.

        Raises:
            ValueError: If start or end is None.
            NodeNotFoundError: If start or end is not in the graph.
        """
        terminal = self.search(start, end)
        return terminal.backtrack() if terminal is not None else None

    def search(self, start: NodeID, end: NodeID) -> Optional[SearchNode]:
        """
        Run the search and return the SearchNode that reached `end`.

        The returned node carries the accumulated `g_cost` and the parent
        chain back to `start`. Returns None if no path exists.

        Raises:
            ValueError: If start or end is None.
            NodeNotFoundError: If start or end is not in the graph.
        """
        if start is None or end is None:
            raise ValueError("Start and end nodes must not be None.")
        for node in (start, end):
            if not self._graph.contains_node(node):
                raise NodeNotFoundError(node)

        trace = TRAVERSAL_CONFIG.trace
        logger.debug("Beginning search from %s to %s", start, end)
        self._reset()

        expand_node = SearchNode(start)
        self._enqueue(expand_node)
        success = False

        while True:
            expand_node = self._open.try_dequeue()
            if expand_node is None:
                break
            if trace:
                logger.debug("Selected %s, open: %r", expand_node.value, self._open)
            self._closed[expand_node.value] = expand_node

            if expand_node.value == end:
                success = True
                break

            for edge in self._graph.out_edges(expand_node.value):
                if edge.dst_node in self._closed:
                    continue

                ctx = SearchContext(start, end, expand_node, edge)
                g_cost = self._g_function(ctx)
                neighbor = self._open.find(
                    lambda item, dst=edge.dst_node: item.value == dst
                )
                if trace:
                    logger.debug(
                        "Evaluating %s -> %s, got %s%s",
                        edge.src_node,
                        edge.dst_node,
                        g_cost,
                        f" versus {neighbor.g_cost}" if neighbor is not None else "",
                    )

                if neighbor is None or g_cost < neighbor.g_cost:
                    is_new = neighbor is None
                    if is_new:
                        neighbor = SearchNode(edge.dst_node, expand_node)
                    neighbor.g_cost = g_cost
                    neighbor.h_cost = self._h_function(ctx)
                    neighbor.parent = expand_node

                    if is_new:
                        self._enqueue(neighbor)
                    else:
                        self._open.update(neighbor)

        if not success:
            logger.debug("No path from %s to %s", start, end)
            return None

        logger.debug(
            "Found path from %s to %s with cost %s after %d expansions",
            start,
            end,
            expand_node.g_cost,
            len(self._closed),
        )
        return expand_node

    def _reset(self) -> None:
        capacity = TRAVERSAL_CONFIG.capacity_for(self._graph.node_count)
        if capacity > self._open.capacity:
            logger.debug(
                "Graph grew to %d nodes; resizing open queue from %d",
                self._graph.node_count,
                self._open.capacity,
            )
            self._open = IndexedPriorityQueue(capacity, self._open.ascending)
        else:
            self._open.clear()
        self._closed.clear()

    def _enqueue(self, node: SearchNode) -> None:
        if not self._open.try_enqueue(node):
            raise RuntimeError(
                f"Open queue is full ({self._open.capacity} slots) while adding "
                f"node '{node.value}'."
            )


def shortest_path(
    graph: DirectedGraph,
    src_node: NodeID,
    dst_node: NodeID,
    heuristic: Optional[Heuristic] = None,
    ascending: Optional[bool] = None,
) -> Optional[List[NodeID]]:
    """
    Find a minimum-weight path when edge data holds numeric weights.

    Without a heuristic this is uniform-cost search (Dijkstra); with an
    admissible, consistent heuristic it is A*.

    Args:
        graph: The graph to search.
        src_node: The start node.
        dst_node: The end node.
        heuristic: Optional callable (node, goal) -> estimated remaining cost.
        ascending: Expansion order; defaults to `TRAVERSAL_CONFIG.ascending`.

    Returns:
        The list of nodes from src_node to dst_node, or None if unreachable.

    Raises:
        ValueError: If src_node or dst_node is None.
        NodeNotFoundError: If src_node or dst_node is not in the graph.
    """
    traversal = GraphTraversal(
        graph,
        ascending=ascending,
        g_function=edge_data_cost,
        h_function=heuristic_from(heuristic),
    )
    return traversal.find_path(src_node, dst_node)
