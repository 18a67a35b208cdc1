from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional, Union

from pathfind.lib.graph import GraphEdge, NodeID

if TYPE_CHECKING:
    from pathfind.lib.algorithms.traversal import SearchNode

#: Represents numeric cost along a path (e.g. distance, latency, etc.).
Cost = Union[int, float]


@dataclass(frozen=True)
class SearchContext:
    """One edge evaluation step within a search.

    Attributes:
        start: The start node of the searched path.
        end: The end node of the searched path.
        expand_node: The search node currently being expanded, with its
            accumulated costs and parent chain.
        expand_edge: The outgoing edge of `expand_node` under consideration.
    """

    start: NodeID
    end: NodeID
    expand_node: SearchNode
    expand_edge: GraphEdge


#: Computes a cost from a search context. Used both for the tentative
#: cumulative cost (g) and for the heuristic estimate (h).
CostFunction = Callable[[SearchContext], Cost]

#: Estimates the remaining cost from a node to the goal node.
Heuristic = Callable[[NodeID, NodeID], Cost]


def zero_cost(ctx: SearchContext) -> Cost:
    """Constant-zero cost; the default for both g and h."""
    return 0


def edge_data_cost(ctx: SearchContext) -> Cost:
    """Cumulative cost when edge data holds the edge weight.

    Returns the expanded node's g-cost plus the weight of the edge being
    evaluated.
    """
    return ctx.expand_node.g_cost + ctx.expand_edge.data


def heuristic_from(heuristic: Optional[Heuristic]) -> CostFunction:
    """
    Adapt a node-to-goal estimate into an h-function.

    Args:
        heuristic: Callable taking (node, goal) and returning the estimated
            remaining cost. If None, the zero heuristic is used.

    Returns:
        A cost function evaluating `heuristic` on the edge's destination
        and the search end node.
    """
    if heuristic is None:
        return zero_cost

    def h_function(ctx: SearchContext) -> Cost:
        return heuristic(ctx.expand_edge.dst_node, ctx.end)

    return h_function
