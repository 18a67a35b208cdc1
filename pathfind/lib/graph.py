from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import (
    Any,
    Deque,
    Dict,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from pathfind.exceptions import DuplicateEdgeError, DuplicateNodeError, NodeNotFoundError

NodeID = Hashable
EdgeData = TypeVar("EdgeData")
EdgeKey = Tuple[NodeID, NodeID]


def _require_node(node: Any, role: str = "Node") -> None:
    if node is None:
        raise ValueError(f"{role} must not be None.")


@dataclass(frozen=True)
class GraphEdge(Generic[EdgeData]):
    """
    A single directed edge and the data stored on it.

    Attributes:
        src_node (NodeID): The source node of the edge.
        dst_node (NodeID): The destination node of the edge.
        data (EdgeData): The data stored on the edge, typically a numeric weight.
    """

    src_node: NodeID
    dst_node: NodeID
    data: EdgeData

    def __post_init__(self) -> None:
        _require_node(self.src_node, "Source node")
        _require_node(self.dst_node, "Target node")
        if self.src_node == self.dst_node:
            raise ValueError(f"Self-loop on node '{self.src_node}' is not allowed.")


class DirectedGraph(Generic[EdgeData]):
    """
    A directed graph with at most one edge per ordered pair of nodes.

    This class enforces:
      - No duplicate nodes (raises DuplicateNodeError).
      - No duplicate edges for the same (src, dst) pair (raises DuplicateEdgeError).
      - No self-loops (raises ValueError).
      - None is never a valid node (raises ValueError).

    Nodes and edges are append-only. Adding an edge creates missing endpoints.
    Outgoing edges of a node are iterated most-recently-added first.

    The adjacency structure is a dict of deques:
        {src_node: deque([dst_node, ...])}
    Edge data is indexed by the ordered pair:
        {(src_node, dst_node): data}
    """

    def __init__(self) -> None:
        self._adjacency: Dict[NodeID, Deque[NodeID]] = {}
        self._edges: Dict[EdgeKey, EdgeData] = {}

    def __contains__(self, node: NodeID) -> bool:
        """Enables expressions like "node" in graph."""
        return self.contains_node(node)

    def __iter__(self) -> Iterator[NodeID]:
        return self.nodes()

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"DirectedGraph(nodes={self.node_count}, edges={self.edge_count})"

    @property
    def node_count(self) -> int:
        """The number of nodes stored in the graph."""
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        """The number of edges stored in the graph."""
        return len(self._edges)

    #
    # Queries
    #
    def contains_node(self, node: NodeID) -> bool:
        """
        Check whether a node exists in the graph.

        Raises:
            ValueError: If node is None.
        """
        _require_node(node)
        return node in self._adjacency

    def contains_edge(self, src_node: NodeID, dst_node: NodeID) -> bool:
        """
        Check whether the edge (src_node, dst_node) exists in the graph.

        Returns False if either endpoint is absent.

        Raises:
            ValueError: If either node is None.
        """
        return (
            self.contains_node(src_node)
            and self.contains_node(dst_node)
            and (src_node, dst_node) in self._edges
        )

    def try_get_edge(
        self, src_node: NodeID, dst_node: NodeID, default: Optional[EdgeData] = None
    ) -> Optional[EdgeData]:
        """
        Look up the data stored on the edge (src_node, dst_node).

        Missing endpoints are not an error; they simply yield `default`.

        Args:
            src_node: The source node of the edge.
            dst_node: The destination node of the edge.
            default: Value returned when the edge does not exist.

        Returns:
            The stored edge data, or `default` if there is no such edge.

        Raises:
            ValueError: If either node is None.
        """
        _require_node(src_node, "Source node")
        _require_node(dst_node, "Target node")
        return self._edges.get((src_node, dst_node), default)

    #
    # Construction
    #
    def add_node(self, node: NodeID) -> None:
        """
        Add a single node, disallowing duplicates.

        Raises:
            ValueError: If node is None.
            DuplicateNodeError: If the node already exists in the graph.
        """
        _require_node(node)
        if node in self._adjacency:
            raise DuplicateNodeError(node)
        self._adjacency[node] = deque()

    def add_edge(self, src_node: NodeID, dst_node: NodeID, data: EdgeData) -> None:
        """
        Add a directed edge from src_node to dst_node.

        Missing endpoints are created, source first. The destination is placed
        at the head of the source's adjacency, so it is yielded first by
        `out_edges()`.

        Args:
            src_node: The source node.
            dst_node: The target node.
            data: The data to store on the edge.

        Raises:
            ValueError: If either node is None, or if src_node equals dst_node.
            DuplicateEdgeError: If an edge from src_node to dst_node already exists.
        """
        _require_node(src_node, "Source node")
        _require_node(dst_node, "Target node")
        if src_node == dst_node:
            raise ValueError(f"Self-loop on node '{src_node}' is not allowed.")
        if (src_node, dst_node) in self._edges:
            raise DuplicateEdgeError(src_node, dst_node)

        if src_node not in self._adjacency:
            self.add_node(src_node)
        if dst_node not in self._adjacency:
            self.add_node(dst_node)

        self._edges[(src_node, dst_node)] = data
        self._adjacency[src_node].appendleft(dst_node)

    def add_graph_edge(self, edge: GraphEdge[EdgeData]) -> None:
        """Add the edge described by a GraphEdge."""
        self.add_edge(edge.src_node, edge.dst_node, edge.data)

    def add_edges_from(
        self,
        edges: Iterable[
            Union[GraphEdge[EdgeData], Tuple[NodeID, NodeID, EdgeData]]
        ],
    ) -> None:
        """
        Add several edges in order.

        Each item is either a GraphEdge or a (src_node, dst_node, data) tuple.
        Insertion stops at the first failing edge; edges before it stay added.
        """
        for edge in edges:
            if isinstance(edge, GraphEdge):
                self.add_graph_edge(edge)
            else:
                src_node, dst_node, data = edge
                self.add_edge(src_node, dst_node, data)

    #
    # Iteration
    #
    def nodes(self) -> Iterator[NodeID]:
        """Iterate over all nodes in order of first appearance."""
        for node in self._adjacency:
            yield node

    def out_edges(self, src_node: NodeID) -> Iterator[GraphEdge[EdgeData]]:
        """
        Iterate over the edges leaving src_node, most recently added first.

        Validation happens on the call, not on first iteration.

        Raises:
            ValueError: If src_node is None.
            NodeNotFoundError: If src_node is not in the graph.
        """
        if not self.contains_node(src_node):
            raise NodeNotFoundError(src_node)
        return self._iter_out_edges(src_node)

    def _iter_out_edges(self, src_node: NodeID) -> Iterator[GraphEdge[EdgeData]]:
        for dst_node in self._adjacency[src_node]:
            yield GraphEdge(src_node, dst_node, self._edges[(src_node, dst_node)])

    def edges(self) -> Iterator[GraphEdge[EdgeData]]:
        """Iterate over all edges in insertion order."""
        for (src_node, dst_node), data in self._edges.items():
            yield GraphEdge(src_node, dst_node, data)
