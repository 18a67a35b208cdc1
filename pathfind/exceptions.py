"""Exceptions raised by graph construction and traversal."""

from __future__ import annotations

from typing import Hashable


class DuplicateNodeError(ValueError):
    """Raised when adding a node that is already in the graph."""

    def __init__(self, node: Hashable) -> None:
        super().__init__(f"Node '{node}' already exists in this graph.")
        self.node = node


class DuplicateEdgeError(ValueError):
    """Raised when adding a second edge for an ordered (src, dst) pair."""

    def __init__(self, src_node: Hashable, dst_node: Hashable) -> None:
        super().__init__(
            f"Edge from '{src_node}' to '{dst_node}' already exists in this graph."
        )
        self.src_node = src_node
        self.dst_node = dst_node


class NodeNotFoundError(KeyError, ValueError):
    """Raised when a node required by an operation is not in the graph."""

    def __init__(self, node: Hashable) -> None:
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"Node '{self.node}' is not in the graph."
