"""Tests for `pathfind.config`."""

from pathfind.config import TRAVERSAL_CONFIG, TraversalConfig
from pathfind.lib.algorithms.traversal import GraphTraversal
from pathfind.lib.graph import DirectedGraph


def test_defaults() -> None:
    config = TraversalConfig()
    assert config.ascending is True
    assert config.trace is False
    assert config.min_capacity == 0


def test_capacity_for() -> None:
    assert TraversalConfig().capacity_for(6) == 6
    assert TraversalConfig().capacity_for(0) == 0
    config = TraversalConfig(min_capacity=16)
    assert config.capacity_for(6) == 16
    assert config.capacity_for(40) == 40


def test_engine_uses_min_capacity() -> None:
    """Global config drives the open-queue size of new engines."""
    graph = DirectedGraph()
    graph.add_edge("A", "B", 1)

    TRAVERSAL_CONFIG.min_capacity = 32
    engine = GraphTraversal(graph)
    assert engine.open_capacity == 32
    assert engine.find_path("A", "B") == ["A", "B"]
