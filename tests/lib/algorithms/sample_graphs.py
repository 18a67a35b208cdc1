import math
from dataclasses import dataclass, field

import pytest

from pathfind.lib.graph import DirectedGraph


@dataclass(frozen=True)
class MapNode:
    """A named map location; identity is the name only."""

    name: str
    x: float = field(default=0.0, compare=False)
    y: float = field(default=0.0, compare=False)

    def distance_to(self, other: "MapNode") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def __str__(self) -> str:
        return self.name


def euclidean(node: MapNode, goal: MapNode) -> float:
    return node.distance_to(goal)


@pytest.fixture
def map_nodes():
    return {
        "A": MapNode("A", 1.0, 5.0),
        "B": MapNode("B", 4.0, 4.0),
        "C": MapNode("C", 2.0, 2.0),
        "D": MapNode("D", 5.0, 2.0),
        "E": MapNode("E", 1.0, 1.0),
        "F": MapNode("F", 6.0, 5.0),
    }


@pytest.fixture
def map1(map_nodes):
    #            [3.5]
    #   A ───────────────► B ◄─────── F
    #   │ \                │   [2.5]
    #   │  \ [4]           │ [2.5]
    #   │   ▼     [3]      ▼
    #   │    C ──────────► D
    #   │[6] │
    #   │    │ [1.5]
    #   ▼    ▼
    #   E ◄──┘
    n = map_nodes
    g = DirectedGraph()
    g.add_edge(n["A"], n["B"], 3.5)
    g.add_edge(n["A"], n["C"], 4.0)
    g.add_edge(n["B"], n["D"], 2.5)
    g.add_edge(n["C"], n["D"], 3.0)
    g.add_edge(n["A"], n["E"], 6.0)
    g.add_edge(n["C"], n["E"], 1.5)
    g.add_edge(n["F"], n["B"], 2.5)
    return g


@pytest.fixture
def line1():
    #      [1]      [1]      [1]
    #  A ──────► B ──────► C ──────► D
    #
    g = DirectedGraph()
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 1)
    g.add_edge("C", "D", 1)
    return g


@pytest.fixture
def square1():
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [2]        [2]  │
    #   └────────►D─────────┘
    #
    g = DirectedGraph()
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 1)
    g.add_edge("A", "D", 2)
    g.add_edge("D", "C", 2)
    return g


@pytest.fixture
def many_hops1():
    # The direct edge is cheaper per hop count but more expensive overall.
    #
    #        [1]      [1]      [1]      [1]
    #   A ──────► B ──────► C ──────► D ──────► E
    #   │                                       ▲
    #   └───────────────────────────────────────┘
    #                     [10]
    g = DirectedGraph()
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 1)
    g.add_edge("C", "D", 1)
    g.add_edge("D", "E", 1)
    g.add_edge("A", "E", 10)
    return g


@pytest.fixture
def decrease_key1():
    # D is first discovered from A at cost 10 and later improved via C
    # while still in the open set.
    #
    #   A ──[1]──► B ──[1]──► C ──[1]──► D ──[1]──► E
    #   │                                ▲
    #   └───────────────[10]─────────────┘
    g = DirectedGraph()
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 1)
    g.add_edge("C", "D", 1)
    g.add_edge("D", "E", 1)
    g.add_edge("A", "D", 10)
    return g
