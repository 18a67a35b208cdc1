"""Configuration classes for pathfind components."""

from dataclasses import dataclass


@dataclass
class TraversalConfig:
    """Defaults applied to traversal engines that are not given explicit values."""

    # Pop lowest f-cost first; False pops the highest first
    ascending: bool = True

    # Emit one DEBUG record per expansion and per evaluated edge
    trace: bool = False

    # Smallest open-set capacity an engine allocates
    min_capacity: int = 0

    def capacity_for(self, node_count: int) -> int:
        """Return the open-set capacity to allocate for a graph of `node_count` nodes."""
        return max(node_count, self.min_capacity)


# Global configuration instance
TRAVERSAL_CONFIG = TraversalConfig()
