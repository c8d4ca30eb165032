"""Graph data structures."""

from .weighted_graph import WeightedDirectedGraph

__all__ = [
    "WeightedDirectedGraph",
]
