"""Graph poet: bridge-word poetry from a word affinity graph."""

from .graph import WeightedDirectedGraph
from .poet import GraphPoet, CorpusUnavailableError, PoetError

__version__ = "0.1.0"

__all__ = [
    "WeightedDirectedGraph",
    "GraphPoet",
    "CorpusUnavailableError",
    "PoetError",
]
