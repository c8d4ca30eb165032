"""Affinity-graph poetry generation.

- GraphPoet: builds the affinity graph from a corpus and writes poems
- build_affinity_graph: word adjacency counting over corpus lines
- find_bridge_word: highest-weight two-edge path search
"""

from .corpus import (
    PoetError,
    CorpusUnavailableError,
    IngestionStats,
    read_corpus_lines,
    build_affinity_graph,
)
from .bridge import (
    FIRST_SEEN,
    ALPHABETICAL,
    TIE_BREAK_POLICIES,
    find_bridge_word,
    validate_tie_break,
)
from .graph_poet import GraphPoet

__all__ = [
    # Corpus
    "PoetError",
    "CorpusUnavailableError",
    "IngestionStats",
    "read_corpus_lines",
    "build_affinity_graph",
    # Bridge search
    "FIRST_SEEN",
    "ALPHABETICAL",
    "TIE_BREAK_POLICIES",
    "find_bridge_word",
    "validate_tie_break",
    # Poet
    "GraphPoet",
]
