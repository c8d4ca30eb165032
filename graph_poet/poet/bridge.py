"""Bridge-word search over an affinity graph.

A bridge word ``c`` for the pair ``(w1, w2)`` is a vertex with edges
``w1 -> c`` and ``c -> w2``. The best bridge maximizes the sum of the two
edge weights.

Ties are resolved by visiting candidates in a fixed order and keeping the
first candidate that reaches the maximum:

- ``first_seen``: the order in which each ``w1 -> c`` adjacency first
  appeared in the corpus.
- ``alphabetical``: lexicographic order of the candidate words.
"""

from typing import Iterable, Optional

from ..graph import WeightedDirectedGraph
from ..utils.logging import get_logger

logger = get_logger(__name__)

FIRST_SEEN = "first_seen"
ALPHABETICAL = "alphabetical"
TIE_BREAK_POLICIES = (FIRST_SEEN, ALPHABETICAL)


def validate_tie_break(tie_break: str) -> str:
    """Return tie_break unchanged if it names a known policy."""
    if tie_break not in TIE_BREAK_POLICIES:
        raise ValueError(
            f"Unknown tie-break policy: {tie_break!r} "
            f"(expected one of {', '.join(TIE_BREAK_POLICIES)})"
        )
    return tie_break


def _candidate_order(candidates: Iterable[str], tie_break: str) -> Iterable[str]:
    if tie_break == ALPHABETICAL:
        return sorted(candidates)
    return candidates


def find_bridge_word(
    graph: WeightedDirectedGraph,
    w1: str,
    w2: str,
    tie_break: str = FIRST_SEEN,
) -> Optional[str]:
    """Find the highest-weight bridge word between two vertices.

    Args:
        graph: Affinity graph.
        w1: First word, already lower-cased.
        w2: Second word, already lower-cased.
        tie_break: Candidate ordering policy used to resolve ties.

    Returns:
        The bridge word, or None if either word is unknown or no
        two-edge path from w1 to w2 exists.
    """
    validate_tie_break(tie_break)
    if w1 not in graph or w2 not in graph:
        return None

    targets_from_w1 = graph.outgoing(w1)
    sources_to_w2 = graph.incoming(w2)

    best = None
    best_weight = 0
    for candidate in _candidate_order(targets_from_w1, tie_break):
        if candidate not in sources_to_w2:
            continue
        weight = targets_from_w1[candidate] + sources_to_w2[candidate]
        if weight > best_weight:
            best = candidate
            best_weight = weight

    if best is not None:
        logger.debug(f"Bridge '{w1}' -> '{best}' -> '{w2}' (weight {best_weight})")
    return best
