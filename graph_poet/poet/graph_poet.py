"""Graph-based poetry generator.

The poet reads a corpus into an affinity graph (see ``corpus.py``) and then
turns input lines into poems by inserting, between every pair of adjacent
input words, the bridge word with the strongest two-edge path from the
first word to the second. Pairs without a bridge are left as they are.

Example:
    corpus:  "This is a test of the mugar omni theater sound system."
    input:   "Test the system."
    poem:    "Test of the system."
"""

from pathlib import Path
from typing import TYPE_CHECKING, Dict, FrozenSet, Iterable, List, Optional, Union

from ..utils.logging import get_logger
from ..utils.text import normalize_word, split_words
from .bridge import FIRST_SEEN, find_bridge_word, validate_tie_break
from .corpus import IngestionStats, build_affinity_graph, read_corpus_lines

if TYPE_CHECKING:
    from ..config import Config

logger = get_logger(__name__)


class GraphPoet:
    """Poetry generator backed by a word affinity graph.

    The graph is built once in the constructor and only read afterwards,
    so a single instance can serve concurrent ``poem`` calls. Accessors
    return copies; the graph itself is never handed out.
    """

    def __init__(self, lines: Iterable[str], tie_break: str = FIRST_SEEN):
        """Build a poet from corpus lines.

        Args:
            lines: Corpus text, one line per item.
            tie_break: Policy for choosing between equally weighted bridges.

        Raises:
            CorpusUnavailableError: If reading the lines fails.
            TypeError: If lines is a single string.
            ValueError: If the tie-break policy is unknown.
        """
        self.tie_break = validate_tie_break(tie_break)
        self._graph, self._stats = build_affinity_graph(lines)
        self._check_rep()

    @classmethod
    def from_file(
        cls,
        corpus_path: Union[str, Path],
        encoding: str = "utf-8",
        tie_break: str = FIRST_SEEN,
    ) -> "GraphPoet":
        """Build a poet from a corpus text file.

        Raises:
            CorpusUnavailableError: If the file cannot be found or read.
        """
        logger.info(f"Loading corpus from {corpus_path}")
        return cls(read_corpus_lines(corpus_path, encoding), tie_break=tie_break)

    @classmethod
    def from_config(cls, config: "Config", corpus_path: Union[str, Path]) -> "GraphPoet":
        """Build a poet using corpus and generation settings from config."""
        return cls.from_file(
            corpus_path,
            encoding=config.corpus.encoding,
            tie_break=config.generation.tie_break,
        )

    def _check_rep(self) -> None:
        for vertex in self._graph.vertices():
            assert vertex, "Graph contains an empty vertex"
            assert vertex == vertex.lower(), f"Vertex '{vertex}' is not lower-cased"
            for target, weight in self._graph.outgoing(vertex).items():
                assert weight > 0, f"Edge {vertex} -> {target} has weight {weight}"

    def poem(self, input_line: str) -> str:
        """Generate a poem from a line of text.

        Args:
            input_line: Text to extend with bridge words.

        Returns:
            The input words, in their original casing, separated by single
            spaces, with a lower-case bridge word inserted between each
            adjacent pair that has one.
        """
        words = split_words(input_line)
        if len(words) < 2:
            return " ".join(words)

        output: List[str] = []
        for current, following in zip(words, words[1:]):
            output.append(current)
            bridge = self.bridge_word(current, following)
            if bridge is not None:
                output.append(bridge)
        output.append(words[-1])
        return " ".join(output)

    def bridge_word(self, w1: str, w2: str) -> Optional[str]:
        """Bridge word between two words, compared case-insensitively."""
        return find_bridge_word(
            self._graph, normalize_word(w1), normalize_word(w2), self.tie_break
        )

    @property
    def vertices(self) -> FrozenSet[str]:
        return frozenset(self._graph.vertices())

    @property
    def stats(self) -> IngestionStats:
        """Statistics collected while reading the corpus."""
        return IngestionStats(**self._stats.to_dict())

    def edge_weight(self, source: str, target: str) -> int:
        return self._graph.edge_weight(normalize_word(source), normalize_word(target))

    def outgoing(self, word: str) -> Dict[str, int]:
        return self._graph.outgoing(normalize_word(word))

    def incoming(self, word: str) -> Dict[str, int]:
        return self._graph.incoming(normalize_word(word))

    def __repr__(self) -> str:
        return f"GraphPoet(graph={self._graph!r}, tie_break={self.tie_break!r})"
