"""Corpus ingestion: reading corpus text and building the affinity graph.

The affinity graph has one vertex per lower-cased word and an edge
``a -> b`` whose weight counts how often ``b`` directly follows ``a`` on
the same corpus line. Adjacency never crosses a line break.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Tuple, Union

from ..graph import WeightedDirectedGraph
from ..utils.logging import get_logger
from ..utils.text import normalize_word, split_words

logger = get_logger(__name__)


class PoetError(Exception):
    """Base exception for graph poet errors."""
    pass


class CorpusUnavailableError(PoetError, OSError):
    """Raised when the corpus cannot be opened or read."""
    pass


@dataclass
class IngestionStats:
    """Statistics from building an affinity graph."""
    lines_read: int = 0
    tokens_read: int = 0
    adjacencies: int = 0
    vertex_count: int = 0
    edge_count: int = 0

    def to_dict(self) -> dict:
        return {
            "lines_read": self.lines_read,
            "tokens_read": self.tokens_read,
            "adjacencies": self.adjacencies,
            "vertex_count": self.vertex_count,
            "edge_count": self.edge_count,
        }


def read_corpus_lines(
    path: Union[str, Path],
    encoding: str = "utf-8",
) -> Iterator[str]:
    """Yield the lines of a corpus file.

    Args:
        path: Path to a text file.
        encoding: File encoding.

    Yields:
        Lines without their trailing newline.

    Raises:
        CorpusUnavailableError: If the file cannot be opened or decoded.
    """
    corpus_path = Path(path)
    try:
        with open(corpus_path, encoding=encoding) as f:
            for line in f:
                yield line.rstrip("\r\n")
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusUnavailableError(
            f"Could not read corpus {corpus_path}: {e}"
        ) from e


def build_affinity_graph(
    lines: Iterable[str],
) -> Tuple[WeightedDirectedGraph, IngestionStats]:
    """Build the word adjacency graph of a corpus.

    Args:
        lines: Corpus lines, e.g. an open text file or a list of strings.

    Returns:
        Tuple of (graph, stats).

    Raises:
        CorpusUnavailableError: If reading the lines fails with an I/O or
            decoding error.
        TypeError: If lines is a single string instead of a sequence of lines.
    """
    if isinstance(lines, str):
        raise TypeError("lines must be an iterable of lines, not a single string")

    graph = WeightedDirectedGraph()
    stats = IngestionStats()

    try:
        for line in lines:
            stats.lines_read += 1
            previous = None
            for token in split_words(line):
                word = normalize_word(token)
                stats.tokens_read += 1
                graph.add_vertex(word)
                if previous is not None:
                    graph.increment_edge(previous, word)
                    stats.adjacencies += 1
                previous = word
    except CorpusUnavailableError:
        raise
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusUnavailableError(f"Could not read corpus: {e}") from e

    stats.vertex_count = len(graph)
    stats.edge_count = graph.edge_count
    logger.info(
        f"Built affinity graph from {stats.lines_read} lines: "
        f"{stats.vertex_count} words, {stats.edge_count} edges"
    )
    return graph, stats
