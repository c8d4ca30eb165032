"""Tests for GraphPoet."""

import pytest

from graph_poet.config import Config, CorpusConfig, GenerationConfig
from graph_poet.poet import ALPHABETICAL, CorpusUnavailableError, GraphPoet
from tests.test_helpers import fixture_path, write_corpus


class TestPoem:
    """Tests for poem generation from fixture corpora."""

    def test_basic_poem(self):
        """Test that a bridge word is inserted."""
        poet = GraphPoet.from_file(fixture_path("basic-corpus.txt"))
        assert poet.poem("Test the system.") == "Test of the system."

    def test_no_bridge_words(self):
        """Test that input without bridges is unchanged."""
        poet = GraphPoet.from_file(fixture_path("no-bridge-corpus.txt"))
        assert poet.poem("Hello world.") == "Hello world."
        assert poet.poem("Hello world") == "Hello world"

    def test_empty_input(self):
        """Test that empty input gives empty output."""
        poet = GraphPoet.from_file(fixture_path("empty.txt"))
        assert poet.poem("") == ""

    def test_blank_input(self):
        """Test that whitespace-only input gives empty output."""
        poet = GraphPoet.from_file(fixture_path("basic-corpus.txt"))
        assert poet.poem("   \t ") == ""

    def test_single_word(self):
        """Test that a single word is returned trimmed."""
        poet = GraphPoet.from_file(fixture_path("basic-corpus.txt"))
        assert poet.poem("  Test  ") == "Test"

    def test_case_insensitive_bridge(self):
        """Test that input words match corpus words case-insensitively."""
        poet = GraphPoet.from_file(fixture_path("case-insensitive-corpus.txt"))
        assert poet.poem("hello WORLD") == "hello hello WORLD"

    def test_punctuation_blocks_bridge(self):
        """Test that "world." does not match the corpus word "world"."""
        poet = GraphPoet.from_file(fixture_path("case-insensitive-corpus.txt"))
        assert poet.poem("hello WORLD.") == "hello WORLD."

    def test_special_characters(self):
        """Test that symbols are ordinary word characters."""
        poet = GraphPoet.from_file(fixture_path("special-char-corpus.txt"))
        assert poet.poem("A! C#") == "A! b@ C#"

    def test_bridge_in_middle(self):
        """Test bridges between several pairs of one input line."""
        poet = GraphPoet.from_file(fixture_path("middle-bridge-corpus.txt"))
        assert poet.poem("To strange") == "To explore strange"
        assert poet.poem("To seek new life") == "To seek out new life"

    def test_graph_from_file(self):
        """Test that edge weights from several lines combine."""
        poet = GraphPoet.from_file(fixture_path("seven-words.txt"))
        assert poet.poem("Seven words connected.") == "Seven unique words connected."

    def test_whitespace_collapsed(self):
        """Test that output words are separated by single spaces."""
        poet = GraphPoet.from_file(fixture_path("basic-corpus.txt"))
        assert poet.poem("  Test\t\tthe   system. ") == "Test of the system."

    def test_bridge_is_lower_case(self):
        """Test that bridge words are emitted in stored lower-case form."""
        poet = GraphPoet(["The Quick Fox"])
        assert poet.poem("THE FOX") == "THE quick FOX"

    def test_deterministic(self):
        """Test that the same input gives the same poem."""
        poet = GraphPoet(["a y b", "a x b", "b z c"])
        first = poet.poem("a b c")
        assert first == "a y b z c"
        assert all(poet.poem("a b c") == first for _ in range(10))

    def test_alphabetical_poet(self):
        """Test that the tie-break policy is applied to poems."""
        poet = GraphPoet(["a y b", "a x b"], tie_break=ALPHABETICAL)
        assert poet.poem("a b") == "a x b"

    def test_poem_does_not_mutate(self):
        """Test that generating poems leaves the graph unchanged."""
        poet = GraphPoet(["a b a b"])
        before = repr(poet)
        poet.poem("a a b b unknown")
        assert repr(poet) == before
        assert poet.edge_weight("a", "b") == 2


class TestConstruction:
    """Tests for building a poet."""

    def test_missing_corpus(self, tmp_path):
        """Test that a missing corpus file fails construction."""
        with pytest.raises(CorpusUnavailableError):
            GraphPoet.from_file(tmp_path / "nope.txt")

    def test_missing_corpus_is_os_error(self, tmp_path):
        """Test that construction failure can be caught as OSError."""
        with pytest.raises(OSError):
            GraphPoet.from_file(tmp_path / "nope.txt")

    def test_failing_line_source(self):
        """Test that errors from an iterable of lines are surfaced."""
        def lines():
            yield "some words"
            raise OSError("stream closed")

        with pytest.raises(CorpusUnavailableError):
            GraphPoet(lines())

    def test_undecodable_open_file(self, tmp_path):
        """Test that decoding errors from an open file fail construction."""
        path = tmp_path / "corpus.txt"
        path.write_bytes(b"ok\n\xff\xfe bad\n")
        with open(path, encoding="utf-8") as f:
            with pytest.raises(CorpusUnavailableError) as exc_info:
                GraphPoet(f)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_single_string_rejected(self):
        """Test that a bare string is not read character by character."""
        with pytest.raises(TypeError):
            GraphPoet("test of the")

    def test_unknown_tie_break(self):
        """Test that an unknown tie-break policy is rejected."""
        with pytest.raises(ValueError):
            GraphPoet(["a b"], tie_break="random")

    def test_from_config(self, tmp_path):
        """Test building with settings from a Config."""
        path = tmp_path / "corpus.txt"
        path.write_bytes("caf\xe9 au lait\n".encode("latin-1"))
        config = Config(
            corpus=CorpusConfig(encoding="latin-1"),
            generation=GenerationConfig(tie_break=ALPHABETICAL),
        )
        poet = GraphPoet.from_config(config, path)
        assert poet.tie_break == ALPHABETICAL
        assert poet.poem("caf\xe9 lait") == "caf\xe9 au lait"

    def test_empty_corpus(self):
        """Test that an empty corpus is valid and never bridges."""
        poet = GraphPoet([])
        assert poet.vertices == frozenset()
        assert poet.poem("any two words") == "any two words"


class TestReadOnlyViews:
    """Tests for the poet's read-only accessors."""

    def test_edge_weights(self):
        """Test edge weights of a repeated pair."""
        poet = GraphPoet(["a b a b"])
        assert poet.edge_weight("a", "b") == 2
        assert poet.edge_weight("B", "A") == 1
        assert poet.edge_weight("a", "a") == 0

    def test_case_insensitive_graph(self):
        """Test that mixed-case corpus words share a vertex."""
        poet = GraphPoet(["Hello HELLO hello world"])
        assert poet.vertices == frozenset({"hello", "world"})
        assert poet.outgoing("Hello") == {"hello": 2, "world": 1}
        assert poet.incoming("WORLD") == {"hello": 1}

    def test_vertices_immutable(self):
        """Test that vertices are returned as a frozenset."""
        poet = GraphPoet(["a b"])
        assert isinstance(poet.vertices, frozenset)

    def test_outgoing_copy(self):
        """Test that edge views do not expose the graph."""
        poet = GraphPoet(["a b"])
        poet.outgoing("a")["c"] = 10
        assert poet.outgoing("a") == {"b": 1}

    def test_bridge_word_case_insensitive(self):
        """Test the public bridge lookup."""
        poet = GraphPoet.from_file(fixture_path("basic-corpus.txt"))
        assert poet.bridge_word("TEST", "The") == "of"
        assert poet.bridge_word("test", "system") is None

    def test_stats(self, tmp_path):
        """Test ingestion statistics."""
        path = write_corpus(tmp_path, "a b a b\n\nc d\n")
        stats = GraphPoet.from_file(path).stats
        assert stats.lines_read == 3
        assert stats.tokens_read == 6
        assert stats.adjacencies == 4
        assert stats.vertex_count == 4
        assert stats.edge_count == 3

    def test_stats_copy(self):
        """Test that stats cannot be modified through the accessor."""
        poet = GraphPoet(["a b"])
        poet.stats.tokens_read = 100
        assert poet.stats.tokens_read == 2

    def test_repr(self):
        """Test the summary representation."""
        poet = GraphPoet(["a b a b"])
        assert repr(poet) == (
            "GraphPoet(graph=WeightedDirectedGraph(vertices=2, edges=2), "
            "tie_break='first_seen')"
        )
