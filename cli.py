#!/usr/bin/env python3
"""Command-line interface for the graph poet."""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))


def _load_app_config(config_path):
    """Load config.json if present, otherwise fall back to defaults."""
    from graph_poet.config import Config, load_config

    if config_path is None and not Path("config.json").exists():
        return Config()
    try:
        return load_config(config_path or "config.json")
    except FileNotFoundError:
        print(f"Error: Config file not found: {config_path}")
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


def _setup_logging(args, app_config):
    from graph_poet.utils.logging import setup_logging

    try:
        setup_logging(args.log_level or app_config.log_level, app_config.log_json)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


def _build_poet(args, app_config):
    from graph_poet.poet import CorpusUnavailableError, GraphPoet

    if args.tie_break:
        app_config.generation.tie_break = args.tie_break
    try:
        return GraphPoet.from_config(app_config, args.corpus)
    except CorpusUnavailableError as e:
        print(f"Error: {e}")
        sys.exit(1)


def cmd_poem(args):
    """Insert bridge words into the input text."""
    app_config = _load_app_config(args.config)
    _setup_logging(args, app_config)
    poet = _build_poet(args, app_config)

    if args.text == ["-"]:
        for line in sys.stdin:
            print(poet.poem(line))
    else:
        print(poet.poem(" ".join(args.text)))


def cmd_stats(args):
    """Show statistics for a corpus."""
    app_config = _load_app_config(args.config)
    _setup_logging(args, app_config)
    poet = _build_poet(args, app_config)

    stats = poet.stats
    print(f"Corpus: {args.corpus}")
    print(f"  Lines:        {stats.lines_read}")
    print(f"  Tokens:       {stats.tokens_read}")
    print(f"  Adjacencies:  {stats.adjacencies}")
    print(f"  Words:        {stats.vertex_count}")
    print(f"  Edges:        {stats.edge_count}")


def build_parser():
    from graph_poet.poet import TIE_BREAK_POLICIES

    parser = argparse.ArgumentParser(
        description="Graph Poet - Insert bridge words learned from a corpus"
    )
    parser.add_argument(
        "--config",
        help="Path to config file (default: config.json if present)"
    )
    parser.add_argument(
        "--log-level",
        help="Log level (default: from config, INFO)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Poem command
    poem_parser = subparsers.add_parser(
        "poem",
        help="Generate a poem from input text"
    )
    poem_parser.add_argument(
        "--corpus", "-c",
        required=True,
        help="Corpus text file used to build the affinity graph"
    )
    poem_parser.add_argument(
        "--tie-break",
        choices=TIE_BREAK_POLICIES,
        help="How to choose between equally weighted bridge words"
    )
    poem_parser.add_argument(
        "text",
        nargs="+",
        help="Input text, or '-' to read lines from stdin"
    )
    poem_parser.set_defaults(func=cmd_poem)

    # Stats command
    stats_parser = subparsers.add_parser(
        "stats",
        help="Show affinity graph statistics for a corpus"
    )
    stats_parser.add_argument(
        "--corpus", "-c",
        required=True,
        help="Corpus text file"
    )
    stats_parser.set_defaults(func=cmd_stats, tie_break=None)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
