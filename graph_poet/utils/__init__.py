"""Utility modules for the graph poet."""

from .logging import get_logger, setup_logging, JsonFormatter
from .text import split_words, normalize_word

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    "JsonFormatter",
    # Text
    "split_words",
    "normalize_word",
]
