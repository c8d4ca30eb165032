"""Text processing utilities for corpus and input tokenization."""

from typing import List

from nltk.tokenize import WhitespaceTokenizer

_tokenizer = WhitespaceTokenizer()


def split_words(text: str) -> List[str]:
    """Split text on runs of whitespace.

    Empty tokens are discarded and punctuation stays attached to its word,
    so "system." and "system" are different tokens.

    Args:
        text: A line of text.

    Returns:
        Tokens in their original casing.
    """
    if not text:
        return []
    return _tokenizer.tokenize(text)


def normalize_word(word: str) -> str:
    """Case-fold a token into a vertex label."""
    return word.lower()
