"""Tokenisers shared by the analysis stages."""

from __future__ import annotations

import re
from typing import List

_NON_WORD_RE = re.compile(r"[^\w\s]")
_SENTENCE_BREAK_RE = re.compile(r"[.!?]+")


def split_words(text: str) -> List[str]:
    """Split raw text on whitespace, keeping punctuation attached."""
    if not text:
        return []
    return text.split()


def simple_tokenize(text: str) -> List[str]:
    """Lower-case ``text``, blank out punctuation and split on whitespace.

    Symbols outside ``\\w`` (emoji, dashes, quotes) become separators, so
    unusual code points never raise and never produce empty tokens.
    """
    if not text:
        return []
    return _NON_WORD_RE.sub(" ", text.lower()).split()


def split_sentences(text: str) -> List[str]:
    """Split on runs of terminal punctuation, dropping empty fragments."""
    pieces = (piece.strip() for piece in _SENTENCE_BREAK_RE.split(text))
    return [piece for piece in pieces if piece]


def count_occurrences(haystack: str, needle: str) -> int:
    """Count non-overlapping occurrences of ``needle`` in ``haystack``."""
    if not needle:
        return 0
    return haystack.count(needle)
