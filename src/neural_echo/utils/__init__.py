"""Utility helpers shared across the Neural Echo package."""

from .io import load_yaml_or_json, read_text, save_json
from .random import deterministic_hash, ensure_rng
from .text import count_occurrences, simple_tokenize, split_sentences, split_words

__all__ = [
    "count_occurrences",
    "deterministic_hash",
    "ensure_rng",
    "load_yaml_or_json",
    "read_text",
    "save_json",
    "simple_tokenize",
    "split_sentences",
    "split_words",
]
