"""Randomness helpers for reproducible structure generation."""

from __future__ import annotations

import hashlib
from typing import Union

import numpy as np

SeedLike = Union[int, np.random.Generator, None]


def deterministic_hash(value: str) -> str:
    """Return a stable hex digest for ``value``, used as a cache key."""
    return hashlib.sha256(value.encode("utf-8", errors="surrogatepass")).hexdigest()


def ensure_rng(seed: SeedLike = None) -> np.random.Generator:
    """Return ``seed`` if it is already a generator, else build one from it."""
    if isinstance(seed, np.random.Generator):
        return seed
    if seed is None:
        return np.random.default_rng()
    return np.random.default_rng(seed)


def uniform(rng: np.random.Generator, low: float, high: float) -> float:
    """Draw one value from ``[low, high)`` as a plain float."""
    return float(rng.uniform(low, high))
