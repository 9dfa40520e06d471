"""Word-count tiers and the closed-form node budget.

The tier boundaries and multipliers below decide every downstream visual
outcome, so they are validated at import and never computed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from .errors import ConfigurationError
from .logging import get_logger
from .models import ScalingStrategy, ScalingTier

LOGGER = get_logger(__name__)

MIN_NODES = 8
MAX_NODES = 700
MIN_PARTICLES = 500
MAX_PARTICLES = 35000


@dataclass(frozen=True)
class TierSpec:
    tier: ScalingTier
    min_words: int
    max_words: int
    multiplier: float
    particle_multiplier: float

    def contains(self, word_count: int) -> bool:
        return self.min_words <= word_count <= self.max_words


TIER_TABLE: Tuple[TierSpec, ...] = (
    TierSpec(ScalingTier.MICRO_BOOST, 1, 3, 3.0, 1.2),
    TierSpec(ScalingTier.MICRO_ENHANCE, 4, 8, 2.2, 1.1),
    TierSpec(ScalingTier.MICRO_STANDARD, 9, 15, 1.8, 1.0),
    TierSpec(ScalingTier.SMALL_PLUS, 16, 30, 1.5, 1.0),
    TierSpec(ScalingTier.SMALL_STANDARD, 31, 60, 1.2, 1.0),
    TierSpec(ScalingTier.SMALL_COMPRESS, 61, 100, 1.0, 0.95),
    TierSpec(ScalingTier.MEDIUM_STANDARD, 101, 200, 0.95, 0.9),
    TierSpec(ScalingTier.MEDIUM_COMPRESS, 201, 350, 0.85, 0.85),
    TierSpec(ScalingTier.MEDIUM_MAX, 351, 500, 0.75, 0.8),
    TierSpec(ScalingTier.LARGE_STANDARD, 501, 800, 0.7, 0.75),
    TierSpec(ScalingTier.LARGE_COMPRESS, 801, 1200, 0.6, 0.7),
    TierSpec(ScalingTier.LARGE_HEAVY, 1201, 2000, 0.5, 0.65),
    TierSpec(ScalingTier.MASSIVE_STANDARD, 2001, 3500, 0.45, 0.6),
    TierSpec(ScalingTier.MASSIVE_COMPRESS, 3501, 5000, 0.4, 0.55),
    TierSpec(ScalingTier.MASSIVE_MAX, 5001, 7000, 0.35, 0.5),
    TierSpec(ScalingTier.EPIC_STANDARD, 7001, 10000, 0.3, 0.45),
    TierSpec(ScalingTier.EPIC_MAXIMUM, 10001, 12500, 0.25, 0.4),
)

# (upper node bound, particles per node); anything larger gets the fallback
PARTICLES_PER_NODE: Tuple[Tuple[int, int], ...] = ((100, 75), (300, 60), (500, 50))
FALLBACK_PARTICLES_PER_NODE = 40


def validate_tier_table(table: Sequence[TierSpec]) -> None:
    """Raise :class:`ConfigurationError` unless ``table`` is well formed."""
    if [spec.tier for spec in table] != list(ScalingTier):
        raise ConfigurationError("Tier table must list every scaling tier exactly once, in order")
    previous_max = 0
    for spec in table:
        if spec.min_words != previous_max + 1 or spec.max_words < spec.min_words:
            msg = f"Tier {spec.tier.value} range {spec.min_words}-{spec.max_words} is not contiguous"
            raise ConfigurationError(msg)
        if not 0.25 <= spec.multiplier <= 3.0:
            msg = f"Tier {spec.tier.value} multiplier {spec.multiplier} outside [0.25, 3.0]"
            raise ConfigurationError(msg)
        if not 0.4 <= spec.particle_multiplier <= 1.2:
            msg = f"Tier {spec.tier.value} particle multiplier {spec.particle_multiplier} outside [0.4, 1.2]"
            raise ConfigurationError(msg)
        previous_max = spec.max_words


validate_tier_table(TIER_TABLE)

TIERS_BY_NAME: Dict[ScalingTier, TierSpec] = {spec.tier: spec for spec in TIER_TABLE}


def select_tier(word_count: int) -> TierSpec:
    """Return the first tier containing ``word_count``.

    Counts below the table fall back to the lowest tier; counts above it use
    the last, lowest-multiplier tier.
    """
    for spec in TIER_TABLE:
        if spec.contains(word_count):
            return spec
    if word_count > TIER_TABLE[-1].max_words:
        return TIER_TABLE[-1]
    return TIER_TABLE[0]


def raw_node_count(word_count: int, complexity: float, emotion_intensity: float, multiplier: float) -> float:
    """Node count before clamping: ``log2(W+1)·8 · (1+1.5c) · (0.5+1.5e) · m``."""
    complexity = max(0.0, min(1.0, complexity))
    emotion_intensity = max(0.0, min(1.0, emotion_intensity))
    base = math.log2(max(0, word_count) + 1) * 8
    complexity_bonus = 1 + complexity * 1.5
    emotional_bonus = 0.5 + emotion_intensity * 1.5
    return base * complexity_bonus * emotional_bonus * multiplier


def node_count(word_count: int, complexity: float, emotion_intensity: float, multiplier: float) -> int:
    raw = raw_node_count(word_count, complexity, emotion_intensity, multiplier)
    return int(math.floor(max(MIN_NODES, min(MAX_NODES, raw))))


def particle_count(nodes: int, tier: ScalingTier) -> int:
    per_node = FALLBACK_PARTICLES_PER_NODE
    for upper, value in PARTICLES_PER_NODE:
        if nodes <= upper:
            per_node = value
            break
    budget = math.floor(nodes * per_node * TIERS_BY_NAME[tier].particle_multiplier)
    return int(min(MAX_PARTICLES, max(MIN_PARTICLES, budget)))


def compression_level(word_count: int, nodes: int) -> float:
    """How condensed the output is relative to the input, in ``[0, 1]``."""
    if word_count <= 50:
        return max(0.0, (50 - nodes) / 50)
    ideal = min(100.0, word_count * 0.5)
    return max(0.0, min(1.0, 1 - nodes / ideal))


class ScalingResolver:
    """Resolve a :class:`ScalingStrategy` from word count, complexity and emotion."""

    def resolve(self, word_count: int, complexity: float, emotion_intensity: float) -> ScalingStrategy:
        spec = select_tier(word_count)
        nodes = node_count(word_count, complexity, emotion_intensity, spec.multiplier)
        LOGGER.debug(
            "Node calculation: %d words -> %d nodes (tier=%s, multiplier=%.2f, complexity=%.2f, intensity=%.2f)",
            word_count,
            nodes,
            spec.tier.value,
            spec.multiplier,
            complexity,
            emotion_intensity,
        )
        return ScalingStrategy(
            tier=spec.tier,
            multiplier=spec.multiplier,
            node_count=nodes,
            particle_count=particle_count(nodes, spec.tier),
            compression_level=compression_level(word_count, nodes),
        )


__all__ = [
    "MAX_NODES",
    "MAX_PARTICLES",
    "MIN_NODES",
    "MIN_PARTICLES",
    "ScalingResolver",
    "TIER_TABLE",
    "TierSpec",
    "compression_level",
    "node_count",
    "particle_count",
    "raw_node_count",
    "select_tier",
    "validate_tier_table",
]
