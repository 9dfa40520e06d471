import math

import pytest

from neural_echo.errors import ConfigurationError
from neural_echo.models import ScalingTier
from neural_echo.scaling import (
    MAX_NODES,
    MAX_PARTICLES,
    MIN_NODES,
    MIN_PARTICLES,
    TIER_TABLE,
    ScalingResolver,
    TierSpec,
    compression_level,
    node_count,
    particle_count,
    raw_node_count,
    select_tier,
    validate_tier_table,
)


@pytest.fixture
def resolver() -> ScalingResolver:
    return ScalingResolver()


def test_tier_table_covers_one_to_12500() -> None:
    assert len(TIER_TABLE) == 17
    assert TIER_TABLE[0].min_words == 1
    assert TIER_TABLE[-1].max_words == 12500


@pytest.mark.parametrize(
    ("words", "tier", "multiplier"),
    [
        (1, ScalingTier.MICRO_BOOST, 3.0),
        (3, ScalingTier.MICRO_BOOST, 3.0),
        (4, ScalingTier.MICRO_ENHANCE, 2.2),
        (15, ScalingTier.MICRO_STANDARD, 1.8),
        (30, ScalingTier.SMALL_PLUS, 1.5),
        (60, ScalingTier.SMALL_STANDARD, 1.2),
        (100, ScalingTier.SMALL_COMPRESS, 1.0),
        (101, ScalingTier.MEDIUM_STANDARD, 0.95),
        (350, ScalingTier.MEDIUM_COMPRESS, 0.85),
        (500, ScalingTier.MEDIUM_MAX, 0.75),
        (800, ScalingTier.LARGE_STANDARD, 0.7),
        (1200, ScalingTier.LARGE_COMPRESS, 0.6),
        (2000, ScalingTier.LARGE_HEAVY, 0.5),
        (2001, ScalingTier.MASSIVE_STANDARD, 0.45),
        (3500, ScalingTier.MASSIVE_STANDARD, 0.45),
        (3613, ScalingTier.MASSIVE_COMPRESS, 0.4),
        (5000, ScalingTier.MASSIVE_COMPRESS, 0.4),
        (7000, ScalingTier.MASSIVE_MAX, 0.35),
        (10000, ScalingTier.EPIC_STANDARD, 0.3),
        (12500, ScalingTier.EPIC_MAXIMUM, 0.25),
    ],
)
def test_select_tier(words: int, tier: ScalingTier, multiplier: float) -> None:
    spec = select_tier(words)
    assert spec.tier is tier
    assert spec.multiplier == multiplier


def test_select_tier_fallbacks() -> None:
    assert select_tier(0).tier is ScalingTier.MICRO_BOOST
    assert select_tier(100_000).tier is ScalingTier.EPIC_MAXIMUM


def test_node_count_formula_for_single_word() -> None:
    complexity, intensity = 0.4, 0.8
    expected = math.floor(min(700, max(8, 8 * (1 + 1.5 * complexity) * (0.5 + 1.5 * intensity) * 3.0)))
    assert node_count(1, complexity, intensity, 3.0) == expected


def test_empty_input_floors_at_minimum(resolver: ScalingResolver) -> None:
    strategy = resolver.resolve(0, 0.0, 0.0)
    assert strategy.tier is ScalingTier.MICRO_BOOST
    assert strategy.node_count == MIN_NODES
    assert strategy.particle_count == math.floor(8 * 75 * 1.2)
    assert strategy.compression_level == pytest.approx(42 / 50)


@pytest.mark.parametrize("words", [0, 1, 7, 50, 101, 999, 3613, 12500, 12501, 50_000, 100_000])
@pytest.mark.parametrize(("complexity", "intensity"), [(0.0, 0.0), (0.5, 0.5), (1.0, 1.0)])
def test_budgets_stay_bounded(resolver: ScalingResolver, words: int, complexity: float, intensity: float) -> None:
    strategy = resolver.resolve(words, complexity, intensity)
    assert MIN_NODES <= strategy.node_count <= MAX_NODES
    assert MIN_PARTICLES <= strategy.particle_count <= MAX_PARTICLES
    assert 0.0 <= strategy.compression_level <= 1.0


def test_out_of_range_inputs_are_clamped() -> None:
    assert raw_node_count(10, 5.0, -2.0, 1.0) == raw_node_count(10, 1.0, 0.0, 1.0)


def test_raw_count_is_monotonic_within_tier() -> None:
    for spec in TIER_TABLE:
        previous = raw_node_count(spec.min_words, 0.3, 0.6, spec.multiplier)
        for words in range(spec.min_words + 1, min(spec.max_words, spec.min_words + 200) + 1):
            current = raw_node_count(words, 0.3, 0.6, spec.multiplier)
            assert current >= previous
            previous = current


def test_particle_count_tiers() -> None:
    assert particle_count(100, ScalingTier.SMALL_COMPRESS) == math.floor(100 * 75 * 0.95)
    assert particle_count(300, ScalingTier.MEDIUM_STANDARD) == math.floor(300 * 60 * 0.9)
    assert particle_count(500, ScalingTier.SMALL_PLUS) == 25000
    assert particle_count(700, ScalingTier.MICRO_BOOST) == math.floor(700 * 40 * 1.2)
    assert particle_count(8, ScalingTier.EPIC_MAXIMUM) == MIN_PARTICLES


def test_compression_level() -> None:
    assert compression_level(10, 20) == pytest.approx(0.6)
    assert compression_level(40, 80) == 0.0
    assert compression_level(400, 50) == pytest.approx(0.5)
    assert compression_level(60, 10) == pytest.approx(1 - 10 / 30)


def test_tier_name_matches_enum_value(resolver: ScalingResolver) -> None:
    strategy = resolver.resolve(101, 0.0, 0.0)
    assert strategy.tier_name == "medium_standard"
    assert strategy.multiplier == 0.95


def test_validate_rejects_gaps() -> None:
    broken = list(TIER_TABLE)
    broken[1] = TierSpec(ScalingTier.MICRO_ENHANCE, 5, 8, 2.2, 1.1)
    with pytest.raises(ConfigurationError):
        validate_tier_table(broken)


def test_validate_rejects_bad_multiplier() -> None:
    broken = list(TIER_TABLE)
    broken[0] = TierSpec(ScalingTier.MICRO_BOOST, 1, 3, 3.5, 1.2)
    with pytest.raises(ConfigurationError):
        validate_tier_table(broken)
