"""Structural complexity scoring."""

from __future__ import annotations

from typing import Dict, List, Sequence

from .lexicons import (
    ABSTRACT_INDICATORS,
    COMMON_WORDS,
    COMPLEX_EMOTION_WORDS,
    COMPLEX_WORDS,
    EMOTIONAL_INTENSIFIERS,
    NUANCE_MARKERS,
    SIMPLE_EMOTION_WORDS,
    SUBORDINATE_MARKERS,
    TECHNICAL_INDICATORS,
)
from .logging import get_logger
from .models import ComplexityAnalysis
from .utils import count_occurrences, simple_tokenize, split_sentences

LOGGER = get_logger(__name__)

# overall = 0.3 vocabulary + 0.3 sentence + 0.25 density + 0.15 emotional
WEIGHTS: Dict[str, float] = {
    "vocabulary_diversity": 0.3,
    "sentence_complexity": 0.3,
    "concept_density": 0.25,
    "emotional_complexity": 0.15,
}

_LENGTH_BUCKETS = ((10, 0.2), (20, 0.5), (30, 0.8))


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


class ComplexityScorer:
    """Score how structurally demanding a text is, on a 0–1 scale."""

    def analyze(self, text: str) -> ComplexityAnalysis:
        words = simple_tokenize(text)
        vocabulary = self.vocabulary_diversity(words)
        sentence = self.sentence_complexity(split_sentences(text))
        density = self.concept_density(words)
        emotional = self.emotional_complexity(text, words)
        overall = (
            vocabulary * WEIGHTS["vocabulary_diversity"]
            + sentence * WEIGHTS["sentence_complexity"]
            + density * WEIGHTS["concept_density"]
            + emotional * WEIGHTS["emotional_complexity"]
        )
        LOGGER.debug("Complexity overall=%.3f over %d words", overall, len(words))
        return ComplexityAnalysis(
            overall=_clamp(overall),
            vocabulary_diversity=vocabulary,
            sentence_complexity=sentence,
            concept_density=density,
            emotional_complexity=emotional,
        )

    @staticmethod
    def vocabulary_diversity(words: Sequence[str]) -> float:
        if not words:
            return 0.0
        unique = set(words)
        type_token_ratio = len(unique) / len(words)
        sophisticated = 0
        common = 0
        for word in unique:
            if word in COMPLEX_WORDS or len(word) > 8:
                sophisticated += 1
            elif word in COMMON_WORDS:
                common += 1
        score = (
            type_token_ratio * 0.6
            + (sophisticated / len(unique)) * 0.3
            + (1.0 - common / len(unique)) * 0.1
        )
        return _clamp(score * 2.0)

    @staticmethod
    def sentence_complexity(sentences: Sequence[str]) -> float:
        if not sentences:
            return 0.0
        total = 0.0
        for sentence in sentences:
            word_count = len(sentence.split())
            length_score = 1.0
            for limit, bucket_score in _LENGTH_BUCKETS:
                if word_count <= limit:
                    length_score = bucket_score
                    break
            punctuation = min(
                1.0,
                sentence.count(",") * 0.1 + sentence.count(";") * 0.2 + sentence.count(":") * 0.15,
            )
            lowered = sentence.lower()
            markers = sum(count_occurrences(lowered, marker) for marker in SUBORDINATE_MARKERS)
            subordinate = min(1.0, markers * 0.3)
            total += length_score * 0.4 + punctuation * 0.3 + subordinate * 0.3
        return _clamp(total / len(sentences))

    @staticmethod
    def concept_density(words: Sequence[str]) -> float:
        if not words:
            return 0.0
        abstract = technical = action = descriptive = 0
        for word in words:
            if any(indicator in word for indicator in ABSTRACT_INDICATORS) or word.endswith(("ness", "ity", "ism")):
                abstract += 1
            if any(indicator in word for indicator in TECHNICAL_INDICATORS) or word.endswith(("tion", "sion", "ment")):
                technical += 1
            if word.endswith(("ing", "ed", "en")):
                action += 1
            if word.endswith(("ly", "ful", "less", "ous", "ive", "able")):
                descriptive += 1
        count = len(words)
        weighted = (abstract * 0.4 + technical * 0.3 + action * 0.2 + descriptive * 0.1) / count
        return _clamp(weighted * 3.0)

    @staticmethod
    def emotional_complexity(text: str, words: Sequence[str]) -> float:
        if not words:
            return 0.0
        simple = sum(1 for word in words if word in SIMPLE_EMOTION_WORDS)
        complex_count = sum(1 for word in words if word in COMPLEX_EMOTION_WORDS)
        intensifiers = sum(1 for word in words if word in EMOTIONAL_INTENSIFIERS)
        lowered = text.lower()
        nuance = sum(0.2 for marker in NUANCE_MARKERS if marker in lowered)

        count = len(words)
        score = (
            (simple + complex_count) / count * 0.3
            + complex_count / count * 0.4
            + intensifiers / count * 0.2
            + min(1.0, nuance) * 0.1
        )
        return _clamp(score * 4.0)


LEVELS: List[tuple[float, str]] = [
    (0.2, "Very Simple"),
    (0.4, "Simple"),
    (0.6, "Moderate"),
    (0.8, "Complex"),
]


def complexity_level(value: float) -> str:
    for upper, label in LEVELS:
        if value < upper:
            return label
    return "Very Complex"


def complexity_breakdown(analysis: ComplexityAnalysis) -> Dict[str, str]:
    return {
        "overall": complexity_level(analysis.overall),
        "vocabulary": complexity_level(analysis.vocabulary_diversity),
        "sentence": complexity_level(analysis.sentence_complexity),
        "concepts": complexity_level(analysis.concept_density),
        "emotional": complexity_level(analysis.emotional_complexity),
    }


__all__ = ["ComplexityScorer", "WEIGHTS", "complexity_breakdown", "complexity_level"]
