"""Lexicon-based emotion scoring with negation and intensifier handling."""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence, Tuple

from .config import EmotionConfig
from .lexicons import (
    EMOJI_EMOTIONS,
    EMOJI_PATTERN,
    EMOTION_LEXICON,
    EMOTION_POLARITY,
    INTENSIFIERS,
    NEGATION_WORDS,
    UNKNOWN_EMOJI,
)
from .logging import get_logger
from .models import DominantEmotion, EmojiData, Emotion, EmotionScores, SentimentAnalysis
from .utils import simple_tokenize

LOGGER = get_logger(__name__)


class EmotionScorer:
    """Turn text into a six-dimensional emotion vector.

    The scan keeps two pieces of state: a pending negation flag and the
    current intensifier multiplier. Both are consumed by the next emotional
    word, and both reset after any other non-modifier token.
    """

    def __init__(
        self,
        config: EmotionConfig | None = None,
        lexicon: Mapping[str, Tuple[Emotion, float]] = EMOTION_LEXICON,
        negations: frozenset[str] = NEGATION_WORDS,
        intensifiers: Mapping[str, float] = INTENSIFIERS,
    ) -> None:
        self.config = config or EmotionConfig()
        self.config.validate()
        self.lexicon = lexicon
        self.negations = negations
        self.intensifiers = intensifiers

    # Scoring ---------------------------------------------------------------------
    def analyze(self, text: str, emoji_influence: float = 0.0) -> SentimentAnalysis:
        scores = self.score_tokens(simple_tokenize(text))
        if emoji_influence:
            self.apply_emoji_influence(scores, emoji_influence)
        dominant = self.find_dominant(scores)
        valence, arousal = self.dimensions(scores)
        intensity = min(1.0, (scores.total() + dominant.score * 2.0) / 3.0)
        return SentimentAnalysis(
            scores=scores,
            dominant=dominant,
            intensity=intensity,
            valence=valence,
            arousal=arousal,
        )

    def analyze_with_emoji(self, text: str) -> Tuple[SentimentAnalysis, List[EmojiData], float]:
        """Score ``text`` with the emoji pass folded in."""
        emojis = self.extract_emojis(text) if self.config.use_emoji else []
        influence = self.emoji_influence(emojis)
        return self.analyze(text, influence), emojis, influence

    def score_tokens(self, tokens: Sequence[str]) -> EmotionScores:
        sums = {emotion: 0.0 for emotion in Emotion}
        emotional_tokens = 0
        negation_pending = False
        multiplier = 1.0

        for token in tokens:
            if token in self.negations:
                negation_pending = True
                continue
            if token in self.intensifiers:
                multiplier = self.intensifiers[token]
                continue
            entry = self.lexicon.get(token)
            if entry is not None:
                emotion, base_intensity = entry
                contribution = base_intensity * multiplier
                if negation_pending:
                    contribution *= self.config.negation_factor
                sums[emotion] += contribution
                emotional_tokens += 1
            negation_pending = False
            multiplier = 1.0

        scores = EmotionScores()
        if emotional_tokens:
            for emotion, total in sums.items():
                # intensifiers can push an average past 1
                scores.set(emotion, min(1.0, max(0.0, total / emotional_tokens)))
        return scores

    @staticmethod
    def find_dominant(scores: EmotionScores) -> DominantEmotion:
        dominant = Emotion.JOY
        top = 0.0
        for emotion, score in scores.items():
            if score > top:
                top = score
                dominant = emotion
        ranked = sorted((score for _, score in scores.items()), reverse=True)
        confidence = (ranked[0] - ranked[1]) / (ranked[0] or 1.0)
        return DominantEmotion(emotion=dominant, score=top, confidence=min(1.0, confidence))

    @staticmethod
    def dimensions(scores: EmotionScores) -> Tuple[float, float]:
        positive = scores.joy + scores.anticipation + scores.surprise * 0.5
        negative = scores.sadness + scores.anger + scores.fear
        valence = (positive - negative) / max(positive + negative, 1.0)

        high = scores.anger + scores.fear + scores.surprise + scores.joy * 0.7
        low = scores.sadness + scores.anticipation * 0.3
        arousal = high / max(high + low, 1.0)
        return max(-1.0, min(1.0, valence)), max(0.0, min(1.0, arousal))

    # Emoji -----------------------------------------------------------------------
    @staticmethod
    def extract_emojis(text: str) -> List[EmojiData]:
        found: List[EmojiData] = []
        for match in EMOJI_PATTERN.finditer(text):
            emoji = match.group(0)
            emotion, intensity = EMOJI_EMOTIONS.get(emoji, UNKNOWN_EMOJI)
            found.append(EmojiData(emoji=emoji, position=match.start(), emotion=emotion, intensity=intensity))
        if found:
            LOGGER.debug("Found %d emoji", len(found))
        return found

    @staticmethod
    def emoji_influence(emojis: Sequence[EmojiData]) -> float:
        if not emojis:
            return 0.0
        total = sum(EMOTION_POLARITY[item.emotion] * item.intensity for item in emojis)
        return total / len(emojis)

    @staticmethod
    def apply_emoji_influence(scores: EmotionScores, influence: float) -> None:
        if influence > 0:
            scores.joy = min(1.0, scores.joy + influence * 0.3)
            scores.anticipation = min(1.0, scores.anticipation + influence * 0.2)
        elif influence < 0:
            magnitude = abs(influence)
            scores.sadness = min(1.0, scores.sadness + magnitude * 0.3)
            scores.fear = min(1.0, scores.fear + magnitude * 0.2)


def score_emotion(text: str, emoji_influence: Optional[float] = None) -> SentimentAnalysis:
    """Score ``text`` with the default lexicon.

    When ``emoji_influence`` is omitted it is derived from the emoji in ``text``.
    """
    scorer = EmotionScorer()
    if emoji_influence is None:
        return scorer.analyze_with_emoji(text)[0]
    return scorer.analyze(text, emoji_influence)


__all__ = ["EmotionScorer", "score_emotion"]
