import pytest

from neural_echo.config import EmotionConfig
from neural_echo.emotion import EmotionScorer, score_emotion
from neural_echo.models import Emotion, EmotionScores


@pytest.fixture
def scorer() -> EmotionScorer:
    return EmotionScorer()


def test_single_emotion_word_scores_lexicon_intensity(scorer: EmotionScorer) -> None:
    result = scorer.analyze("happy")
    assert result.scores.joy == pytest.approx(0.8)
    assert result.dominant.emotion is Emotion.JOY
    assert result.dominant.confidence == pytest.approx(1.0)
    assert result.valence == pytest.approx(0.8)
    assert result.arousal == pytest.approx(0.56)
    assert result.intensity == pytest.approx(0.8)


def test_empty_text_yields_zero_vector(scorer: EmotionScorer) -> None:
    result = scorer.analyze("")
    assert all(score == 0.0 for _, score in result.scores.items())
    assert result.dominant.confidence == 0.0
    assert result.intensity == 0.0
    assert result.valence == 0.0


def test_negation_flips_and_floors_contribution(scorer: EmotionScorer) -> None:
    negated = scorer.analyze("I am not happy. I am not happy. I am not happy.")
    plain = scorer.analyze("I am happy. I am happy. I am happy.")
    assert negated.scores.joy < plain.scores.joy
    assert negated.scores.joy == 0.0


def test_unused_negation_lapses_after_one_word(scorer: EmotionScorer) -> None:
    result = scorer.analyze("not the happy")
    assert result.scores.joy == pytest.approx(0.8)


def test_modifiers_keep_negation_pending(scorer: EmotionScorer) -> None:
    assert scorer.analyze("not very happy").scores.joy == 0.0


def test_intensifier_scales_and_scores_stay_in_unit_interval(scorer: EmotionScorer) -> None:
    result = scorer.analyze("somewhat sad")
    assert result.scores.sadness == pytest.approx(0.64)
    boosted = scorer.analyze("extremely happy")
    assert boosted.scores.joy == 1.0


def test_intensifier_resets_after_non_emotional_token(scorer: EmotionScorer) -> None:
    assert scorer.analyze("very big happy").scores.joy == pytest.approx(0.8)


def test_shared_words_use_last_list(scorer: EmotionScorer) -> None:
    result = scorer.analyze("excited")
    assert result.dominant.emotion is Emotion.ANTICIPATION
    assert result.scores.anticipation == pytest.approx(0.6)


def test_ties_keep_declaration_order() -> None:
    dominant = EmotionScorer.find_dominant(EmotionScores(joy=0.4, sadness=0.4))
    assert dominant.emotion is Emotion.JOY
    assert dominant.confidence == 0.0


def test_confidence_is_normalised_gap() -> None:
    dominant = EmotionScorer.find_dominant(EmotionScores(anger=0.8, fear=0.2))
    assert dominant.emotion is Emotion.ANGER
    assert dominant.confidence == pytest.approx(0.75)


def test_dimensions_are_clamped() -> None:
    valence, arousal = EmotionScorer.dimensions(EmotionScores(sadness=1.0, anger=1.0, fear=1.0))
    assert valence == -1.0
    assert 0.0 <= arousal <= 1.0


def test_positive_emoji_raises_joy_and_anticipation(scorer: EmotionScorer) -> None:
    sentiment, emojis, influence = scorer.analyze_with_emoji("😊")
    assert [item.emoji for item in emojis] == ["😊"]
    assert emojis[0].emotion is Emotion.JOY
    assert influence == pytest.approx(0.8)
    assert sentiment.scores.joy == pytest.approx(0.24)
    assert sentiment.scores.anticipation == pytest.approx(0.16)


def test_negative_emoji_raises_sadness_and_fear(scorer: EmotionScorer) -> None:
    sentiment, _, influence = scorer.analyze_with_emoji("😢")
    assert influence == pytest.approx(-0.64)
    assert sentiment.scores.sadness == pytest.approx(0.192)
    assert sentiment.scores.fear == pytest.approx(0.128)


def test_unknown_emoji_maps_to_mild_anticipation() -> None:
    emojis = EmotionScorer.extract_emojis("launch 🚀 day")
    assert len(emojis) == 1
    assert emojis[0].emotion is Emotion.ANTICIPATION
    assert emojis[0].intensity == pytest.approx(0.3)
    assert emojis[0].position == 7


def test_emoji_pass_can_be_disabled() -> None:
    scorer = EmotionScorer(EmotionConfig(use_emoji=False))
    sentiment, emojis, influence = scorer.analyze_with_emoji("😊")
    assert emojis == []
    assert influence == 0.0
    assert sentiment.scores.joy == 0.0


def test_unusual_unicode_does_not_raise() -> None:
    result = score_emotion("café ​ � \U0001F9EA happý")
    assert 0.0 <= result.intensity <= 1.0
