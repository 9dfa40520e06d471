import json
import math
import threading
import time

import pytest

from neural_echo.analyzer import Debouncer, TextAnalyzer
from neural_echo.config import AnalyzerConfig, NeuralEchoConfig
from neural_echo.diagnostics import invariant_violations
from neural_echo.models import AnalysisResult, Emotion, ScalingTier

STORY = (
    "Yesterday I walked through the old city with my sister. We were excited but nervous, "
    "because the museum had finally reopened after the long winter. The architecture was "
    "extraordinary, and although the crowds were overwhelming, we felt incredibly happy. 🎉"
)


def test_empty_text(analyzer: TextAnalyzer) -> None:
    result = analyzer.analyze("")
    assert result.words == []
    assert result.scaling_strategy.tier is ScalingTier.MICRO_BOOST
    assert result.scaling_strategy.node_count == 8
    assert len(result.nodes) == 8
    assert invariant_violations(result) == []


@pytest.mark.parametrize("text", ["   ", "?!...;;", "\n\t"])
def test_degenerate_text_never_raises(analyzer: TextAnalyzer, text: str) -> None:
    result = analyzer.analyze(text)
    assert result.scaling_strategy.tier is ScalingTier.MICRO_BOOST
    assert invariant_violations(result) == []


def test_single_word_uses_micro_boost(analyzer: TextAnalyzer) -> None:
    result = analyzer.analyze("love")
    strategy = result.scaling_strategy
    assert result.words == ["love"]
    assert strategy.tier is ScalingTier.MICRO_BOOST
    bonus = (1 + result.complexity.overall * 1.5) * (0.5 + result.sentiment.intensity * 1.5)
    expected = math.floor(min(700, max(8, math.log2(2) * 8 * bonus * 3.0)))
    assert strategy.node_count == expected
    assert len(result.nodes) == expected


def test_neutral_101_tokens(analyzer: TextAnalyzer) -> None:
    result = analyzer.analyze(" ".join(["table"] * 101))
    assert len(result.words) == 101
    assert result.scaling_strategy.tier_name == "medium_standard"
    assert result.scaling_strategy.multiplier == 0.95


def test_long_text_stays_bounded(analyzer: TextAnalyzer) -> None:
    text = " ".join(f"token{index % 300}" for index in range(3613))
    result = analyzer.analyze(text)
    assert result.scaling_strategy.tier_name == "massive_compress"
    assert result.scaling_strategy.multiplier == 0.4
    assert 8 <= result.scaling_strategy.node_count <= 700
    assert invariant_violations(result) == []


def test_massive_standard_range(analyzer: TextAnalyzer) -> None:
    text = " ".join(f"token{index % 300}" for index in range(3000))
    result = analyzer.analyze(text)
    assert result.scaling_strategy.tier_name == "massive_standard"
    assert result.scaling_strategy.multiplier == 0.45
    assert 8 <= result.scaling_strategy.node_count <= 700


def test_negation_lowers_joy(analyzer: TextAnalyzer) -> None:
    negated = analyzer.analyze("I am not happy. I am not happy. I am not happy.")
    plain = analyzer.analyze("I am happy. I am happy. I am happy.")
    assert negated.sentiment.scores.joy < plain.sentiment.scores.joy


def test_rich_text_invariants(analyzer: TextAnalyzer) -> None:
    result = analyzer.analyze(STORY)
    assert invariant_violations(result) == []
    assert result.emojis
    assert result.emoji_influence != 0.0
    assert result.concepts
    assert result.structure.scaling_info.final_node_count == result.scaling_strategy.node_count
    assert result.sentiment.dominant.emotion in set(Emotion)


def test_cache_hit_returns_identical_result(analyzer: TextAnalyzer) -> None:
    first = analyzer.analyze(STORY)
    second = analyzer.analyze(STORY)
    assert second is first
    assert second.timestamp == first.timestamp
    assert analyzer.cache_stats().hits == 1


def test_bypassing_cache_recomputes(analyzer: TextAnalyzer) -> None:
    first = analyzer.analyze(STORY)
    second = analyzer.analyze(STORY, use_cache=False)
    assert second is not first
    assert second.scaling_strategy == first.scaling_strategy


def test_clear_cache(analyzer: TextAnalyzer) -> None:
    analyzer.analyze("hello world")
    assert analyzer.cache_stats().size == 1
    analyzer.clear_cache()
    assert analyzer.cache_stats().size == 0


def test_sequential_and_parallel_agree() -> None:
    parallel = TextAnalyzer(NeuralEchoConfig(analyzer=AnalyzerConfig(parallel=True)), rng=5).analyze(STORY)
    sequential = TextAnalyzer(NeuralEchoConfig(analyzer=AnalyzerConfig(parallel=False)), rng=5).analyze(STORY)
    assert parallel.scaling_strategy == sequential.scaling_strategy
    assert [node.id for node in parallel.nodes] == [node.id for node in sequential.nodes]
    assert [node.activation for node in parallel.nodes] == [node.activation for node in sequential.nodes]


def test_result_serialises_to_json(analyzer: TextAnalyzer) -> None:
    payload = analyzer.analyze(STORY).to_dict()
    encoded = json.loads(json.dumps(payload, ensure_ascii=False))
    assert encoded["scaling_strategy"]["tier_name"] == encoded["scaling_strategy"]["tier"]
    assert len(encoded["structure"]["nodes"]) == encoded["scaling_strategy"]["node_count"]


def test_debouncer_delivers_only_last_text(analyzer: TextAnalyzer) -> None:
    received: list[AnalysisResult] = []
    done = threading.Event()

    def callback(result: AnalysisResult) -> None:
        received.append(result)
        done.set()

    debouncer = Debouncer(analyzer, delay=0.05)
    for text in ("I", "I am", "I am happy"):
        debouncer.submit(text, callback)
    assert done.wait(2.0)
    time.sleep(0.1)
    assert len(received) == 1
    assert received[0].words == ["I", "am", "happy"]


def test_debouncer_flush_runs_pending_now(analyzer: TextAnalyzer) -> None:
    received: list[AnalysisResult] = []
    debouncer = Debouncer(analyzer, delay=30.0)
    debouncer.submit("quiet text", received.append)
    result = debouncer.flush()
    assert result is not None
    assert received == [result]
    assert debouncer.flush() is None


def test_debouncer_cancel_drops_pending(analyzer: TextAnalyzer) -> None:
    received: list[AnalysisResult] = []
    debouncer = Debouncer(analyzer, delay=0.05)
    debouncer.submit("dropped", received.append)
    debouncer.cancel()
    time.sleep(0.2)
    assert received == []


def test_debouncer_rejects_negative_delay(analyzer: TextAnalyzer) -> None:
    with pytest.raises(ValueError):
        Debouncer(analyzer, delay=-1.0)


def test_debouncer_drops_result_superseded_mid_analysis(
    analyzer: TextAnalyzer, monkeypatch: pytest.MonkeyPatch
) -> None:
    started = threading.Event()
    release = threading.Event()
    received: list[AnalysisResult] = []
    delivered = threading.Event()
    analyze = analyzer.analyze

    def slow_analyze(text: str, use_cache: bool = True) -> AnalysisResult:
        if text == "first one":
            started.set()
            assert release.wait(2.0)
        return analyze(text, use_cache)

    def callback(result: AnalysisResult) -> None:
        received.append(result)
        delivered.set()

    monkeypatch.setattr(analyzer, "analyze", slow_analyze)
    debouncer = Debouncer(analyzer, delay=0.01)
    debouncer.submit("first one", callback)
    assert started.wait(2.0)
    debouncer.submit("second one", callback)
    assert delivered.wait(2.0)
    release.set()
    time.sleep(0.2)
    assert [result.words for result in received] == [["second", "one"]]
