"""Pipeline orchestration: scorers, scaling, structure, caching, debouncing."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Tuple

from .cache import AnalysisCache, CacheStats
from .complexity import ComplexityScorer
from .concepts import ConceptExtractor
from .config import NeuralEchoConfig
from .emotion import EmotionScorer
from .logging import get_logger
from .models import AnalysisResult, ComplexityAnalysis, Concept, EmojiData, SentimentAnalysis
from .scaling import ScalingResolver
from .structure import StructureGenerator
from .utils import split_words
from .utils.random import SeedLike

LOGGER = get_logger(__name__)

ResultCallback = Callable[[AnalysisResult], None]


class TextAnalyzer:
    """Run the full text-to-structure pipeline over one input string."""

    def __init__(self, config: NeuralEchoConfig | None = None, rng: SeedLike = None) -> None:
        self.config = config or NeuralEchoConfig()
        self.emotion = EmotionScorer(self.config.emotion)
        self.concepts = ConceptExtractor(self.config.concepts)
        self.complexity = ComplexityScorer()
        self.scaling = ScalingResolver()
        self.structure = StructureGenerator(self.config.structure, rng=rng)
        self.cache: AnalysisCache[AnalysisResult] = AnalysisCache(self.config.cache)

    def _score(self, text: str) -> Tuple[Tuple[SentimentAnalysis, List[EmojiData], float], List[Concept], ComplexityAnalysis]:
        if not self.config.analyzer.parallel:
            return self.emotion.analyze_with_emoji(text), self.concepts.extract(text), self.complexity.analyze(text)
        with ThreadPoolExecutor(max_workers=self.config.analyzer.max_workers) as pool:
            emotion_future = pool.submit(self.emotion.analyze_with_emoji, text)
            concept_future = pool.submit(self.concepts.extract, text)
            complexity_future = pool.submit(self.complexity.analyze, text)
            return emotion_future.result(), concept_future.result(), complexity_future.result()

    def analyze(self, text: str, use_cache: bool = True) -> AnalysisResult:
        caching = use_cache and self.config.cache.enabled
        if caching:
            cached = self.cache.get(text)
            if cached is not None:
                LOGGER.debug("Using cached analysis result")
                return cached

        started = time.perf_counter()
        words = split_words(text.strip())
        (sentiment, emojis, influence), concepts, complexity = self._score(text)
        graph = self.concepts.build_graph(concepts)
        strategy = self.scaling.resolve(len(words), complexity.overall, sentiment.intensity)
        structure = self.structure.generate(concepts, sentiment, graph, strategy, len(words), started_at=started)

        result = AnalysisResult(
            words=words,
            sentiment=sentiment,
            concepts=concepts,
            semantic_graph=graph,
            complexity=complexity,
            scaling_strategy=strategy,
            emojis=emojis,
            emoji_influence=influence,
            structure=structure,
            timestamp=time.time(),
        )
        if caching:
            self.cache.put(text, result)

        LOGGER.info(
            "Analysed %d words in %.1f ms | concepts=%d dominant=%s complexity=%.2f tier=%s nodes=%d",
            len(words),
            (time.perf_counter() - started) * 1000,
            len(concepts),
            sentiment.dominant.emotion.value,
            complexity.overall,
            strategy.tier_name,
            strategy.node_count,
        )
        return result

    def clear_cache(self) -> None:
        self.cache.clear()

    def cache_stats(self) -> CacheStats:
        return self.cache.stats()


class Debouncer:
    """Coalesce rapid text updates so only the last one is analysed.

    Each :meth:`submit` restarts the quiet period. A result whose input was
    superseded while it was being computed is dropped instead of delivered.
    """

    def __init__(self, analyzer: TextAnalyzer, delay: Optional[float] = None) -> None:
        self.analyzer = analyzer
        self.delay = analyzer.config.analyzer.debounce_seconds if delay is None else delay
        if self.delay < 0:
            raise ValueError("delay must not be negative")
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._generation = 0
        self._pending: Optional[Tuple[str, ResultCallback]] = None

    def submit(self, text: str, callback: ResultCallback) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._pending = (text, callback)
            timer = threading.Timer(self.delay, self._fire, args=(self._generation,))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def _take(self, generation: Optional[int]) -> Optional[Tuple[int, str, ResultCallback]]:
        with self._lock:
            if self._pending is None or (generation is not None and generation != self._generation):
                return None
            text, callback = self._pending
            self._pending = None
            self._timer = None
            return self._generation, text, callback

    def _deliver(self, generation: int, text: str, callback: ResultCallback) -> Optional[AnalysisResult]:
        result = self.analyzer.analyze(text)
        with self._lock:
            superseded = generation != self._generation
        if superseded:
            LOGGER.debug("Dropping superseded analysis result")
            return None
        callback(result)
        return result

    def _fire(self, generation: int) -> None:
        taken = self._take(generation)
        if taken is not None:
            self._deliver(*taken)

    def flush(self) -> Optional[AnalysisResult]:
        """Analyse the pending input now instead of waiting for the timer."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
        taken = self._take(None)
        if taken is None:
            return None
        return self._deliver(*taken)

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending = None
            self._generation += 1


__all__ = ["Debouncer", "TextAnalyzer"]
