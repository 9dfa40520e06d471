"""Self-check suite that runs probe texts through the pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from .analyzer import TextAnalyzer
from .logging import get_logger
from .models import AnalysisResult
from .scaling import MAX_NODES, MAX_PARTICLES, MIN_NODES, MIN_PARTICLES, raw_node_count, select_tier
from .utils import save_json

LOGGER = get_logger(__name__)


def _in_unit(value: float) -> bool:
    return 0.0 <= value <= 1.0


def invariant_violations(result: AnalysisResult) -> List[str]:
    """Return a description of every broken output invariant in ``result``."""
    failures: List[str] = []
    strategy = result.scaling_strategy
    if not MIN_NODES <= strategy.node_count <= MAX_NODES:
        failures.append(f"node count {strategy.node_count} outside [{MIN_NODES}, {MAX_NODES}]")
    if not MIN_PARTICLES <= strategy.particle_count <= MAX_PARTICLES:
        failures.append(f"particle count {strategy.particle_count} outside [{MIN_PARTICLES}, {MAX_PARTICLES}]")
    if not _in_unit(strategy.compression_level):
        failures.append(f"compression level {strategy.compression_level} outside [0, 1]")
    if len(result.nodes) != strategy.node_count:
        failures.append(f"generated {len(result.nodes)} nodes for a budget of {strategy.node_count}")

    for emotion, score in result.sentiment.scores.items():
        if not _in_unit(score):
            failures.append(f"{emotion.value} score {score} outside [0, 1]")
    if not -1.0 <= result.sentiment.valence <= 1.0:
        failures.append(f"valence {result.sentiment.valence} outside [-1, 1]")
    for name in ("arousal", "intensity"):
        value = getattr(result.sentiment, name)
        if not _in_unit(value):
            failures.append(f"{name} {value} outside [0, 1]")

    for concept in result.concepts:
        if not _in_unit(concept.relevance):
            failures.append(f"concept {concept.word!r} relevance {concept.relevance} outside [0, 1]")
    for cluster in result.semantic_graph.clusters:
        if not _in_unit(cluster.coherence):
            failures.append(f"cluster {cluster.id} coherence {cluster.coherence} outside [0, 1]")

    ids = set()
    for node in result.nodes:
        ids.add(node.id)
        if not (_in_unit(node.activation) and _in_unit(node.importance)):
            failures.append(f"node {node.id} activation/importance outside [0, 1]")
    for connection in result.connections:
        if connection.source not in ids or connection.target not in ids:
            failures.append(f"connection {connection.id} references a missing node")
    return failures


@dataclass
class ProbeReport:
    label: str
    word_count: int
    tier: str
    node_count: int
    particle_count: int
    expected_tier: Optional[str] = None
    failures: Sequence[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failures and (self.expected_tier is None or self.expected_tier == self.tier)


@dataclass
class NegationCheck:
    text: str
    negated_joy: float
    plain_joy: float

    @property
    def passed(self) -> bool:
        return self.negated_joy < self.plain_joy


@dataclass
class MonotonicityCheck:
    tier: str
    word_counts: Tuple[int, int]
    raw_counts: Tuple[float, float]

    @property
    def passed(self) -> bool:
        return self.raw_counts[1] >= self.raw_counts[0]


@dataclass
class DiagnosticsResult:
    probes: Sequence[ProbeReport] = field(default_factory=list)
    negation: Optional[NegationCheck] = None
    monotonicity: Sequence[MonotonicityCheck] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        checks = [probe.passed for probe in self.probes] + [check.passed for check in self.monotonicity]
        if self.negation is not None:
            checks.append(self.negation.passed)
        return all(checks)

    def to_dict(self) -> Dict[str, object]:
        return {
            "passed": self.passed,
            "probes": [
                {
                    "label": probe.label,
                    "word_count": probe.word_count,
                    "tier": probe.tier,
                    "expected_tier": probe.expected_tier,
                    "node_count": probe.node_count,
                    "particle_count": probe.particle_count,
                    "failures": list(probe.failures),
                    "passed": probe.passed,
                }
                for probe in self.probes
            ],
            "negation": None
            if self.negation is None
            else {
                "text": self.negation.text,
                "negated_joy": self.negation.negated_joy,
                "plain_joy": self.negation.plain_joy,
                "passed": self.negation.passed,
            },
            "monotonicity": [
                {
                    "tier": check.tier,
                    "word_counts": list(check.word_counts),
                    "raw_counts": list(check.raw_counts),
                    "passed": check.passed,
                }
                for check in self.monotonicity
            ],
        }

    def to_json(self, path: Path) -> None:
        save_json(Path(path), self.to_dict())


def _default_probes() -> List[Tuple[str, str, Optional[str]]]:
    return [
        ("empty", "", "micro_boost"),
        ("single word", "love", "micro_boost"),
        ("punctuation only", "?! ... ;;", "micro_boost"),
        ("neutral 101", " ".join(["table"] * 101), "medium_standard"),
        ("long 3000", " ".join(f"token{index % 250}" for index in range(3000)), "massive_standard"),
        ("long 3613", " ".join(f"token{index % 250}" for index in range(3613)), "massive_compress"),
        ("emoji", "what a day 😊🎉 but also 😢", None),
        ("beyond table", " ".join(["word"] * 13000), "epic_maximum"),
    ]


@dataclass
class DiagnosticsSuite:
    """Probe texts run through the pipeline with every output invariant checked."""

    analyzer: TextAnalyzer = field(default_factory=lambda: TextAnalyzer(rng=0))
    probes: Sequence[Tuple[str, str, Optional[str]]] = field(default_factory=_default_probes)
    negation_text: str = "I am not happy. I am not happy. I am not happy."
    monotonicity_samples: Sequence[Tuple[float, float]] = ((0.0, 0.0), (0.5, 0.5), (1.0, 1.0))

    def run(self) -> DiagnosticsResult:
        LOGGER.info("Running diagnostics suite")
        result = DiagnosticsResult()
        result.probes = self._probe_texts()
        result.negation = self._probe_negation()
        result.monotonicity = self._probe_monotonicity()
        LOGGER.info("Diagnostics %s", "passed" if result.passed else "FAILED")
        return result

    def _probe_texts(self) -> List[ProbeReport]:
        reports: List[ProbeReport] = []
        for label, text, expected_tier in self.probes:
            analysis = self.analyzer.analyze(text, use_cache=False)
            failures = invariant_violations(analysis)
            for failure in failures:
                LOGGER.warning("Probe %r: %s", label, failure)
            reports.append(
                ProbeReport(
                    label=label,
                    word_count=len(analysis.words),
                    tier=analysis.scaling_strategy.tier_name,
                    node_count=analysis.scaling_strategy.node_count,
                    particle_count=analysis.scaling_strategy.particle_count,
                    expected_tier=expected_tier,
                    failures=failures,
                )
            )
        return reports

    def _probe_negation(self) -> NegationCheck:
        plain_text = self.negation_text.replace("not ", "")
        negated = self.analyzer.emotion.analyze(self.negation_text)
        plain = self.analyzer.emotion.analyze(plain_text)
        return NegationCheck(
            text=self.negation_text,
            negated_joy=negated.scores.joy,
            plain_joy=plain.scores.joy,
        )

    def _probe_monotonicity(self) -> List[MonotonicityCheck]:
        checks: List[MonotonicityCheck] = []
        for spec in (select_tier(1), select_tier(101), select_tier(2001)):
            low, high = spec.min_words, spec.max_words
            for complexity, intensity in self.monotonicity_samples:
                checks.append(
                    MonotonicityCheck(
                        tier=spec.tier.value,
                        word_counts=(low, high),
                        raw_counts=(
                            raw_node_count(low, complexity, intensity, spec.multiplier),
                            raw_node_count(high, complexity, intensity, spec.multiplier),
                        ),
                    )
                )
        return checks


__all__ = [
    "DiagnosticsResult",
    "DiagnosticsSuite",
    "MonotonicityCheck",
    "NegationCheck",
    "ProbeReport",
    "invariant_violations",
]
