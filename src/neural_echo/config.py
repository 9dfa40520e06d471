"""Configuration helpers for Neural Echo."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional, cast

from .errors import ConfigurationError
from .utils.io import load_yaml_or_json


@dataclass
class EmotionConfig:
    """Configuration for the emotion scorer."""

    negation_factor: float = -0.5
    use_emoji: bool = True

    def validate(self) -> None:
        if self.negation_factor > 0:
            raise ConfigurationError("negation_factor must not be positive")


@dataclass
class ConceptConfig:
    """Configuration for concept extraction and the semantic graph."""

    max_concepts: int = 50
    min_relevance: float = 0.1
    window_size: int = 3
    max_connections: int = 10

    def validate(self) -> None:
        if not 0.0 <= self.min_relevance <= 1.0:
            raise ConfigurationError("min_relevance must lie in [0, 1]")
        if self.max_concepts <= 0 or self.window_size <= 0 or self.max_connections <= 0:
            raise ConfigurationError("concept limits must be positive")


@dataclass
class StructureConfig:
    """Configuration for node generation and layout."""

    seed: Optional[int] = None
    activation_threshold: float = 0.3
    emotion_confidence_threshold: float = 0.3

    def validate(self) -> None:
        if not 0.0 <= self.activation_threshold <= 1.0:
            raise ConfigurationError("activation_threshold must lie in [0, 1]")
        if not 0.0 <= self.emotion_confidence_threshold <= 1.0:
            raise ConfigurationError("emotion_confidence_threshold must lie in [0, 1]")


@dataclass
class CacheConfig:
    """Configuration for the analysis result cache."""

    enabled: bool = True
    ttl_seconds: float = 600.0
    max_entries: int = 100

    def validate(self) -> None:
        if self.ttl_seconds <= 0:
            raise ConfigurationError("ttl_seconds must be positive")
        if self.max_entries <= 0:
            raise ConfigurationError("max_entries must be positive")


@dataclass
class AnalyzerConfig:
    """Configuration for pipeline orchestration."""

    parallel: bool = True
    max_workers: int = 3
    debounce_seconds: float = 0.5

    def validate(self) -> None:
        if self.max_workers <= 0:
            raise ConfigurationError("max_workers must be positive")
        if self.debounce_seconds < 0:
            raise ConfigurationError("debounce_seconds must not be negative")


@dataclass
class NeuralEchoConfig:
    """Top-level configuration for the text-to-structure pipeline."""

    emotion: EmotionConfig = field(default_factory=EmotionConfig)
    concepts: ConceptConfig = field(default_factory=ConceptConfig)
    structure: StructureConfig = field(default_factory=StructureConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        self.emotion.validate()
        self.concepts.validate()
        self.structure.validate()
        self.cache.validate()
        self.analyzer.validate()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NeuralEchoConfig:
        try:
            return cls(
                emotion=EmotionConfig(**data.get("emotion", {})),
                concepts=ConceptConfig(**data.get("concepts", {})),
                structure=StructureConfig(**data.get("structure", {})),
                cache=CacheConfig(**data.get("cache", {})),
                analyzer=AnalyzerConfig(**data.get("analyzer", {})),
            )
        except TypeError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}") from exc

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _merge_dict(base: dict[str, Any], overrides: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for override in overrides:
        for key, value in override.items():
            existing = result.get(key)
            if isinstance(value, Mapping) and isinstance(existing, dict):
                result[key] = _merge_dict(cast(dict[str, Any], existing), [value])
            else:
                result[key] = value
    return result


def load_config(
    path: Optional[Path] = None,
    overrides: Optional[Iterable[Mapping[str, Any]]] = None,
) -> NeuralEchoConfig:
    """Load configuration from disk and merge overrides."""

    overrides = list(overrides or [])
    if path is None:
        base: dict[str, Any] = {}
    else:
        try:
            base = load_yaml_or_json(Path(path))
        except TypeError as exc:
            raise ConfigurationError(str(exc)) from exc

    merged = _merge_dict(base, overrides)
    return NeuralEchoConfig.from_dict(merged)
