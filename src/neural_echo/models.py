"""Data model shared by the analysis pipeline and the structure generator."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple


class Emotion(str, Enum):
    JOY = "joy"
    SADNESS = "sadness"
    ANGER = "anger"
    FEAR = "fear"
    SURPRISE = "surprise"
    ANTICIPATION = "anticipation"


class ConceptCategory(str, Enum):
    EMOTION = "emotion"
    TIME = "time"
    PEOPLE = "people"
    PLACES = "places"
    ACTIONS = "actions"
    ABSTRACT = "abstract"
    OBJECTS = "objects"


class RelationshipType(str, Enum):
    SEMANTIC = "semantic"
    EMOTIONAL = "emotional"
    TEMPORAL = "temporal"
    CONTEXTUAL = "contextual"


class ScalingTier(str, Enum):
    MICRO_BOOST = "micro_boost"
    MICRO_ENHANCE = "micro_enhance"
    MICRO_STANDARD = "micro_standard"
    SMALL_PLUS = "small_plus"
    SMALL_STANDARD = "small_standard"
    SMALL_COMPRESS = "small_compress"
    MEDIUM_STANDARD = "medium_standard"
    MEDIUM_COMPRESS = "medium_compress"
    MEDIUM_MAX = "medium_max"
    LARGE_STANDARD = "large_standard"
    LARGE_COMPRESS = "large_compress"
    LARGE_HEAVY = "large_heavy"
    MASSIVE_STANDARD = "massive_standard"
    MASSIVE_COMPRESS = "massive_compress"
    MASSIVE_MAX = "massive_max"
    EPIC_STANDARD = "epic_standard"
    EPIC_MAXIMUM = "epic_maximum"


class NodeType(str, Enum):
    EMOTION = "emotion"
    CONCEPT = "concept"
    SYNTHETIC = "synthetic"
    TEMPORAL = "temporal"
    SOCIAL = "social"


class ConnectionType(str, Enum):
    SEMANTIC = "semantic"
    EMOTIONAL = "emotional"
    TEMPORAL = "temporal"


def _plain(value: Any) -> Any:
    """Convert enums nested inside ``asdict`` output into their values."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {_plain(key): _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


# Analysis ---------------------------------------------------------------------
@dataclass(frozen=True)
class Concept:
    """A distinct, categorised keyword extracted from the input text."""

    word: str
    category: ConceptCategory
    relevance: float
    frequency: int
    positions: Tuple[int, ...] = ()
    connections: Tuple[str, ...] = ()


@dataclass
class EmotionScores:
    joy: float = 0.0
    sadness: float = 0.0
    anger: float = 0.0
    fear: float = 0.0
    surprise: float = 0.0
    anticipation: float = 0.0

    def get(self, emotion: Emotion) -> float:
        return float(getattr(self, emotion.value))

    def set(self, emotion: Emotion, value: float) -> None:
        setattr(self, emotion.value, value)

    def items(self) -> Iterator[Tuple[Emotion, float]]:
        for emotion in Emotion:
            yield emotion, self.get(emotion)

    def total(self) -> float:
        return sum(score for _, score in self.items())


@dataclass(frozen=True)
class DominantEmotion:
    emotion: Emotion
    score: float
    confidence: float


@dataclass(frozen=True)
class SentimentAnalysis:
    scores: EmotionScores
    dominant: DominantEmotion
    intensity: float
    valence: float
    arousal: float


@dataclass(frozen=True)
class EmojiData:
    emoji: str
    position: int
    emotion: Emotion
    intensity: float


@dataclass(frozen=True)
class ConceptNode:
    id: str
    concept: Concept
    importance: float
    connections: Tuple[str, ...]


@dataclass(frozen=True)
class SemanticEdge:
    id: str
    source: str
    target: str
    weight: float
    relationship: RelationshipType


@dataclass(frozen=True)
class ConceptCluster:
    id: str
    category: ConceptCategory
    concepts: Tuple[str, ...]
    centroid: Concept
    coherence: float


@dataclass
class SemanticGraph:
    """Weighted co-occurrence graph over extracted concepts."""

    nodes: Dict[str, ConceptNode] = field(default_factory=dict)
    edges: Dict[str, SemanticEdge] = field(default_factory=dict)
    clusters: List[ConceptCluster] = field(default_factory=list)

    def has_edge(self, first: str, second: str) -> bool:
        return f"{first}-{second}" in self.edges or f"{second}-{first}" in self.edges


@dataclass(frozen=True)
class ComplexityAnalysis:
    overall: float = 0.0
    vocabulary_diversity: float = 0.0
    sentence_complexity: float = 0.0
    concept_density: float = 0.0
    emotional_complexity: float = 0.0


@dataclass(frozen=True)
class ScalingStrategy:
    """Node and particle budget resolved from the tier table."""

    tier: ScalingTier
    multiplier: float
    node_count: int
    particle_count: int
    compression_level: float

    @property
    def tier_name(self) -> str:
        return self.tier.value


# Visualisation ----------------------------------------------------------------
@dataclass
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class NodeData:
    word: str
    relevance: float
    layer: int
    concept: Optional[Concept] = None
    emotion: Optional[Emotion] = None


@dataclass
class Node:
    id: str
    position: Vector3
    activation: float
    target_activation: float
    color: str
    size: float
    type: NodeType
    synthetic: bool
    importance: float
    data: NodeData


@dataclass(frozen=True)
class Connection:
    id: str
    source: str
    target: str
    weight: float
    type: ConnectionType
    active: bool
    flow: float
    color: str


@dataclass(frozen=True)
class NodeDistribution:
    primary: int
    secondary: int
    tertiary: int
    environmental: int

    @property
    def total(self) -> int:
        return self.primary + self.secondary + self.tertiary + self.environmental


@dataclass(frozen=True)
class ScalingInfo:
    original_word_count: int
    final_node_count: int
    compression_ratio: float
    strategy: ScalingTier
    processing_time: float


@dataclass
class VisualStructure:
    nodes: List[Node]
    connections: List[Connection]
    distribution: NodeDistribution
    scaling_info: ScalingInfo


@dataclass
class AnalysisResult:
    """Everything the renderer needs for one piece of input text."""

    words: List[str]
    sentiment: SentimentAnalysis
    concepts: List[Concept]
    semantic_graph: SemanticGraph
    complexity: ComplexityAnalysis
    scaling_strategy: ScalingStrategy
    emojis: List[EmojiData]
    emoji_influence: float
    structure: VisualStructure
    timestamp: float

    @property
    def nodes(self) -> List[Node]:
        return self.structure.nodes

    @property
    def connections(self) -> List[Connection]:
        return self.structure.connections

    def to_dict(self) -> Dict[str, Any]:
        payload = _plain(asdict(self))
        payload["scaling_strategy"]["tier_name"] = self.scaling_strategy.tier_name
        return payload


__all__ = [
    "AnalysisResult",
    "ComplexityAnalysis",
    "Concept",
    "ConceptCategory",
    "ConceptCluster",
    "ConceptNode",
    "Connection",
    "ConnectionType",
    "DominantEmotion",
    "EmojiData",
    "Emotion",
    "EmotionScores",
    "Node",
    "NodeData",
    "NodeDistribution",
    "NodeType",
    "RelationshipType",
    "ScalingInfo",
    "ScalingStrategy",
    "ScalingTier",
    "SemanticEdge",
    "SemanticGraph",
    "SentimentAnalysis",
    "Vector3",
    "VisualStructure",
]
