"""Turn ranked concepts and a node budget into a laid-out node set."""

from __future__ import annotations

import time
from typing import Dict, List, Optional, Sequence

import numpy as np

from .config import StructureConfig
from .logging import get_logger
from .models import (
    Concept,
    ConceptCategory,
    Connection,
    ConnectionType,
    Emotion,
    Node,
    NodeData,
    NodeDistribution,
    NodeType,
    RelationshipType,
    ScalingInfo,
    ScalingStrategy,
    SemanticGraph,
    SentimentAnalysis,
    Vector3,
    VisualStructure,
)
from .utils.random import SeedLike, ensure_rng, uniform

LOGGER = get_logger(__name__)

GOLDEN_RATIO = (1 + np.sqrt(5)) / 2
LAYER_RADIUS_FACTORS = (0.3, 0.7, 1.1)
MAX_EMOTION_NODE_SIZE = 2.0
SYNTHETIC_COLOR = "#95a5a6"

CATEGORY_LAYERS: Dict[ConceptCategory, int] = {
    ConceptCategory.EMOTION: 0,
    ConceptCategory.PEOPLE: 0,
    ConceptCategory.TIME: 1,
    ConceptCategory.ACTIONS: 1,
    ConceptCategory.PLACES: 1,
    ConceptCategory.ABSTRACT: 2,
    ConceptCategory.OBJECTS: 2,
}

CATEGORY_NODE_TYPES: Dict[ConceptCategory, NodeType] = {
    ConceptCategory.PEOPLE: NodeType.SOCIAL,
    ConceptCategory.TIME: NodeType.TEMPORAL,
}

CATEGORY_COLORS: Dict[ConceptCategory, str] = {
    ConceptCategory.EMOTION: "#ff6b6b",
    ConceptCategory.TIME: "#f39c12",
    ConceptCategory.PEOPLE: "#e74c3c",
    ConceptCategory.PLACES: "#27ae60",
    ConceptCategory.ACTIONS: "#3498db",
    ConceptCategory.ABSTRACT: "#9b59b6",
    ConceptCategory.OBJECTS: "#34495e",
}

EMOTION_COLORS: Dict[Emotion, str] = {
    Emotion.JOY: "#f1c40f",
    Emotion.SADNESS: "#3498db",
    Emotion.ANGER: "#e74c3c",
    Emotion.FEAR: "#8e44ad",
    Emotion.SURPRISE: "#e67e22",
    Emotion.ANTICIPATION: "#2ecc71",
}

RELATIONSHIP_COLORS: Dict[RelationshipType, str] = {
    RelationshipType.SEMANTIC: "#4ecdc4",
    RelationshipType.EMOTIONAL: "#ff6b6b",
    RelationshipType.TEMPORAL: "#f39c12",
    RelationshipType.CONTEXTUAL: "#95a5a6",
}

RELATIONSHIP_CONNECTIONS: Dict[RelationshipType, ConnectionType] = {
    RelationshipType.SEMANTIC: ConnectionType.SEMANTIC,
    RelationshipType.TEMPORAL: ConnectionType.TEMPORAL,
    RelationshipType.EMOTIONAL: ConnectionType.EMOTIONAL,
    RelationshipType.CONTEXTUAL: ConnectionType.EMOTIONAL,
}


def size_for_importance(importance: float) -> float:
    return 0.5 + importance * 1.5


def node_distribution(total: int) -> NodeDistribution:
    """Split ``total`` 30/40/20/10, handing the flooring remainder to primary."""
    secondary = int(total * 0.4)
    tertiary = int(total * 0.2)
    environmental = int(total * 0.1)
    primary = total - secondary - tertiary - environmental
    return NodeDistribution(primary=primary, secondary=secondary, tertiary=tertiary, environmental=environmental)


def spiral_positions(layers: Sequence[int], node_count: int) -> np.ndarray:
    """Fibonacci-spiral points on three concentric shells.

    Returns an ``(n, 3)`` array; ``node_count`` sets the base radius.
    """
    count = len(layers)
    if count == 0:
        return np.zeros((0, 3))
    radius = max(10.0, node_count / 10.0)
    index = np.arange(count, dtype=float)
    shell = radius * np.asarray([LAYER_RADIUS_FACTORS[layer] for layer in layers])
    angle = 2 * np.pi * index / GOLDEN_RATIO
    y = 1 - (index / (count - 1)) * 2 if count > 1 else np.zeros(1)
    ring = np.sqrt(np.clip(1 - y * y, 0.0, 1.0))
    return np.column_stack((np.cos(angle) * ring * shell, y * shell * 0.5, np.sin(angle) * ring * shell))


class StructureGenerator:
    """Build the renderer-facing node and connection lists.

    Randomised attributes (initial activation, filler importance) come from an
    injected ``numpy.random.Generator``; counts never depend on it.
    """

    def __init__(self, config: StructureConfig | None = None, rng: SeedLike = None) -> None:
        self.config = config or StructureConfig()
        self.config.validate()
        self.rng = ensure_rng(rng if rng is not None else self.config.seed)
        self._serial = 0

    def _next_id(self, kind: str, word: str) -> str:
        self._serial += 1
        return f"{kind}_{word}_{self._serial}"

    # Nodes -----------------------------------------------------------------------
    def concept_node(self, concept: Concept, importance: float) -> Node:
        return Node(
            id=self._next_id("concept", concept.word),
            position=Vector3(),
            activation=uniform(self.rng, 0.3, 0.8),
            target_activation=concept.relevance,
            color=CATEGORY_COLORS[concept.category],
            size=size_for_importance(importance),
            type=CATEGORY_NODE_TYPES.get(concept.category, NodeType.CONCEPT),
            synthetic=False,
            importance=importance,
            data=NodeData(
                word=concept.word,
                relevance=concept.relevance,
                layer=CATEGORY_LAYERS[concept.category],
                concept=concept,
            ),
        )

    def emotion_node(self, sentiment: SentimentAnalysis, importance: float = 0.9) -> Node:
        emotion = sentiment.dominant.emotion
        return Node(
            id=self._next_id("emotion", emotion.value),
            position=Vector3(),
            activation=max(0.0, min(1.0, sentiment.intensity)),
            target_activation=max(0.0, min(1.0, sentiment.dominant.score)),
            color=EMOTION_COLORS[emotion],
            size=min(size_for_importance(importance) * 1.2, MAX_EMOTION_NODE_SIZE),
            type=NodeType.EMOTION,
            synthetic=False,
            importance=importance,
            data=NodeData(word=emotion.value, relevance=sentiment.dominant.score, layer=0, emotion=emotion),
        )

    def synthetic_nodes(self, count: int) -> List[Node]:
        nodes: List[Node] = []
        for index in range(count):
            word = f"synthetic_{index}"
            nodes.append(
                Node(
                    id=self._next_id("synthetic", str(index)),
                    position=Vector3(),
                    activation=uniform(self.rng, 0.1, 0.4),
                    target_activation=uniform(self.rng, 0.1, 0.5),
                    color=SYNTHETIC_COLOR,
                    size=size_for_importance(0.3),
                    type=NodeType.SYNTHETIC,
                    synthetic=True,
                    importance=uniform(self.rng, 0.2, 0.5),
                    data=NodeData(word=word, relevance=uniform(self.rng, 0.1, 0.3), layer=2),
                )
            )
        return nodes

    def generate_nodes(
        self,
        concepts: Sequence[Concept],
        sentiment: SentimentAnalysis,
        target: int,
        distribution: NodeDistribution,
    ) -> List[Node]:
        ranked = sorted(concepts, key=lambda concept: concept.relevance, reverse=True)
        nodes: List[Node] = []

        primary = ranked[: distribution.primary]
        for index, concept in enumerate(primary):
            nodes.append(self.concept_node(concept, 1.0 - (index / len(primary)) * 0.3))

        if sentiment.dominant.confidence > self.config.emotion_confidence_threshold:
            nodes.append(self.emotion_node(sentiment))

        secondary = ranked[distribution.primary : distribution.primary + distribution.secondary]
        for index, concept in enumerate(secondary):
            nodes.append(self.concept_node(concept, 0.7 - (index / len(secondary)) * 0.2))

        shortfall = target - len(nodes)
        if shortfall > 0:
            nodes.extend(self.synthetic_nodes(shortfall))
        return nodes[:target]

    # Connections -----------------------------------------------------------------
    def generate_connections(self, graph: SemanticGraph, nodes: Sequence[Node]) -> List[Connection]:
        by_word: Dict[str, Node] = {}
        for node in nodes:
            by_word.setdefault(node.data.word, node)

        connections: List[Connection] = []
        for edge in graph.edges.values():
            source = by_word.get(edge.source)
            target = by_word.get(edge.target)
            if source is None or target is None:
                continue
            connections.append(
                Connection(
                    id=f"conn_{source.id}_{target.id}",
                    source=source.id,
                    target=target.id,
                    weight=edge.weight,
                    type=RELATIONSHIP_CONNECTIONS[edge.relationship],
                    active=edge.weight > self.config.activation_threshold,
                    flow=edge.weight,
                    color=RELATIONSHIP_COLORS[edge.relationship],
                )
            )
        return connections

    # Layout ----------------------------------------------------------------------
    @staticmethod
    def layout(nodes: Sequence[Node], node_count: int) -> None:
        points = spiral_positions([node.data.layer for node in nodes], node_count)
        for node, (x, y, z) in zip(nodes, points):
            node.position = Vector3(float(x), float(y), float(z))

    # Entry point -----------------------------------------------------------------
    def generate(
        self,
        concepts: Sequence[Concept],
        sentiment: SentimentAnalysis,
        graph: SemanticGraph,
        strategy: ScalingStrategy,
        word_count: int,
        started_at: Optional[float] = None,
    ) -> VisualStructure:
        started_at = time.perf_counter() if started_at is None else started_at
        self._serial = 0
        target = strategy.node_count
        distribution = node_distribution(target)
        nodes = self.generate_nodes(concepts, sentiment, target, distribution)
        connections = self.generate_connections(graph, nodes)
        self.layout(nodes, target)

        info = ScalingInfo(
            original_word_count=word_count,
            final_node_count=len(nodes),
            compression_ratio=len(nodes) / max(word_count, 1),
            strategy=strategy.tier,
            processing_time=time.perf_counter() - started_at,
        )
        synthetic = sum(1 for node in nodes if node.synthetic)
        LOGGER.debug(
            "Generated %d nodes (%d synthetic) and %d connections",
            len(nodes),
            synthetic,
            len(connections),
        )
        return VisualStructure(nodes=nodes, connections=connections, distribution=distribution, scaling_info=info)


__all__ = [
    "StructureGenerator",
    "node_distribution",
    "size_for_importance",
    "spiral_positions",
]
