"""Concept extraction and semantic graph construction."""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Mapping, Sequence

import numpy as np

from .config import ConceptConfig
from .lexicons import (
    CATEGORY_IMPORTANCE,
    CATEGORY_KEYWORDS,
    CATEGORY_PATTERNS,
    CATEGORY_SUFFIXES,
    STOPWORDS,
)
from .logging import get_logger
from .models import (
    Concept,
    ConceptCategory,
    ConceptCluster,
    ConceptNode,
    RelationshipType,
    SemanticEdge,
    SemanticGraph,
)
from .utils import simple_tokenize

LOGGER = get_logger(__name__)

POSITION_BONUS = 0.2
EARLY_TEXT_FRACTION = 0.2


def classify_word(word: str) -> ConceptCategory:
    """Assign ``word`` to exactly one category.

    Keyword lists win over patterns, patterns over suffixes; anything left
    over is an object.
    """
    for category in ConceptCategory:
        if word in CATEGORY_KEYWORDS[category]:
            return category
    for category in ConceptCategory:
        if CATEGORY_PATTERNS[category].search(word):
            return category
    for category, suffixes in CATEGORY_SUFFIXES:
        if word.endswith(suffixes):
            return category
    return ConceptCategory.OBJECTS


def relationship_between(first: Concept, second: Concept) -> RelationshipType:
    categories = {first.category, second.category}
    if ConceptCategory.EMOTION in categories:
        return RelationshipType.EMOTIONAL
    if ConceptCategory.TIME in categories:
        return RelationshipType.TEMPORAL
    if first.category == second.category:
        return RelationshipType.SEMANTIC
    return RelationshipType.CONTEXTUAL


def connection_weight(first: Concept, second: Concept) -> float:
    relevance = (first.relevance + second.relevance) / 2.0
    frequency = min(1.0, (first.frequency + second.frequency) / 10.0)
    same_category = 0.3 if first.category == second.category else 0.0
    return max(0.0, min(1.0, relevance * 0.5 + frequency * 0.3 + same_category + 0.2))


def cluster_coherence(members: Sequence[Concept]) -> float:
    """Average inverse variance of member relevance and frequency."""
    if len(members) <= 1:
        return 1.0
    relevance_var = float(np.var([concept.relevance for concept in members]))
    frequency_var = float(np.var([concept.frequency for concept in members]))
    return (1.0 / (1.0 + relevance_var) + 1.0 / (1.0 + frequency_var)) / 2.0


class ConceptExtractor:
    """Rank the salient keywords of a text and link them into a graph."""

    def __init__(self, config: ConceptConfig | None = None) -> None:
        self.config = config or ConceptConfig()
        self.config.validate()

    # Extraction ------------------------------------------------------------------
    def _is_candidate(self, token: str) -> bool:
        return len(token) > 2 and token not in STOPWORDS

    def extract(self, text: str) -> List[Concept]:
        tokens = simple_tokenize(text)
        counts: Counter[str] = Counter()
        positions: Dict[str, List[int]] = {}
        for index, token in enumerate(tokens):
            if self._is_candidate(token):
                counts[token] += 1
                positions.setdefault(token, []).append(index)

        lowered = text.lower()
        concepts = [
            Concept(
                word=word,
                category=classify_word(word),
                relevance=self.relevance(word, frequency, len(tokens), lowered),
                frequency=frequency,
                positions=tuple(positions[word]),
                connections=tuple(self.neighbours(positions[word], tokens, counts)),
            )
            for word, frequency in counts.items()
        ]
        ranked = sorted(concepts, key=lambda concept: concept.relevance, reverse=True)
        ranked = ranked[: self.config.max_concepts]
        kept = [concept for concept in ranked if concept.relevance > self.config.min_relevance]
        LOGGER.debug("Extracted %d concepts from %d tokens", len(kept), len(tokens))
        return kept

    def relevance(self, word: str, frequency: int, total_tokens: int, lowered_text: str) -> float:
        term_frequency = frequency / total_tokens if total_tokens else 0.0
        length_bonus = min(1.0, len(word) / 10.0)
        offset = lowered_text.find(word)
        position_bonus = POSITION_BONUS if 0 <= offset < len(lowered_text) * EARLY_TEXT_FRACTION else 0.0
        score = (term_frequency * 2.0 + length_bonus + position_bonus) * CATEGORY_IMPORTANCE[classify_word(word)]
        return min(1.0, score)

    def neighbours(self, occurrences: Sequence[int], tokens: Sequence[str], counts: Mapping[str, int]) -> List[str]:
        window = self.config.window_size
        found: List[str] = []
        for position in occurrences:
            start = max(0, position - window)
            end = min(len(tokens), position + window + 1)
            for index in range(start, end):
                nearby = tokens[index]
                if nearby == tokens[position]:
                    continue
                if self._is_candidate(nearby) and counts.get(nearby, 0) > 1 and nearby not in found:
                    found.append(nearby)
                    if len(found) == self.config.max_connections:
                        return found
        return found

    # Graph -----------------------------------------------------------------------
    def build_graph(self, concepts: Sequence[Concept]) -> SemanticGraph:
        graph = SemanticGraph()
        for concept in concepts:
            graph.nodes[concept.word] = ConceptNode(
                id=concept.word,
                concept=concept,
                importance=concept.relevance * concept.frequency,
                connections=concept.connections,
            )

        for concept in concepts:
            for other_word in concept.connections:
                other = graph.nodes.get(other_word)
                if other is None or other_word == concept.word or graph.has_edge(concept.word, other_word):
                    continue
                edge_id = f"{concept.word}-{other_word}"
                graph.edges[edge_id] = SemanticEdge(
                    id=edge_id,
                    source=concept.word,
                    target=other_word,
                    weight=connection_weight(concept, other.concept),
                    relationship=relationship_between(concept, other.concept),
                )

        graph.clusters = self.cluster(concepts)
        LOGGER.debug(
            "Semantic graph: %d nodes, %d edges, %d clusters",
            len(graph.nodes),
            len(graph.edges),
            len(graph.clusters),
        )
        return graph

    @staticmethod
    def cluster(concepts: Sequence[Concept]) -> List[ConceptCluster]:
        grouped: Dict[ConceptCategory, List[Concept]] = {}
        for concept in concepts:
            grouped.setdefault(concept.category, []).append(concept)

        clusters: List[ConceptCluster] = []
        for category, members in grouped.items():
            if len(members) < 2:
                continue
            centroid = members[0]
            for member in members[1:]:
                if member.relevance > centroid.relevance:
                    centroid = member
            clusters.append(
                ConceptCluster(
                    id=f"cluster-{category.value}",
                    category=category,
                    concepts=tuple(member.word for member in members),
                    centroid=centroid,
                    coherence=cluster_coherence(members),
                )
            )
        return clusters


# Lookup helpers ---------------------------------------------------------------
def concepts_by_category(concepts: Sequence[Concept], category: ConceptCategory, limit: int = 10) -> List[Concept]:
    matching = [concept for concept in concepts if concept.category == category]
    return sorted(matching, key=lambda concept: concept.relevance, reverse=True)[:limit]


def most_connected(concepts: Sequence[Concept], limit: int = 10) -> List[Concept]:
    return sorted(concepts, key=lambda concept: len(concept.connections), reverse=True)[:limit]


__all__ = [
    "ConceptExtractor",
    "classify_word",
    "cluster_coherence",
    "concepts_by_category",
    "connection_weight",
    "most_connected",
    "relationship_between",
]
