"""
Paragraph scoring, score propagation, refinement and candidate selection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from bs4 import Tag

from article_extractor.dom import (
    Document,
    class_and_id,
    count_commas,
    get_attribute,
    get_text,
    link_density,
    node_key,
    parent,
    tag_name,
    text_length,
)

from .keywords import classify

logger = logging.getLogger(__name__)

PARAGRAPH_SELECTOR = "p, pre"

TAG_BONUS: Dict[str, float] = {
    "div": 5.0,
    "td": 3.0,
    "blockquote": 3.0,
    "form": -3.0,
    "address": -3.0,
}

HNEWS_BONUS = 80.0
HNEWS_CLASSES = frozenset({"hentry", "h-entry", "entry-content"})
HNEWS_ITEMTYPES = frozenset(
    {
        "http://schema.org/Article",
        "https://schema.org/Article",
        "http://schema.org/NewsArticle",
        "https://schema.org/NewsArticle",
    }
)

CHARS_PER_LENGTH_POINT = 50
MAX_LENGTH_BONUS = 3

GRANDPARENT_SHARE = 0.5

# Refinement ceilings, by sign of the keyword weight.
LINK_DENSITY_CEILING = 0.5
NEGATIVE_LINK_DENSITY_CEILING = 0.2

# Only candidates whose weighted score exceeds this floor can be selected.
MIN_CANDIDATE_SCORE = -1.0

SIBLING_SCORE_BASE = 10.0
SIBLING_SCORE_FACTOR = 0.25


@dataclass(slots=True)
class NodeScore:
    """Score accumulator for one candidate node."""

    node: Tag
    content_score: float = 0.0
    weight: int = 0
    link_density: float = 0.0
    text_length: int = 0
    initialized: bool = False

    @property
    def weighted_score(self) -> float:
        return self.content_score + self.weight


@dataclass(slots=True, frozen=True)
class ParagraphScore:
    """Breakdown of a paragraph's score."""

    text: str
    length: int
    commas: int
    length_bonus: int
    score: float


@dataclass
class ScoreMap:
    """Scores keyed by node identity, valid for one extraction call."""

    scores: Dict[int, NodeScore] = field(default_factory=dict)

    def get(self, node: Tag) -> Optional[NodeScore]:
        return self.scores.get(node_key(node))

    def setdefault(self, node: Tag) -> NodeScore:
        key = node_key(node)
        entry = self.scores.get(key)
        if entry is None:
            entry = self.scores[key] = NodeScore(node=node)
        return entry

    def __contains__(self, node: Tag) -> bool:
        return node_key(node) in self.scores

    def __iter__(self) -> Iterator[NodeScore]:
        return iter(self.scores.values())

    def __len__(self) -> int:
        return len(self.scores)


def analyze_paragraph(node: Tag, min_length: int) -> ParagraphScore:
    text = get_text(node)
    length = len(text)
    commas = count_commas(text)
    length_bonus = min(length // CHARS_PER_LENGTH_POINT, MAX_LENGTH_BONUS)
    score = 0.0 if length < min_length else 1.0 + commas + length_bonus
    return ParagraphScore(text=text, length=length, commas=commas, length_bonus=length_bonus, score=score)


def score_paragraph(node: Tag, min_length: int) -> float:
    """Base 1, one point per comma, one per 50 codepoints up to 3; 0 when too short."""
    return analyze_paragraph(node, min_length).score


def tag_score(node: Tag) -> float:
    return TAG_BONUS.get(tag_name(node), 0.0)


def has_hnews(node: Tag) -> bool:
    classes = get_attribute(node, "class").split()
    if any(c in HNEWS_CLASSES for c in classes):
        return True
    return get_attribute(node, "itemtype") in HNEWS_ITEMTYPES


def node_weight(node: Tag) -> int:
    return classify(*class_and_id(node))


def sibling_threshold(top_score: float) -> float:
    return max(top_score * SIBLING_SCORE_FACTOR, SIBLING_SCORE_BASE)


class ContentScorer:
    """Scores paragraphs and distributes their scores to ancestors."""

    def __init__(self, min_paragraph_length: int = 25) -> None:
        self.min_paragraph_length = min_paragraph_length

    def initialize(self, entry: NodeScore) -> None:
        node = entry.node
        entry.content_score += tag_score(node)
        entry.weight = node_weight(node)
        if has_hnews(node):
            entry.content_score += HNEWS_BONUS
        entry.link_density = link_density(node)
        entry.text_length = text_length(node)
        entry.initialized = True

    def propagate(self, document: Document, scores: ScoreMap | None = None) -> ScoreMap:
        """Add every paragraph's score to its parent and half of it to its grandparent."""
        scores = scores if scores is not None else ScoreMap()
        paragraphs = 0
        for paragraph in document.select(PARAGRAPH_SELECTOR):
            value = score_paragraph(paragraph, self.min_paragraph_length)
            if value <= 0:
                continue
            first = parent(paragraph)
            if first is None:
                continue
            paragraphs += 1
            second = parent(first)

            for ancestor, share in ((first, 1.0), (second, GRANDPARENT_SHARE)):
                if ancestor is None:
                    continue
                entry = scores.setdefault(ancestor)
                if not entry.initialized:
                    self.initialize(entry)
                entry.content_score += value * share

        logger.debug("Propagated %d paragraphs into %d candidates", paragraphs, len(scores))
        return scores

    def refine(self, scores: ScoreMap) -> None:
        """Penalize candidates whose link density exceeds their ceiling. Run once."""
        for entry in scores:
            ceiling = LINK_DENSITY_CEILING if entry.weight >= 0 else NEGATIVE_LINK_DENSITY_CEILING
            if entry.link_density > ceiling:
                entry.content_score *= 1.0 - entry.link_density

    def score(self, document: Document) -> ScoreMap:
        scores = self.propagate(document)
        self.refine(scores)
        return scores


def rank_candidates(scores: ScoreMap, order: Dict[int, int]) -> List[NodeScore]:
    """Candidates by weighted score, highest first; ties go to the earlier node."""
    last = len(order)
    return sorted(
        scores,
        key=lambda entry: (-entry.weighted_score, order.get(node_key(entry.node), last)),
    )


def select_top_candidate(scores: ScoreMap, order: Dict[int, int]) -> Optional[NodeScore]:
    ranked = rank_candidates(scores, order)
    if ranked and ranked[0].weighted_score > MIN_CANDIDATE_SCORE:
        return ranked[0]
    return None
