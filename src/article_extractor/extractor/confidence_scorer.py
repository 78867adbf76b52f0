"""
Extraction Confidence Scorer

Turns the winning candidate's score, the text's word count and the
candidate's link density into a [0, 1] quality estimate.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from .scorer import NodeScore

logger = logging.getLogger(__name__)

# (exclusive lower bound, contribution), highest bound first
SCORE_BUCKETS: Sequence[Tuple[float, float]] = ((100.0, 0.4), (50.0, 0.3), (20.0, 0.2))
SCORE_FLOOR = 0.1
WORD_COUNT_BUCKETS: Sequence[Tuple[int, float]] = ((500, 0.3), (200, 0.2), (100, 0.1))
# (exclusive upper bound, contribution), lowest bound first
LINK_DENSITY_BUCKETS: Sequence[Tuple[float, float]] = ((0.1, 0.2), (0.2, 0.1))
DOMINANCE_RATIO = 2.0
DOMINANCE_BONUS = 0.1


class ConfidenceScorer:
    """
    Additive confidence heuristic.

    Each signal falls into a bucket with a fixed contribution:
    - raw content score of the top candidate
    - word count of the cleaned text
    - link density of the top candidate
    - dominance over the runner-up candidate
    """

    def score_component(self, score: float) -> float:
        for bound, value in SCORE_BUCKETS:
            if score > bound:
                return value
        return SCORE_FLOOR

    def word_count_component(self, word_count: int) -> float:
        for bound, value in WORD_COUNT_BUCKETS:
            if word_count > bound:
                return value
        return 0.0

    def link_density_component(self, density: float) -> float:
        for bound, value in LINK_DENSITY_BUCKETS:
            if density < bound:
                return value
        return 0.0

    def dominance_component(self, score: float, runner_up: Optional[NodeScore]) -> float:
        if runner_up is not None and score > runner_up.content_score * DOMINANCE_RATIO:
            return DOMINANCE_BONUS
        return 0.0

    def calculate_confidence(
        self, top: NodeScore, runner_up: Optional[NodeScore], word_count: int
    ) -> float:
        total = (
            self.score_component(top.content_score)
            + self.word_count_component(word_count)
            + self.link_density_component(top.link_density)
            + self.dominance_component(top.content_score, runner_up)
        )
        confidence = max(0.0, min(1.0, total))
        logger.debug("Confidence %.2f (score=%.2f, words=%d)", confidence, top.content_score, word_count)
        return confidence
