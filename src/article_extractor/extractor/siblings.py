"""
Absorbs siblings of the top candidate that read as continuation content.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from bs4 import Tag

from article_extractor.dom import Document, clone, link_density, siblings, tag_name, text_length

from .scorer import PARAGRAPH_SELECTOR, node_weight, score_paragraph, sibling_threshold

logger = logging.getLogger(__name__)

PARAGRAPH_MAX_LINK_DENSITY = 0.2
SIBLING_MAX_LINK_DENSITY = 0.25


@dataclass
class MergeResult:
    """Detached content root plus the siblings merged into it."""

    content: Tag
    merged: List[Tag] = field(default_factory=list)


class SiblingMerger:
    def __init__(self, min_paragraph_length: int = 25) -> None:
        self.min_paragraph_length = min_paragraph_length

    def should_merge(self, sibling: Tag, threshold: float) -> bool:
        if tag_name(sibling) == "p":
            return (
                text_length(sibling) >= self.min_paragraph_length
                and link_density(sibling) < PARAGRAPH_MAX_LINK_DENSITY
            )
        if node_weight(sibling) < 0 or link_density(sibling) > SIBLING_MAX_LINK_DENSITY:
            return False
        paragraph_score = sum(
            score_paragraph(p, self.min_paragraph_length) for p in sibling.select(PARAGRAPH_SELECTOR)
        )
        return paragraph_score >= threshold

    def merge(self, document: Document, candidate: Tag, top_score: float) -> MergeResult:
        """
        Clone the candidate, or a new ``div`` holding clones of the candidate
        and every qualifying sibling in sibling order.
        """
        threshold = sibling_threshold(top_score)
        kept: List[Tag] = []
        merged: List[Tag] = []
        for sibling in siblings(candidate):
            if sibling is candidate:
                kept.append(sibling)
            elif self.should_merge(sibling, threshold):
                kept.append(sibling)
                merged.append(sibling)

        if not merged:
            return MergeResult(content=clone(candidate))

        container = document.new_tag("div")
        for node in kept:
            container.append(clone(node))
        logger.debug("Merged %d siblings (threshold %.2f)", len(merged), threshold)
        return MergeResult(content=container, merged=merged)
