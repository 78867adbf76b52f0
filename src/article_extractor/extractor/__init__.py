"""
Article content extraction.

Pipeline stages, in order:
1. Metadata extraction on the untouched document
2. Preprocessing: noise, hidden elements, widgets and unlikely blocks removed
3. Paragraph scoring, propagation to ancestors and link-density refinement
4. Candidate selection and sibling merging
5. Cleanup of the selected content and relative URL resolution
"""

from .confidence_scorer import ConfidenceScorer
from .keywords import classify, is_blacklisted, is_whitelisted
from .manager import ArticleExtractor
from .postprocessor import Postprocessor
from .preprocessor import Preprocessor
from .protocols import PageFetcher
from .scorer import ContentScorer, NodeScore, ParagraphScore, ScoreMap, score_paragraph, sibling_threshold
from .siblings import MergeResult, SiblingMerger

__all__ = [
    "ArticleExtractor",
    "ConfidenceScorer",
    "ContentScorer",
    "MergeResult",
    "NodeScore",
    "PageFetcher",
    "ParagraphScore",
    "Postprocessor",
    "Preprocessor",
    "ScoreMap",
    "SiblingMerger",
    "classify",
    "is_blacklisted",
    "is_whitelisted",
    "score_paragraph",
    "sibling_threshold",
]
