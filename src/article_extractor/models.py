"""
Data models for extraction results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Tuple


@dataclass(slots=True, frozen=True)
class Image:
    """A lead image reference."""

    url: str
    width: int = 0
    height: int = 0
    alt: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"url": self.url}
        if self.width:
            data["width"] = self.width
        if self.height:
            data["height"] = self.height
        if self.alt:
            data["alt"] = self.alt
        return data


@dataclass(slots=True, frozen=True)
class Article:
    """Result of article extraction."""

    title: str
    content: str
    text_content: str
    excerpt: str
    author: str = ""
    published_at: datetime | None = None
    lead_image: Image | None = None
    url: str = ""
    word_count: int = 0
    score: float = 0.0
    confidence: float = 0.0
    authors: Tuple[str, ...] = field(default_factory=tuple)
    modified_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate the result."""
        if not (0.0 <= self.confidence <= 1.0):
            raise ValueError("Confidence must be between 0.0 and 1.0")
        if self.word_count < 0:
            raise ValueError("Word count must not be negative")

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready mapping; empty optional fields are omitted."""
        data: Dict[str, Any] = {
            "title": self.title,
            "content": self.content,
            "textContent": self.text_content,
            "excerpt": self.excerpt,
        }
        if self.author:
            data["author"] = self.author
        if self.authors:
            data["authors"] = list(self.authors)
        if self.published_at is not None:
            data["publishedAt"] = self.published_at.isoformat()
        if self.modified_at is not None:
            data["modifiedAt"] = self.modified_at.isoformat()
        if self.lead_image is not None:
            data["leadImage"] = self.lead_image.to_dict()
        if self.url:
            data["url"] = self.url
        data["wordCount"] = self.word_count
        data["score"] = self.score
        data["confidence"] = self.confidence
        return data
