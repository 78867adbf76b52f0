"""
Metadata Extractor

Coordinates the title, author, date and lead-image extractors over the
untouched document. A failing strategy never aborts extraction: its field
is left empty and a warning is logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional, Tuple, TypeVar

from bs4 import BeautifulSoup

from article_extractor.models import Image

from .author_extractor import AuthorExtractor, split_authors
from .date_extractor import DateExtractor
from .image_extractor import ImageExtractor
from .title_extractor import TitleExtractor

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class ArticleMetadata:
    """Metadata gathered before the document is mutated."""

    title: str = ""
    author: str = ""
    authors: Tuple[str, ...] = field(default_factory=tuple)
    published_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None
    lead_image: Optional[Image] = None


class MetadataExtractor:
    def __init__(self) -> None:
        self.title_extractor = TitleExtractor()
        self.author_extractor = AuthorExtractor()
        self.date_extractor = DateExtractor()
        self.image_extractor = ImageExtractor()

    def extract(self, soup: BeautifulSoup, base_url: str = "") -> ArticleMetadata:
        title = self._safe("title", lambda: self.title_extractor.extract(soup), "")
        author = self._safe("author", lambda: self.author_extractor.extract(soup), "")
        return ArticleMetadata(
            title=title,
            author=author,
            authors=tuple(split_authors(author)),
            published_at=self._safe("published_at", lambda: self.date_extractor.extract_published(soup), None),
            modified_at=self._safe("modified_at", lambda: self.date_extractor.extract_modified(soup), None),
            lead_image=self._safe("lead_image", lambda: self.image_extractor.extract(soup, base_url), None),
        )

    def _safe(self, name: str, strategy: Callable[[], T], default: T) -> T:
        try:
            return strategy()
        except Exception as e:
            logger.warning("Metadata extraction failed: field=%s error=%s", name, e)
            return default
