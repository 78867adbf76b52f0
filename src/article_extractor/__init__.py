"""
article_extractor - main-article content and metadata extraction from HTML.
"""

from __future__ import annotations

from typing import Optional

from .config import Config, ExtractionSettings, FetchSettings
from .errors import (
    ContentTooLargeError,
    ContentTooShortError,
    ExtractionError,
    FetchError,
    FetchTimeoutError,
    InvalidURLError,
    NoContentError,
    ParseError,
)
from .extractor import ArticleExtractor
from .models import Article, Image

__version__ = "0.1.0"


def extract(html: str | bytes, base_url: str = "", settings: Optional[ExtractionSettings] = None) -> Article:
    """Extract the article from ``html`` with default or given settings."""
    return ArticleExtractor(settings=settings).extract(html, base_url)


async def extract_from_url(url: str, config: Optional[Config] = None) -> Article:
    """Fetch ``url`` and extract its article."""
    extractor = config.extractor() if config is not None else ArticleExtractor()
    return await extractor.extract_from_url(url)


__all__ = [
    "Article",
    "ArticleExtractor",
    "Config",
    "ContentTooLargeError",
    "ContentTooShortError",
    "ExtractionError",
    "ExtractionSettings",
    "FetchError",
    "FetchSettings",
    "FetchTimeoutError",
    "Image",
    "InvalidURLError",
    "NoContentError",
    "ParseError",
    "extract",
    "extract_from_url",
    "__version__",
]
