"""
Metadata extraction: title, author(s), dates and lead image, each through an
ordered chain of fallback strategies.
"""

from __future__ import annotations

from .author_extractor import AuthorExtractor, clean_author, parse_byline, split_authors
from .date_extractor import DateExtractor, parse_date
from .image_extractor import ImageExtractor
from .metadata_extractor import ArticleMetadata, MetadataExtractor
from .title_extractor import TitleExtractor, clean_title

__all__ = [
    "ArticleMetadata",
    "AuthorExtractor",
    "DateExtractor",
    "ImageExtractor",
    "MetadataExtractor",
    "TitleExtractor",
    "clean_author",
    "clean_title",
    "parse_byline",
    "parse_date",
    "split_authors",
]
