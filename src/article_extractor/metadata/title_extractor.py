"""
Title Extractor - ordered fallback chain over meta tags, structured data and headings.
"""

from __future__ import annotations

import logging
from typing import Callable, List

from bs4 import BeautifulSoup

from article_extractor.dom import normalize_text

from .structured_data_parser import SchemaOrgParser, first_meta_content, first_text

logger = logging.getLogger(__name__)

ARTICLE_HEADING_SELECTOR = "article h1, [role='article'] h1, .article h1, .post h1"

TITLE_SEPARATORS: tuple[str, ...] = (" | ", " - ", " :: ", " / ", " » ", " — ", " · ")


def clean_title(title: str) -> str:
    """
    Collapse whitespace and drop a site name joined by a separator.

    For each separator, split at its last occurrence; when one side is more
    than twice as long as the other only the longer side is kept.
    """
    title = normalize_text(title)
    for separator in TITLE_SEPARATORS:
        index = title.rfind(separator)
        if index == -1:
            continue
        before = title[:index]
        after = title[index + len(separator) :]
        if len(before) > len(after) * 2:
            title = before.strip()
        elif len(after) > len(before) * 2:
            title = after.strip()
    return title


class TitleExtractor:
    def __init__(self) -> None:
        self.strategies: List[Callable[[BeautifulSoup], str]] = [
            lambda soup: first_meta_content(soup, ("og:title",)),
            lambda soup: first_meta_content(soup, ("twitter:title",)),
            lambda soup: SchemaOrgParser.lookup(soup, ("headline",)),
            lambda soup: SchemaOrgParser.itemprop(soup, "headline"),
            lambda soup: first_text(soup, ARTICLE_HEADING_SELECTOR),
            lambda soup: first_text(soup, "h1"),
            lambda soup: first_text(soup, "title"),
        ]

    def extract(self, soup: BeautifulSoup) -> str:
        for strategy in self.strategies:
            title = strategy(soup)
            if title:
                return clean_title(title)
        return ""
