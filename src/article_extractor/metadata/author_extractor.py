"""
Author Extractor - Multi-Strategy Author Identification

Tries meta tags, structured data, common author selectors and finally
free-form byline text.
"""

from __future__ import annotations

import logging
import re
from typing import List

from bs4 import BeautifulSoup

from article_extractor.dom import normalize_text

from .structured_data_parser import SchemaOrgParser, as_name, first_meta_content

logger = logging.getLogger(__name__)

AUTHOR_SELECTORS: tuple[str, ...] = (
    ".author-name",
    ".author",
    ".byline-name",
    ".byline__name",
    "[rel='author']",
    ".entry-author-name",
    ".post-author-name",
    ".article-author",
    ".article__author",
    ".author__name",
    "a.author",
    "span.author",
)
MAX_AUTHOR_LENGTH = 100

BYLINE_SELECTORS: tuple[str, ...] = (".byline", ".by-line", ".post-byline", ".article-byline", ".meta-author")
BYLINE_RE = re.compile(r"^\s*by\s+(.+?)\s*$", re.IGNORECASE)
BYLINE_DELIMITERS: tuple[str, ...] = (",", "|", "·", " on ", " - ")

AUTHOR_PREFIXES: tuple[str, ...] = ("By ", "by ", "BY ", "Written by ", "Author: ", "Posted by ")

AUTHOR_SEPARATORS: tuple[str, ...] = (" and ", ", ", " & ")


def strip_prefix(text: str) -> str:
    for prefix in AUTHOR_PREFIXES:
        if text.startswith(prefix):
            return text[len(prefix) :]
    return text


def clean_author(author: str) -> str:
    return strip_prefix(normalize_text(author)).strip()


def parse_byline(text: str) -> str:
    """Name from byline text such as "By Jane Doe, Staff Writer"."""
    text = text.strip()
    match = BYLINE_RE.match(text)
    name = match.group(1) if match else strip_prefix(text)
    for delimiter in BYLINE_DELIMITERS:
        index = name.find(delimiter)
        if index != -1:
            name = name[:index]
    return name.strip()


def split_authors(author: str) -> List[str]:
    """Split on the first separator present, in preference order."""
    if not author:
        return []
    for separator in AUTHOR_SEPARATORS:
        if separator in author:
            return [part.strip() for part in author.split(separator) if part.strip()]
    return [author]


class AuthorExtractor:
    def extract(self, soup: BeautifulSoup) -> str:
        for strategy in (
            self._from_meta,
            self._from_structured_data,
            self._from_selectors,
            self._from_byline,
        ):
            author = strategy(soup)
            if author:
                return clean_author(author)
        return ""

    def extract_all(self, soup: BeautifulSoup) -> List[str]:
        return split_authors(self.extract(soup))

    def _from_meta(self, soup: BeautifulSoup) -> str:
        return first_meta_content(soup, ("author", "article:author"))

    def _from_structured_data(self, soup: BeautifulSoup) -> str:
        author = SchemaOrgParser.lookup(soup, ("author", "creator"), resolve=as_name, nested_name=True)
        if author:
            return author
        for el in soup.select("[itemprop='author']"):
            name_el = el.select_one("[itemprop='name']")
            name = normalize_text((name_el or el).get_text())
            if name:
                return name
        return ""

    def _from_selectors(self, soup: BeautifulSoup) -> str:
        for selector in AUTHOR_SELECTORS:
            el = soup.select_one(selector)
            if el is None:
                continue
            text = normalize_text(el.get_text())
            if text and len(text) < MAX_AUTHOR_LENGTH:
                return text
        return ""

    def _from_byline(self, soup: BeautifulSoup) -> str:
        for selector in BYLINE_SELECTORS:
            el = soup.select_one(selector)
            if el is None:
                continue
            name = parse_byline(el.get_text())
            if name:
                return name
        return ""
