"""
Date Extractor - publication and modification timestamps.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Iterator, Optional

from bs4 import BeautifulSoup

from article_extractor.dom import get_attribute

from .structured_data_parser import SchemaOrgParser, first_text, meta_content

logger = logging.getLogger(__name__)

PUBLISHED_META_KEYS: tuple[str, ...] = ("article:published_time", "datePublished", "date", "DC.date")
MODIFIED_META_KEYS: tuple[str, ...] = ("article:modified_time", "dateModified")

DATE_SELECTORS: tuple[str, ...] = (
    ".post-date",
    ".entry-date",
    ".article-date",
    ".published-date",
    ".publish-date",
    ".date-published",
    ".meta-date",
    ".timestamp",
    "[class*='date']",
)

DATE_FORMATS: tuple[str, ...] = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%d/%m/%Y",
)

TRAILING_ZONE_RE = re.compile(r"\s+[A-Z]{3,4}$")


def _try_formats(value: str) -> Optional[datetime]:
    for fmt in DATE_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    return None


def parse_date(value: str) -> Optional[datetime]:
    """
    Parse a date string against the known formats.

    A trailing zone abbreviation ("EST", "CEST") is dropped for one more try.
    Naive results are taken as UTC.
    """
    value = value.strip()
    if not value:
        return None
    parsed = _try_formats(value)
    if parsed is None:
        stripped = TRAILING_ZONE_RE.sub("", value)
        if stripped != value:
            parsed = _try_formats(stripped)
    return parsed


class DateExtractor:
    def extract_published(self, soup: BeautifulSoup) -> Optional[datetime]:
        for candidate in self._published_candidates(soup):
            parsed = parse_date(candidate)
            if parsed is not None:
                return parsed
        return None

    def extract_modified(self, soup: BeautifulSoup) -> Optional[datetime]:
        for candidate in self._modified_candidates(soup):
            parsed = parse_date(candidate)
            if parsed is not None:
                return parsed
        return None

    def _published_candidates(self, soup: BeautifulSoup) -> Iterator[str]:
        for key in PUBLISHED_META_KEYS:
            yield meta_content(soup, key)
        yield SchemaOrgParser.lookup(soup, ("datePublished", "dateCreated"))
        yield SchemaOrgParser.itemprop(soup, "datePublished", ("content", "datetime"))
        for el in soup.select("time[datetime]"):
            yield get_attribute(el, "datetime")
        for selector in DATE_SELECTORS:
            yield first_text(soup, selector)

    def _modified_candidates(self, soup: BeautifulSoup) -> Iterator[str]:
        for key in MODIFIED_META_KEYS:
            yield meta_content(soup, key)
        yield SchemaOrgParser.lookup(soup, ("dateModified",))
        yield SchemaOrgParser.itemprop(soup, "dateModified", ("content", "datetime"))
