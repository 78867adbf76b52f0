"""
Structured Data Parser

Lookups over meta tags, JSON-LD blocks and schema.org microdata shared by
the title, author, date and image extractors.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

from bs4 import BeautifulSoup, Tag

from article_extractor.dom import get_attribute, normalize_text

logger = logging.getLogger(__name__)

JSON_LD_SELECTOR = "script[type='application/ld+json']"

Resolver = Callable[[Any], str]


def meta_content(soup: BeautifulSoup, key: str) -> str:
    """
    Content of ``<meta property=key>``, else of ``<meta name=key>``.

    When several tags match, the last non-empty ``content`` wins.
    """
    for attribute in ("property", "name"):
        value = ""
        for tag in soup.find_all("meta", attrs={attribute: key}):
            content = get_attribute(tag, "content").strip()
            if content:
                value = content
        if value:
            return value
    return ""


def first_meta_content(soup: BeautifulSoup, keys: Sequence[str]) -> str:
    for key in keys:
        value = meta_content(soup, key)
        if value:
            return value
    return ""


def first_text(soup: BeautifulSoup, selector: str) -> str:
    """Normalized text of the first match of ``selector`` with any text."""
    for el in soup.select(selector):
        text = normalize_text(el.get_text())
        if text:
            return text
    return ""


def as_text(value: Any) -> str:
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, list):
        for item in value:
            text = as_text(item)
            if text:
                return text
    return ""


def as_name(value: Any) -> str:
    """Name of a schema.org Person/Organization given as string, object or list."""
    if isinstance(value, dict):
        return as_name(value.get("name"))
    if isinstance(value, list):
        for item in value:
            name = as_name(item)
            if name:
                return name
        return ""
    return as_text(value)


def find_key(data: Any, key: str) -> Any:
    """Depth-first search for the first non-empty value stored under ``key``."""
    if isinstance(data, dict):
        value = data.get(key)
        if value not in (None, "", [], {}):
            return value
        children = data.values()
    elif isinstance(data, list):
        children = data
    else:
        return None
    for child in children:
        found = find_key(child, key)
        if found is not None:
            return found
    return None


@dataclass(slots=True, frozen=True)
class JsonLdBlock:
    """One ``application/ld+json`` script, parsed when it is valid JSON."""

    raw: str
    data: Any = None
    valid: bool = False

    def lookup(self, key: str, resolve: Resolver, nested_name: bool = False) -> str:
        if self.valid:
            return resolve(find_key(self.data, key))
        # Malformed JSON: scan the raw text instead.
        match = re.search(rf'"{re.escape(key)}"\s*:\s*"([^"]+)"', self.raw)
        if match:
            return match.group(1).strip()
        if nested_name:
            match = re.search(rf'"{re.escape(key)}"[\s\S]*?"name"\s*:\s*"([^"]+)"', self.raw)
            if match:
                return match.group(1).strip()
        return ""


class SchemaOrgParser:
    """Parser for Schema.org structured data."""

    @staticmethod
    def parse_json_ld(soup: BeautifulSoup) -> List[JsonLdBlock]:
        blocks: List[JsonLdBlock] = []
        for script in soup.select(JSON_LD_SELECTOR):
            raw = script.get_text().strip()
            if not raw:
                continue
            try:
                blocks.append(JsonLdBlock(raw=raw, data=json.loads(raw), valid=True))
            except json.JSONDecodeError as e:
                logger.debug("Invalid JSON-LD, falling back to text scan: %s", e)
                blocks.append(JsonLdBlock(raw=raw))
        return blocks

    @classmethod
    def lookup(
        cls,
        soup: BeautifulSoup,
        keys: Sequence[str],
        resolve: Resolver = as_text,
        nested_name: bool = False,
    ) -> str:
        """First non-empty value for ``keys`` (in order) in the first block that has one."""
        for block in cls.parse_json_ld(soup):
            for key in keys:
                value = block.lookup(key, resolve, nested_name=nested_name)
                if value:
                    return value
        return ""

    @staticmethod
    def itemprop(soup: BeautifulSoup, name: str, attributes: Sequence[str] = ()) -> str:
        """
        Value of the first ``[itemprop=name]`` element that has one.

        Each listed attribute is consulted before the element's text; an
        attribute that is present wins even when it is empty.
        """
        for el in soup.select(f"[itemprop='{name}']"):
            value = _attribute_or_text(el, attributes)
            if value:
                return value
        return ""


def _attribute_or_text(el: Tag, attributes: Sequence[str]) -> str:
    for attribute in attributes:
        if el.has_attr(attribute):
            return get_attribute(el, attribute).strip()
    return normalize_text(el.get_text())


def safe_int(value: Optional[str]) -> int:
    """Leading decimal digits of ``value`` as an int, 0 when there are none."""
    match = re.match(r"\s*(\d+)", value or "")
    return int(match.group(1)) if match else 0
