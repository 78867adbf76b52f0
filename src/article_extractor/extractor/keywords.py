"""
Keyword classification of class and id attributes.

The patterns are compiled once at import and only read afterwards, so they
can be shared by concurrent extraction calls.
"""

from __future__ import annotations

import re
from typing import Iterable, Pattern

WHITELIST_WEIGHT = 25
BLACKLIST_WEIGHT = -25

WHITELIST_KEYWORDS: tuple[str, ...] = (
    "article", "body", "content", "entry", "main", "page", "post", "text",
    "blog", "story", "hentry", "h-entry", "entry-content", "article-body",
    "article-content",
)

BLACKLIST_KEYWORDS: tuple[str, ...] = (
    "ad", "advertisement", "banner", "breadcrumbs", "combx", "comment",
    "community", "cover-wrap", "disqus", "extra", "footer", "gdpr", "header",
    "legends", "menu", "nav", "related", "remark", "replies", "rss", "shoutbox",
    "sidebar", "skyscraper", "social", "sponsor", "supplemental", "widget",
    "agegate", "pagination", "pager", "popup", "print", "archive",
    "author-info", "author-box", "bio", "carousel", "gallery", "modal",
    "navigation", "newsletter", "promo", "share", "subscribe", "tags",
    "toolbar", "trending",
    # embedded assistant and recommendation widgets
    "dd-widget", "deeperdive", "ai-widget", "chatbot", "ask-ai", "genai",
    "ai-assistant", "ai-answer",
)


def _build_pattern(keywords: Iterable[str]) -> Pattern[str]:
    return re.compile("|".join(re.escape(k) for k in keywords), re.IGNORECASE)


WHITELIST_PATTERN = _build_pattern(WHITELIST_KEYWORDS)
BLACKLIST_PATTERN = _build_pattern(BLACKLIST_KEYWORDS)


def is_whitelisted(value: str) -> bool:
    return bool(value) and WHITELIST_PATTERN.search(value) is not None


def is_blacklisted(value: str) -> bool:
    return bool(value) and BLACKLIST_PATTERN.search(value) is not None


def _attribute_weight(value: str) -> int:
    weight = 0
    if is_whitelisted(value):
        weight += WHITELIST_WEIGHT
    if is_blacklisted(value):
        weight += BLACKLIST_WEIGHT
    return weight


def classify(class_name: str, element_id: str) -> int:
    """
    Signed weight of a class/id pair.

    Class and id contribute independently: +25 for a whitelist match and
    -25 for a blacklist match each, so the result lies in [-50, 50].
    Matching is by substring, "article-sidebar" hits both lists.
    """
    return _attribute_weight(class_name) + _attribute_weight(element_id)
