"""
Cleanup of the selected content subtree.

Runs on a detached clone, never on the live document.
"""

from __future__ import annotations

import logging
from typing import Dict, FrozenSet

from bs4 import Comment, Tag

from article_extractor.dom import get_attribute, get_text, inner_html, remove_all, render_text, set_attribute, tag_name
from article_extractor.utils.url import resolve_url

logger = logging.getLogger(__name__)

RESIDUAL_TAGS = "script, style, noscript"

NOISE_PATTERNS: tuple[str, ...] = (
    "share",
    "social",
    "comment",
    "related",
    "recommend",
    "newsletter",
    "subscribe",
    "promo",
    "ad-",
    "advertisement",
)

ALLOWED_ATTRIBUTES: Dict[str, FrozenSet[str]] = {
    "a": frozenset({"href", "title"}),
    "img": frozenset({"src", "alt", "title", "width", "height"}),
}

PRESERVED_EMPTY_TAGS = frozenset({"br", "hr", "img"})

URL_ATTRIBUTES = (("a", "href"), ("img", "src"))


class Postprocessor:
    """Strips noise and presentation from extracted content."""

    def clean(self, root: Tag) -> Tag:
        remove_all(root.select(RESIDUAL_TAGS))
        for comment in root.find_all(string=lambda s: isinstance(s, Comment)):
            comment.extract()
        self.remove_noise(root)
        self.remove_empty_links(root)
        self.strip_attributes(root)
        self.remove_empty_elements(root)
        return root

    def remove_noise(self, root: Tag) -> None:
        removed = 0
        for pattern in NOISE_PATTERNS:
            removed += remove_all(root.select(f"[class*='{pattern}'], [id*='{pattern}']"))
        logger.debug("Removed %d noise elements", removed)

    def remove_empty_links(self, root: Tag) -> None:
        remove_all(a for a in root.find_all("a") if not get_text(a) and a.find("img") is None)

    def strip_attributes(self, root: Tag) -> None:
        for el in root.find_all(True):
            allowed = ALLOWED_ATTRIBUTES.get(tag_name(el), frozenset())
            el.attrs = {name: value for name, value in el.attrs.items() if name in allowed}

    def remove_empty_elements(self, root: Tag) -> int:
        """Remove elements without text or markup until a pass removes nothing."""
        total = 0
        while True:
            empty = [
                el
                for el in root.find_all(True)
                if tag_name(el) not in PRESERVED_EMPTY_TAGS and not inner_html(el).strip()
            ]
            if not empty:
                return total
            total += remove_all(empty)

    def resolve_urls(self, root: Tag, base_url: str) -> None:
        for name, attribute in URL_ATTRIBUTES:
            for el in root.find_all(name, attrs={attribute: True}):
                value = get_attribute(el, attribute)
                resolved = resolve_url(value, base_url)
                if resolved != value:
                    set_attribute(el, attribute, resolved)


def clean_html(root: Tag) -> str:
    return inner_html(root).strip()


def clean_text(root: Tag) -> str:
    return render_text(root)
