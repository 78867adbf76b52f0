"""
Destructive cleanup of the whole document before scoring.
"""

from __future__ import annotations

import logging
import re
from typing import List

from bs4 import Tag

from article_extractor.dom import (
    Document,
    class_and_id,
    get_attribute,
    get_text,
    has_block_children,
    is_attached,
    is_text_node,
    link_density,
    node_key,
    remove,
    remove_all,
    tag_name,
    text_length,
)

from .keywords import is_blacklisted, is_whitelisted

logger = logging.getLogger(__name__)

REMOVE_TAGS = "script, style, noscript, iframe, object, embed, applet, link, meta"
UNLIKELY_TAGS = "footer, header, nav, aside, menu, menuitem"
PROTECTED_TAGS = frozenset({"body", "html", "article", "main"})

HIDDEN_STYLE_RE = re.compile(r"display\s*:\s*none|visibility\s*:\s*hidden", re.IGNORECASE)

WIDGET_CLASSES: tuple[str, ...] = (
    "dd-widget-wrapper",
    "dd-widget-input-wrapper",
    "deeperdive-widget",
    "ai-chatbot",
    "chatbot-container",
    "ai-assistant-widget",
)
WIDGET_ID_RE = re.compile(
    r"(^|[\s\"'-])"
    r"(dd-widget|deeperdive|ai-widget|chatbot-widget|ask-ai|genai-widget|ai-assistant|ai-answer|ai-summary)"
    r"([\s\"'-]|$)",
    re.IGNORECASE,
)

# Blacklisted blocks survive when they are long and mostly unlinked.
UNLIKELY_MIN_TEXT_LENGTH = 200
UNLIKELY_MAX_LINK_DENSITY = 0.5

ARTICLE_BODY_SELECTOR = "[data-articlebody]"
ARTICLE_BODY_MIN_TEXT = 200
ARTICLE_BODY_MIN_RUN = 30
ARTICLE_BODY_MIN_RUNS = 3
AD_NETWORK_MARKERS: tuple[str, ...] = ("taboola", "trc_", "_ad", "mgid")


class Preprocessor:
    """Strips noise from a document in place, then shapes loose text into paragraphs."""

    def process(self, document: Document) -> None:
        self.remove_tags(document)
        self.remove_hidden(document)
        self.remove_widgets(document)
        self.strip_unlikely_candidates(document)
        self.convert_article_body(document)
        self.convert_to_paragraphs(document)
        self.split_line_breaks(document)

    def remove_tags(self, document: Document) -> None:
        removed = remove_all(document.select(REMOVE_TAGS))
        logger.debug("Removed %d non-content tags", removed)

    def remove_hidden(self, document: Document) -> None:
        hidden = [el for el in document.select("[style]") if HIDDEN_STYLE_RE.search(get_attribute(el, "style"))]
        hidden += document.select("[hidden]")
        hidden += document.select("[aria-hidden='true']")
        removed = remove_all(hidden)
        logger.debug("Removed %d hidden elements", removed)

    def remove_widgets(self, document: Document) -> None:
        targets: List[Tag] = []
        for widget_class in WIDGET_CLASSES:
            targets += document.select(f".{widget_class}")
        for el in document.select("[id]"):
            if tag_name(el) in PROTECTED_TAGS:
                continue
            if WIDGET_ID_RE.search(get_attribute(el, "id")):
                targets.append(el)
        removed = remove_all(targets)
        logger.debug("Removed %d widgets", removed)

    def strip_unlikely_candidates(self, document: Document) -> None:
        structural = [
            el
            for el in document.select(UNLIKELY_TAGS)
            if not any(is_whitelisted(value) for value in class_and_id(el))
        ]
        removed = remove_all(structural)

        for el in document.elements():
            if tag_name(el) in PROTECTED_TAGS or not is_attached(el):
                continue
            class_name, element_id = class_and_id(el)
            combined = f"{class_name} {element_id}"
            if is_whitelisted(combined) or not is_blacklisted(combined):
                continue
            if text_length(el) < UNLIKELY_MIN_TEXT_LENGTH or link_density(el) > UNLIKELY_MAX_LINK_DENSITY:
                remove(el)
                removed += 1
        logger.debug("Removed %d unlikely candidates", removed)

    def convert_article_body(self, document: Document) -> None:
        """Rebuild text-node runs inside ``data-articlebody`` containers as paragraphs."""
        for body in document.select(ARTICLE_BODY_SELECTOR):
            if len(get_text(body)) <= ARTICLE_BODY_MIN_TEXT or body.find("p") is not None:
                continue
            for container in body.find_all("div"):
                runs = [
                    child
                    for child in container.children
                    if is_text_node(child) and len(child.strip()) > ARTICLE_BODY_MIN_RUN
                ]
                if len(runs) < ARTICLE_BODY_MIN_RUNS:
                    continue
                self._rebuild_runs(document, container)

    def _rebuild_runs(self, document: Document, container: Tag) -> None:
        rebuilt: list = []
        for child in list(container.contents):
            child.extract()
            if is_text_node(child):
                text = child.strip()
                if len(text) > ARTICLE_BODY_MIN_RUN:
                    paragraph = document.new_tag("p")
                    paragraph.string = text
                    rebuilt.append(paragraph)
            elif isinstance(child, Tag) and _is_ad_network(child):
                continue
            else:
                rebuilt.append(child)
        for child in rebuilt:
            container.append(child)

    def convert_to_paragraphs(self, document: Document) -> None:
        """Wrap the content of text-only containers in an implicit paragraph."""
        converted: set[int] = set()
        for el in document.select("div, span"):
            if any(node_key(ancestor) in converted for ancestor in el.parents):
                continue
            if has_block_children(el) or not get_text(el):
                continue
            _wrap_contents(document, el)
            converted.add(node_key(el))
        logger.debug("Converted %d containers to paragraphs", len(converted))

    def split_line_breaks(self, document: Document) -> None:
        """Turn ``<br>``-separated runs inside divs into separate paragraphs."""
        for div in document.select("div"):
            host = _line_break_host(div)
            if host is None:
                continue
            segments: List[list] = [[]]
            for child in list(host.contents):
                child.extract()
                if isinstance(child, Tag) and tag_name(child) == "br":
                    segments.append([])
                else:
                    segments[-1].append(child)
            for segment in segments:
                has_elements = any(isinstance(node, Tag) for node in segment)
                if not has_elements and not "".join(str(node) for node in segment if is_text_node(node)).strip():
                    continue
                paragraph = document.new_tag("p")
                for node in segment:
                    paragraph.append(node)
                host.append(paragraph)
            if host is not div:
                host.unwrap()


def _is_ad_network(el: Tag) -> bool:
    class_name = get_attribute(el, "class")
    return any(marker in class_name for marker in AD_NETWORK_MARKERS)


def _wrap_contents(document: Document, el: Tag) -> None:
    paragraph = document.new_tag("p")
    for child in list(el.contents):
        paragraph.append(child)
    el.append(paragraph)


def _line_break_host(div: Tag) -> Tag | None:
    """The div itself, or its lone implicit paragraph, when it has direct ``<br>`` children."""
    elements = [child for child in div.children if isinstance(child, Tag)]
    host = div
    if len(elements) == 1 and tag_name(elements[0]) == "p":
        loose_text = any(is_text_node(child) and child.strip() for child in div.children)
        if not loose_text:
            host = elements[0]
    if host.find("br", recursive=False) is None:
        return None
    return host
