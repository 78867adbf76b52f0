"""
Thin query and mutation surface over a BeautifulSoup tree.

Nodes are plain ``bs4.Tag`` objects. Scores are keyed by ``node_key`` (object
identity) because the same element can be reached through several handles;
the owning ``Document`` keeps every node alive for the duration of a call.
"""

from __future__ import annotations

import copy
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import CData

from .text import BLOCK_ELEMENTS, TEXT_BREAK_ELEMENTS, WHITESPACE_RE, normalize_text, normalize_text_preserve_newlines

# Comments, doctypes and script/style strings are NavigableString subclasses
# that never count as visible text.
TEXT_TYPES = (NavigableString, CData)


class Document:
    """A parsed HTML document owned by one extraction call."""

    def __init__(self, html: str | bytes, parser: str = "lxml") -> None:
        self.soup = BeautifulSoup(html, parser)

    @property
    def root(self) -> BeautifulSoup:
        return self.soup

    def select(self, selector: str) -> List[Tag]:
        return self.soup.select(selector)

    def select_one(self, selector: str) -> Optional[Tag]:
        return self.soup.select_one(selector)

    def elements(self) -> List[Tag]:
        """All elements in document order."""
        return self.soup.find_all(True)

    def document_order(self) -> dict[int, int]:
        """Map ``node_key`` to the element's position in document order."""
        return {node_key(el): index for index, el in enumerate(self.elements())}

    def new_tag(self, name: str) -> Tag:
        return self.soup.new_tag(name)


def node_key(node: Tag) -> int:
    return id(node)


def is_text_node(node: object) -> bool:
    return type(node) in TEXT_TYPES


def tag_name(node: Tag) -> str:
    return (node.name or "").lower()


def get_attribute(node: Tag, name: str, default: str = "") -> str:
    """Attribute value as a string; multi-valued attributes are space-joined."""
    value = node.get(name)
    if value is None:
        return default
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def has_attribute(node: Tag, name: str) -> bool:
    return node.has_attr(name)


def set_attribute(node: Tag, name: str, value: str) -> None:
    node[name] = value


def remove_attribute(node: Tag, name: str) -> None:
    if node.has_attr(name):
        del node[name]


def class_and_id(node: Tag) -> tuple[str, str]:
    return get_attribute(node, "class"), get_attribute(node, "id")


def children(node: Tag) -> List[Tag]:
    """Element children, text nodes excluded."""
    return [child for child in node.children if isinstance(child, Tag)]


def parent(node: Tag) -> Optional[Tag]:
    """Parent element, or None at the top of the tree."""
    up = node.parent
    if up is None or isinstance(up, BeautifulSoup):
        return None
    return up


def siblings(node: Tag) -> List[Tag]:
    """Element children of the node's parent, the node included, in order."""
    up = node.parent
    if up is None:
        return [node]
    return children(up)


def clone(node: Tag) -> Tag:
    """Deep copy detached from any tree."""
    return copy.copy(node)


def remove(node: Tag) -> None:
    node.extract()


def remove_all(nodes: Iterable[Tag]) -> int:
    removed = 0
    for node in nodes:
        if node.parent is not None:
            node.extract()
            removed += 1
    return removed


def is_attached(node: Tag) -> bool:
    """True while the node is still reachable from its document root."""
    top: Tag = node
    for ancestor in node.parents:
        top = ancestor
    return isinstance(top, BeautifulSoup)


def select(node: Tag, selector: str) -> List[Tag]:
    return node.select(selector)


def get_text(node: Tag) -> str:
    """Normalized text content."""
    return normalize_text(node.get_text())


def text_length(node: Tag) -> int:
    """Length of the normalized text in codepoints."""
    return len(get_text(node))


def link_density(node: Tag) -> float:
    """Share of the node's text that sits inside anchors, in [0, 1]."""
    length = text_length(node)
    if length == 0:
        return 0.0
    link_length = sum(text_length(a) for a in node.find_all("a"))
    return min(link_length / length, 1.0)


def has_block_children(node: Tag) -> bool:
    return any(tag_name(child) in BLOCK_ELEMENTS for child in children(node))


def inner_html(node: Tag) -> str:
    return node.decode_contents()


_BLOCK_END = object()


def render_text(node: Tag) -> str:
    """
    Plain text with paragraph structure.

    Block elements and table cells are separated by blank lines, ``<br>`` becomes a line break
    and whitespace inside text runs is collapsed except under ``<pre>``.
    """
    parts: List[str] = []
    pending: list = [(child, False) for child in reversed(node.contents)]
    while pending:
        item, preformatted = pending.pop()
        if item is _BLOCK_END:
            parts.append("\n")
            continue
        if isinstance(item, Tag):
            name = tag_name(item)
            if name == "br":
                parts.append("\n")
                continue
            if name in TEXT_BREAK_ELEMENTS:
                parts.append("\n")
                pending.append((_BLOCK_END, False))
            inner_pre = preformatted or name == "pre"
            pending.extend((child, inner_pre) for child in reversed(item.contents))
        elif is_text_node(item):
            text = str(item)
            parts.append(text if preformatted else WHITESPACE_RE.sub(" ", text))
    return normalize_text_preserve_newlines("".join(parts))
