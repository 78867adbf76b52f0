"""DOM adapter over BeautifulSoup trees."""

from __future__ import annotations

from .document import (
    Document,
    children,
    class_and_id,
    clone,
    get_attribute,
    get_text,
    has_attribute,
    has_block_children,
    inner_html,
    is_attached,
    is_text_node,
    link_density,
    node_key,
    parent,
    remove,
    remove_all,
    remove_attribute,
    render_text,
    select,
    set_attribute,
    siblings,
    tag_name,
    text_length,
)
from .text import (
    BLOCK_ELEMENTS,
    TEXT_BREAK_ELEMENTS,
    count_commas,
    count_words,
    get_excerpt,
    normalize_text,
    normalize_text_preserve_newlines,
)

__all__ = [
    "BLOCK_ELEMENTS",
    "TEXT_BREAK_ELEMENTS",
    "Document",
    "children",
    "class_and_id",
    "clone",
    "count_commas",
    "count_words",
    "get_attribute",
    "get_excerpt",
    "get_text",
    "has_attribute",
    "has_block_children",
    "inner_html",
    "is_attached",
    "is_text_node",
    "link_density",
    "node_key",
    "normalize_text",
    "normalize_text_preserve_newlines",
    "parent",
    "remove",
    "remove_all",
    "remove_attribute",
    "render_text",
    "select",
    "set_attribute",
    "siblings",
    "tag_name",
    "text_length",
]
