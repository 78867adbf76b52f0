"""
Codepoint-aware text helpers shared by the scorer, cleaner and orchestrator.
"""

from __future__ import annotations

import re

WHITESPACE_RE = re.compile(r"\s+")
EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")

COMMAS = frozenset({",", "，"})
SENTENCE_ENDS = frozenset({".", "。"})
ELLIPSIS = "..."

BLOCK_ELEMENTS = frozenset(
    {
        "address", "article", "aside", "blockquote", "div", "dl", "fieldset",
        "figcaption", "figure", "footer", "form", "h1", "h2", "h3", "h4", "h5",
        "h6", "header", "hgroup", "hr", "li", "main", "nav", "noscript", "ol",
        "p", "pre", "section", "table", "ul",
    }
)

# Elements that end a run of rendered text besides block elements.
TEXT_BREAK_ELEMENTS = BLOCK_ELEMENTS | frozenset({"caption", "dd", "dt", "td", "th", "tr"})


def normalize_text(text: str) -> str:
    """Collapse whitespace runs to a single space and trim."""
    return WHITESPACE_RE.sub(" ", text).strip()


def normalize_text_preserve_newlines(text: str) -> str:
    """Normalize each line on its own and keep at most one blank line between paragraphs."""
    lines = [normalize_text(line) for line in text.split("\n")]
    return EXCESS_NEWLINES_RE.sub("\n\n", "\n".join(lines)).strip()


def count_commas(text: str) -> int:
    return sum(1 for ch in text if ch in COMMAS)


def count_words(text: str) -> int:
    return len(text.split())


def get_excerpt(text: str, max_length: int) -> str:
    """
    Shorten ``text`` to about ``max_length`` codepoints.

    Prefers ending on a sentence boundary in the second half of the window,
    then on a word boundary (with an ellipsis), then cuts hard.
    """
    text = normalize_text(text)
    if len(text) <= max_length:
        return text

    floor = max_length // 2
    for i in range(max_length - 1, floor - 1, -1):
        if text[i] in SENTENCE_ENDS:
            return text[: i + 1]

    for i in range(max_length - 1, floor - 1, -1):
        if text[i].isspace():
            return text[:i] + ELLIPSIS

    return text[: max(max_length - len(ELLIPSIS), 0)] + ELLIPSIS
