"""
Protocol definitions for extractor collaborators.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PageFetcher(Protocol):
    """Fetches a page and returns its HTML decoded to text."""

    async def fetch(self, url: str) -> str:
        """Return the page body, raising an ``ExtractionError`` on failure."""
        ...
