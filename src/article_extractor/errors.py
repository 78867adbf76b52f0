"""
Exception hierarchy for article extraction.

Every error records the operation that failed (``parse``, ``validate``,
``fetch`` or ``extract``) and, when one is known, the source URL.
"""

from __future__ import annotations


class ExtractionError(Exception):
    """Base class for all extraction failures."""

    default_message = "extraction failed"

    def __init__(self, op: str, url: str = "", message: str | None = None) -> None:
        self.op = op
        self.url = url
        self.message = message or self.default_message
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.url:
            return f"{self.op} [{self.url}]: {self.message}"
        return f"{self.op}: {self.message}"


class ParseError(ExtractionError):
    """Raised when the HTML cannot be parsed."""

    default_message = "invalid HTML content"


class NoContentError(ExtractionError):
    """Raised when no candidate survives scoring and selection."""

    default_message = "no content could be extracted"


class ContentTooShortError(ExtractionError):
    """Raised when the cleaned text is below the configured minimum."""

    default_message = "extracted content is too short"


class ContentTooLargeError(ExtractionError):
    """Raised when a fetched body exceeds the configured byte cap."""

    default_message = "content exceeds maximum allowed size"


class InvalidURLError(ExtractionError, ValueError):
    """Raised when a URL cannot be turned into an http(s) URL."""

    default_message = "invalid URL"


class FetchError(ExtractionError):
    """Raised on network failures and unexpected HTTP status codes."""

    default_message = "HTTP request failed"


class FetchTimeoutError(FetchError):
    """Raised when a fetch exceeds its timeout."""

    default_message = "request timed out"
