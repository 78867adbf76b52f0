"""
HTTP fetch client used by URL-driven extraction.
"""

from __future__ import annotations

import asyncio
import re
import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import aiohttp
from charset_normalizer import from_bytes

from article_extractor.config.config import FetchSettings
from article_extractor.errors import ContentTooLargeError, FetchError, FetchTimeoutError, InvalidURLError
from article_extractor.observability.logging import get_logger
from article_extractor.observability.metrics import METRICS
from article_extractor.utils.url import is_valid_url

logger = get_logger(__name__)

ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
ACCEPT_LANGUAGE = "en-US,en;q=0.9"
CHUNK_SIZE = 64 * 1024

META_CHARSET_RE = re.compile(rb"""<meta[^>]+charset\s*=\s*["']?\s*([a-zA-Z0-9_\-:.]+)""", re.IGNORECASE)
META_PRESCAN_BYTES = 2048


@dataclass(slots=True, frozen=True)
class FetchResponse:
    """A successful fetch, decoded to text."""

    url: str
    final_url: str
    status: int
    body: bytes
    encoding: str
    text: str
    elapsed: float


def decode_body(body: bytes, charset: Optional[str] = None) -> Tuple[str, str]:
    """
    Decode ``body`` and return ``(text, encoding)``.

    The Content-Type charset is tried first, then a ``<meta charset>``
    declaration, then charset-normalizer's detection.
    """
    if not body:
        return "", charset or "utf-8"

    declared: List[str] = []
    if charset:
        declared.append(charset)
    match = META_CHARSET_RE.search(body[:META_PRESCAN_BYTES])
    if match:
        declared.append(match.group(1).decode("ascii", "ignore"))

    for encoding in declared:
        try:
            return body.decode(encoding), encoding
        except (LookupError, UnicodeDecodeError):
            logger.debug("Declared charset failed", charset=encoding)

    best = from_bytes(body).best()
    if best is not None:
        return str(best), best.encoding
    return body.decode("utf-8", errors="replace"), "utf-8"


class HttpClient:
    """
    aiohttp-backed fetcher.

    Sends browser-like Accept headers, follows at most ``max_redirects``
    redirects, decodes gzip transparently and refuses bodies larger than
    ``max_content_length`` bytes. Only status 200 is accepted.
    """

    def __init__(self, settings: FetchSettings | None = None) -> None:
        self.settings = settings or FetchSettings()
        self.session: Optional[aiohttp.ClientSession] = None

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.settings.user_agent,
            "Accept": ACCEPT,
            "Accept-Language": ACCEPT_LANGUAGE,
            "Accept-Encoding": "gzip",
        }

    async def initialize(self) -> None:
        """Initialize the HTTP client session."""
        if self.session is None:
            timeout = aiohttp.ClientTimeout(total=self.settings.timeout)
            self.session = aiohttp.ClientSession(timeout=timeout, headers=self.headers)
            logger.debug("HTTP client session initialized", timeout=self.settings.timeout)

    async def close(self) -> None:
        """Close the HTTP client and clean up resources."""
        if self.session is not None:
            await self.session.close()
            self.session = None
            logger.debug("HTTP client closed")

    async def __aenter__(self) -> "HttpClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def fetch(self, url: str) -> str:
        """Fetch ``url`` and return the decoded HTML."""
        response = await self.fetch_response(url)
        return response.text

    async def fetch_response(self, url: str) -> FetchResponse:
        if not is_valid_url(url):
            raise InvalidURLError("fetch", url)
        await self.initialize()
        assert self.session is not None

        start = time.perf_counter()
        try:
            async with self.session.get(
                url, allow_redirects=True, max_redirects=self.settings.max_redirects
            ) as response:
                status_class = f"{response.status // 100}xx"
                METRICS["fetch_responses_total"].labels(status_class=status_class).inc()
                if response.status != 200:
                    raise FetchError("fetch", url, f"unexpected status code: {response.status}")
                body = await self._read_body(response, url)
                charset = response.charset
                final_url = str(response.url)
        except aiohttp.TooManyRedirects as e:
            raise FetchError("fetch", url, "too many redirects") from e
        except asyncio.TimeoutError as e:
            logger.warning("Request timed out", url=url, timeout=self.settings.timeout)
            raise FetchTimeoutError("fetch", url) from e
        except aiohttp.ClientError as e:
            logger.warning("Request failed", url=url, error=str(e))
            raise FetchError("fetch", url, str(e)) from e

        elapsed = time.perf_counter() - start
        text, encoding = decode_body(body, charset)
        METRICS["fetch_latency_seconds"].observe(elapsed)
        METRICS["fetch_bytes"].observe(len(body))
        logger.info("Fetched page", url=url, final_url=final_url, size=len(body), encoding=encoding)
        return FetchResponse(
            url=url,
            final_url=final_url,
            status=200,
            body=body,
            encoding=encoding,
            text=text,
            elapsed=elapsed,
        )

    async def _read_body(self, response: aiohttp.ClientResponse, url: str) -> bytes:
        limit = self.settings.max_content_length
        if response.content_length is not None and response.content_length > limit:
            raise ContentTooLargeError("fetch", url)

        chunks: List[bytes] = []
        size = 0
        async for chunk in response.content.iter_chunked(CHUNK_SIZE):
            size += len(chunk)
            if size > limit:
                raise ContentTooLargeError("fetch", url)
            chunks.append(chunk)
        return b"".join(chunks)
