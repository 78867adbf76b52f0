"""
Article extraction pipeline.

Sequences metadata extraction, preprocessing, scoring, candidate selection,
sibling merging and cleanup into a single call that returns an ``Article``.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Dict, Iterator, Type
from urllib.parse import urlparse

from bs4.builder import ParserRejectedMarkup

from article_extractor.config.config import ExtractionSettings, FetchSettings
from article_extractor.crawler.http_client import HttpClient
from article_extractor.dom import Document, count_words, get_excerpt
from article_extractor.errors import (
    ContentTooShortError,
    ExtractionError,
    InvalidURLError,
    NoContentError,
    ParseError,
)
from article_extractor.metadata import MetadataExtractor
from article_extractor.models import Article
from article_extractor.observability.logging import get_logger
from article_extractor.observability.metrics import METRICS
from article_extractor.utils.url import is_valid_url, normalize_url

from .confidence_scorer import ConfidenceScorer
from .postprocessor import Postprocessor, clean_html, clean_text
from .preprocessor import Preprocessor
from .protocols import PageFetcher
from .scorer import ContentScorer, rank_candidates, select_top_candidate
from .siblings import SiblingMerger

logger = get_logger(__name__)

_OUTCOMES: Dict[Type[ExtractionError], str] = {
    NoContentError: "no_content",
    ContentTooShortError: "too_short",
    ParseError: "parse_error",
}


class ArticleExtractor:
    """
    Extracts the main article and its metadata from HTML.

    One instance can serve many calls; every call parses its own document
    and keeps its scores private to that call.
    """

    def __init__(
        self,
        settings: ExtractionSettings | None = None,
        fetch_settings: FetchSettings | None = None,
        fetcher: PageFetcher | None = None,
    ) -> None:
        self.settings = settings or ExtractionSettings()
        self.fetch_settings = fetch_settings or FetchSettings()
        self.fetcher = fetcher

        self.metadata_extractor = MetadataExtractor()
        self.preprocessor = Preprocessor()
        self.scorer = ContentScorer(self.settings.min_paragraph_length)
        self.sibling_merger = SiblingMerger(self.settings.min_paragraph_length)
        self.postprocessor = Postprocessor()
        self.confidence_scorer = ConfidenceScorer()

    def extract(self, html: str | bytes, base_url: str = "") -> Article:
        """
        Extract the article from ``html``.

        With ``base_url`` relative links and image sources are resolved and
        the result's ``url`` is set. Raises ``ParseError``, ``NoContentError``
        or ``ContentTooShortError``.
        """
        start = time.perf_counter()
        try:
            article = self._extract(html, base_url)
        except ExtractionError as e:
            METRICS["extractions_total"].labels(outcome=_OUTCOMES.get(type(e), "error")).inc()
            logger.info("Extraction failed", url=base_url or None, op=e.op, error=e.message)
            raise

        METRICS["extractions_total"].labels(outcome="success").inc()
        METRICS["extraction_confidence"].observe(article.confidence)
        logger.info(
            "Extraction completed",
            url=base_url or None,
            words=article.word_count,
            score=round(article.score, 2),
            confidence=round(article.confidence, 2),
            duration=round(time.perf_counter() - start, 4),
        )
        return article

    async def extract_from_url(self, url: str) -> Article:
        """Fetch ``url`` and extract its article, using the URL as base."""
        url = url.strip()
        if not is_valid_url(url):
            url = normalize_url(url)
        if not is_valid_url(url) or not urlparse(url).netloc:
            raise InvalidURLError("validate", url)

        if self.fetcher is not None:
            html = await self.fetcher.fetch(url)
        else:
            async with HttpClient(self.fetch_settings) as client:
                html = await client.fetch(url)
        return self.extract(html, base_url=url)

    def _extract(self, html: str | bytes, base_url: str) -> Article:
        with self._stage("parse"):
            document = self._parse(html, base_url)

        # Metadata reads the pristine tree; everything after mutates it.
        with self._stage("metadata"):
            metadata = self.metadata_extractor.extract(document.root, base_url)

        with self._stage("preprocess"):
            self.preprocessor.process(document)

        with self._stage("score"):
            scores = self.scorer.score(document)
            order = document.document_order()
            ranked = rank_candidates(scores, order)
            top = select_top_candidate(scores, order)
        if top is None:
            raise NoContentError("extract", base_url)
        runner_up = ranked[1] if len(ranked) > 1 else None
        self._diagnostic(
            "Top candidate selected",
            candidates=len(scores),
            tag=top.node.name,
            score=round(top.content_score, 2),
            weight=top.weight,
        )

        with self._stage("merge"):
            merged = self.sibling_merger.merge(document, top.node, top.content_score)
        self._diagnostic("Siblings merged", merged=len(merged.merged))

        with self._stage("postprocess"):
            content = self.postprocessor.clean(merged.content)
            if base_url:
                self.postprocessor.resolve_urls(content, base_url)
            content_html = clean_html(content)
            text_content = clean_text(content)

        if len(text_content) < self.settings.min_content_length:
            raise ContentTooShortError(
                "validate",
                base_url,
                f"extracted content is too short ({len(text_content)} < {self.settings.min_content_length})",
            )

        word_count = count_words(text_content)
        return Article(
            title=metadata.title,
            content=content_html,
            text_content=text_content,
            excerpt=get_excerpt(text_content, self.settings.excerpt_length),
            author=metadata.author,
            published_at=metadata.published_at,
            lead_image=metadata.lead_image,
            url=base_url,
            word_count=word_count,
            score=top.content_score,
            confidence=self.confidence_scorer.calculate_confidence(top, runner_up, word_count),
            authors=metadata.authors,
            modified_at=metadata.modified_at,
        )

    def _parse(self, html: str | bytes, base_url: str) -> Document:
        if not isinstance(html, (str, bytes)):
            raise ParseError("parse", base_url, f"expected str or bytes, got {type(html).__name__}")
        try:
            return Document(html, self.settings.parser)
        except ParserRejectedMarkup as e:
            raise ParseError("parse", base_url, str(e)) from e

    @contextmanager
    def _stage(self, name: str) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            METRICS["extraction_duration_seconds"].labels(stage=name).observe(elapsed)
            self._diagnostic("Stage finished", stage=name, duration=round(elapsed, 4))

    def _diagnostic(self, event: str, **fields: object) -> None:
        if self.settings.debug:
            logger.info(event, **fields)
        else:
            logger.debug(event, **fields)
