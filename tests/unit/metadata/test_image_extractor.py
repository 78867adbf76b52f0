"""
Unit tests for lead image selection.
"""

import pytest
from article_extractor.metadata import ImageExtractor
from article_extractor.models import Image
from bs4 import BeautifulSoup


def soup_of(html):
    return BeautifulSoup(f"<html>{html}</html>", "lxml")


@pytest.mark.unit
class TestImageExtractor:
    def test_open_graph_with_dimensions(self):
        html = (
            '<head><meta property="og:image" content="https://example.com/image.jpg">'
            '<meta property="og:image:width" content="800">'
            '<meta property="og:image:height" content="600px"></head>'
        )
        assert ImageExtractor().extract(soup_of(html)) == Image(
            url="https://example.com/image.jpg", width=800, height=600
        )

    def test_twitter_card(self):
        html = '<head><meta name="twitter:image" content="https://example.com/card.png"></head>'
        assert ImageExtractor().extract(soup_of(html)) == Image(url="https://example.com/card.png")

    def test_open_graph_wins_over_twitter(self):
        html = (
            '<head><meta name="twitter:image" content="https://example.com/card.png">'
            '<meta property="og:image" content="https://example.com/og.png"></head>'
        )
        assert ImageExtractor().extract(soup_of(html)).url == "https://example.com/og.png"

    def test_first_large_article_image(self):
        html = (
            '<body><article><img src="/icon.png" width="50" height="50">'
            '<img src="/hero.jpg" width="640" alt="Hero"></article></body>'
        )
        image = ImageExtractor().extract(soup_of(html), base_url="https://example.com/post")
        assert image == Image(url="https://example.com/hero.jpg", width=640, height=0, alt="Hero")

    def test_image_without_dimensions_is_accepted(self):
        html = '<body><main><img data-src="lazy.jpg"></main></body>'
        assert ImageExtractor().extract(soup_of(html)) == Image(url="lazy.jpg")

    def test_relative_open_graph_is_resolved(self):
        html = '<head><meta property="og:image" content="//cdn.example.com/og.png"></head>'
        image = ImageExtractor().extract(soup_of(html), base_url="https://example.com/a")
        assert image.url == "https://cdn.example.com/og.png"

    def test_no_image(self):
        html = '<body><article><img src="/tiny.gif" width="1" height="1"></article><img src="/outside.png"></body>'
        assert ImageExtractor().extract(soup_of(html)) is None
