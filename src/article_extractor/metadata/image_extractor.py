"""
Lead image selection from Open Graph, Twitter cards or article images.
"""

from __future__ import annotations

import logging
from typing import Optional

from bs4 import BeautifulSoup

from article_extractor.dom import get_attribute
from article_extractor.models import Image
from article_extractor.utils.url import resolve_url

from .structured_data_parser import first_meta_content, safe_int

logger = logging.getLogger(__name__)

ARTICLE_IMAGE_SELECTOR = "article img, .article img, .post img, main img"
MIN_IMAGE_DIMENSION = 200


class ImageExtractor:
    def extract(self, soup: BeautifulSoup, base_url: str = "") -> Optional[Image]:
        image = self._from_open_graph(soup) or self._from_twitter(soup) or self._from_article(soup)
        if image is not None and base_url:
            resolved = resolve_url(image.url, base_url)
            if resolved != image.url:
                image = Image(url=resolved, width=image.width, height=image.height, alt=image.alt)
        return image

    def _from_open_graph(self, soup: BeautifulSoup) -> Optional[Image]:
        url = first_meta_content(soup, ("og:image",))
        if not url:
            return None
        return Image(
            url=url,
            width=safe_int(first_meta_content(soup, ("og:image:width",))),
            height=safe_int(first_meta_content(soup, ("og:image:height",))),
        )

    def _from_twitter(self, soup: BeautifulSoup) -> Optional[Image]:
        url = first_meta_content(soup, ("twitter:image",))
        return Image(url=url) if url else None

    def _from_article(self, soup: BeautifulSoup) -> Optional[Image]:
        for el in soup.select(ARTICLE_IMAGE_SELECTOR):
            url = get_attribute(el, "src").strip() or get_attribute(el, "data-src").strip()
            if not url:
                continue
            width = safe_int(get_attribute(el, "width"))
            height = safe_int(get_attribute(el, "height"))
            if width >= MIN_IMAGE_DIMENSION or height >= MIN_IMAGE_DIMENSION or (width == 0 and height == 0):
                return Image(url=url, width=width, height=height, alt=get_attribute(el, "alt"))
        return None
