"""
URL validation, normalization and resolution.
"""

from __future__ import annotations

import re
from urllib.parse import urljoin

SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")
URL_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*://")
HTTP_PREFIXES = ("http://", "https://")


def is_valid_url(url: str) -> bool:
    """True for http and https URLs."""
    return url.startswith(HTTP_PREFIXES)


def normalize_url(url: str) -> str:
    """
    Trim and default to https when no scheme is given.

    URLs that already name another scheme (``ftp://``) are returned as is so
    that validation rejects them.
    """
    url = url.strip()
    if not URL_SCHEME_RE.match(url):
        url = "https://" + url
    return url


def is_absolute_url(url: str) -> bool:
    """True for URLs that carry a scheme; protocol-relative URLs are not absolute."""
    return bool(SCHEME_RE.match(url))


def resolve_url(url: str, base_url: str) -> str:
    """
    Resolve ``url`` against ``base_url``.

    ``//host/x`` takes the base's scheme, ``/x`` is joined to the base's
    scheme and host, anything else to the base's directory. URLs with their
    own scheme (``mailto:``, ``data:``) are returned as is.
    """
    if not url or not base_url or is_absolute_url(url):
        return url
    return urljoin(base_url, url)
