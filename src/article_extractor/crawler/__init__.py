"""HTTP fetching for URL-driven extraction."""

from __future__ import annotations

from .http_client import FetchResponse, HttpClient, decode_body

__all__ = ["FetchResponse", "HttpClient", "decode_body"]
