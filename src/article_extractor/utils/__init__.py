"""Shared helpers."""

from __future__ import annotations

from .url import is_absolute_url, is_valid_url, normalize_url, resolve_url

__all__ = ["is_absolute_url", "is_valid_url", "normalize_url", "resolve_url"]
