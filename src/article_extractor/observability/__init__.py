"""Logging and metrics for article extraction."""

from __future__ import annotations

from .logging import configure_logging, get_logger
from .metrics import METRICS

__all__ = ["METRICS", "configure_logging", "get_logger"]
