"""Configuration models for article extraction."""

from __future__ import annotations

from .config import Config, ExtractionSettings, FetchSettings, MonitoringConfig

__all__ = ["Config", "ExtractionSettings", "FetchSettings", "MonitoringConfig"]
