"""
Defines the Prometheus metrics recorded by the extractor and fetch client.
"""

from __future__ import annotations

from typing import Any, Dict

from prometheus_client import REGISTRY as _PROM_REGISTRY
from prometheus_client import Counter as _OrigCounter
from prometheus_client import Histogram as _OrigHistogram

# ---------------------------------------------------------------------------
# Duplicate-safe Prometheus metric wrappers
# ---------------------------------------------------------------------------
# Importing this module twice (test reloads, plugin discovery) must not raise
# duplicate registration errors.


def _duplicate_safe_factory(metric_cls):
    """Return a factory that reuses an existing collector if already present."""

    def _factory(name: str, documentation: str, *args, **kwargs):  # type: ignore[override]
        existing = _PROM_REGISTRY._names_to_collectors.get(name)
        if existing is not None:
            return existing  # type: ignore[return-value]

        try:
            return metric_cls(name, documentation, *args, **kwargs)  # type: ignore[call-arg]
        except ValueError:
            # Registration lost the race; use the collector that won.
            return _PROM_REGISTRY._names_to_collectors[name]  # type: ignore[return-value]

    return _factory


Counter = _duplicate_safe_factory(_OrigCounter)
Histogram = _duplicate_safe_factory(_OrigHistogram)

METRICS: Dict[str, Any] = {
    "extractions_total": Counter(
        "article_extractor_extractions_total",
        "Extraction calls by outcome",
        ["outcome"],
    ),
    "extraction_duration_seconds": Histogram(
        "article_extractor_extraction_duration_seconds",
        "Time spent in each pipeline stage",
        ["stage"],
        buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
    ),
    "extraction_confidence": Histogram(
        "article_extractor_extraction_confidence",
        "Confidence of successful extractions",
        buckets=(0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0),
    ),
    "fetch_responses_total": Counter(
        "article_extractor_fetch_responses_total",
        "HTTP responses received by status class",
        ["status_class"],
    ),
    "fetch_latency_seconds": Histogram(
        "article_extractor_fetch_latency_seconds",
        "Latency of page fetches",
    ),
    "fetch_bytes": Histogram(
        "article_extractor_fetch_bytes",
        "Size of fetched bodies in bytes",
        buckets=(1024, 16384, 65536, 262144, 1048576, 4194304, 10485760),
    ),
}
