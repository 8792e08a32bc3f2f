#!/usr/bin/env python3
"""
Prometheus metrics for text splitting
Provides observability into chunk production and oversized chunks
"""

import logging

from prometheus_client import CollectorRegistry, Counter, Histogram, Info

logger = logging.getLogger(__name__)

__all__ = [
    "Counter",
    "Histogram",
    "registry",
    "splitter_info",
    "chunks_created",
    "oversized_chunks",
    "split_duration",
    "record_chunks_created",
    "record_oversized_chunk",
    "record_split_duration",
]

# Create custom registry
registry = CollectorRegistry()

splitter_info = Info("textsplit", "Text splitting library information", registry=registry)
splitter_info.info({"version": "0.1.0"})

chunks_created = Counter(
    "textsplit_chunks_created_total", "Total chunks produced by splitters", ["strategy"], registry=registry
)
oversized_chunks = Counter(
    "textsplit_oversized_chunks_total",
    "Chunks emitted longer than the configured chunk size",
    ["strategy"],
    registry=registry,
)
split_duration = Histogram(
    "textsplit_split_duration_seconds",
    "Time spent splitting a single text",
    ["strategy"],
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1, 2),
    registry=registry,
)


def record_chunks_created(strategy: str, count: int) -> None:
    """Record chunks produced by a strategy"""
    if count > 0:
        chunks_created.labels(strategy=strategy).inc(count)


def record_oversized_chunk(strategy: str) -> None:
    """Record an oversized chunk"""
    oversized_chunks.labels(strategy=strategy).inc()


def record_split_duration(strategy: str, duration: float) -> None:
    """Record split duration"""
    split_duration.labels(strategy=strategy).observe(duration)
