"""Performance monitoring and metrics for text splitters.

This module provides utilities for tracking and logging performance metrics
across all splitting strategies, and forwards them to Prometheus.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from textsplit.config import settings
from textsplit.metrics.prometheus import record_chunks_created, record_split_duration

logger = logging.getLogger(__name__)

MAX_HISTORY = 1000


@dataclass
class SplittingMetrics:
    """Container for splitting performance metrics."""

    strategy: str
    input_chars: int
    output_chunks: int
    duration_seconds: float
    chunks_per_second: float
    chars_per_chunk: float
    metadata: dict[str, Any] = field(default_factory=dict)
    error: str | None = None


class SplittingPerformanceMonitor:
    """Monitor and log performance metrics for splitting operations."""

    def __init__(self, max_history: int = MAX_HISTORY) -> None:
        self.metrics_history: deque[SplittingMetrics] = deque(maxlen=max_history)

    @contextmanager
    def measure_splitting(
        self,
        strategy: str,
        text_length: int,
        metadata: dict[str, Any] | None = None,
    ) -> Iterator[SplittingMetrics]:
        """Context manager to measure splitting performance.

        Args:
            strategy: Name of the splitting strategy
            text_length: Length of input text in characters
            metadata: Additional metadata to track

        Yields:
            metrics: SplittingMetrics object to be updated

        Example:
            with monitor.measure_splitting("recursive", len(text)) as metrics:
                chunks = splitter.split_text(text)
                metrics.output_chunks = len(chunks)
        """
        start_time = time.perf_counter()
        metrics = SplittingMetrics(
            strategy=strategy,
            input_chars=text_length,
            output_chunks=0,
            duration_seconds=0.0,
            chunks_per_second=0.0,
            chars_per_chunk=0.0,
            metadata=metadata or {},
        )

        try:
            yield metrics
        except Exception as e:
            metrics.error = str(e)
            raise
        finally:
            metrics.duration_seconds = time.perf_counter() - start_time

            if metrics.output_chunks > 0:
                metrics.chunks_per_second = metrics.output_chunks / max(metrics.duration_seconds, 0.001)
                metrics.chars_per_chunk = metrics.input_chars / metrics.output_chunks

            self._log_metrics(metrics)
            self._export_metrics(metrics)
            self.metrics_history.append(metrics)

    def _log_metrics(self, metrics: SplittingMetrics) -> None:
        if metrics.error:
            logger.error(f"Splitting failed - Strategy: {metrics.strategy}, Error: {metrics.error}")
            return

        # Normal runs stay at DEBUG; a library splitting many small texts should not flood INFO
        log_level = logging.DEBUG
        if metrics.duration_seconds > settings.SLOW_SPLIT_THRESHOLD_SECONDS:
            log_level = logging.WARNING

        logger.log(
            log_level,
            f"Splitting performance - Strategy: {metrics.strategy}, "
            f"Input: {metrics.input_chars} chars, "
            f"Chunks: {metrics.output_chunks}, "
            f"Duration: {metrics.duration_seconds:.3f}s",
        )

        if metrics.metadata:
            logger.debug(f"Splitting metadata: {metrics.metadata}")

    def _export_metrics(self, metrics: SplittingMetrics) -> None:
        if not settings.ENABLE_METRICS or metrics.error:
            return
        record_chunks_created(metrics.strategy, metrics.output_chunks)
        record_split_duration(metrics.strategy, metrics.duration_seconds)

    def get_strategy_summary(self, strategy: str) -> dict[str, Any]:
        """Get performance summary for a specific strategy.

        Args:
            strategy: Strategy name to summarize

        Returns:
            Summary statistics for the strategy
        """
        strategy_metrics = [m for m in self.metrics_history if m.strategy == strategy and not m.error]

        if not strategy_metrics:
            return {"strategy": strategy, "no_data": True}

        total_chunks = sum(m.output_chunks for m in strategy_metrics)
        total_time = sum(m.duration_seconds for m in strategy_metrics)

        return {
            "strategy": strategy,
            "total_texts": len(strategy_metrics),
            "total_chunks": total_chunks,
            "total_time": total_time,
            "avg_chunks_per_second": total_chunks / max(total_time, 0.001),
            "avg_chars_per_chunk": sum(m.chars_per_chunk for m in strategy_metrics) / len(strategy_metrics),
        }

    def log_summary(self) -> None:
        """Log a summary of all splitting performance."""
        strategies = {m.strategy for m in self.metrics_history}

        logger.info("=== Splitting Performance Summary ===")
        for strategy in sorted(strategies):
            summary = self.get_strategy_summary(strategy)
            if not summary.get("no_data"):
                logger.info(
                    f"{strategy}: {summary['total_texts']} texts, "
                    f"{summary['total_chunks']} chunks, "
                    f"avg speed: {summary['avg_chunks_per_second']:.1f} chunks/s"
                )


# Global performance monitor instance
performance_monitor = SplittingPerformanceMonitor()
