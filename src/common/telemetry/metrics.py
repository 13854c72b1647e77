"""
Contact Resolver Metrics.

Provides pre-defined metrics for resolution requests and batch completion.
"""

from __future__ import annotations

import logging

from src.common.telemetry.setup import get_meter, is_telemetry_enabled

logger = logging.getLogger(__name__)


class ResolverMetrics:
    """
    Metrics for contact resolution.

    Tracks:
    - Resolution requests submitted, by kind (phone, email, account)
    - Requests avoided by deduplication
    - Completed batches, their size and their duration
    """

    def __init__(self, meter_name: str = "contact_resolution", enabled: bool = True):
        """Initialize resolver metrics."""
        self._meter = get_meter(meter_name)
        self._enabled = enabled and is_telemetry_enabled()

        self._requests_total = self._meter.create_counter(
            name="contact_resolver_requests_total",
            description="Resolution requests submitted to the contact cache",
            unit="1",
        )

        self._deduplicated_total = self._meter.create_counter(
            name="contact_resolver_deduplicated_total",
            description="Events whose address was already pending resolution",
            unit="1",
        )

        self._batches_total = self._meter.create_counter(
            name="contact_resolver_batches_total",
            description="Fully resolved batches emitted",
            unit="1",
        )

        self._batch_size = self._meter.create_histogram(
            name="contact_resolver_batch_size",
            description="Number of events per resolved batch",
            unit="1",
        )

        self._batch_duration = self._meter.create_histogram(
            name="contact_resolver_batch_duration_ms",
            description="Time from first event to batch emission",
            unit="ms",
        )

    @property
    def enabled(self) -> bool:
        return self._enabled

    def record_request(self, kind: str) -> None:
        """Record a submitted resolution request of the given kind."""
        if not self._enabled:
            return
        self._requests_total.add(1, {"kind": kind})

    def record_deduplicated(self) -> None:
        if not self._enabled:
            return
        self._deduplicated_total.add(1)

    def record_batch(self, size: int, duration_ms: float) -> None:
        """
        Record a completed batch.

        Args:
            size: Number of events emitted
            duration_ms: Milliseconds since the batch became non-empty
        """
        if not self._enabled:
            return

        try:
            self._batches_total.add(1)
            self._batch_size.record(size)
            self._batch_duration.record(duration_ms)
        except Exception as e:
            logger.warning(f"Failed to record batch metrics: {e}")


# Global instance
_resolver_metrics: ResolverMetrics | None = None


def get_resolver_metrics() -> ResolverMetrics:
    """Get the global resolver metrics instance."""
    global _resolver_metrics
    if _resolver_metrics is None:
        _resolver_metrics = ResolverMetrics()
    return _resolver_metrics
