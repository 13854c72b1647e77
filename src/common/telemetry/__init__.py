"""
Telemetry for the contact resolver.

Usage:
    from src.common.telemetry import get_resolver_metrics

    metrics = get_resolver_metrics()
    metrics.record_request("phone")
"""

from src.common.telemetry.metrics import ResolverMetrics, get_resolver_metrics
from src.common.telemetry.setup import get_meter, is_telemetry_enabled

__all__ = [
    "ResolverMetrics",
    "get_resolver_metrics",
    "get_meter",
    "is_telemetry_enabled",
]
