"""Tests for resolver telemetry."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from src.common.telemetry import get_resolver_metrics
from src.common.telemetry.metrics import ResolverMetrics
from src.common.telemetry.setup import get_meter, is_telemetry_enabled


class TestTelemetrySetup:
    """Environment switch and meter access."""

    def test_disabled_by_env(self, monkeypatch) -> None:
        monkeypatch.setenv("CONTACT_RESOLVER_TELEMETRY_ENABLED", "false")
        assert is_telemetry_enabled() is False

    def test_enabled_by_default(self, monkeypatch) -> None:
        monkeypatch.delenv("CONTACT_RESOLVER_TELEMETRY_ENABLED", raising=False)
        assert is_telemetry_enabled() is True

    def test_get_meter_returns_api_meter(self) -> None:
        meter = get_meter("tests")
        counter = meter.create_counter("tests_counter")
        counter.add(1)


class TestResolverMetrics:
    """Test suite for ResolverMetrics."""

    def _metrics(self, enabled: bool = True) -> tuple[ResolverMetrics, MagicMock]:
        meter = MagicMock()
        with (
            patch("src.common.telemetry.metrics.get_meter", return_value=meter),
            patch("src.common.telemetry.metrics.is_telemetry_enabled", return_value=True),
        ):
            metrics = ResolverMetrics(enabled=enabled)
        return metrics, meter

    def test_creates_instruments(self) -> None:
        _, meter = self._metrics()

        counter_names = {c.kwargs["name"] for c in meter.create_counter.call_args_list}
        histogram_names = {c.kwargs["name"] for c in meter.create_histogram.call_args_list}
        assert counter_names == {
            "contact_resolver_requests_total",
            "contact_resolver_deduplicated_total",
            "contact_resolver_batches_total",
        }
        assert histogram_names == {
            "contact_resolver_batch_size",
            "contact_resolver_batch_duration_ms",
        }

    def test_record_request(self) -> None:
        metrics, meter = self._metrics()
        metrics.record_request("phone")
        meter.create_counter.return_value.add.assert_called_once_with(1, {"kind": "phone"})

    def test_record_batch(self) -> None:
        metrics, meter = self._metrics()
        metrics.record_batch(4, 12.5)

        meter.create_counter.return_value.add.assert_called_once_with(1)
        recorded = [c.args[0] for c in meter.create_histogram.return_value.record.call_args_list]
        assert recorded == [4, 12.5]

    def test_disabled_metrics_record_nothing(self) -> None:
        metrics, meter = self._metrics(enabled=False)
        metrics.record_request("phone")
        metrics.record_deduplicated()
        metrics.record_batch(1, 1.0)

        assert not metrics.enabled
        meter.create_counter.return_value.add.assert_not_called()
        meter.create_histogram.return_value.record.assert_not_called()

    def test_global_instance(self) -> None:
        assert get_resolver_metrics() is get_resolver_metrics()
