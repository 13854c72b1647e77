"""
OpenTelemetry Meter Access.

The library only talks to the OpenTelemetry API. Until the host application
installs an SDK MeterProvider, the API hands out no-op instruments.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from opentelemetry import metrics

logger = logging.getLogger(__name__)

TELEMETRY_ENV_VAR = "CONTACT_RESOLVER_TELEMETRY_ENABLED"


def is_telemetry_enabled() -> bool:
    """Check whether telemetry has been disabled via environment variable."""
    telemetry_enabled = os.getenv(TELEMETRY_ENV_VAR, "true").lower()
    return telemetry_enabled not in ("false", "0", "no", "off")


def get_meter(name: str = "contact_resolution") -> Any:
    """
    Get a meter for creating metrics.

    Args:
        name: Meter name (typically module or component name)

    Returns:
        OpenTelemetry Meter from the globally installed provider
    """
    return metrics.get_meter(name)
