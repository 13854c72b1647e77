"""
Pytest configuration for unit tests.

Disables telemetry so metrics instruments are never exercised against a
real provider.
"""

import os


def pytest_configure(config):
    """Disable telemetry for unit tests."""
    os.environ["CONTACT_RESOLVER_TELEMETRY_ENABLED"] = "false"
