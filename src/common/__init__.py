"""
Shared infrastructure: log sanitization and telemetry.
"""
