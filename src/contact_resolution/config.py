"""
Contact Resolution Configuration

Configuration settings using pydantic-settings for environment variable support.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.common.logging import configure_sanitized_logging

from .normalization import DEFAULT_PHONE_ACCOUNT_PREFIXES


class ContactResolverConfig(BaseSettings):
    """
    Configuration for the contact resolver.

    Reads from environment variables with CONTACT_RESOLVER_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="CONTACT_RESOLVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Address normalization
    phone_account_prefixes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PHONE_ACCOUNT_PREFIXES),
        description="Local account prefixes whose events are matched by phone number",
    )
    phone_number_max_characters: int = Field(
        default=0,
        ge=0,
        description="Trailing digits kept when minimizing phone numbers (0 keeps all)",
    )

    # Cache interaction
    urgent_requests: bool = Field(
        default=True,
        description="Ask the cache to prioritise submitted resolutions",
    )
    display_label_order: Literal["first_last", "last_first"] = Field(
        default="first_last",
        description="Name order used when generating display labels",
    )
    async_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout for a single backend lookup in the asyncio cache",
    )

    # Observability
    metrics_enabled: bool = Field(
        default=True,
        description="Record OpenTelemetry metrics",
    )
    sanitize_logs: bool = Field(
        default=True,
        description="Redact addresses and secrets from library log records",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


def load_config() -> ContactResolverConfig:
    """Load configuration from environment."""
    return ContactResolverConfig()


def setup_logging(config: ContactResolverConfig | None = None) -> None:
    """
    Configure root logging for a host application.

    Uses ``config.log_level``; attaches the sanitizing filter unless
    ``config.sanitize_logs`` is off.
    """
    config = config or load_config()
    level = config.log_level.upper()
    if config.sanitize_logs:
        configure_sanitized_logging(level=level)
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
