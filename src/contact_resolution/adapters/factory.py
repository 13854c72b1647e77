"""
Identity Cache Factory

Creates the appropriate identity cache based on configuration.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..config import ContactResolverConfig
from ..models import CacheItem
from ..protocols import IdentityCache
from .async_cache import AsyncIdentityCache, ContactBackend
from .index import ContactIndex
from .memory import InMemoryIdentityCache

logger = logging.getLogger(__name__)


def create_identity_cache(
    config: ContactResolverConfig,
    backend: ContactBackend | None = None,
    contacts: Iterable[CacheItem] = (),
) -> IdentityCache:
    """
    Create an identity cache based on configuration.

    With a ``backend``, lookups run as asyncio tasks against it. Without
    one, an in-memory cache preloaded with ``contacts`` is returned; its
    callbacks are delivered synchronously.

    Args:
        config: Resolver configuration
        backend: Optional async contact source
        contacts: Contacts to preload into the index

    Returns:
        IdentityCache instance
    """
    index = ContactIndex(
        contacts,
        display_label_order=config.display_label_order,
        max_phone_characters=config.phone_number_max_characters,
    )

    if backend is not None:
        logger.info("Using asyncio identity cache")
        return AsyncIdentityCache(
            backend,
            index=index,
            timeout_seconds=config.async_timeout_seconds,
        )

    logger.info(f"Using in-memory identity cache with {len(index)} contacts")
    return InMemoryIdentityCache(index, immediate=True)
