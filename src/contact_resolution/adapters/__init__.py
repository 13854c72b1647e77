"""
Identity cache implementations.

- InMemoryIdentityCache: preloaded contacts, callbacks delivered on demand
- AsyncIdentityCache: lookups run as asyncio tasks against a ContactBackend
"""

from .async_cache import AsyncIdentityCache, ContactBackend, StaticContactBackend
from .factory import create_identity_cache
from .index import ContactIndex
from .memory import InMemoryIdentityCache, ResolutionRequest

__all__ = [
    "AsyncIdentityCache",
    "ContactBackend",
    "ContactIndex",
    "InMemoryIdentityCache",
    "ResolutionRequest",
    "StaticContactBackend",
    "create_identity_cache",
]
