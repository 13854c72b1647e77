"""
Contact Resolution

Batches and deduplicates address-to-contact lookups for communication
events, and emits each batch once every lookup has completed.

Usage:
    from src.contact_resolution import ContactResolver, Event
    from src.contact_resolution.adapters import InMemoryIdentityCache

    resolver = ContactResolver(InMemoryIdentityCache(immediate=True))
    resolver.events_resolved.connect(handle_events)
    resolver.append_events([Event("", "+1 (555) 123-4567")])
"""

__version__ = "0.1.0"

from .config import ContactResolverConfig, load_config, setup_logging
from .deduplicator import RequestDeduplicator
from .gate import CompletionGate, GateState
from .materializer import BatchMaterializer
from .models import AddressKey, CacheItem, Event, ResolvedIdentity
from .normalization import AddressNormalizer, compares_phone_numbers, minimize_phone_number
from .protocols import IdentityCache, ResolveListener
from .resolver import ContactResolver
from .signals import Signal

__all__ = [
    "AddressKey",
    "AddressNormalizer",
    "BatchMaterializer",
    "CacheItem",
    "CompletionGate",
    "ContactResolver",
    "ContactResolverConfig",
    "Event",
    "GateState",
    "IdentityCache",
    "RequestDeduplicator",
    "ResolveListener",
    "ResolvedIdentity",
    "Signal",
    "compares_phone_numbers",
    "load_config",
    "minimize_phone_number",
    "setup_logging",
]
