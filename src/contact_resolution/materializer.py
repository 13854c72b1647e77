"""
Batch Materialization

Attaches the best matching contact to each event of a batch.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable

from .models import CacheItem, Event, ResolvedIdentity
from .normalization import AddressNormalizer
from .protocols import IdentityCache

logger = logging.getLogger(__name__)


class BatchMaterializer:
    """
    Re-queries the cache with each event's raw addresses.

    Deduplication works on normalized keys, which may merge addresses that
    match different contacts (two spellings of one number, say). Querying
    with the un-normalized addresses lets the cache pick the best match per
    event, so this second pass must not be skipped.
    """

    def __init__(self, cache: IdentityCache, normalizer: AddressNormalizer):
        self._cache = cache
        self._normalizer = normalizer

    def best_match(self, event: Event) -> CacheItem | None:
        """Ask the cache for the best contact for ``event``'s raw addresses."""
        local = event.local_address
        remote = event.remote_address

        if self._normalizer.compares_phone_numbers(local):
            return self._cache.lookup_by_phone(remote)
        if not remote:
            return self._cache.lookup_by_email(local)
        return self._cache.lookup_by_account(local, remote)

    def materialize(self, events: Iterable[Event]) -> list[Event]:
        """
        Build resolved copies of ``events``.

        The input events are left untouched. Each copy carries a single
        ResolvedIdentity when a contact matched, or an empty list.
        """
        resolved: list[Event] = []
        for event in events:
            contacts: list[ResolvedIdentity] = []
            if event.local_address or event.remote_address:
                item = self.best_match(event)
                if item is not None:
                    label = self._cache.generate_display_label(item)
                    contacts.append(ResolvedIdentity(item.identity_id, label))
            resolved.append(dataclasses.replace(event, contacts=contacts))
        return resolved
