"""
Request Deduplication

Ensures at most one outstanding resolution request per canonical key.
"""

from __future__ import annotations

import logging

from .models import AddressKey
from .protocols import IdentityCache, ResolveListener

logger = logging.getLogger(__name__)


class RequestDeduplicator:
    """
    Tracks the keys submitted during the current batch.

    The first time a key is seen, exactly one request is routed to the
    cache according to the key's shape; later sightings are dropped.
    """

    def __init__(
        self,
        cache: IdentityCache,
        listener: ResolveListener,
        urgent: bool = True,
    ):
        self._cache = cache
        self._listener = listener
        self._urgent = urgent
        self._submitted: set[AddressKey] = set()

    def __len__(self) -> int:
        return len(self._submitted)

    def __contains__(self, key: object) -> bool:
        return key in self._submitted

    def submit_if_new(self, key: AddressKey) -> bool:
        """
        Submit a resolution request for ``key`` unless one was already made.

        Returns:
            True if a request was issued
        """
        if key.is_empty() or key in self._submitted:
            return False
        kind = self.kind_of(key)
        logger.debug(f"Submitting {kind} resolution")
        if kind == "phone":
            self._cache.submit_phone_resolution(self._listener, key.remote, self._urgent)
        elif kind == "email":
            self._cache.submit_email_resolution(self._listener, key.local, self._urgent)
        else:
            self._cache.submit_account_resolution(
                self._listener, key.local, key.remote, self._urgent
            )
        # Only mark the key once the cache accepted the request
        self._submitted.add(key)
        return True

    def kind_of(self, key: AddressKey) -> str:
        """Name of the request type ``key`` routes to (phone, email or account)."""
        if not key.local:
            return "phone"
        if not key.remote:
            return "email"
        return "account"

    def reset(self) -> None:
        self._submitted.clear()
