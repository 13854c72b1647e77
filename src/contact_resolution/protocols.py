"""
Identity Cache Protocols

Defines the interface of the contact cache the resolver drives, and the
listener it calls back when a submitted resolution completes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import CacheItem


@runtime_checkable
class ResolveListener(Protocol):
    """Receives completion callbacks for submitted resolutions."""

    def on_resolved(self, first: str, second: str, item: CacheItem | None) -> None:
        """
        Called exactly once per submission.

        Args:
            first: First key component as submitted (phone number, email or local account)
            second: Second key component ("" for phone and email submissions)
            item: Matching contact, or None when nothing matched
        """
        ...


@runtime_checkable
class IdentityCache(Protocol):
    """
    Protocol for the contact cache.

    Submissions are fire-and-forget: each call must eventually produce
    exactly one ``listener.on_resolved`` callback on the caller's thread.
    Lookups are synchronous best-match queries against what the cache
    currently holds.
    """

    def submit_phone_resolution(
        self, listener: ResolveListener, number: str, urgent: bool = True
    ) -> None: ...

    def submit_email_resolution(
        self, listener: ResolveListener, address: str, urgent: bool = True
    ) -> None: ...

    def submit_account_resolution(
        self,
        listener: ResolveListener,
        local_address: str,
        remote_address: str,
        urgent: bool = True,
    ) -> None: ...

    def lookup_by_phone(self, number: str) -> CacheItem | None: ...

    def lookup_by_email(self, address: str) -> CacheItem | None: ...

    def lookup_by_account(self, local_address: str, remote_address: str) -> CacheItem | None: ...

    def generate_display_label(self, item: CacheItem) -> str: ...
