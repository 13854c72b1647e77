"""
In-Memory Identity Cache

Provides an IdentityCache backed by a ContactIndex, with completion
callbacks that are queued until explicitly delivered.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass

from ..models import CacheItem
from ..protocols import ResolveListener
from .index import ContactIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionRequest:
    """A submission received by the cache."""

    kind: str  # "phone", "email" or "account"
    first: str
    second: str = ""
    urgent: bool = True


class InMemoryIdentityCache:
    """
    Identity cache for tests and for hosts with a preloaded address book.

    Every submission is recorded in ``requests``. Its callback is queued
    and only runs when ``deliver_next``/``deliver_pending`` is called,
    unless the cache was created with ``immediate=True``.
    """

    def __init__(
        self,
        index: ContactIndex | None = None,
        immediate: bool = False,
    ):
        """
        Initialize the cache.

        Args:
            index: Contacts to resolve against (empty index if omitted)
            immediate: Deliver callbacks synchronously from inside submit_*
        """
        self.index = index if index is not None else ContactIndex()
        self.requests: list[ResolutionRequest] = []
        self._immediate = immediate
        self._queue: deque[tuple[ResolveListener, ResolutionRequest]] = deque()

    @property
    def pending_callbacks(self) -> int:
        return len(self._queue)

    def submit_phone_resolution(
        self, listener: ResolveListener, number: str, urgent: bool = True
    ) -> None:
        self._submit(listener, ResolutionRequest("phone", number, "", urgent))

    def submit_email_resolution(
        self, listener: ResolveListener, address: str, urgent: bool = True
    ) -> None:
        self._submit(listener, ResolutionRequest("email", address, "", urgent))

    def submit_account_resolution(
        self,
        listener: ResolveListener,
        local_address: str,
        remote_address: str,
        urgent: bool = True,
    ) -> None:
        self._submit(
            listener, ResolutionRequest("account", local_address, remote_address, urgent)
        )

    def _submit(self, listener: ResolveListener, request: ResolutionRequest) -> None:
        self.requests.append(request)
        if self._immediate:
            self._deliver(listener, request)
        else:
            self._queue.append((listener, request))

    def _match(self, request: ResolutionRequest) -> CacheItem | None:
        if request.kind == "phone":
            return self.index.lookup_by_phone(request.first)
        if request.kind == "email":
            return self.index.lookup_by_email(request.first)
        return self.index.lookup_by_account(request.first, request.second)

    def _deliver(self, listener: ResolveListener, request: ResolutionRequest) -> None:
        item = self._match(request)
        logger.debug(f"Delivering {request.kind} resolution (matched={item is not None})")
        listener.on_resolved(request.first, request.second, item)

    def deliver_next(self) -> bool:
        """
        Run the oldest queued callback.

        Returns:
            False if nothing was queued
        """
        if not self._queue:
            return False
        listener, request = self._queue.popleft()
        self._deliver(listener, request)
        return True

    def deliver_pending(self) -> int:
        """
        Run queued callbacks until the queue is empty.

        Includes callbacks queued by submissions made during delivery.

        Returns:
            Number of callbacks delivered
        """
        delivered = 0
        while self.deliver_next():
            delivered += 1
        return delivered

    def lookup_by_phone(self, number: str) -> CacheItem | None:
        return self.index.lookup_by_phone(number)

    def lookup_by_email(self, address: str) -> CacheItem | None:
        return self.index.lookup_by_email(address)

    def lookup_by_account(self, local_address: str, remote_address: str) -> CacheItem | None:
        return self.index.lookup_by_account(local_address, remote_address)

    def generate_display_label(self, item: CacheItem) -> str:
        return self.index.generate_display_label(item)
