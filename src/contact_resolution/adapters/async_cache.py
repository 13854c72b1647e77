"""
Asyncio Identity Cache

Resolves submissions through an async contact backend on the running
event loop and records the results in a ContactIndex.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Protocol, runtime_checkable

from ..models import CacheItem
from ..protocols import ResolveListener
from .index import ContactIndex

logger = logging.getLogger(__name__)


@runtime_checkable
class ContactBackend(Protocol):
    """Async source of contacts (address book service, database, ...)."""

    async def fetch_by_phone(self, number: str) -> CacheItem | None: ...

    async def fetch_by_email(self, address: str) -> CacheItem | None: ...

    async def fetch_by_account(
        self, local_address: str, remote_address: str
    ) -> CacheItem | None: ...


class StaticContactBackend:
    """ContactBackend serving a fixed set of contacts."""

    def __init__(self, items: Iterable[CacheItem] = (), delay_seconds: float = 0.0):
        self._index = ContactIndex(items)
        self._delay = delay_seconds

    async def _respond(self, item: CacheItem | None) -> CacheItem | None:
        if self._delay > 0:
            await asyncio.sleep(self._delay)
        return item

    async def fetch_by_phone(self, number: str) -> CacheItem | None:
        return await self._respond(self._index.lookup_by_phone(number))

    async def fetch_by_email(self, address: str) -> CacheItem | None:
        return await self._respond(self._index.lookup_by_email(address))

    async def fetch_by_account(
        self, local_address: str, remote_address: str
    ) -> CacheItem | None:
        return await self._respond(self._index.lookup_by_account(local_address, remote_address))


class AsyncIdentityCache:
    """
    IdentityCache running lookups as asyncio tasks.

    Each submission becomes one task that awaits the backend (bounded by
    ``timeout_seconds``), stores a found contact in the index, and then
    calls the listener exactly once on the event loop. Backend errors and
    timeouts are logged and reported as "no match".

    Submissions must be made while an event loop is running.
    """

    def __init__(
        self,
        backend: ContactBackend,
        index: ContactIndex | None = None,
        timeout_seconds: float = 5.0,
    ):
        self._backend = backend
        self.index = index if index is not None else ContactIndex()
        self._timeout_seconds = timeout_seconds
        self._tasks: set[asyncio.Task] = set()

    @property
    def in_flight(self) -> int:
        return len(self._tasks)

    def submit_phone_resolution(
        self, listener: ResolveListener, number: str, urgent: bool = True
    ) -> None:
        fetch = functools.partial(self._backend.fetch_by_phone, number)
        self._schedule(listener, number, "", fetch)

    def submit_email_resolution(
        self, listener: ResolveListener, address: str, urgent: bool = True
    ) -> None:
        fetch = functools.partial(self._backend.fetch_by_email, address)
        self._schedule(listener, address, "", fetch)

    def submit_account_resolution(
        self,
        listener: ResolveListener,
        local_address: str,
        remote_address: str,
        urgent: bool = True,
    ) -> None:
        self._schedule(
            listener,
            local_address,
            remote_address,
            functools.partial(self._backend.fetch_by_account, local_address, remote_address),
        )

    def _schedule(
        self,
        listener: ResolveListener,
        first: str,
        second: str,
        fetch: Callable[[], Awaitable[CacheItem | None]],
    ) -> None:
        loop = asyncio.get_running_loop()
        task = loop.create_task(self._resolve(listener, first, second, fetch))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _resolve(
        self,
        listener: ResolveListener,
        first: str,
        second: str,
        fetch: Callable[[], Awaitable[CacheItem | None]],
    ) -> None:
        item: CacheItem | None = None
        try:
            item = await asyncio.wait_for(fetch(), timeout=self._timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning(f"Contact lookup timed out after {self._timeout_seconds}s")
        except Exception as e:
            logger.warning(f"Contact lookup failed: {e}")

        if item is not None:
            self.index.add(item)
        listener.on_resolved(first, second, item)

    async def drain(self) -> None:
        """Wait until every submitted lookup has called back."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def aclose(self) -> None:
        """Cancel lookups still in flight. Their listeners are not called."""
        for task in list(self._tasks):
            task.cancel()
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def lookup_by_phone(self, number: str) -> CacheItem | None:
        return self.index.lookup_by_phone(number)

    def lookup_by_email(self, address: str) -> CacheItem | None:
        return self.index.lookup_by_email(address)

    def lookup_by_account(self, local_address: str, remote_address: str) -> CacheItem | None:
        return self.index.lookup_by_account(local_address, remote_address)

    def generate_display_label(self, item: CacheItem) -> str:
        return self.index.generate_display_label(item)
