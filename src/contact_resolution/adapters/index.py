"""
In-memory contact index with best-match lookups.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal

from ..models import CacheItem
from ..normalization import minimize_phone_number


class ContactIndex:
    """
    Holds cache items and answers best-match queries.

    Phone lookups prefer a contact that stores the number exactly as
    given, then fall back to comparing minimized numbers. Email and
    account lookups are case-insensitive.
    """

    def __init__(
        self,
        items: Iterable[CacheItem] = (),
        display_label_order: Literal["first_last", "last_first"] = "first_last",
        max_phone_characters: int = 0,
    ):
        self._items: dict[int, CacheItem] = {}
        self._display_label_order = display_label_order
        self._max_phone_characters = max_phone_characters
        for item in items:
            self.add(item)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, identity_id: object) -> bool:
        return identity_id in self._items

    def add(self, item: CacheItem) -> None:
        """Insert or replace the item with ``item.identity_id``."""
        self._items[item.identity_id] = item

    def remove(self, identity_id: int) -> CacheItem | None:
        return self._items.pop(identity_id, None)

    def get(self, identity_id: int) -> CacheItem | None:
        return self._items.get(identity_id)

    def lookup_by_phone(self, number: str) -> CacheItem | None:
        if not number:
            return None

        for item in self._items.values():
            if number in item.phone_numbers:
                return item

        minimized = minimize_phone_number(number, self._max_phone_characters)
        if not minimized:
            # Not a dialable number; an exact string match was the only option
            folded = number.casefold()
            for item in self._items.values():
                if any(p.casefold() == folded for p in item.phone_numbers):
                    return item
            return None

        for item in self._items.values():
            for phone in item.phone_numbers:
                if minimize_phone_number(phone, self._max_phone_characters) == minimized:
                    return item
        return None

    def lookup_by_email(self, address: str) -> CacheItem | None:
        if not address:
            return None
        folded = address.casefold()
        for item in self._items.values():
            if any(email.casefold() == folded for email in item.email_addresses):
                return item
        return None

    def lookup_by_account(self, local_address: str, remote_address: str) -> CacheItem | None:
        wanted = (local_address.casefold(), remote_address.casefold())
        for item in self._items.values():
            for local, remote in item.accounts:
                if (local.casefold(), remote.casefold()) == wanted:
                    return item
        return None

    def generate_display_label(self, item: CacheItem) -> str:
        """
        Human readable name for ``item``.

        Falls back from names to nickname to the first stored address.
        """
        first, last = item.first_name.strip(), item.last_name.strip()
        if first and last:
            if self._display_label_order == "last_first":
                return f"{last}, {first}"
            return f"{first} {last}"
        if first or last:
            return first or last
        if item.nickname:
            return item.nickname
        for address in (*item.phone_numbers, *item.email_addresses):
            if address:
                return address
        for _, remote in item.accounts:
            if remote:
                return remote
        return "(Unnamed)"
