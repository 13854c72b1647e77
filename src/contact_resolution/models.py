"""
Contact Resolution Models

Data classes for communication events and the identities attached to them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple


class AddressKey(NamedTuple):
    """
    Canonical (local, remote) address pair.

    Only used for deduplicating resolution requests; compared by equality
    and hash, never persisted.
    """

    local: str
    remote: str

    def is_empty(self) -> bool:
        return not self.local and not self.remote


@dataclass(frozen=True)
class ResolvedIdentity:
    """A contact attached to an event after resolution."""

    identity_id: int
    display_label: str


@dataclass
class Event:
    """
    A communication event (call, message) referencing a remote party.

    Events are owned by the caller. The resolver hands back copies with
    ``contacts`` filled in; it never mutates the instances it was given.
    """

    local_address: str  # Local account, e.g. "/org/freedesktop/Telepathy/Account/ring/tel/account0"
    remote_address: str  # Remote party, e.g. "+1 (555) 123-4567"
    contacts: list[ResolvedIdentity] = field(default_factory=list)
    event_id: int | None = None


@dataclass(frozen=True)
class CacheItem:
    """
    A contact entry held by an identity cache.

    This is the match handle passed to completion callbacks and to
    ``generate_display_label``.
    """

    identity_id: int
    first_name: str = ""
    last_name: str = ""
    nickname: str = ""
    phone_numbers: tuple[str, ...] = ()
    email_addresses: tuple[str, ...] = ()
    accounts: tuple[tuple[str, str], ...] = ()  # (local account, remote handle)

