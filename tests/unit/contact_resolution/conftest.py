"""Shared fixtures for contact resolution tests."""

from __future__ import annotations

import pytest

from src.contact_resolution import CacheItem, ContactResolver
from src.contact_resolution.adapters import ContactIndex, InMemoryIdentityCache
from tests.unit.contact_resolution.helpers import JABBER_ACCOUNT, Recorder, make_config


@pytest.fixture
def contacts() -> list[CacheItem]:
    return [
        CacheItem(
            identity_id=1,
            first_name="Alice",
            last_name="Smith",
            phone_numbers=("+1 (555) 123-4567",),
            email_addresses=("Alice@Example.com",),
        ),
        CacheItem(
            identity_id=2,
            first_name="Bob",
            last_name="Jones",
            accounts=((JABBER_ACCOUNT, "bob@jabber.example"),),
        ),
        CacheItem(identity_id=3, nickname="Carol", phone_numbers=("+44 20 7946 0958",)),
    ]


@pytest.fixture
def cache(contacts) -> InMemoryIdentityCache:
    return InMemoryIdentityCache(ContactIndex(contacts))


@pytest.fixture
def resolver(cache) -> ContactResolver:
    return ContactResolver(cache, config=make_config())


@pytest.fixture
def recorder(resolver) -> Recorder:
    return Recorder(resolver)
