"""Tests for BatchMaterializer."""

from __future__ import annotations

from unittest.mock import MagicMock

from src.contact_resolution import (
    AddressNormalizer,
    BatchMaterializer,
    CacheItem,
    Event,
    ResolvedIdentity,
)
from tests.unit.contact_resolution.helpers import JABBER_ACCOUNT, PHONE_ACCOUNT


class TestBatchMaterializer:
    """Test suite for BatchMaterializer."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.cache = MagicMock()
        self.cache.generate_display_label.side_effect = lambda item: f"label-{item.identity_id}"
        self.cache.lookup_by_phone.return_value = None
        self.cache.lookup_by_email.return_value = None
        self.cache.lookup_by_account.return_value = None
        self.materializer = BatchMaterializer(self.cache, AddressNormalizer())

    def test_phone_events_query_raw_number(self) -> None:
        self.cache.lookup_by_phone.return_value = CacheItem(identity_id=7)

        (event,) = self.materializer.materialize([Event(PHONE_ACCOUNT, "+1 (555) 123-4567")])

        self.cache.lookup_by_phone.assert_called_once_with("+1 (555) 123-4567")
        assert event.contacts == [ResolvedIdentity(7, "label-7")]

    def test_empty_remote_queries_email(self) -> None:
        self.materializer.materialize([Event("Alice@Example.com", "")])
        self.cache.lookup_by_email.assert_called_once_with("Alice@Example.com")

    def test_account_pair_queries_account(self) -> None:
        self.materializer.materialize([Event(JABBER_ACCOUNT, "Bob@Jabber.Example")])
        self.cache.lookup_by_account.assert_called_once_with(JABBER_ACCOUNT, "Bob@Jabber.Example")

    def test_no_match_gives_empty_contacts(self) -> None:
        (event,) = self.materializer.materialize([Event("", "123")])
        assert event.contacts == []
        self.cache.generate_display_label.assert_not_called()

    def test_event_without_addresses_is_not_queried(self) -> None:
        (event,) = self.materializer.materialize([Event("", "")])

        assert event.contacts == []
        self.cache.lookup_by_phone.assert_not_called()

    def test_stale_contacts_are_replaced(self) -> None:
        stale = Event("", "123", contacts=[ResolvedIdentity(99, "Old")])

        (event,) = self.materializer.materialize([stale])

        assert event.contacts == []
        assert stale.contacts == [ResolvedIdentity(99, "Old")]

    def test_preserves_order_and_fields(self) -> None:
        events = [Event("", "1", event_id=1), Event("", "2", event_id=2)]

        resolved = self.materializer.materialize(events)

        assert [e.event_id for e in resolved] == [1, 2]
