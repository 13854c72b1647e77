"""
Address Normalization

Derives the canonical keys used to deduplicate resolution requests.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from .models import AddressKey, Event

DEFAULT_PHONE_ACCOUNT_PREFIXES: tuple[str, ...] = ("/org/freedesktop/Telepathy/Account/ring/",)

# Visual separators people and carriers put into phone numbers
_PHONE_SEPARATORS = re.compile(r"[\s()\-./]")


def minimize_phone_number(number: str, max_characters: int = 0) -> str:
    """
    Reduce a phone number to its comparable digits.

    Args:
        number: Raw phone number, e.g. "+1 (555) 123-4567"
        max_characters: Keep only this many trailing digits (0 keeps all)

    Returns:
        Digits only (e.g. "15551234567"), or "" if the input is not a phone number
    """
    stripped = _PHONE_SEPARATORS.sub("", number)
    if stripped.startswith("+"):
        stripped = stripped[1:]
    if not stripped.isdigit() or not stripped.isascii():
        return ""
    if max_characters > 0:
        return stripped[-max_characters:]
    return stripped


def compares_phone_numbers(
    local_address: str,
    phone_account_prefixes: Sequence[str] = DEFAULT_PHONE_ACCOUNT_PREFIXES,
) -> bool:
    """Whether events on this local account are matched by phone number."""
    if not local_address:
        return True
    return any(local_address.startswith(prefix) for prefix in phone_account_prefixes)


class AddressNormalizer:
    """
    Builds comparison-ready AddressKeys from raw address pairs.

    Phone accounts drop the local component and minimize the remote number;
    everything else is case folded component by component.
    """

    def __init__(
        self,
        phone_account_prefixes: Sequence[str] = DEFAULT_PHONE_ACCOUNT_PREFIXES,
        max_phone_characters: int = 0,
    ):
        self._phone_account_prefixes = tuple(phone_account_prefixes)
        self._max_phone_characters = max_phone_characters

    def compares_phone_numbers(self, local_address: str) -> bool:
        return compares_phone_numbers(local_address, self._phone_account_prefixes)

    def normalize(self, local_address: str, remote_address: str) -> AddressKey:
        if self.compares_phone_numbers(local_address):
            remote = minimize_phone_number(remote_address, self._max_phone_characters)
            if not remote:
                remote = remote_address
            return AddressKey("", remote.casefold())
        return AddressKey(local_address.casefold(), remote_address.casefold())

    def event_key(self, event: Event) -> AddressKey:
        return self.normalize(event.local_address, event.remote_address)
