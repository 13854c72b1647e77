"""Helpers shared by contact resolution tests."""

from __future__ import annotations

from src.contact_resolution import ContactResolver, ContactResolverConfig

PHONE_ACCOUNT = "/org/freedesktop/Telepathy/Account/ring/tel/account0"
JABBER_ACCOUNT = "/org/freedesktop/Telepathy/Account/gabble/jabber/alice0"


class Recorder:
    """Collects resolver notifications."""

    def __init__(self, resolver: ContactResolver):
        self.batches: list[list] = []
        self.finished = 0
        self.order: list[str] = []
        resolver.events_resolved.connect(self._on_events_resolved)
        resolver.finished.connect(self._on_finished)

    def _on_events_resolved(self, events: list) -> None:
        self.batches.append(events)
        self.order.append("events_resolved")

    def _on_finished(self) -> None:
        self.finished += 1
        self.order.append("finished")


def make_config(**overrides) -> ContactResolverConfig:
    overrides.setdefault("metrics_enabled", False)
    return ContactResolverConfig(_env_file=None, **overrides)
