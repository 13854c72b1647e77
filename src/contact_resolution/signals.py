"""
Signals

Minimal observer lists used to publish resolver notifications.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class Signal:
    """
    A named list of callbacks.

    Callbacks run synchronously in connection order. Exceptions raised by a
    callback propagate to whoever emitted the signal.
    """

    def __init__(self, name: str):
        self.name = name
        self._slots: list[Callable[..., Any]] = []

    def __len__(self) -> int:
        return len(self._slots)

    def connect(self, slot: Callable[..., Any]) -> Callable[..., Any]:
        """Register ``slot``. Returns it, so this can be used as a decorator."""
        self._slots.append(slot)
        return slot

    def disconnect(self, slot: Callable[..., Any]) -> None:
        try:
            self._slots.remove(slot)
        except ValueError:
            logger.debug(f"Signal {self.name}: slot was not connected")

    def emit(self, *args: Any) -> None:
        # Iterate over a copy; slots may connect or disconnect while running
        for slot in list(self._slots):
            slot(*args)
