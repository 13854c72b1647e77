"""
Completion Gate

Counts submitted and completed lookups to decide when a batch is done.
"""

from __future__ import annotations

from enum import Enum


class GateState(Enum):
    """Completion gate states."""

    PENDING = "pending"  # Lookups outstanding
    COMPLETE = "complete"  # Every submitted lookup has called back


class CompletionGate:
    """
    Count-based completion tracking.

    The cache guarantees one callback per submission, so comparing the two
    counts is enough; per-key status is not tracked.
    """

    def __init__(self) -> None:
        self._submitted = 0
        self._completed = 0

    @property
    def submitted(self) -> int:
        return self._submitted

    @property
    def completed(self) -> int:
        return self._completed

    @property
    def outstanding(self) -> int:
        return max(self._submitted - self._completed, 0)

    def on_submitted(self) -> None:
        self._submitted += 1

    def on_completed(self) -> None:
        self._completed += 1

    def state(self, has_events: bool = True) -> GateState:
        if has_events and self._completed >= self._submitted:
            return GateState.COMPLETE
        return GateState.PENDING

    def is_complete(self, has_events: bool = True) -> bool:
        """
        Whether the batch can be emitted.

        Args:
            has_events: Whether the batch holds any events; an empty batch
                is never complete.
        """
        return self.state(has_events) is GateState.COMPLETE

    def reset(self) -> None:
        self._submitted = 0
        self._completed = 0
