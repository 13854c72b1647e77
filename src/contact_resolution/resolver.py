"""
Contact Resolver

Resolves the addresses of communication events to contacts in batches.

Implementation logic:
- Normalize the address of every event before requesting resolution, so
  that one request is made per distinct address.
- Count completion callbacks (one per request) to track progress.
- When every request has completed, ask the cache for the best match of
  each event using its un-normalized addresses, and hand the resolved
  events to observers via the ``events_resolved`` and ``finished`` signals.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable

from src.common.logging import get_sanitized_logger
from src.common.telemetry import ResolverMetrics, get_resolver_metrics

from .config import ContactResolverConfig
from .deduplicator import RequestDeduplicator
from .gate import CompletionGate
from .materializer import BatchMaterializer
from .models import CacheItem, Event
from .normalization import AddressNormalizer
from .protocols import IdentityCache
from .signals import Signal

logger = logging.getLogger(__name__)

_PACKAGE = __name__.rpartition(".")[0]
_LIBRARY_LOGGERS = tuple(
    f"{_PACKAGE}.{module}"
    for module in (
        "resolver",
        "deduplicator",
        "materializer",
        "adapters.async_cache",
        "adapters.memory",
        "adapters.factory",
    )
)


class ContactResolver:
    """
    Batching, deduplicating front end to an identity cache.

    Events can be appended or prepended at any time, including while a
    batch is being resolved. Once every outstanding request has called
    back, the batch is materialized, internal state is cleared, and the
    ``events_resolved(list[Event])`` and ``finished()`` signals fire.
    Observers may start a new batch from inside those callbacks.

    All methods must be called from a single thread, and the cache must
    deliver its callbacks on that same thread.
    """

    def __init__(
        self,
        cache: IdentityCache,
        config: ContactResolverConfig | None = None,
        metrics: ResolverMetrics | None = None,
    ):
        self._config = config or ContactResolverConfig()
        self._cache = cache

        if self._config.sanitize_logs:
            for name in _LIBRARY_LOGGERS:
                get_sanitized_logger(name)

        if metrics is None and self._config.metrics_enabled:
            metrics = get_resolver_metrics()
        self._metrics = metrics

        self._normalizer = AddressNormalizer(
            phone_account_prefixes=self._config.phone_account_prefixes,
            max_phone_characters=self._config.phone_number_max_characters,
        )
        self._deduplicator = RequestDeduplicator(
            cache, listener=self, urgent=self._config.urgent_requests
        )
        self._gate = CompletionGate()
        self._materializer = BatchMaterializer(cache, self._normalizer)

        # Events of the pending batch, in emission order
        self._events: list[Event] = []
        self._batch_started: float = 0.0
        # Set while an append/prepend call walks its input
        self._adding = False

        self.events_resolved = Signal("events_resolved")
        self.finished = Signal("finished")

    @property
    def config(self) -> ContactResolverConfig:
        return self._config

    @property
    def outstanding_requests(self) -> int:
        """Number of submitted requests still waiting for a callback."""
        return self._gate.outstanding

    def is_resolving(self) -> bool:
        return bool(self._events)

    def current_events(self) -> list[Event]:
        """
        Best-effort resolved view of the pending batch.

        Recomputed on every call from what the cache currently holds.
        Only final once the batch has been emitted.
        """
        return self._materializer.materialize(self._events)

    def append_events(self, events: Iterable[Event]) -> None:
        """Add ``events`` to the end of the pending batch."""
        self._add_events(events, prepend=False)

    def prepend_events(self, events: Iterable[Event]) -> None:
        """Add ``events`` to the front of the pending batch, keeping their order."""
        self._add_events(events, prepend=True)

    def _add_events(self, events: Iterable[Event], prepend: bool) -> None:
        if not self._events:
            self._batch_started = time.monotonic()

        added: list[Event] = []
        self._adding = True
        try:
            for event in events:
                self._resolve_event(event)
                added.append(event)
        finally:
            self._adding = False
            # Events already submitted stay in the batch if a later one fails
            if prepend:
                self._events[:0] = added
            else:
                self._events.extend(added)

        self._check_if_resolved()

    def _resolve_event(self, event: Event) -> None:
        if not event.local_address and not event.remote_address:
            logger.debug("Skipping event without addresses")
            return

        key = self._normalizer.event_key(event)
        if self._deduplicator.submit_if_new(key):
            self._gate.on_submitted()
            if self._metrics is not None:
                self._metrics.record_request(self._deduplicator.kind_of(key))
        elif self._metrics is not None and not key.is_empty():
            self._metrics.record_deduplicated()

    def on_resolved(self, first: str, second: str, item: CacheItem | None) -> None:
        """Completion callback from the identity cache."""
        self._gate.on_completed()
        if not self._adding:
            self._check_if_resolved()

    def _check_if_resolved(self) -> None:
        if not self._gate.is_complete(has_events=bool(self._events)):
            return

        resolved = self._materializer.materialize(self._events)
        elapsed_ms = (time.monotonic() - self._batch_started) * 1000

        # Clear before notifying: observers may start the next batch
        self._events = []
        self._deduplicator.reset()
        self._gate.reset()

        logger.debug(f"Resolved {len(resolved)} events in {elapsed_ms:.1f} ms")
        if self._metrics is not None:
            self._metrics.record_batch(len(resolved), elapsed_ms)

        self.events_resolved.emit(resolved)
        self.finished.emit()
