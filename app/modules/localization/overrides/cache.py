"""Read cache for override lookups.

The cache holds an immutable snapshot of every override keyed by
``key|language``. The snapshot expires after ``ttl_seconds`` without access
(sliding expiry), so values written by another instance become visible
within that window even without an explicit invalidation.
"""

import threading
import time
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional

from infrastructure.logging import get_module_logger
from modules.localization.overrides.models import OverrideRecord

logger = get_module_logger()

DEFAULT_TTL_SECONDS = 24 * 60 * 60

Loader = Callable[[], Iterable[OverrideRecord]]


class OverrideCache:
    """Mutex-guarded get-or-load cache over an immutable snapshot.

    Args:
        ttl_seconds: Sliding lifetime of a loaded snapshot.
        clock: Monotonic time source, replaceable in tests.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._snapshot: Optional[Mapping[str, OverrideRecord]] = None
        self._expires_at = 0.0
        self._generation = 0

    def get_or_load(self, loader: Loader) -> Mapping[str, OverrideRecord]:
        """Return the current snapshot, loading it when absent or expired."""
        now = self._clock()
        with self._lock:
            if self._snapshot is not None and now < self._expires_at:
                self._expires_at = now + self.ttl_seconds
                return self._snapshot
            generation = self._generation

        # Loading happens outside the lock. A snapshot loaded across an
        # invalidation is returned to its caller but never installed.
        records = {record.cache_key: record for record in loader()}
        snapshot = MappingProxyType(records)
        with self._lock:
            if generation != self._generation:
                logger.debug("override_cache_load_discarded", entries=len(records))
                return snapshot
            self._snapshot = snapshot
            self._expires_at = self._clock() + self.ttl_seconds
        logger.debug("override_cache_loaded", entries=len(records))
        return snapshot

    def invalidate(self) -> None:
        with self._lock:
            self._snapshot = None
            self._expires_at = 0.0
            self._generation += 1

    @property
    def is_loaded(self) -> bool:
        with self._lock:
            return self._snapshot is not None and self._clock() < self._expires_at
