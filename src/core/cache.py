"""In-process, time-boxed cache of computed destination batches."""
from __future__ import annotations

import logging
import time
from collections import OrderedDict
from typing import Callable, Optional, Sequence

from src.core.schemas import CacheEntry, DestinationRecord

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "destinations-v7"
DEFAULT_TTL_S = 3600.0
DEFAULT_MAX_ENTRIES = 256


def make_cache_key(budget: int, currency: str) -> str:
    return f"{CACHE_KEY_PREFIX}-{budget}-{currency}"


class ResultCache:
    """Freshness-checked map of cache keys to destination batches.

    Entries older than ``ttl_s`` are treated exactly like missing ones and are
    dropped on read. Once ``max_entries`` is exceeded the least recently used
    entry is evicted.
    """

    def __init__(
        self,
        *,
        ttl_s: float = DEFAULT_TTL_S,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.ttl_s = ttl_s
        self.max_entries = max_entries
        self._clock = clock
        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def get(self, key: str) -> Optional[CacheEntry]:
        """Return the fresh entry stored under ``key``, or ``None``."""

        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.timestamp >= self.ttl_s:
            logger.debug(f"Cache entry {key} expired")
            del self._entries[key]
            return None
        self._entries.move_to_end(key)
        return entry

    def put(self, key: str, records: Sequence[DestinationRecord]) -> CacheEntry:
        """Store a new batch under ``key``, replacing any previous entry."""

        entry = CacheEntry(timestamp=self._clock(), data=tuple(records))
        self._entries[key] = entry
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug(f"Evicted cache entry {evicted}")
        return entry
