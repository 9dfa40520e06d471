"""Time-bounded, size-bounded cache for analysis results."""

from __future__ import annotations

import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Generic, Optional, Tuple, TypeVar

from .config import CacheConfig
from .logging import get_logger
from .utils import deterministic_hash

LOGGER = get_logger(__name__)

T = TypeVar("T")
Clock = Callable[[], float]


@dataclass(frozen=True)
class CacheStats:
    size: int
    oldest_entry: float
    newest_entry: float
    hits: int
    misses: int


class AnalysisCache(Generic[T]):
    """Cache keyed by a hash of the input text.

    Entries expire ``ttl_seconds`` after they were stored. When the cache grows
    past ``max_entries`` the oldest entries are evicted first, so the most
    recently produced results survive.
    """

    def __init__(self, config: CacheConfig | None = None, clock: Clock = time.time) -> None:
        self.config = config or CacheConfig()
        self.config.validate()
        self._clock = clock
        self._entries: "OrderedDict[str, Tuple[float, T]]" = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @staticmethod
    def key_for(text: str) -> str:
        return deterministic_hash(text)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, text: str) -> Optional[T]:
        key = self.key_for(text)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None
            stored_at, value = entry
            if self._clock() - stored_at >= self.config.ttl_seconds:
                del self._entries[key]
                self._misses += 1
                return None
            self._hits += 1
            return value

    def put(self, text: str, value: T) -> None:
        key = self.key_for(text)
        with self._lock:
            now = self._clock()
            self._entries.pop(key, None)
            self._entries[key] = (now, value)
            self._purge_expired(now)
            while len(self._entries) > self.config.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                LOGGER.debug("Evicted cache entry %s", evicted[:12])

    def _purge_expired(self, now: float) -> None:
        expired = [key for key, (stored_at, _) in self._entries.items() if now - stored_at >= self.config.ttl_seconds]
        for key in expired:
            del self._entries[key]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> CacheStats:
        with self._lock:
            stamps = [stored_at for stored_at, _ in self._entries.values()]
            return CacheStats(
                size=len(stamps),
                oldest_entry=min(stamps) if stamps else 0.0,
                newest_entry=max(stamps) if stamps else 0.0,
                hits=self._hits,
                misses=self._misses,
            )


__all__ = ["AnalysisCache", "CacheStats"]
