"""Bounded in-memory cache of resolved translation text.

The cache maps a TranslationKey to its resolved text and keeps an
approximate size account. When the account is over budget at insertion
time the whole cache is cleared before the new entry goes in: there is no
per-entry eviction.
"""

import math
import threading
from typing import Any, Callable, Dict, Optional

from infrastructure.i18n.models import CacheEntry, TranslationKey
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_MAX_CACHE_SIZE_KB = 8192
DEFAULT_MAX_CACHE_SIZE_BYTES = DEFAULT_MAX_CACHE_SIZE_KB * 1024


def entry_size(key: TranslationKey, value: str) -> int:
    """Approximate size of a cache entry.

    Counts the characters of the raw key and of the value, not the composite
    key. This is a rough figure, not a byte count.
    """
    return len(key.key) + len(value)


class TranslationCache:
    """Thread-safe translation cache with size accounting and hit statistics.

    Attributes:
        max_size_bytes: Size budget. Checked before each insertion, so the
            cache can grow past it by one entry.
        on_full: Optional hook called once per capacity-triggered clear,
            before the clear runs.
    """

    def __init__(
        self,
        max_size_bytes: int = DEFAULT_MAX_CACHE_SIZE_BYTES,
        on_full: Optional[Callable[[], None]] = None,
    ):
        """Initialize TranslationCache.

        Args:
            max_size_bytes: Size budget (default: 8MB).
            on_full: Optional hook called before a capacity-triggered clear.
        """
        self.max_size_bytes = max_size_bytes
        self.on_full = on_full
        self._entries: Dict[str, CacheEntry] = {}
        self._size_bytes = 0
        self._total_hits = 0
        self._total_queries = 0
        self._lock = threading.RLock()

    @property
    def size_bytes(self) -> int:
        return self._size_bytes

    @property
    def total_hits(self) -> int:
        return self._total_hits

    @property
    def total_queries(self) -> int:
        return self._total_queries

    @property
    def count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: TranslationKey) -> bool:
        return key.cache_key in self._entries

    def get(self, key: TranslationKey) -> Optional[str]:
        """Look up a resolved text and record the query.

        Args:
            key: Variant to look up.

        Returns:
            Cached text, or None on a miss.
        """
        with self._lock:
            self._total_queries += 1
            entry = self._entries.get(key.cache_key)
            if entry is None:
                return None
            self._total_hits += 1
            return entry.value

    def put(self, key: TranslationKey, value: str) -> None:
        """Store a resolved text.

        When the size account is over budget the on_full hook runs and the
        whole cache is cleared before the entry is inserted. Hit and query
        counters survive the clear.

        Args:
            key: Variant the text was resolved for.
            value: Resolved text.
        """
        with self._lock:
            self._discard(key.cache_key)

            if self._size_bytes > self.max_size_bytes:
                self._notify_full()
                self.clear()

            size = entry_size(key, value)
            self._entries[key.cache_key] = CacheEntry(
                cache_key=key.cache_key, value=value, size_bytes=size
            )
            self._size_bytes += size

    def invalidate(self, key: TranslationKey) -> bool:
        """Remove one entry.

        Args:
            key: Variant to remove.

        Returns:
            True if an entry was removed, False if it was absent.
        """
        with self._lock:
            return self._discard(key.cache_key)

    def clear(self) -> None:
        """Drop every entry. Hit and query counters are kept."""
        with self._lock:
            dropped = len(self._entries)
            self._entries.clear()
            self._size_bytes = 0
        logger.info("translation_cache_cleared", entries=dropped)

    def reset(self) -> None:
        """Drop every entry and zero the hit and query counters."""
        with self._lock:
            self.clear()
            self._total_hits = 0
            self._total_queries = 0

    def hit_ratio(self) -> float:
        """Ratio of hits to queries.

        Returns:
            total_hits / total_queries, or NaN when nothing was queried yet.
        """
        with self._lock:
            if self._total_queries == 0:
                return math.nan
            return self._total_hits / self._total_queries

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with entry count, size account, budget and hit statistics.
        """
        with self._lock:
            return {
                "backend": "memory",
                "entries": len(self._entries),
                "size_bytes": self._size_bytes,
                "max_size_bytes": self.max_size_bytes,
                "total_hits": self._total_hits,
                "total_queries": self._total_queries,
                "hit_ratio": self.hit_ratio(),
            }

    def _discard(self, cache_key: str) -> bool:
        entry = self._entries.pop(cache_key, None)
        if entry is None:
            return False
        self._size_bytes -= entry.size_bytes
        return True

    def _notify_full(self) -> None:
        logger.warning(
            "translation_cache_full",
            entries=len(self._entries),
            size_bytes=self._size_bytes,
            max_size_bytes=self.max_size_bytes,
        )
        if self.on_full is None:
            return
        try:
            self.on_full()
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "translation_cache_monitor_error",
                error=str(e),
                exc_info=True,
            )
