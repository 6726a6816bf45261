"""In-process TTL cache for rendered responses.

Entries carry their own TTL and a set of tags, so writes can drop exactly the
responses they make stale. Disabled caches answer every lookup with a miss
and ignore writes.
"""

from __future__ import annotations

import re
import threading
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from cachetools import TLRUCache

from storefront_api.infrastructure.cache.cache_keys import (
    PRODUCT_LIST_TAG,
    product_detail_key,
    product_tag,
)
from storefront_api.infrastructure.configuration.cache_settings import CacheSettings
from storefront_api.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)

logger = LoggerFactoryService.build_logger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    ttl: float
    tags: frozenset[str] = field(default_factory=frozenset)


@dataclass
class CacheCounters:
    hits: int = 0
    misses: int = 0
    sets: int = 0
    deletes: int = 0
    flushes: int = 0

    @property
    def hit_rate(self) -> str:
        lookups = self.hits + self.misses
        if lookups == 0:
            return "0%"
        return f"{self.hits / lookups * 100:.2f}%"


def _expires_at(_key: str, entry: CacheEntry, now: float) -> float:
    return now + entry.ttl


def _pattern_to_regex(pattern: str) -> re.Pattern[str]:
    return re.compile("^" + ".*".join(re.escape(part) for part in pattern.split("*")) + "$")


class ResponseCacheService:
    def __init__(self, settings: CacheSettings, timer: Callable[[], float] = time.monotonic):
        self.settings = settings
        self.enabled = settings.cache_enabled
        self.counters = CacheCounters()
        self._cache: TLRUCache = TLRUCache(
            maxsize=settings.cache_max_keys, ttu=_expires_at, timer=timer
        )
        self._lock = threading.RLock()

    def get(self, key: str) -> Any | None:
        if not self.enabled:
            return None
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                self.counters.misses += 1
                return None
            self.counters.hits += 1
            return entry.value

    def set(
        self, key: str, value: Any, ttl: float | None = None, tags: Iterable[str] = ()
    ) -> bool:
        if not self.enabled:
            return False
        entry = CacheEntry(
            value=value, ttl=ttl or self.settings.cache_default_ttl, tags=frozenset(tags)
        )
        with self._lock:
            self._cache[key] = entry
            self.counters.sets += 1
        return True

    def delete(self, key: str) -> int:
        if not self.enabled:
            return 0
        with self._lock:
            if self._cache.pop(key, None) is None:
                return 0
            self.counters.deletes += 1
            return 1

    def delete_pattern(self, pattern: str) -> int:
        """Deletes every key matching ``pattern``, where ``*`` matches any run of characters."""
        regex = _pattern_to_regex(pattern)
        return self._delete_where(lambda key, _entry: bool(regex.match(key)))

    def invalidate_tag(self, tag: str) -> int:
        return self._delete_where(lambda _key, entry: tag in entry.tags)

    def invalidate_products(self, product_ids: Iterable[str] = ()) -> int:
        """Drops every listing plus the detail entries of the given products."""
        deleted = self.invalidate_tag(PRODUCT_LIST_TAG)
        for product_id in product_ids:
            deleted += self.delete(product_detail_key(product_id))
            deleted += self.invalidate_tag(product_tag(product_id))
        if deleted:
            logger.info(f"Product cache invalidated ({deleted} keys deleted)")
        return deleted

    def flush(self) -> None:
        if not self.enabled:
            return
        with self._lock:
            self._cache.clear()
            self.counters.flushes += 1
        logger.info("Cache flushed all entries")

    def keys(self) -> list[str]:
        if not self.enabled:
            return []
        with self._lock:
            self._cache.expire()
            return list(self._cache.keys())

    def stats(self) -> dict[str, Any]:
        return {
            "enabled": self.enabled,
            "hits": self.counters.hits,
            "misses": self.counters.misses,
            "hitRate": self.counters.hit_rate,
            "sets": self.counters.sets,
            "deletes": self.counters.deletes,
            "flushes": self.counters.flushes,
            "keys": len(self.keys()),
        }

    def config(self) -> dict[str, Any]:
        return {
            "enabled": self.enabled,
            "defaultTTL": self.settings.cache_default_ttl,
            "productListTTL": self.settings.cache_product_list_ttl,
            "productDetailTTL": self.settings.cache_product_detail_ttl,
            "searchTTL": self.settings.cache_search_ttl,
            "maxKeys": self.settings.cache_max_keys,
        }

    def health_check(self) -> dict[str, Any]:
        """Set/get/delete round trip on a throwaway key."""
        if not self.enabled:
            return {"status": "disabled", "enabled": False}
        key = f"health:check:{time.time_ns()}"
        stored = self.set(key, {"test": True}, ttl=1)
        fetched = self.get(key) is not None
        deleted = self.delete(key) > 0
        healthy = stored and fetched and deleted
        return {
            "status": "healthy" if healthy else "unhealthy",
            "enabled": True,
            "operations": {"set": stored, "get": fetched, "delete": deleted},
        }

    def _delete_where(self, predicate: Callable[[str, CacheEntry], bool]) -> int:
        if not self.enabled:
            return 0
        with self._lock:
            self._cache.expire()
            doomed = [key for key in list(self._cache) if predicate(key, self._cache[key])]
            for key in doomed:
                del self._cache[key]
            self.counters.deletes += len(doomed)
            return len(doomed)
