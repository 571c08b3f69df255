"""
InMemoryCache - Bounded in-memory cache.

Dict-based cache with least-recently-used eviction and optional per-entry
expiration. All operations hold a re-entrant lock, so check-then-create
through get_or_create() is atomic.
"""

import threading
from collections import OrderedDict
from datetime import datetime, timedelta
from dataclasses import dataclass
from typing import Any, Callable, Hashable, List, Optional

from sigframe.common.logging import get_logger
from ..errors import ArgumentError

logger = get_logger(__name__)


@dataclass
class CacheEntry:
    """Cache entry with optional expiration."""
    value: Any
    expires_at: Optional[datetime] = None

    def is_expired(self) -> bool:
        """Check if entry is expired."""
        if self.expires_at is None:
            return False
        return datetime.now() > self.expires_at


class InMemoryCache:
    """
    In-memory LRU cache.

    Implements CacheProtocol. No persistence - data lost on restart.

    Eviction policy:
        When more than max_size entries are stored, the least recently
        used entry (get, set or get_or_create all count as use) is dropped.
        max_size=None means unbounded.
    """

    def __init__(self, max_size: Optional[int] = None, ttl: Optional[float] = None, name: str = "cache"):
        """
        Args:
            max_size: Maximum number of entries (None = unbounded)
            ttl: Default time-to-live in seconds for new entries (None = forever)
            name: Label used in log records
        """
        if max_size is not None and max_size < 1:
            raise ArgumentError("max_size must be at least 1", data={"max_size": max_size})
        self.max_size = max_size
        self.ttl = ttl
        self.name = name
        self._store: "OrderedDict[Hashable, CacheEntry]" = OrderedDict()
        self._lock = threading.RLock()

    def _live_entry(self, key: Hashable) -> Optional[CacheEntry]:
        entry = self._store.get(key)
        if entry is None:
            return None
        if entry.is_expired():
            del self._store[key]
            return None
        self._store.move_to_end(key)
        return entry

    def _evict(self) -> None:
        if self.max_size is None:
            return
        while len(self._store) > self.max_size:
            key, _ = self._store.popitem(last=False)
            logger.debug("Evicted cache entry", data={"cache": self.name, "key": key})

    def get(self, key: Hashable) -> Optional[Any]:
        """Get value by key."""
        with self._lock:
            entry = self._live_entry(key)
            return None if entry is None else entry.value

    def set(self, key: Hashable, value: Any, ttl: Optional[float] = None) -> None:
        """Set value with optional TTL in seconds (defaults to the cache TTL)."""
        ttl = self.ttl if ttl is None else ttl
        expires_at = None
        if ttl is not None:
            expires_at = datetime.now() + timedelta(seconds=ttl)
        with self._lock:
            self._store[key] = CacheEntry(value=value, expires_at=expires_at)
            self._store.move_to_end(key)
            self._evict()

    def get_or_create(self, key: Hashable, factory: Callable[[], Any]) -> Any:
        """
        Return the cached value for key, creating it with factory() if missing.

        The lookup and the creation happen under the same lock.
        """
        with self._lock:
            entry = self._live_entry(key)
            if entry is not None:
                return entry.value
            value = factory()
            self.set(key, value)
            return value

    def delete(self, key: Hashable) -> None:
        """Delete key."""
        with self._lock:
            self._store.pop(key, None)

    def exists(self, key: Hashable) -> bool:
        """Check if key exists and not expired."""
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return False
            if entry.is_expired():
                del self._store[key]
                return False
            return True

    def clear(self) -> None:
        """Clear all cache."""
        with self._lock:
            self._store.clear()

    def keys(self) -> List[Hashable]:
        """Get all non-expired keys, least recently used first."""
        with self._lock:
            expired = [k for k, entry in self._store.items() if entry.is_expired()]
            for key in expired:
                del self._store[key]
            return list(self._store.keys())

    def size(self) -> int:
        """Get number of entries."""
        return len(self.keys())
