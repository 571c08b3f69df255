"""Unit tests for the in-memory cache.

Tests InMemoryCache:
    - CacheProtocol compliance
    - LRU eviction with max_size
    - TTL expiration
    - Atomic get_or_create
"""

import threading
import time

import pytest


@pytest.mark.unit
class TestInMemoryCache:
    """Tests for InMemoryCache implementation."""

    @pytest.fixture
    def cache(self):
        """Create fresh InMemoryCache for each test."""
        from sigframe.core.cache import InMemoryCache
        return InMemoryCache()

    def test_protocol_compliance(self, cache):
        """Test InMemoryCache satisfies CacheProtocol.

        Checks:
            isinstance against the runtime-checkable protocol
        """
        from sigframe.core.interfaces import CacheProtocol

        assert isinstance(cache, CacheProtocol)

    def test_set_and_get_basic(self, cache):
        """Test basic set/get operations."""
        cache.set("key1", "value1")
        cache.set(1024, [1, 2, 3])

        assert cache.get("key1") == "value1"
        assert cache.get(1024) == [1, 2, 3]

    def test_get_nonexistent_key(self, cache):
        """Missing keys return None, not raise exception."""
        assert cache.get("nonexistent") is None

    def test_delete_and_exists(self, cache):
        cache.set("k", 1)
        assert cache.exists("k")

        cache.delete("k")
        cache.delete("never-there")
        assert not cache.exists("k")

    def test_clear(self, cache):
        cache.set("a", 1)
        cache.set("b", 2)
        cache.clear()

        assert cache.size() == 0

    def test_set_with_ttl(self, cache):
        """Test TTL expiration.

        Checks:
            Keys expire after TTL seconds
        """
        cache.set("expiring", "value", ttl=0.1)
        assert cache.get("expiring") == "value"

        time.sleep(0.2)

        assert cache.get("expiring") is None
        assert not cache.exists("expiring")

    def test_default_ttl(self):
        from sigframe.core.cache import InMemoryCache

        cache = InMemoryCache(ttl=0.1)
        cache.set("k", 1)
        time.sleep(0.2)

        assert cache.keys() == []


@pytest.mark.unit
class TestInMemoryCacheEviction:
    """LRU eviction when max_size is set."""

    def test_oldest_evicted(self):
        from sigframe.core.cache import InMemoryCache

        cache = InMemoryCache(max_size=2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("c", 3)

        assert cache.keys() == ["b", "c"]

    def test_get_refreshes_recency(self):
        """Test reads count as use.

        Checks:
            A key read after insertion survives the next eviction
        """
        from sigframe.core.cache import InMemoryCache

        cache = InMemoryCache(max_size=2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.get("a")
        cache.set("c", 3)

        assert cache.get("a") == 1
        assert cache.get("b") is None

    def test_invalid_max_size(self):
        from sigframe.core.cache import InMemoryCache
        from sigframe.core.errors import ArgumentError

        with pytest.raises(ArgumentError):
            InMemoryCache(max_size=0)


@pytest.mark.unit
class TestGetOrCreate:
    """Check-then-create under one lock."""

    def test_creates_once(self):
        from sigframe.core.cache import InMemoryCache

        cache = InMemoryCache()
        calls = []

        def factory():
            calls.append(1)
            return object()

        first = cache.get_or_create("k", factory)
        second = cache.get_or_create("k", factory)

        assert first is second
        assert len(calls) == 1

    def test_concurrent_creation(self):
        from sigframe.core.cache import InMemoryCache

        cache = InMemoryCache()
        calls = []
        results = []

        def factory():
            calls.append(1)
            time.sleep(0.01)
            return object()

        def worker():
            results.append(cache.get_or_create("k", factory))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert len({id(r) for r in results}) == 1
