"""
Cache - In-memory cache implementations.

- inmemory_cache.py: bounded LRU with optional TTL (transform instances,
  DCT factor tables)
"""

from .inmemory_cache import InMemoryCache, CacheEntry

__all__ = [
    "InMemoryCache",
    "CacheEntry",
]
