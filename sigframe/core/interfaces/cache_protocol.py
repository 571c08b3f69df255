"""
Cache Protocol - Interface for cache implementations.

Implementations:
- InMemoryCache (sigframe.core.cache.inmemory_cache)
"""

from typing import Protocol, Optional, Any, Callable, Hashable, runtime_checkable


@runtime_checkable
class CacheProtocol(Protocol):
    """Protocol for cache implementations (DI interface)."""

    def get(self, key: Hashable) -> Optional[Any]:
        """Get value by key."""
        ...

    def set(self, key: Hashable, value: Any, ttl: Optional[float] = None) -> None:
        """Set value with optional TTL in seconds."""
        ...

    def get_or_create(self, key: Hashable, factory: Callable[[], Any]) -> Any:
        """Return the cached value, creating and storing it atomically if missing."""
        ...

    def delete(self, key: Hashable) -> None:
        """Delete key."""
        ...

    def exists(self, key: Hashable) -> bool:
        """Check if key exists."""
        ...

    def clear(self) -> None:
        """Clear all cache."""
        ...
