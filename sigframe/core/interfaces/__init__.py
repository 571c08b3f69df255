"""
Interfaces - Protocols for Dependency Injection.

These protocols define contracts that implementations must follow.
Use Protocol for type hints to enable loose coupling.

Example:
    def spectrum_of(frame, factory: TransformFactoryProtocol):
        # Works with any implementation
        return factory.create(len(frame)).transform(frame)
"""

from .cache_protocol import CacheProtocol
from .transform_protocol import (
    TransformResult,
    TransformProtocol,
    TransformFactoryProtocol,
)
from .distance_protocol import DistanceFunctionProtocol

__all__ = [
    # Cache
    'CacheProtocol',
    # Transform
    'TransformResult',
    'TransformProtocol',
    'TransformFactoryProtocol',
    # Distance
    'DistanceFunctionProtocol',
]
