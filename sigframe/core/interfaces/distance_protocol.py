"""
Distance Protocol - Interface for pairwise vector metrics.

Implementations live in sigframe.modules.analysis.distance.
"""

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class DistanceFunctionProtocol(Protocol):
    """Protocol for distance/similarity functions of two same-shape vectors."""

    name: str
    symmetric: bool

    def distance(self, a: np.ndarray, b: np.ndarray) -> float:
        """Distance (or similarity) between a and b."""
        ...
