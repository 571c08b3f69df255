"""
Distance Functions - Named metrics for comparing consecutive frames.

Every function is called as f(last, now). The underlying primitive is
evaluated with (now, last), so the increase-only variants measure how much
the current frame rose above the previous one (spectral flux).
"""

from collections import OrderedDict
from functools import partial
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from sigframe.common.primitives import (
    as_vector,
    city_block_distance,
    cosine_similarity,
    cosine_similarity_with_norms,
    euclidean_distance,
    euclidean_norm,
)
from sigframe.core.errors import ArgumentError


class DistanceFunction:
    """
    A named distance (or similarity) between two frames.

    Attributes:
        name: Stable identifier
        symmetric: Whether distance(a, b) == distance(b, a)
    """

    def __init__(self, name: str, function: Callable[[np.ndarray, np.ndarray], float], symmetric: bool = True):
        self.name = name
        self.symmetric = symmetric
        self._function = function

    def distance(self, last, now) -> float:
        return float(self._function(now, last))

    __call__ = distance

    def __repr__(self):
        return self.name


def _cosine_distance(a, b, offset: int = 0, length: Optional[int] = None) -> float:
    return 1.0 - cosine_similarity(a, b, offset, length)


EUCLIDEAN_DISTANCE = DistanceFunction("EUCLIDEAN_DISTANCE", euclidean_distance)
EUCLIDEAN_INCREASE_DISTANCE = DistanceFunction(
    "EUCLIDEAN_INCREASE_DISTANCE",
    partial(euclidean_distance, increase_only=True),
    symmetric=False,
)
CITY_BLOCK_DISTANCE = DistanceFunction("CITY_BLOCK_DISTANCE", city_block_distance)
CITY_BLOCK_INCREASE_DISTANCE = DistanceFunction(
    "CITY_BLOCK_INCREASE_DISTANCE",
    partial(city_block_distance, increase_only=True),
    symmetric=False,
)
COSINE_DISTANCE = DistanceFunction("COSINE_DISTANCE", _cosine_distance)
COSINE_SIMILARITY = DistanceFunction("COSINE_SIMILARITY", cosine_similarity)

DISTANCE_FUNCTIONS: Dict[str, DistanceFunction] = {
    f.name: f
    for f in (
        EUCLIDEAN_DISTANCE,
        EUCLIDEAN_INCREASE_DISTANCE,
        CITY_BLOCK_DISTANCE,
        CITY_BLOCK_INCREASE_DISTANCE,
        COSINE_DISTANCE,
        COSINE_SIMILARITY,
    )
}


def get_distance_function(name: str) -> DistanceFunction:
    """
    Look up a distance function by name (e.g. "COSINE_DISTANCE").

    Raises:
        ArgumentError: If no function has that name
    """
    try:
        return DISTANCE_FUNCTIONS[name.upper()]
    except KeyError:
        raise ArgumentError(
            f"Unknown distance function: {name}",
            data={"name": name, "available": list(DISTANCE_FUNCTIONS)},
        )


def list_distance_functions() -> List[str]:
    """Names of all fixed distance functions."""
    return list(DISTANCE_FUNCTIONS)


class CachingCosineDistance:
    """
    Cosine distance that remembers the norms of vectors it has seen.

    Norms are cached by object identity, so a frame compared against its
    predecessor and then its successor is only normed once. The cache holds
    a reference to every vector it keys, which keeps the identities valid
    but also keeps the vectors alive.

    Stateful and not thread-safe: use one instance per stream and discard it
    (or call clear()) when the stream ends.

    Args:
        max_cached_norms: Bound on remembered vectors (LRU). None = unbounded.
    """

    name = "CACHING_COSINE_DISTANCE"
    symmetric = True

    def __init__(self, max_cached_norms: Optional[int] = None):
        if max_cached_norms is not None and max_cached_norms < 1:
            raise ArgumentError(
                "max_cached_norms must be at least 1",
                data={"max_cached_norms": max_cached_norms},
            )
        self.max_cached_norms = max_cached_norms
        self._norms: "OrderedDict[int, Tuple[np.ndarray, float]]" = OrderedDict()
        self._last_a: Optional[np.ndarray] = None
        self._last_norm_a = 0.0
        self._last_b: Optional[np.ndarray] = None
        self._last_norm_b = 0.0

    def _norm(self, vector) -> float:
        key = id(vector)
        cached = self._norms.get(key)
        if cached is not None and cached[0] is vector:
            self._norms.move_to_end(key)
            return cached[1]
        norm = euclidean_norm(vector)
        self._norms[key] = (vector, norm)
        self._norms.move_to_end(key)
        if self.max_cached_norms is not None:
            while len(self._norms) > self.max_cached_norms:
                self._norms.popitem(last=False)
        return norm

    def distance(self, a, b) -> float:
        if a is b:
            return 0.0
        if a is self._last_a:
            norm_a = self._last_norm_a
        else:
            norm_a = self._norm(a)
        self._last_a, self._last_norm_a = a, norm_a

        if b is self._last_b:
            norm_b = self._last_norm_b
        else:
            norm_b = self._norm(b)
        self._last_b, self._last_norm_b = b, norm_b

        vector_a = as_vector(a, "a")
        vector_b = as_vector(b, "b")
        if len(vector_a) != len(vector_b):
            raise ArgumentError(
                "Arrays don't have the same length",
                data={"length_a": len(vector_a), "length_b": len(vector_b)},
            )
        return 1.0 - cosine_similarity_with_norms(vector_a, vector_b, 0, None, norm_a, norm_b)

    __call__ = distance

    def cached_norms(self) -> int:
        """Number of vectors whose norm is remembered."""
        return len(self._norms)

    def clear(self) -> None:
        """Forget all cached norms and the last compared pair."""
        self._norms.clear()
        self._last_a = self._last_b = None
        self._last_norm_a = self._last_norm_b = 0.0

    def __repr__(self):
        return f"CachingCosineDistance(max_cached_norms={self.max_cached_norms})"


def create_cosine_distance_function(offset: Optional[int] = None, length: Optional[int] = None):
    """
    Cosine distance over a sub-range of the frames.

    Restricting offset/length on spectra acts as an implicit band-pass.
    Without arguments a CachingCosineDistance is returned.
    """
    if offset is None and length is None:
        return CachingCosineDistance()
    offset = offset or 0
    return DistanceFunction(
        f"COSINE_DISTANCE[offset={offset}, length={length}]",
        partial(_cosine_distance, offset=offset, length=length),
    )


def create_cosine_similarity_function(offset: int = 0, length: Optional[int] = None) -> DistanceFunction:
    """Cosine similarity over a sub-range of the frames."""
    return DistanceFunction(
        f"COSINE_SIMILARITY[offset={offset}, length={length}]",
        partial(cosine_similarity, offset=offset, length=length),
    )
