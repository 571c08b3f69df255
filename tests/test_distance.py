"""
Unit tests for distance functions.

Tests cover:
1. (last, now) argument order and increase-only asymmetry
2. Registry lookup
3. Sub-range cosine functions
4. CachingCosineDistance: equals plain cosine distance, norm cache bounds
"""

import numpy as np
import pytest


@pytest.mark.unit
class TestFixedFunctions:
    """Named distance functions."""

    def test_increase_distance_measures_rise_of_now(self):
        from sigframe.modules.analysis import EUCLIDEAN_INCREASE_DISTANCE, CITY_BLOCK_INCREASE_DISTANCE

        last = [3, 2]
        now = [1, 5]
        # only now[1] - last[1] = 3 rose
        assert EUCLIDEAN_INCREASE_DISTANCE(last, now) == pytest.approx(3)
        assert EUCLIDEAN_INCREASE_DISTANCE(now, last) == pytest.approx(2)
        assert CITY_BLOCK_INCREASE_DISTANCE.distance(last, now) == pytest.approx(3)

    def test_symmetric_functions(self):
        from sigframe.modules.analysis import EUCLIDEAN_DISTANCE, CITY_BLOCK_DISTANCE, COSINE_DISTANCE

        a = [1, 5, 2]
        b = [3, 2, 7]
        for f in (EUCLIDEAN_DISTANCE, CITY_BLOCK_DISTANCE, COSINE_DISTANCE):
            assert f.symmetric
            assert f(a, b) == pytest.approx(f(b, a))

    def test_increase_functions_not_symmetric(self):
        from sigframe.modules.analysis import EUCLIDEAN_INCREASE_DISTANCE, CITY_BLOCK_INCREASE_DISTANCE

        assert not EUCLIDEAN_INCREASE_DISTANCE.symmetric
        assert not CITY_BLOCK_INCREASE_DISTANCE.symmetric

    def test_cosine_similarity_and_distance(self):
        from sigframe.modules.analysis import COSINE_SIMILARITY, COSINE_DISTANCE

        assert COSINE_SIMILARITY([1, 0], [1, 0]) == pytest.approx(1)
        assert COSINE_DISTANCE([1, 0], [0, 1]) == pytest.approx(1)

    def test_names(self):
        from sigframe.modules.analysis import DISTANCE_FUNCTIONS

        for name, f in DISTANCE_FUNCTIONS.items():
            assert f.name == name
            assert repr(f) == name

    def test_lookup(self):
        from sigframe.modules.analysis import get_distance_function, COSINE_DISTANCE

        assert get_distance_function("COSINE_DISTANCE") is COSINE_DISTANCE
        assert get_distance_function("cosine_distance") is COSINE_DISTANCE

    def test_unknown_name(self):
        from sigframe.modules.analysis import get_distance_function
        from sigframe.core.errors import ArgumentError

        with pytest.raises(ArgumentError):
            get_distance_function("HAMMING")

    def test_protocol(self):
        from sigframe.core.interfaces import DistanceFunctionProtocol
        from sigframe.modules.analysis import EUCLIDEAN_DISTANCE, CachingCosineDistance

        assert isinstance(EUCLIDEAN_DISTANCE, DistanceFunctionProtocol)
        assert isinstance(CachingCosineDistance(), DistanceFunctionProtocol)


@pytest.mark.unit
class TestParameterizedCosine:
    """Sub-range cosine functions."""

    def test_band_limited_distance(self):
        from sigframe.modules.analysis import create_cosine_distance_function

        f = create_cosine_distance_function(offset=0, length=2)
        assert f([1, 0, 5], [1, 0, -5]) == pytest.approx(0)

    def test_band_limited_similarity(self):
        from sigframe.modules.analysis import create_cosine_similarity_function

        f = create_cosine_similarity_function(offset=1, length=2)
        assert f([9, 1, 0], [-9, 0, 1]) == pytest.approx(0)

    def test_no_arguments_returns_caching(self):
        from sigframe.modules.analysis import create_cosine_distance_function, CachingCosineDistance

        assert isinstance(create_cosine_distance_function(), CachingCosineDistance)


@pytest.mark.unit
class TestCachingCosineDistance:
    """Stateful cosine distance with identity-keyed norm cache."""

    def test_equals_plain_cosine_distance(self):
        from sigframe.modules.analysis import CachingCosineDistance, COSINE_DISTANCE

        np.random.seed(42)
        frames = [np.random.rand(32).astype(np.float32) for _ in range(6)]
        caching = CachingCosineDistance()

        for last, now in zip(frames, frames[1:]):
            assert caching(last, now) == pytest.approx(COSINE_DISTANCE(last, now), abs=1e-6)

    def test_norms_cached_per_object(self):
        from sigframe.modules.analysis import CachingCosineDistance

        a = np.array([1, 0], dtype=np.float32)
        b = np.array([0, 1], dtype=np.float32)
        c = np.array([1, 1], dtype=np.float32)
        caching = CachingCosineDistance()

        caching(a, b)
        caching(b, c)
        caching(a, c)
        assert caching.cached_norms() == 3

    def test_second_vector_norm_is_its_own(self):
        from sigframe.modules.analysis import CachingCosineDistance

        a = np.array([10, 0], dtype=np.float32)
        b = np.array([1, 1], dtype=np.float32)
        caching = CachingCosineDistance()

        caching(np.array([5, 5], dtype=np.float32), b)
        # b is now cached; its cached norm must be |b|, not |a|
        assert caching(a, b) == pytest.approx(1 - 1 / np.sqrt(2), abs=1e-6)
        assert caching(b, a) == pytest.approx(1 - 1 / np.sqrt(2), abs=1e-6)

    def test_same_object_is_zero(self):
        from sigframe.modules.analysis import CachingCosineDistance

        x = np.array([1, 2], dtype=np.float32)
        assert CachingCosineDistance()(x, x) == 0.0

    def test_bounded_cache(self):
        from sigframe.modules.analysis import CachingCosineDistance

        caching = CachingCosineDistance(max_cached_norms=2)
        frames = [np.full(4, i + 1, dtype=np.float32) for i in range(5)]
        for last, now in zip(frames, frames[1:]):
            caching(last, now)

        assert caching.cached_norms() == 2

    def test_clear(self):
        from sigframe.modules.analysis import CachingCosineDistance

        caching = CachingCosineDistance()
        caching(np.ones(2, dtype=np.float32), np.arange(2, dtype=np.float32))
        caching.clear()

        assert caching.cached_norms() == 0

    def test_invalid_bound(self):
        from sigframe.modules.analysis import CachingCosineDistance
        from sigframe.core.errors import ArgumentError

        with pytest.raises(ArgumentError):
            CachingCosineDistance(max_cached_norms=0)
