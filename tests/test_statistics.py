"""
Unit tests for statistics primitives.

Tests cover:
1. Mean / variance / standard deviation / median over sub-ranges
2. Extrema and rankings (tie-breaking)
3. Empty-range behavior
"""

import math

import numpy as np
import pytest


@pytest.mark.unit
class TestCentralTendency:
    """Mean, variance, median, MAD."""

    def test_mean_sub_range(self):
        from sigframe.common.primitives import arithmetic_mean

        x = [1, 2, 3, 4, 100]
        assert arithmetic_mean(x) == pytest.approx(22)
        assert arithmetic_mean(x, offset=1, length=3) == pytest.approx(3)

    def test_variance_is_population_variance(self):
        from sigframe.common.primitives import variance, standard_deviation

        x = [2, 4, 4, 4, 5, 5, 7, 9]
        assert variance(x) == pytest.approx(4.0)
        assert standard_deviation(x) == pytest.approx(2.0)

    def test_variance_matches_numpy(self):
        from sigframe.common.primitives import variance

        np.random.seed(42)
        x = np.random.randn(500).astype(np.float32)
        assert variance(x) == pytest.approx(float(np.var(x.astype(np.float64))), rel=1e-5)

    @pytest.mark.parametrize("values,expected", [
        ([3, 1, 2], 2.0),
        ([4, 1, 3, 2], 2.5),
        ([7], 7.0),
    ])
    def test_median(self, values, expected):
        from sigframe.common.primitives import median

        assert median(values) == pytest.approx(expected)

    def test_median_does_not_sort_input(self):
        from sigframe.common.primitives import median

        x = np.array([3, 1, 2], dtype=np.float32)
        median(x)
        np.testing.assert_array_equal(x, [3, 1, 2])

    def test_mean_absolute_deviation(self):
        from sigframe.common.primitives import mean_absolute_deviation

        assert mean_absolute_deviation(2.0, [1, 2, 3]) == pytest.approx(2 / 3)
        assert mean_absolute_deviation(0.0, [1, 2, 3], offset=1) == pytest.approx(2.5)

    def test_empty_range_is_nan(self):
        from sigframe.common.primitives import arithmetic_mean, variance, median

        assert math.isnan(arithmetic_mean([1, 2], offset=2))
        assert math.isnan(variance([]))
        assert math.isnan(median([]))


@pytest.mark.unit
class TestExtrema:
    """min / max / max_index / max_indices."""

    def test_min_max_sub_range(self):
        from sigframe.common.primitives import minimum, maximum

        x = [5, -1, 3, 9, 0]
        assert minimum(x) == -1
        assert maximum(x) == 9
        assert maximum(x, offset=0, length=3) == 5
        assert minimum(x, offset=2) == 0

    def test_empty_extrema(self):
        from sigframe.common.primitives import minimum, maximum, max_index

        assert minimum([]) == float("inf")
        assert maximum([]) == float("-inf")
        assert max_index([]) == -1

    def test_max_index_first_occurrence(self):
        from sigframe.common.primitives import max_index

        assert max_index([1, 7, 3, 7]) == 1

    def test_max_index_is_absolute(self):
        from sigframe.common.primitives import max_index

        assert max_index([9, 1, 5, 2], offset=1, length=3) == 2

    def test_max_indices_stable(self):
        from sigframe.common.primitives import max_indices

        result = max_indices([1, 3, 2, 3])
        np.testing.assert_array_equal(result, [1, 3, 2, 0])

    def test_percentage_below_average(self):
        from sigframe.common.primitives import percentage_below_average

        assert percentage_below_average([1, 1, 1, 5]) == pytest.approx(0.75)
