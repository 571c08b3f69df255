"""
Statistics Primitives - Mean, variance, median, extrema, rankings.

Most functions accept an optional (offset, length) sub-range. A length of
None means "to the end of the array". Accumulation happens in float64.
"""

from typing import Optional

import numpy as np

from .vector import as_vector, resolve_range


def arithmetic_mean(array, offset: int = 0, length: Optional[int] = None) -> float:
    """Arithmetic mean of a portion of the array."""
    array = as_vector(array)
    region = array[resolve_range(array, offset, length)]
    if len(region) == 0:
        return float("nan")
    return float(np.sum(region, dtype=np.float64) / len(region))


def variance(array, offset: int = 0, length: Optional[int] = None) -> float:
    """
    Population variance of a portion of the array.

    Computed against the mean of the same region.
    """
    array = as_vector(array)
    region = array[resolve_range(array, offset, length)]
    if len(region) == 0:
        return float("nan")
    mean = np.float32(arithmetic_mean(region))
    diff = (region - mean).astype(np.float64)
    return float(np.sum(diff * diff) / len(region))


def standard_deviation(array, offset: int = 0, length: Optional[int] = None) -> float:
    """Population standard deviation."""
    return float(np.sqrt(variance(array, offset, length)))


def median(array, offset: int = 0, length: Optional[int] = None) -> float:
    """
    Median of a portion of the array.

    Works on a sorted copy; for an even number of values the two middle
    values are averaged.
    """
    array = as_vector(array)
    region = np.sort(array[resolve_range(array, offset, length)])
    n = len(region)
    if n == 0:
        return float("nan")
    if n % 2 == 0:
        return (float(region[n // 2]) + float(region[n // 2 - 1])) / 2.0
    return float(region[n // 2])


def mean_absolute_deviation(
    central_point: float,
    array,
    offset: int = 0,
    length: Optional[int] = None
) -> float:
    """Mean absolute deviation around an arbitrary central point."""
    array = as_vector(array)
    region = array[resolve_range(array, offset, length)]
    if len(region) == 0:
        return float("nan")
    return float(np.sum(np.abs(region.astype(np.float64) - central_point)) / len(region))


def minimum(array, offset: int = 0, length: Optional[int] = None) -> float:
    """Smallest value in the region (+inf for an empty region)."""
    array = as_vector(array)
    region = array[resolve_range(array, offset, length)]
    if len(region) == 0:
        return float("inf")
    return float(np.min(region))


def maximum(array, offset: int = 0, length: Optional[int] = None) -> float:
    """Largest value in the region (-inf for an empty region)."""
    array = as_vector(array)
    region = array[resolve_range(array, offset, length)]
    if len(region) == 0:
        return float("-inf")
    return float(np.max(region))


def max_index(array, offset: int = 0, length: Optional[int] = None) -> int:
    """
    Index (into the full array) of the largest value in the region.

    Ties resolve to the first occurrence; an empty region returns -1.
    """
    array = as_vector(array)
    region = resolve_range(array, offset, length)
    values = array[region]
    if len(values) == 0:
        return -1
    return int(np.argmax(values)) + offset


def max_indices(array, offset: int = 0, length: Optional[int] = None) -> np.ndarray:
    """
    Indices of the region's values ordered by value, largest first.

    The sort is stable, so equal values keep ascending index order.
    """
    array = as_vector(array)
    region = resolve_range(array, offset, length)
    values = array[region]
    order = np.argsort(-values, kind="stable")
    return (order + offset).astype(np.int64)


def percentage_below_average(array) -> float:
    """Fraction of values strictly below the arithmetic mean (0..1)."""
    array = as_vector(array)
    if len(array) == 0:
        return 0.0
    mean = np.float32(arithmetic_mean(array))
    return np.count_nonzero(array < mean) / float(len(array))
