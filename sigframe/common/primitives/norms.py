"""
Norm and Distance Primitives - p-norms, distances, cosine, correlation.

Two-vector functions require equal lengths and raise ArgumentError
otherwise (unlike vector.add/subtract, nothing is zero-padded here).

Increase-only distances:
    With increase_only=True only non-negative differences a[i] - b[i]
    contribute. The result is then NOT symmetric: distance(a, b) measures
    how much a rose above b.
"""

from typing import Optional

import numpy as np

from sigframe.core.errors import ArgumentError
from .vector import as_vector, check_same_length, dot_product, resolve_range


def _distance_arguments(a, b):
    a = as_vector(a, "a")
    b = as_vector(b, "b")
    check_same_length(a, b)
    return a, b


def _differences(a: np.ndarray, b: np.ndarray, increase_only: bool) -> np.ndarray:
    diff = a.astype(np.float64) - b.astype(np.float64)
    if increase_only:
        diff = diff[diff >= 0]
    return diff


def euclidean_norm(data, offset: int = 0, length: Optional[int] = None) -> float:
    """
    Euclidean norm (2-norm) of the data, optionally of a sub-range only.

    The range is clamped to the end of the data.
    """
    data = as_vector(data, "data")
    region = resolve_range(data, offset, length)
    values = data[region.start:min(region.stop, len(data))].astype(np.float64)
    return float(np.sqrt(np.dot(values, values)))


def city_block_norm(data) -> float:
    """City block norm (1-norm, Manhattan norm). Does not modify data."""
    data = as_vector(data, "data")
    return float(np.sum(np.abs(data), dtype=np.float64))


def p_norm(data, p: float) -> float:
    """
    p-norm: (sum |x|^p)^(1/p).

    p=1 and p=2 use the dedicated norms.
    """
    if p == 2:
        return euclidean_norm(data)
    if p == 1:
        return city_block_norm(data)
    if p <= 0:
        raise ArgumentError("p must be positive", data={"p": p})
    data = as_vector(data, "data")
    total = np.sum(np.power(np.abs(data.astype(np.float64)), p))
    return float(np.power(total, 1.0 / p))


def euclidean_distance(a, b, increase_only: bool = False) -> float:
    """
    Euclidean distance between two points.

    Args:
        a: Point a
        b: Point b
        increase_only: Only count components where a exceeds b (asymmetric)
    """
    a, b = _distance_arguments(a, b)
    diff = _differences(a, b, increase_only)
    return float(np.sqrt(np.dot(diff, diff)))


def city_block_distance(a, b, increase_only: bool = False) -> float:
    """
    City block (Manhattan) distance between two points.

    Args:
        a: Point a
        b: Point b
        increase_only: Only count components where a exceeds b (asymmetric)
    """
    a, b = _distance_arguments(a, b)
    diff = _differences(a, b, increase_only)
    return float(np.sum(np.abs(diff)))


def p_distance(a, b, p: float, increase_only: bool = False) -> float:
    """p-distance: the p-norm of the element-wise difference."""
    if p == 2:
        return euclidean_distance(a, b, increase_only)
    if p == 1:
        return city_block_distance(a, b, increase_only)
    if p <= 0:
        raise ArgumentError("p must be positive", data={"p": p})
    a, b = _distance_arguments(a, b)
    diff = _differences(a, b, increase_only)
    return float(np.power(np.sum(np.power(np.abs(diff), p)), 1.0 / p))


def cosine_similarity(a, b, offset: int = 0, length: Optional[int] = None) -> float:
    """
    Cosine similarity dot(a, b) / (|a| * |b|), optionally over a sub-range.

    Returns 1 when a and b are the same object and 0 when either norm is 0.
    """
    same = a is b
    a, b = _distance_arguments(a, b)
    if same or a is b:
        return 1.0
    return cosine_similarity_with_norms(
        a, b, offset, length,
        euclidean_norm(a, offset, length),
        euclidean_norm(b, offset, length),
    )


def cosine_similarity_with_norms(
    a,
    b,
    offset: int,
    length: Optional[int],
    euclidean_norm_a: float,
    euclidean_norm_b: float
) -> float:
    """
    Cosine similarity reusing already known norms.

    The norms must have been computed over the same (offset, length) region.
    """
    if a is b:
        return 1.0
    norm_product = euclidean_norm_a * euclidean_norm_b
    if norm_product == 0:
        return 0.0
    return dot_product(a, b, offset, length) / norm_product


def cosine_distance(a, b, offset: int = 0, length: Optional[int] = None) -> float:
    """Cosine distance: 1 - cosine similarity."""
    return 1.0 - cosine_similarity(a, b, offset, length)


def correlation(a, b) -> float:
    """
    Pearson correlation coefficient.

    NaN when either vector has zero variance.
    """
    a, b = _distance_arguments(a, b)
    a_diff = a.astype(np.float64) - np.mean(a, dtype=np.float64)
    b_diff = b.astype(np.float64) - np.mean(b, dtype=np.float64)
    denominator = np.sqrt(np.dot(a_diff, a_diff) * np.dot(b_diff, b_diff))
    if denominator == 0:
        return float("nan")
    return float(np.dot(a_diff, b_diff) / denominator)
