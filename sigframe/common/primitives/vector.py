"""
Vector Primitives - Elementwise operations, padding, sums, helpers.

All functions operate on 1-D float32 numpy arrays. Array-likes are coerced
with np.asarray, so passing an existing float32 array never copies.

Destructive vs. copying:
    absolute(), square(), multiply() and reverse() modify the array they are
    given and return that same object. Pass copy=True to leave the input
    untouched and get a new array instead.
"""

import math
from typing import Iterable, Optional

import numpy as np

from sigframe.core.errors import ArgumentError


def as_vector(array, name: str = "array") -> np.ndarray:
    """
    Coerce an array-like to a 1-D float32 vector.

    Args:
        array: Array-like input
        name: Argument name used in the error message

    Returns:
        float32 ndarray (the same object if it already is one)

    Raises:
        ArgumentError: If array is None or not one-dimensional
    """
    if array is None:
        raise ArgumentError(f"{name} must not be None", data={"argument": name})
    vector = np.asarray(array, dtype=np.float32)
    if vector.ndim != 1:
        raise ArgumentError(
            f"{name} must be one-dimensional",
            data={"argument": name, "ndim": vector.ndim},
        )
    return vector


def check_same_length(a: np.ndarray, b: np.ndarray) -> None:
    """Raise ArgumentError unless both vectors have the same length."""
    if len(a) != len(b):
        raise ArgumentError(
            "Arrays don't have the same length",
            data={"length_a": len(a), "length_b": len(b)},
        )


def resolve_range(array: np.ndarray, offset: int = 0, length: Optional[int] = None) -> slice:
    """
    Turn (offset, length) into a slice over array.

    A length of None means "up to the end of the array".
    """
    if offset < 0:
        raise ArgumentError("offset must not be negative", data={"offset": offset})
    if length is None:
        length = len(array) - offset
    if length < 0:
        raise ArgumentError("length must not be negative", data={"length": length})
    return slice(offset, offset + length)


def log2(n: float) -> float:
    """Base 2 logarithm."""
    return math.log(n) / math.log(2.0)


def is_power_of_two(number: int) -> bool:
    """True for 1, 2, 4, 8, ... (and 0, which has no bits set)."""
    return (number & (number - 1)) == 0


def reverse(array, copy: bool = False) -> np.ndarray:
    """
    Reverse the order of the elements.

    Swaps from both ends toward the center, in place unless copy=True.

    Args:
        array: Vector to reverse
        copy: Work on a copy instead of the given array

    Returns:
        The reversed array (the input object itself when copy=False)
    """
    array = as_vector(array)
    if copy:
        array = array.copy()
    left = 0
    right = len(array) - 1
    while left < right:
        swap(array, left, right)
        left += 1
        right -= 1
    return array


def swap(array: np.ndarray, a: int, b: int) -> None:
    """Swap two elements in place."""
    array[a], array[b] = array[b], array[a]


def zero_pad_at_end(array, min_size: int = 0) -> np.ndarray:
    """
    Zero-pad at the end so that the length is a power of two.

    Useful before handing a frame to an FFT-backed transform.

    Args:
        array: Vector to pad
        min_size: Minimum length of the result

    Returns:
        The same array if its length already is a power of two >= min_size,
        otherwise a new array of the smallest power of two that is longer
        than the input and at least min_size
    """
    array = as_vector(array)
    original_length = len(array)
    if is_power_of_two(original_length) and original_length >= min_size:
        return array

    power_of_two = 2
    while power_of_two <= original_length or power_of_two < min_size:
        power_of_two <<= 1

    padded = np.zeros(power_of_two, dtype=np.float32)
    padded[:original_length] = array
    return padded


def add(a, b) -> np.ndarray:
    """
    Add corresponding elements of two vectors.

    The shorter vector is treated as if padded with zeros.
    """
    a = as_vector(a, "a")
    b = as_vector(b, "b")
    result = np.zeros(max(len(a), len(b)), dtype=np.float32)
    result[:len(a)] += a
    result[:len(b)] += b
    return result


def subtract(a, b) -> np.ndarray:
    """
    Subtract corresponding elements of two vectors (a - b).

    The shorter vector is treated as if padded with zeros, so a tail that
    only exists in b comes out negated.
    """
    a = as_vector(a, "a")
    b = as_vector(b, "b")
    result = np.zeros(max(len(a), len(b)), dtype=np.float32)
    result[:len(a)] += a
    result[:len(b)] -= b
    return result


def total(array) -> float:
    """Sum over all elements."""
    return float(np.sum(as_vector(array), dtype=np.float64))


def sum_arrays(arrays: Iterable) -> np.ndarray:
    """
    Sum corresponding values of several vectors.

    Vectors of different lengths are zero-padded to the longest one.
    An empty input yields an empty vector.
    """
    vectors = [as_vector(a) for a in arrays]
    if not vectors:
        return np.zeros(0, dtype=np.float32)
    result = np.zeros(max(len(v) for v in vectors), dtype=np.float32)
    for vector in vectors:
        result[:len(vector)] += vector
    return result


def absolute(array, copy: bool = False) -> np.ndarray:
    """Replace every value by its absolute value (in place unless copy=True)."""
    array = as_vector(array)
    if copy:
        return np.abs(array)
    np.abs(array, out=array)
    return array


def square(array, copy: bool = False) -> np.ndarray:
    """Replace every value by its square (in place unless copy=True)."""
    array = as_vector(array)
    if copy:
        return np.square(array)
    np.square(array, out=array)
    return array


def multiply(array, factor: float, copy: bool = False) -> np.ndarray:
    """Multiply every value by factor (in place unless copy=True)."""
    array = as_vector(array)
    if copy:
        return (array * np.float32(factor)).astype(np.float32)
    array *= np.float32(factor)
    return array


def dot_product(a, b, offset: int = 0, length: Optional[int] = None) -> float:
    """
    Dot product over a sub-range of both vectors.

    The range is clamped to the length of a.
    """
    a = as_vector(a, "a")
    b = as_vector(b, "b")
    region = resolve_range(a, offset, length)
    stop = min(region.stop, len(a))
    if stop <= offset:
        return 0.0
    return float(np.dot(a[offset:stop].astype(np.float64), b[offset:stop].astype(np.float64)))


def root_mean_square(array) -> float:
    """Root mean square of one frame."""
    array = as_vector(array)
    if len(array) == 0:
        return 0.0
    return float(np.sqrt(np.mean(np.square(array, dtype=np.float64))))


def zero_crossing_rate(array) -> float:
    """
    Fraction of neighbouring sample pairs whose sign changes.

    Frames shorter than two samples have a rate of 0.
    """
    if array is None:
        return 0.0
    array = as_vector(array)
    if len(array) < 2:
        return 0.0
    crossings = np.count_nonzero(array[1:] * array[:-1] < 0)
    return crossings / float(len(array) - 1)


def wrap(array, length: int) -> np.ndarray:
    """
    Fold a vector into one of the given length.

    Values whose indices are congruent modulo length are added up.
    """
    array = as_vector(array)
    if length <= 0:
        raise ArgumentError("length must be positive", data={"length": length})
    result = np.zeros(length, dtype=np.float32)
    np.add.at(result, np.arange(len(array)) % length, array)
    return result


def interpolate(data, shift: float, indices_per_one_shift: int) -> np.ndarray:
    """
    Shift a vector by a fractional number of indices using linear interpolation.

    Args:
        data: Vector to shift
        shift: Normalized shift amount in [-1, 1]
        indices_per_one_shift: Number of indices a full shift of 1 moves by

    Returns:
        Shifted vector; positions that cannot be interpolated stay 0
    """
    data = as_vector(data)
    bin_shift = int(math.floor(indices_per_one_shift * shift))
    fraction = indices_per_one_shift * shift - bin_shift
    shifted = np.zeros(len(data), dtype=np.float32)

    for i in range(indices_per_one_shift - 1, len(data) - indices_per_one_shift):
        source = i + bin_shift
        if source < 0 or source + 1 >= len(data):
            continue
        shifted[i] = data[source] * (1 - fraction) + data[source + 1] * fraction
    return shifted
