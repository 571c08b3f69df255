"""
Convolution Primitives - full, same and valid discrete convolution.

Direct (non-FFT) convolution, O(|f|*|g|):

    w[k] = sum_j f[j] * g[k - j]      (g outside its range counts as 0)

'same' and 'valid' are slices of the full result, following the MATLAB
conv() shape conventions.
"""

import numpy as np

from .vector import as_vector


def _full(f: np.ndarray, g: np.ndarray) -> np.ndarray:
    if len(f) == 0 or len(g) == 0:
        return np.zeros(max(len(f) + len(g) - 1, 0), dtype=np.float32)
    return np.convolve(f, g, mode="full").astype(np.float32)


def convolve(f, g) -> np.ndarray:
    """
    Full convolution of two vectors.

    Returns:
        Vector of length len(f) + len(g) - 1
    """
    f = as_vector(f, "f")
    g = as_vector(g, "g")
    return _full(f, g)


def convolve_same(f, g) -> np.ndarray:
    """
    Central part of the convolution, as long as f.

    The result starts floor(len(g) / 2) samples into the full convolution,
    so it is centered on f.

    Returns:
        Vector of length len(f)
    """
    f = as_vector(f, "f")
    g = as_vector(g, "g")
    if len(g) == 0:
        return np.zeros(len(f), dtype=np.float32)
    start = len(g) // 2
    return _full(f, g)[start:start + len(f)].copy()


def convolve_valid(f, g) -> np.ndarray:
    """
    Only the parts of the convolution computed without zero-padding.

    Returns:
        Vector of length max(len(f) - max(0, len(g) - 1), 0)
    """
    f = as_vector(f, "f")
    g = as_vector(g, "g")
    length = max(len(f) - max(0, len(g) - 1), 0)
    if length == 0 or len(g) == 0:
        return np.zeros(length, dtype=np.float32)
    start = len(g) - 1
    return _full(f, g)[start:start + length].copy()
