"""
FFT-based DCT - Discrete Cosine Transform (type II) via one N-point FFT.

Algorithm:
    1. Reorder [a, b, c, d, e, f] -> [a, c, e, f, d, b]
       (even-indexed samples forward, odd-indexed samples reversed)
    2. FFT of the reordered frame
    3. X[k] = 2 * Re(F[k] * exp(-i*pi*k / (2N)))

The result equals scipy.fft.dct(x, type=2) (unnormalized). Only the forward
direction is supported.

Phase factors are shared process-wide per N. The factor cache is bounded
by Settings.factor_cache_size; the tables are small and N comes from a
handful of frame sizes, so evictions are rare in practice.
"""

import threading
from typing import Optional, Tuple

import numpy as np

from sigframe.common.logging import get_logger
from sigframe.common.primitives.vector import as_vector
from ..cache import InMemoryCache
from ..config.settings import get_settings
from ..errors import ArgumentError, UnsupportedOperationError
from ..interfaces.transform_protocol import TransformResult
from .fft import check_number_of_samples

logger = get_logger(__name__)

_factor_cache: Optional[InMemoryCache] = None
_factor_cache_lock = threading.Lock()


def _half_sample_shift(length: int) -> Tuple[np.ndarray, np.ndarray]:
    x = -np.pi * np.arange(length, dtype=np.float64) / (2 * length)
    real = np.cos(x).astype(np.float32)
    imaginary = np.sin(x).astype(np.float32)
    real.flags.writeable = False
    imaginary.flags.writeable = False
    logger.debug("Computed DCT phase factors", data={"number_of_samples": length})
    return real, imaginary


def _get_factor_cache() -> InMemoryCache:
    global _factor_cache
    with _factor_cache_lock:
        if _factor_cache is None:
            _factor_cache = InMemoryCache(
                max_size=get_settings().factor_cache_size,
                name="dct-factors",
            )
        return _factor_cache


def get_dct_factors(number_of_samples: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Phase factors (cos, sin of -pi*k/(2N)) for a DCT of size N.

    Computed on first use per N and shared afterwards. The returned arrays
    are read-only.
    """
    return _get_factor_cache().get_or_create(
        number_of_samples, lambda: _half_sample_shift(number_of_samples)
    )


def reset_factor_cache() -> None:
    """Drop all cached phase factors (the cache is rebuilt from current settings)."""
    global _factor_cache
    with _factor_cache_lock:
        _factor_cache = None


class FFTBasedDCT:
    """
    DCT-II of power-of-two frames using the N-point FFT approach.

    The underlying FFT comes from the process-wide FFT factory unless one is
    passed in.
    """

    def __init__(self, number_of_samples: int, fft=None):
        self.number_of_samples = check_number_of_samples(number_of_samples)
        self.factors = get_dct_factors(self.number_of_samples)
        if fft is None:
            from .factory import get_fft_factory
            fft = get_fft_factory().create(self.number_of_samples)
        self.fft = fft

    def transform(self, real, imaginary: Optional[np.ndarray] = None) -> TransformResult:
        """
        Forward DCT. Any imaginary part is ignored.

        Returns:
            TransformResult whose imaginary part is all zeros
        """
        real = as_vector(real, "real")
        n = self.number_of_samples
        if len(real) != n:
            raise ArgumentError(
                f"real must have {n} samples",
                data={"expected": n, "actual": len(real)},
            )

        reordered = np.empty(n, dtype=np.float32)
        half = n // 2
        reordered[:half] = real[0::2][:half]
        reordered[n - half:] = real[1::2][:half][::-1]
        if n == 1:
            reordered[0] = real[0]

        re, im = self.fft.transform(reordered)
        factor_re, factor_im = self.factors
        out = 2 * (re.astype(np.float64) * factor_re - im.astype(np.float64) * factor_im)
        return TransformResult(
            real=out.astype(np.float32),
            imaginary=np.zeros(n, dtype=np.float32),
        )

    def inverse_transform(self, real, imaginary=None) -> TransformResult:
        """Not supported for this DCT."""
        raise UnsupportedOperationError(
            "Inverse transform is not supported by FFTBasedDCT",
            data={"number_of_samples": self.number_of_samples},
        )

    def __eq__(self, other):
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self.number_of_samples == other.number_of_samples

    def __hash__(self):
        return self.number_of_samples

    def __repr__(self):
        return f"FFTBasedDCT(N={self.number_of_samples})"
