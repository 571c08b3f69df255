"""
Autocorrelation - Delay-indexed self-similarity of a sample buffer.

Two equivalent computations:
    autocorrelation_naive: r[d] = sum_n s[n] * s[n + d], O(delays * N)
    autocorrelation_fft: Wiener-Khinchin, the inverse transform of the
        power spectrum, O(N log N)

The FFT path pads to a power of two of at least 2N so the circular
correlation computed by the FFT equals the linear one; both paths return
the unnormalized autocorrelation for delays min_delay..max_delay inclusive.

Magnitude compression:
    Before the inverse transform every bin is replaced by |X|^k. k=2 is the
    ordinary power spectrum (plain autocorrelation); smaller k (e.g. 0.67)
    flattens the spectrum, which helps multi-pitch analysis.
"""

from typing import Optional, Tuple

import numpy as np

from sigframe.common.logging import get_logger
from sigframe.common.primitives import as_vector
from sigframe.core.errors import ArgumentError
from sigframe.core.interfaces import TransformFactoryProtocol
from sigframe.core.transforms import get_fft_factory

logger = get_logger(__name__)


def _check_delays(samples, min_delay: int, max_delay: Optional[int]) -> Tuple[np.ndarray, int, int]:
    samples = as_vector(samples, "samples")
    n = len(samples)
    if max_delay is None:
        max_delay = n // 2
    if min_delay < 0:
        raise ArgumentError(
            "min_delay must not be negative",
            data={"min_delay": min_delay},
        )
    if max_delay >= n:
        raise ArgumentError(
            "max_delay must be less than the number of samples",
            data={"max_delay": max_delay, "number_of_samples": n},
        )
    if min_delay > max_delay:
        raise ArgumentError(
            "min_delay must not be greater than max_delay",
            data={"min_delay": min_delay, "max_delay": max_delay},
        )
    return samples, int(min_delay), int(max_delay)


def autocorrelation_naive(samples, min_delay: int = 0, max_delay: Optional[int] = None) -> np.ndarray:
    """
    Autocorrelation by direct summation.

    Args:
        samples: Sample buffer
        min_delay: First delay (inclusive)
        max_delay: Last delay (inclusive, default len(samples) // 2)

    Returns:
        float32 array of length max_delay - min_delay + 1

    Raises:
        ArgumentError: Unless 0 <= min_delay <= max_delay < len(samples)
    """
    samples, min_delay, max_delay = _check_delays(samples, min_delay, max_delay)
    values = samples.astype(np.float64)
    n = len(values)
    result = np.empty(max_delay - min_delay + 1, dtype=np.float32)
    for i, delay in enumerate(range(min_delay, max_delay + 1)):
        result[i] = np.dot(values[:n - delay], values[delay:])
    return result


def autocorrelation_fft(
    samples,
    min_delay: int = 0,
    max_delay: Optional[int] = None,
    magnitude_compression: float = 2.0,
    fft_factory: Optional[TransformFactoryProtocol] = None,
) -> np.ndarray:
    """
    Autocorrelation via the power spectrum (Wiener-Khinchin).

    Args:
        samples: Sample buffer
        min_delay: First delay (inclusive)
        max_delay: Last delay (inclusive, default len(samples) // 2)
        magnitude_compression: Exponent k applied to the spectral magnitude
        fft_factory: Factory for the FFT (default: process-wide FFT factory)

    Returns:
        float32 array of length max_delay - min_delay + 1

    Raises:
        ArgumentError: Unless 0 <= min_delay <= max_delay < len(samples)
    """
    samples, min_delay, max_delay = _check_delays(samples, min_delay, max_delay)
    n = len(samples)

    size = 2
    while size < 2 * n:
        size <<= 1
    padded = np.zeros(size, dtype=np.float32)
    padded[:n] = samples

    fft = (fft_factory or get_fft_factory()).create(size)
    real, imaginary = fft.transform(padded)

    power = real.astype(np.float64) ** 2 + imaginary.astype(np.float64) ** 2
    if magnitude_compression != 2:
        power = np.power(np.sqrt(power), magnitude_compression)

    correlation, _ = fft.inverse_transform(
        power.astype(np.float32), np.zeros(size, dtype=np.float32)
    )
    return np.array(correlation[min_delay:max_delay + 1], dtype=np.float32)


def autocorrelation(
    samples,
    min_delay: int = 0,
    max_delay: Optional[int] = None,
    magnitude_compression: float = 2.0,
) -> np.ndarray:
    """Autocorrelation for delays min_delay..max_delay (FFT-based)."""
    return autocorrelation_fft(samples, min_delay, max_delay, magnitude_compression)


class SpectralAutocorrelation:
    """
    Reusable autocorrelation with fixed delay range and compression.

    Example:
        acf = SpectralAutocorrelation(min_delay=20, max_delay=400)
        for frame in frames:
            lags = acf(frame)
    """

    def __init__(
        self,
        min_delay: int = 0,
        max_delay: Optional[int] = None,
        magnitude_compression: float = 2.0,
        fft_factory: Optional[TransformFactoryProtocol] = None,
    ):
        if min_delay < 0:
            raise ArgumentError("min_delay must not be negative", data={"min_delay": min_delay})
        if max_delay is not None and max_delay < min_delay:
            raise ArgumentError(
                "min_delay must not be greater than max_delay",
                data={"min_delay": min_delay, "max_delay": max_delay},
            )
        self.min_delay = min_delay
        self.max_delay = max_delay
        self.magnitude_compression = magnitude_compression
        self.fft_factory = fft_factory

    def __call__(self, samples) -> np.ndarray:
        return autocorrelation_fft(
            samples,
            self.min_delay,
            self.max_delay,
            self.magnitude_compression,
            self.fft_factory,
        )

    def __repr__(self):
        return (
            f"SpectralAutocorrelation(min_delay={self.min_delay}, max_delay={self.max_delay}, "
            f"magnitude_compression={self.magnitude_compression})"
        )
