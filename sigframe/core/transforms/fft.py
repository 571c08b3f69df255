"""
FFT - Fast Fourier Transform backed by scipy.fft.

Forward transform is the unnormalized DFT; the inverse divides by N, so
inverse_transform(*transform(x)) reproduces x up to float32 precision.
"""

from typing import Optional

import numpy as np
import scipy.fft

from sigframe.common.primitives.vector import as_vector, is_power_of_two
from ..errors import ArgumentError
from ..interfaces.transform_protocol import TransformResult


def check_number_of_samples(number_of_samples: int) -> int:
    """
    Validate a transform size.

    Raises:
        ArgumentError: If the size is not a positive power of two
    """
    if number_of_samples <= 0:
        raise ArgumentError(
            "N must be greater than 0",
            data={"number_of_samples": number_of_samples},
        )
    if not is_power_of_two(number_of_samples):
        raise ArgumentError(
            "N is not a power of 2",
            data={"number_of_samples": number_of_samples},
        )
    return int(number_of_samples)


class FFT:
    """
    Complex FFT for frames of a fixed power-of-two length.

    Instances hold no mutable state and can be shared between threads.
    """

    def __init__(self, number_of_samples: int):
        self.number_of_samples = check_number_of_samples(number_of_samples)

    def _frame(self, array, name: str) -> np.ndarray:
        vector = as_vector(array, name)
        if len(vector) != self.number_of_samples:
            raise ArgumentError(
                f"{name} must have {self.number_of_samples} samples",
                data={"expected": self.number_of_samples, "actual": len(vector)},
            )
        return vector

    def _to_complex(self, real, imaginary) -> np.ndarray:
        real = self._frame(real, "real")
        if imaginary is None:
            return real.astype(np.float64)
        imaginary = self._frame(imaginary, "imaginary")
        return real.astype(np.float64) + 1j * imaginary.astype(np.float64)

    @staticmethod
    def _result(spectrum: np.ndarray) -> TransformResult:
        return TransformResult(
            real=np.ascontiguousarray(spectrum.real, dtype=np.float32),
            imaginary=np.ascontiguousarray(spectrum.imag, dtype=np.float32),
        )

    def transform(self, real, imaginary: Optional[np.ndarray] = None) -> TransformResult:
        """Forward FFT of a real (or complex, if imaginary is given) frame."""
        return self._result(scipy.fft.fft(self._to_complex(real, imaginary)))

    def inverse_transform(self, real, imaginary: Optional[np.ndarray] = None) -> TransformResult:
        """Inverse FFT (normalized by 1/N). A missing imaginary part counts as zeros."""
        return self._result(scipy.fft.ifft(self._to_complex(real, imaginary)))

    def __eq__(self, other):
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self.number_of_samples == other.number_of_samples

    def __hash__(self):
        return self.number_of_samples

    def __repr__(self):
        return f"FFT(N={self.number_of_samples})"
