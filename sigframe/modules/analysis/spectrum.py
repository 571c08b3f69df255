"""
LinearSpectrum - Frequency-domain view of one frame.

Holds the real and imaginary output of a forward FFT together with the
derived magnitudes, powers and bin frequencies. Arrays are the backing
storage: treat them as read-only.
"""

from typing import Optional

import numpy as np

from sigframe.common.primitives import as_vector, zero_pad_at_end
from sigframe.core.errors import ArgumentError
from sigframe.core.interfaces import TransformFactoryProtocol
from sigframe.core.transforms import get_fft_factory


class LinearSpectrum:
    """
    Spectrum with linearly spaced bins (bin i is at i * sample_rate / N Hz).

    Args:
        frame_number: Index of the frame this spectrum belongs to
        real: Real part, length N
        imaginary: Imaginary part, length N (None = all zeros)
        sample_rate: Sample rate of the source signal in Hz
    """

    def __init__(self, frame_number: int, real, imaginary, sample_rate: float):
        if sample_rate <= 0:
            raise ArgumentError("sample_rate must be positive", data={"sample_rate": sample_rate})
        self.frame_number = frame_number
        self.sample_rate = float(sample_rate)
        self.real = as_vector(real, "real")
        if imaginary is None:
            self.imaginary = np.zeros(len(self.real), dtype=np.float32)
        else:
            self.imaginary = as_vector(imaginary, "imaginary")
            if len(self.imaginary) != len(self.real):
                raise ArgumentError(
                    "real and imaginary must have the same length",
                    data={"real": len(self.real), "imaginary": len(self.imaginary)},
                )
        self.powers = (self.real * self.real + self.imaginary * self.imaginary).astype(np.float32)
        self.magnitudes = np.sqrt(self.powers).astype(np.float32)

    @classmethod
    def from_samples(
        cls,
        frame_number: int,
        samples,
        sample_rate: float,
        fft_factory: Optional[TransformFactoryProtocol] = None,
    ) -> 'LinearSpectrum':
        """Zero-pad the samples to a power of two and transform them."""
        padded = zero_pad_at_end(samples)
        fft = (fft_factory or get_fft_factory()).create(len(padded))
        real, imaginary = fft.transform(padded)
        return cls(frame_number, real, imaginary, sample_rate)

    @property
    def number_of_samples(self) -> int:
        return len(self.real)

    @property
    def frequencies(self) -> np.ndarray:
        """Frequencies in Hz of the first N/2 bins (the rest mirror them)."""
        n = self.number_of_samples
        return (np.arange(n // 2, dtype=np.float64) * self.sample_rate / n).astype(np.float32)

    def get_frequency(self, bin: int) -> float:
        return bin * self.sample_rate / self.number_of_samples

    def get_bin(self, frequency: float) -> int:
        """Bin containing frequency, or -1 if it is outside [0, sample_rate/2)."""
        bin = int(np.floor(frequency * self.number_of_samples / self.sample_rate))
        if bin < 0 or bin >= self.number_of_samples // 2:
            return -1
        return bin

    def derive(self, real, imaginary) -> 'LinearSpectrum':
        """New spectrum with the same frame number and sample rate."""
        return LinearSpectrum(self.frame_number, real, imaginary, self.sample_rate)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, LinearSpectrum):
            return NotImplemented
        return (
            self.sample_rate == other.sample_rate
            and np.array_equal(self.real, other.real)
            and np.array_equal(self.imaginary, other.imaginary)
        )

    __hash__ = None

    def __repr__(self):
        return (
            f"LinearSpectrum(frame_number={self.frame_number}, "
            f"sample_rate={self.sample_rate}, N={self.number_of_samples})"
        )
