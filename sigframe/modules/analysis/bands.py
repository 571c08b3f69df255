"""
MultiBandSpectrum - Spectrum aggregated into frequency bands.

Bands are given by their boundaries in Hz (n bands need n+1 increasing
boundaries). Band i covers boundaries[i] <= f < boundaries[i+1].

Aggregation from a LinearSpectrum:
    Each linear bin's power is added to the band its frequency falls into.
    Bins below the first or at/above the last boundary are dropped.
    Band magnitude = sqrt(band power), stored as the real part; the
    imaginary part is zero.
"""

from typing import Optional, Sequence

import numpy as np

from sigframe.common.primitives import as_vector
from sigframe.core.errors import ArgumentError
from .spectrum import LinearSpectrum


def create_logarithmic_bands(low_frequency: float, high_frequency: float, number_of_bands: int) -> np.ndarray:
    """
    Logarithmically spaced band boundaries.

    Args:
        low_frequency: Lowest boundary in Hz
        high_frequency: Highest boundary in Hz
        number_of_bands: Number of bands

    Returns:
        float32 array of number_of_bands + 1 boundaries

    Example:
        >>> create_logarithmic_bands(100, 800, 3)
        array([100., 200., 400., 800.], dtype=float32)
    """
    if number_of_bands < 1:
        raise ArgumentError("number_of_bands must be at least 1", data={"number_of_bands": number_of_bands})
    if low_frequency <= 0:
        raise ArgumentError("low_frequency must be positive", data={"low_frequency": low_frequency})
    if high_frequency <= low_frequency:
        raise ArgumentError(
            "high_frequency must be greater than low_frequency",
            data={"low_frequency": low_frequency, "high_frequency": high_frequency},
        )
    if number_of_bands == 1:
        return np.array([low_frequency, high_frequency], dtype=np.float32)

    factor = number_of_bands / np.log2(high_frequency / low_frequency)
    exponents = np.arange(number_of_bands + 1, dtype=np.float64) / factor
    return (low_frequency * np.power(2.0, exponents)).astype(np.float32)


def _check_boundaries(boundaries) -> np.ndarray:
    boundaries = as_vector(boundaries, "band_boundaries")
    if len(boundaries) < 2:
        raise ArgumentError(
            "At least two band boundaries are required",
            data={"boundaries": len(boundaries)},
        )
    if np.any(np.diff(boundaries) <= 0):
        raise ArgumentError("Band boundaries must be strictly increasing")
    return boundaries


class MultiBandSpectrum:
    """
    Spectrum with one value per frequency band.

    Args:
        frame_number: Index of the frame this spectrum belongs to
        real: Real part, one value per band
        imaginary: Imaginary part (None = all zeros)
        sample_rate: Sample rate of the source signal in Hz
        band_boundaries: number_of_bands + 1 increasing boundaries in Hz
    """

    def __init__(
        self,
        frame_number: int,
        real,
        imaginary: Optional[Sequence[float]],
        sample_rate: float,
        band_boundaries,
    ):
        self.frame_number = frame_number
        self.sample_rate = float(sample_rate)
        self._band_boundaries = _check_boundaries(band_boundaries)

        self.real = as_vector(real, "real")
        if len(self.real) != self.number_of_bands:
            raise ArgumentError(
                "real must have one value per band",
                data={"real": len(self.real), "number_of_bands": self.number_of_bands},
            )
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
        purely_real = self.imaginary == 0
        self.magnitudes = np.where(
            purely_real, np.abs(self.real), np.sqrt(self.powers)
        ).astype(np.float32)

    @classmethod
    def from_spectrum(cls, frame_number: int, spectrum: LinearSpectrum, band_boundaries) -> 'MultiBandSpectrum':
        """
        Aggregate a linear spectrum's powers into bands.

        One left-to-right pass over the spectrum's bins: every bin goes to
        the slot counting the boundaries at or below its frequency. Slot 0
        (below the first boundary) and the last slot (at or above the last
        boundary) are dropped.
        """
        boundaries = _check_boundaries(band_boundaries)
        frequencies = spectrum.frequencies
        powers = spectrum.powers[:len(frequencies)].astype(np.float64)

        slots = np.searchsorted(boundaries, frequencies, side='right')
        sums = np.bincount(slots, weights=powers, minlength=len(boundaries) + 1)
        band_powers = sums[1:len(boundaries)].astype(np.float32)

        magnitudes = np.sqrt(band_powers)
        band_spectrum = cls(frame_number, magnitudes, None, spectrum.sample_rate, boundaries)
        band_spectrum.powers = band_powers
        band_spectrum.magnitudes = magnitudes
        return band_spectrum

    @property
    def band_boundaries(self) -> np.ndarray:
        return self._band_boundaries

    @property
    def number_of_bands(self) -> int:
        return len(self._band_boundaries) - 1

    @property
    def frequencies(self) -> np.ndarray:
        """
        Band centers: the mean of each band's lower and upper boundary.

        For logarithmic bands this is not the geometric (perceptual) center.
        """
        b = self._band_boundaries
        return ((b[:-1] + b[1:]) / 2).astype(np.float32)

    def get_frequency(self, band: int) -> float:
        """Center frequency of a band."""
        return float(self.frequencies[band])

    def get_bin(self, frequency: float) -> int:
        """Index of the band with low <= frequency < high, or -1."""
        band = int(np.searchsorted(self._band_boundaries, frequency, side='right')) - 1
        if band < 0 or band >= self.number_of_bands:
            return -1
        return band

    def derive(self, real, imaginary) -> 'MultiBandSpectrum':
        """New spectrum with the same frame number, sample rate and bands."""
        return MultiBandSpectrum(self.frame_number, real, imaginary, self.sample_rate, self._band_boundaries)

    def copy(self) -> 'MultiBandSpectrum':
        """Deep copy: no arrays are shared with the original."""
        duplicate = MultiBandSpectrum(
            self.frame_number,
            self.real.copy(),
            self.imaginary.copy(),
            self.sample_rate,
            self._band_boundaries.copy(),
        )
        duplicate.powers = self.powers.copy()
        duplicate.magnitudes = self.magnitudes.copy()
        return duplicate

    def __eq__(self, other):
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return (
            np.array_equal(self._band_boundaries, other._band_boundaries)
            and np.array_equal(self.real, other.real)
            and np.array_equal(self.imaginary, other.imaginary)
        )

    __hash__ = None

    def __repr__(self):
        return (
            f"MultiBandSpectrum(frame_number={self.frame_number}, "
            f"number_of_bands={self.number_of_bands}, sample_rate={self.sample_rate})"
        )
