"""
Analysis - Frame-level signal analysis.

- autocorrelation.py: naive and FFT-based autocorrelation
- distance.py: named distance functions for frame-to-frame comparison
- spectrum.py: LinearSpectrum
- bands.py: MultiBandSpectrum, logarithmic band boundaries
"""

from .autocorrelation import (
    autocorrelation,
    autocorrelation_naive,
    autocorrelation_fft,
    SpectralAutocorrelation,
)
from .distance import (
    DistanceFunction,
    CachingCosineDistance,
    EUCLIDEAN_DISTANCE,
    EUCLIDEAN_INCREASE_DISTANCE,
    CITY_BLOCK_DISTANCE,
    CITY_BLOCK_INCREASE_DISTANCE,
    COSINE_DISTANCE,
    COSINE_SIMILARITY,
    DISTANCE_FUNCTIONS,
    get_distance_function,
    list_distance_functions,
    create_cosine_distance_function,
    create_cosine_similarity_function,
)
from .spectrum import LinearSpectrum
from .bands import MultiBandSpectrum, create_logarithmic_bands

__all__ = [
    # Autocorrelation
    'autocorrelation',
    'autocorrelation_naive',
    'autocorrelation_fft',
    'SpectralAutocorrelation',
    # Distance
    'DistanceFunction',
    'CachingCosineDistance',
    'EUCLIDEAN_DISTANCE',
    'EUCLIDEAN_INCREASE_DISTANCE',
    'CITY_BLOCK_DISTANCE',
    'CITY_BLOCK_INCREASE_DISTANCE',
    'COSINE_DISTANCE',
    'COSINE_SIMILARITY',
    'DISTANCE_FUNCTIONS',
    'get_distance_function',
    'list_distance_functions',
    'create_cosine_distance_function',
    'create_cosine_similarity_function',
    # Spectra
    'LinearSpectrum',
    'MultiBandSpectrum',
    'create_logarithmic_bands',
]
