"""
Transforms - Spectral transforms of power-of-two frames.

- fft.py: FFT (scipy.fft)
- dct.py: FFTBasedDCT and the shared phase-factor cache
- factory.py: TransformFactory family and process-wide accessors

Example:
    fft = get_fft_factory().create(1024)
    real, imaginary = fft.transform(frame)
"""

from ..interfaces.transform_protocol import TransformResult
from .fft import FFT
from .dct import FFTBasedDCT, get_dct_factors, reset_factor_cache
from .factory import (
    TransformFactory,
    CachingTransformFactory,
    FFTFactory,
    FFTBasedDCTFactory,
    get_fft_factory,
    get_dct_factory,
    set_fft_factory,
    set_dct_factory,
    reset_factories,
)

__all__ = [
    "TransformResult",
    # Implementations
    "FFT",
    "FFTBasedDCT",
    "get_dct_factors",
    "reset_factor_cache",
    # Factories
    "TransformFactory",
    "CachingTransformFactory",
    "FFTFactory",
    "FFTBasedDCTFactory",
    "get_fft_factory",
    "get_dct_factory",
    "set_fft_factory",
    "set_dct_factory",
    "reset_factories",
]
