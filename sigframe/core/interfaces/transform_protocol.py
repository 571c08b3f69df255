"""
Transform Protocol - Interface for spectral transform implementations.

Implementations:
- FFT (sigframe.core.transforms.fft)
- FFTBasedDCT (sigframe.core.transforms.dct)
- anything an application plugs in through its own factory
"""

from typing import Protocol, Optional, NamedTuple, runtime_checkable

import numpy as np


class TransformResult(NamedTuple):
    """Real and imaginary parts of a transform; both have the same length."""
    real: np.ndarray
    imaginary: np.ndarray


@runtime_checkable
class TransformProtocol(Protocol):
    """Protocol for forward/inverse spectral transforms (DI interface)."""

    number_of_samples: int

    def transform(
        self,
        real: np.ndarray,
        imaginary: Optional[np.ndarray] = None
    ) -> TransformResult:
        """Forward transform."""
        ...

    def inverse_transform(self, real: np.ndarray, imaginary: np.ndarray) -> TransformResult:
        """Inverse transform. May raise UnsupportedOperationError."""
        ...


@runtime_checkable
class TransformFactoryProtocol(Protocol):
    """Protocol for factories producing transforms for a given frame size."""

    def create(self, number_of_samples: int) -> TransformProtocol:
        """Create (or reuse) a transform for frames of number_of_samples."""
        ...
