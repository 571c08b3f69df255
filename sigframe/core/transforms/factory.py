"""
Transform factories - size-keyed creation of FFT and DCT instances.

Built-in factories keep a bounded LRU of instances (Settings.transform_cache_size)
so frame loops that alternate between a few sizes reuse their transforms.

Process-wide accessors:
    get_fft_factory() / get_dct_factory() return the active factory.
    Selection order: injected via set_*_factory(), else the class named in
    settings (SIGFRAME_FFT_FACTORY / SIGFRAME_DCT_FACTORY), else the built-in.
"""

import threading
from abc import ABC, abstractmethod
from typing import Optional

from sigframe.common.logging import get_logger
from ..cache import InMemoryCache
from ..config.settings import get_settings
from ..interfaces.transform_protocol import TransformFactoryProtocol, TransformProtocol
from .dct import FFTBasedDCT
from .fft import FFT, check_number_of_samples

logger = get_logger(__name__)


class TransformFactory(ABC):
    """Base class for factories producing transforms of a given size."""

    @abstractmethod
    def create(self, number_of_samples: int) -> TransformProtocol:
        """Return a transform for frames of number_of_samples samples."""


class CachingTransformFactory(TransformFactory):
    """
    TransformFactory that memoizes instances by size.

    Subclasses implement _build(). Lookup and creation are atomic, so two
    threads asking for the same size get the same instance.
    """

    def __init__(self, cache_size: Optional[int] = None):
        cache_size = cache_size or get_settings().transform_cache_size
        self._cache = InMemoryCache(max_size=cache_size, name=type(self).__name__)

    @property
    def cache_size(self) -> int:
        return self._cache.max_size

    @abstractmethod
    def _build(self, number_of_samples: int) -> TransformProtocol:
        ...

    def create(self, number_of_samples: int) -> TransformProtocol:
        check_number_of_samples(number_of_samples)

        def build():
            logger.debug(
                "Creating transform",
                data={"factory": type(self).__name__, "number_of_samples": number_of_samples},
            )
            return self._build(number_of_samples)

        return self._cache.get_or_create(int(number_of_samples), build)

    def cached_sizes(self):
        """Sizes currently held, least recently used first."""
        return self._cache.keys()

    def clear(self) -> None:
        self._cache.clear()

    def __repr__(self):
        return f"{type(self).__name__}(cache_size={self.cache_size})"


class FFTFactory(CachingTransformFactory):
    """Creates FFT instances."""

    def _build(self, number_of_samples: int) -> FFT:
        return FFT(number_of_samples)


class FFTBasedDCTFactory(CachingTransformFactory):
    """Creates FFTBasedDCT instances (each backed by the active FFT factory)."""

    def _build(self, number_of_samples: int) -> FFTBasedDCT:
        return FFTBasedDCT(number_of_samples)


# Singleton instances
_fft_factory: Optional[TransformFactoryProtocol] = None
_fft_lock = threading.Lock()
_dct_factory: Optional[TransformFactoryProtocol] = None
_dct_lock = threading.Lock()


def get_fft_factory() -> TransformFactoryProtocol:
    """Get the process-wide FFT factory, creating it on first use."""
    global _fft_factory
    with _fft_lock:
        if _fft_factory is None:
            from ..config.factories import create_fft_factory
            _fft_factory = create_fft_factory()
        return _fft_factory


def get_dct_factory() -> TransformFactoryProtocol:
    """Get the process-wide DCT factory, creating it on first use."""
    global _dct_factory
    with _dct_lock:
        if _dct_factory is None:
            from ..config.factories import create_dct_factory
            _dct_factory = create_dct_factory()
        return _dct_factory


def set_fft_factory(factory: Optional[TransformFactoryProtocol]) -> None:
    """Inject the FFT factory (None restores settings-based selection)."""
    global _fft_factory
    with _fft_lock:
        _fft_factory = factory


def set_dct_factory(factory: Optional[TransformFactoryProtocol]) -> None:
    """Inject the DCT factory (None restores settings-based selection)."""
    global _dct_factory
    with _dct_lock:
        _dct_factory = factory


def reset_factories() -> None:
    """Drop both factory singletons and the DCT factor cache."""
    from .dct import reset_factor_cache
    set_fft_factory(None)
    set_dct_factory(None)
    reset_factor_cache()
