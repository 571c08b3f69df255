"""
Transform Factory resolution - Create transform factories from configuration.

A settings value names a factory class as "package.module:ClassName" or
"package.module.ClassName". The class is instantiated without arguments
and must provide create(number_of_samples).
"""

import importlib
from typing import Optional

from sigframe.common.logging import get_logger
from ..errors import ConfigurationError
from ..interfaces.transform_protocol import TransformFactoryProtocol
from .settings import Settings, get_settings

logger = get_logger(__name__)


def load_factory(dotted_path: str) -> TransformFactoryProtocol:
    """
    Import and instantiate a factory class by dotted path.

    Raises:
        ConfigurationError: If the class cannot be imported, instantiated,
            or does not have a callable create()
    """
    if ":" in dotted_path:
        module_name, _, class_name = dotted_path.partition(":")
    else:
        module_name, _, class_name = dotted_path.rpartition(".")
    if not module_name or not class_name:
        raise ConfigurationError(
            f"Invalid factory path: {dotted_path!r}",
            data={"path": dotted_path},
        )

    try:
        module = importlib.import_module(module_name)
        factory_class = getattr(module, class_name)
        factory = factory_class()
    except Exception as e:
        raise ConfigurationError(
            f"Cannot load factory {dotted_path!r}",
            data={"path": dotted_path},
            cause=e,
        )

    if not isinstance(factory, TransformFactoryProtocol):
        raise ConfigurationError(
            f"{dotted_path!r} does not provide create(number_of_samples)",
            data={"path": dotted_path, "type": type(factory).__name__},
        )
    return factory


def _resolve(dotted_path: Optional[str], kind: str) -> Optional[TransformFactoryProtocol]:
    if not dotted_path:
        return None
    try:
        factory = load_factory(dotted_path)
    except ConfigurationError as e:
        logger.warning(
            f"Failed to load configured {kind} factory, using built-in",
            data={"path": dotted_path, "error": str(e.cause or e)},
        )
        return None
    logger.info(f"Using configured {kind} factory", data={"path": dotted_path})
    return factory


def create_fft_factory(settings: Optional[Settings] = None) -> TransformFactoryProtocol:
    """
    Factory for the FFT factory.

    Args:
        settings: Settings to read (default: process settings)

    Returns:
        The configured factory, or FFTFactory if none is configured or it fails to load
    """
    settings = settings or get_settings()
    factory = _resolve(settings.fft_factory, "FFT")
    if factory is not None:
        return factory
    from ..transforms.factory import FFTFactory
    return FFTFactory(cache_size=settings.transform_cache_size)


def create_dct_factory(settings: Optional[Settings] = None) -> TransformFactoryProtocol:
    """
    Factory for the DCT factory.

    Returns:
        The configured factory, or FFTBasedDCTFactory as fallback
    """
    settings = settings or get_settings()
    factory = _resolve(settings.dct_factory, "DCT")
    if factory is not None:
        return factory
    from ..transforms.factory import FFTBasedDCTFactory
    return FFTBasedDCTFactory(cache_size=settings.transform_cache_size)
