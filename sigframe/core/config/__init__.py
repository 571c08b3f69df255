"""
Config - Library configuration.

- settings.py: dataclass settings from environment / YAML
- factories.py: transform factory resolution
"""

from .settings import (
    Settings,
    LogLevel,
    get_settings,
    configure,
    reset_settings,
    setup_logging_from_settings,
)
from .factories import load_factory, create_fft_factory, create_dct_factory

__all__ = [
    # Settings
    "Settings",
    "LogLevel",
    "get_settings",
    "configure",
    "reset_settings",
    "setup_logging_from_settings",
    # Factories
    "load_factory",
    "create_fft_factory",
    "create_dct_factory",
]
