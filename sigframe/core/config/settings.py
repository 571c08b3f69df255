"""
Settings - Library configuration using dataclasses.

Environment variables:
- SIGFRAME_FFT_FACTORY: dotted path of an alternate FFT factory class
- SIGFRAME_DCT_FACTORY: dotted path of an alternate DCT factory class
- SIGFRAME_TRANSFORM_CACHE_SIZE: transform instances kept per factory (default 4)
- SIGFRAME_FACTOR_CACHE_SIZE: DCT phase-factor tables kept (default 32)
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR
- LOG_JSON: true/false

A YAML file with the same keys in lower case (fft_factory, dct_factory, ...)
can be overlaid with Settings.from_yaml().
"""

import os
import threading
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union
from dataclasses import dataclass, field, fields, replace

import yaml

from ..errors import ConfigurationError


class LogLevel(str, Enum):
    """Log level options."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def _optional_env(name: str) -> Optional[str]:
    value = os.getenv(name)
    return value.strip() if value and value.strip() else None


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name, str(default))
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(
            f"{name} must be an integer",
            data={name: value},
            cause=e,
        )


@dataclass
class Settings:
    """Library settings from environment."""

    # Transforms
    fft_factory: Optional[str] = field(
        default_factory=lambda: _optional_env("SIGFRAME_FFT_FACTORY")
    )
    dct_factory: Optional[str] = field(
        default_factory=lambda: _optional_env("SIGFRAME_DCT_FACTORY")
    )
    transform_cache_size: int = field(
        default_factory=lambda: _int_env("SIGFRAME_TRANSFORM_CACHE_SIZE", 4)
    )
    factor_cache_size: int = field(
        default_factory=lambda: _int_env("SIGFRAME_FACTOR_CACHE_SIZE", 32)
    )

    # Logging
    log_level: LogLevel = field(
        default_factory=lambda: LogLevel(os.getenv("LOG_LEVEL", "INFO").upper())
    )
    log_json: bool = field(
        default_factory=lambda: os.getenv("LOG_JSON", "false").lower() == "true"
    )

    def __post_init__(self):
        if self.transform_cache_size < 1:
            raise ConfigurationError(
                "transform_cache_size must be at least 1",
                data={"transform_cache_size": self.transform_cache_size},
            )
        if self.factor_cache_size < 1:
            raise ConfigurationError(
                "factor_cache_size must be at least 1",
                data={"factor_cache_size": self.factor_cache_size},
            )

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path]) -> 'Settings':
        """
        Load settings from a YAML file on top of the environment defaults.

        Args:
            config_path: Path to a YAML mapping of setting names to values

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If the file is missing or has unknown keys
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                data={"path": str(config_path)},
            )

        with open(config_path, 'r') as f:
            overrides: Dict[str, Any] = yaml.safe_load(f) or {}

        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigurationError(
                f"Unknown settings: {', '.join(sorted(unknown))}",
                data={"path": str(config_path), "unknown": sorted(unknown)},
            )
        if "log_level" in overrides:
            overrides["log_level"] = LogLevel(str(overrides["log_level"]).upper())

        return replace(cls(), **overrides)


# Singleton instance
_settings: Optional[Settings] = None
_settings_lock = threading.Lock()


def get_settings() -> Settings:
    """Get settings singleton."""
    global _settings
    with _settings_lock:
        if _settings is None:
            _settings = Settings()
        return _settings


def configure(settings: Settings) -> None:
    """Install explicit settings (composition root)."""
    global _settings
    with _settings_lock:
        _settings = settings


def reset_settings() -> None:
    """Forget the current settings; the next access re-reads the environment."""
    global _settings
    with _settings_lock:
        _settings = None


def setup_logging_from_settings(settings: Optional[Settings] = None, log_file: Optional[str] = None) -> None:
    """Configure logging from Settings.log_level / Settings.log_json (application startup)."""
    from sigframe.common.logging import setup_logging

    settings = settings or get_settings()
    setup_logging(
        level=settings.log_level.value,
        log_file=log_file,
        json_format=settings.log_json,
        force=True,
    )
