"""
Pytest configuration for sigframe tests.

Automatically adds project root to sys.path so that 'from sigframe...' imports work.
Defines markers and shared fixtures.
"""
import sys
import numpy as np
import pytest
from pathlib import Path
from typing import Tuple

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


# =============================================================================
# Pytest Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "invariant: Architectural invariant tests")
    config.addinivalue_line("markers", "slow: Slow tests")


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch):
    """Isolate tests from process-wide settings, factories and caches."""
    from sigframe.core.config.settings import reset_settings
    from sigframe.core.transforms.factory import reset_factories

    for name in (
        "SIGFRAME_FFT_FACTORY",
        "SIGFRAME_DCT_FACTORY",
        "SIGFRAME_TRANSFORM_CACHE_SIZE",
        "SIGFRAME_FACTOR_CACHE_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)

    reset_settings()
    reset_factories()
    yield
    reset_settings()
    reset_factories()


@pytest.fixture
def project_root() -> Path:
    """Return project root path."""
    return PROJECT_ROOT


@pytest.fixture
def sine_frame() -> Tuple[np.ndarray, int]:
    """256-sample 440 Hz sine burst at 8 kHz."""
    sr = 8000
    t = np.arange(256) / sr
    y = np.sin(2 * np.pi * 440 * t).astype(np.float32)
    return y, sr


@pytest.fixture
def noisy_frame() -> np.ndarray:
    """1024 samples: two partials plus a little noise (seeded)."""
    np.random.seed(42)
    sr = 22050
    t = np.arange(1024) / sr
    y = (
        0.5 * np.sin(2 * np.pi * 440 * t) +
        0.3 * np.sin(2 * np.pi * 880 * t) +
        0.05 * np.random.randn(len(t))
    ).astype(np.float32)
    return y
