"""Error handling and edge case tests.

Tests robustness of the library:
    - Error hierarchy and structured context
    - Edge cases (empty frames, degenerate spectra)
    - Errors raised before any partial result
"""

import logging

import numpy as np
import pytest


# =============================================================================
# ERROR HIERARCHY TESTS
# =============================================================================

@pytest.mark.unit
class TestErrorHierarchy:
    """Tests for the SigframeError family."""

    def test_builtin_bases(self):
        from sigframe.core.errors import (
            SigframeError,
            ArgumentError,
            UnsupportedOperationError,
            ConfigurationError,
        )

        assert issubclass(ArgumentError, SigframeError)
        assert issubclass(ArgumentError, ValueError)
        assert issubclass(UnsupportedOperationError, NotImplementedError)
        assert issubclass(ConfigurationError, SigframeError)

    def test_to_dict(self):
        """Test serialization of structured context.

        Checks:
            message, data and cause end up in the dictionary
        """
        from sigframe.core.errors import ConfigurationError

        cause = ImportError("no module named x")
        error = ConfigurationError("Cannot load factory", data={"path": "x:Y"}, cause=cause)

        assert error.to_dict() == {
            "error": "ConfigurationError",
            "message": "Cannot load factory",
            "data": {"path": "x:Y"},
            "cause": "no module named x",
        }
        assert str(error) == "Cannot load factory"

    def test_logged_at_debug(self, caplog):
        from sigframe.core.errors import ArgumentError

        with caplog.at_level(logging.DEBUG, logger="sigframe.core.errors"):
            ArgumentError("bad length", data={"length": 3})

        record = caplog.records[-1]
        assert record.levelno == logging.DEBUG
        assert record.structured_data["error_type"] == "ArgumentError"
        assert record.structured_data["length"] == 3

    def test_default_data(self):
        from sigframe.core.errors import SigframeError

        error = SigframeError("plain")
        assert error.data == {}
        assert error.cause is None


# =============================================================================
# EDGE CASE TESTS
# =============================================================================

@pytest.mark.unit
class TestEdgeCases:
    """Degenerate inputs give defined results."""

    def test_single_sample_autocorrelation(self):
        from sigframe.modules.analysis import autocorrelation

        result = autocorrelation(np.array([2.0], dtype=np.float32))
        assert result[0] == pytest.approx(4.0, rel=1e-5)

    def test_empty_frame_autocorrelation_rejected(self):
        from sigframe.modules.analysis import autocorrelation
        from sigframe.core.errors import ArgumentError

        with pytest.raises(ArgumentError):
            autocorrelation(np.zeros(0, dtype=np.float32))

    def test_silent_frame_bands(self):
        from sigframe.modules.analysis import LinearSpectrum, MultiBandSpectrum

        spectrum = LinearSpectrum(0, np.zeros(64), None, 8000.0)
        bands = MultiBandSpectrum.from_spectrum(0, spectrum, [100, 1000, 4000])

        assert not bands.powers.any()
        assert not np.isnan(bands.magnitudes).any()

    def test_bands_above_nyquist_are_empty(self):
        from sigframe.modules.analysis import LinearSpectrum, MultiBandSpectrum

        spectrum = LinearSpectrum(0, np.ones(64), None, 8000.0)
        bands = MultiBandSpectrum.from_spectrum(0, spectrum, [5000, 6000, 7000])

        np.testing.assert_array_equal(bands.powers, [0, 0])

    def test_cosine_distance_of_silence(self):
        from sigframe.modules.analysis import COSINE_DISTANCE

        assert COSINE_DISTANCE(np.zeros(4), np.zeros(4)) == pytest.approx(1.0)

    def test_dct_size_one(self):
        from sigframe.core.transforms import FFTBasedDCT

        real, _ = FFTBasedDCT(1).transform(np.array([3.0], dtype=np.float32))
        assert real[0] == pytest.approx(6.0)

    def test_nan_propagates(self):
        from sigframe.common.primitives import arithmetic_mean

        assert np.isnan(arithmetic_mean([1.0, np.nan]))
