"""
sigframe - Signal analysis for short frames of audio data.

Layered structure:
- core/      - Infrastructure (config, interfaces, cache, transforms, errors)
- common/    - Shared utilities (primitives, logging)
- modules/   - Domain modules (analysis: autocorrelation, distances, spectra, bands)
"""

__version__ = "1.0.0"
