"""
Modules - Domain logic built on core and common.

- analysis/  - Autocorrelation, distance functions, spectra and band aggregation
"""
