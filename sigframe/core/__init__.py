"""
Core - Library infrastructure.

- config/      - Settings and transform factory resolution
- interfaces/  - Protocols for DI
- cache/       - In-memory LRU cache
- transforms/  - FFT, FFT-based DCT and their factories
- errors.py    - Error hierarchy
"""
