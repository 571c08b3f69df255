"""
Common - Shared utilities and pure functions.

- logging/     - Structured logging configuration
- primitives/  - Pure math functions on float32 vectors (numpy only)
"""
