"""
Error classes with structured logging.

Every error carries a human-readable message plus structured data, and
records itself through the structured logger when raised. The numeric core
never retries: errors are a deterministic function of the input.
"""

from typing import Optional, Dict, Any
from sigframe.common.logging import get_logger

logger = get_logger(__name__)


class SigframeError(Exception):
    """
    Base error class for all sigframe errors.

    Logs itself at debug level when constructed; callers decide whether the
    condition deserves a louder record.
    """

    def __init__(
        self,
        message: str,
        data: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        """
        Initialize error with structured context.

        Args:
            message: Human-readable error message
            data: Structured data for observability
            cause: Original exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.data = data or {}
        self.cause = cause

        self._log_error()

    def _log_error(self):
        """Log error with structured data."""
        log_data = {
            "error_type": self.__class__.__name__,
            **self.data,
        }

        if self.cause:
            log_data["cause"] = str(self.cause)

        logger.debug(self.message, data=log_data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "data": self.data,
            "cause": str(self.cause) if self.cause else None,
        }


class ArgumentError(SigframeError, ValueError):
    """Invalid argument: missing vector, length mismatch, out-of-range parameter."""
    pass


class UnsupportedOperationError(SigframeError, NotImplementedError):
    """Operation not meaningful for this implementation (e.g. inverse DCT)."""
    pass


class ConfigurationError(SigframeError):
    """Error in configuration (e.g. a configured factory cannot be loaded)."""
    pass
