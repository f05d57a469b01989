"""
Exceptions raised by the screening engine and batch pipeline.
"""


class ScreenerError(Exception):
    """Base class for all resume screener errors."""


class MissingJobDescriptionError(ScreenerError, ValueError):
    """Raised when scoring is attempted without a job description."""

    def __init__(self, message: str = "Job description is required for scoring"):
        super().__init__(message)


class ExtractionError(ScreenerError):
    """Raised when a text source cannot produce text for a document."""


class BatchAlreadyRunningError(ScreenerError, RuntimeError):
    """Raised when a second run is started against a busy batch job."""


class ConfigurationError(ScreenerError, ValueError):
    """Raised for invalid weights or configuration values."""
