"""
Custom exception hierarchy for NoteMind.

The analysis and mentor layers are fail-soft and never raise to callers;
these types cover the surfaces that do raise (configuration loading) and
carry structured context for fallback reporting.
"""


class NoteMindError(Exception):
    """
    Base exception for all NoteMind errors.
    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, context: dict | None = None):
        """
        Initialize NoteMind error.
        Args:
            message: Error message
            context: Optional context dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ConfigurationError(NoteMindError):
    """
    Configuration errors.
    Raised when configuration is invalid or missing required values.
    """

    pass
