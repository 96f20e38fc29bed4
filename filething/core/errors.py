"""
FILETHING - Custom Exception Classes

Defines the exception hierarchy for the application.
Errors raised by a deletion strategy are never translated into these;
they reach the caller unchanged.
"""


class FilethingError(Exception):
    """Base exception for all FILETHING errors."""

    pass


class ConfigurationError(FilethingError):
    """Raised when there are configuration issues."""

    pass
