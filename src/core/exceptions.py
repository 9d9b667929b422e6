"""Core Exceptions Module.

This module defines custom exceptions used throughout the Ethiopian Date Service.
"""


class EthiopianDateError(Exception):
    """Base exception for all Ethiopian Date Service errors."""


class ConfigurationError(EthiopianDateError):
    """Raised when configuration is invalid or missing."""


class DateValidationError(EthiopianDateError):
    """Raised when a date cannot be accepted for conversion."""


class MissingDateError(DateValidationError):
    """Raised when no date was supplied."""

    def __init__(self, message: str = "Missing date parameter in yyyy-mm-dd format"):
        """Initialize missing date error."""
        super().__init__(message)


class MalformedDateError(DateValidationError):
    """Raised when a date is not made of year, month and day parts."""

    def __init__(self, message: str = "Date must be in yyyy-mm-dd format"):
        """Initialize malformed date error."""
        super().__init__(message)


class InvalidDateError(DateValidationError):
    """Raised when date parts do not form a supported calendar date."""

    def __init__(self, message: str = "Invalid date provided"):
        """Initialize invalid date error."""
        super().__init__(message)
