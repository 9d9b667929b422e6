"""Core Module.

This module provides core functionality for the Ethiopian Date Service.
"""

from .exceptions import (
    ConfigurationError,
    DateValidationError,
    EthiopianDateError,
    InvalidDateError,
    MalformedDateError,
    MissingDateError,
)

__all__ = [
    "EthiopianDateError",
    "ConfigurationError",
    "DateValidationError",
    "MissingDateError",
    "MalformedDateError",
    "InvalidDateError",
]
