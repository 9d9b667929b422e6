"""Custom exceptions for the Ethiopian Date Service API.

Every API exception is rendered as a JSON body of the form
``{"error": "<message>"}`` by the handler registered in ``app.py``.
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, status

from src.core.exceptions import DateValidationError


class BaseAPIException(HTTPException):
    """Base exception for all API exceptions."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        headers: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ):
        """Initialize base API exception."""
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code or self.__class__.__name__


class BadDateRequestError(BaseAPIException):
    """Raised when the requested date cannot be converted."""

    def __init__(self, detail: str = "Invalid date provided"):
        """Initialize bad date request error."""
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code="INVALID_DATE",
        )

    @classmethod
    def from_validation_error(cls, exc: DateValidationError) -> "BadDateRequestError":
        """Build the API error from a core validation error."""
        return cls(detail=str(exc))
