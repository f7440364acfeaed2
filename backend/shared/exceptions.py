"""
Base exception classes for the Postline backend.

Each module defines its own exceptions that inherit from these bases.
The API layer maps the bases onto HTTP statuses and GraphQL error codes.
"""

from typing import Optional, Any


class PostlineError(Exception):
    """
    Base exception for all Postline errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(PostlineError):
    """Resource not found."""

    status_code = 404


class ValidationError(PostlineError):
    """
    Input validation failed.

    ``data`` holds one ``{"field", "message"}`` entry per violated field.
    """

    status_code = 422

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        data: Optional[list[dict[str, str]]] = None,
    ):
        super().__init__(message, code, details)
        self.data = data or []

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["data"] = self.data
        return result


class AuthenticationError(PostlineError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(PostlineError):
    """Authorization failed (authenticated, but not allowed)."""

    status_code = 403


class ExternalServiceError(PostlineError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class NotInitializedError(PostlineError):
    """A process-wide component was used before startup initialized it."""

    def __init__(self, component: str):
        super().__init__(
            f"{component} not initialized",
            code="NOT_INITIALIZED",
            details={"component": component},
        )
