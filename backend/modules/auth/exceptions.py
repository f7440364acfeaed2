"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers to return appropriate HTTP responses.
"""

from typing import Optional

from shared.exceptions import (
    AuthenticationError,
    NotFoundError,
    ValidationError,
)


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token is invalid, expired or malformed."""

    def __init__(self, message: str = "Not authenticated."):
        super().__init__(message, code="INVALID_TOKEN")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Not authenticated."):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidCredentialsError(AuthenticationError):
    """Raised when an email/password pair does not match a user."""

    def __init__(self, message: str, reason: str):
        super().__init__(
            message,
            code="INVALID_CREDENTIALS",
            details={"reason": reason},
        )


class UnknownOwnerError(AuthenticationError):
    """Raised when a valid token names a user that no longer exists."""

    def __init__(self, user_id: str):
        super().__init__(
            "Invalid user.",
            code="INVALID_USER",
            details={"user_id": user_id},
        )


class UserNotFoundError(NotFoundError):
    """Raised when a user record cannot be found."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found.",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class EmailAlreadyExistsError(ValidationError):
    """Raised when signing up with an email that is already registered."""

    def __init__(self, email: str, message: Optional[str] = None):
        super().__init__(
            message or "Validation failed. Entered data is incorrect.",
            code="EMAIL_EXISTS",
            details={"email": email},
            data=[{"field": "email", "message": "Email address already exists."}],
        )
