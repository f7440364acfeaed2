"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Optional
from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Identity recovered from a valid bearer token.

    This is the minimal user info needed for most operations.
    It's extracted from the JWT and used throughout the request lifecycle.
    """

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User's email address")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",  # Ignore extra fields from JWT
    }


class AuthContext(BaseModel):
    """
    Per-request identity: either authenticated with a user id, or anonymous.

    Derived fresh from the Authorization header on every request and never
    persisted.
    """

    user: Optional[AuthenticatedUser] = None

    model_config = {"frozen": True}

    @classmethod
    def anonymous(cls) -> "AuthContext":
        return cls()

    @classmethod
    def authenticated(cls, user: AuthenticatedUser) -> "AuthContext":
        return cls(user=user)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def user_id(self) -> Optional[str]:
        return self.user.id if self.user else None
