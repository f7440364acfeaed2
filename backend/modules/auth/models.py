"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


DEFAULT_STATUS = "I am new!"


class TokenClaims(BaseModel):
    """
    Decoded bearer token payload.

    ``exp`` is always ``iat`` plus the configured token lifetime.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    user_id: str = Field(..., description="Subject (user ID)")
    email: str = Field(..., description="User's email")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")


class User(BaseModel):
    """
    Stored user record.

    ``password`` holds the password hash and must never leave the service;
    API responses use UserProfile instead.
    """

    id: str
    email: str
    name: str
    password: str = Field(..., repr=False)
    status: str = DEFAULT_STATUS
    posts: list[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_profile(self) -> "UserProfile":
        return UserProfile(
            id=self.id,
            email=self.email,
            name=self.name,
            status=self.status,
            posts=list(self.posts),
        )


class UserProfile(BaseModel):
    """Public view of a user (no credential)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    email: str
    name: str
    status: str
    posts: list[str] = Field(default_factory=list)


class AuthToken(BaseModel):
    """Result of a successful login."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    token: str
    user_id: str
    expires_at: int


# -----------------------------------------------------------------------------
# Request / response bodies
# -----------------------------------------------------------------------------


class SignupRequest(BaseModel):
    email: str = ""
    password: str = ""
    name: str = ""


class SignupResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    user_id: str


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""


class LoginResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    token: str
    user_id: str


class StatusResponse(BaseModel):
    status: str


class StatusUpdateRequest(BaseModel):
    status: str = ""


class MessageResponse(BaseModel):
    message: str
