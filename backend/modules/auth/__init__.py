"""
Authentication module.

Handles signup, login, bearer tokens, user status and ownership rules.

Public API:
- IAuthService: Interface for account operations
- CredentialService: Password hashing and token signing
- can_read / can_mutate / require_user_id: Authorization rules
- Auth exceptions: InvalidTokenError, MissingTokenError, etc.
"""

from .interfaces import IAuthService
from .credentials import CredentialService
from .guard import can_read, can_mutate, require_user_id
from .models import AuthToken, TokenClaims, User, UserProfile
from .exceptions import (
    InvalidTokenError,
    MissingTokenError,
    InvalidCredentialsError,
    UnknownOwnerError,
    UserNotFoundError,
    EmailAlreadyExistsError,
)

__all__ = [
    # Interface
    "IAuthService",
    "CredentialService",
    # Authorization
    "can_read",
    "can_mutate",
    "require_user_id",
    # Models
    "AuthToken",
    "TokenClaims",
    "User",
    "UserProfile",
    # Exceptions
    "InvalidTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
    "UnknownOwnerError",
    "UserNotFoundError",
    "EmailAlreadyExistsError",
]
