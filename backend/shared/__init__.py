"""
Infrastructure shared by the Postline feature modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- models: Request identity (AuthContext)
- validation: Field error collection
- tasks: Fire-and-forget background work
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    PostlineError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    NotInitializedError,
)
from .models import AuthenticatedUser, AuthContext

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "PostlineError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "NotInitializedError",
    "AuthenticatedUser",
    "AuthContext",
]
