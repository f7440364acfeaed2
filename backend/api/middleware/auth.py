"""
Identity context resolution.

Turns the Authorization header of an inbound request into an AuthContext.
Two policies exist:

- lenient: missing or invalid tokens resolve to an anonymous context and the
  request proceeds; downstream code decides what anonymous callers may do.
  Used by the GraphQL endpoint, the image upload endpoint and the real-time
  channel.
- strict: missing or invalid tokens fail the request with 401. Used by the
  REST feed and status routes.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from fastapi import Depends, Request

from modules.auth.credentials import CredentialService
from modules.auth.exceptions import InvalidTokenError, MissingTokenError
from shared.models import AuthContext, AuthenticatedUser

from ..dependencies import get_credential_service

logger = logging.getLogger(__name__)


class AuthPolicy(str, Enum):
    """How a route group treats missing or invalid bearer tokens."""

    LENIENT = "lenient"
    STRICT = "strict"


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token part of a ``Bearer <token>`` header value."""
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]


def resolve_auth_context(
    authorization: Optional[str],
    credentials: CredentialService,
) -> AuthContext:
    """
    Resolve a raw Authorization header into an AuthContext.

    Never raises: absent, malformed, expired or forged tokens all
    resolve to an anonymous context.
    """
    claims = credentials.validate_token(extract_bearer_token(authorization))
    if claims is None:
        return AuthContext.anonymous()
    return AuthContext.authenticated(
        AuthenticatedUser(id=claims.user_id, email=claims.email)
    )


async def get_auth_context(
    request: Request,
    credentials: CredentialService = Depends(get_credential_service),
) -> AuthContext:
    """
    Dependency implementing the lenient policy.

    Usage:
        @router.get("/public")
        async def public_route(auth: AuthContext = Depends(get_auth_context)):
            if auth.is_authenticated:
                ...
    """
    return resolve_auth_context(request.headers.get("Authorization"), credentials)


async def require_auth_context(
    request: Request,
    credentials: CredentialService = Depends(get_credential_service),
) -> AuthContext:
    """
    Dependency implementing the strict policy.

    Raises:
        MissingTokenError: No Authorization header
        InvalidTokenError: Header present but the token does not validate
    """
    header = request.headers.get("Authorization")
    if not header:
        raise MissingTokenError()

    context = resolve_auth_context(header, credentials)
    if not context.is_authenticated:
        logger.debug("Rejected request to %s: invalid token", request.url.path)
        raise InvalidTokenError()
    return context


def auth_dependency(policy: AuthPolicy) -> Callable:
    """Return the dependency callable for a named policy."""
    if policy is AuthPolicy.STRICT:
        return require_auth_context
    return get_auth_context

