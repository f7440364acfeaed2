"""
Authorization rules.

Reads are public. Mutations require an authenticated caller who owns the
resource. Anonymous callers get an AuthenticationError (401); authenticated
non-owners get an AuthorizationError (403) from the owning module.
"""

from shared.models import AuthContext

from .exceptions import MissingTokenError


def can_read(context: AuthContext) -> bool:
    """Reads are always allowed."""
    return True


def can_mutate(context: AuthContext, owner_id: str) -> bool:
    """True iff the caller is authenticated and owns the resource."""
    return context.is_authenticated and context.user_id == owner_id


def require_user_id(context: AuthContext) -> str:
    """
    Return the caller's user id, or fail for anonymous callers.

    Raises:
        MissingTokenError: If the context is anonymous
    """
    if not context.is_authenticated:
        raise MissingTokenError()
    return context.user_id  # type: ignore[return-value]
