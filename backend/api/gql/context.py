"""
GraphQL request context.
"""

from typing import Any

from fastapi import Depends

from api.dependencies import get_auth_service, get_post_service
from api.middleware.auth import AuthPolicy, auth_dependency
from modules.auth.interfaces import IAuthService
from modules.posts.interfaces import IPostService
from shared.models import AuthContext


async def get_context(
    auth: AuthContext = Depends(auth_dependency(AuthPolicy.LENIENT)),
    auth_service: IAuthService = Depends(get_auth_service),
    posts: IPostService = Depends(get_post_service),
) -> dict[str, Any]:
    """
    Build the per-request context.

    Strawberry merges the returned dict with its defaults (request,
    response), so resolvers read ``info.context["auth"]`` and friends.
    """
    return {"auth": auth, "auth_service": auth_service, "posts": posts}
