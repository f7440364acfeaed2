"""
Posts module interface.

The REST routes and the GraphQL resolvers depend on IPostService for all
post lifecycle operations.
"""

from typing import Optional, Protocol, runtime_checkable

from modules.images.models import ImageRef
from shared.models import AuthContext

from .models import Post, PostPage


@runtime_checkable
class IPostService(Protocol):
    """
    Interface for post lifecycle operations.

    Mutations take the caller's AuthContext and enforce ownership; reads
    are public.
    """

    async def create(
        self,
        context: AuthContext,
        title: str,
        content: str,
        image: Optional[ImageRef],
    ) -> Post:
        """
        Create a post owned by the caller and link it to the caller's post set.

        Raises:
            MissingTokenError: If the caller is anonymous
            ValidationError: If title/content are too short (all fields listed)
            ImageRequiredError: If no image is given
            UnknownOwnerError: If the caller's user record does not exist
        """
        ...

    async def update(
        self,
        post_id: str,
        context: AuthContext,
        title: str,
        content: str,
        image: Optional[ImageRef] = None,
    ) -> Post:
        """
        Replace a post's title, content and optionally its image.

        A different image key schedules deletion of the old blob.

        Raises:
            MissingTokenError: If the caller is anonymous
            PostNotFoundError: If the post does not exist
            PostAccessDeniedError: If the caller is not the owner
            ValidationError: If title/content are too short
        """
        ...

    async def delete(self, post_id: str, context: AuthContext) -> None:
        """
        Delete a post, its image (best-effort) and its owner link.

        Raises:
            MissingTokenError: If the caller is anonymous
            PostNotFoundError: If the post does not exist
            PostAccessDeniedError: If the caller is not the owner
        """
        ...

    async def get(self, post_id: str) -> Post:
        """
        Raises:
            PostNotFoundError: If the post does not exist
        """
        ...

    async def list(self, page: int = 1, per_page: Optional[int] = None) -> PostPage:
        """Newest-first page of posts; out-of-range pages are empty."""
        ...
