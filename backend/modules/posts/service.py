"""
Post lifecycle service.

Orchestrates create/update/delete of posts: validation, ownership,
image blob cleanup, the owner's post list, and change notification.

Consistency note: the post row and the owner's post list are two separate
writes with no transaction around them. If linking fails after the post
row was written, the post is left unlinked (logged with its id) and the
error is reported to the caller; nothing is rolled back.
"""

import logging
from typing import Optional

from modules.auth.exceptions import UnknownOwnerError
from modules.auth.guard import can_mutate, require_user_id
from modules.auth.repository import UserRepository
from modules.images.models import ImageRef
from modules.images.storage import IBlobStore
from modules.notifications.notifier import PostAction, PostNotifier, get_notifier
from shared.config import Settings, get_settings
from shared.exceptions import ExternalServiceError
from shared.models import AuthContext
from shared.tasks import fire_and_forget
from shared.validation import FieldErrors

from .exceptions import ImageRequiredError, PostAccessDeniedError, PostNotFoundError
from .interfaces import IPostService
from .models import Post, PostCreator, PostPage
from .pagination import paginate
from .repository import PostRepository

logger = logging.getLogger(__name__)


def validate_post_fields(title: Optional[str], content: Optional[str], min_length: int = 5) -> None:
    """
    Check title and content lengths.

    Raises:
        ValidationError: Listing every field that is too short
    """
    errors = FieldErrors()
    errors.check_min_length("title", title, min_length)
    errors.check_min_length("content", content, min_length)
    errors.raise_if_any()


class PostService(IPostService):
    """
    Post service with Supabase backend.

    Implements IPostService with real database operations. Blob deletions
    run as detached background tasks; notification is non-blocking.
    """

    def __init__(
        self,
        repository: PostRepository,
        users: UserRepository,
        blob_store: IBlobStore,
        notifier: Optional[PostNotifier] = None,
        settings: Optional[Settings] = None,
    ):
        self._posts = repository
        self._users = users
        self._blobs = blob_store
        self._notifier = notifier
        self._settings = settings or get_settings()

    async def create(
        self,
        context: AuthContext,
        title: str,
        content: str,
        image: Optional[ImageRef],
    ) -> Post:
        """Create a post and link it to its owner."""
        owner_id = require_user_id(context)
        validate_post_fields(title, content, self._settings.min_text_length)
        if image is None:
            raise ImageRequiredError()

        owner = self._users.get_by_id(owner_id)
        if owner is None:
            raise UnknownOwnerError(owner_id)

        creator = PostCreator(id=owner.id, name=owner.name)
        post = self._posts.create(
            {
                "title": title.strip(),
                "content": content.strip(),
                "image_url": image.url,
                "image_key": image.key,
                "creator_id": owner.id,
            },
            creator,
        )

        try:
            self._users.add_post(owner.id, post.id)
        except ExternalServiceError:
            logger.error(
                "Post %s was saved but could not be linked to user %s",
                post.id,
                owner.id,
            )
            raise

        logger.info("User %s created post %s", owner.id, post.id)
        self._publish(PostAction.CREATE, post.to_event_payload())
        return post

    async def update(
        self,
        post_id: str,
        context: AuthContext,
        title: str,
        content: str,
        image: Optional[ImageRef] = None,
    ) -> Post:
        """Update a post owned by the caller."""
        user_id = require_user_id(context)
        validate_post_fields(title, content, self._settings.min_text_length)

        post = self._get_owned(post_id, context, user_id)

        data = {"title": title.strip(), "content": content.strip()}
        if image is not None and image != post.image:
            if image.key != post.image_key:
                self._discard_image(post.image_key)
            data["image_url"] = image.url
            data["image_key"] = image.key

        updated = self._posts.update(post_id, data, post.creator)
        if updated is None:
            raise PostNotFoundError(post_id)

        logger.info("User %s updated post %s", user_id, post_id)
        self._publish(PostAction.UPDATE, updated.to_event_payload())
        return updated

    async def delete(self, post_id: str, context: AuthContext) -> None:
        """Delete a post owned by the caller."""
        user_id = require_user_id(context)
        post = self._get_owned(post_id, context, user_id)

        # Image cleanup never blocks or fails the deletion
        self._discard_image(post.image_key)
        self._posts.delete(post_id)
        self._users.remove_post(post.creator_id, post_id)

        logger.info("User %s deleted post %s", user_id, post_id)
        self._publish(PostAction.DELETE, post_id)

    async def get(self, post_id: str) -> Post:
        post = self._posts.get_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    async def list(self, page: int = 1, per_page: Optional[int] = None) -> PostPage:
        per_page = per_page or self._settings.posts_per_page
        total = self._posts.count()
        window = paginate(total, page, per_page)

        items: list[Post] = []
        if window.offset < total:
            items = self._posts.list_page(window.offset, window.limit)

        return PostPage(items=items, total_count=total, page=page, per_page=per_page)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _get_owned(self, post_id: str, context: AuthContext, user_id: str) -> Post:
        post = self._posts.get_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        if not can_mutate(context, post.creator_id):
            logger.info("User %s denied access to post %s", user_id, post_id)
            raise PostAccessDeniedError(post_id, user_id)
        return post

    def _discard_image(self, key: str) -> None:
        fire_and_forget(self._blobs.delete, key, description=f"delete of image {key}")

    def _publish(self, action: PostAction, payload) -> None:
        notifier = self._notifier or get_notifier()
        notifier.publish(action, payload)
