"""
Post repository for database access.

Encapsulates all Supabase queries and data mapping for the ``posts`` table.
Reads embed the creator's id and name through the ``creator_id`` foreign key.
"""

import uuid
from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Post, PostCreator

POST_COLUMNS = "*, creator:users(id, name)"


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


class PostRepository(BaseRepository[Post]):
    """
    Repository for post data access.

    Note: This repository does NOT perform authorization checks, and it does
    not maintain the owner's post list. The service layer is responsible
    for both.
    """

    TABLE = "posts"

    def create(self, data: dict[str, Any], creator: PostCreator) -> Post:
        """
        Insert a post.

        Args:
            data: Column values (title, content, image_url, image_key, creator_id)
            creator: Owner summary to embed in the returned model

        Returns:
            Created Post with generated ID and timestamps.
        """
        result = self._execute(self._db.table(self.TABLE).insert(data))
        return self._map_to_post(result.data[0], creator)

    def get_by_id(self, post_id: str) -> Optional[Post]:
        """Fetch one post, or None when the id is unknown or not a UUID."""
        if not _is_uuid(post_id):
            return None
        result = self._execute(
            self._db.table(self.TABLE).select(POST_COLUMNS).eq("id", post_id)
        )
        if not result.data:
            return None
        return self._map_to_post(result.data[0])

    def count(self) -> int:
        result = self._execute(
            self._db.table(self.TABLE).select("id", count="exact").limit(1)
        )
        return result.count or 0

    def list_page(self, offset: int, limit: int) -> list[Post]:
        """
        Fetch one page, newest first.

        Ties on creation time fall back to insertion order (``seq``), newest
        first, so paging is deterministic.
        """
        result = self._execute(
            self._db.table(self.TABLE)
            .select(POST_COLUMNS)
            .order("created_at", desc=True)
            .order("seq", desc=True)
            .range(offset, offset + limit - 1)
        )
        return [self._map_to_post(row) for row in result.data]

    def update(
        self,
        post_id: str,
        data: dict[str, Any],
        creator: Optional[PostCreator] = None,
    ) -> Optional[Post]:
        """
        Update a post's mutable columns.

        Returns:
            Updated Post, or None if the row no longer exists.
        """
        result = self._execute(
            self._db.table(self.TABLE).update(data).eq("id", post_id)
        )
        if not result.data:
            return None
        return self._map_to_post(result.data[0], creator)

    def delete(self, post_id: str) -> None:
        self._execute(self._db.table(self.TABLE).delete().eq("id", post_id))

    def _map_to_post(
        self,
        data: dict[str, Any],
        creator: Optional[PostCreator] = None,
    ) -> Post:
        """Map database row to Post model."""
        embedded = data.get("creator")
        if creator is None and embedded:
            creator = PostCreator(id=str(embedded["id"]), name=embedded["name"])

        return Post(
            id=str(data["id"]),
            title=data["title"],
            content=data["content"],
            image_url=data["image_url"],
            image_key=data["image_key"],
            creator_id=str(data["creator_id"]),
            creator=creator,
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
