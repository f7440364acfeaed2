"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the ``users`` table.
The owned-post id list is modified through the ``append_user_post`` and
``remove_user_post`` database functions, which each update a single row
atomically.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import DEFAULT_STATUS, User


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for that.
    """

    TABLE = "users"

    def create(self, email: str, name: str, password_hash: str) -> User:
        """
        Create a new user record.

        Args:
            email: Normalized email address
            name: Display name
            password_hash: Hashed password credential

        Returns:
            Created User with generated ID and defaults.
        """
        data = {
            "email": email,
            "name": name,
            "password": password_hash,
        }
        result = self._execute(self._db.table(self.TABLE).insert(data))
        return self._map_to_user(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[User]:
        result = self._execute(self._db.table(self.TABLE).select("*").eq("id", user_id))
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[User]:
        result = self._execute(self._db.table(self.TABLE).select("*").eq("email", email))
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def update_status(self, user_id: str, status: str) -> Optional[User]:
        """
        Set a user's status text.

        Returns:
            Updated User, or None if no such user exists.
        """
        result = self._execute(
            self._db.table(self.TABLE).update({"status": status}).eq("id", user_id)
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def add_post(self, user_id: str, post_id: str) -> None:
        """Append a post id to the user's post set (no-op if already present)."""
        self._execute(
            self._db.rpc("append_user_post", {"p_user_id": user_id, "p_post_id": post_id})
        )

    def remove_post(self, user_id: str, post_id: str) -> None:
        """Remove a post id from the user's post set."""
        self._execute(
            self._db.rpc("remove_user_post", {"p_user_id": user_id, "p_post_id": post_id})
        )

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        return User(
            id=str(data["id"]),
            email=data["email"],
            name=data["name"],
            password=data["password"],
            status=data.get("status") or DEFAULT_STATUS,
            posts=[str(p) for p in data.get("posts") or []],
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
