"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and mapping database failures onto the shared
exception hierarchy.
"""

from typing import TypeVar, Generic
from supabase import Client

from .exceptions import ExternalServiceError


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _execute() wrapper that turns client failures into ExternalServiceError

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class PostRepository(BaseRepository[Post]):
            def get_by_id(self, post_id: str) -> Optional[Post]:
                result = self._execute(
                    self._db.table("posts").select("*").eq("id", post_id)
                )
                if not result.data:
                    return None
                return self._map_to_post(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, query):
        """Run a query builder, reporting any failure as a database error."""
        try:
            return query.execute()
        except Exception as e:
            raise ExternalServiceError(
                "Database request failed",
                service="database",
                details={"reason": str(e)},
            ) from e
