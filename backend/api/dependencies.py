"""
Service wiring for the FastAPI routes and the GraphQL context.

ServiceContainer builds the Supabase-backed repositories and the services
on top of them, once per process.

Routes and the GraphQL context only ever see the interfaces; tests swap
implementations through ``app.dependency_overrides``.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.credentials import CredentialService
    from modules.auth.interfaces import IAuthService
    from modules.auth.repository import UserRepository
    from modules.images.storage import IBlobStore
    from modules.notifications.notifier import PostNotifier
    from modules.posts.interfaces import IPostService
    from modules.posts.repository import PostRepository


class ServiceContainer:
    """
    Lazily built repositories and services.

    Nothing touches Supabase until a property is first read, so importing
    the app needs no credentials. Each instance is cached afterwards.
    """

    def __init__(self) -> None:
        self._credentials: "CredentialService | None" = None
        self._user_repository: "UserRepository | None" = None
        self._post_repository: "PostRepository | None" = None
        self._blob_store: "IBlobStore | None" = None
        self._auth_service: "IAuthService | None" = None
        self._post_service: "IPostService | None" = None

    @property
    def credentials(self) -> "CredentialService":
        """Get the credential service (hashing + tokens)."""
        if self._credentials is None:
            from modules.auth.credentials import CredentialService
            self._credentials = CredentialService()
        return self._credentials

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def post_repository(self) -> "PostRepository":
        if self._post_repository is None:
            from modules.posts.repository import PostRepository
            from shared.database import get_supabase_client
            self._post_repository = PostRepository(get_supabase_client())
        return self._post_repository

    @property
    def blob_store(self) -> "IBlobStore":
        """Get the image store (Supabase Storage bucket)."""
        if self._blob_store is None:
            from modules.images.storage import SupabaseBlobStore
            from shared.config import get_settings
            from shared.database import get_supabase_client
            self._blob_store = SupabaseBlobStore(
                get_supabase_client(), get_settings().storage_bucket
            )
        return self._blob_store

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                repository=self.user_repository,
                credentials=self.credentials,
            )
        return self._auth_service

    @property
    def posts(self) -> "IPostService":
        """Get the post service instance."""
        if self._post_service is None:
            from modules.posts.service import PostService
            # Notifier is resolved per publish so the lifespan-owned
            # instance is always used
            self._post_service = PostService(
                repository=self.post_repository,
                users=self.user_repository,
                blob_store=self.blob_store,
            )
        return self._post_service

    def reset(self) -> None:
        """Drop every cached instance."""
        self._credentials = None
        self._user_repository = None
        self._post_repository = None
        self._blob_store = None
        self._auth_service = None
        self._post_service = None


# One container per process
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Process-wide service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """Discard the process container; the next lookup builds a new one."""
    global _container
    _container = None


# Route-level dependencies (use with Depends())


def get_credential_service() -> "CredentialService":
    """FastAPI dependency for token validation and password hashing."""
    return get_container().credentials


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_post_service() -> "IPostService":
    """FastAPI dependency for post service."""
    return get_container().posts


def get_blob_store() -> "IBlobStore":
    """FastAPI dependency for the image store."""
    return get_container().blob_store


def get_post_notifier() -> "PostNotifier":
    """
    FastAPI dependency for the real-time notifier.

    Raises:
        NotInitializedError: If called before application startup
    """
    from modules.notifications.notifier import get_notifier
    return get_notifier()
