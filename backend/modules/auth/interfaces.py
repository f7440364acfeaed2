"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and keeps the API layers decoupled.
"""

from typing import Protocol, runtime_checkable

from .models import AuthToken, User


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for account operations.

    This protocol defines the contract that the auth module exposes
    to the REST routes and the GraphQL resolvers.
    """

    async def signup(self, email: str, password: str, name: str) -> User:
        """
        Register a new user.

        Raises:
            ValidationError: If any field is invalid (all violations listed)
            EmailAlreadyExistsError: If the normalized email is taken
        """
        ...

    async def login(self, email: str, password: str) -> AuthToken:
        """
        Check credentials and issue a one-hour bearer token.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
        """
        ...

    async def get_user(self, user_id: str) -> User:
        """
        Raises:
            UserNotFoundError: If the user does not exist
        """
        ...

    async def get_status(self, user_id: str) -> str:
        ...

    async def update_status(self, user_id: str, status: str) -> User:
        """
        Raises:
            ValidationError: If the status is empty
            UserNotFoundError: If the user does not exist
        """
        ...
