"""
Authentication service implementation.

Signup, login and user status management on top of the user repository
and the credential service.
"""

import asyncio
import logging
from typing import Optional

from shared.config import get_settings
from shared.database import get_supabase_client
from shared.validation import FieldErrors, normalize_email

from .credentials import CredentialService
from .exceptions import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from .interfaces import IAuthService
from .models import AuthToken, User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the account service.

    Password hashing runs in a worker thread so the event loop is not
    blocked by the bcrypt work factor.
    """

    def __init__(
        self,
        repository: Optional[UserRepository] = None,
        credentials: Optional[CredentialService] = None,
    ):
        self._settings = get_settings()
        self._users = repository or UserRepository(get_supabase_client())
        self._credentials = credentials or CredentialService(self._settings)

    async def signup(self, email: str, password: str, name: str) -> User:
        errors = FieldErrors()
        errors.check_email("email", email)
        errors.check_min_length(
            "password", password, 5, "Password must be at least 5 characters."
        )
        errors.check_not_empty("name", name)
        errors.raise_if_any()

        normalized = normalize_email(email)
        if self._users.get_by_email(normalized) is not None:
            raise EmailAlreadyExistsError(normalized)

        password_hash = await asyncio.to_thread(self._credentials.hash, password.strip())
        user = self._users.create(normalized, name.strip(), password_hash)
        logger.info("Created user %s", user.id)
        return user

    async def login(self, email: str, password: str) -> AuthToken:
        user = self._users.get_by_email(normalize_email(email or ""))
        if user is None:
            logger.info("Login failed: unknown email")
            raise InvalidCredentialsError(
                "A user with this email could not be found.", reason="unknown_email"
            )

        matches = await asyncio.to_thread(
            self._credentials.verify, (password or "").strip(), user.password
        )
        if not matches:
            logger.info("Login failed for user %s: wrong password", user.id)
            raise InvalidCredentialsError("Wrong password.", reason="wrong_password")

        token, claims = self._credentials.issue_token(user.id, user.email)
        return AuthToken(token=token, user_id=user.id, expires_at=claims.exp)

    async def get_user(self, user_id: str) -> User:
        user = self._users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def get_status(self, user_id: str) -> str:
        user = await self.get_user(user_id)
        return user.status

    async def update_status(self, user_id: str, status: str) -> User:
        errors = FieldErrors()
        errors.check_not_empty("status", status)
        errors.raise_if_any()

        user = self._users.update_status(user_id, status.strip())
        if user is None:
            raise UserNotFoundError(user_id)
        return user
