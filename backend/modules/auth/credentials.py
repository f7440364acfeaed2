"""
Credential service: password hashing and bearer token signing.

Tokens are self-contained HS256 JWTs carrying ``userId``, ``email``,
``iat`` and ``exp``. There is no server-side session store, so a token
stays valid until it expires.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt
from passlib.context import CryptContext
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings, get_settings

from .models import TokenClaims

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CredentialService:
    """
    Hashes passwords and issues/validates bearer tokens.

    Holds no state beyond the signing secret and a clock.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._settings = settings or get_settings()
        self._clock = clock
        self._pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=self._settings.password_hash_rounds,
        )

    # -------------------------------------------------------------------------
    # Passwords
    # -------------------------------------------------------------------------

    def hash(self, password: str) -> str:
        """One-way salted hash of a password."""
        return self._pwd_context.hash(password)

    def verify(self, password: str, credential: str) -> bool:
        """Check a plaintext password against a stored hash."""
        try:
            return self._pwd_context.verify(password, credential)
        except (ValueError, TypeError):
            # Unrecognized or corrupt hash
            return False

    # -------------------------------------------------------------------------
    # Tokens
    # -------------------------------------------------------------------------

    def issue_token(self, user_id: str, email: str) -> tuple[str, TokenClaims]:
        """
        Sign a token for a user.

        Returns:
            Tuple of the encoded token and the claims it carries
        """
        secret = self._require_secret()
        issued_at = self._clock()
        expires_at = issued_at + timedelta(seconds=self._settings.token_ttl_seconds)
        claims = TokenClaims(
            user_id=user_id,
            email=email,
            iat=int(issued_at.timestamp()),
            exp=int(expires_at.timestamp()),
        )
        token = jwt.encode(
            claims.model_dump(by_alias=True),
            secret,
            algorithm=self._settings.jwt_algorithm,
        )
        return token, claims

    def validate_token(self, token: Optional[str]) -> Optional[TokenClaims]:
        """
        Validate a token and return its claims.

        Returns None for any failure (missing, malformed, bad signature,
        expired, or server secret not configured); callers treat every
        failure the same way.
        """
        if not token:
            return None

        try:
            secret = self._require_secret()
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self._settings.jwt_algorithm],
                options={"require": ["exp", "iat"]},
            )
            return TokenClaims(**payload)
        except jwt.ExpiredSignatureError:
            logger.debug("Rejected expired token")
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected invalid token: %s", e)
        except PydanticValidationError:
            logger.debug("Rejected token with missing claims")
        except RuntimeError as e:
            logger.error("Cannot validate token: %s", e)
        return None

    def _require_secret(self) -> str:
        if not self._settings.jwt_secret_key:
            raise RuntimeError("Server authentication not configured (JWT_SECRET_KEY)")
        return self._settings.jwt_secret_key
