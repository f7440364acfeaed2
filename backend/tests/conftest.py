"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from itertools import count
from typing import Optional
import jwt  # PyJWT

from api import app  # noqa: F401  (loads the API package before any route module)
from api.dependencies import reset_container
from modules.auth.models import User
from modules.notifications.notifier import reset_notifier
from modules.posts.models import Post, PostCreator
from shared.config import Settings, get_settings


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

TEST_USER_ID = "user-123"
TEST_USER_EMAIL = "ann@example.com"


def create_test_token(
    user_id: str = TEST_USER_ID,
    email: str = TEST_USER_EMAIL,
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a bearer token shaped like the ones the API issues.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    if expired:
        now = now - timedelta(hours=2)
    payload = {
        "userId": user_id,
        "email": email,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(hours=1)).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def make_user(
    user_id: str = TEST_USER_ID,
    email: str = TEST_USER_EMAIL,
    name: str = "Ann",
    password: str = "hashed",
    posts: Optional[list[str]] = None,
) -> User:
    return User(id=user_id, email=email, name=name, password=password, posts=posts or [])


def make_post(
    post_id: str = "post-1",
    creator_id: str = TEST_USER_ID,
    title: str = "First post",
    content: str = "Hello, world",
    image_key: str = "2024-01-01T00:00:00+00:00_cat.png",
    creator_name: str = "Ann",
) -> Post:
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return Post(
        id=post_id,
        title=title,
        content=content,
        image_url=f"https://storage.test/post-images/{image_key}",
        image_key=image_key,
        creator_id=creator_id,
        creator=PostCreator(id=creator_id, name=creator_name),
        created_at=now,
        updated_at=now,
    )


class InMemoryPosts:
    """Stand-in for PostRepository keeping rows in a dict."""

    def __init__(self):
        self.rows: dict[str, Post] = {}
        self._ids = count(1)

    def create(self, data, creator: PostCreator) -> Post:
        now = datetime.now(timezone.utc)
        post = Post(
            id=f"post-{next(self._ids)}",
            creator=creator,
            created_at=now,
            updated_at=now,
            **data,
        )
        self.rows[post.id] = post
        return post

    def get_by_id(self, post_id: str) -> Optional[Post]:
        return self.rows.get(post_id)

    def count(self) -> int:
        return len(self.rows)

    def list_page(self, offset: int, limit: int) -> list[Post]:
        newest_first = list(reversed(list(self.rows.values())))
        return newest_first[offset:offset + limit]

    def update(self, post_id, data, creator=None) -> Optional[Post]:
        if post_id not in self.rows:
            return None
        self.rows[post_id] = self.rows[post_id].model_copy(update=data)
        return self.rows[post_id]

    def delete(self, post_id: str) -> None:
        self.rows.pop(post_id, None)


class InMemoryUsers:
    """Stand-in for UserRepository with set-like post lists."""

    def __init__(self, *users):
        self.users = {user.id: user for user in users}

    def get_by_id(self, user_id):
        return self.users.get(user_id)

    def add_post(self, user_id, post_id):
        posts = self.users[user_id].posts
        if post_id not in posts:
            posts.append(post_id)

    def remove_post(self, user_id, post_id):
        posts = self.users[user_id].posts
        if post_id in posts:
            posts.remove(post_id)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Fresh settings, services and notifier for every test."""
    monkeypatch.setenv("JWT_SECRET_KEY", TEST_JWT_SECRET)
    monkeypatch.setenv("PASSWORD_HASH_ROUNDS", "4")
    get_settings.cache_clear()
    reset_container()
    reset_notifier()
    yield
    reset_notifier()
    reset_container()
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a known secret and a cheap hash work factor."""
    return Settings(jwt_secret_key=TEST_JWT_SECRET, password_hash_rounds=4)


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return TEST_USER_ID


@pytest.fixture
def auth_token(test_user_id: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
