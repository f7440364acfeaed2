"""
GraphQL object and input types.

Field names follow the client contract: ``_id`` for identifiers, camelCase
elsewhere (strawberry converts snake_case automatically).
"""

import logging
from typing import Optional

import strawberry
from strawberry.types import Info

from modules.auth.models import AuthToken, User as UserModel
from modules.posts.exceptions import PostNotFoundError
from modules.posts.models import Post as PostModel, PostPage

from .errors import graphql_errors

logger = logging.getLogger(__name__)


@strawberry.type
class User:
    id: strawberry.ID = strawberry.field(name="_id")
    name: str
    email: str
    status: str
    post_ids: strawberry.Private[list[str]]

    @strawberry.field(description="Always null; credentials are never exposed")
    def password(self) -> Optional[str]:
        return None

    @strawberry.field
    async def posts(self, info: Info) -> list["Post"]:
        service = info.context["posts"]
        result = []
        with graphql_errors():
            for post_id in self.post_ids:
                try:
                    post = await service.get(post_id)
                except PostNotFoundError:
                    # Link left behind by a failed delete
                    logger.warning("User %s links missing post %s", self.id, post_id)
                    continue
                result.append(Post.from_model(post))
        return result

    @classmethod
    def from_model(cls, user: UserModel) -> "User":
        return cls(
            id=strawberry.ID(user.id),
            name=user.name,
            email=user.email,
            status=user.status,
            post_ids=list(user.posts),
        )


@strawberry.type
class Post:
    id: strawberry.ID = strawberry.field(name="_id")
    title: str
    content: str
    image_url: str
    image_key: str
    created_at: str
    updated_at: str
    creator_id: strawberry.Private[str]

    @strawberry.field
    async def creator(self, info: Info) -> User:
        with graphql_errors():
            user = await info.context["auth_service"].get_user(self.creator_id)
        return User.from_model(user)

    @classmethod
    def from_model(cls, post: PostModel) -> "Post":
        return cls(
            id=strawberry.ID(post.id),
            title=post.title,
            content=post.content,
            image_url=post.image_url,
            image_key=post.image_key,
            created_at=post.created_at.isoformat(),
            updated_at=post.updated_at.isoformat(),
            creator_id=post.creator_id,
        )


@strawberry.type
class AuthData:
    token: str
    user_id: str

    @classmethod
    def from_model(cls, token: AuthToken) -> "AuthData":
        return cls(token=token.token, user_id=token.user_id)


@strawberry.type
class PostData:
    posts: list[Post]
    total_posts: int

    @classmethod
    def from_page(cls, page: PostPage) -> "PostData":
        return cls(
            posts=[Post.from_model(post) for post in page.items],
            total_posts=page.total_count,
        )


@strawberry.input
class UserInputData:
    email: str
    name: str
    password: str


@strawberry.input
class PostInputData:
    title: str
    content: str
    image_url: str
    image_key: str
