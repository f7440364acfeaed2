"""
GraphQL schema: root query and mutation.

Resolvers delegate to the same IAuthService / IPostService as the REST
routes. Reads are public; ``user``, ``updateStatus`` and every post
mutation require a valid bearer token.
"""

from typing import Optional

import strawberry
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from modules.auth.exceptions import EmailAlreadyExistsError, InvalidCredentialsError
from modules.auth.guard import require_user_id
from modules.images.models import ImageRef
from shared.config import get_settings
from shared.exceptions import PostlineError, ValidationError

from .context import get_context
from .errors import graphql_errors
from .types import AuthData, Post, PostData, PostInputData, User, UserInputData

LOGIN_MESSAGES = {
    "unknown_email": "User not found.",
    "wrong_password": "Password is incorrect.",
}


def _login_message(exc: PostlineError) -> Optional[str]:
    if isinstance(exc, InvalidCredentialsError):
        return LOGIN_MESSAGES.get(exc.details.get("reason"))
    return None


def _signup_message(exc: PostlineError) -> Optional[str]:
    if isinstance(exc, EmailAlreadyExistsError):
        return "User exists already"
    if isinstance(exc, ValidationError):
        return "Invalid input."
    return None


def _image_from_input(post_input: PostInputData) -> Optional[ImageRef]:
    if not post_input.image_url or not post_input.image_key:
        return None
    return ImageRef(url=post_input.image_url, key=post_input.image_key)


def _post_input_or_blank(post_input: Optional[PostInputData]) -> PostInputData:
    if post_input is None:
        return PostInputData(title="", content="", image_url="", image_key="")
    return post_input


@strawberry.type
class Query:
    @strawberry.field
    async def login(self, info: Info, email: str, password: str) -> AuthData:
        with graphql_errors(_login_message):
            token = await info.context["auth_service"].login(email, password)
        return AuthData.from_model(token)

    @strawberry.field
    async def posts(self, info: Info, page: Optional[int] = None) -> PostData:
        with graphql_errors():
            result = await info.context["posts"].list(max(page or 1, 1))
        return PostData.from_page(result)

    @strawberry.field
    async def post(self, info: Info, id: strawberry.ID) -> Post:
        with graphql_errors():
            post = await info.context["posts"].get(str(id))
        return Post.from_model(post)

    @strawberry.field
    async def user(self, info: Info) -> User:
        with graphql_errors():
            user_id = require_user_id(info.context["auth"])
            user = await info.context["auth_service"].get_user(user_id)
        return User.from_model(user)


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_user(
        self, info: Info, user_input: Optional[UserInputData] = None
    ) -> User:
        if user_input is None:
            user_input = UserInputData(email="", name="", password="")
        with graphql_errors(_signup_message):
            user = await info.context["auth_service"].signup(
                user_input.email, user_input.password, user_input.name
            )
        return User.from_model(user)

    @strawberry.mutation
    async def create_post(
        self, info: Info, post_input: Optional[PostInputData] = None
    ) -> Post:
        post_input = _post_input_or_blank(post_input)
        with graphql_errors():
            post = await info.context["posts"].create(
                info.context["auth"],
                post_input.title,
                post_input.content,
                _image_from_input(post_input),
            )
        return Post.from_model(post)

    @strawberry.mutation
    async def update_post(
        self, info: Info, id: strawberry.ID, post_input: Optional[PostInputData] = None
    ) -> Post:
        post_input = _post_input_or_blank(post_input)
        with graphql_errors():
            post = await info.context["posts"].update(
                str(id),
                info.context["auth"],
                post_input.title,
                post_input.content,
                _image_from_input(post_input),
            )
        return Post.from_model(post)

    @strawberry.mutation
    async def delete_post(self, info: Info, id: strawberry.ID) -> Optional[bool]:
        with graphql_errors():
            await info.context["posts"].delete(str(id), info.context["auth"])
        return True

    @strawberry.mutation
    async def update_status(self, info: Info, status: str) -> User:
        with graphql_errors():
            user_id = require_user_id(info.context["auth"])
            user = await info.context["auth_service"].update_status(user_id, status)
        return User.from_model(user)


schema = strawberry.Schema(query=Query, mutation=Mutation)


def create_graphql_router() -> GraphQLRouter:
    """GraphQL router; mount with ``prefix="/graphql"``."""
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if get_settings().debug else None,
    )
