"""
Domain exception to GraphQL error translation.

Errors carry the HTTP-like status in ``extensions.code`` and, for
validation failures, the per-field list in ``extensions.data``. Failures that
are not domain errors surface as code 500 with a generic message.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from graphql import GraphQLError

from modules.posts.exceptions import PostNotFoundError
from shared.config import get_settings
from shared.exceptions import (
    ExternalServiceError,
    NotInitializedError,
    PostlineError,
    ValidationError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal error occurred."


def to_graphql_error(exc: PostlineError, message: Optional[str] = None) -> GraphQLError:
    """Convert a domain exception, optionally replacing its message."""
    if isinstance(exc, (ExternalServiceError, NotInitializedError)):
        logger.error("GraphQL operation failed: %s (%s)", exc.message, exc.details)
        return GraphQLError(INTERNAL_ERROR_MESSAGE, extensions={"code": 500})

    if isinstance(exc, PostNotFoundError):
        code = get_settings().graphql_post_not_found_code
    else:
        code = exc.status_code

    extensions = {"code": code}
    if isinstance(exc, ValidationError) and exc.data:
        extensions["data"] = exc.data
    return GraphQLError(message or exc.message, extensions=extensions)


@contextmanager
def graphql_errors(
    message_for: Optional[Callable[[PostlineError], Optional[str]]] = None,
) -> Iterator[None]:
    """
    Re-raise exceptions from the wrapped block as GraphQLError.

    Domain exceptions keep their status code; ``message_for`` may replace
    the client-facing message per exception. Anything else is logged and
    reported as a generic internal error.

    Usage:
        with graphql_errors():
            post = await posts.get(id)
    """
    try:
        yield
    except GraphQLError:
        raise
    except PostlineError as exc:
        message = message_for(exc) if message_for else None
        raise to_graphql_error(exc, message) from exc
    except Exception as exc:
        logger.exception("Unexpected error in GraphQL resolver")
        raise GraphQLError(INTERNAL_ERROR_MESSAGE, extensions={"code": 500}) from exc
