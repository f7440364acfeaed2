"""
Exception handlers for the REST API.

Every failure leaves the API as ``{"message", "data"?, "status"}`` with the
HTTP status matching ``status``.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from modules.posts.exceptions import PostNotFoundError
from shared.config import get_settings
from shared.exceptions import (
    ExternalServiceError,
    NotInitializedError,
    PostlineError,
    ValidationError,
)

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal error occurred."


def error_response(
    status: int,
    message: str,
    data: Optional[list[dict[str, Any]]] = None,
) -> JSONResponse:
    body = ErrorResponse(message=message, data=data, status=status)
    return JSONResponse(
        status_code=status,
        content=body.model_dump(exclude_none=True),
    )


def status_for(exc: PostlineError) -> int:
    """HTTP status for a domain exception."""
    if isinstance(exc, PostNotFoundError):
        return get_settings().rest_post_not_found_status
    return exc.status_code


async def postline_error_handler(request: Request, exc: PostlineError) -> JSONResponse:
    if isinstance(exc, (ExternalServiceError, NotInitializedError)):
        logger.error(
            "%s %s failed: %s (%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.details,
        )
        return error_response(500, INTERNAL_ERROR_MESSAGE)

    data = exc.data if isinstance(exc, ValidationError) and exc.data else None
    return error_response(status_for(exc), exc.message, data)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    data = [
        {"field": str(error["loc"][-1]), "message": error["msg"]}
        for error in exc.errors()
    ]
    return error_response(422, "Validation failed. Entered data is incorrect.", data)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PostlineError, postline_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
