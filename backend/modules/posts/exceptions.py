"""
Posts module exceptions.
"""

from shared.exceptions import (
    AuthorizationError,
    NotFoundError,
    ValidationError,
)


class PostNotFoundError(NotFoundError):
    """Raised when a post is not found."""

    def __init__(self, post_id: str):
        super().__init__(
            "Could not find post.",
            code="POST_NOT_FOUND",
            details={"post_id": post_id},
        )


class PostAccessDeniedError(AuthorizationError):
    """Raised when a user tries to change a post they do not own."""

    def __init__(self, post_id: str, user_id: str):
        super().__init__(
            "Not authorized!",
            code="POST_ACCESS_DENIED",
            details={"post_id": post_id, "user_id": user_id},
        )


class ImageRequiredError(ValidationError):
    """Raised when a post would be saved without an image."""

    def __init__(self, message: str = "No image provided."):
        super().__init__(
            message,
            code="IMAGE_REQUIRED",
            data=[{"field": "image", "message": message}],
        )
