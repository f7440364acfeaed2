"""
Posts module.

The feed: post lifecycle, ownership checks and pagination.

Public API:
- IPostService: Interface for post operations
- PostService: Supabase-backed implementation
- paginate: Page number to offset/limit
- Post exceptions: PostNotFoundError, PostAccessDeniedError, ImageRequiredError
"""

from .interfaces import IPostService
from .service import PostService, validate_post_fields
from .models import Post, PostCreator, PostPage
from .pagination import PageWindow, paginate, parse_page
from .exceptions import (
    PostNotFoundError,
    PostAccessDeniedError,
    ImageRequiredError,
)

__all__ = [
    # Interface
    "IPostService",
    "PostService",
    "validate_post_fields",
    # Models
    "Post",
    "PostCreator",
    "PostPage",
    # Pagination
    "PageWindow",
    "paginate",
    "parse_page",
    # Exceptions
    "PostNotFoundError",
    "PostAccessDeniedError",
    "ImageRequiredError",
]
