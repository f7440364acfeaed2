"""
Feed API endpoints.

Mounted under /feed. Every route uses the strict auth policy: a missing or
invalid bearer token is rejected with 401 before the handler runs.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Form, Query, Request
from starlette.datastructures import UploadFile

from api.dependencies import get_blob_store, get_post_service
from api.middleware.auth import AuthPolicy, auth_dependency
from modules.images.storage import IBlobStore, save_upload
from shared.config import get_settings
from shared.models import AuthContext

from .exceptions import ImageRequiredError
from .interfaces import IPostService
from .models import (
    CreatePostResponse,
    DeletePostResponse,
    PostListResponse,
    PostResponse,
)
from .pagination import parse_page
from .service import validate_post_fields

router = APIRouter()

require_auth = auth_dependency(AuthPolicy.STRICT)


@router.get("/posts", response_model=PostListResponse)
async def list_posts(
    page: Optional[str] = Query(default=None, description="Page number (1-indexed)"),
    auth: AuthContext = Depends(require_auth),
    service: IPostService = Depends(get_post_service),
) -> PostListResponse:
    """
    List posts, newest first.

    Invalid or missing page numbers fall back to the first page.
    """
    result = await service.list(parse_page(page))
    return PostListResponse(posts=result.items, total_items=result.total_count)


@router.post("/post", response_model=CreatePostResponse, status_code=201)
async def create_post(
    request: Request,
    title: str = Form(""),
    content: str = Form(""),
    auth: AuthContext = Depends(require_auth),
    service: IPostService = Depends(get_post_service),
    store: IBlobStore = Depends(get_blob_store),
) -> CreatePostResponse:
    """
    Create a post from a multipart form with ``title``, ``content`` and an
    ``image`` file (PNG/JPEG; other types are ignored).
    """
    validate_post_fields(title, content, get_settings().min_text_length)
    image = await save_upload(store, _form_file(await request.form()))
    if image is None:
        raise ImageRequiredError("No image provided.")

    post = await service.create(auth, title, content, image)
    return CreatePostResponse(post=post, creator=post.creator)


@router.get("/post/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    auth: AuthContext = Depends(require_auth),
    service: IPostService = Depends(get_post_service),
) -> PostResponse:
    """Get a single post."""
    post = await service.get(post_id)
    return PostResponse(message="Post fetched.", post=post)


@router.put("/post/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: str,
    request: Request,
    title: str = Form(""),
    content: str = Form(""),
    auth: AuthContext = Depends(require_auth),
    service: IPostService = Depends(get_post_service),
    store: IBlobStore = Depends(get_blob_store),
) -> PostResponse:
    """
    Replace a post's title and content.

    ``image`` is either a new file, or the current image URL as text to keep
    the stored image. One of the two is required.
    """
    validate_post_fields(title, content, get_settings().min_text_length)
    form = await request.form()
    current_image = form.get("image")

    new_image = await save_upload(store, _form_file(form))
    if new_image is None and not (isinstance(current_image, str) and current_image):
        raise ImageRequiredError("No image picked.")

    post = await service.update(post_id, auth, title, content, new_image)
    return PostResponse(message="Post updated!", post=post)


@router.delete("/post/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    auth: AuthContext = Depends(require_auth),
    service: IPostService = Depends(get_post_service),
) -> DeletePostResponse:
    """Delete a post and its image."""
    await service.delete(post_id, auth)
    return DeletePostResponse()


def _form_file(form) -> Optional[UploadFile]:
    value = form.get("image")
    return value if isinstance(value, UploadFile) else None
