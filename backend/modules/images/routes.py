"""
Image upload endpoint.

Used by clients of the GraphQL API, which cannot send multipart bodies:
the image is stored first and the returned URL/key are passed to
createPost/updatePost.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from api.dependencies import get_blob_store
from api.middleware.auth import AuthPolicy, auth_dependency
from modules.auth.guard import require_user_id
from shared.models import AuthContext
from shared.tasks import fire_and_forget

from .models import ImageUploadResponse
from .storage import IBlobStore, save_upload

router = APIRouter()


@router.put("/post-image", status_code=201)
async def upload_post_image(
    image: Optional[UploadFile] = File(None),
    old_key: Optional[str] = Form(None, alias="oldKey"),
    auth: AuthContext = Depends(auth_dependency(AuthPolicy.LENIENT)),
    store: IBlobStore = Depends(get_blob_store),
):
    """
    Store a post image.

    Requires authentication. Without an accepted PNG/JPEG file this answers
    200 with a message; otherwise the file is stored, ``oldKey`` (if given)
    is deleted in the background, and 201 is returned with the new
    location.
    """
    require_user_id(auth)

    stored = await save_upload(store, image)
    if stored is None:
        return JSONResponse(status_code=200, content={"message": "No file provided!"})

    if old_key:
        fire_and_forget(store.delete, old_key, description=f"delete of image {old_key}")

    return ImageUploadResponse(
        message="File stored.",
        file_path=stored.url,
        file_key=stored.key,
    ).model_dump(by_alias=True)
