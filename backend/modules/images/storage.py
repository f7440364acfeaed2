"""
Image blob storage.

Images live in a Supabase Storage bucket, addressed by key. Only PNG and
JPEG uploads are accepted; anything else is silently ignored, so the
request continues as if no file had been sent.
"""

import asyncio
import logging
import re
from datetime import datetime, timezone
from typing import Optional, Protocol, runtime_checkable

from fastapi import UploadFile
from supabase import Client

from shared.exceptions import ExternalServiceError

from .models import ImageRef

logger = logging.getLogger(__name__)

ACCEPTED_IMAGE_TYPES = frozenset({"image/png", "image/jpg", "image/jpeg"})

_UNSAFE_KEY_CHARS = re.compile(r"[^\w.\-]")


@runtime_checkable
class IBlobStore(Protocol):
    """Object storage for image binaries."""

    def upload(self, key: str, data: bytes, content_type: str) -> ImageRef:
        """Store bytes under key and return the display URL and key."""
        ...

    def delete(self, key: str) -> None:
        """Remove the object stored under key."""
        ...


class SupabaseBlobStore(IBlobStore):
    """IBlobStore backed by a Supabase Storage bucket."""

    def __init__(self, client: Client, bucket: str):
        self._client = client
        self._bucket = bucket

    def upload(self, key: str, data: bytes, content_type: str) -> ImageRef:
        bucket = self._client.storage.from_(self._bucket)
        try:
            bucket.upload(key, data, {"content-type": content_type})
        except Exception as e:
            raise ExternalServiceError(
                "Image upload failed",
                service="storage",
                details={"key": key, "reason": str(e)},
            ) from e
        logger.debug("Stored image %s", key)
        return ImageRef(url=bucket.get_public_url(key), key=key)

    def delete(self, key: str) -> None:
        self._client.storage.from_(self._bucket).remove([key])
        logger.debug("Deleted image %s", key)


def is_accepted_image(content_type: Optional[str]) -> bool:
    return content_type in ACCEPTED_IMAGE_TYPES


def build_image_key(filename: str, now: Optional[datetime] = None) -> str:
    """Key format: ``<ISO-8601 UTC timestamp>_<sanitized filename>``."""
    timestamp = (now or datetime.now(timezone.utc)).isoformat()
    safe_name = _UNSAFE_KEY_CHARS.sub("_", filename or "image")
    return f"{timestamp}_{safe_name}"


async def save_upload(store: IBlobStore, upload: Optional[UploadFile]) -> Optional[ImageRef]:
    """
    Store an uploaded image if it is acceptable.

    Returns:
        ImageRef of the stored file, or None when there was no file or its
        type is not an accepted image type
    """
    if upload is None or not upload.filename:
        return None
    if not is_accepted_image(upload.content_type):
        logger.info("Ignoring upload %s with type %s", upload.filename, upload.content_type)
        return None

    data = await upload.read()
    key = build_image_key(upload.filename)
    return await asyncio.to_thread(store.upload, key, data, upload.content_type)
