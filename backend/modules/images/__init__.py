"""
Images module.

Stores post images in object storage and exposes the upload endpoint.

Public API:
- IBlobStore: Interface for image storage
- SupabaseBlobStore: Supabase Storage implementation
- ImageRef: Display URL + storage key pair
- save_upload / is_accepted_image: Upload helpers
"""

from .models import ImageRef, ImageUploadResponse
from .storage import (
    ACCEPTED_IMAGE_TYPES,
    IBlobStore,
    SupabaseBlobStore,
    build_image_key,
    is_accepted_image,
    save_upload,
)

__all__ = [
    "ImageRef",
    "ImageUploadResponse",
    "ACCEPTED_IMAGE_TYPES",
    "IBlobStore",
    "SupabaseBlobStore",
    "build_image_key",
    "is_accepted_image",
    "save_upload",
]
