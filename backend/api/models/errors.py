"""
Error response models.

Standardized error envelope for the REST API.
"""

from pydantic import BaseModel
from typing import Optional


class FieldError(BaseModel):
    """One rejected input field."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """
    Standard error response format.

    ``data`` is only present for validation failures.
    """

    message: str
    data: Optional[list[FieldError]] = None
    status: int
