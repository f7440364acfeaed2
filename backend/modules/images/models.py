"""
Image data models.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ImageRef(BaseModel):
    """Location of a stored image: public display URL plus storage key."""

    model_config = {"frozen": True}

    url: str = Field(..., description="Public display URL")
    key: str = Field(..., description="Storage key within the bucket")


class ImageUploadResponse(BaseModel):
    """Response for a stored image."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    file_path: str
    file_key: str
