"""Pydantic request/response schemas.

Response field names follow the JSON contract of the web client
(``_id``, ``contentType``, ``createdAt``), hence the serialization aliases.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ImageSummaryResponse(BaseModel):
    """Image list entry."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., serialization_alias="_id")
    name: str
    content_type: str = Field(..., serialization_alias="contentType")


class ImageResponse(ImageSummaryResponse):
    """Full image metadata, returned after a rename."""

    created_at: datetime = Field(..., serialization_alias="createdAt")
    updated_at: datetime = Field(..., serialization_alias="updatedAt")


class RenameImageRequest(BaseModel):
    """Rename image request."""

    name: str | None = None


class UploadResponse(BaseModel):
    """Upload image response."""

    message: str
    id: str


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    store: str
