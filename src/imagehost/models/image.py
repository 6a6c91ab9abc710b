"""Image domain models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ImageRecord(BaseModel):
    """A stored image with its bytes and metadata."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = Field(..., min_length=1)
    data: bytes = Field(..., min_length=1)
    content_type: str = Field(..., min_length=1)
    created_at: datetime
    updated_at: datetime

    def content(self) -> "ImageContent":
        return ImageContent(data=self.data, content_type=self.content_type)


class ImageSummary(BaseModel):
    """Metadata projection of an image, as shown in the list."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    content_type: str


class ImageContent(BaseModel):
    """Byte projection of an image, as served by the view endpoint."""

    model_config = ConfigDict(frozen=True)

    data: bytes
    content_type: str
