"""Data models."""

from imagehost.models.errors import ErrorCode, ErrorResponse
from imagehost.models.image import ImageContent, ImageRecord, ImageSummary

__all__ = [
    # Errors
    "ErrorCode",
    "ErrorResponse",
    # Images
    "ImageContent",
    "ImageRecord",
    "ImageSummary",
]
