"""Error response models."""

from enum import Enum

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Error codes for API responses."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    IMAGE_NOT_FOUND = "IMAGE_NOT_FOUND"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


class ErrorResponse(BaseModel):
    """Unified error response format."""

    error: str = Field(..., description="Error description")
    code: ErrorCode = Field(..., description="Error code")
