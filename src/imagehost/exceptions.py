"""Structured exception types for the image host.

Each exception maps to an HTTP status code and an error code, so the API
layer can translate all of them with a single exception handler.

Usage:
    from imagehost.exceptions import ImageNotFoundError

    # In the service or cache layer
    if record is None:
        raise ImageNotFoundError(image_id)
"""

from imagehost.models.errors import ErrorCode


class ImageHostError(Exception):
    """Base exception for the image host.

    Attributes:
        error_code: ErrorCode enum value for API responses
        status_code: HTTP status code to return
        message: Human-readable error message
    """

    error_code: ErrorCode = ErrorCode.STORE_UNAVAILABLE
    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ImageHostError):
    """Raised when an upload or rename is missing required input."""

    error_code = ErrorCode.VALIDATION_ERROR
    status_code = 400


class ImageNotFoundError(ImageHostError):
    """Raised when no image exists for the given id."""

    error_code = ErrorCode.IMAGE_NOT_FOUND
    status_code = 404

    def __init__(self, image_id: str) -> None:
        self.image_id = image_id
        super().__init__("Image not found")


class StoreUnavailableError(ImageHostError):
    """Raised when the underlying document store fails."""

    error_code = ErrorCode.STORE_UNAVAILABLE
    status_code = 500
