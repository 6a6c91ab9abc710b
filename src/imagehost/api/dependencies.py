"""Shared dependencies for API endpoints."""

from typing import Annotated

from fastapi import Depends, Request

from imagehost.services.image_service import ImageService


def get_image_service(request: Request) -> ImageService:
    """Get the process-wide image service built during application startup."""
    return request.app.state.image_service


# Type alias for cleaner endpoint signatures
ImageServiceDep = Annotated[ImageService, Depends(get_image_service)]
