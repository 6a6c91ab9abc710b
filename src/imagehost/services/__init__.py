"""Service layer."""

from .image_cache import ImageCache
from .image_service import ImageService

__all__ = ["ImageCache", "ImageService"]
