"""Image business service."""

import structlog

from imagehost.exceptions import ImageNotFoundError, ValidationError
from imagehost.models.image import ImageContent, ImageRecord, ImageSummary
from imagehost.services.image_cache import ImageCache
from imagehost.storage.protocols import ImageStoreProtocol

logger = structlog.get_logger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def _require_name(name: str | None) -> str:
    if name is None or not name.strip():
        raise ValidationError("Image name is required")
    return name


class ImageService:
    """Uploads, renames and deletes images, keeping the cache consistent.

    Every write hits the store first; cache entries are invalidated only
    after the store has confirmed the mutation.
    """

    def __init__(self, store: ImageStoreProtocol, cache: ImageCache) -> None:
        self.store = store
        self.cache = cache

    async def upload(
        self,
        name: str | None,
        data: bytes | None,
        content_type: str | None,
    ) -> ImageRecord:
        """
        Store a new image.

        Args:
            name: Display name.
            data: Raw image bytes.
            content_type: MIME type reported by the client.

        Returns:
            The created record.

        Raises:
            ValidationError: If the file or the name is missing.
        """
        if not data:
            raise ValidationError("No file uploaded")
        name = _require_name(name)

        record = await self.store.insert(name, data, content_type or DEFAULT_CONTENT_TYPE)
        self.cache.invalidate_list()

        logger.info(
            "Image uploaded",
            image_id=record.id,
            content_type=record.content_type,
            size=len(record.data),
        )
        return record

    async def list_images(self) -> list[ImageSummary]:
        return await self.cache.get_list()

    async def get_content(self, image_id: str) -> ImageContent:
        return await self.cache.get_item(image_id)

    async def rename(self, image_id: str, name: str | None) -> ImageRecord:
        """
        Rename an image.

        Only the list cache is invalidated: a rename leaves the bytes and
        content type untouched.
        """
        name = _require_name(name)

        record = await self.store.update_name(image_id, name)
        if record is None:
            raise ImageNotFoundError(image_id)

        self.cache.invalidate_list()
        logger.info("Image renamed", image_id=image_id)
        return record

    async def delete(self, image_id: str) -> None:
        """Delete an image and drop both of its cache entries."""
        deleted = await self.store.delete(image_id)
        if not deleted:
            raise ImageNotFoundError(image_id)

        self.cache.invalidate_list()
        self.cache.invalidate_item(image_id)
        logger.info("Image deleted", image_id=image_id)
