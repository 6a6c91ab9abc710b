"""Storage layer protocol.

The cache and service layers only depend on this interface, so the MongoDB
backend can be swapped for an in-memory fake in tests.
"""

from typing import Protocol, runtime_checkable

from imagehost.models.image import ImageRecord, ImageSummary


@runtime_checkable
class ImageStoreProtocol(Protocol):
    """Async persistence of image records.

    Implementations raise ``StoreUnavailableError`` when the backend fails.
    Unknown ids are reported through ``None``/``False`` return values,
    never through exceptions.
    """

    async def list_summaries(self) -> list[ImageSummary]:
        """List every image without its bytes, newest first."""
        ...

    async def get(self, image_id: str) -> ImageRecord | None:
        """Get a full record by id, or None if absent."""
        ...

    async def insert(self, name: str, data: bytes, content_type: str) -> ImageRecord:
        """Insert a new record and return it with its assigned id."""
        ...

    async def update_name(self, image_id: str, name: str) -> ImageRecord | None:
        """Rename a record and return the updated record, or None if absent."""
        ...

    async def delete(self, image_id: str) -> bool:
        """Delete a record.

        Returns:
            True if deleted, False if not found
        """
        ...

    async def ping(self) -> None:
        """Check that the backend is reachable."""
        ...
