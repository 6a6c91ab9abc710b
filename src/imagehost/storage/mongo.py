"""MongoDB image store built on motor."""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import structlog
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from imagehost.exceptions import StoreUnavailableError
from imagehost.models.image import ImageRecord, ImageSummary

if TYPE_CHECKING:
    from imagehost.config import Settings

logger = structlog.get_logger(__name__)

# Field names follow the documents written by the original Node service
SUMMARY_PROJECTION = {"name": 1, "contentType": 1}


def _parse_id(image_id: str) -> ObjectId | None:
    if not ObjectId.is_valid(image_id):
        return None
    return ObjectId(image_id)


def _to_record(doc: dict[str, Any]) -> ImageRecord:
    created_at = doc["createdAt"]
    return ImageRecord(
        id=str(doc["_id"]),
        name=doc["name"],
        data=bytes(doc["data"]),
        content_type=doc["contentType"],
        created_at=created_at,
        updated_at=doc.get("updatedAt", created_at),
    )


def _to_summary(doc: dict[str, Any]) -> ImageSummary:
    return ImageSummary(
        id=str(doc["_id"]),
        name=doc["name"],
        content_type=doc["contentType"],
    )


@contextmanager
def _store_errors(operation: str, **context: Any) -> Iterator[None]:
    """Re-raise driver failures as StoreUnavailableError."""
    try:
        yield
    except PyMongoError as e:
        logger.error("Store operation failed", operation=operation, error=str(e), **context)
        raise StoreUnavailableError(f"Store operation '{operation}' failed: {e}") from e


class MongoImageStore:
    """Image store backed by a single MongoDB collection.

    Documents hold ``_id``, ``name``, ``data``, ``contentType``,
    ``createdAt`` and ``updatedAt``.
    """

    def __init__(
        self,
        collection: AsyncIOMotorCollection,
        client: AsyncIOMotorClient | None = None,
    ) -> None:
        self._collection = collection
        self._client = client

    @classmethod
    def from_settings(cls, settings: "Settings") -> "MongoImageStore":
        """Create a store with its own client from application settings.

        The client connects lazily, so no I/O happens here.
        """
        client: AsyncIOMotorClient = AsyncIOMotorClient(
            settings.mongo_url,
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
            tz_aware=True,
        )
        collection = client[settings.mongo_database][settings.mongo_collection]
        return cls(collection, client=client)

    async def ensure_indexes(self) -> None:
        """Create the index backing newest-first listing."""
        with _store_errors("ensure_indexes"):
            await self._collection.create_index([("createdAt", DESCENDING)])

    async def ping(self) -> None:
        with _store_errors("ping"):
            await self._collection.database.command("ping")

    def close(self) -> None:
        if self._client is not None:
            self._client.close()

    async def list_summaries(self) -> list[ImageSummary]:
        with _store_errors("list_summaries"):
            cursor = self._collection.find({}, SUMMARY_PROJECTION).sort("createdAt", DESCENDING)
            docs = await cursor.to_list(length=None)
        return [_to_summary(doc) for doc in docs]

    async def get(self, image_id: str) -> ImageRecord | None:
        oid = _parse_id(image_id)
        if oid is None:
            return None

        with _store_errors("get", image_id=image_id):
            doc = await self._collection.find_one({"_id": oid})
        return _to_record(doc) if doc else None

    async def insert(self, name: str, data: bytes, content_type: str) -> ImageRecord:
        now = datetime.now(UTC)
        doc = {
            "name": name,
            "data": data,
            "contentType": content_type,
            "createdAt": now,
            "updatedAt": now,
        }
        with _store_errors("insert"):
            result = await self._collection.insert_one(doc)

        return ImageRecord(
            id=str(result.inserted_id),
            name=name,
            data=data,
            content_type=content_type,
            created_at=now,
            updated_at=now,
        )

    async def update_name(self, image_id: str, name: str) -> ImageRecord | None:
        oid = _parse_id(image_id)
        if oid is None:
            return None

        with _store_errors("update_name", image_id=image_id):
            doc = await self._collection.find_one_and_update(
                {"_id": oid},
                {"$set": {"name": name, "updatedAt": datetime.now(UTC)}},
                return_document=ReturnDocument.AFTER,
            )
        return _to_record(doc) if doc else None

    async def delete(self, image_id: str) -> bool:
        oid = _parse_id(image_id)
        if oid is None:
            return False

        with _store_errors("delete", image_id=image_id):
            result = await self._collection.delete_one({"_id": oid})
        return result.deleted_count > 0
