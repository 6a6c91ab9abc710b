"""Pytest configuration and fixtures."""

from collections import Counter
from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from imagehost.exceptions import StoreUnavailableError
from imagehost.models.image import ImageRecord, ImageSummary
from imagehost.services.image_cache import ImageCache
from imagehost.services.image_service import ImageService


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class InMemoryImageStore:
    """In-memory ImageStoreProtocol implementation with call counting.

    Set ``fail`` to True to make every operation raise StoreUnavailableError.
    """

    def __init__(self) -> None:
        self.records: dict[str, ImageRecord] = {}
        self.calls: Counter[str] = Counter()
        self.fail = False
        self._base_time = datetime(2024, 1, 1, tzinfo=UTC)

    def _check(self, operation: str) -> None:
        self.calls[operation] += 1
        if self.fail:
            raise StoreUnavailableError(f"Store operation '{operation}' failed: down")

    async def list_summaries(self) -> list[ImageSummary]:
        self._check("list_summaries")
        records = sorted(self.records.values(), key=lambda r: r.created_at, reverse=True)
        return [
            ImageSummary(id=r.id, name=r.name, content_type=r.content_type) for r in records
        ]

    async def get(self, image_id: str) -> ImageRecord | None:
        self._check("get")
        return self.records.get(image_id)

    async def insert(self, name: str, data: bytes, content_type: str) -> ImageRecord:
        self._check("insert")
        created_at = self._base_time + timedelta(seconds=self.calls["insert"])
        record = ImageRecord(
            id=uuid4().hex,
            name=name,
            data=data,
            content_type=content_type,
            created_at=created_at,
            updated_at=created_at,
        )
        self.records[record.id] = record
        return record

    async def update_name(self, image_id: str, name: str) -> ImageRecord | None:
        self._check("update_name")
        record = self.records.get(image_id)
        if record is None:
            return None
        updated = record.model_copy(
            update={"name": name, "updated_at": record.updated_at + timedelta(seconds=1)}
        )
        self.records[image_id] = updated
        return updated

    async def delete(self, image_id: str) -> bool:
        self._check("delete")
        return self.records.pop(image_id, None) is not None

    async def ping(self) -> None:
        self._check("ping")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> InMemoryImageStore:
    return InMemoryImageStore()


@pytest.fixture
def cache(store: InMemoryImageStore, clock: FakeClock) -> ImageCache:
    return ImageCache(store, ttl_seconds=300, clock=clock)


@pytest.fixture
def service(store: InMemoryImageStore, cache: ImageCache) -> ImageService:
    return ImageService(store, cache)


@pytest.fixture
def client(service: ImageService):
    """Test client wired to the in-memory store, without running the lifespan."""
    from imagehost.api.dependencies import get_image_service
    from imagehost.main import app

    app.dependency_overrides[get_image_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
