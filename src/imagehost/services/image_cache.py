"""Read-through cache for the image list and per-image bytes."""

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import structlog

from imagehost.exceptions import ImageNotFoundError
from imagehost.models.image import ImageContent, ImageSummary
from imagehost.storage.protocols import ImageStoreProtocol

logger = structlog.get_logger(__name__)

DEFAULT_TTL_SECONDS = 300.0

LIST_KEY = "images:list"
_ITEM_PREFIX = "images:item:"


def item_key(image_id: str) -> str:
    """Cache key for a single image's bytes."""
    return f"{_ITEM_PREFIX}{image_id}"


@dataclass(frozen=True)
class _CacheEntry:
    value: Any
    expires_at: float


class ImageCache:
    """TTL cache in front of an image store.

    Entries are filled on a miss and removed either when their TTL elapses
    (checked lazily on access) or through explicit invalidation after a
    confirmed write. A fill whose key was invalidated while the store read
    was in flight is dropped, so a write is never followed by a cached
    pre-write value. Store errors are never retried and propagate unchanged.
    """

    def __init__(
        self,
        store: ImageStoreProtocol,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            store: Store used to fill misses
            ttl_seconds: Lifetime of an entry, in seconds
            clock: Monotonic time source, injectable for tests
        """
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._store = store
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, _CacheEntry] = {}
        # Bumped on every invalidation so fills racing a write can be discarded
        self._generations: dict[str, int] = {}
        self._epoch = 0

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def _get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() >= entry.expires_at:
            self._entries.pop(key, None)
            logger.debug("Cache entry expired", key=key)
            return None
        return entry.value

    def _generation(self, key: str) -> tuple[int, int]:
        return self._epoch, self._generations.get(key, 0)

    def _set(self, key: str, value: Any, generation: tuple[int, int]) -> None:
        if self._generation(key) != generation:
            logger.debug("Discarding fill invalidated during store read", key=key)
            return
        self._entries[key] = _CacheEntry(value=value, expires_at=self._clock() + self._ttl)

    def _delete(self, key: str) -> None:
        self._generations[key] = self._generations.get(key, 0) + 1
        if self._entries.pop(key, None) is not None:
            logger.debug("Cache entry invalidated", key=key)

    async def get_list(self) -> list[ImageSummary]:
        """Get all image summaries, newest first."""
        cached = self._get(LIST_KEY)
        if cached is not None:
            logger.debug("Cache hit", key=LIST_KEY)
            return list(cached)

        logger.debug("Cache miss", key=LIST_KEY)
        generation = self._generation(LIST_KEY)
        summaries = await self._store.list_summaries()
        self._set(LIST_KEY, tuple(summaries), generation)
        return list(summaries)

    async def get_item(self, image_id: str) -> ImageContent:
        """Get an image's bytes and content type.

        Raises:
            ImageNotFoundError: If the store has no image with this id.
                Misses are not cached.
        """
        key = item_key(image_id)
        cached = self._get(key)
        if cached is not None:
            logger.debug("Cache hit", key=key)
            return cached

        logger.debug("Cache miss", key=key)
        generation = self._generation(key)
        record = await self._store.get(image_id)
        if record is None:
            raise ImageNotFoundError(image_id)

        content = record.content()
        self._set(key, content, generation)
        return content

    def invalidate_list(self) -> None:
        self._delete(LIST_KEY)

    def invalidate_item(self, image_id: str) -> None:
        self._delete(item_key(image_id))

    def clear(self) -> None:
        """Drop every cached entry."""
        self._entries.clear()
        self._generations.clear()
        self._epoch += 1
        logger.debug("Cache cleared")

    @property
    def cached_keys(self) -> list[str]:
        """Keys that are currently live (not expired)."""
        now = self._clock()
        return [key for key, entry in self._entries.items() if now < entry.expires_at]

    def __len__(self) -> int:
        return len(self.cached_keys)
