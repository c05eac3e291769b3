"""Key-value store backends."""

from image_bookmarks.config import Settings
from image_bookmarks.store.base import DEFAULT_LIST_LIMIT, KeyValueStore, ListResult
from image_bookmarks.store.memory_store import MemoryStore
from image_bookmarks.store.redis_store import RedisStore


def create_store(settings: Settings) -> KeyValueStore:
    """Build the store backend selected by ``settings.store_backend``."""
    if settings.store_backend == "redis":
        return RedisStore.from_url(settings.redis_url)
    return MemoryStore()


__all__ = [
    "DEFAULT_LIST_LIMIT",
    "KeyValueStore",
    "ListResult",
    "MemoryStore",
    "RedisStore",
    "create_store",
]
