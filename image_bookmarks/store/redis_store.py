"""Redis-backed key-value store."""

import re

import redis.asyncio as redis

from image_bookmarks.store.base import DEFAULT_LIST_LIMIT, KeyValueStore, ListResult
from image_bookmarks.utils.logging import get_logger

logger = get_logger(__name__)

# Characters with special meaning in SCAN MATCH patterns
_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")


def escape_glob(value: str) -> str:
    """Escape a literal string for use in a Redis MATCH pattern."""
    return _GLOB_SPECIAL.sub(r"\\\1", value)


class RedisStore(KeyValueStore):
    """Key-value store on top of a Redis database.

    Values are plain strings (``decode_responses=True``). Prefix listing uses
    SCAN, whose cursor is passed through as an opaque string. SCAN may return
    a key more than once across pages; callers deduplicate.
    """

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    @classmethod
    def from_url(cls, url: str) -> "RedisStore":
        """Create a store with a connection pool for the given Redis URL."""
        client = redis.Redis.from_url(url, decode_responses=True)
        return cls(client)

    async def get(self, key: str) -> str | None:
        return await self._client.get(key)

    async def put(self, key: str, value: str) -> None:
        await self._client.set(key, value)

    async def delete(self, key: str) -> None:
        await self._client.delete(key)

    async def list(
        self,
        prefix: str,
        cursor: str | None = None,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> ListResult:
        next_cursor, keys = await self._client.scan(
            cursor=int(cursor) if cursor else 0,
            match=f"{escape_glob(prefix)}*",
            count=limit,
        )
        logger.debug("SCAN %s* returned %d keys", prefix, len(keys))
        return ListResult(
            keys=list(keys),
            cursor=str(next_cursor) if int(next_cursor) != 0 else None,
        )

    async def close(self) -> None:
        await self._client.aclose()
