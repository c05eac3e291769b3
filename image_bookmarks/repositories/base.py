"""Base repository with generic key-value operations."""

import asyncio
from collections.abc import AsyncIterator
from typing import Generic, TypeVar

from image_bookmarks.schemas.base import BaseSchema
from image_bookmarks.store.base import DEFAULT_LIST_LIMIT, KeyValueStore

SchemaType = TypeVar("SchemaType", bound=BaseSchema)


class BaseRepository(Generic[SchemaType]):
    """Generic repository storing schema instances as JSON strings.

    This base class implements the repository pattern, keeping key layout
    and serialization out of business logic.

    Attributes:
        schema: The pydantic schema class this repository manages.
        store: The key-value store backend.
        list_limit: Page size used for prefix scans.
    """

    def __init__(
        self,
        schema: type[SchemaType],
        store: KeyValueStore,
        *,
        list_limit: int = DEFAULT_LIST_LIMIT,
    ) -> None:
        """Initialize repository with schema and store.

        Args:
            schema: Pydantic schema class of stored records.
            store: Key-value store backend.
            list_limit: Maximum keys requested per list page.
        """
        self.schema = schema
        self.store = store
        self.list_limit = list_limit

    async def _load(self, key: str) -> SchemaType | None:
        """Read and parse the record under a key.

        Returns:
            The record if the key exists, None otherwise.
        """
        value = await self.store.get(key)
        if value is None:
            return None
        return self.schema.model_validate_json(value)

    async def _save(self, key: str, entity: SchemaType) -> SchemaType:
        """Serialize and write a record, replacing any existing value."""
        await self.store.put(key, entity.to_json())
        return entity

    async def _delete(self, key: str) -> None:
        """Delete the record under a key, if any."""
        await self.store.delete(key)

    async def _iter_keys(self, prefix: str) -> AsyncIterator[list[str]]:
        """Yield pages of keys under a prefix until the store reports no cursor.

        Keys already yielded are skipped, since some backends may repeat keys
        across pages.
        """
        seen: set[str] = set()
        cursor: str | None = None
        while True:
            page = await self.store.list(prefix, cursor=cursor, limit=self.list_limit)
            fresh = [key for key in page.keys if key not in seen]
            seen.update(fresh)
            if fresh:
                yield fresh
            cursor = page.cursor
            if cursor is None:
                break

    async def _load_prefix(self, prefix: str) -> list[SchemaType]:
        """Load every record under a prefix.

        Values of each page are fetched concurrently. Keys that disappear
        between listing and reading are skipped.
        """
        items: list[SchemaType] = []
        async for keys in self._iter_keys(prefix):
            records = await asyncio.gather(*(self._load(key) for key in keys))
            items.extend(record for record in records if record is not None)
        return items
