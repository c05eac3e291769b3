"""In-process key-value store."""

from image_bookmarks.store.base import DEFAULT_LIST_LIMIT, KeyValueStore, ListResult


class MemoryStore(KeyValueStore):
    """Stores values in a dict.

    Keys are listed in lexicographic order and the cursor is the last key of
    the previous page, so listings stay stable while keys are added. Data is
    lost when the process exits; intended for development and tests.
    """

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(data or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def put(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    async def list(
        self,
        prefix: str,
        cursor: str | None = None,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> ListResult:
        if limit < 1:
            msg = "limit must be at least 1"
            raise ValueError(msg)

        remaining = sorted(
            key
            for key in self._data
            if key.startswith(prefix) and (cursor is None or key > cursor)
        )
        page = remaining[:limit]
        next_cursor = page[-1] if len(remaining) > limit else None
        return ListResult(keys=page, cursor=next_cursor)

    def __len__(self) -> int:
        return len(self._data)
