"""Bookmark repository for key-value store operations."""

from image_bookmarks.repositories.base import BaseRepository
from image_bookmarks.schemas.bookmark import Bookmark
from image_bookmarks.store.base import DEFAULT_LIST_LIMIT, KeyValueStore


def bookmark_prefix(user_id: str) -> str:
    """Key prefix shared by all bookmarks of a user."""
    return f"user:{user_id}:bookmark:"


def bookmark_key(user_id: str, bookmark_id: str) -> str:
    """Storage key of one bookmark."""
    return f"{bookmark_prefix(user_id)}{bookmark_id}"


class BookmarkRepository(BaseRepository[Bookmark]):
    """Repository for Bookmark records, partitioned by user id."""

    def __init__(self, store: KeyValueStore, *, list_limit: int = DEFAULT_LIST_LIMIT) -> None:
        """Initialize bookmark repository.

        Args:
            store: Key-value store backend.
            list_limit: Page size for listing a user's bookmarks.
        """
        super().__init__(Bookmark, store, list_limit=list_limit)

    async def get(self, user_id: str, bookmark_id: str) -> Bookmark | None:
        """Get a bookmark by id within a user's namespace."""
        return await self._load(bookmark_key(user_id, bookmark_id))

    async def save(self, user_id: str, bookmark: Bookmark) -> Bookmark:
        """Write a bookmark under its id, overwriting any existing record."""
        return await self._save(bookmark_key(user_id, bookmark.id), bookmark)

    async def delete(self, user_id: str, bookmark_id: str) -> None:
        """Delete a bookmark. Missing bookmarks are ignored."""
        await self._delete(bookmark_key(user_id, bookmark_id))

    async def list_by_user(self, user_id: str) -> list[Bookmark]:
        """Get every bookmark of a user, in store listing order."""
        return await self._load_prefix(bookmark_prefix(user_id))
