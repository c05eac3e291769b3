"""Bookmark service for business logic."""

from datetime import datetime

from image_bookmarks.core.exceptions import ErrorCode, NotFoundError, ValidationError
from image_bookmarks.repositories.bookmark import BookmarkRepository
from image_bookmarks.schemas.bookmark import Bookmark, BookmarkDelete, BookmarkUpsert, TagsUpdate
from image_bookmarks.store.base import DEFAULT_LIST_LIMIT, KeyValueStore
from image_bookmarks.utils.hashing import bookmark_id_from_url
from image_bookmarks.utils.logging import get_logger
from image_bookmarks.utils.timestamps import EPOCH, parse_timestamp, utc_now_iso

logger = get_logger(__name__)


def matches_filters(bookmark: Bookmark, tags: list[str], query: str) -> bool:
    """Check a bookmark against the list filters.

    Args:
        bookmark: Bookmark to test.
        tags: Required tags; all must be present (exact comparison).
        query: Lowercase search term; must occur in the URL or in any tag,
            ignoring case. Empty matches everything.
    """
    if tags and not all(tag in bookmark.tags for tag in tags):
        return False
    if not query:
        return True
    if query in bookmark.image_url.lower():
        return True
    return any(query in tag.lower() for tag in bookmark.tags)


def recency(bookmark: Bookmark) -> datetime:
    """Sort key: creation time, else update time, else the epoch."""
    return parse_timestamp(bookmark.created_at) or parse_timestamp(bookmark.updated_at) or EPOCH


def _require_image_url(image_url: str | None) -> str:
    if not image_url:
        raise ValidationError("imageUrl is required")
    return image_url


class BookmarkService:
    """Service for bookmark business logic.

    Every operation is scoped to one user id. Bookmarks are addressed by the
    SHA-256 of their image URL, so writing the same URL twice overwrites the
    first record.
    """

    def __init__(self, store: KeyValueStore, *, list_limit: int = DEFAULT_LIST_LIMIT) -> None:
        """Initialize service with a key-value store.

        Args:
            store: Key-value store backend.
            list_limit: Page size for listing bookmarks.
        """
        self.repository = BookmarkRepository(store, list_limit=list_limit)

    async def list(
        self,
        user_id: str,
        *,
        tags: list[str] | None = None,
        query: str | None = None,
    ) -> list[Bookmark]:
        """List a user's bookmarks, filtered and newest first.

        Args:
            user_id: Owner's id.
            tags: Tags that must all be present.
            query: Case-insensitive substring of the URL or of any tag.

        Returns:
            Matching bookmarks sorted by creation time, descending.
        """
        required_tags = tags or []
        term = (query or "").lower()

        bookmarks = await self.repository.list_by_user(user_id)
        filtered = [b for b in bookmarks if matches_filters(b, required_tags, term)]
        filtered.sort(key=recency, reverse=True)

        logger.debug(
            "Listed bookmarks",
            extra={"user_id": user_id, "total": len(bookmarks), "matched": len(filtered)},
        )
        return filtered

    async def upsert(self, user_id: str, data: BookmarkUpsert) -> Bookmark:
        """Create a bookmark or overwrite the one with the same URL.

        Both timestamps are set to now, including on overwrite.

        Raises:
            ValidationError: If imageUrl is missing or empty.
        """
        image_url = _require_image_url(data.image_url)
        now = utc_now_iso()
        bookmark = Bookmark(
            id=bookmark_id_from_url(image_url),
            image_url=image_url,
            tags=data.tags,
            created_at=now,
            updated_at=now,
        )
        await self.repository.save(user_id, bookmark)

        logger.info("Bookmark saved", extra={"user_id": user_id, "bookmark_id": bookmark.id})
        return bookmark

    async def delete(self, user_id: str, data: BookmarkDelete) -> None:
        """Delete the bookmark for a URL. Unknown URLs succeed silently.

        Raises:
            ValidationError: If imageUrl is missing or empty.
        """
        image_url = _require_image_url(data.image_url)
        bookmark_id = bookmark_id_from_url(image_url)
        await self.repository.delete(user_id, bookmark_id)

        logger.info("Bookmark deleted", extra={"user_id": user_id, "bookmark_id": bookmark_id})

    async def update_tags(self, user_id: str, data: TagsUpdate) -> Bookmark:
        """Replace the tags of an existing bookmark.

        The image URL and creation time are left untouched.

        Raises:
            ValidationError: If imageUrl is missing or empty.
            NotFoundError: If no bookmark exists for the URL.
        """
        image_url = _require_image_url(data.image_url)
        bookmark_id = bookmark_id_from_url(image_url)

        bookmark = await self.repository.get(user_id, bookmark_id)
        if bookmark is None:
            raise NotFoundError("bookmark", code=ErrorCode.BOOKMARK_NOT_FOUND)

        bookmark.tags = data.tags
        bookmark.updated_at = utc_now_iso()
        await self.repository.save(user_id, bookmark)

        logger.info("Bookmark tags updated", extra={"user_id": user_id, "bookmark_id": bookmark_id})
        return bookmark
