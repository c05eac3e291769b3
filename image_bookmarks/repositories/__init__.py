"""Repository package for data access layer."""

from image_bookmarks.repositories.base import BaseRepository
from image_bookmarks.repositories.bookmark import (
    BookmarkRepository,
    bookmark_key,
    bookmark_prefix,
)
from image_bookmarks.repositories.user import UserRepository, user_meta_key

__all__ = [
    "BaseRepository",
    "BookmarkRepository",
    "UserRepository",
    "bookmark_key",
    "bookmark_prefix",
    "user_meta_key",
]
