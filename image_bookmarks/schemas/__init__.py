"""Pydantic schemas package."""

from image_bookmarks.schemas.base import BaseSchema, ErrorBody, OkResponse
from image_bookmarks.schemas.bookmark import (
    Bookmark,
    BookmarkDelete,
    BookmarkItemResponse,
    BookmarkListResponse,
    BookmarkUpsert,
    TagsUpdate,
)
from image_bookmarks.schemas.user import UserMeta

__all__ = [
    "BaseSchema",
    "Bookmark",
    "BookmarkDelete",
    "BookmarkItemResponse",
    "BookmarkListResponse",
    "BookmarkUpsert",
    "ErrorBody",
    "OkResponse",
    "TagsUpdate",
    "UserMeta",
]
