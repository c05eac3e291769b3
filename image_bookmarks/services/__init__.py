"""Services package for business logic."""

from image_bookmarks.services.bookmark import BookmarkService
from image_bookmarks.services.user import UserService

__all__ = [
    "BookmarkService",
    "UserService",
]
