"""Core module exports."""

from image_bookmarks.core.exceptions import (
    AppException,
    ErrorCode,
    MissingIdentityError,
    NotFoundError,
    ValidationError,
)
from image_bookmarks.core.identity import (
    CookieIdentityResolver,
    IdentityResolver,
    is_user_id,
)

__all__ = [
    "AppException",
    "CookieIdentityResolver",
    "ErrorCode",
    "IdentityResolver",
    "MissingIdentityError",
    "NotFoundError",
    "ValidationError",
    "is_user_id",
]
