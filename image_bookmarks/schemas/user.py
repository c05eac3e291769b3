"""User schemas."""

from image_bookmarks.schemas.base import BaseSchema


class UserMeta(BaseSchema):
    """User record created on first visit to the user's page."""

    id: str
    created_at: str
