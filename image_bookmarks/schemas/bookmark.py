"""Bookmark schemas for stored records and request/response validation."""

from typing import Any, Literal

from pydantic import Field, field_validator

from image_bookmarks.schemas.base import BaseSchema
from image_bookmarks.utils.tags import normalize_tags


class Bookmark(BaseSchema):
    """A bookmarked image as stored and returned by the API.

    ``id`` is the hex SHA-256 of ``image_url``. Timestamps are kept as the
    ISO-8601 strings that were stored.
    """

    id: str
    image_url: str
    tags: list[str] = Field(default_factory=list)
    created_at: str | None = None
    updated_at: str | None = None


class _TaggedRequest(BaseSchema):
    """Request body carrying an image URL and a tag list."""

    image_url: str | None = Field(
        default=None,
        description="Image URL identifying the bookmark",
        examples=["https://example.com/cat.png"],
    )
    tags: list[str] = Field(
        default_factory=list,
        description="Tags; trimmed, lowercased and deduplicated",
        examples=[["cats", "funny"]],
    )

    @field_validator("tags", mode="before")
    @classmethod
    def validate_tags(cls, v: Any) -> list[str]:
        """Normalize tags; non-list values become an empty list."""
        return normalize_tags(v)


class BookmarkUpsert(_TaggedRequest):
    """Schema for creating or overwriting a bookmark."""


class TagsUpdate(_TaggedRequest):
    """Schema for replacing the tags of an existing bookmark."""


class BookmarkDelete(BaseSchema):
    """Schema for deleting a bookmark."""

    image_url: str | None = Field(
        default=None,
        description="Image URL identifying the bookmark",
    )


class BookmarkListResponse(BaseSchema):
    """Filtered bookmark list."""

    items: list[Bookmark]


class BookmarkItemResponse(BaseSchema):
    """Mutation result carrying the written bookmark."""

    ok: Literal[True] = True
    item: Bookmark
