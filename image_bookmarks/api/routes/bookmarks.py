"""Bookmark endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query

from image_bookmarks.api.deps import BookmarkServiceDep, CurrentUserID
from image_bookmarks.schemas.base import OkResponse
from image_bookmarks.schemas.bookmark import (
    BookmarkDelete,
    BookmarkItemResponse,
    BookmarkListResponse,
    BookmarkUpsert,
)
from image_bookmarks.utils.tags import parse_tag_filter

router = APIRouter()


@router.get(
    "",
    response_model=BookmarkListResponse,
    response_model_exclude_none=True,
    summary="List bookmarks",
    description="Get the current user's bookmarks, newest first, with optional tag and text filters.",
)
async def list_bookmarks(
    service: BookmarkServiceDep,
    user_id: CurrentUserID,
    tags: Annotated[
        str | None,
        Query(description="Comma-separated tags that must all be present"),
    ] = None,
    q: Annotated[
        str | None,
        Query(description="Case-insensitive search in image URL and tags"),
    ] = None,
) -> BookmarkListResponse:
    """List bookmarks with optional filtering.

    - **tags**: e.g. `cats,funny`; a bookmark must carry every tag
    - **q**: substring matched against the image URL or any tag
    """
    items = await service.list(user_id, tags=parse_tag_filter(tags), query=q)
    return BookmarkListResponse(items=items)


@router.post(
    "",
    response_model=BookmarkItemResponse,
    summary="Save bookmark",
    description="Create a bookmark, or overwrite the existing one for the same image URL.",
)
async def upsert_bookmark(
    service: BookmarkServiceDep,
    user_id: CurrentUserID,
    data: BookmarkUpsert | None = None,
) -> BookmarkItemResponse:
    """Save a bookmark.

    - **imageUrl**: The image URL (required)
    - **tags**: Tags to assign; normalized to trimmed, lowercase, unique values
    """
    bookmark = await service.upsert(user_id, data or BookmarkUpsert())
    return BookmarkItemResponse(item=bookmark)


@router.delete(
    "",
    response_model=OkResponse,
    summary="Delete bookmark",
    description="Delete the bookmark for an image URL. Succeeds even if it does not exist.",
)
async def delete_bookmark(
    service: BookmarkServiceDep,
    user_id: CurrentUserID,
    data: BookmarkDelete | None = None,
) -> OkResponse:
    """Delete a bookmark.

    This action is permanent and cannot be undone.
    """
    await service.delete(user_id, data or BookmarkDelete())
    return OkResponse()
