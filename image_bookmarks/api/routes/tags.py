"""Tag endpoints."""

from fastapi import APIRouter

from image_bookmarks.api.deps import BookmarkServiceDep, CurrentUserID
from image_bookmarks.schemas.bookmark import BookmarkItemResponse, TagsUpdate

router = APIRouter()


@router.put(
    "",
    response_model=BookmarkItemResponse,
    summary="Replace tags",
    description="Replace the tags of an existing bookmark, identified by its image URL.",
)
async def update_tags(
    service: BookmarkServiceDep,
    user_id: CurrentUserID,
    data: TagsUpdate | None = None,
) -> BookmarkItemResponse:
    """Replace a bookmark's tags.

    Returns 404 if no bookmark exists for the image URL.
    """
    bookmark = await service.update_tags(user_id, data or TagsUpdate())
    return BookmarkItemResponse(item=bookmark)
