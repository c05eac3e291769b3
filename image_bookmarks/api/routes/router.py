"""Routers aggregating all endpoints."""

from fastapi import APIRouter, Depends

from image_bookmarks.api.deps import get_current_user_id
from image_bookmarks.api.routes import ALL_METHODS, bookmarks, health, pages, tags
from image_bookmarks.core.exceptions import NotFoundError


# Every /api route, known or not, resolves the user first
api_router = APIRouter(dependencies=[Depends(get_current_user_id)])

api_router.include_router(
    bookmarks.router,
    prefix="/bookmarks",
    tags=["Bookmarks"],
)

api_router.include_router(
    tags.router,
    prefix="/tags",
    tags=["Tags"],
)


@api_router.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
async def api_not_found(path: str) -> None:
    """Unknown API path or method."""
    raise NotFoundError()


# Non-API routes; health comes first so ``/{user_id}`` does not shadow it
site_router = APIRouter()

site_router.include_router(
    health.router,
    tags=["System"],
)

site_router.include_router(
    pages.router,
)
