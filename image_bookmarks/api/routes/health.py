"""Health check and system endpoints."""

from fastapi import APIRouter

from image_bookmarks import __version__
from image_bookmarks.config import settings

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint for container orchestration."""
    return {"status": "healthy"}


@router.get("/version")
async def get_version() -> dict[str, str]:
    """Get version information.

    Returns:
        Version information including the environment.
    """
    return {
        "version": __version__,
        "environment": settings.environment,
    }
