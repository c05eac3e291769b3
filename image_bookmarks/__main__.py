"""Entry point for running the application as a module."""

import uvicorn

from image_bookmarks.config import settings


def main() -> None:
    """Run the application server."""
    uvicorn.run(
        "image_bookmarks.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
