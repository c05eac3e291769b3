"""FastAPI application factory and configuration."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from image_bookmarks import __version__
from image_bookmarks.api.routes.router import api_router, site_router
from image_bookmarks.config import Settings, settings
from image_bookmarks.core.exceptions import register_exception_handlers
from image_bookmarks.core.identity import CookieIdentityResolver
from image_bookmarks.core.middleware import RequestLoggingMiddleware
from image_bookmarks.store import create_store
from image_bookmarks.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Closes the key-value store on shutdown.
    """
    app_settings: Settings = app.state.settings
    logger.info(
        "Starting %s v%s",
        app_settings.app_name,
        __version__,
        extra={"store_backend": app_settings.store_backend, "debug": app_settings.debug},
    )
    yield
    logger.info("Shutting down")
    await app.state.store.close()


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use; defaults to the environment-loaded settings.

    Returns:
        FastAPI: Configured application instance.
    """
    app_settings = app_settings or settings

    setup_logging(
        app_settings.log_level,
        app_settings.log_format,
        environment=app_settings.environment,
    )

    app = FastAPI(
        title=app_settings.app_name,
        description="Save, tag and find image URLs, scoped per user.",
        version=__version__,
        docs_url="/docs" if not app_settings.is_production else None,
        redoc_url="/redoc" if not app_settings.is_production else None,
        openapi_url="/openapi.json" if not app_settings.is_production else None,
        redirect_slashes=False,  # /{uuid}/ gets an explicit 301 instead
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.store = create_store(app_settings)
    app.state.identity_resolver = CookieIdentityResolver(app_settings.user_cookie_name)

    # Register exception handlers
    register_exception_handlers(app)

    # Add middleware
    app.add_middleware(RequestLoggingMiddleware)

    # Include routes; API first so /api/... never reaches the page routes
    app.include_router(api_router, prefix="/api")
    app.include_router(site_router)

    return app


# Application instance
app = create_app()
