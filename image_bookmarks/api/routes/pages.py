"""HTML pages and client assets."""

from fastapi import APIRouter, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from image_bookmarks.api.deps import IdentityResolverDep, UserServiceDep
from image_bookmarks.api.routes import ALL_METHODS
from image_bookmarks.core.identity import is_user_id
from image_bookmarks.web import read_asset, render_home_page, render_landing_page

router = APIRouter(include_in_schema=False)

NO_STORE = {"Cache-Control": "no-store"}


def _asset_response(name: str, media_type: str) -> Response:
    return Response(content=read_asset(name), media_type=media_type, headers=NO_STORE)


@router.get("/")
async def landing_page() -> HTMLResponse:
    """Explain how to open a personal bookmark page."""
    return HTMLResponse(render_landing_page())


@router.get("/app.js")
async def app_js() -> Response:
    return _asset_response("app.js", "application/javascript; charset=utf-8")


@router.get("/styles.css")
async def styles_css() -> Response:
    return _asset_response("styles.css", "text/css; charset=utf-8")


@router.api_route("/{user_id}/", methods=ALL_METHODS)
async def redirect_user_page(user_id: str) -> RedirectResponse:
    """Redirect ``/{uuid}/`` to the canonical ``/{uuid}``, whatever the method."""
    if not is_user_id(user_id):
        raise StarletteHTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return RedirectResponse(url=f"/{user_id}", status_code=status.HTTP_301_MOVED_PERMANENTLY)


@router.get("/{user_id}")
async def user_page(
    user_id: str,
    users: UserServiceDep,
    resolver: IdentityResolverDep,
) -> HTMLResponse:
    """Serve the app shell for a user, creating the user on first visit.

    Also remembers the user id so that API calls from the page resolve to it.
    """
    if not is_user_id(user_id):
        raise StarletteHTTPException(status_code=status.HTTP_404_NOT_FOUND)

    await users.ensure_user(user_id)

    response = HTMLResponse(render_home_page(user_id))
    resolver.remember(response, user_id)
    return response
