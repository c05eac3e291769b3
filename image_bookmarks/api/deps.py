"""API dependencies for dependency injection."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request

from image_bookmarks.core.exceptions import MissingIdentityError
from image_bookmarks.core.identity import IdentityResolver
from image_bookmarks.services.bookmark import BookmarkService
from image_bookmarks.services.user import UserService
from image_bookmarks.store.base import KeyValueStore


def get_store(request: Request) -> KeyValueStore:
    """Get the key-value store created with the application."""
    return request.app.state.store


def get_identity_resolver(request: Request) -> IdentityResolver:
    """Get the identity resolver configured on the application."""
    return request.app.state.identity_resolver


# Type aliases for infrastructure dependencies
StoreDep = Annotated[KeyValueStore, Depends(get_store)]
IdentityResolverDep = Annotated[IdentityResolver, Depends(get_identity_resolver)]


async def get_bookmark_service(
    request: Request,
    store: StoreDep,
) -> AsyncGenerator[BookmarkService, None]:
    """Get bookmark service instance.

    Args:
        request: Current request, for the application settings.
        store: Key-value store.

    Yields:
        BookmarkService instance.
    """
    yield BookmarkService(store, list_limit=request.app.state.settings.store_list_limit)


async def get_user_service(
    store: StoreDep,
) -> AsyncGenerator[UserService, None]:
    """Get user service instance.

    Args:
        store: Key-value store.

    Yields:
        UserService instance.
    """
    yield UserService(store)


async def get_current_user_id(
    request: Request,
    resolver: IdentityResolverDep,
) -> str:
    """Resolve the requesting user's id.

    Runs before every ``/api`` route, including unknown ones.

    Raises:
        MissingIdentityError: If the resolver cannot determine a user id.
    """
    user_id = resolver.resolve(request)
    if user_id is None:
        raise MissingIdentityError()
    return user_id


# Type aliases for dependency injection
BookmarkServiceDep = Annotated[BookmarkService, Depends(get_bookmark_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
CurrentUserID = Annotated[str, Depends(get_current_user_id)]
