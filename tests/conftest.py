"""Pytest configuration and fixtures."""

import json
from collections.abc import AsyncGenerator, Awaitable, Callable, Iterator

import pytest
from httpx import ASGITransport, AsyncClient

from image_bookmarks.api.deps import get_store
from image_bookmarks.main import app
from image_bookmarks.repositories.bookmark import bookmark_key
from image_bookmarks.store.memory_store import MemoryStore
from image_bookmarks.utils.hashing import bookmark_id_from_url

# Test user constants
TEST_USER_ID = "3f2504e0-4f89-41d3-9a0c-0305e82c3301"
OTHER_USER_ID = "9b2c1d4e-5f60-4a7b-8c9d-0e1f2a3b4c5d"


@pytest.fixture
def user_id() -> str:
    """Id of the user the default client acts as."""
    return TEST_USER_ID


@pytest.fixture
def other_user_id() -> str:
    """Id of a second, unrelated user."""
    return OTHER_USER_ID


@pytest.fixture
def store() -> MemoryStore:
    """Fresh in-memory store for each test."""
    return MemoryStore()


@pytest.fixture(autouse=True)
def override_store(store: MemoryStore) -> Iterator[None]:
    """Route every request to the test store."""
    app.dependency_overrides[get_store] = lambda: store
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def make_client() -> Callable[..., AsyncClient]:
    """Factory for test clients.

    The client sends the identity cookie for ``user_id`` as a header, so
    it does not depend on cookie jar domain matching.
    """

    def factory(
        user_id: str | None = TEST_USER_ID,
        *,
        raise_app_exceptions: bool = True,
    ) -> AsyncClient:
        headers = {"Cookie": f"user_id={user_id}"} if user_id else None
        return AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions),
            base_url="http://test",
            headers=headers,
        )

    return factory


@pytest.fixture
async def client(make_client: Callable[..., AsyncClient]) -> AsyncGenerator[AsyncClient, None]:
    """Client identified as the test user."""
    async with make_client() as ac:
        yield ac


@pytest.fixture
async def anonymous_client(
    make_client: Callable[..., AsyncClient],
) -> AsyncGenerator[AsyncClient, None]:
    """Client without an identity cookie."""
    async with make_client(None) as ac:
        yield ac


@pytest.fixture
def put_bookmark(store: MemoryStore) -> Callable[..., Awaitable[str]]:
    """Write a bookmark record straight into the store.

    Returns the bookmark id.
    """

    async def _put(
        image_url: str,
        *,
        tags: list[str] | None = None,
        created_at: str | None = None,
        updated_at: str | None = None,
        user_id: str = TEST_USER_ID,
    ) -> str:
        bookmark_id = bookmark_id_from_url(image_url)
        record: dict[str, object] = {"id": bookmark_id, "imageUrl": image_url, "tags": tags or []}
        if created_at is not None:
            record["createdAt"] = created_at
        if updated_at is not None:
            record["updatedAt"] = updated_at
        await store.put(bookmark_key(user_id, bookmark_id), json.dumps(record))
        return bookmark_id

    return _put
