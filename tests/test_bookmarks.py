"""Tests for bookmark endpoints."""

import re

import pytest
from httpx import AsyncClient

from image_bookmarks.main import app
from image_bookmarks.store.memory_store import MemoryStore
from image_bookmarks.utils.hashing import bookmark_id_from_url

TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")

CAT_URL = "https://example.com/cat.png"
DOG_URL = "https://example.com/dog.jpg"


@pytest.mark.asyncio
async def test_list_bookmarks_empty(client: AsyncClient) -> None:
    """Test listing bookmarks for a new user."""
    response = await client.get("/api/bookmarks")

    assert response.status_code == 200
    assert response.json() == {"items": []}


@pytest.mark.asyncio
async def test_list_bookmarks_newest_first(client: AsyncClient, put_bookmark) -> None:
    """Test bookmarks are sorted by createdAt, newest first."""
    await put_bookmark("https://a/old.png", created_at="2024-01-01T00:00:00.000Z")
    await put_bookmark("https://a/new.png", created_at="2024-03-01T00:00:00.000Z")
    await put_bookmark("https://a/mid.png", created_at="2024-02-01T00:00:00.000Z")

    response = await client.get("/api/bookmarks")

    urls = [item["imageUrl"] for item in response.json()["items"]]
    assert urls == ["https://a/new.png", "https://a/mid.png", "https://a/old.png"]


@pytest.mark.asyncio
async def test_list_bookmarks_sort_fallback(client: AsyncClient, put_bookmark) -> None:
    """Test records without createdAt sort by updatedAt, then last."""
    await put_bookmark("https://a/none.png")
    await put_bookmark("https://a/updated.png", updated_at="2024-05-01T00:00:00.000Z")
    await put_bookmark("https://a/created.png", created_at="2024-04-01T00:00:00.000Z")

    response = await client.get("/api/bookmarks")

    urls = [item["imageUrl"] for item in response.json()["items"]]
    assert urls == ["https://a/updated.png", "https://a/created.png", "https://a/none.png"]


@pytest.mark.asyncio
async def test_filter_by_tags_requires_all(client: AsyncClient, put_bookmark) -> None:
    """Test every requested tag must be present."""
    await put_bookmark("https://a/1.png", tags=["cats", "funny"])
    await put_bookmark("https://a/2.png", tags=["cats"])
    await put_bookmark("https://a/3.png", tags=["funny"])

    response = await client.get("/api/bookmarks", params={"tags": "cats, funny,"})

    urls = [item["imageUrl"] for item in response.json()["items"]]
    assert urls == ["https://a/1.png"]


@pytest.mark.asyncio
async def test_filter_by_tags_is_exact(client: AsyncClient, put_bookmark) -> None:
    """Test tag filter values are compared as given."""
    await put_bookmark("https://a/1.png", tags=["cats"])

    response = await client.get("/api/bookmarks", params={"tags": "Cats"})

    assert response.json()["items"] == []


@pytest.mark.asyncio
async def test_search_matches_url_or_tag(client: AsyncClient, put_bookmark) -> None:
    """Test q matches the URL or any tag, ignoring case."""
    await put_bookmark("https://img.example/Sunset.png", tags=["beach"])
    await put_bookmark("https://img.example/x.png", tags=["sunsets"])
    await put_bookmark("https://img.example/y.png", tags=["forest"])

    response = await client.get("/api/bookmarks", params={"q": "SUNSET"})

    urls = {item["imageUrl"] for item in response.json()["items"]}
    assert urls == {"https://img.example/Sunset.png", "https://img.example/x.png"}


@pytest.mark.asyncio
async def test_search_and_tags_combine(client: AsyncClient, put_bookmark) -> None:
    """Test tag filter and search must both match."""
    await put_bookmark("https://a/cat-1.png", tags=["cats"])
    await put_bookmark("https://a/cat-2.png", tags=["dogs"])

    response = await client.get("/api/bookmarks", params={"q": "cat", "tags": "dogs"})

    urls = [item["imageUrl"] for item in response.json()["items"]]
    assert urls == ["https://a/cat-2.png"]


@pytest.mark.asyncio
async def test_list_only_own_bookmarks(
    make_client, put_bookmark, user_id: str, other_user_id: str
) -> None:
    """Test users never see each other's bookmarks."""
    await put_bookmark(CAT_URL, user_id=user_id)
    await put_bookmark(DOG_URL, user_id=other_user_id)

    async with make_client(other_user_id) as other:
        response = await other.get("/api/bookmarks")

    urls = [item["imageUrl"] for item in response.json()["items"]]
    assert urls == [DOG_URL]


@pytest.mark.asyncio
async def test_list_spans_store_pages(client: AsyncClient, put_bookmark) -> None:
    """Test listings cover more keys than one store page."""
    original = app.state.settings.store_list_limit
    app.state.settings.store_list_limit = 2
    try:
        for i in range(5):
            await put_bookmark(f"https://a/{i}.png")
        response = await client.get("/api/bookmarks")
    finally:
        app.state.settings.store_list_limit = original

    assert len(response.json()["items"]) == 5


@pytest.mark.asyncio
async def test_create_bookmark(client: AsyncClient, store: MemoryStore, user_id: str) -> None:
    """Test creating a bookmark returns the stored record."""
    response = await client.post(
        "/api/bookmarks",
        json={"imageUrl": CAT_URL, "tags": [" Cats", "cats", "", "Funny "]},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    item = data["item"]
    assert item["id"] == bookmark_id_from_url(CAT_URL)
    assert item["imageUrl"] == CAT_URL
    assert item["tags"] == ["cats", "funny"]
    assert TIMESTAMP_RE.match(item["createdAt"])
    assert item["createdAt"] == item["updatedAt"]

    assert await store.get(f"user:{user_id}:bookmark:{item['id']}") is not None


@pytest.mark.asyncio
async def test_create_bookmark_tags_default_empty(client: AsyncClient) -> None:
    """Test missing or non-list tags become an empty list."""
    response = await client.post("/api/bookmarks", json={"imageUrl": CAT_URL, "tags": "cats"})
    assert response.json()["item"]["tags"] == []

    response = await client.post("/api/bookmarks", json={"imageUrl": DOG_URL})
    assert response.json()["item"]["tags"] == []


@pytest.mark.asyncio
async def test_upsert_overwrites_same_url(client: AsyncClient) -> None:
    """Test saving the same URL twice keeps one record with the latest tags."""
    await client.post("/api/bookmarks", json={"imageUrl": CAT_URL, "tags": ["a"]})
    second = await client.post("/api/bookmarks", json={"imageUrl": CAT_URL, "tags": ["b"]})

    response = await client.get("/api/bookmarks")

    items = response.json()["items"]
    assert len(items) == 1
    assert items[0]["tags"] == ["b"]
    assert items[0]["createdAt"] == second.json()["item"]["createdAt"]


@pytest.mark.asyncio
async def test_create_bookmark_missing_url(client: AsyncClient) -> None:
    """Test imageUrl is required."""
    response = await client.post("/api/bookmarks", json={"tags": ["a"]})

    assert response.status_code == 400
    assert response.json() == {"error": "imageUrl is required"}


@pytest.mark.asyncio
async def test_create_bookmark_empty_url(client: AsyncClient) -> None:
    """Test an empty imageUrl is rejected."""
    response = await client.post("/api/bookmarks", json={"imageUrl": ""})

    assert response.status_code == 400
    assert response.json()["error"] == "imageUrl is required"


@pytest.mark.asyncio
async def test_create_bookmark_invalid_url_type(client: AsyncClient) -> None:
    """Test a non-string imageUrl is an invalid body."""
    response = await client.post("/api/bookmarks", json={"imageUrl": 42})

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "Invalid request body"
    assert "imageUrl" in data["detail"]


@pytest.mark.asyncio
async def test_create_bookmark_malformed_json(client: AsyncClient) -> None:
    """Test a body that is not JSON is an invalid body."""
    response = await client.post(
        "/api/bookmarks",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"


@pytest.mark.asyncio
async def test_delete_bookmark(client: AsyncClient, put_bookmark) -> None:
    """Test deleted bookmarks disappear from the list."""
    await put_bookmark(CAT_URL)
    await put_bookmark(DOG_URL)

    response = await client.request("DELETE", "/api/bookmarks", json={"imageUrl": CAT_URL})

    assert response.status_code == 200
    assert response.json() == {"ok": True}

    listing = await client.get("/api/bookmarks")
    assert [item["imageUrl"] for item in listing.json()["items"]] == [DOG_URL]


@pytest.mark.asyncio
async def test_delete_unknown_bookmark(client: AsyncClient) -> None:
    """Test deleting a URL that was never saved still succeeds."""
    response = await client.request(
        "DELETE", "/api/bookmarks", json={"imageUrl": "https://never/saved.png"}
    )

    assert response.status_code == 200
    assert response.json() == {"ok": True}


@pytest.mark.asyncio
async def test_delete_bookmark_missing_url(client: AsyncClient) -> None:
    """Test imageUrl is required for deletion."""
    response = await client.request("DELETE", "/api/bookmarks", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "imageUrl is required"}


@pytest.mark.asyncio
async def test_delete_only_own_bookmark(
    make_client, put_bookmark, store: MemoryStore, user_id: str, other_user_id: str
) -> None:
    """Test deleting affects only the requesting user's bookmark."""
    await put_bookmark(CAT_URL, user_id=user_id)
    await put_bookmark(CAT_URL, user_id=other_user_id)

    async with make_client(other_user_id) as other:
        await other.request("DELETE", "/api/bookmarks", json={"imageUrl": CAT_URL})

    bookmark_id = bookmark_id_from_url(CAT_URL)
    assert await store.get(f"user:{user_id}:bookmark:{bookmark_id}") is not None
    assert await store.get(f"user:{other_user_id}:bookmark:{bookmark_id}") is None


@pytest.mark.asyncio
async def test_bookmark_workflow(make_client, user_id: str) -> None:
    """Test visiting the user page, then saving, filtering, retagging and deleting."""
    async with make_client(None) as ac:
        page = await ac.get(f"/{user_id}")
        assert page.status_code == 200
        assert page.cookies.get("user_id") == user_id

    async with make_client(user_id) as ac:
        first = await ac.post(
            "/api/bookmarks", json={"imageUrl": CAT_URL, "tags": ["Cats", "cats", " Funny "]}
        )
        assert first.json()["item"]["tags"] == ["cats", "funny"]

        await ac.post("/api/bookmarks", json={"imageUrl": DOG_URL, "tags": ["dogs"]})

        funny = await ac.get("/api/bookmarks", params={"tags": "funny"})
        assert [i["imageUrl"] for i in funny.json()["items"]] == [CAT_URL]

        retag = await ac.put("/api/tags", json={"imageUrl": CAT_URL, "tags": ["sleepy"]})
        assert retag.json()["item"]["tags"] == ["sleepy"]

        await ac.request("DELETE", "/api/bookmarks", json={"imageUrl": DOG_URL})

        remaining = await ac.get("/api/bookmarks")
        items = remaining.json()["items"]
        assert [i["imageUrl"] for i in items] == [CAT_URL]
        assert items[0]["tags"] == ["sleepy"]


@pytest.mark.asyncio
async def test_list_omits_missing_timestamps(client: AsyncClient, put_bookmark) -> None:
    """Test stored records without timestamps are listed without them."""
    await put_bookmark(CAT_URL, tags=["cats"])

    response = await client.get("/api/bookmarks")

    item = response.json()["items"][0]
    assert item == {"id": bookmark_id_from_url(CAT_URL), "imageUrl": CAT_URL, "tags": ["cats"]}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("POST", "/api/bookmarks"),
        ("DELETE", "/api/bookmarks"),
        ("PUT", "/api/tags"),
    ],
)
@pytest.mark.parametrize("body", [b"null", b""])
async def test_null_or_empty_body_requires_url(
    client: AsyncClient, method: str, path: str, body: bytes
) -> None:
    """Test a null or empty body is treated as a body without imageUrl."""
    response = await client.request(
        method, path, content=body, headers={"content-type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "imageUrl is required"}
