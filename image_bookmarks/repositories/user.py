"""User repository for key-value store operations."""

from image_bookmarks.repositories.base import BaseRepository
from image_bookmarks.schemas.user import UserMeta
from image_bookmarks.store.base import KeyValueStore


def user_meta_key(user_id: str) -> str:
    """Storage key of a user's metadata record."""
    return f"user:{user_id}:meta"


class UserRepository(BaseRepository[UserMeta]):
    """Repository for user metadata records."""

    def __init__(self, store: KeyValueStore) -> None:
        super().__init__(UserMeta, store)

    async def exists(self, user_id: str) -> bool:
        """Check whether a user record exists, without parsing it."""
        return bool(await self.store.get(user_meta_key(user_id)))

    async def save(self, user: UserMeta) -> UserMeta:
        """Write a user's metadata record."""
        return await self._save(user_meta_key(user.id), user)
