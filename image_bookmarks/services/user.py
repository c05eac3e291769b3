"""User service for business logic."""

from image_bookmarks.repositories.user import UserRepository
from image_bookmarks.schemas.user import UserMeta
from image_bookmarks.store.base import KeyValueStore
from image_bookmarks.utils.logging import get_logger
from image_bookmarks.utils.timestamps import utc_now_iso

logger = get_logger(__name__)


class UserService:
    """Provisions user records on first visit."""

    def __init__(self, store: KeyValueStore) -> None:
        self.repository = UserRepository(store)

    async def ensure_user(self, user_id: str) -> bool:
        """Create the user's record unless one exists.

        Args:
            user_id: Validated user id.

        Returns:
            True if a record was created, False if it already existed.
        """
        if await self.repository.exists(user_id):
            return False

        await self.repository.save(UserMeta(id=user_id, created_at=utc_now_iso()))
        logger.info("User provisioned", extra={"user_id": user_id})
        return True
