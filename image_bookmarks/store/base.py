"""Abstract base class for key-value store backends."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

DEFAULT_LIST_LIMIT = 1000


@dataclass(frozen=True)
class ListResult:
    """One page of a prefix listing.

    Attributes:
        keys: Keys found on this page (may be empty even if more pages follow).
        cursor: Opaque cursor for the next page, or None when the listing is complete.
    """

    keys: list[str] = field(default_factory=list)
    cursor: str | None = None


class KeyValueStore(ABC):
    """Abstract interface for a string key-value store.

    Bookmark and user records are kept as JSON strings under namespaced keys.
    Implementations provide no transactions and no cross-key atomicity.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Get the value stored under a key.

        Args:
            key: Key to read.

        Returns:
            The stored value, or None if the key does not exist.
        """

    @abstractmethod
    async def put(self, key: str, value: str) -> None:
        """Store a value, replacing any existing one.

        Args:
            key: Key to write.
            value: Serialized value.
        """

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Delete a key. Deleting a missing key is a no-op.

        Args:
            key: Key to delete.
        """

    @abstractmethod
    async def list(
        self,
        prefix: str,
        cursor: str | None = None,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> ListResult:
        """List keys sharing a prefix, one page at a time.

        Args:
            prefix: Key prefix to match.
            cursor: Cursor returned by the previous page, None for the first page.
            limit: Maximum number of keys per page (a hint for some backends).

        Returns:
            ListResult with this page's keys and the next cursor.
        """

    async def close(self) -> None:
        """Release backend resources."""
