"""User identity resolution.

A user is an opaque RFC 4122 UUID. Visiting ``/{uuid}`` stores it in a
cookie; API requests are attributed to whichever user the configured
resolver returns.
"""

import re
from abc import ABC, abstractmethod

from fastapi import Request, Response

USER_ID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[1-5][0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}$"
)


def is_user_id(value: str | None) -> bool:
    """Check whether a value is a well-formed user id."""
    return bool(value) and USER_ID_PATTERN.fullmatch(value) is not None  # type: ignore[arg-type]


class IdentityResolver(ABC):
    """Maps an incoming request to a user id."""

    @abstractmethod
    def resolve(self, request: Request) -> str | None:
        """Return the requesting user's id, or None if it cannot be determined."""

    @abstractmethod
    def remember(self, response: Response, user_id: str) -> None:
        """Attach whatever later requests need to resolve ``user_id``."""


class CookieIdentityResolver(IdentityResolver):
    """Reads the user id from a cookie set by the user's page."""

    def __init__(self, cookie_name: str = "user_id") -> None:
        self.cookie_name = cookie_name

    def resolve(self, request: Request) -> str | None:
        value = request.cookies.get(self.cookie_name)
        if not is_user_id(value):
            return None
        return value

    def remember(self, response: Response, user_id: str) -> None:
        """Set the identity cookie on a response."""
        response.set_cookie(
            key=self.cookie_name,
            value=user_id,
            path="/",
            httponly=True,
            samesite="lax",
        )
