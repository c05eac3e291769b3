"""Bookmark id derivation."""

import hashlib


def bookmark_id_from_url(image_url: str) -> str:
    """Return the hex SHA-256 digest of the UTF-8 encoded image URL.

    The digest is the bookmark's storage id, so one URL maps to exactly one
    bookmark per user.
    """
    return hashlib.sha256(image_url.encode("utf-8")).hexdigest()
