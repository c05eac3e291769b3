"""Utility functions package."""

from image_bookmarks.utils.hashing import bookmark_id_from_url
from image_bookmarks.utils.logging import get_logger, request_id_var, setup_logging
from image_bookmarks.utils.tags import normalize_tags, parse_tag_filter
from image_bookmarks.utils.timestamps import EPOCH, parse_timestamp, utc_now_iso

__all__ = [
    "EPOCH",
    "bookmark_id_from_url",
    "get_logger",
    "normalize_tags",
    "parse_tag_filter",
    "parse_timestamp",
    "request_id_var",
    "setup_logging",
    "utc_now_iso",
]
