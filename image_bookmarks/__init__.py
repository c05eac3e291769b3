"""Image Bookmarks: per-user image bookmarking service."""

__version__ = "0.1.0"
