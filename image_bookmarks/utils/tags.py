"""Tag normalization and tag filter parsing."""

from typing import Any


def normalize_tags(tags: Any) -> list[str]:
    """Normalize a client-supplied tag list.

    Entries are converted to strings, trimmed and lowercased. Empty entries
    and ``None`` are dropped, and duplicates are removed keeping the first
    occurrence. Anything other than a list normalizes to an empty list.

    Example:
        >>> normalize_tags([" A", "a", "B "])
        ['a', 'b']
    """
    if not isinstance(tags, list):
        return []

    normalized: list[str] = []
    seen: set[str] = set()
    for tag in tags:
        if tag is None:
            continue
        value = str(tag).strip()
        if not value:
            continue
        value = value.lower()
        if value not in seen:
            seen.add(value)
            normalized.append(value)
    return normalized


def parse_tag_filter(value: str | None) -> list[str]:
    """Split a comma-separated ``tags`` query parameter.

    Entries are trimmed and empty entries dropped. Case is kept as given:
    the filter compares against stored (already lowercase) tags exactly.
    """
    if not value:
        return []
    return [tag.strip() for tag in value.split(",") if tag.strip()]
