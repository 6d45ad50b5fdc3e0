"""
Tag codec.

Shortcuts carry tags as an ordered list, the store keeps them as a single
space-joined string. A tag containing a space cannot survive the round
trip: it comes back as two tags.
"""

from collections.abc import Iterable

TAG_SEPARATOR = " "


def join_tags(tags: Iterable[str]) -> str:
    """Encode a tag list into its storage form."""
    return TAG_SEPARATOR.join(tags)


def split_tags(tag: str | None) -> list[str]:
    """Decode the storage form into a tag list, dropping empty tokens."""
    if not tag:
        return []
    return [token for token in tag.split(TAG_SEPARATOR) if token]
