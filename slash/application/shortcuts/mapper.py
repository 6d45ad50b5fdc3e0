"""
Conversions between stored shortcuts and application DTOs.
"""

from slash.application.shortcuts.dtos import OpenGraphMetadataData, ShortcutResult
from slash.domain.shortcuts.entities import OpenGraphMetadata, Shortcut, Visibility
from slash.domain.shortcuts.errors import InvalidArgumentError


def to_shortcut_result(shortcut: Shortcut) -> ShortcutResult:
    """Map a stored shortcut to its client-facing representation.

    Enumerations are re-encoded as their names and ``og_metadata`` is
    always emitted, empty when the record has none.
    """
    og = shortcut.og_metadata or OpenGraphMetadata()
    return ShortcutResult(
        id=shortcut.id,
        creator_id=shortcut.creator_id,
        created_ts=shortcut.created_ts,
        updated_ts=shortcut.updated_ts,
        row_status=shortcut.row_status.value,
        name=shortcut.name,
        link=shortcut.link,
        title=shortcut.title,
        tags=list(shortcut.tags),
        description=shortcut.description,
        visibility=shortcut.visibility.value,
        og_metadata=OpenGraphMetadataData(
            title=og.title,
            description=og.description,
            image=og.image,
        ),
    )


def to_og_metadata(data: OpenGraphMetadataData) -> OpenGraphMetadata:
    """Map client preview metadata to the stored value object."""
    return OpenGraphMetadata(
        title=data.title,
        description=data.description,
        image=data.image,
    )


def parse_visibility(value: str) -> Visibility:
    """Decode a visibility name sent by a client.

    Raises:
        InvalidArgumentError: If the name is not a known visibility.
    """
    try:
        return Visibility(value)
    except ValueError as exc:
        raise InvalidArgumentError(f"unknown visibility {value!r}") from exc
