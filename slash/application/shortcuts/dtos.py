"""
Data Transfer Objects for the shortcuts application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior. Every command and
query carries the authenticated ``caller_id`` explicitly.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OpenGraphMetadataData:
    """Link preview metadata as seen by API clients."""

    title: str = ""
    description: str = ""
    image: str = ""


@dataclass(frozen=True)
class ShortcutResult:
    """Output DTO for a shortcut.

    Attributes:
        id: Store-assigned identifier.
        creator_id: Owning user.
        created_ts: Creation time, unix seconds.
        updated_ts: Last update time, unix seconds.
        row_status: Lifecycle flag name (NORMAL or ARCHIVED).
        name: Unique lookup key.
        link: Target URL.
        title: Display title.
        tags: Ordered tag list.
        description: Free-form description.
        visibility: Visibility name (PRIVATE, WORKSPACE or PUBLIC).
        og_metadata: Preview metadata, always present.
    """

    id: int
    creator_id: int
    created_ts: int
    updated_ts: int
    row_status: str
    name: str
    link: str
    title: str
    tags: list[str]
    description: str
    visibility: str
    og_metadata: OpenGraphMetadataData


@dataclass(frozen=True)
class ShortcutFields:
    """Client-supplied shortcut fields shared by create and update.

    ``og_metadata`` is None when the client sent no metadata object;
    ``visibility`` is None when an update request leaves it out.
    """

    name: str
    link: str = ""
    title: str = ""
    description: str = ""
    tags: list[str] = field(default_factory=list)
    visibility: str | None = "PRIVATE"
    og_metadata: OpenGraphMetadataData | None = None


@dataclass(frozen=True)
class ListShortcutsQuery:
    """Input DTO for listing the shortcuts visible to a caller."""

    caller_id: int


@dataclass(frozen=True)
class GetShortcutQuery:
    """Input DTO for fetching one shortcut by name."""

    caller_id: int
    name: str


@dataclass(frozen=True)
class CreateShortcutCommand:
    """Input DTO for creating a shortcut owned by the caller."""

    caller_id: int
    shortcut: ShortcutFields


@dataclass(frozen=True)
class UpdateShortcutCommand:
    """Input DTO for a partial update.

    Attributes:
        caller_id: Authenticated caller.
        shortcut: New values; ``shortcut.name`` selects the target.
        update_mask: Field paths to apply. Paths outside the
            recognized set are ignored.
    """

    caller_id: int
    shortcut: ShortcutFields
    update_mask: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DeleteShortcutCommand:
    """Input DTO for deleting a shortcut by name."""

    caller_id: int
    name: str
