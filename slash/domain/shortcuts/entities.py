"""
Domain entities for the shortcuts bounded context.

Entities represent the storage-layer records the access rules operate on.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Visibility(Enum):
    """Access scope of a shortcut."""

    PRIVATE = "PRIVATE"
    WORKSPACE = "WORKSPACE"
    PUBLIC = "PUBLIC"


class RowStatus(Enum):
    """Lifecycle flag managed by the store."""

    NORMAL = "NORMAL"
    ARCHIVED = "ARCHIVED"


class Role(Enum):
    """Role of a user within the workspace."""

    ADMIN = "ADMIN"
    USER = "USER"


class ActivityType(Enum):
    """Kinds of audit activity recorded by the service."""

    SHORTCUT_CREATE = "shortcut.create"


class ActivityLevel(Enum):
    """Severity of an audit activity."""

    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


SHARED_VISIBILITIES = (Visibility.WORKSPACE, Visibility.PUBLIC)


@dataclass(frozen=True)
class OpenGraphMetadata:
    """Link preview metadata attached to a shortcut."""

    title: str = ""
    description: str = ""
    image: str = ""


@dataclass(frozen=True)
class Shortcut:
    """A named, owned link record.

    ``id``, ``created_ts``, ``updated_ts`` and ``row_status`` are assigned
    by the store; a record built for creation leaves them at their defaults.
    """

    creator_id: int
    name: str
    link: str
    title: str = ""
    description: str = ""
    tags: tuple[str, ...] = ()
    visibility: Visibility = Visibility.PRIVATE
    og_metadata: OpenGraphMetadata = field(default_factory=OpenGraphMetadata)
    id: int = 0
    created_ts: int = 0
    updated_ts: int = 0
    row_status: RowStatus = RowStatus.NORMAL


@dataclass(frozen=True)
class User:
    """A workspace member. Read-only for the shortcut access rules."""

    id: int
    role: Role = Role.USER
    nickname: str = ""
    email: str = ""


@dataclass(frozen=True)
class Activity:
    """Append-only audit record of a notable action."""

    creator_id: int
    type: ActivityType
    level: ActivityLevel
    payload: str
    id: int = 0
    created_ts: int = 0


@dataclass(frozen=True)
class ShortcutFilter:
    """Query filter understood by the store.

    Unset fields do not constrain the result.
    """

    name: Optional[str] = None
    creator_id: Optional[int] = None
    visibilities: Optional[tuple[Visibility, ...]] = None


@dataclass(frozen=True)
class ShortcutPatch:
    """Sparse update instruction for a single shortcut.

    ``None`` means "leave this field unchanged". ``tag`` carries the
    storage encoding of the tag list (see ``slash.domain.shortcuts.tags``).
    """

    id: int
    link: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    tag: Optional[str] = None
    visibility: Optional[Visibility] = None
    og_metadata: Optional[OpenGraphMetadata] = None

    @property
    def is_empty(self) -> bool:
        """Return True when the patch changes nothing."""
        return all(
            value is None
            for value in (
                self.link,
                self.title,
                self.description,
                self.tag,
                self.visibility,
                self.og_metadata,
            )
        )
