"""
Pydantic schemas for shortcut API request/response validation.

These schemas enforce input validation and define the API contract.
No business logic belongs here.
"""

from enum import Enum

from pydantic import BaseModel, Field

NAME_DESCRIPTION = "Unique shortcut name used for lookup"
NAME_PATTERN = r"^[^\s/]+$"
NAME_MAX_LEN = 256
TITLE_MAX_LEN = 256


class VisibilitySchema(str, Enum):
    """Who can see a shortcut."""

    PRIVATE = "PRIVATE"
    WORKSPACE = "WORKSPACE"
    PUBLIC = "PUBLIC"


class RowStatusSchema(str, Enum):
    """Lifecycle state of a shortcut."""

    NORMAL = "NORMAL"
    ARCHIVED = "ARCHIVED"


class OpenGraphMetadataSchema(BaseModel):
    """Link preview metadata."""

    title: str = ""
    description: str = ""
    image: str = ""


class ShortcutResponse(BaseModel):
    """A shortcut as returned by every endpoint."""

    id: int
    creator_id: int
    created_ts: int
    updated_ts: int
    row_status: RowStatusSchema
    name: str
    link: str
    title: str
    tags: list[str]
    description: str
    visibility: VisibilitySchema
    og_metadata: OpenGraphMetadataSchema


class ListShortcutsResponse(BaseModel):
    """Response schema for the list endpoint."""

    shortcuts: list[ShortcutResponse]


class CreateShortcutRequest(BaseModel):
    """Request schema for creating a shortcut.

    Attributes:
        name: Unique key, no whitespace or slashes.
        link: Target URL.
        title: Display title.
        tags: Tag list; each tag is stored space-separated.
        description: Free-form description.
        visibility: Access scope, PRIVATE by default.
        og_metadata: Optional preview metadata.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=NAME_MAX_LEN,
        pattern=NAME_PATTERN,
        description=NAME_DESCRIPTION,
    )
    link: str = Field(..., min_length=1, description="Target URL")
    title: str = Field(default="", max_length=TITLE_MAX_LEN)
    tags: list[str] = Field(default_factory=list)
    description: str = ""
    visibility: VisibilitySchema = VisibilitySchema.PRIVATE
    og_metadata: OpenGraphMetadataSchema | None = None


class UpdateShortcutRequest(BaseModel):
    """Request schema for a partial update.

    Only the fields named in ``update_mask`` are applied. Recognized
    paths: link, title, tags, description, visibility, og_metadata.
    A masked ``visibility`` or ``og_metadata`` left out of the body
    leaves the stored value unchanged.
    """

    link: str = ""
    title: str = Field(default="", max_length=TITLE_MAX_LEN)
    tags: list[str] = Field(default_factory=list)
    description: str = ""
    visibility: VisibilitySchema | None = None
    og_metadata: OpenGraphMetadataSchema | None = None
    update_mask: list[str] = Field(
        default_factory=list, description="Field paths to update"
    )


class DeleteShortcutResponse(BaseModel):
    """Empty response for a successful delete."""


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
