"""
FastAPI router for the shortcuts bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request, status

from slash.application.shortcuts.create_shortcut import CreateShortcutUseCase
from slash.application.shortcuts.delete_shortcut import DeleteShortcutUseCase
from slash.application.shortcuts.dtos import (
    CreateShortcutCommand,
    DeleteShortcutCommand,
    GetShortcutQuery,
    ListShortcutsQuery,
    OpenGraphMetadataData,
    ShortcutFields,
    ShortcutResult,
    UpdateShortcutCommand,
)
from slash.application.shortcuts.get_shortcut import GetShortcutUseCase
from slash.application.shortcuts.list_shortcuts import ListShortcutsUseCase
from slash.application.shortcuts.update_shortcut import UpdateShortcutUseCase
from slash.interfaces.shortcuts.dependencies import (
    get_create_shortcut_use_case,
    get_delete_shortcut_use_case,
    get_get_shortcut_use_case,
    get_list_shortcuts_use_case,
    get_update_shortcut_use_case,
)
from slash.interfaces.shortcuts.schemas import (
    CreateShortcutRequest,
    DeleteShortcutResponse,
    ErrorResponse,
    ListShortcutsResponse,
    OpenGraphMetadataSchema,
    ShortcutResponse,
    UpdateShortcutRequest,
)
from slash.shared.security.auth import get_caller_id
from slash.shared.security.rate_limiting import default_rate_limit, limiter

router = APIRouter(prefix="/shortcuts", tags=["shortcuts"])

NOT_FOUND_OR_DENIED = {
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


def _to_response(result: ShortcutResult) -> ShortcutResponse:
    return ShortcutResponse(
        id=result.id,
        creator_id=result.creator_id,
        created_ts=result.created_ts,
        updated_ts=result.updated_ts,
        row_status=result.row_status,
        name=result.name,
        link=result.link,
        title=result.title,
        tags=result.tags,
        description=result.description,
        visibility=result.visibility,
        og_metadata=OpenGraphMetadataSchema(
            title=result.og_metadata.title,
            description=result.og_metadata.description,
            image=result.og_metadata.image,
        ),
    )


def _og_metadata_data(og: OpenGraphMetadataSchema | None) -> OpenGraphMetadataData | None:
    if og is None:
        return None
    return OpenGraphMetadataData(title=og.title, description=og.description, image=og.image)


@router.get(
    "",
    response_model=ListShortcutsResponse,
    summary="List shortcuts",
    description="List the caller's private shortcuts followed by all workspace and public ones.",
)
@limiter.limit(default_rate_limit)
def list_shortcuts(
    request: Request,
    caller_id: int = Depends(get_caller_id),
    use_case: ListShortcutsUseCase = Depends(get_list_shortcuts_use_case),
) -> ListShortcutsResponse:
    """List the shortcuts visible to the caller."""
    results = use_case.execute(ListShortcutsQuery(caller_id=caller_id))
    return ListShortcutsResponse(shortcuts=[_to_response(r) for r in results])


@router.get(
    "/{name}",
    response_model=ShortcutResponse,
    responses=NOT_FOUND_OR_DENIED,
    summary="Get a shortcut",
)
@limiter.limit(default_rate_limit)
def get_shortcut(
    request: Request,
    name: str,
    caller_id: int = Depends(get_caller_id),
    use_case: GetShortcutUseCase = Depends(get_get_shortcut_use_case),
) -> ShortcutResponse:
    """Get one shortcut by name."""
    result = use_case.execute(GetShortcutQuery(caller_id=caller_id, name=name))
    return _to_response(result)


@router.post(
    "",
    response_model=ShortcutResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Create a shortcut",
)
@limiter.limit(default_rate_limit)
def create_shortcut(
    request: Request,
    body: CreateShortcutRequest,
    caller_id: int = Depends(get_caller_id),
    use_case: CreateShortcutUseCase = Depends(get_create_shortcut_use_case),
) -> ShortcutResponse:
    """Create a shortcut owned by the caller."""
    command = CreateShortcutCommand(
        caller_id=caller_id,
        shortcut=ShortcutFields(
            name=body.name,
            link=body.link,
            title=body.title,
            description=body.description,
            tags=body.tags,
            visibility=body.visibility.value,
            og_metadata=_og_metadata_data(body.og_metadata),
        ),
    )
    return _to_response(use_case.execute(command))


@router.patch(
    "/{name}",
    response_model=ShortcutResponse,
    responses={400: {"model": ErrorResponse}, **NOT_FOUND_OR_DENIED},
    summary="Update a shortcut",
    description="Apply the fields named in update_mask. Unknown paths are ignored.",
)
@limiter.limit(default_rate_limit)
def update_shortcut(
    request: Request,
    name: str,
    body: UpdateShortcutRequest,
    caller_id: int = Depends(get_caller_id),
    use_case: UpdateShortcutUseCase = Depends(get_update_shortcut_use_case),
) -> ShortcutResponse:
    """Partially update a shortcut owned by the caller (or any, for admins)."""
    command = UpdateShortcutCommand(
        caller_id=caller_id,
        shortcut=ShortcutFields(
            name=name,
            link=body.link,
            title=body.title,
            description=body.description,
            tags=body.tags,
            visibility=body.visibility.value if body.visibility is not None else None,
            og_metadata=_og_metadata_data(body.og_metadata),
        ),
        update_mask=body.update_mask,
    )
    return _to_response(use_case.execute(command))


@router.delete(
    "/{name}",
    response_model=DeleteShortcutResponse,
    responses=NOT_FOUND_OR_DENIED,
    summary="Delete a shortcut",
)
@limiter.limit(default_rate_limit)
def delete_shortcut(
    request: Request,
    name: str,
    caller_id: int = Depends(get_caller_id),
    use_case: DeleteShortcutUseCase = Depends(get_delete_shortcut_use_case),
) -> DeleteShortcutResponse:
    """Delete a shortcut owned by the caller (or any, for admins)."""
    use_case.execute(DeleteShortcutCommand(caller_id=caller_id, name=name))
    return DeleteShortcutResponse()
