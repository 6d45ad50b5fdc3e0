"""
Use case: Create a shortcut owned by the caller.

Input: CreateShortcutCommand (caller_id, shortcut fields)
Output: ShortcutResult of the persisted record.
Side effects:
    - Persists the shortcut.
    - Records a ``shortcut.create`` activity.
Failure cases:
    - InvalidArgumentError for an unknown visibility.
    - ShortcutAlreadyExistsError if the name is taken.
    - InternalError on any other store failure.

Activity recording is best-effort: once the shortcut is persisted it is
returned even if the activity cannot be written, and the failure is logged.
"""

import logging

from slash.application.shortcuts.activity_recorder import ActivityRecorder
from slash.application.shortcuts.dtos import CreateShortcutCommand, ShortcutResult
from slash.application.shortcuts.mapper import (
    parse_visibility,
    to_og_metadata,
    to_shortcut_result,
)
from slash.domain.shortcuts.entities import OpenGraphMetadata, Shortcut
from slash.domain.shortcuts.errors import (
    ActivityRecordingError,
    InternalError,
    ShortcutAlreadyExistsError,
    StoreConflictError,
    StoreError,
)
from slash.domain.shortcuts.ports import ShortcutStore

logger = logging.getLogger(__name__)


class CreateShortcutUseCase:
    """Orchestrates shortcut creation and its audit trail."""

    def __init__(self, store: ShortcutStore, recorder: ActivityRecorder) -> None:
        """Initialize the use case.

        Args:
            store: Port for shortcut persistence.
            recorder: Writes the creation activity.
        """
        self._store = store
        self._recorder = recorder

    def execute(self, command: CreateShortcutCommand) -> ShortcutResult:
        """Run the create shortcut use case.

        Args:
            command: Caller identity and the new shortcut's fields.

        Returns:
            The persisted shortcut, including its store-assigned id
            and timestamps.
        """
        fields = command.shortcut
        og_metadata = OpenGraphMetadata()
        if fields.og_metadata is not None:
            og_metadata = to_og_metadata(fields.og_metadata)

        draft = Shortcut(
            creator_id=command.caller_id,
            name=fields.name,
            link=fields.link,
            title=fields.title,
            description=fields.description,
            tags=tuple(fields.tags),
            visibility=parse_visibility(fields.visibility),
            og_metadata=og_metadata,
        )

        logger.info(
            "Creating shortcut name=%s for user_id=%d", draft.name, draft.creator_id
        )
        try:
            shortcut = self._store.create_shortcut(draft)
        except StoreConflictError as exc:
            raise ShortcutAlreadyExistsError(draft.name) from exc
        except StoreError as exc:
            raise InternalError("create shortcut", str(exc)) from exc

        try:
            self._recorder.record_shortcut_create(shortcut)
        except ActivityRecordingError:
            logger.exception(
                "Shortcut id=%d was created but its activity was not recorded",
                shortcut.id,
            )

        return to_shortcut_result(shortcut)
